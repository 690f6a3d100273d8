"""Section renderers for the built-in document templates.

Each renderer is a pure function ``FieldValues -> str`` returning an HTML
fragment. Missing answers fall back to a bracketed placeholder, or to the
template's standard wording where one exists (e.g. payment terms).
"""

from __future__ import annotations

from typing import Callable, Dict

from .fields import FieldValues

SectionRenderer = Callable[[FieldValues], str]


def _lines(*lines: str) -> str:
    return "\n".join(f"<p>{line}</p>" for line in lines)


# ── Business Service Agreement ──────────────────────────────────────────

def render_contract_parties(fields: FieldValues) -> str:
    """Opening recital naming client and provider."""
    return _lines(
        f'This Business Service Agreement ("Agreement") is entered into on '
        f"{fields.generated_on or '[Date]'} between {fields.text('fullName', '[Client Name]')} "
        f'("Client") and {fields.text("companyName", "[Service Provider]")} ("Provider").'
    )


def render_contract_services(fields: FieldValues) -> str:
    return _lines(
        "Provider agrees to provide the following services: "
        f"{fields.text('serviceDescription', '[Service Description]')}.",
        f"The contract type is: {fields.text('contractType', '[Contract Type]')}.",
    )


def render_contract_compensation(fields: FieldValues) -> str:
    return _lines(
        f"Client agrees to pay Provider {fields.text('contractValue', '[Amount]')} "
        "for the services described herein.",
        f"Payment terms: {fields.text('paymentTerms', 'Net 30 days')}.",
    )


def render_contract_term(fields: FieldValues) -> str:
    return _lines(
        f"This Agreement shall commence on {fields.text('startDate', '[Start Date]')} "
        f"and shall continue for {fields.text('duration', '[Duration]')} unless terminated "
        "earlier in accordance with the terms herein."
    )


# ── Residential Lease Agreement ─────────────────────────────────────────

def render_lease_property(fields: FieldValues) -> str:
    return _lines(
        "This Residential Lease Agreement is for the property located at: "
        f"{fields.text('propertyAddress', '[Property Address]')}."
    )


def render_lease_parties(fields: FieldValues) -> str:
    return _lines(
        f"Landlord: {fields.text('landlordName', '[Landlord Name]')}",
        f"Tenant: {fields.text('fullName', '[Tenant Name]')}",
        f"Email: {fields.text('email', '[Email Address]')}",
        f"Phone: {fields.text('phone', '[Phone Number]')}",
    )


def render_lease_terms(fields: FieldValues) -> str:
    return _lines(
        f"Lease Start Date: {fields.text('leaseStart', '[Start Date]')}",
        f"Lease Term: {fields.text('leaseTerm', '[Term]')} months",
        f"Monthly Rent: {fields.text('rentAmount', '[Rent Amount]')}",
        f"Security Deposit: {fields.text('securityDeposit', '[Security Deposit]')}",
    )


def render_lease_payment_terms(fields: FieldValues) -> str:
    return _lines(
        "Rent is due on the first day of each month. Late fees of $50 will be charged "
        "for payments received after the 5th of the month.",
        "Security deposit will be held in accordance with state law and returned within "
        "30 days of lease termination, less any deductions for damages.",
    )


# ── Non-Disclosure Agreement ────────────────────────────────────────────

def render_nda_parties(fields: FieldValues) -> str:
    return _lines(
        'This Non-Disclosure Agreement ("Agreement") is entered into between:',
        f"Disclosing Party: {fields.text('disclosingParty', '[Disclosing Party]')}",
        f"Receiving Party: {fields.text('receivingParty', '[Receiving Party]')}",
        f"Contact: {fields.text('fullName', '[Contact Name]')} ({fields.text('email', '[Email]')})",
    )


def render_nda_definition(fields: FieldValues) -> str:
    return _lines(
        '"Confidential Information" means any and all non-public, proprietary, or '
        "confidential information disclosed by the Disclosing Party to the Receiving Party, "
        "whether orally, in writing, or in any other form."
    )


def render_nda_obligations(fields: FieldValues) -> str:
    return (
        "<p>The Receiving Party agrees to:</p>\n"
        "<ol>\n"
        "<li>Hold all Confidential Information in strict confidence</li>\n"
        "<li>Not disclose Confidential Information to any third parties</li>\n"
        "<li>Use Confidential Information solely for the purpose of evaluating potential "
        "business relationships</li>\n"
        "<li>Take reasonable precautions to protect the confidentiality of the information</li>\n"
        "</ol>"
    )


def render_nda_term(fields: FieldValues) -> str:
    return _lines(
        f"This Agreement shall remain in effect for {fields.text('duration', '[Duration]')} "
        "from the date of execution, or until terminated by mutual written consent of both parties."
    )


# ── Last Will and Testament ─────────────────────────────────────────────

def render_will_declaration(fields: FieldValues) -> str:
    return _lines(
        f"I, {fields.text('fullName', '[Full Name]')}, of {fields.text('address', '[Address]')}, "
        "being of sound mind and disposing memory, do hereby make, publish, and declare this "
        "to be my Last Will and Testament, hereby revoking all former wills and codicils by me made."
    )


def render_will_executor(fields: FieldValues) -> str:
    executor = fields.text("executorName", "[Executor Name]")
    return _lines(
        f"I hereby nominate and appoint {executor} as the Executor of this Will.",
        f"If {executor} is unable or unwilling to serve, I nominate "
        f"{fields.text('alternateExecutor', '[Alternate Executor]')} as alternate Executor.",
    )


def render_will_beneficiaries(fields: FieldValues) -> str:
    return _lines(
        "I give, devise, and bequeath all of my property, both real and personal, "
        "to my beneficiaries as follows:",
        fields.text("beneficiaries", "[Beneficiary details to be specified based on user input]"),
    )


def render_will_guardian(fields: FieldValues) -> str:
    return _lines(
        "If I have minor children at the time of my death, I nominate "
        f"{fields.text('guardianName', '[Guardian Name]')} as guardian of the person and "
        "property of my minor children."
    )


# ── LLC Operating Agreement ─────────────────────────────────────────────

def render_llc_formation(fields: FieldValues) -> str:
    return _lines(
        "This Operating Agreement is entered into by the members of "
        f"{fields.text('companyName', '[LLC Name]')}, a Limited Liability Company formed "
        f"under the laws of {fields.text('state', '[State]')}."
    )


def render_llc_members(fields: FieldValues) -> str:
    return _lines(
        "The initial member(s) of the LLC are:",
        f"Name: {fields.text('fullName', '[Member Name]')}",
        f"Address: {fields.text('address', '[Address]')}",
        f"Email: {fields.text('email', '[Email]')}",
        f"Initial Contribution: {fields.text('initialContribution', '[Amount]')}",
    )


def render_llc_management(fields: FieldValues) -> str:
    return _lines(
        f"The LLC shall be managed by {fields.text('managementType', 'its members')}.",
        f"All major business decisions require {fields.text('votingThreshold', 'majority')} "
        "approval of the members.",
    )


def render_llc_distributions(fields: FieldValues) -> str:
    return _lines(
        "Distributions shall be made to members in proportion to their ownership interests, "
        "as determined by the members from time to time."
    )


# ── Employment Agreement ────────────────────────────────────────────────

def render_employment_parties(fields: FieldValues) -> str:
    return _lines(
        f"This Employment Agreement is between {fields.text('companyName', '[Company Name]')} "
        f'("Company") and {fields.text("fullName", "[Employee Name]")} ("Employee").'
    )


def render_employment_duties(fields: FieldValues) -> str:
    return _lines(
        f"Employee is hired as {fields.text('jobTitle', '[Job Title]')} and agrees to perform "
        "duties as assigned by the Company.",
        f"Employee will report to {fields.text('supervisor', '[Supervisor Name]')}.",
    )


def render_employment_compensation(fields: FieldValues) -> str:
    return _lines(
        f"Employee will receive an annual salary of {fields.text('salary', '[Salary Amount]')}, "
        "paid in accordance with Company's regular payroll schedule.",
        f"Employee is eligible for {fields.text('benefits', 'standard company benefits')}.",
    )


def render_employment_term(fields: FieldValues) -> str:
    return _lines(
        f"This agreement begins on {fields.text('startDate', '[Start Date]')} and continues "
        "until terminated by either party in accordance with the terms herein."
    )


# Keyed by section id; the registry refers to renderers through this table.
SECTION_RENDERERS: Dict[str, SectionRenderer] = {
    "contract.parties": render_contract_parties,
    "contract.services": render_contract_services,
    "contract.compensation": render_contract_compensation,
    "contract.term": render_contract_term,
    "lease.property": render_lease_property,
    "lease.parties": render_lease_parties,
    "lease.terms": render_lease_terms,
    "lease.payment_terms": render_lease_payment_terms,
    "nda.parties": render_nda_parties,
    "nda.definition": render_nda_definition,
    "nda.obligations": render_nda_obligations,
    "nda.term": render_nda_term,
    "will.declaration": render_will_declaration,
    "will.executor": render_will_executor,
    "will.beneficiaries": render_will_beneficiaries,
    "will.guardian": render_will_guardian,
    "llc.formation": render_llc_formation,
    "llc.members": render_llc_members,
    "llc.management": render_llc_management,
    "llc.distributions": render_llc_distributions,
    "employment.parties": render_employment_parties,
    "employment.duties": render_employment_duties,
    "employment.compensation": render_employment_compensation,
    "employment.term": render_employment_term,
}
