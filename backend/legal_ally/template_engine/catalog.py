"""Wizard-facing catalog: form fields and clause options per document type.

Field names here are the keys the section renderers and validator read.
"""

from __future__ import annotations

from typing import Dict, List

from ..constants import (
    BUSINESS_CONTRACT,
    EMPLOYMENT_CONTRACT,
    LLC_FORMATION,
    NDA,
    RENTAL_AGREEMENT,
    WILL_TRUST,
)
from .registry import get_template

COMMON_FIELDS: List[dict] = [
    {
        "name": "fullName",
        "label": "Full Legal Name",
        "type": "text",
        "required": True,
        "placeholder": "Enter your full legal name",
        "help": "Enter your name exactly as it appears on legal documents",
    },
    {
        "name": "email",
        "label": "Email Address",
        "type": "email",
        "required": True,
        "placeholder": "your@email.com",
        "help": "We'll use this for document delivery and updates",
    },
    {
        "name": "phone",
        "label": "Phone Number",
        "type": "tel",
        "required": False,
        "placeholder": "(555) 123-4567",
        "help": "Optional but recommended for urgent communications",
    },
]


def _options(*pairs: tuple) -> List[dict]:
    return [{"value": value, "label": label} for value, label in pairs]


SPECIFIC_FIELDS: Dict[str, List[dict]] = {
    BUSINESS_CONTRACT: [
        {
            "name": "companyName",
            "label": "Company Name",
            "type": "text",
            "required": True,
            "help": "Legal name of your business entity",
        },
        {
            "name": "contractType",
            "label": "Contract Type",
            "type": "select",
            "required": True,
            "options": _options(
                ("service", "Service Agreement"),
                ("supply", "Supply Agreement"),
                ("partnership", "Partnership Agreement"),
                ("consulting", "Consulting Agreement"),
                ("maintenance", "Maintenance Agreement"),
            ),
            "help": "Select the type that best describes your business relationship",
        },
        {
            "name": "contractValue",
            "label": "Contract Value",
            "type": "text",
            "required": True,
            "placeholder": "$10,000.00",
            "help": "Total value of the contract (use format: $X,XXX.XX)",
        },
        {
            "name": "duration",
            "label": "Contract Duration",
            "type": "text",
            "required": True,
            "placeholder": "12 months",
            "help": "How long will this contract be in effect?",
        },
        {
            "name": "serviceDescription",
            "label": "Service Description",
            "type": "textarea",
            "required": True,
            "placeholder": "Describe the services to be provided...",
            "help": "Detailed description of services, deliverables, or products",
        },
    ],
    RENTAL_AGREEMENT: [
        {
            "name": "propertyAddress",
            "label": "Property Address",
            "type": "textarea",
            "required": True,
            "placeholder": "123 Main Street\nAnytown, ST 12345",
            "help": "Complete address including unit number if applicable",
        },
        {
            "name": "rentAmount",
            "label": "Monthly Rent",
            "type": "text",
            "required": True,
            "placeholder": "$1,500.00",
            "help": "Monthly rent amount (format: $X,XXX.XX)",
        },
        {
            "name": "securityDeposit",
            "label": "Security Deposit",
            "type": "text",
            "required": True,
            "placeholder": "$1,500.00",
            "help": "Security deposit amount (typically equal to one month's rent)",
        },
        {
            "name": "leaseStart",
            "label": "Lease Start Date",
            "type": "date",
            "required": True,
            "help": "When does the lease period begin?",
        },
        {
            "name": "leaseTerm",
            "label": "Lease Term",
            "type": "select",
            "required": True,
            "options": _options(
                ("6", "6 months"),
                ("12", "12 months"),
                ("18", "18 months"),
                ("24", "24 months"),
            ),
            "help": "Length of the lease agreement",
        },
        {
            "name": "landlordName",
            "label": "Landlord Name",
            "type": "text",
            "required": True,
            "placeholder": "Property owner or management company",
            "help": "Legal name of the property owner or authorized agent",
        },
    ],
    NDA: [
        {
            "name": "disclosingParty",
            "label": "Disclosing Party",
            "type": "text",
            "required": True,
            "placeholder": "Company or individual sharing information",
            "help": "Party that will be sharing confidential information",
        },
        {
            "name": "receivingParty",
            "label": "Receiving Party",
            "type": "text",
            "required": True,
            "placeholder": "Company or individual receiving information",
            "help": "Party that will receive confidential information",
        },
        {
            "name": "ndaType",
            "label": "NDA Type",
            "type": "select",
            "required": True,
            "options": _options(
                ("mutual", "Mutual NDA (both parties share information)"),
                ("unilateral", "Unilateral NDA (one party shares information)"),
            ),
            "help": "Choose based on whether one or both parties will share confidential information",
        },
        {
            "name": "duration",
            "label": "Duration",
            "type": "select",
            "required": True,
            "options": _options(
                ("1 year", "1 year"),
                ("2 years", "2 years"),
                ("3 years", "3 years"),
                ("5 years", "5 years"),
                ("an indefinite period", "Indefinite (until information becomes public)"),
            ),
            "help": "How long should the confidentiality obligations last?",
        },
    ],
    WILL_TRUST: [
        {"name": "address", "label": "Home Address", "type": "textarea", "required": False},
        {"name": "executorName", "label": "Executor Name", "type": "text", "required": False},
        {"name": "alternateExecutor", "label": "Alternate Executor", "type": "text", "required": False},
        {
            "name": "beneficiaries",
            "label": "Beneficiaries",
            "type": "textarea",
            "required": False,
            "help": "Who receives your property, and in what shares",
        },
        {"name": "guardianName", "label": "Guardian for Minor Children", "type": "text", "required": False},
    ],
    LLC_FORMATION: [
        {"name": "companyName", "label": "LLC Name", "type": "text", "required": False},
        {"name": "state", "label": "State of Formation", "type": "text", "required": False},
        {"name": "address", "label": "Member Address", "type": "textarea", "required": False},
        {
            "name": "initialContribution",
            "label": "Initial Contribution",
            "type": "text",
            "required": False,
            "placeholder": "$5,000.00",
        },
        {
            "name": "managementType",
            "label": "Management",
            "type": "select",
            "required": False,
            "options": _options(
                ("its members", "Member-managed"),
                ("one or more managers", "Manager-managed"),
            ),
        },
        {
            "name": "votingThreshold",
            "label": "Voting Threshold",
            "type": "select",
            "required": False,
            "options": _options(
                ("majority", "Majority"),
                ("two-thirds", "Two-thirds"),
                ("unanimous", "Unanimous"),
            ),
        },
    ],
    EMPLOYMENT_CONTRACT: [
        {"name": "companyName", "label": "Company Name", "type": "text", "required": False},
        {"name": "jobTitle", "label": "Job Title", "type": "text", "required": False},
        {"name": "supervisor", "label": "Supervisor Name", "type": "text", "required": False},
        {
            "name": "salary",
            "label": "Annual Salary",
            "type": "text",
            "required": False,
            "placeholder": "$75,000.00",
        },
        {"name": "benefits", "label": "Benefits", "type": "textarea", "required": False},
        {"name": "startDate", "label": "Start Date", "type": "date", "required": False},
    ],
}

CLAUSE_OPTIONS: Dict[str, List[dict]] = {
    BUSINESS_CONTRACT: [
        {
            "id": "termination",
            "title": "Early Termination Clause",
            "description": "Allows either party to terminate the contract with proper notice",
            "impact": "Provides flexibility but may reduce contract security",
        },
        {
            "id": "confidentiality",
            "title": "Confidentiality Provisions",
            "description": "Protects sensitive business information shared during the contract",
            "impact": "Essential for protecting trade secrets and proprietary information",
        },
        {
            "id": "dispute-resolution",
            "title": "Dispute Resolution",
            "description": "Specifies mediation and arbitration procedures for conflicts",
            "impact": "Can save time and money compared to court litigation",
        },
    ],
    RENTAL_AGREEMENT: [
        {
            "id": "pet-policy",
            "title": "Pet Policy",
            "description": "Includes provisions for pets on the property",
            "impact": "Clarifies pet rules and associated fees or deposits",
        },
        {
            "id": "maintenance",
            "title": "Maintenance Responsibilities",
            "description": "Clearly defines landlord and tenant maintenance duties",
            "impact": "Prevents disputes over repair responsibilities",
        },
        {
            "id": "utilities",
            "title": "Utility Arrangements",
            "description": "Specifies which utilities are included in rent",
            "impact": "Clarifies utility payment responsibilities",
        },
    ],
    NDA: [
        {
            "id": "return-clause",
            "title": "Information Return Clause",
            "description": "Requires return of confidential materials upon request",
            "impact": "Ensures confidential materials don't remain with receiving party",
        },
        {
            "id": "injunctive-relief",
            "title": "Injunctive Relief",
            "description": "Allows for immediate court action in case of breach",
            "impact": "Provides stronger enforcement mechanism for violations",
        },
    ],
}


def get_form_fields(document_type: str) -> List[dict]:
    """Common fields followed by the type's own fields."""
    return COMMON_FIELDS + SPECIFIC_FIELDS.get(document_type, [])


def get_clause_options(document_type: str) -> List[dict]:
    """Clause options the type's template can actually render."""
    template = get_template(document_type)
    if template is None:
        return []
    return [
        option
        for option in CLAUSE_OPTIONS.get(document_type, [])
        if option["id"] in template.custom_clauses
    ]


def is_required_field(document_type: str, name: str) -> bool:
    return any(
        field["name"] == name and field.get("required", False)
        for field in get_form_fields(document_type)
    )
