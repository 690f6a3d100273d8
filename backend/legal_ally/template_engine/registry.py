"""Template registry: the fixed catalog of supported document kinds.

Built once at import time and exposed read-only. Lookups for unknown ids
return None; only the renderer turns that into TemplateNotFoundError.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from ..constants import (
    BUSINESS_CONTRACT,
    DOCUMENT_TYPE_IDS,
    EMPLOYMENT_CONTRACT,
    LLC_FORMATION,
    NDA,
    RENTAL_AGREEMENT,
    WILL_TRUST,
)
from .sections import SECTION_RENDERERS, SectionRenderer


class TemplateNotFoundError(ValueError):
    """Raised when a document type has no registered template."""

    def __init__(self, document_type: str) -> None:
        self.document_type = document_type
        super().__init__(f"Template not found for document type: {document_type}")


@dataclass(frozen=True)
class Section:
    """One numbered section of a document."""

    id: str
    title: str
    renderer: SectionRenderer


@dataclass(frozen=True)
class TemplateDefinition:
    """Blueprint for one document kind."""

    id: str
    title: str
    sections: Tuple[Section, ...]
    custom_clauses: Mapping[str, str]

    def __post_init__(self) -> None:
        if not self.sections:
            raise ValueError(f"Template '{self.id}' must declare at least one section")


def _clause(heading: str, body: str) -> str:
    return f"<h3>{heading}</h3>\n<p>{body}</p>\n"


def _template(template_id: str, title: str, sections: List[Tuple[str, str]], clauses: dict) -> TemplateDefinition:
    return TemplateDefinition(
        id=template_id,
        title=title,
        sections=tuple(
            Section(id=section_id, title=section_title, renderer=SECTION_RENDERERS[section_id])
            for section_id, section_title in sections
        ),
        custom_clauses=MappingProxyType(dict(clauses)),
    )


# ── Built-in templates ──────────────────────────────────────────────────

_TEMPLATES = [
    _template(
        BUSINESS_CONTRACT,
        "Business Service Agreement",
        [
            ("contract.parties", "Parties"),
            ("contract.services", "Services"),
            ("contract.compensation", "Compensation"),
            ("contract.term", "Term"),
        ],
        {
            "termination": _clause(
                "Early Termination",
                "Either party may terminate this Agreement with thirty (30) days written notice "
                "to the other party.",
            ),
            "confidentiality": _clause(
                "Confidentiality",
                "Both parties agree to maintain the confidentiality of any proprietary information "
                "shared during the course of this Agreement.",
            ),
            "dispute-resolution": _clause(
                "Dispute Resolution",
                "Any disputes arising under this Agreement shall be resolved through binding "
                "arbitration in accordance with the rules of the American Arbitration Association.",
            ),
        },
    ),
    _template(
        RENTAL_AGREEMENT,
        "Residential Lease Agreement",
        [
            ("lease.property", "Property"),
            ("lease.parties", "Parties"),
            ("lease.terms", "Lease Terms"),
            ("lease.payment_terms", "Payment Terms"),
        ],
        {
            "pet-policy": _clause(
                "Pet Policy",
                "Tenant may keep pets on the premises with prior written consent from Landlord. "
                "Additional pet deposit of $200 per pet is required.",
            ),
            "maintenance": _clause(
                "Maintenance Responsibilities",
                "Landlord is responsible for major repairs and maintenance. Tenant is responsible "
                "for routine maintenance and minor repairs under $100.",
            ),
            "utilities": _clause(
                "Utilities",
                "Tenant is responsible for all utilities including electricity, gas, water, sewer, "
                "trash, and internet services.",
            ),
        },
    ),
    _template(
        NDA,
        "Non-Disclosure Agreement",
        [
            ("nda.parties", "Parties"),
            ("nda.definition", "Definition of Confidential Information"),
            ("nda.obligations", "Obligations"),
            ("nda.term", "Term"),
        ],
        {
            "return-clause": _clause(
                "Return of Information",
                "Upon termination of this Agreement or upon request by the Disclosing Party, the "
                "Receiving Party shall promptly return or destroy all materials containing "
                "Confidential Information.",
            ),
            "injunctive-relief": _clause(
                "Injunctive Relief",
                "The Receiving Party acknowledges that any breach of this Agreement may cause "
                "irreparable harm to the Disclosing Party, and that monetary damages may be "
                "inadequate. Therefore, the Disclosing Party shall be entitled to seek injunctive "
                "relief without posting bond.",
            ),
        },
    ),
    _template(
        WILL_TRUST,
        "Last Will and Testament",
        [
            ("will.declaration", "Declaration"),
            ("will.executor", "Executor"),
            ("will.beneficiaries", "Beneficiaries"),
            ("will.guardian", "Guardian"),
        ],
        {},
    ),
    _template(
        LLC_FORMATION,
        "Limited Liability Company Operating Agreement",
        [
            ("llc.formation", "Formation"),
            ("llc.members", "Members"),
            ("llc.management", "Management"),
            ("llc.distributions", "Distributions"),
        ],
        {},
    ),
    _template(
        EMPLOYMENT_CONTRACT,
        "Employment Agreement",
        [
            ("employment.parties", "Parties"),
            ("employment.duties", "Position and Duties"),
            ("employment.compensation", "Compensation"),
            ("employment.term", "Term"),
        ],
        {},
    ),
]

TEMPLATES: Mapping[str, TemplateDefinition] = MappingProxyType(
    {template.id: template for template in _TEMPLATES}
)


def get_template(document_type: str) -> Optional[TemplateDefinition]:
    """Return the template for ``document_type``, or None if unknown."""
    return TEMPLATES.get(document_type)


def list_templates() -> List[str]:
    """Registered template ids in catalog order."""
    return [doc_id for doc_id in DOCUMENT_TYPE_IDS if doc_id in TEMPLATES]
