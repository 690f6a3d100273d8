"""Centralized constants shared by the template engine and the API routes.

Document type ids, display tables, and the fixed document footer text.
The front end mirrors the document type ids; do not rename them.
"""

from __future__ import annotations

# ── Document type ids ───────────────────────────────────────────────────
BUSINESS_CONTRACT = "business-contract"
RENTAL_AGREEMENT = "rental-agreement"
NDA = "nda"
WILL_TRUST = "will-trust"
LLC_FORMATION = "llc-formation"
EMPLOYMENT_CONTRACT = "employment-contract"

# Catalog order, as shown in the document grid.
DOCUMENT_TYPE_IDS: list[str] = [
    BUSINESS_CONTRACT,
    RENTAL_AGREEMENT,
    WILL_TRUST,
    LLC_FORMATION,
    NDA,
    EMPLOYMENT_CONTRACT,
]

# ── Document grid entries ───────────────────────────────────────────────
DOCUMENT_TYPES: list[dict] = [
    {
        "id": BUSINESS_CONTRACT,
        "title": "Business Contracts",
        "description": "Professional agreements for business relationships",
        "category": "business",
        "features": ["Customizable terms", "Legal compliance", "Multi-party support"],
    },
    {
        "id": RENTAL_AGREEMENT,
        "title": "Rental Agreements",
        "description": "Comprehensive lease agreements for properties",
        "category": "real-estate",
        "features": ["State-specific laws", "Tenant protections", "Maintenance clauses"],
    },
    {
        "id": WILL_TRUST,
        "title": "Wills & Trusts",
        "description": "Estate planning documents for asset protection",
        "category": "personal",
        "features": ["Asset distribution", "Guardian designation", "Tax optimization"],
    },
    {
        "id": LLC_FORMATION,
        "title": "LLC Formation",
        "description": "Complete business entity formation documents",
        "category": "business",
        "features": ["Operating agreements", "Member rights", "Tax elections"],
    },
    {
        "id": NDA,
        "title": "Non-Disclosure Agreements",
        "description": "Protect confidential information and trade secrets",
        "category": "business",
        "features": ["Mutual/Unilateral", "Time limitations", "Scope definitions"],
    },
    {
        "id": EMPLOYMENT_CONTRACT,
        "title": "Employment Contracts",
        "description": "Comprehensive employment agreements",
        "category": "business",
        "features": ["Compensation terms", "Benefits package", "Termination clauses"],
    },
]

# ── Metadata tables ─────────────────────────────────────────────────────
ESTIMATED_LENGTHS: dict[str, str] = {
    BUSINESS_CONTRACT: "2-3 pages",
    RENTAL_AGREEMENT: "3-4 pages",
    WILL_TRUST: "4-6 pages",
    LLC_FORMATION: "5-8 pages",
    NDA: "2-3 pages",
    EMPLOYMENT_CONTRACT: "3-5 pages",
}
DEFAULT_ESTIMATED_LENGTH: str = "2-4 pages"

COMPLEXITY_LEVELS: dict[str, str] = {
    NDA: "Simple",
    RENTAL_AGREEMENT: "Moderate",
    BUSINESS_CONTRACT: "Moderate",
    EMPLOYMENT_CONTRACT: "Moderate",
    WILL_TRUST: "Complex",
    LLC_FORMATION: "Complex",
}
DEFAULT_COMPLEXITY: str = "Moderate"

# ── Document id ─────────────────────────────────────────────────────────
DOCUMENT_ID_PREFIX: str = "LA"
DOCUMENT_ID_SUFFIX_LENGTH: int = 6

# ── Footer (identical for every document) ───────────────────────────────
PRODUCT_NAME: str = "Legal Ally"
SUPPORT_CONTACT: str = "support@legalally.com"
LEGAL_DISCLAIMER: str = (
    "This document is provided as a template and is not a substitute for legal advice. "
    "You should consult with a qualified attorney before using this document for any legal purpose. "
    f"{PRODUCT_NAME} makes no warranties regarding the legal sufficiency or enforceability of this document."
)
PRODUCT_ATTRIBUTION: str = f"Generated by {PRODUCT_NAME} - Professional Legal Document Automation"
