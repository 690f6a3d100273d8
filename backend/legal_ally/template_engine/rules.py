"""Per-document-type rules for validation and signature blocks.

One lookup table maps each document type to its required fields (with an
optional value check) and its counterparty signature lines. All rules are
deterministic.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Callable, Dict, Optional, Tuple

from ..constants import (
    BUSINESS_CONTRACT,
    EMPLOYMENT_CONTRACT,
    NDA,
    RENTAL_AGREEMENT,
)

# ── Value shapes ────────────────────────────────────────────────────────

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
CURRENCY_RE = re.compile(r"^\$?\d+(?:,\d+)*(?:\.\d{0,2})?$")
# Typing-time amounts must carry the dollar sign.
WIZARD_CURRENCY_RE = re.compile(r"^\$\d+(?:,\d+)*(?:\.\d{0,2})?$")
PHONE_RE = re.compile(r"^\(\d{3}\) \d{3}-\d{4}$")

# ISO date with an optional time and UTC offset. Matched here rather than
# with fromisoformat, whose accepted forms vary between Python versions.
ISO_DATE_RE = re.compile(
    r"^(\d{4})-(\d{1,2})-(\d{1,2})"
    r"(?:[T ]\d{1,2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:?\d{2})?)?$"
)

# Formats accepted besides ISO 8601.
_DATE_FORMATS = (
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%a %b %d %Y",
    "%A %B %d %Y",
    "%A, %B %d, %Y",
)


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_RE.match(value.strip()))


def is_valid_currency(value: str) -> bool:
    """``$1,000.00``, ``1000``, ``$25.5`` are valid; ``abc`` and ``$`` are not."""
    return bool(CURRENCY_RE.match(value.strip()))


def is_valid_wizard_currency(value: str) -> bool:
    """Field-level shape: ``$1,500`` is valid, ``1500`` is not."""
    return bool(WIZARD_CURRENCY_RE.match(value.strip()))


def is_valid_phone(value: str) -> bool:
    return bool(PHONE_RE.match(value.strip()))


def parse_date(value: str) -> Optional[date]:
    """Parse a calendar date, returning None if the string is not one."""
    text = value.strip()
    if not text:
        return None
    match = ISO_DATE_RE.match(text)
    if match:
        year, month, day = (int(part) for part in match.groups())
        try:
            return date(year, month, day)
        except ValueError:
            return None
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def is_valid_date(value: str) -> bool:
    return parse_date(value) is not None


# ── Per-type table ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class FieldRequirement:
    """A field that must be present and, if ``check`` is set, well-formed."""

    field: str
    message: str
    check: Optional[Callable[[str], bool]] = None


@dataclass(frozen=True)
class SignatureLine:
    """A counterparty signature line; ``field`` None means a fixed label."""

    field: Optional[str]
    placeholder: str


@dataclass(frozen=True)
class DocumentRules:
    requirements: Tuple[FieldRequirement, ...] = ()
    signature_lines: Tuple[SignatureLine, ...] = field(
        default_factory=lambda: DEFAULT_SIGNATURE_LINES
    )


DEFAULT_SIGNATURE_LINES: Tuple[SignatureLine, ...] = (SignatureLine(None, "[Other Party]"),)

COMMON_REQUIREMENTS: Tuple[FieldRequirement, ...] = (
    FieldRequirement(
        "fullName",
        "Full name is required and must be at least 2 characters",
        lambda value: len(value.strip()) >= 2,
    ),
    FieldRequirement("email", "Valid email address is required", is_valid_email),
)

PHONE_WARNING = "Phone number is recommended for contact purposes"

DOCUMENT_RULES: Dict[str, DocumentRules] = {
    BUSINESS_CONTRACT: DocumentRules(
        requirements=(
            FieldRequirement("companyName", "Company name is required for business contracts"),
            FieldRequirement("contractValue", "Valid contract value is required", is_valid_currency),
        ),
        signature_lines=(SignatureLine("companyName", "[Company Representative]"),),
    ),
    RENTAL_AGREEMENT: DocumentRules(
        requirements=(
            FieldRequirement("propertyAddress", "Property address is required"),
            FieldRequirement("rentAmount", "Valid rent amount is required", is_valid_currency),
            FieldRequirement("leaseStart", "Valid lease start date is required", is_valid_date),
        ),
        signature_lines=(SignatureLine("landlordName", "[Landlord Name]"),),
    ),
    NDA: DocumentRules(
        requirements=(
            FieldRequirement("disclosingParty", "Disclosing party name is required"),
            FieldRequirement("receivingParty", "Receiving party name is required"),
        ),
        signature_lines=(
            SignatureLine("disclosingParty", "[Disclosing Party]"),
            SignatureLine("receivingParty", "[Receiving Party]"),
        ),
    ),
    EMPLOYMENT_CONTRACT: DocumentRules(
        signature_lines=(SignatureLine("companyName", "[Company Name]"),),
    ),
}

DEFAULT_RULES = DocumentRules()


def get_rules(document_type: str) -> DocumentRules:
    """Rules for ``document_type``; unlisted types get no extra requirements."""
    return DOCUMENT_RULES.get(document_type, DEFAULT_RULES)
