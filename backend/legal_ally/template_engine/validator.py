"""Document and field validation.

``validate_document`` is the generation-time check: errors block
generation, warnings never do. ``check_field`` is the stricter per-field
policy the wizard applies while the user types (e.g. the lease must start
in the future); the two are deliberately separate.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Mapping, Optional

from .fields import FieldValues
from .rules import (
    COMMON_REQUIREMENTS,
    PHONE_WARNING,
    get_rules,
    is_valid_email,
    is_valid_phone,
    is_valid_wizard_currency,
    parse_date,
)
from .schema import ValidationResult

logger = logging.getLogger(__name__)

CURRENCY_FIELDS = frozenset({"contractValue", "rentAmount", "securityDeposit"})


def validate_document(document_type: str, form_data: Optional[Mapping[str, Any]]) -> ValidationResult:
    """Check ``form_data`` against the common and per-type requirements.

    Never raises for bad data; every problem is reported in the result.
    Unknown document types only get the common checks.
    """
    fields = form_data if isinstance(form_data, FieldValues) else FieldValues(form_data)
    requirements = COMMON_REQUIREMENTS + get_rules(document_type).requirements

    errors = []
    for requirement in requirements:
        value = fields.provided(requirement.field)
        if value is None or (requirement.check is not None and not requirement.check(value)):
            errors.append(requirement.message)

    warnings = []
    if fields.provided("phone") is None:
        warnings.append(PHONE_WARNING)

    if errors:
        logger.info("[VALIDATE] %s: %d error(s)", document_type, len(errors))

    return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)


def check_field(
    name: str,
    value: Optional[str],
    *,
    required: bool = False,
    today: Optional[date] = None,
) -> Optional[str]:
    """Return the error message for a single field, or None if it is fine."""
    text = (value or "").strip()
    if not text:
        return "This field is required" if required else None

    if name == "email" and not is_valid_email(text):
        return "Please enter a valid email address"
    if name == "phone" and not is_valid_phone(text):
        return "Please enter a valid phone number"
    if name in CURRENCY_FIELDS and not is_valid_wizard_currency(text):
        return "Please enter a valid amount (e.g., $1,000.00)"
    if name == "leaseStart":
        parsed = parse_date(text)
        if parsed is None or parsed <= (today or date.today()):
            return "Please enter a valid date"
    return None
