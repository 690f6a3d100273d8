"""Document renderer: template + answers + clause selections -> HTML.

The clock and the document-id factory are injected so callers (and tests)
can pin them. Apart from those two, rendering is pure and never fails on
missing data; the only error is an unknown document type.
"""

from __future__ import annotations

import logging
import secrets
from datetime import datetime
from typing import Any, Callable, List, Mapping, Optional

from ..constants import (
    DOCUMENT_ID_PREFIX,
    DOCUMENT_ID_SUFFIX_LENGTH,
    LEGAL_DISCLAIMER,
    PRODUCT_ATTRIBUTION,
    SUPPORT_CONTACT,
)
from .fields import FieldValues
from .registry import TemplateDefinition, TemplateNotFoundError, get_template
from .rules import SignatureLine, get_rules
from .schema import GeneratedDocument

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
IdFactory = Callable[[datetime], str]

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base36(number: int) -> str:
    if number < 0:
        raise ValueError("base36 encoding requires a non-negative integer")
    digits = []
    while True:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36[remainder])
        if number == 0:
            break
    return "".join(reversed(digits))


def new_document_id(now: datetime) -> str:
    """``LA-<base36 epoch millis>-<6 random base36 chars>``, upper-cased."""
    timestamp = to_base36(int(now.timestamp() * 1000))
    suffix = "".join(secrets.choice(_BASE36) for _ in range(DOCUMENT_ID_SUFFIX_LENGTH))
    return f"{DOCUMENT_ID_PREFIX}-{timestamp}-{suffix}".upper()


def format_date(moment: datetime) -> str:
    """US short date without zero padding, e.g. ``3/7/2026``."""
    return f"{moment.month}/{moment.day}/{moment.year}"


# ── HTML blocks ─────────────────────────────────────────────────────────

def _header(template: TemplateDefinition, generated_on: str, document_id: str) -> str:
    return (
        '<header class="document-header">\n'
        f'<h1 class="document-title">{template.title}</h1>\n'
        '<div class="document-meta">\n'
        f"<p><strong>Generated:</strong> {generated_on}</p>\n"
        f"<p><strong>Document ID:</strong> {document_id}</p>\n"
        "</div>\n"
        "</header>\n"
    )


def _section(number: int, title: str, body: str, css_class: str = "document-section") -> str:
    return (
        f'<section class="{css_class}">\n'
        f"<h2>{number}. {title}</h2>\n"
        f'<div class="section-content">\n{body}\n</div>\n'
        "</section>\n"
    )


def _signature_block(label: str) -> str:
    return (
        '<div class="signature-block">\n'
        '<div class="signature-line">\n'
        '<div class="signature-space">_________________________________</div>\n'
        f'<div class="signature-label">{label}</div>\n'
        '<div class="signature-date">Date: _________________</div>\n'
        "</div>\n"
        "</div>\n"
    )


def _signature_label(fields: FieldValues, line: SignatureLine) -> str:
    if line.field is None:
        return line.placeholder
    return fields.text(line.field, line.placeholder)


def _signatures(document_type: str, fields: FieldValues) -> str:
    blocks = [
        "<p>By signing below, all parties agree to the terms and conditions outlined in this document.</p>\n",
        _signature_block(fields.text("fullName", "[Your Name]")),
    ]
    for line in get_rules(document_type).signature_lines:
        blocks.append(_signature_block(_signature_label(fields, line)))
    return "".join(blocks)


def _footer() -> str:
    return (
        '<footer class="document-footer">\n'
        '<div class="legal-disclaimer">\n'
        "<h3>Legal Disclaimer</h3>\n"
        f"<p><strong>IMPORTANT:</strong> {LEGAL_DISCLAIMER}</p>\n"
        "</div>\n"
        '<div class="document-info">\n'
        f"<p>{PRODUCT_ATTRIBUTION}</p>\n"
        f"<p>For support, visit: {SUPPORT_CONTACT}</p>\n"
        "</div>\n"
        "</footer>\n"
    )


def selected_clauses(customizations: Optional[Mapping[str, bool]]) -> List[str]:
    """Clause ids whose flag is true, in the mapping's iteration order."""
    return [clause_id for clause_id, included in (customizations or {}).items() if included]


# ── Public API ──────────────────────────────────────────────────────────

def render_document(
    document_type: str,
    form_data: Optional[Mapping[str, Any]] = None,
    customizations: Optional[Mapping[str, bool]] = None,
    *,
    clock: Clock = datetime.now,
    id_factory: IdFactory = new_document_id,
) -> GeneratedDocument:
    """Render a complete document and return it with its id and timestamp.

    Parameters
    ----------
    document_type : str
        Registered template id, e.g. ``"nda"``.
    form_data : mapping or None
        Field name -> answer. Missing answers render as placeholders.
    customizations : mapping or None
        Clause id -> included flag. Ids the template does not know are skipped.
    clock : callable
        Returns the generation time.
    id_factory : callable
        Builds the document id from the generation time.

    Raises
    ------
    TemplateNotFoundError
        If ``document_type`` is not registered.
    """
    template = get_template(document_type)
    if template is None:
        logger.warning("[TEMPLATE] Unknown document type requested: %s", document_type)
        raise TemplateNotFoundError(document_type)

    generated_at = clock()
    generated_on = format_date(generated_at)
    document_id = id_factory(generated_at)
    fields = FieldValues(form_data, generated_on=generated_on)

    parts = [
        '<div class="generated-document">\n',
        _header(template, generated_on, document_id),
        '<main class="document-body">\n',
    ]
    for number, section in enumerate(template.sections, start=1):
        parts.append(_section(number, section.title, section.renderer(fields)))

    number = len(template.sections)
    chosen = selected_clauses(customizations)
    if chosen:
        number += 1
        fragments = [
            template.custom_clauses[clause_id]
            for clause_id in chosen
            if clause_id in template.custom_clauses
        ]
        skipped = len(chosen) - len(fragments)
        if skipped:
            logger.debug("[TEMPLATE] %s: skipped %d unknown clause id(s)", document_type, skipped)
        parts.append(_section(number, "Additional Provisions", "".join(fragments)))

    number += 1
    parts.append(
        _section(
            number,
            "Signatures",
            _signatures(document_type, fields),
            css_class="document-section signature-section",
        )
    )
    parts.append("</main>\n")
    parts.append(_footer())
    parts.append("</div>\n")

    logger.info(
        "[TEMPLATE] Rendered %s as %s (%d sections, %d clause(s) selected)",
        document_type,
        document_id,
        len(template.sections),
        len(chosen),
    )
    return GeneratedDocument(
        document_id=document_id,
        document_type=document_type,
        title=template.title,
        generated_at=generated_at,
        html="".join(parts),
    )


def generate_document(
    document_type: str,
    form_data: Optional[Mapping[str, Any]] = None,
    customizations: Optional[Mapping[str, bool]] = None,
    *,
    clock: Clock = datetime.now,
    id_factory: IdFactory = new_document_id,
) -> str:
    """Render a document and return only its HTML."""
    return render_document(
        document_type,
        form_data,
        customizations,
        clock=clock,
        id_factory=id_factory,
    ).html
