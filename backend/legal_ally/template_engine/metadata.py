"""Display-only facts about a template. No validation is performed."""

from __future__ import annotations

from typing import Optional

from ..constants import (
    COMPLEXITY_LEVELS,
    DEFAULT_COMPLEXITY,
    DEFAULT_ESTIMATED_LENGTH,
    ESTIMATED_LENGTHS,
)
from .registry import get_template
from .schema import DocumentMetadata


def estimate_document_length(document_type: str) -> str:
    return ESTIMATED_LENGTHS.get(document_type, DEFAULT_ESTIMATED_LENGTH)


def get_complexity_level(document_type: str) -> str:
    return COMPLEXITY_LEVELS.get(document_type, DEFAULT_COMPLEXITY)


def get_document_metadata(document_type: str) -> Optional[DocumentMetadata]:
    """Metadata for ``document_type``, or None if no template is registered."""
    template = get_template(document_type)
    if template is None:
        return None

    return DocumentMetadata(
        title=template.title,
        sections=len(template.sections),
        custom_clauses=len(template.custom_clauses),
        estimated_length=estimate_document_length(document_type),
        complexity=get_complexity_level(document_type),
    )
