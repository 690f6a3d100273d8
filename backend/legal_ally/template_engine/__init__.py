from .fields import FieldValues
from .registry import (
    TEMPLATES,
    Section,
    TemplateDefinition,
    TemplateNotFoundError,
    get_template,
    list_templates,
)
from .generator import generate_document, new_document_id, render_document
from .validator import check_field, validate_document
from .metadata import get_document_metadata
from .schema import DocumentMetadata, GeneratedDocument, ValidationResult

__all__ = [
    "FieldValues",
    "TEMPLATES",
    "Section",
    "TemplateDefinition",
    "TemplateNotFoundError",
    "get_template",
    "list_templates",
    "generate_document",
    "render_document",
    "new_document_id",
    "validate_document",
    "check_field",
    "get_document_metadata",
    "DocumentMetadata",
    "GeneratedDocument",
    "ValidationResult",
]
