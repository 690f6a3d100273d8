# Schemas package
from .document_schema import (
    ClauseOption,
    DocumentCatalogResponse,
    DocumentFormResponse,
    DocumentTypeSummary,
    FieldCheckRequest,
    FieldCheckResponse,
    FormField,
    GenerateDocumentRequest,
    GeneratedDocumentResponse,
    ValidateDocumentRequest,
)

__all__ = [
    "ClauseOption",
    "DocumentCatalogResponse",
    "DocumentFormResponse",
    "DocumentTypeSummary",
    "FieldCheckRequest",
    "FieldCheckResponse",
    "FormField",
    "GenerateDocumentRequest",
    "GeneratedDocumentResponse",
    "ValidateDocumentRequest",
]
