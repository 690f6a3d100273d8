"""Document routes - catalog, validation and generation.

Endpoints:
  GET  /documents                          - Document grid with metadata
  GET  /documents/{document_type}          - Metadata for one document type
  GET  /documents/{document_type}/form     - Wizard fields and clause options
  POST /documents/{document_type}/validate - Validate answers (errors + warnings)
  POST /documents/{document_type}/fields/check - Field-level check while typing
  POST /documents/{document_type}/generate - Validate, then render the document
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ..constants import DOCUMENT_TYPES
from ..schemas.document_schema import (
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
from ..template_engine import (
    DocumentMetadata,
    TemplateNotFoundError,
    ValidationResult,
    check_field,
    get_document_metadata,
    get_template,
    render_document,
    validate_document,
)
from ..template_engine.catalog import get_clause_options, get_form_fields, is_required_field

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/documents",
    tags=["Documents"],
)


# ── Helpers ──────────────────────────────────────────────────────────────

def _require_template(document_type: str) -> None:
    """404 unless ``document_type`` has a registered template."""
    if get_template(document_type) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown document type '{document_type}'",
        )


# ── Routes ───────────────────────────────────────────────────────────────

@router.get(
    "",
    response_model=DocumentCatalogResponse,
    summary="List document types",
    response_description="All supported document types with template metadata",
)
def list_documents() -> DocumentCatalogResponse:
    return DocumentCatalogResponse(
        documents=[
            DocumentTypeSummary(**entry, metadata=get_document_metadata(entry["id"]))
            for entry in DOCUMENT_TYPES
        ]
    )


@router.get(
    "/{document_type}",
    response_model=DocumentMetadata,
    summary="Get document metadata",
)
def get_metadata(document_type: str) -> DocumentMetadata:
    metadata = get_document_metadata(document_type)
    if metadata is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown document type '{document_type}'",
        )
    return metadata


@router.get(
    "/{document_type}/form",
    response_model=DocumentFormResponse,
    summary="Get wizard form definition",
)
def get_form(document_type: str) -> DocumentFormResponse:
    """Fields to ask for and clauses to offer for one document type."""
    _require_template(document_type)
    return DocumentFormResponse(
        document_type=document_type,
        fields=[FormField(**field) for field in get_form_fields(document_type)],
        clauses=[ClauseOption(**clause) for clause in get_clause_options(document_type)],
    )


@router.post(
    "/{document_type}/validate",
    response_model=ValidationResult,
    summary="Validate answers",
)
def validate(document_type: str, body: ValidateDocumentRequest) -> ValidationResult:
    """Errors block generation; warnings are informational only."""
    _require_template(document_type)
    return validate_document(document_type, body.form_data)


@router.post(
    "/{document_type}/fields/check",
    response_model=FieldCheckResponse,
    summary="Check a single field",
)
def check_single_field(document_type: str, body: FieldCheckRequest) -> FieldCheckResponse:
    """Field-level check used while the user types; stricter than validate."""
    _require_template(document_type)
    error = check_field(
        body.name,
        body.value,
        required=is_required_field(document_type, body.name),
    )
    return FieldCheckResponse(name=body.name, valid=error is None, error=error)


@router.post(
    "/{document_type}/generate",
    response_model=GeneratedDocumentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Generate Document",
    response_description="Rendered HTML document with its id",
)
def generate(document_type: str, body: GenerateDocumentRequest) -> GeneratedDocumentResponse:
    """Validate the answers, then render the document.

    Rules:
    - Unknown document type -> 404.
    - Any validation error -> 422 with the full error list.
    - Warnings are returned alongside the document.
    """
    _require_template(document_type)

    validation = validate_document(document_type, body.form_data)
    if not validation.is_valid:
        raise HTTPException(
            status_code=422,
            detail={"errors": validation.errors, "warnings": validation.warnings},
        )

    try:
        document = render_document(document_type, body.form_data, body.customizations)
    except TemplateNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc

    logger.info("[LEGAL] Generated %s (%s)", document.document_id, document_type)
    return GeneratedDocumentResponse(
        document_id=document.document_id,
        document_type=document.document_type,
        title=document.title,
        generated_at=document.generated_at,
        html=document.html,
        warnings=validation.warnings,
    )
