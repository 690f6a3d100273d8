"""Pydantic schemas for the document API (requests and responses)."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..template_engine.schema import DocumentMetadata


# ── Catalog ─────────────────────────────────────────────────────────────

class DocumentTypeSummary(BaseModel):
    """One entry of the document grid, with its template metadata."""

    id: str
    title: str
    description: str
    category: str
    features: List[str] = []
    metadata: Optional[DocumentMetadata] = None


class DocumentCatalogResponse(BaseModel):
    """List wrapper for the document grid."""

    documents: List[DocumentTypeSummary] = Field(default_factory=list)


class FieldOption(BaseModel):
    value: str
    label: str


class FormField(BaseModel):
    """A single wizard input."""

    name: str
    label: str
    type: str = Field(..., description="text | email | tel | date | select | textarea")
    required: bool = False
    placeholder: Optional[str] = None
    help: Optional[str] = None
    options: List[FieldOption] = []


class ClauseOption(BaseModel):
    """An optional clause the user may include."""

    id: str
    title: str
    description: str
    impact: str


class DocumentFormResponse(BaseModel):
    document_type: str
    fields: List[FormField]
    clauses: List[ClauseOption]


# ── Validation / generation ─────────────────────────────────────────────

class ValidateDocumentRequest(BaseModel):
    """Answers to check before generation."""

    form_data: Dict[str, Any] = Field(
        default_factory=dict,
        description="Field name -> answer, e.g. {'fullName': 'Jane Doe'}",
    )


class GenerateDocumentRequest(BaseModel):
    """Answers plus clause selections for generation."""

    form_data: Dict[str, Any] = Field(
        default_factory=dict,
        description="Field name -> answer, e.g. {'fullName': 'Jane Doe'}",
    )
    customizations: Dict[str, bool] = Field(
        default_factory=dict,
        description="Clause id -> include flag; unknown ids are ignored",
    )


class GeneratedDocumentResponse(BaseModel):
    """A generated document as returned to the wizard."""

    document_id: str
    document_type: str
    title: str
    generated_at: datetime
    html: str
    warnings: List[str] = []


class FieldCheckRequest(BaseModel):
    name: str = Field(..., min_length=1)
    value: Optional[str] = None


class FieldCheckResponse(BaseModel):
    name: str
    valid: bool
    error: Optional[str] = None
