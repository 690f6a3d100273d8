"""Pydantic output records of the template engine.

These are the contract between the engine and its callers (the API
routes and the wizard front end). Field names are part of that contract.
"""

from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ValidationResult(BaseModel):
    """Verdict on whether a set of answers is enough to generate a document."""

    is_valid: bool = Field(..., description="True when there are no errors")
    errors: List[str] = Field(
        default_factory=list,
        description="Blocking problems, in the order they were found",
    )
    warnings: List[str] = Field(
        default_factory=list,
        description="Informational recommendations; never block generation",
    )


class GeneratedDocument(BaseModel):
    """A rendered document. Created per generation request, never mutated."""

    model_config = ConfigDict(frozen=True)

    document_id: str = Field(..., description="LA-<base36 timestamp>-<6 chars>, upper-cased")
    document_type: str
    title: str
    generated_at: datetime
    html: str


class DocumentMetadata(BaseModel):
    """Descriptive, display-only facts about a template."""

    title: str
    sections: int = Field(..., ge=1, description="Number of declared sections")
    custom_clauses: int = Field(..., ge=0, description="Number of optional clauses")
    estimated_length: str
    complexity: str
