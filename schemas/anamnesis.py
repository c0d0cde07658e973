"""Anamnesis collection schemas."""

from typing import Optional

from pydantic import Field

from schemas.base import CamelModel, PartialUpdate, TrimmedText


class AnamnesisEntry(CamelModel):
    """Clinical history entry appended to a patient's anamnesis."""
    title: TrimmedText = Field(..., description="Entry title")
    description: TrimmedText = Field(..., description="Clinical notes")

    model_config = {
        "json_schema_extra": {
            "example": {
                "title": "Initial anamnesis",
                "description": "Lower back pain for 2 weeks, no radiation. Sedentary lifestyle and irregular sleep.",
            }
        }
    }


class AnamnesisEntryUpdate(PartialUpdate):
    """Partial update of an anamnesis entry."""
    title: Optional[TrimmedText] = Field(None, description="Entry title")
    description: Optional[TrimmedText] = Field(None, description="Clinical notes")
