"""Screening input: raw resume text or a structured resume object."""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field


class RawResumeInput(BaseModel):
    """Plain text from OCR, PDF extraction or a paste box."""
    kind: Literal["raw"] = "raw"
    text: str = ""

    model_config = {"frozen": True}


class StructuredResumeInput(BaseModel):
    """Pre-structured resume object; keys are probed by alternate names."""
    kind: Literal["structured"] = "structured"
    data: dict[str, Any] = {}

    model_config = {"frozen": True}


ResumeInput = Annotated[
    Union[RawResumeInput, StructuredResumeInput],
    Field(discriminator="kind"),
]
