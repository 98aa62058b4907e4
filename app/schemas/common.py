"""
Shared helpers for request/response schemas.
"""
from typing import Iterable, Optional
from pydantic import BaseModel, Field


def blank_to_none(value: Optional[str]) -> Optional[str]:
    """Treat empty strings from form inputs as missing values."""
    if isinstance(value, str) and value == "":
        return None
    return value


def reject_explicit_nulls(model: BaseModel, fields: Iterable[str]) -> None:
    """
    Raise if a required column was explicitly sent as null in a partial update.
    
    Omitted fields are fine (they mean "leave unchanged").
    """
    for name in fields:
        if name in model.model_fields_set and getattr(model, name) is None:
            raise ValueError(f"{name} cannot be null")


class DeleteResponse(BaseModel):
    """Result of a delete that reports whether a row actually existed."""
    deleted: bool = Field(..., description="True if a row was removed")
