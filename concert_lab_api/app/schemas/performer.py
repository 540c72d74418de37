"""Pydantic models for performers (artists or bands that play at concerts)."""

from typing import Optional

from pydantic import BaseModel, Field


class PerformerBase(BaseModel):
    name: str = Field(..., examples=["Ariana Grande"])
    image_uri: Optional[str] = Field(None, examples=["ari.jpg"])


class PerformerCreate(PerformerBase):
    pass


class PerformerRead(PerformerBase):
    id: int
    model_config = {
        "from_attributes": True,
    }


class PerformerUpdate(BaseModel):
    """All fields optional; only provided fields are updated."""
    name: str | None = None
    image_uri: str | None = None
