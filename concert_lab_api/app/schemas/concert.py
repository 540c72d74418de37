"""
Pydantic models for concert data.

``ConcertCreate`` is the request body for ``POST /concerts``;
``ConcertRead`` adds the identifier assigned by the store.  Concerts
are never modified after creation, so there is no update schema and
the read model is frozen.
"""

import datetime

from pydantic import BaseModel, Field


class ConcertBase(BaseModel):
    title: str = Field(..., examples=["Halcyon Days"])
    date: datetime.date = Field(..., examples=["2025-05-01"])


class ConcertCreate(ConcertBase):
    """Schema for creating a concert."""
    pass


class ConcertRead(ConcertBase):
    """Schema for reading a concert from the API."""

    id: int

    model_config = {
        "from_attributes": True,
        "frozen": True,
    }
