"""
Pydantic models for parolee records.

A parolee is represented by a database assigned id, a name, a gender
and a date of birth.  Gender is stored in the database by its name
(``Male``/``Female``).
"""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


class ParoleeBase(BaseModel):
    last_name: str = Field(..., examples=["Larkin"])
    first_name: str = Field(..., examples=["Danny"])
    gender: Gender = Field(..., examples=["Male"])
    date_of_birth: Optional[date] = Field(None, examples=["1913-07-11"])


class ParoleeCreate(ParoleeBase):
    """Schema for creating a parolee."""
    pass


class ParoleeRead(ParoleeBase):
    """Schema for reading a parolee from the API."""

    id: int
    model_config = {
        "from_attributes": True,
    }


class ParoleeUpdate(BaseModel):
    """Schema for updating a parolee.

    All fields are optional; only provided fields will be updated.
    """
    last_name: str | None = None
    first_name: str | None = None
    gender: Gender | None = None
    date_of_birth: date | None = None
