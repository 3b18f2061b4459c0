"""
PetClinic Backend - Pydantic Form and View Schemas
==================================================

What:  Pydantic models for the owner form (input) and the owner detail page
       (output).
How:   OwnerForm validates a bound payload; the *Details models are built
       by OwnerService and handed to the templates.

Schemas are separate from the SQLAlchemy models: the form never carries an
`id`, and the detail view carries visits that the ORM Pet does not map.
"""

import re
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

TELEPHONE_PATTERN = re.compile(r"[0-9]{1,10}")
TELEPHONE_BOUNDS_MESSAGE = "numeric value out of bounds (<10 digits>.<0 digits> expected)"


# ══════════════════════════════════════════════════════════════════════════
# Form Models - What staff submit
# ══════════════════════════════════════════════════════════════════════════


class OwnerForm(BaseModel):
    """
    Validated contact details of an owner, as submitted by the create/edit form.

    There is no `id` field: identity comes from the database on creation and
    from the URL on update, never from the payload.
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    first_name: str = Field(min_length=1, max_length=30)
    last_name: str = Field(min_length=1, max_length=30)
    address: str = Field(min_length=1, max_length=255)
    city: str = Field(min_length=1, max_length=80)
    telephone: str = Field(min_length=1)

    @field_validator("telephone")
    @classmethod
    def validate_telephone(cls, v: str) -> str:
        """Up to 10 digits, nothing else."""
        if not TELEPHONE_PATTERN.fullmatch(v):
            raise ValueError(TELEPHONE_BOUNDS_MESSAGE)
        return v


# ══════════════════════════════════════════════════════════════════════════
# View Models - What the owner detail page renders
# ══════════════════════════════════════════════════════════════════════════


class VisitResponse(BaseModel):
    id: Optional[int] = None
    visit_date: Optional[date] = None
    description: Optional[str] = None

    model_config = {"from_attributes": True}


class PetDetails(BaseModel):
    """A pet with exactly its own visit history attached."""

    id: Optional[int] = None
    name: str
    birth_date: Optional[date] = None
    type: Optional[str] = Field(default=None, description="Pet type name, e.g. 'cat'")
    visits: List[VisitResponse] = Field(default_factory=list)


class OwnerDetails(BaseModel):
    """Fully populated owner graph for the detail page."""

    id: int
    first_name: str
    last_name: str
    address: str
    city: str
    telephone: str
    pets: List[PetDetails] = Field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
