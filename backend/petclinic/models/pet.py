"""
PetClinic Backend - Pet and PetType SQLAlchemy Models
=====================================================

What:  ORM models for the `pets` and `types` tables.

Pet visits are deliberately NOT a relationship here: visit history is fetched
through VisitRepository only when an owner's detail page is rendered.
"""

from datetime import date
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Date, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petclinic.database import Base

if TYPE_CHECKING:
    from petclinic.models.owner import Owner


class PetType(Base):
    """Kind of animal (cat, dog, ...). Seeded by the initial migration."""

    __tablename__ = "types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(80), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<PetType(id={self.id}, name='{self.name}')>"


class Pet(Base):
    """An animal belonging to exactly one Owner."""

    __tablename__ = "pets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(30), nullable=False)
    birth_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    type_id: Mapped[Optional[int]] = mapped_column(ForeignKey("types.id"), nullable=True)
    owner_id: Mapped[int] = mapped_column(ForeignKey("owners.id"), nullable=False)

    type: Mapped[Optional[PetType]] = relationship(lazy="joined")
    owner: Mapped["Owner"] = relationship(back_populates="pets")

    __table_args__ = (
        Index("idx_pets_owner_id", "owner_id"),
    )

    def __repr__(self) -> str:
        return f"<Pet(id={self.id}, name='{self.name}', owner_id={self.owner_id})>"
