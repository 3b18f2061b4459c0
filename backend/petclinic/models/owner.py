"""
PetClinic Backend - Owner SQLAlchemy Model
==========================================

What:  ORM model for the `owners` table: a clinic customer and their pets.
Who:   Loaded and saved by SqlAlchemyOwnerRepository; Alembic reads it for migrations.

Table Design:
    - id: integer identity, assigned by the database on first flush
    - contact columns: lengths mirror the owner form limits
    - last_name index: search results are ordered by last name

Lifecycle:
    1. Created from the "Add Owner" form (id unset until flush)
    2. Updated from the "Edit Owner" form (id always taken from the URL)
    3. Never deleted
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petclinic.database import Base

if TYPE_CHECKING:
    from petclinic.models.pet import Pet


class Owner(Base):
    __tablename__ = "owners"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    first_name: Mapped[str] = mapped_column(String(30), nullable=False)
    last_name: Mapped[str] = mapped_column(String(30), nullable=False)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(80), nullable=False)
    telephone: Mapped[str] = mapped_column(String(20), nullable=False)

    # selectin: pets are always rendered with their owner, and async sessions
    # cannot lazy-load on attribute access.
    pets: Mapped[List["Pet"]] = relationship(
        back_populates="owner",
        order_by="Pet.name",
        lazy="selectin",
    )

    __table_args__ = (
        Index("idx_owners_last_name", "last_name"),
    )

    def __repr__(self) -> str:
        return f"<Owner(id={self.id}, name='{self.first_name} {self.last_name}')>"
