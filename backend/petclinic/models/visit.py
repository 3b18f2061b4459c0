"""
PetClinic Backend - Visit SQLAlchemy Model
==========================================

What:  ORM model for the `visits` table: one medical visit of one pet.
Who:   Read by SqlAlchemyVisitRepository. Never created or changed by the
       owner pages.

Query Pattern:
    SELECT ... FROM visits WHERE pet_id = :pet_id ORDER BY visit_date
    → idx_visits_pet_id
"""

from datetime import date
from typing import Optional

from sqlalchemy import Date, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from petclinic.database import Base


class Visit(Base):
    __tablename__ = "visits"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    pet_id: Mapped[int] = mapped_column(ForeignKey("pets.id"), nullable=False)
    visit_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    __table_args__ = (
        Index("idx_visits_pet_id", "pet_id"),
    )

    def __repr__(self) -> str:
        return f"<Visit(id={self.id}, pet_id={self.pet_id}, visit_date='{self.visit_date}')>"
