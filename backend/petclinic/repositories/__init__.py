# Repositories package init
"""
Data-access layer between services and the database.

Inventory:
    - OwnerRepository / VisitRepository (abstract): what OwnerService needs
    - SqlAlchemyOwnerRepository / SqlAlchemyVisitRepository: AsyncSession-backed
"""

from petclinic.repositories.base import OwnerRepository, VisitRepository
from petclinic.repositories.owner_repository import SqlAlchemyOwnerRepository
from petclinic.repositories.visit_repository import SqlAlchemyVisitRepository

__all__ = [
    "OwnerRepository",
    "VisitRepository",
    "SqlAlchemyOwnerRepository",
    "SqlAlchemyVisitRepository",
]
