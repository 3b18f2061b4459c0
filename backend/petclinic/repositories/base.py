"""
PetClinic Backend - Repository Interfaces
=========================================

What:  Abstract data-access capabilities consumed by OwnerService.
How:   Concrete classes implement these against an AsyncSession
       (see owner_repository.py / visit_repository.py). Tests substitute
       AsyncMock objects with the same method names.

Contract:
    - Missing rows are returned as None (find_by_id) or [] (finders);
      turning them into NotFoundError is the service's job.
    - Unexpected storage failures surface as DatabaseError.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from petclinic.models import Owner, Visit


class OwnerRepository(ABC):
    """Owner lookup and persistence."""

    @abstractmethod
    async def find_by_id(self, owner_id: int) -> Optional[Owner]:
        """Return the owner with its pets loaded, or None."""
        ...

    @abstractmethod
    async def find_by_first_name(self, first_name: str) -> List[Owner]:
        """
        Return owners whose first name starts with `first_name`.

        The empty string matches every owner.
        """
        ...

    @abstractmethod
    async def save(self, owner: Owner) -> Owner:
        """
        Insert (id unset) or update (id set) an owner.

        Returns the persistent instance with its id assigned.
        """
        ...


class VisitRepository(ABC):
    """Read-only access to visit history."""

    @abstractmethod
    async def find_by_pet_id(self, pet_id: int) -> List[Visit]:
        """Return visits of one pet, oldest first."""
        ...
