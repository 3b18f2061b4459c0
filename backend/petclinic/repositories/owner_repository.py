"""
PetClinic Backend - SQLAlchemy Owner Repository
===============================================

What:  OwnerRepository backed by the per-request AsyncSession.
Who:   Built by the `get_owner_service` route dependency.

Query plans:
    find_by_id:          SELECT ... FROM owners WHERE id = :id  (+ selectin pets)
    find_by_first_name:  SELECT ... FROM owners WHERE first_name LIKE :prefix% ESCAPE '/'
                         ORDER BY last_name, first_name

save() only flushes; the commit happens in get_db_session when the request
finishes without error.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.exceptions import DatabaseError
from petclinic.models import Owner
from petclinic.repositories.base import OwnerRepository

logger = logging.getLogger(__name__)


class SqlAlchemyOwnerRepository(OwnerRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_by_id(self, owner_id: int) -> Optional[Owner]:
        try:
            result = await self._session.execute(
                select(Owner).where(Owner.id == owner_id)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching owner %s: %s", owner_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the owner. Please try again.",
                context={"owner_id": owner_id},
            )

    async def find_by_first_name(self, first_name: str) -> List[Owner]:
        # autoescape: a "%" or "_" typed into the search box is matched literally
        query = (
            select(Owner)
            .where(Owner.first_name.startswith(first_name, autoescape=True))
            .order_by(Owner.last_name, Owner.first_name)
        )
        try:
            result = await self._session.execute(query)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error searching owners: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not search owners. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def save(self, owner: Owner) -> Owner:
        try:
            if owner.id is None:
                self._session.add(owner)
            else:
                # merge copies only the attributes set on `owner`; an
                # untouched pets collection is left as it is in the database
                owner = await self._session.merge(owner)
            await self._session.flush()
        except SQLAlchemyError as e:
            logger.error("Database error saving owner %s: %s", owner.id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the owner. Please try again.",
                context={"owner_id": owner.id, "error_type": type(e).__name__},
            )
        logger.info("Owner %s saved", owner.id)
        return owner
