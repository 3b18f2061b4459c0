"""SQLAlchemy implementation of VisitRepository."""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.exceptions import DatabaseError
from petclinic.models import Visit
from petclinic.repositories.base import VisitRepository

logger = logging.getLogger(__name__)


class SqlAlchemyVisitRepository(VisitRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_by_pet_id(self, pet_id: int) -> List[Visit]:
        query = (
            select(Visit)
            .where(Visit.pet_id == pet_id)
            .order_by(Visit.visit_date, Visit.id)
        )
        try:
            result = await self._session.execute(query)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error fetching visits for pet %s: %s", pet_id, str(e))
            raise DatabaseError(
                message="Could not retrieve visit history. Please try again.",
                context={"pet_id": pet_id},
            )
