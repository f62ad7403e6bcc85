"""
People service - gateway between the request handlers and the people table
"""

import logging
from typing import Optional

from database.connection import is_database_available
from models.person import Person, PersonFields
from services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)

PERSON_FIELDS = [
    "person_id",
    "name",
    "age",
    "gender",
    "mobile_number",
    "created_at",
    "updated_at",
]

PERSON_WRITABLE_FIELDS = ["name", "age", "gender", "mobile_number"]

# Newest first; seq breaks ties between records created in the same clock tick
NEWEST_FIRST = [
    {"field": "created_at", "dir": "desc"},
    {"field": "seq", "dir": "desc"},
]


class PeopleService(BaseService):
    """Service for person record operations"""

    def __init__(self):
        super().__init__(
            "people",
            "person_id",
            PERSON_FIELDS,
            PERSON_WRITABLE_FIELDS,
            sortable_fields=PERSON_FIELDS + ["seq"],
        )

    async def is_available(self) -> bool:
        """Fast pre-check that the store can serve queries"""
        return await is_database_available()

    async def list_all(self) -> ServiceResult:
        """All people, newest first"""
        return self._as_people(await self.read(order_by=NEWEST_FIRST))

    async def get_by_id(self, person_id: str) -> ServiceResult:
        return self._as_people(await super().get_by_id(person_id))

    async def insert(self, fields: PersonFields) -> ServiceResult:
        result = self._as_people(await self.create(fields.to_record()))
        if result.success:
            logger.info(f"Created person {result.data[0].id}")
        return result

    async def update_by_id(self, person_id: str, fields: PersonFields) -> ServiceResult:
        result = self._as_people(await self.update(person_id, fields.to_record()))
        if result.success:
            logger.info(f"Updated person {person_id}")
        return result

    async def delete_by_id(self, person_id: str) -> ServiceResult:
        """Delete a person, returning the deleted record"""
        result = self._as_people(await self.delete(person_id))
        if result.success:
            logger.info(f"Deleted person {person_id}")
        return result

    def _as_people(self, result: ServiceResult) -> ServiceResult:
        """Convert raw row dictionaries into Person models"""
        if result.success and result.data is not None:
            result.data = [Person(**row) for row in result.data]
        return result


# Global service instance
_people_service: Optional[PeopleService] = None

def get_people_service() -> PeopleService:
    """Get the global people service instance"""
    global _people_service
    if _people_service is None:
        _people_service = PeopleService()
    return _people_service
