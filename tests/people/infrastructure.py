"""
Testing infrastructure for the people test suite
In-memory gateway for route tests and a fake asyncpg pool for service tests
"""

import itertools
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from models.person import Person, PersonFields
from services.base_service import ServiceResult


def not_found(person_id: str) -> ServiceResult:
    return ServiceResult(
        success=False,
        error=f"Record not found with ID: {person_id}",
        error_type="RESOURCE_NOT_FOUND"
    )


class InMemoryPeopleService:
    """Stand-in for PeopleService keeping records in a dict"""

    def __init__(self):
        self.records: Dict[str, Person] = {}
        self.available = True
        self.fail_with: Optional[str] = None
        self._seq = itertools.count()
        self._order: Dict[str, int] = {}
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _tick(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    def _failure(self) -> Optional[ServiceResult]:
        if self.fail_with:
            return ServiceResult(success=False, error=self.fail_with, error_type="EXECUTION_ERROR")
        return None

    def _lookup(self, person_id: str) -> Optional[Person]:
        try:
            key = str(uuid.UUID(person_id))
        except ValueError:
            return None
        return self.records.get(key)

    def seed(self, name: str, age: int = 30, gender: str = "Other", mobile_number: str = "555-0100") -> Person:
        now = self._tick()
        person = Person(
            person_id=uuid.uuid4(),
            name=name,
            age=age,
            gender=gender,
            mobile_number=mobile_number,
            created_at=now,
            updated_at=now,
        )
        self.records[person.id] = person
        self._order[person.id] = next(self._seq)
        return person

    async def is_available(self) -> bool:
        return self.available

    async def list_all(self) -> ServiceResult:
        failure = self._failure()
        if failure:
            return failure
        people = sorted(
            self.records.values(),
            key=lambda p: (p.created_at, self._order[p.id]),
            reverse=True
        )
        return ServiceResult(success=True, data=people, count=len(people))

    async def get_by_id(self, person_id: str) -> ServiceResult:
        failure = self._failure()
        if failure:
            return failure
        person = self._lookup(person_id)
        if person is None:
            return not_found(person_id)
        return ServiceResult(success=True, data=[person], count=1)

    async def insert(self, fields: PersonFields) -> ServiceResult:
        failure = self._failure()
        if failure:
            return failure
        person = self.seed(fields.name, fields.age, fields.gender.value, fields.mobile_number)
        return ServiceResult(success=True, data=[person], count=1)

    async def update_by_id(self, person_id: str, fields: PersonFields) -> ServiceResult:
        failure = self._failure()
        if failure:
            return failure
        person = self._lookup(person_id)
        if person is None:
            return not_found(person_id)
        updated = person.model_copy(update={**fields.model_dump(), "updated_at": self._tick()})
        self.records[person.id] = updated
        return ServiceResult(success=True, data=[updated], count=1)

    async def delete_by_id(self, person_id: str) -> ServiceResult:
        failure = self._failure()
        if failure:
            return failure
        person = self._lookup(person_id)
        if person is None:
            return not_found(person_id)
        del self.records[person.id]
        return ServiceResult(success=True, data=[person], count=1)


class FakeConnection:
    """Records queries and answers them from a canned row"""

    def __init__(self, pool: "FakePool"):
        self.pool = pool

    async def fetch(self, query: str, *params) -> List[Dict[str, Any]]:
        self.pool.queries.append((query, list(params)))
        if self.pool.error:
            raise self.pool.error
        return self.pool.rows

    async def fetchrow(self, query: str, *params) -> Optional[Dict[str, Any]]:
        self.pool.queries.append((query, list(params)))
        if self.pool.error:
            raise self.pool.error
        return self.pool.rows[0] if self.pool.rows else None


class _Acquire:
    def __init__(self, pool: "FakePool"):
        self.pool = pool

    async def __aenter__(self) -> FakeConnection:
        return FakeConnection(self.pool)

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakePool:
    """Minimal asyncpg pool double"""

    def __init__(self, rows: Optional[List[Dict[str, Any]]] = None, error: Optional[Exception] = None):
        self.rows = rows or []
        self.error = error
        self.queries: List[tuple] = []

    def acquire(self, timeout: Optional[float] = None) -> _Acquire:
        return _Acquire(self)


def person_row(name: str = "Ada Lovelace", **overrides) -> Dict[str, Any]:
    now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    row = {
        "person_id": uuid.uuid4(),
        "name": name,
        "age": 36,
        "gender": "Female",
        "mobile_number": "555-0199",
        "created_at": now,
        "updated_at": now,
    }
    row.update(overrides)
    return row
