"""
Base service layer for single-table database operations
"""

import logging
import uuid
from typing import Dict, Any, List, Optional
from dataclasses import dataclass

from database.connection import get_db_pool

logger = logging.getLogger(__name__)

@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Any]] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[str] = None

    @property
    def not_found(self) -> bool:
        return self.error_type == "RESOURCE_NOT_FOUND"


class BaseService:
    """Base service that maps create/read/update/delete onto one table keyed by a UUID"""

    def __init__(
        self,
        table_name: str,
        id_field: str,
        fields: List[str],
        writable_fields: List[str],
        sortable_fields: Optional[List[str]] = None
    ):
        self.table_name = table_name
        self.id_field = id_field
        self.fields = fields
        self.writable_fields = writable_fields
        self.sortable_fields = sortable_fields or fields
        logger.info(f"BaseService initialized for table: {table_name}")

    async def create(self, data: Dict[str, Any]) -> ServiceResult:
        """
        Create a new record with a freshly generated primary key

        Args:
            data: Dictionary of field values to insert

        Returns:
            ServiceResult with created record data
        """
        try:
            columns = [self.id_field] + self._writable_columns(data)
            params = [uuid.uuid4()] + [data[column] for column in columns[1:]]
            placeholders = ", ".join(f"${i}" for i in range(1, len(columns) + 1))

            query = (
                f"INSERT INTO {self.table_name} ({', '.join(columns)}) "
                f"VALUES ({placeholders}) RETURNING {self._select_list()}"
            )
            row = await self._fetchrow(query, params)

            if not row:
                raise RuntimeError("Insert operation failed - no data returned")

            return ServiceResult(success=True, data=[dict(row)], count=1)

        except Exception as e:
            logger.error(f"Create operation failed for {self.table_name}: {e}", exc_info=True)
            return ServiceResult(
                success=False,
                error=str(e),
                error_type="EXECUTION_ERROR"
            )

    async def read(self, order_by: Optional[List[Dict[str, str]]] = None) -> ServiceResult:
        """
        Read all records

        Args:
            order_by: List of ordering specs [{"field": "created_at", "dir": "desc"}]

        Returns:
            ServiceResult with matched records
        """
        try:
            query = f"SELECT {self._select_list()} FROM {self.table_name}"
            if order_by:
                query += f" ORDER BY {self._build_order_by(order_by)}"

            pool = self._get_pool()
            async with pool.acquire() as conn:
                logger.debug(f"Executing READ query: {query}")
                rows = await conn.fetch(query)

            data = [dict(row) for row in rows]
            return ServiceResult(success=True, data=data, count=len(data))

        except Exception as e:
            logger.error(f"Read operation failed for {self.table_name}: {e}")
            return ServiceResult(
                success=False,
                error=str(e),
                error_type="EXECUTION_ERROR"
            )

    async def get_by_id(self, record_id: str) -> ServiceResult:
        """Get a single record by primary key"""
        key = self._parse_id(record_id)
        if key is None:
            return self._not_found(record_id)

        try:
            query = f"SELECT {self._select_list()} FROM {self.table_name} WHERE {self.id_field} = $1"
            row = await self._fetchrow(query, [key])

            if not row:
                return self._not_found(record_id)

            return ServiceResult(success=True, data=[dict(row)], count=1)

        except Exception as e:
            logger.error(f"Get by ID failed for {self.table_name}: {e}")
            return ServiceResult(
                success=False,
                error=str(e),
                error_type="EXECUTION_ERROR"
            )

    async def update(self, record_id: str, data: Dict[str, Any]) -> ServiceResult:
        """
        Update a record by primary key, refreshing updated_at

        Args:
            record_id: Primary key value of record to update
            data: Dictionary of field values to update

        Returns:
            ServiceResult with updated record data
        """
        key = self._parse_id(record_id)
        if key is None:
            return self._not_found(record_id)

        try:
            columns = self._writable_columns(data)
            assignments = [f"{column} = ${i}" for i, column in enumerate(columns, start=2)]
            assignments.append("updated_at = clock_timestamp()")

            query = (
                f"UPDATE {self.table_name} SET {', '.join(assignments)} "
                f"WHERE {self.id_field} = $1 RETURNING {self._select_list()}"
            )
            row = await self._fetchrow(query, [key] + [data[column] for column in columns])

            if not row:
                return self._not_found(record_id)

            return ServiceResult(success=True, data=[dict(row)], count=1)

        except Exception as e:
            logger.error(f"Update operation failed for {self.table_name}: {e}")
            return ServiceResult(
                success=False,
                error=str(e),
                error_type="EXECUTION_ERROR"
            )

    async def delete(self, record_id: str) -> ServiceResult:
        """
        Delete a record by primary key

        Args:
            record_id: Primary key value of record to delete

        Returns:
            ServiceResult carrying the deleted record
        """
        key = self._parse_id(record_id)
        if key is None:
            return self._not_found(record_id)

        try:
            query = (
                f"DELETE FROM {self.table_name} WHERE {self.id_field} = $1 "
                f"RETURNING {self._select_list()}"
            )
            row = await self._fetchrow(query, [key])

            if not row:
                return self._not_found(record_id)

            return ServiceResult(success=True, data=[dict(row)], count=1)

        except Exception as e:
            logger.error(f"Delete operation failed for {self.table_name}: {e}")
            return ServiceResult(
                success=False,
                error=str(e),
                error_type="EXECUTION_ERROR"
            )

    # Query helpers

    def _get_pool(self):
        db_pool = get_db_pool()
        if not db_pool:
            raise RuntimeError("Database pool not initialized")
        return db_pool

    async def _fetchrow(self, query: str, params: List[Any]):
        pool = self._get_pool()
        async with pool.acquire() as conn:
            logger.debug(f"Executing: {query}")
            return await conn.fetchrow(query, *params)

    def _select_list(self) -> str:
        return ", ".join(self.fields)

    def _writable_columns(self, data: Dict[str, Any]) -> List[str]:
        """Columns present in data, in declaration order; rejects unknown fields"""
        unknown = set(data) - set(self.writable_fields)
        if unknown:
            raise ValueError(f"Unknown or read-only fields for {self.table_name}: {sorted(unknown)}")
        return [column for column in self.writable_fields if column in data]

    def _build_order_by(self, order_by: List[Dict[str, str]]) -> str:
        clauses = []
        for spec in order_by:
            field = spec["field"]
            direction = spec.get("dir", "asc").upper()
            if field not in self.sortable_fields:
                raise ValueError(f"Cannot order {self.table_name} by {field}")
            if direction not in ("ASC", "DESC"):
                raise ValueError(f"Invalid sort direction: {direction}")
            clauses.append(f"{field} {direction}")
        return ", ".join(clauses)

    def _parse_id(self, record_id: str) -> Optional[uuid.UUID]:
        try:
            return uuid.UUID(str(record_id))
        except ValueError:
            return None

    def _not_found(self, record_id: str) -> ServiceResult:
        return ServiceResult(
            success=False,
            error=f"Record not found with ID: {record_id}",
            error_type="RESOURCE_NOT_FOUND"
        )
