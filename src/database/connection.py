"""
Database connection and pool management
"""

import asyncio
import asyncpg
import logging
from config.settings import (
    DATABASE_URL,
    DB_CONNECT_TIMEOUT,
    DB_PING_TIMEOUT,
    DB_POOL_MIN_SIZE,
    DB_POOL_MAX_SIZE,
)

logger = logging.getLogger(__name__)

# Errors that mean "the store cannot be reached right now"
CONNECTIVITY_ERRORS = (OSError, asyncio.TimeoutError, asyncpg.PostgresError, asyncpg.InterfaceError)

SCHEMA_STATEMENTS = [
    """
    CREATE TABLE IF NOT EXISTS people (
        person_id UUID PRIMARY KEY,
        name TEXT NOT NULL,
        age INTEGER NOT NULL CHECK (age >= 0),
        gender TEXT NOT NULL CHECK (gender IN ('Male', 'Female', 'Other')),
        mobile_number TEXT NOT NULL,
        created_at TIMESTAMPTZ NOT NULL DEFAULT clock_timestamp(),
        updated_at TIMESTAMPTZ NOT NULL DEFAULT clock_timestamp(),
        seq BIGSERIAL NOT NULL
    )
    """,
    "CREATE INDEX IF NOT EXISTS people_created_at_idx ON people (created_at DESC, seq DESC)",
]

# Global database pool
db_pool = None

# Serializes lazy reconnects so concurrent requests build at most one pool
_connect_lock = asyncio.Lock()


async def init_database(timeout: float = DB_CONNECT_TIMEOUT):
    """Initialize database connection pool and make sure the people table exists"""
    global db_pool
    pool = await asyncpg.create_pool(
        DATABASE_URL,
        min_size=DB_POOL_MIN_SIZE,
        max_size=DB_POOL_MAX_SIZE,
        timeout=timeout,
        command_timeout=60,
        statement_cache_size=0  # Fix for pgbouncer compatibility
    )

    try:
        async with pool.acquire() as conn:
            for statement in SCHEMA_STATEMENTS:
                await conn.execute(statement)
    except BaseException:
        await pool.close()
        raise

    db_pool = pool
    logger.info("Database initialized successfully")


async def try_init_database(timeout: float = DB_CONNECT_TIMEOUT) -> bool:
    """Initialize the pool, logging instead of raising when the store is unreachable"""
    try:
        await init_database(timeout=timeout)
        return True
    except CONNECTIVITY_ERRORS as e:
        logger.error(f"Database connection error: {e}")
        return False


async def close_database():
    """Close database connection pool"""
    global db_pool
    if db_pool:
        await db_pool.close()
        db_pool = None
    logger.info("Database connections closed")


def get_db_pool():
    """Get the database pool instance"""
    return db_pool


async def _connect_once() -> bool:
    """Establish the pool unless another request already did while we waited"""
    async with _connect_lock:
        if db_pool is not None:
            return True
        return await try_init_database(timeout=DB_PING_TIMEOUT)


async def is_database_available() -> bool:
    """
    Report whether the store can serve a query right now.

    A pool that was never established (store down at startup) is retried
    here with the short ping timeout so the service recovers on its own.
    """
    if db_pool is None and not await _connect_once():
        return False

    pool = get_db_pool()
    if pool is None:
        return False

    try:
        async with pool.acquire(timeout=DB_PING_TIMEOUT) as conn:
            await conn.fetchval("SELECT 1", timeout=DB_PING_TIMEOUT)
        return True
    except CONNECTIVITY_ERRORS as e:
        logger.warning(f"Database availability check failed: {e}")
        return False
