"""
Person Records test suite

- Route tests: every page through the FastAPI app with an in-memory gateway
- Gateway tests: PeopleService queries against a fake asyncpg pool
- Connection, method override and validation unit tests
"""
