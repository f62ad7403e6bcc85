"""
pytest configuration and fixtures for the people test suite
"""

import httpx
import pytest
import pytest_asyncio

from app import app
from services.people_service import get_people_service
from .infrastructure import InMemoryPeopleService


@pytest.fixture
def people_store():
    """Empty in-memory gateway, available by default"""
    return InMemoryPeopleService()


@pytest_asyncio.fixture
async def client(people_store):
    """HTTP client talking to the app in-process, with the gateway swapped out"""
    app.dependency_overrides[get_people_service] = lambda: people_store
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client_without_raising(people_store):
    """Like client, but unhandled exceptions come back as the app's 500 response"""
    app.dependency_overrides[get_people_service] = lambda: people_store
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()
