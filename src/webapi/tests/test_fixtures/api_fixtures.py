"""Fixtures for HTTP tests: the app over the per-test database."""

from typing import AsyncGenerator

import httpx
import pytest
from fastapi import FastAPI

from webapi.api import create_app
from webapi.collections import DataContext

from .settings_fixtures import make_settings


@pytest.fixture
def app(context: DataContext) -> FastAPI:
    # Logging is installed once for the suite by conftest
    return create_app(make_settings(), context, configure_logging=False)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
