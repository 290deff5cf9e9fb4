"""
Evening Coffee Backend - Test Configuration (conftest.py)
==========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── static_root: Temporary site directory (index.html, assets, subpage)
    ├── submission_logger: Dedicated logger for contact/reservation records
    ├── standalone_app / embedded_app: Apps built by create_app()
    └── standalone_client / embedded_client: HTTPX AsyncClients over ASGI
"""

import logging
import os

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["EMBEDDED_MODE"] = "false"

from eveningcoffee.config import Settings  # noqa: E402
from eveningcoffee.main import create_app  # noqa: E402

APP_ID = "cafe-7"

INDEX_HTML = "<!DOCTYPE html><html><body><h1>Evening Coffee</h1></body></html>"


@pytest.fixture
def static_root(tmp_path):
    """
    A throwaway website directory:

        site/index.html
        site/css/site.css
        site/about/index.html
    """
    site = tmp_path / "site"
    (site / "css").mkdir(parents=True)
    (site / "about").mkdir()
    (site / "index.html").write_text(INDEX_HTML)
    (site / "css" / "site.css").write_text("body { color: #3b2f2f; }")
    (site / "about" / "index.html").write_text("<h1>About us</h1>")
    (tmp_path / "secret.txt").write_text("not for the web")
    return site


@pytest.fixture
def submission_logger():
    """Logger handed to create_app(); tests read its records through caplog."""
    return logging.getLogger("tests.submissions")


@pytest.fixture
def standalone_app(static_root, submission_logger):
    settings = Settings(static_root=str(static_root), embedded_mode=False)
    return create_app(APP_ID, settings, submission_logger=submission_logger)


@pytest.fixture
def embedded_app(static_root, submission_logger):
    settings = Settings(static_root=str(static_root), embedded_mode=True)
    return create_app(APP_ID, settings, submission_logger=submission_logger)


@pytest_asyncio.fixture
async def standalone_client(standalone_app):
    """
    HTTPX AsyncClient talking to a standalone app (API at the root).

    Usage:
        async def test_menu(standalone_client):
            response = await standalone_client.get("/menu")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=standalone_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def embedded_client(embedded_app):
    """HTTPX AsyncClient talking to an embedded app (API under /api/cafe-7)."""
    transport = ASGITransport(app=embedded_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
