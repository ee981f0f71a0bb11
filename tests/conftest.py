"""
Shared pytest fixtures for the portfolio API test suite.
No network access: HTTP collaborators run over httpx.MockTransport and the
site uses in-process content and a recording notification sender.
"""
import pytest
from fastapi.testclient import TestClient

from factories import RecordingDriver, RecordingSender, make_items
from main import create_app
from services.content_provider import StaticContentProvider
from services.site import PortfolioSite


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def abc_items():
    return make_items(["a", "b", "c"])


@pytest.fixture
def driver():
    return RecordingDriver()


@pytest.fixture
def sender():
    return RecordingSender()


@pytest.fixture
def site(sender):
    site = PortfolioSite(
        provider=StaticContentProvider(),
        sender=sender,
        recipient="owner@example.com",
        contact_timeout=1.0,
    )
    site.initialize()
    return site


@pytest.fixture
def client(site):
    app = create_app(site)
    with TestClient(app) as test_client:
        yield test_client
