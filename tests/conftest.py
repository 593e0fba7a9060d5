import pytest
from fastapi.testclient import TestClient

from app.greeting.services import GreetingService, get_greeting_service
from app.main import create_app


@pytest.fixture()
def app():
    """Return a fresh application instance."""

    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def stub_greeting(app):
    """Serve a known greeting from /greeting."""

    service = GreetingService("Greetings from the stub")
    app.dependency_overrides[get_greeting_service] = lambda: service
    return service
