import pytest
from litestar import Litestar
from litestar.testing import TestClient

from apiguard.main import create_app


@pytest.fixture(scope="session")
def app() -> Litestar:
    """Fixture to create the Litestar app."""
    return create_app()


@pytest.fixture()
def client(app: Litestar) -> TestClient:
    """Fixture to create a TestClient for the app."""
    return TestClient(app)
