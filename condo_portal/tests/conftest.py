import pytest
from fastapi.testclient import TestClient
from condo_portal.main import app
from condo_portal.tests.fixtures.contact import *
from condo_portal.tests.fixtures.maintenance import *


@pytest.fixture(scope="function")
def client():
    """Fixture providing a TestClient for the portal app."""
    with TestClient(app) as c:
        yield c
