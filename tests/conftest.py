"""Root conftest: shared test client and helpers."""

import pytest
from fastapi.testclient import TestClient

from art_catalog_api.app.main import app


@pytest.fixture
def client():
    # Entering the client runs the lifespan, which loads the bundled fixtures.
    with TestClient(app) as test_client:
        yield test_client


def ids(records, key):
    return [record[key] for record in records]
