import pytest
from fastapi.testclient import TestClient

from movies_api.main import app
from movies_api.movies.store import MovieStore, get_store


@pytest.fixture
def store():
    return MovieStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
