"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from library_app.catalog import Catalog, load_seed_records
from library_app.main import app


SEED = [
    {"title": "JavaScript: The Good Parts", "author": "Douglas Crockford", "category": "Programming", "isAvailable": True},
    {"title": "Eloquent JavaScript", "author": "Marijn Haverbeke", "category": "Programming", "isAvailable": False},
    {"title": "Clean Code", "author": "Robert C. Martin", "category": "Software", "isAvailable": True},
    {
        "title": "Encyclopedia of Plants",
        "author": "A. Botanist",
        "category": "Reference",
        "isAvailable": True,
        "isReference": True,
        "locationCode": "Ref-PL-03",
    },
]


@pytest.fixture
def catalog() -> Catalog:
    """A catalogue seeded with the four sample books."""
    return Catalog(SEED)


@pytest.fixture
def client():
    """Test client over an app whose catalogue is reset from the bundled seed file."""
    app.state.catalog = Catalog(load_seed_records())
    with TestClient(app) as c:
        yield c
