"""Shared pytest fixtures for the Blog GraphQL API tests."""

import itertools

import pytest
from fastapi.testclient import TestClient

from blog_graphql_api.app.api.v1.schema import schema as graphql_schema
from blog_graphql_api.app.core.config import Settings
from blog_graphql_api.app.core.store import EntityStore, init_store
from blog_graphql_api.app.main import create_app


@pytest.fixture
def id_factory():
    """Deterministic identifiers: new-1, new-2, ..."""
    counter = itertools.count(1)
    return lambda: f"new-{next(counter)}"


@pytest.fixture
def store(id_factory) -> EntityStore:
    """Store seeded with the demo users, posts and comments."""
    return init_store(seed=True, id_factory=id_factory)


@pytest.fixture
def empty_store(id_factory) -> EntityStore:
    return init_store(seed=False, id_factory=id_factory)


@pytest.fixture
def schema():
    return graphql_schema


@pytest.fixture
def execute(schema, store):
    """Run a GraphQL document against the seeded store."""

    def _execute(document, variables=None):
        return schema.execute_sync(
            document,
            variable_values=variables,
            context_value={"store": store},
        )

    return _execute


@pytest.fixture
def test_settings() -> Settings:
    return Settings(graphiql=False, seed_demo_data=True, log_level="WARNING")


@pytest.fixture
def client(test_settings, store):
    """HTTP client for an app serving the seeded ``store``."""
    app = create_app(test_settings, store=store)
    with TestClient(app) as test_client:
        yield test_client
