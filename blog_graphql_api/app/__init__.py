"""
Application package initializer.

The code is split by layer rather than by domain: ``core`` holds the
settings, logging setup, error types and the in‑memory entity store;
``schemas`` defines the pydantic records kept in the store; ``services``
implements the query, mutation and relation logic; and ``api/v1``
exposes that logic as a GraphQL schema served by FastAPI.
"""

from .main import app  # noqa: F401
