"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
demo server starts without any setup.  Tests and embedding code can
build their own ``Settings`` instance and pass it to
``create_app``.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Blog GraphQL API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  Console logging is always enabled.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Mount point of the GraphQL endpoint.  Both queries (GET/POST) and
    # mutations (POST) are served from this single path.
    graphql_path: str = os.getenv("GRAPHQL_PATH", "/graphql")

    # Serve the GraphiQL IDE when the endpoint is opened in a browser.
    graphiql: bool = _env_flag("GRAPHIQL", "true")

    # Populate the store with the demo users, posts and comments when
    # the application is created.
    seed_demo_data: bool = _env_flag("SEED_DEMO_DATA", "true")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "4000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
