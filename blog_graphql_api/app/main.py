"""
Main entrypoint for the Blog GraphQL API.

This module assembles the FastAPI application: it sets up logging,
checks the resolver map against the schema, creates the entity store
and mounts the GraphQL and REST routers.  ``create_app`` builds the
app, which is then instantiated at module import time as ``app`` so it
can be served directly::

    uvicorn blog_graphql_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import create_graphql_router, router as v1_router
from .api.v1.schema import schema, verify_resolver_map
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .core.store import EntityStore, init_store


def create_app(
    app_settings: Optional[Settings] = None,
    store: Optional[EntityStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.
    store : Optional[EntityStore]
        A pre‑built store.  When omitted a new store is created and,
        if ``seed_demo_data`` is set, filled with the demo records.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file)

    # Refuse to start with a schema field nobody resolves.
    verify_resolver_map(schema)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings
    app.state.store = store if store is not None else init_store(seed=app_settings.seed_demo_data)

    app.include_router(create_graphql_router(app_settings), prefix=app_settings.graphql_path)
    app.include_router(v1_router)

    logging.getLogger(__name__).info(
        "%s %s ready, GraphQL endpoint at %s",
        app_settings.project_name,
        app_settings.api_version,
        app_settings.graphql_path,
    )
    return app


app = create_app()
