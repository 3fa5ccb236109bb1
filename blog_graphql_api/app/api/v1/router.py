"""
Routers for version 1 of the API.

``router`` aggregates the plain REST routes (currently only the health
probe).  ``create_graphql_router`` wraps the strawberry schema in a
``GraphQLRouter`` which ``create_app`` mounts under
``settings.graphql_path``.
"""

from fastapi import APIRouter
from strawberry.fastapi import GraphQLRouter

from ...core.config import Settings
from .context import get_context
from .endpoints import health
from .schema import schema

router = APIRouter()

router.include_router(health.router, prefix="/health", tags=["health"])


def create_graphql_router(app_settings: Settings) -> GraphQLRouter:
    """Build the GraphQL router for ``app_settings``.

    The GraphiQL IDE is only served when ``app_settings.graphiql`` is
    set; queries and mutations are accepted either way.
    """
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if app_settings.graphiql else None,
    )
