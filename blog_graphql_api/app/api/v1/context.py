"""
GraphQL request context.

The entity store is not a module global: ``create_app`` attaches it to
``app.state`` and ``get_context`` copies it into the context of every
GraphQL request.  Resolvers fetch it with ``get_store``.
"""

from typing import Any, Dict

from fastapi import Request
from strawberry.types import Info

from ...core.store import EntityStore


async def get_context(request: Request) -> Dict[str, Any]:
    """Context getter for strawberry's ``GraphQLRouter``."""
    return {"store": request.app.state.store}


def get_store(info: Info) -> EntityStore:
    return info.context["store"]
