"""
Health endpoint for API v1.

A plain REST route next to the GraphQL endpoint so that load balancers
and process supervisors can probe the service without speaking
GraphQL.  It reports the current size of each collection.
"""

from typing import Any, Dict

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def health(request: Request) -> Dict[str, Any]:
    return {"status": "ok", **request.app.state.store.counts()}
