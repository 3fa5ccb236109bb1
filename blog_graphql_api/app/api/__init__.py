"""
API package containing versioned routes.

A version subpackage exposes the GraphQL schema and the FastAPI routers
that serve it.  Breaking schema changes belong in a new version
subpackage.
"""
