"""
Version 1 of the API.

The GraphQL types live in ``types``, the root field resolvers in
``endpoints`` and the schema assembly and resolver map in ``schema``.
``router`` wraps the schema in a FastAPI router.
"""
