"""
Top‑level package for the Blog GraphQL API.

The service itself lives in the ``app`` subpackage and can be imported
using fully qualified names like ``blog_graphql_api.app.main``.  A small
HTTP client for talking to a running server is provided by
``blog_graphql_api.client``.
"""

__all__ = []
