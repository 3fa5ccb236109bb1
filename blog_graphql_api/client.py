"""Blog GraphQL API client.

A small wrapper around a running Blog GraphQL API server.  All calls go
through :meth:`BlogGraphQLClient.execute`, which posts a GraphQL document
to the server and returns a ``(data, error)`` tuple in the same style as
the service layer: on success ``error`` is ``None``; on failure ``data``
is ``None`` and ``error`` is a dictionary with the keys ``status_code``,
``message`` and (for GraphQL errors) ``code``.

The client exposes one method per operation of the schema:

* :meth:`list_users`, :meth:`list_posts`, :meth:`list_comments`
* :meth:`create_user`, :meth:`create_post`, :meth:`create_comment`

Relation fields are requested through the ``fields`` argument, e.g.
``client.list_posts(fields="id title author { name }")``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

USER_FIELDS = "id name email age"
POST_FIELDS = "id title body published"
COMMENT_FIELDS = "id text"

ErrorDict = Dict[str, Any]


class BlogGraphQLClient:
    """Client for the Blog GraphQL API."""

    def __init__(
        self,
        *,
        base_url: str,
        graphql_path: str = "/graphql",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:4000``.
            graphql_path: Path of the GraphQL endpoint on that server.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Request timeout in seconds.
        """
        self.url = f"{base_url.rstrip('/')}/{graphql_path.lstrip('/')}"
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level request
    # ------------------------------------------------------------------
    def execute(
        self, document: str, variables: Optional[Dict[str, Any]] = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ErrorDict]]:
        """Send a GraphQL document and return ``(data, error)``.

        Only the first GraphQL error is reported.  Partial data that
        accompanies an error is discarded.
        """
        payload: Dict[str, Any] = {"query": document}
        if variables:
            payload["variables"] = variables
        try:
            logger.debug("Sending GraphQL request to %s", self.url)
            response = self.session.post(self.url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.text if exc.response is not None else ""
            logger.error("GraphQL request failed (%s): %s", status, message or exc)
            return None, {"status_code": status, "message": message or str(exc)}
        except requests.RequestException as exc:
            logger.error("GraphQL request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}
        try:
            body = response.json()
        except ValueError as exc:
            logger.error("GraphQL response is not JSON: %s", exc)
            return None, {"status_code": response.status_code, "message": "Invalid JSON response"}

        errors = body.get("errors") or []
        if errors:
            first = errors[0]
            code = (first.get("extensions") or {}).get("code")
            logger.warning("GraphQL error %s: %s", code, first.get("message"))
            return None, {
                "status_code": response.status_code,
                "message": first.get("message", ""),
                "code": code,
            }
        return body.get("data"), None

    def _field(
        self, operation: str, document: str, variables: Optional[Dict[str, Any]] = None
    ) -> Tuple[Any, Optional[ErrorDict]]:
        data, error = self.execute(document, variables)
        if error:
            return None, error
        return (data or {}).get(operation), None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def list_users(
        self, query: Optional[str] = None, fields: str = USER_FIELDS
    ) -> Tuple[List[Dict[str, Any]], Optional[ErrorDict]]:
        """Return users whose name contains ``query`` (all if omitted)."""
        document = f"query Users($query: String) {{ users(query: $query) {{ {fields} }} }}"
        users, error = self._field("users", document, {"query": query} if query else None)
        return users or [], error

    def list_posts(
        self, query: Optional[str] = None, fields: str = POST_FIELDS
    ) -> Tuple[List[Dict[str, Any]], Optional[ErrorDict]]:
        """Return posts whose title or body contains ``query``."""
        document = f"query Posts($query: String) {{ posts(query: $query) {{ {fields} }} }}"
        posts, error = self._field("posts", document, {"query": query} if query else None)
        return posts or [], error

    def list_comments(
        self, fields: str = COMMENT_FIELDS
    ) -> Tuple[List[Dict[str, Any]], Optional[ErrorDict]]:
        comments, error = self._field("comments", f"query {{ comments {{ {fields} }} }}")
        return comments or [], error

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def create_user(
        self, name: str, email: str, age: Optional[int] = None, fields: str = USER_FIELDS
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ErrorDict]]:
        document = (
            "mutation CreateUser($data: CreateUserInput) "
            f"{{ createUser(data: $data) {{ {fields} }} }}"
        )
        data: Dict[str, Any] = {"name": name, "email": email}
        if age is not None:
            data["age"] = age
        return self._field("createUser", document, {"data": data})

    def create_post(
        self,
        title: str,
        body: str,
        published: bool,
        author: str,
        fields: str = POST_FIELDS,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ErrorDict]]:
        document = (
            "mutation CreatePost($data: CreatePostInput) "
            f"{{ createPost(data: $data) {{ {fields} }} }}"
        )
        data = {"title": title, "body": body, "published": published, "author": author}
        return self._field("createPost", document, {"data": data})

    def create_comment(
        self, text: str, author: str, post: str, fields: str = COMMENT_FIELDS
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ErrorDict]]:
        document = (
            "mutation CreateComment($data: CreateCommentInput) "
            f"{{ createComment(data: $data) {{ {fields} }} }}"
        )
        data = {"text": text, "author": author, "post": post}
        return self._field("createComment", document, {"data": data})
