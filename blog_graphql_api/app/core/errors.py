"""
Error types returned by the service layer.

Services never raise these themselves; they return them as the second
element of a ``(record, error)`` pair.  The GraphQL resolvers raise the
error, and strawberry reports it in the ``errors`` array of the
response.  ``message`` and ``extensions`` are the attributes
graphql-core reads when it wraps a resolver exception, so the client
sees both the human readable message and a machine readable ``code``.
"""


class ServiceError(Exception):
    """Base class for errors produced by mutation handlers."""

    code = "INTERNAL"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.extensions = {"code": self.code}


class ConflictError(ServiceError):
    """A uniqueness constraint would be violated (duplicate e‑mail)."""

    code = "CONFLICT"


class ValidationError(ServiceError):
    """A referenced user or post does not exist (or is not published)."""

    code = "VALIDATION"


class ResolverMapError(RuntimeError):
    """The resolver map and the GraphQL schema disagree."""
