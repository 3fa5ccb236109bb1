"""
GraphQL schema assembly.

``RESOLVER_MAP`` is the explicit table from ``(type name, field name)``
to the function that resolves that field.  The root ``Query`` and
``Mutation`` types are built from it, and the relation fields of
``User``, ``Post`` and ``Comment`` call the ``RelationService`` lookup
registered for them here on every resolution.

``verify_resolver_map`` compares the table against the generated
schema and is run by ``create_app`` before the server accepts
requests.  A field without a resolver, or a resolver for a field the
schema does not declare, raises ``ResolverMapError``.
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

import strawberry
from strawberry.types import ExecutionContext
from graphql import GraphQLError, GraphQLObjectType, build_schema, get_named_type

from ...core.errors import ResolverMapError, ServiceError
from ...services.relation_service import RelationService
from .endpoints import comments, posts, users
from .types import Comment, Post, User

logger = logging.getLogger(__name__)

ROOT_TYPES = ("Query", "Mutation")
ENTITY_TYPES = ("User", "Post", "Comment")

RESOLVER_MAP: Dict[Tuple[str, str], Callable] = {
    ("Query", "users"): users.resolve_users,
    ("Query", "posts"): posts.resolve_posts,
    ("Query", "comments"): comments.resolve_comments,
    ("Query", "me"): users.resolve_me,
    ("Query", "post"): posts.resolve_post,
    ("Mutation", "createUser"): users.resolve_create_user,
    ("Mutation", "createPost"): posts.resolve_create_post,
    ("Mutation", "createComment"): comments.resolve_create_comment,
    ("User", "posts"): RelationService.user_posts,
    ("User", "comments"): RelationService.user_comments,
    ("Post", "author"): RelationService.post_author,
    ("Post", "comments"): RelationService.post_comments,
    ("Comment", "author"): RelationService.comment_author,
    ("Comment", "post"): RelationService.comment_post,
}


@strawberry.type
class Query:
    users: List[User] = strawberry.field(resolver=RESOLVER_MAP[("Query", "users")])
    posts: List[Post] = strawberry.field(resolver=RESOLVER_MAP[("Query", "posts")])
    comments: List[Comment] = strawberry.field(resolver=RESOLVER_MAP[("Query", "comments")])
    me: User = strawberry.field(resolver=RESOLVER_MAP[("Query", "me")])
    post: Post = strawberry.field(resolver=RESOLVER_MAP[("Query", "post")])


@strawberry.type
class Mutation:
    create_user: User = strawberry.mutation(resolver=RESOLVER_MAP[("Mutation", "createUser")])
    create_post: Post = strawberry.mutation(resolver=RESOLVER_MAP[("Mutation", "createPost")])
    create_comment: Comment = strawberry.mutation(
        resolver=RESOLVER_MAP[("Mutation", "createComment")]
    )


class BlogSchema(strawberry.Schema):
    """Schema that leaves expected domain errors out of strawberry's error log.

    ``ServiceError`` rejections are logged by the services at WARNING and
    still reach the client in the ``errors`` array.  Anything else is
    reported by strawberry as usual.
    """

    def process_errors(
        self,
        errors: List[GraphQLError],
        execution_context: Optional[ExecutionContext] = None,
    ) -> None:
        unexpected = [
            error for error in errors if not isinstance(error.original_error, ServiceError)
        ]
        if unexpected:
            super().process_errors(unexpected, execution_context)


schema = BlogSchema(query=Query, mutation=Mutation)


def verify_resolver_map(
    gql_schema: strawberry.Schema,
    resolver_map: Optional[Dict[Tuple[str, str], Callable]] = None,
) -> None:
    """Check that ``resolver_map`` covers exactly the resolvable fields.

    Every field of the root types and every object‑typed field of the
    entity types needs an entry.  Scalar entity fields are read straight
    from the record and must not have one.
    """
    if resolver_map is None:
        resolver_map = RESOLVER_MAP
    sdl_schema = build_schema(str(gql_schema))

    expected = set()
    for type_name in ROOT_TYPES:
        graphql_type = sdl_schema.get_type(type_name)
        if graphql_type is not None:
            expected.update((type_name, field_name) for field_name in graphql_type.fields)
    for type_name in ENTITY_TYPES:
        graphql_type = sdl_schema.get_type(type_name)
        if graphql_type is None:
            continue
        for field_name, field in graphql_type.fields.items():
            if isinstance(get_named_type(field.type), GraphQLObjectType):
                expected.add((type_name, field_name))

    missing = sorted(expected - set(resolver_map))
    unknown = sorted(set(resolver_map) - expected)
    if missing or unknown:
        raise ResolverMapError(
            "Resolver map does not match schema: missing=%s unknown=%s" % (missing, unknown)
        )
    logger.debug("Resolver map verified (%d fields)", len(expected))
