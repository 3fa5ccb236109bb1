"""
Tests for the GraphQL schema.

Tests cover:
- Every query and mutation executed through strawberry
- Relation fields resolved from the store
- Error messages and codes of rejected mutations
- Relation fields dispatched through the resolver map
- Domain errors kept out of the strawberry error log
- Resolver map verification
"""

import logging

import pytest

from blog_graphql_api.app.api.v1.schema import RESOLVER_MAP, verify_resolver_map
from blog_graphql_api.app.core.errors import ResolverMapError

CREATE_USER = """
mutation ($data: CreateUserInput) {
    createUser(data: $data) { id name email age }
}
"""

CREATE_POST = """
mutation ($data: CreatePostInput) {
    createPost(data: $data) { id title published author { id name } }
}
"""

CREATE_COMMENT = """
mutation ($data: CreateCommentInput) {
    createComment(data: $data) { id text author { name } post { id } }
}
"""


class TestQueries:
    """Query operations."""

    def test_users_with_query(self, execute):
        result = execute('{ users(query: "ta") { name } }')

        assert result.errors is None
        assert result.data == {"users": [{"name": "Tae"}, {"name": "Tamaki"}]}

    def test_users_without_query(self, execute):
        result = execute("{ users { id } }")

        assert [user["id"] for user in result.data["users"]] == ["1", "2", "3"]

    def test_posts_with_query(self, execute):
        result = execute('{ posts(query: "JOG") { id title } }')

        assert result.data == {"posts": [{"id": "1", "title": "Habits to work on"}]}

    def test_comments(self, execute):
        result = execute("{ comments { id text } }")

        assert len(result.data["comments"]) == 4
        assert result.data["comments"][0] == {"id": "1", "text": "GraphQL is cool!"}

    def test_me(self, execute):
        result = execute("{ me { id name email age posts { id } } }")

        assert result.errors is None
        assert result.data["me"] == {
            "id": "123",
            "name": "Joe",
            "email": "joe@example.com",
            "age": 2,
            "posts": [],
        }

    def test_post_stub_has_no_author(self, execute):
        result = execute("{ post { id title body published author { id } } }")

        assert result.errors is None
        assert result.data["post"] == {
            "id": "1234sdasfds",
            "title": "Cool node course!",
            "body": "This course is so insightful",
            "published": False,
            "author": None,
        }


class TestRelations:
    """Relation fields on User, Post and Comment."""

    def test_post_comments(self, execute):
        result = execute('{ posts(query: "dinner") { comments { id } } }')

        assert result.data["posts"][0]["comments"] == [{"id": "2"}, {"id": "3"}]

    def test_post_author(self, execute):
        result = execute('{ posts(query: "park") { author { name } } }')

        assert result.data["posts"][0]["author"] == {"name": "Tamaki"}

    def test_user_posts_and_comments(self, execute):
        result = execute('{ users(query: "tae") { posts { id } comments { id } } }')

        assert result.data["users"] == [
            {"posts": [{"id": "1"}], "comments": [{"id": "1"}, {"id": "2"}]}
        ]

    def test_comment_author_and_post(self, execute):
        result = execute("{ comments { id author { id } post { id published } } }")

        last = result.data["comments"][-1]
        assert last == {"id": "4", "author": {"id": "3"}, "post": {"id": "3", "published": True}}

    def test_nested_relations(self, execute):
        result = execute('{ users(query: "joe") { posts { comments { author { name } } } } }')

        comments = result.data["users"][0]["posts"][0]["comments"]
        assert [comment["author"]["name"] for comment in comments] == ["Tae", "Joe"]


class TestMutations:
    """Mutation operations."""

    def test_create_user(self, execute, store):
        result = execute(CREATE_USER, {"data": {"name": "Ann", "email": "ann@example.com"}})

        assert result.errors is None
        assert result.data["createUser"] == {
            "id": "new-1",
            "name": "Ann",
            "email": "ann@example.com",
            "age": None,
        }
        assert len(store.users) == 4

    def test_create_user_email_taken(self, execute, store):
        result = execute(CREATE_USER, {"data": {"name": "Ann", "email": "tae@example.com"}})

        assert result.data is None
        assert len(result.errors) == 1
        assert result.errors[0].message == "Email taken."
        assert result.errors[0].extensions == {"code": "CONFLICT"}
        assert result.errors[0].path == ["createUser"]
        assert len(store.users) == 3

    def test_create_post(self, execute, store):
        data = {"title": "X", "body": "Y", "published": True, "author": "1"}

        result = execute(CREATE_POST, {"data": data})

        assert result.errors is None
        assert result.data["createPost"] == {
            "id": "new-1",
            "title": "X",
            "published": True,
            "author": {"id": "1", "name": "Tae"},
        }
        assert len(store.posts) == 4

    def test_create_post_unknown_author(self, execute, store):
        data = {"title": "X", "body": "Y", "published": True, "author": "99"}

        result = execute(CREATE_POST, {"data": data})

        assert result.errors[0].message == "User not exist"
        assert result.errors[0].extensions == {"code": "VALIDATION"}
        assert len(store.posts) == 3

    def test_create_comment(self, execute, store):
        result = execute(CREATE_COMMENT, {"data": {"text": "hi", "author": "2", "post": "3"}})

        assert result.errors is None
        assert result.data["createComment"] == {
            "id": "new-1",
            "text": "hi",
            "author": {"name": "Joe"},
            "post": {"id": "3"},
        }
        assert len(store.comments) == 5

    def test_create_comment_unpublished_post(self, execute, store):
        result = execute(CREATE_COMMENT, {"data": {"text": "hi", "author": "1", "post": "2"}})

        assert result.errors[0].message == "User or post does not exist"
        assert result.errors[0].extensions == {"code": "VALIDATION"}
        assert len(store.comments) == 4

    def test_missing_required_input_field(self, execute, store):
        result = execute(CREATE_USER, {"data": {"name": "Ann"}})

        assert result.errors
        assert len(store.users) == 3

    @pytest.mark.parametrize(
        "document, operation",
        [(CREATE_USER, "createUser"), (CREATE_POST, "createPost"), (CREATE_COMMENT, "createComment")],
    )
    def test_null_data_is_rejected_without_writes(self, execute, store, document, operation):
        before = store.counts()

        result = execute(document, {"data": None})

        assert result.data is None
        assert result.errors[0].path == [operation]
        assert result.errors[0].extensions == {"code": "VALIDATION"}
        assert store.counts() == before

    def test_omitted_data_argument(self, execute, store):
        result = execute("mutation { createUser { id } }")

        assert result.errors[0].message == "Missing user data"
        assert len(store.users) == 3

    def test_non_null_variable_still_accepted(self, execute):
        result = execute(
            "mutation ($data: CreateUserInput!) { createUser(data: $data) { id } }",
            {"data": {"name": "Ann", "email": "ann@example.com"}},
        )

        assert result.errors is None
        assert result.data == {"createUser": {"id": "new-1"}}

    def test_created_post_visible_through_author(self, execute):
        data = {"title": "New", "body": "Body", "published": True, "author": "2"}
        execute(CREATE_POST, {"data": data})

        result = execute('{ users(query: "joe") { posts { title } } }')

        assert [post["title"] for post in result.data["users"][0]["posts"]] == [
            "Dinner for weekend",
            "New",
        ]


class TestResolverMap:
    """verify_resolver_map against the generated schema."""

    def test_schema_matches_map(self, schema):
        verify_resolver_map(schema)

    def test_missing_entry_is_reported(self, schema):
        resolver_map = dict(RESOLVER_MAP)
        del resolver_map[("Post", "comments")]

        with pytest.raises(ResolverMapError, match="Post"):
            verify_resolver_map(schema, resolver_map)

    def test_unknown_entry_is_reported(self, schema):
        resolver_map = dict(RESOLVER_MAP)
        resolver_map[("Query", "drafts")] = lambda: []

        with pytest.raises(ResolverMapError, match="drafts"):
            verify_resolver_map(schema, resolver_map)

    def test_scalar_fields_are_not_mapped(self, schema):
        resolver_map = dict(RESOLVER_MAP)
        resolver_map[("User", "email")] = lambda: ""

        with pytest.raises(ResolverMapError, match="email"):
            verify_resolver_map(schema, resolver_map)


class TestRelationDispatch:
    """Relation fields resolve through RESOLVER_MAP."""

    def test_replaced_entry_changes_resolution(self, execute, monkeypatch):
        monkeypatch.setitem(
            RESOLVER_MAP,
            ("Post", "author"),
            lambda store, post: store.users.find(lambda user: user.id == "2"),
        )

        result = execute('{ posts(query: "park") { author { name } } }')

        assert result.errors is None
        assert result.data["posts"][0]["author"] == {"name": "Joe"}

    def test_replaced_list_entry(self, execute, monkeypatch):
        monkeypatch.setitem(RESOLVER_MAP, ("User", "comments"), lambda store, user: [])

        result = execute('{ users(query: "tae") { comments { id } } }')

        assert result.data["users"] == [{"comments": []}]


class TestErrorLogging:
    """Which resolver errors strawberry writes to its execution log."""

    def test_rejected_create_user_is_not_logged_by_strawberry(self, execute, caplog):
        caplog.set_level(logging.DEBUG, logger="strawberry.execution")

        result = execute(CREATE_USER, {"data": {"name": "Ann", "email": "tae@example.com"}})

        assert result.errors[0].message == "Email taken."
        assert not [record for record in caplog.records if record.name == "strawberry.execution"]

    def test_rejected_create_user_is_logged_by_service(self, execute, caplog):
        caplog.set_level(logging.WARNING)

        execute(CREATE_USER, {"data": {"name": "Ann", "email": "tae@example.com"}})

        assert any(
            record.levelno == logging.WARNING and record.name.endswith("user_service")
            for record in caplog.records
        )

    def test_unexpected_error_is_still_logged(self, execute, caplog, monkeypatch):
        def broken(store, post):
            raise RuntimeError("lookup failed")

        monkeypatch.setitem(RESOLVER_MAP, ("Post", "author"), broken)
        caplog.set_level(logging.DEBUG, logger="strawberry.execution")

        result = execute('{ posts(query: "park") { author { name } } }')

        assert result.errors[0].message == "lookup failed"
        assert any(
            record.name == "strawberry.execution" and record.levelno == logging.ERROR
            for record in caplog.records
        )
