"""Demo records loaded into the store at start‑up."""

DEMO_USERS = [
    {"id": "1", "name": "Tae", "email": "tae@example.com", "age": 36},
    {"id": "2", "name": "Joe", "email": "joe@example.com"},
    {"id": "3", "name": "Tamaki", "email": "tamaki@example.com", "age": 4},
]

DEMO_POSTS = [
    {
        "id": "1",
        "title": "Habits to work on",
        "body": "Jog for 20 mins",
        "published": True,
        "author": "1",
    },
    {
        "id": "2",
        "title": "Dinner for weekend",
        "body": "Chicken noodle soup",
        "published": False,
        "author": "2",
    },
    {
        "id": "3",
        "title": "Plan for the weekend",
        "body": "Go out for a park",
        "published": True,
        "author": "3",
    },
]

DEMO_COMMENTS = [
    {"id": "1", "text": "GraphQL is cool!", "author": "1", "post": "1"},
    {"id": "2", "text": "I like Python!", "author": "1", "post": "2"},
    {"id": "3", "text": "Peggy piggy", "author": "2", "post": "2"},
    {"id": "4", "text": "Hoo hoo hoo!", "author": "3", "post": "3"},
]

# Values returned by the ``me`` and ``post`` queries.  They are not part
# of the store.
ME_STUB = {"id": "123", "name": "Joe", "email": "joe@example.com", "age": 2}

POST_STUB = {
    "id": "1234sdasfds",
    "title": "Cool node course!",
    "body": "This course is so insightful",
    "published": False,
    "author": ME_STUB["id"],
}
