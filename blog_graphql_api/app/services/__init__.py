"""
Service layer.

Each service encapsulates the business logic for one entity and works
on an ``EntityStore`` passed in by the caller.  Mutations return a
``(record, error)`` pair instead of raising, leaving it to the API
layer to turn the error into a GraphQL error.
"""
