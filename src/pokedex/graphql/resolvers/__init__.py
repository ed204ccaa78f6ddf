"""Resolver package for GraphQL schema.

Each resolver reads the store from the request context, calls one store
operation and converts the resulting store models into GraphQL types.
"""

# Intentionally empty; functions are defined in sibling modules.
