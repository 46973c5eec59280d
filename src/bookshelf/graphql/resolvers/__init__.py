"""Resolver package for the GraphQL schema.

Each module resolves one entity type: root lookups, relation fields and
create mutations, all backed by the store found in the request context.
"""
