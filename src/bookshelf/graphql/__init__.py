"""
GraphQL layer: types, resolvers and schema
"""
