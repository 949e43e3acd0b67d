"""Resolver package for the GraphQL schema.

Each module maps the query fields of one entity onto a single document store
call; shared lookup and decoding lives in ``lookup``.
"""
