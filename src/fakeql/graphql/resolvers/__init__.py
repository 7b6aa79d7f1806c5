"""Resolver package for the GraphQL schema.

``base`` holds the kind-generic engine (source validation, single lookup,
filtered and limited collection lookup); the per-entity modules bind it to
the User, Album and Photo fields.
"""
