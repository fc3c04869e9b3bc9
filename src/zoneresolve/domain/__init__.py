"""Domain layer — value types for local and offset date-times.

This layer depends only on stdlib and pydantic.
It must never import from resolvers or config.
"""
