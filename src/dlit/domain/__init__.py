"""Domain layer: the Literal type and its coercion rules.

This layer depends only on stdlib and pydantic.
It must never import from config.
"""
