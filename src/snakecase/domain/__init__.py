"""Domain layer — the snake_case grammar and the validated string types.

This layer depends only on stdlib (pydantic is imported lazily by the
schema hooks). It must never import from config.
"""
