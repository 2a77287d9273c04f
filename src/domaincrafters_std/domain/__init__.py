"""Domain layer — exception taxonomy, Optional, Guard and UUID.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
