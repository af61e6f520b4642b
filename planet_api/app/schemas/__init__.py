"""
Pydantic schema definitions for API payloads.

Schemas are separated from the stored documents so that store-internal
fields never leak into responses.
"""
