"""
Pydantic schema definitions for API payloads.

Schemas are separated from the domain entity to decouple the JSON
representation from the stored record.
"""
