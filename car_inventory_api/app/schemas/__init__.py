"""
Pydantic schema definitions for API payloads.

Schemas are separated from the record store so that the wire
representation can evolve independently of storage.
"""
