"""
Pydantic schema definitions for API payloads.

Schemas are separated from the storage model (``core.store``) to
decouple the wire representation from how records are kept in memory.
"""
