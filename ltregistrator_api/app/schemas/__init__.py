"""
Pydantic schema definitions for API payloads.

Each resource (employees, leaves, projects) defines its own transfer
models for request and response bodies.  Schemas are kept apart from
the domain records in ``models`` to decouple the wire representation
from storage.
"""
