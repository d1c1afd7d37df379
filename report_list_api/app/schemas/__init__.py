"""
Pydantic schema definitions for API payloads.

Schemas define request and response bodies and double as the typed
record held by the in‑memory store.
"""
