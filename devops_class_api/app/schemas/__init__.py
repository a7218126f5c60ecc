"""
Pydantic schema definitions for API payloads.

Request and response bodies are described here, separately from the
in-memory records kept by the service layer.
"""
