"""
Pydantic schema definitions for API payloads.

Schemas describe the JSON shapes exchanged over HTTP and feed the
generated OpenAPI document.  Business rules (required fields, value
ranges) are checked separately in ``services.validation``.
"""
