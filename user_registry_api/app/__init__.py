"""
Application package initializer.

The service is small, but it keeps the same layering as a larger
API: configuration, logging and error types live in ``core``,
request/response models in ``schemas``, business logic in
``services`` and HTTP routes under ``api/<version>/endpoints``.
"""

from .main import app  # noqa: F401
