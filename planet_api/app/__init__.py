"""
Application package initializer.

The application is split into ``core`` (configuration, logging, the
MongoDB store and the error taxonomy), ``schemas`` (Pydantic models),
``services`` (lookup logic) and ``api`` (FastAPI routers).
"""

from .main import app  # noqa: F401
