"""FastAPI REST API for campus passages.

This module provides a REST API for creating, editing and listing passages
between buildings, and for checking door placements.

Usage:
    uvicorn campus.web:app --reload
"""

from campus.web.app import app, create_app

__all__ = ["app", "create_app"]
