"""
Application package initializer.

The application is organised into ``core`` (settings, logging,
errors), ``schemas`` (pydantic models), ``services`` (the report
store) and ``api`` (routers and dependencies).  ``main`` wires them
together.
"""

from .main import app, create_app  # noqa: F401
