"""
Application package initializer.

The API is split into the usual layers: ``api`` holds the routers,
``schemas`` the pydantic request and response models, ``services``
the roster logic and ``core`` the configuration and logging setup.
"""

from .main import app, create_app  # noqa: F401
