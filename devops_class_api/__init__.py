"""
Top-level package for the DevOps Class API.

The package exposes no public names of its own; the application lives
in the ``app`` subpackage and is importable as
``devops_class_api.app.main``.
"""

__all__ = []
