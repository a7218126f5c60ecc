"""
FastAPI dependencies shared by the routers.

The roster service is owned by the application (``app.state.roster``)
rather than a module global, so every app built by ``create_app`` has
its own roster.
"""

from fastapi import Request

from devops_class_api.app.services.roster_service import RosterService


def get_roster(request: Request) -> RosterService:
    """Return the roster service attached to the running application."""
    return request.app.state.roster
