"""
Main entrypoint for the DevOps Class API.

This module assembles the FastAPI application: it sets up logging,
attaches a roster service and includes the API router.  An
application instance is created at import time as ``app`` so that it
can be served directly, e.g.::

    uvicorn devops_class_api.app.main:app --port 3000

Tests call ``create_app`` to get an application with its own roster.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import settings
from .core.logging_config import setup_logging
from .services.roster_service import RosterService


def create_app(roster: Optional[RosterService] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    roster : Optional[RosterService]
        Roster to serve.  A freshly seeded one is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.roster = roster if roster is not None else RosterService()
    app.include_router(api_router)

    logging.getLogger(__name__).debug("Application created (environment=%s)", settings.environment)
    return app


app = create_app()
