"""Entry point for the DevOps Class API.

Serves the application with uvicorn on port 3000.  When ``APP_ENV`` is
``test`` nothing is started, so test suites can import the app and
drive it in-process instead.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from devops_class_api.app.core.config import HOST, PORT, settings
from devops_class_api.app.main import app

logger = logging.getLogger(__name__)


async def serve() -> None:
    """Run the API under uvicorn until it is stopped."""
    config = Config(app=app, host=HOST, port=PORT, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logger.info("DevOps Class API is running at http://localhost:%s", PORT)
    await server.serve()


def main() -> bool:
    """Start the server unless running in test mode.

    Returns ``True`` if a server was run, ``False`` if it was skipped.
    """
    if settings.testing:
        logger.info("Test mode: not opening a listener")
        return False
    try:
        asyncio.run(serve())
    except (KeyboardInterrupt, SystemExit):
        pass
    return True


if __name__ == "__main__":
    main()
