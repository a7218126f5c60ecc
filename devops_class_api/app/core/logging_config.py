"""
Logging setup for the roster API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  Records from the service, the routers
and uvicorn all share the same format.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the root logger and return it.

    Parameters
    ----------
    level : str
        Logging level name such as ``"DEBUG"`` or ``"info"``.  Unknown
        names fall back to ``INFO``.
    logfile : Optional[str]
        Extra file to write records to.  Resolved against the current
        working directory.

    The root logger is only configured once per process; later calls
    (one per ``create_app`` in the test suite) leave it untouched.
    """
    root = logging.getLogger()
    if root.handlers:
        return root

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    # uvicorn installs its own access logger; keep it at the same level.
    logging.getLogger("uvicorn.access").setLevel(numeric_level)
    return root
