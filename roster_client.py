"""Roster API client.

A small wrapper around the DevOps Class API using the ``requests``
library.  It exposes one method per route:

* :meth:`RosterAPI.list_students` – ``GET /devops``
* :meth:`RosterAPI.count_students` – ``GET /devops-count``
* :meth:`RosterAPI.add_student` – ``POST /students``
* :meth:`RosterAPI.get_student` – ``GET /students/{id}``

Every method returns a ``(data, error)`` tuple.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dict with
``status_code`` and ``message`` keys.  HTTP errors are never raised to
the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000"

Error = Dict[str, Any]


class RosterAPI:
    """Client for the roster endpoints."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the API, e.g. ``http://localhost:3000``.
            session: Optional requests session.  One is created if omitted.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request and decode the JSON response.

        Returns ``(data, None)`` on success or ``(None, error)`` where
        ``error`` holds the status code (``None`` for network failures)
        and the server's ``detail`` message when there is one.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    body = exc.response.json()
                    detail = body.get("detail") if isinstance(body, dict) else body
                    message = detail if isinstance(detail, str) else str(detail or "")
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("Roster API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("Roster API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def list_students(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve the whole roster."""
        data, error = self._request("GET", "/devops")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def count_students(self) -> Tuple[Optional[int], Optional[Error]]:
        """Retrieve the number of students."""
        data, error = self._request("GET", "/devops-count")
        if error:
            return None, error
        if not isinstance(data, int):
            return None, {"status_code": None, "message": f"Unexpected count payload: {data!r}"}
        return data, None

    def add_student(self, payload: Dict[str, Any]) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Add a student.

        Args:
            payload: Record with ``classId``, ``name`` and ``gender``.
        Returns:
            A tuple ``(roster, error)`` where ``roster`` is the updated
            list of students.
        """
        data, error = self._request("POST", "/students", json_body=payload)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_student(self, class_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single student by ``classId``."""
        return self._request("GET", f"/students/{class_id}")
