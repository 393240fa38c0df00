"""LTRegistrator API client.

A thin wrapper around the REST API of ``ltregistrator_api`` for scripts
and other Python services.  It uses the ``requests`` library and
exposes one method per operation:

* :meth:`get_info` - basic information about an employee.
* :meth:`get_leaves` - the employee's leaves.
* :meth:`add_leaves`, :meth:`update_leaves`, :meth:`delete_leaves` -
  change the employee's leaves.
* :meth:`list_projects`, :meth:`get_project` - project lookup.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is empty and ``error`` is a dictionary
with ``status_code`` (``None`` for transport errors) and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class LTRegistratorClient:
    """Client for the employee and project resources."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            api_key: Bearer token.  If set, an ``Authorization`` header
                is sent with every request.
            session: Optional requests session.  If not supplied a
                session is created automatically.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            ``(data, None)`` with the parsed JSON body (``None`` for an
            empty body) on success, ``(None, error)`` on failure.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message: Any = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or err_json.get("message") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Employee operations
    # ------------------------------------------------------------------
    def get_info(self, employee_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/api/employee/{employee_id}/info")

    def get_leaves(self, employee_id: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", f"/api/employee/{employee_id}/leaves")
        if error:
            return [], error
        return data or [], None

    def add_leaves(self, employee_id: int, leaves: Sequence[Dict[str, Any]]) -> Tuple[bool, Optional[Error]]:
        """Add leaves given as dicts with ``type_leave``, ``start_date`` and ``end_date``."""
        _, error = self._request("POST", f"/api/employee/{employee_id}/leaves", json_body=list(leaves))
        return error is None, error

    def update_leaves(self, employee_id: int, leaves: Sequence[Dict[str, Any]]) -> Tuple[bool, Optional[Error]]:
        """Update leaves; every dict must carry the ``id`` of an existing leave."""
        _, error = self._request("PUT", f"/api/employee/{employee_id}/leaves", json_body=list(leaves))
        return error is None, error

    def delete_leaves(self, employee_id: int, leave_ids: Sequence[int]) -> Tuple[bool, Optional[Error]]:
        _, error = self._request(
            "DELETE",
            f"/api/employee/{employee_id}/leaves",
            params={"leaveID": [int(i) for i in leave_ids]},
        )
        return error is None, error

    # ------------------------------------------------------------------
    # Project operations
    # ------------------------------------------------------------------
    def list_projects(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/api/project/")
        if error:
            return [], error
        return data or [], None

    def get_project(self, project_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/api/project/{project_id}")
