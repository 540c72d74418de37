"""Concert Lab API client.

This module defines a small client wrapper around the concert REST
resource.  The client uses a ``requests.Session`` internally, so the
``clientId`` cookie issued by the server on the first response is
stored in the session's cookie jar and sent back on every later call.

The client exposes high-level methods:

* :meth:`ConcertClient.create_concert` - create a concert, return its id.
* :meth:`ConcertClient.get_concert` - fetch a single concert.
* :meth:`ConcertClient.list_concerts` - fetch a range of concerts.
* :meth:`ConcertClient.delete_concerts` - delete every concert.

Methods never raise for HTTP or transport failures.  Each returns a
tuple ``(result, error)`` where ``error`` is ``None`` on success or a
dictionary with ``status_code`` and ``message`` keys.
"""

from __future__ import annotations

import datetime
import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

CLIENT_COOKIE = "clientId"

Error = Dict[str, Any]


class ConcertClient:
    """Client for interacting with the concert resource."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            api_prefix: Prefix the server mounts its routers under.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_prefix = api_prefix.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def client_id(self) -> Optional[str]:
        """The client identifier issued by the server, once one has been received."""
        return self.session.cookies.get(CLIENT_COOKIE)

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _send(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[requests.Response], Optional[Error]]:
        """Perform an HTTP request and return ``(response, error)``."""
        url = f"{self.base_url}{self.api_prefix}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    message = str(exc.response.json().get("detail", ""))
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
    # Concert operations
    # ------------------------------------------------------------------
    def create_concert(self, title: str, date: datetime.date) -> Tuple[Optional[int], Optional[Error]]:
        """Create a concert and return the id taken from the ``Location`` header."""
        response, error = self._send(
            "POST", "/concerts", json_body={"title": title, "date": date.isoformat()}
        )
        if error:
            return None, error
        location = response.headers.get("Location", "")
        try:
            return int(location.rstrip("/").rsplit("/", 1)[-1]), None
        except ValueError:
            logger.error("Unexpected Location header: %r", location)
            return None, {"status_code": response.status_code, "message": f"Bad Location header: {location!r}"}

    def get_concert(self, concert_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        response, error = self._send("GET", f"/concerts/{concert_id}")
        if error:
            return None, error
        return response.json(), None

    def list_concerts(self, start: int = 1, size: int = 10) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve the concerts with ids in ``[start, start + size)``."""
        response, error = self._send("GET", "/concerts", params={"start": start, "size": size})
        if error:
            return [], error
        data = response.json()
        return (data if isinstance(data, list) else []), None

    def delete_concerts(self) -> Tuple[bool, Optional[Error]]:
        _, error = self._send("DELETE", "/concerts")
        if error:
            return False, error
        return True, None
