"""
Client identifier cookie handling.

Every concert response carries a ``clientId`` cookie unless the
request already presented one.  Nothing is stored server side: the
decision is a pure function of whether the incoming cookie exists.
``get_client_session`` turns the incoming cookie into an explicit
``ClientSession`` value that handlers pass back out when building
their response.
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Optional

from fastapi import Request, Response

from .config import settings


logger = logging.getLogger(__name__)


def issue_client_id(existing: Optional[str]) -> Optional[str]:
    """Return a new client identifier, or ``None`` if one was presented."""
    if existing:
        return None
    client_id = str(uuid.uuid4())
    logger.info("Generated cookie: %s", client_id)
    return client_id


@dataclass(frozen=True)
class ClientSession:
    """Incoming client identifier plus the token minted for this request, if any."""

    client_id: Optional[str]
    issued: Optional[str] = None

    def apply(self, response: Response) -> Response:
        if self.issued is not None:
            response.set_cookie(key=settings.client_cookie, value=self.issued)
        return response

    def headers(self) -> dict:
        """Headers carrying the cookie, for responses built from an ``HTTPException``."""
        response = self.apply(Response())
        return {key: value for key, value in response.headers.items() if key == "set-cookie"}


async def get_client_session(request: Request) -> ClientSession:
    """FastAPI dependency resolving the client cookie for the current request."""
    client_id = request.cookies.get(settings.client_cookie)
    return ClientSession(client_id=client_id, issued=issue_client_id(client_id))
