"""
Response media negotiation for the concert resource.

Responses are JSON unless the client asks for the binary object
serialization type, in which case the JSON-compatible payload is
encoded with ``pickle``.  Request bodies are only ever read as JSON;
unpickling client supplied data is never done.
"""

import pickle
from typing import Any, Mapping, Optional

from fastapi import Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


SERIALIZED_OBJECT = "application/x-python-serialized-object"


def wants_serialized(request: Request) -> bool:
    accept = request.headers.get("accept", "")
    return any(part.split(";")[0].strip() == SERIALIZED_OBJECT for part in accept.split(","))


def render(
    request: Request,
    content: Any,
    status_code: int = 200,
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    """Build a response for ``content`` in the media type the client accepts."""
    payload = jsonable_encoder(content)
    if wants_serialized(request):
        return Response(
            content=pickle.dumps(payload),
            status_code=status_code,
            headers=dict(headers or {}),
            media_type=SERIALIZED_OBJECT,
        )
    return JSONResponse(content=payload, status_code=status_code, headers=dict(headers or {}))
