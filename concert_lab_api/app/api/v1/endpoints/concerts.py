"""
Concert endpoints for API v1.

- ``GET    /concerts/{id}``          retrieve one concert (200 or 404)
- ``GET    /concerts?start&size``   retrieve the concerts whose ids lie
  in ``[start, start + size)`` (200, possibly empty)
- ``POST   /concerts``               create a concert (201 with a
  ``Location`` header naming the new concert)
- ``DELETE /concerts``               delete all concerts (204)

Every response, including 404s, sets the client cookie when the
request did not carry one.  Bodies are JSON unless the client accepts
the serialized object media type (see ``core.media``).
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from concert_lab_api.app.core.config import settings
from concert_lab_api.app.core.media import render
from concert_lab_api.app.core.session import ClientSession, get_client_session
from concert_lab_api.app.schemas.concert import ConcertCreate, ConcertRead
from concert_lab_api.app.services.concert_store import ConcertNotFound, ConcertStore


router = APIRouter()


def get_concert_store(request: Request) -> ConcertStore:
    """Return the store owned by the running application."""
    return request.app.state.concert_store


@router.get("/{concert_id}", response_model=ConcertRead)
async def retrieve_concert(
    concert_id: int,
    request: Request,
    store: ConcertStore = Depends(get_concert_store),
    session: ClientSession = Depends(get_client_session),
) -> Response:
    """Retrieve a single concert by its id.  Raises 404 if it is unknown."""
    try:
        concert = store.get(concert_id)
    except ConcertNotFound as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(e), headers=session.headers()
        ) from e
    return session.apply(render(request, concert))


@router.get("", response_model=List[ConcertRead])
async def retrieve_concerts(
    request: Request,
    start: int = Query(1, ge=0),
    size: int = Query(10, ge=0),
    store: ConcertStore = Depends(get_concert_store),
    session: ClientSession = Depends(get_client_session),
) -> Response:
    """Retrieve concerts with ids from ``start`` over ``size`` successive ids."""
    return session.apply(render(request, store.list(start, size)))


@router.post("", response_model=ConcertRead, status_code=status.HTTP_201_CREATED)
async def create_concert(
    concert: ConcertCreate,
    request: Request,
    store: ConcertStore = Depends(get_concert_store),
    session: ClientSession = Depends(get_client_session),
) -> Response:
    """Create a concert.  The store assigns its id."""
    created = store.create(concert.title, concert.date)
    location = f"{settings.api_prefix}/concerts/{created.id}"
    return session.apply(
        render(request, created, status_code=status.HTTP_201_CREATED, headers={"Location": location})
    )


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_all_concerts(
    store: ConcertStore = Depends(get_concert_store),
    session: ClientSession = Depends(get_client_session),
) -> Response:
    """Delete every concert and restart identifiers from 1."""
    store.delete_all()
    return session.apply(Response(status_code=status.HTTP_204_NO_CONTENT))
