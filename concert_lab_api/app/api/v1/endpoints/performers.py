"""
Performer endpoints for API v1.

CRUD operations over the ``performers`` table.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Query, status

from concert_lab_api.app.schemas.performer import PerformerCreate, PerformerRead, PerformerUpdate
from concert_lab_api.app.services.performer_service import PerformerService


router = APIRouter()


@router.post("", response_model=PerformerRead, status_code=status.HTTP_201_CREATED)
async def create_performer(performer: PerformerCreate) -> PerformerRead:
    return await PerformerService.create_performer(performer)


@router.get("", response_model=List[PerformerRead])
async def list_performers(
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
) -> List[PerformerRead]:
    return await PerformerService.list_performers(limit=limit, offset=offset)


@router.get("/{performer_id}", response_model=PerformerRead)
async def get_performer(performer_id: int) -> PerformerRead:
    try:
        return await PerformerService.get_performer(performer_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.put("/{performer_id}", response_model=PerformerRead)
async def update_performer(performer_id: int, updates: PerformerUpdate) -> PerformerRead:
    """Update a performer.  Unspecified fields remain unchanged."""
    update_dict = updates.model_dump(exclude_unset=True)
    try:
        return await PerformerService.update_performer(performer_id, update_dict)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{performer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_performer(performer_id: int) -> None:
    try:
        await PerformerService.delete_performer(performer_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return None
