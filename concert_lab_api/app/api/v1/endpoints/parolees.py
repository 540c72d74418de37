"""
Parolee endpoints for API v1.

These routes provide CRUD operations for parolee records.  Listing is
ordered by first name and can be narrowed to one first name with the
``first_name`` query parameter.
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from concert_lab_api.app.schemas.parolee import ParoleeCreate, ParoleeRead, ParoleeUpdate
from concert_lab_api.app.services.parolee_service import ParoleeService


router = APIRouter()


@router.post("", response_model=ParoleeRead, status_code=status.HTTP_201_CREATED)
async def create_parolee(parolee: ParoleeCreate) -> ParoleeRead:
    """Create a new parolee.  The database assigns its id."""
    return await ParoleeService.create_parolee(parolee)


@router.get("", response_model=List[ParoleeRead])
async def list_parolees(
    first_name: Optional[str] = Query(None),
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
) -> List[ParoleeRead]:
    """List parolees ordered by first name.

    - **first_name**: only return parolees with exactly this first name.
    - **limit**, **offset**: pagination.
    """
    return await ParoleeService.list_parolees(first_name=first_name, limit=limit, offset=offset)


@router.get("/{parolee_id}", response_model=ParoleeRead)
async def get_parolee(parolee_id: int) -> ParoleeRead:
    """Retrieve a single parolee.  Raises 404 if not found."""
    try:
        return await ParoleeService.get_parolee(parolee_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.put("/{parolee_id}", response_model=ParoleeRead)
async def update_parolee(parolee_id: int, updates: ParoleeUpdate) -> ParoleeRead:
    """Update an existing parolee.

    Partial updates are supported; any unspecified fields remain
    unchanged.
    """
    update_dict = updates.model_dump(exclude_unset=True)
    try:
        return await ParoleeService.update_parolee(parolee_id, update_dict)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{parolee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_parolee(parolee_id: int) -> None:
    try:
        await ParoleeService.delete_parolee(parolee_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return None
