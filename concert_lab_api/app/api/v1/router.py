"""
Top-level router for version 1 of the API.

This router aggregates the domain-specific routers (concerts,
performers, parolees).  When new domains are introduced, update this
file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import concerts, parolees, performers

router = APIRouter()

router.include_router(concerts.router, prefix="/concerts", tags=["concerts"])
router.include_router(performers.router, prefix="/performers", tags=["performers"])
router.include_router(parolees.router, prefix="/parolees", tags=["parolees"])
