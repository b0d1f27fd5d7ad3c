"""HTTP API router."""

from fastapi import APIRouter

from bricolaje.api.cargos import router as cargos_router

router = APIRouter()

router.include_router(cargos_router, prefix="/cargos", tags=["cargos"])
