"""Cargos API endpoints.

Write endpoints answer with the manager's result code as a bare JSON
integer: ``0`` on success, the operation-specific code with 400 otherwise.
"""

from __future__ import annotations

from fastapi import APIRouter, Query, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from bricolaje.api.dependencies import CargoManagerDep
from bricolaje.errors import NotFoundError
from bricolaje.managers.cargo import CreateResult, DeleteResult, UpdateResult
from bricolaje.models.cargo import Cargo

router = APIRouter()


# Request/Response Models


class CreateCargoRequest(BaseModel):
    """Request to create a cargo.

    Both fields are optional at the schema level so that the manager decides
    the outcome (an id or a missing description yield result codes, not 422).
    """

    id: int | None = None
    descripcion: str | None = None


class UpdateCargoRequest(BaseModel):
    """Request to replace a cargo."""

    id: int | None = Field(
        default=None,
        description="Ignored; the cargo is selected by the path id.",
    )
    descripcion: str


class CargoResponse(BaseModel):
    """Cargo response model."""

    id: int
    descripcion: str


_RESULT_RESPONSES = {
    400: {"description": "Operation rejected; body is the result code"},
}


def _cargo_to_response(cargo: Cargo) -> CargoResponse:
    """Convert Cargo model to API response."""
    return CargoResponse(id=cargo.id, descripcion=cargo.descripcion)


def _result_response(
    result: CreateResult | UpdateResult | DeleteResult,
    success_status: int,
) -> JSONResponse:
    status_code = success_status if result == 0 else 400
    return JSONResponse(content=int(result), status_code=status_code)


# Endpoints


@router.post("", status_code=201, response_model=int, responses=_RESULT_RESPONSES)
async def create_cargo(
    request: CreateCargoRequest,
    cargo_mgr: CargoManagerDep,
) -> JSONResponse:
    """Create a new cargo.

    Example body: ``{"descripcion": "Supervisor"}``
    """
    result = await cargo_mgr.create(Cargo(id=request.id, descripcion=request.descripcion))
    return _result_response(result, 201)


@router.get("", response_model=list[CargoResponse])
async def list_cargos(
    cargo_mgr: CargoManagerDep,
    descripcion: str | None = Query(None),
    coincidencia_exacta: bool = Query(False, alias="coincidenciaExacta"),
) -> list[CargoResponse]:
    """List cargos.

    - No ``descripcion``: every cargo.
    - ``descripcion`` with ``coincidenciaExacta=true``: exact matches only.
    - ``descripcion`` otherwise: cargos whose description contains it.
    """
    if descripcion is None:
        cargos = await cargo_mgr.list_all()
    elif coincidencia_exacta:
        cargos = await cargo_mgr.list_by_exact_description(descripcion)
    else:
        cargos = await cargo_mgr.list_by_description_contains(descripcion)

    return [_cargo_to_response(c) for c in cargos]


@router.get(
    "/{cargo_id}",
    response_model=CargoResponse,
    responses={404: {"description": "Cargo not found (empty body)"}},
)
async def get_cargo(
    cargo_id: int,
    cargo_mgr: CargoManagerDep,
) -> CargoResponse | Response:
    """Get cargo details."""
    try:
        cargo = await cargo_mgr.get(cargo_id)
    except NotFoundError:
        return Response(status_code=404)
    return _cargo_to_response(cargo)


@router.put("/{cargo_id}", response_model=int, responses=_RESULT_RESPONSES)
async def update_cargo(
    cargo_id: int,
    request: UpdateCargoRequest,
    cargo_mgr: CargoManagerDep,
) -> JSONResponse:
    """Replace a cargo. The path id wins over any id in the body."""
    result = await cargo_mgr.update(Cargo(id=cargo_id, descripcion=request.descripcion))
    return _result_response(result, 200)


@router.delete("/{cargo_id}", response_model=int, responses=_RESULT_RESPONSES)
async def delete_cargo(
    cargo_id: int,
    cargo_mgr: CargoManagerDep,
) -> JSONResponse:
    """Delete a cargo."""
    result = await cargo_mgr.delete(cargo_id)
    return _result_response(result, 200)
