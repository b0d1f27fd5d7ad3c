"""Unit tests for app lifecycle wiring and error handling in bricolaje.main."""

from __future__ import annotations

from types import SimpleNamespace

import httpx
import pytest

from bricolaje import main as main_module
from bricolaje.errors import NotFoundError


@pytest.mark.asyncio
async def test_lifespan_wires_startup_and_shutdown_in_order(monkeypatch: pytest.MonkeyPatch):
    events: list[str] = []

    async def init_db() -> None:
        events.append("init_db")

    async def close_db() -> None:
        events.append("close_db")

    monkeypatch.setattr(main_module, "init_db", init_db)
    monkeypatch.setattr(main_module, "close_db", close_db)

    app = SimpleNamespace(state=SimpleNamespace())
    async with main_module.lifespan(app):
        events.append("inside")

    assert events == ["init_db", "inside", "close_db"]


@pytest.mark.asyncio
async def test_domain_errors_render_error_envelope():
    app = main_module.create_app()

    @app.get("/boom")
    async def boom() -> None:
        raise NotFoundError("Cargo not found: 7", details={"cargo_id": 7})

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        resp = await client.get("/boom", headers={"X-Request-Id": "req-7"})

    assert resp.status_code == 404
    assert resp.json() == {
        "error": {
            "code": "not_found",
            "message": "Cargo not found: 7",
            "request_id": "req-7",
            "details": {"cargo_id": 7},
        }
    }


def test_cargos_routes_are_registered():
    app = main_module.create_app()
    routes = {
        (method, route.path)
        for route in app.routes
        for method in getattr(route, "methods", ())
    }

    assert ("POST", "/cargos") in routes
    assert ("GET", "/cargos") in routes
    assert ("GET", "/cargos/{cargo_id}") in routes
    assert ("PUT", "/cargos/{cargo_id}") in routes
    assert ("DELETE", "/cargos/{cargo_id}") in routes
