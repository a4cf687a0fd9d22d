"""Tests for src/api/errors.py — global exception handlers."""

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import IntegrityError

from src.api.errors import register_exception_handlers


def _app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/boom")
    async def boom() -> dict:
        raise IntegrityError("INSERT ...", {}, Exception("duplicate key"))

    @app.get("/items/{item_id}")
    async def item(item_id: int) -> dict:
        return {"id": item_id}

    return app


async def _get(path: str):
    async with AsyncClient(transport=ASGITransport(app=_app()), base_url="http://test") as client:
        return await client.get(path)


async def test_database_error_maps_to_500():
    response = await _get("/boom")
    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


async def test_request_validation_error_maps_to_400():
    response = await _get("/items/not-a-number")
    assert response.status_code == 400
    assert response.json()["detail"][0]["loc"] == ["path", "item_id"]
