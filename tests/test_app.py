from fastapi import APIRouter
from httpx import ASGITransport, AsyncClient
from tests.fakes import url_prefix


async def test_health(ac_client):
    resp = await ac_client.get(f"{url_prefix}/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


async def test_request_id_is_echoed(ac_client):
    resp = await ac_client.get(f"{url_prefix}/health", headers={"X-Request-ID": "req-42"})
    assert resp.headers["X-Request-ID"] == "req-42"

    resp = await ac_client.get(f"{url_prefix}/health")
    assert resp.headers["X-Request-ID"]


async def test_malformed_json_is_400(ac_client):
    resp = await ac_client.post(f"{url_prefix}/auth/verify-otp", content=b"{not json",
                                headers={"Content-Type": "application/json"})

    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid request body"


async def test_unknown_route_is_404(ac_client):
    resp = await ac_client.get(f"{url_prefix}/nope")

    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found"}


async def test_unhandled_exception_is_500(app):
    router = APIRouter()

    @router.get("/boom")
    async def boom():
        raise RuntimeError("kaput")

    app.include_router(router)

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.get("/boom", headers={"X-Request-ID": "req-500"})
        anon = await ac.get("/boom")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error", "message": "kaput"}
    assert resp.headers["X-Request-ID"] == "req-500"
    assert anon.status_code == 500
    assert anon.headers["X-Request-ID"]
