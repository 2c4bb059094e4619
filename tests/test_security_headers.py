import asyncio
from starlette.requests import Request
from starlette.responses import Response

import app.api as api_module


def test_security_headers_applied():
    async def run_test():
        async def call_next(_request: Request) -> Response:
            return Response()

        scope = {
            "type": "http",
            "method": "GET",
            "path": "/",
            "headers": [],
            "query_string": b"",
        }
        request = Request(scope)
        resp = await api_module.add_security_headers(request, call_next)

        assert resp.status_code == 200
        assert resp.headers.get("X-Content-Type-Options") == "nosniff"
        assert resp.headers.get("X-Frame-Options") == "SAMEORIGIN"

    asyncio.run(run_test())


def test_root_greeting_with_headers(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.text == "Hello, World!"
    assert resp.headers.get("X-Content-Type-Options") == "nosniff"
    assert resp.headers.get("X-Frame-Options") == "SAMEORIGIN"


def test_unknown_route_renders_message(client):
    resp = client.get("/nowhere")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Not Found"}
