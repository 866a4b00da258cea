"""Shared fixtures for the Pwned Passwords tests."""

import pytest
from aiohttp import web

RANGE_BODY = (
    "1E4C9B93F3F0682250B6CF8331B7EE68FD8:3303003\n"
    "4D0591EEAAC5A33064731DBD53F6A819DCE:0\n"
    "6101ED511A094D1E4E515BBF8D32B266090:42\n"
)


@pytest.fixture
def range_body():
    return RANGE_BODY


@pytest.fixture
async def range_server(aiohttp_server):
    """Local range endpoint serving RANGE_BODY for the DA39A and 5BAA6 prefixes.

    Every request is recorded in app["requests"] as (path, headers).
    """
    async def handle_range(request: web.Request) -> web.Response:
        request.app["requests"].append((request.path, request.headers.copy()))
        if request.match_info["prefix"] not in ("DA39A", "5BAA6"):
            raise web.HTTPNotFound()
        return web.Response(text=request.app["body"])

    app = web.Application()
    app["requests"] = []
    app["body"] = RANGE_BODY
    app.router.add_get("/range/{prefix}", handle_range)

    return await aiohttp_server(app)


@pytest.fixture
def range_url(range_server):
    return str(range_server.make_url("/range/"))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep proxy and client settings from the host out of the tests."""
    for name in (
        "HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY",
        "http_proxy", "https_proxy", "all_proxy",
        "PWNEDPASSWORDS_URL", "PWNEDPASSWORDS_TIMEOUT", "PWNEDPASSWORDS_ADD_PADDING",
    ):
        monkeypatch.delenv(name, raising=False)
