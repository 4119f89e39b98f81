"""Failures talking to the administrator service."""

import httpx
import pytest


@pytest.mark.asyncio
async def test_connection_refused_is_bad_gateway(client, admin):
    admin.fail("GET", "/authors/", httpx.ConnectError("Connection refused"))

    resp = await client.get("/authors")
    assert resp.status_code == 502
    assert "unreachable" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_timeout_is_gateway_timeout(client, admin):
    admin.fail("GET", "/book/1", httpx.ReadTimeout("timed out"))

    resp = await client.get("/book/1")
    assert resp.status_code == 504
    assert "timed out" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_server_error_is_relayed(client, admin):
    admin.reply("POST", "/book", status_code=500, text="database is down")

    resp = await client.post("/book", json={"title": "Dune"})
    assert resp.status_code == 500
    assert resp.text == "database is down"
    assert resp.headers["content-type"].startswith("text/plain")


@pytest.mark.asyncio
async def test_non_json_body_is_bad_gateway(client, admin):
    admin.reply("GET", "/author/1", text="<html>oops</html>")

    resp = await client.get("/author/1")
    assert resp.status_code == 502
    assert resp.json()["detail"].startswith("Unexpected response")


@pytest.mark.asyncio
async def test_wrong_shape_is_bad_gateway(client, admin):
    admin.reply("GET", "/authors/", json={"id": 1, "name": "Not a list"})

    resp = await client.get("/authors")
    assert resp.status_code == 502


@pytest.mark.asyncio
async def test_empty_success_body_passes_status_through(client, admin):
    admin.reply("PUT", "/author/1", status_code=204)

    resp = await client.put("/author/1", json={"name": "Anon"})
    assert resp.status_code == 204
    assert resp.content == b""


@pytest.mark.asyncio
async def test_redirect_location_is_relayed(client, admin):
    admin.reply("GET", "/author/1", status_code=301, headers={"Location": "http://admin/author/2"})

    resp = await client.get("/author/1")
    assert resp.status_code == 301
    assert resp.headers["location"] == "http://admin/author/2"
