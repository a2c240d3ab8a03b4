# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import asyncio
import json
import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor

import httpx
import pytest

from netservice.config import ClientSettings
from netservice.errors import ClientClosedError
from netservice.http.httpx_transport import HttpxTransport, build_timeout
from netservice.http.models import HttpRequest
from netservice.http.shared import SharedTransport
from netservice.models import Failure, Success
from netservice.service import ServiceClient

BASE_URL = "http://service.test"


def _mock_transport(handler, settings=None):
    settings = settings or ClientSettings(base_url=BASE_URL)
    client = httpx.AsyncClient(base_url=settings.base_url, transport=httpx.MockTransport(handler))
    return HttpxTransport(settings, client=client)


def test_build_timeout_uses_connect_and_socket_budgets():
    timeout = build_timeout(ClientSettings())
    assert timeout.connect == 10.0
    assert timeout.read == 15.0
    assert timeout.write == 15.0
    assert timeout.pool == 30.0


def test_httpx_transport_sends_query_headers_and_body():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    transport = _mock_transport(handler, ClientSettings(base_url=BASE_URL, user_agent="UA/1.0"))
    request = HttpRequest(
        url="/things?page=2",
        method="POST",
        headers={"Authorization": "Bearer ", "Content-Type": "application/json"},
        params={"a": "1", "b": "2"},
        body=b'{"x": 1}',
    )

    response = asyncio.run(transport.send(request))

    assert response.status_code == 200
    assert json.loads(response.content) == {"ok": True}
    sent = seen[0]
    assert sent.url.host == "service.test"
    assert sent.url.path == "/things"
    assert sent.url.params.get_list("a") == ["1"]
    assert sent.url.params.get_list("b") == ["2"]
    assert sent.url.params["page"] == "2"
    assert sent.headers["User-Agent"] == "UA/1.0"
    assert sent.headers["Authorization"] == "Bearer"
    assert sent.content == b'{"x": 1}'


def test_httpx_transport_refuses_after_close():
    transport = _mock_transport(lambda request: httpx.Response(200))

    async def run():
        await transport.aclose()
        await transport.send(HttpRequest(url="/"))

    with pytest.raises(ClientClosedError):
        asyncio.run(run())
    assert transport.closed is True


def test_overall_request_timeout_surfaces_as_failure():
    async def slow(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(1)
        return httpx.Response(200, json={})

    settings = ClientSettings(base_url=BASE_URL, request_timeout=0.05)
    client = ServiceClient(transport=_mock_transport(slow, settings), settings=settings)

    result = asyncio.run(client.get("/slow"))

    assert isinstance(result, Failure)
    assert result.error.errors[0].code == 500
    assert "timed out" in result.error.errors[0].message


def test_service_client_over_httpx_round_trip():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/users/7":
            return httpx.Response(200, json={"id": 7})
        return httpx.Response(404, json={"errors": [{"code": 404, "message": "missing"}]})

    settings = ClientSettings(base_url=BASE_URL)
    client = ServiceClient(transport=_mock_transport(handler, settings), settings=settings)

    async def run():
        found = await client.get("/users/7")
        missing = await client.get("/users/8")
        await client.close()
        return found, missing

    found, missing = asyncio.run(run())
    assert found == Success({"id": 7})
    assert isinstance(missing, Failure)
    assert missing.error.errors[0].message == "missing"


class _FakeTransport:
    def __init__(self):
        self.closed = False

    async def send(self, request):  # pragma: no cover - not exercised
        raise AssertionError("unexpected send")

    async def aclose(self):
        self.closed = True


def test_shared_transport_concurrent_first_use_builds_once():
    built = []
    lock = threading.Lock()

    def factory(settings):
        time.sleep(0.01)
        with lock:
            built.append(settings)
        return _FakeTransport()

    shared = SharedTransport(factory)
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        return shared.get()

    with ThreadPoolExecutor(max_workers=8) as pool:
        instances = list(pool.map(lambda _: worker(), range(8)))

    assert len(built) == 1
    assert all(instance is instances[0] for instance in instances)


def test_shared_transport_close_is_terminal_until_reset():
    shared = SharedTransport(lambda settings: _FakeTransport())
    first = shared.get()

    asyncio.run(shared.close())

    assert first.closed is True
    assert shared.closed is True
    with pytest.raises(ClientClosedError):
        shared.get()

    shared.reset()
    assert shared.get() is not first


def test_service_client_without_transport_uses_shared(monkeypatch):
    shared = SharedTransport(lambda settings: _FakeTransport())
    monkeypatch.setattr("netservice.service.get_shared_transport", shared.get)
    monkeypatch.setattr("netservice.service.close_shared_transport", shared.close)

    client = ServiceClient(settings=ClientSettings())
    first_transport = client._get_transport()

    asyncio.run(client.close())

    assert first_transport.closed is True
    assert shared.closed is True
    result = asyncio.run(ServiceClient(settings=ClientSettings()).get("/x"))
    assert isinstance(result, Failure)
    assert result.error.errors[0].message == "Shared transport is closed"


def test_query_parameters_keep_existing_url_query():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url)
        return httpx.Response(200, json=[])

    settings = ClientSettings(base_url=BASE_URL)
    client = ServiceClient(transport=_mock_transport(handler, settings), settings=settings)

    result = asyncio.run(client.get("/things?page=2", {"a": "1", "b": "2"}))

    assert result == Success([])
    url = seen[0]
    assert url.path == "/things"
    assert url.params.get_list("page") == ["2"]
    assert url.params.get_list("a") == ["1"]
    assert url.params.get_list("b") == ["2"]


def test_shared_transport_logs_ignored_settings(caplog):
    shared = SharedTransport(lambda settings: _FakeTransport())
    first = shared.get(ClientSettings(base_url="http://first.test"))

    with caplog.at_level(logging.DEBUG, logger="netservice.http.shared"):
        second = shared.get(ClientSettings(base_url="http://second.test"))

    assert second is first
    assert "ignoring settings" in caplog.text
