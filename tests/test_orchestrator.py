# tests/test_orchestrator.py
import asyncio
import json

import httpx

from app.main import app
from sdk.models import ErrorKind, Failure, Success
from sdk.orchestrator import FetchOrchestrator
from sdk.state import ViewState, load_failed, load_succeeded, loading_started

ENDPOINT = "http://test/api/products"

LAPTOP = {"id": 1, "name": "Laptop", "price": 1200.5, "stock": 25,
          "category": {"id": 1, "name": "Electronics", "description": "Electronic devices and gadgets"}}
MOUSE = {"id": 3, "name": "Gaming Mouse", "price": 75.99, "stock": 45,
         "category": {"id": 3, "name": "Gaming", "description": "Gaming peripherals and accessories"}}


def _orchestrator(handler, timeout=1.0, **kwargs):
    return FetchOrchestrator(ENDPOINT, timeout=timeout, transport=httpx.MockTransport(handler), **kwargs)


def test_fetch_success_updates_state():
    seen = []

    def handler(request):
        assert request.method == "GET"
        assert str(request.url) == ENDPOINT
        return httpx.Response(200, json={"data": [LAPTOP, MOUSE], "count": 2})

    o = _orchestrator(handler, on_change=seen.append)
    result = asyncio.run(o.fetch())

    assert isinstance(result, Success)
    assert [p.name for p in o.state.products] == ["Laptop", "Gaming Mouse"]
    assert o.state.reported_count == 2
    assert o.state.loading is False
    assert o.state.error is None
    # loading, then success
    assert [s.loading for s in seen] == [True, False]


def test_fetch_404_sets_error():
    o = _orchestrator(lambda request: httpx.Response(404, json={"message": "No products available"}))
    result = asyncio.run(o.fetch())
    assert isinstance(result, Failure)
    assert o.state.error.kind == ErrorKind.NOT_FOUND
    assert o.state.products == ()


def test_connection_error_is_network_unreachable():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    o = _orchestrator(handler)
    result = asyncio.run(o.fetch())
    assert result.kind == ErrorKind.NETWORK_UNREACHABLE
    assert "connection refused" in result.message
    assert o.state.error == result


def test_slow_response_times_out():
    async def handler(request):
        await asyncio.sleep(1.0)
        return httpx.Response(200, json=[LAPTOP])

    o = _orchestrator(handler, timeout=0.05)
    result = asyncio.run(o.fetch())
    assert result.kind == ErrorKind.TIMEOUT
    assert result.message == "request was cancelled due to timeout"
    assert o.state.error.kind == ErrorKind.TIMEOUT


def test_superseded_response_is_discarded():
    calls = []

    async def handler(request):
        calls.append(request)
        if len(calls) == 1:
            await asyncio.sleep(0.2)
            return httpx.Response(200, json=[LAPTOP])
        return httpx.Response(200, json={"data": [MOUSE], "count": 1})

    o = _orchestrator(handler)

    async def scenario():
        first = asyncio.create_task(o.fetch())
        await asyncio.sleep(0.01)
        second = await o.retry()
        return await first, second

    stale, fresh = asyncio.run(scenario())
    assert stale is None
    assert isinstance(fresh, Success)
    assert [p.id for p in o.state.products] == [3]
    assert len(calls) == 2


def test_late_failure_does_not_overwrite_newer_success():
    calls = []

    async def handler(request):
        calls.append(request)
        if len(calls) == 1:
            await asyncio.sleep(0.2)
            return httpx.Response(500)
        return httpx.Response(200, json=[LAPTOP])

    o = _orchestrator(handler)

    async def scenario():
        first = asyncio.create_task(o.fetch())
        await asyncio.sleep(0.01)
        await o.fetch()
        await first

    asyncio.run(scenario())
    assert o.state.error is None
    assert [p.id for p in o.state.products] == [1]


def test_retry_repeats_same_request():
    calls = []

    def handler(request):
        calls.append(str(request.url))
        if len(calls) == 1:
            return httpx.Response(503)
        return httpx.Response(200, json=[LAPTOP])

    o = _orchestrator(handler)
    first = asyncio.run(o.fetch())
    assert first.kind == ErrorKind.SERVER_ERROR
    second = asyncio.run(o.retry())
    assert isinstance(second, Success)
    assert calls == [ENDPOINT, ENDPOINT]
    assert o.state.error is None


def test_against_the_real_app():
    o = FetchOrchestrator(ENDPOINT, timeout=5, transport=httpx.ASGITransport(app=app))
    result = asyncio.run(o.fetch())
    assert isinstance(result, Success)
    assert result.count == 4
    assert [p.name for p in result.items] == ["Laptop", "Headphones", "Gaming Mouse", "Office Chair"]


def test_reducers():
    s = loading_started(ViewState(error=Failure(kind=ErrorKind.TIMEOUT, message="x")))
    assert s.loading and s.error is None and s.products == ()

    ok = Success(items=(), count=5)
    s2 = load_succeeded(s, ok)
    assert not s2.loading and s2.reported_count == 5

    bad = Failure(kind=ErrorKind.HTTP_ERROR, message="unexpected status 418")
    s3 = load_failed(s2, bad)
    assert s3.error == bad and s3.products == ()


def test_undecodable_body_is_a_failure_not_an_exception():
    def handler(request):
        return httpx.Response(200, headers={"Content-Encoding": "gzip"}, content=b"not gzip at all")

    o = _orchestrator(handler)
    result = asyncio.run(o.fetch())
    assert isinstance(result, Failure)
    assert result.kind == ErrorKind.HTTP_ERROR
    assert o.state.loading is False
    assert o.state.error == result


def test_other_request_errors_are_failures():
    def handler(request):
        raise httpx.DecodingError("bad chunk", request=request)

    o = _orchestrator(handler)
    result = asyncio.run(o.fetch())
    assert result.kind == ErrorKind.HTTP_ERROR
    assert "bad chunk" in result.message
    assert o.state.loading is False
