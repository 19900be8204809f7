# File: tests/test_sifter.py
# Orchestrator tests against a local aiohttp application
from __future__ import annotations

import asyncio
import time

import pytest
from aiohttp import ClientSession, web

from js_sifter.config import SifterConfig
from js_sifter.crawler.fetcher import Fetcher
from js_sifter.crawler.sifter import Sifter
from js_sifter.errors import ParseError, TransportError
from js_sifter.extract.noise import load_stoplist
from js_sifter.models import AnalysisResult

# --------------------------------------------------------------------------- #
#                               Helper utilities                              #
# --------------------------------------------------------------------------- #

#: seconds a "slow" script handler sleeps
SLOW_SLEEP: float = 0.4


def js_response(text: str) -> web.Response:
    return web.Response(text=text, content_type="application/javascript")


def page_response(*sources: str) -> web.Response:
    tags = "".join(f'<script src="{src}"></script>' for src in sources)
    return web.Response(text=f"<html><head>{tags}</head><body></body></html>", content_type="text/html")


def js(text: str):
    """Handler serving a fixed script."""
    async def handler(_):
        return js_response(text)
    return handler


def page(*sources: str):
    """Handler serving a page that references *sources*."""
    async def handler(_):
        return page_response(*sources)
    return handler


def make_config(base: str, **kwargs) -> SifterConfig:
    kwargs.setdefault("timeout", 5.0)
    return SifterConfig(base_url=f"{base}/", user_agent="TestAgent/1.0", **kwargs)


async def collect(config: SifterConfig, stoplist=frozenset()) -> list[AnalysisResult]:
    async with Sifter(config, stoplist) as sifter:
        return [result async for result in sifter.sift()]


def by_identifier(results: list[AnalysisResult]) -> dict[str, AnalysisResult]:
    return {r.reference.identifier: r for r in results}


# --------------------------------------------------------------------------- #
#                                    Tests                                    #
# --------------------------------------------------------------------------- #


@pytest.mark.asyncio()
async def test_failures_are_isolated(serve):
    app = web.Application()
    app.router.add_get("/", page("/static/a.js", "/static/missing.js", "/static/c.js", "bad.js"))
    app.router.add_get("/static/a.js", js('fetch("/api/v1/users");'))
    app.router.add_get(
        "/static/c.js",
        js('function f(){ return "token123"; } f("unused-arg-literal-is-reachable");'),
    )
    app.router.add_get("/bad.js", js("function ("))
    base = await serve(app)

    results = await collect(make_config(base))

    assert len(results) == 4
    found = by_identifier(results)
    assert found["a.js"].strings == ("/api/v1/users",)
    assert found["c.js"].strings == ("token123", "unused-arg-literal-is-reachable")
    missing = found["missing.js"]
    assert not missing.ok
    assert isinstance(missing.error, TransportError)
    assert missing.error.status == 404
    assert isinstance(found["bad.js"].error, ParseError)


@pytest.mark.asyncio()
async def test_root_failure_aborts_run(serve):
    hits = {"script": 0}

    async def script(_):
        hits["script"] += 1
        return js_response('f("x");')

    async def failing_root(_):
        return web.Response(status=500)

    app = web.Application()
    app.router.add_get("/", failing_root)
    app.router.add_get("/a.js", script)
    base = await serve(app)

    with pytest.raises(TransportError) as exc_info:
        await collect(make_config(base))
    assert exc_info.value.status == 500
    assert hits["script"] == 0


@pytest.mark.asyncio()
async def test_unreachable_root(unused_tcp_port):
    config = make_config(f"http://127.0.0.1:{unused_tcp_port}", timeout=2.0)
    with pytest.raises(TransportError) as exc_info:
        await collect(config)
    assert exc_info.value.status is None


@pytest.mark.asyncio()
async def test_page_without_scripts(serve):
    app = web.Application()
    app.router.add_get("/", page())
    base = await serve(app)

    assert await collect(make_config(base)) == []


@pytest.mark.asyncio()
async def test_results_arrive_in_completion_order(serve):
    async def slow(_):
        await asyncio.sleep(SLOW_SLEEP)
        return js_response('f("slow");')

    app = web.Application()
    app.router.add_get("/", page("slow.js", "fast.js"))
    app.router.add_get("/slow.js", slow)
    app.router.add_get("/fast.js", js('f("fast");'))
    base = await serve(app)

    results = await collect(make_config(base))
    assert [r.reference.identifier for r in results] == ["fast.js", "slow.js"]


@pytest.mark.asyncio()
async def test_scripts_are_fetched_concurrently(serve):
    async def slow(_):
        await asyncio.sleep(SLOW_SLEEP)
        return js_response('f("x");')

    app = web.Application()
    app.router.add_get("/", page("s1.js", "s2.js", "s3.js"))
    for name in ("s1", "s2", "s3"):
        app.router.add_get(f"/{name}.js", slow)
    base = await serve(app)

    start = time.perf_counter()
    results = await collect(make_config(base))
    elapsed = time.perf_counter() - start

    assert len(results) == 3
    assert elapsed < SLOW_SLEEP * 2


@pytest.mark.asyncio()
async def test_max_concurrency_bounds_fan_out(serve):
    state = {"active": 0, "peak": 0}

    async def tracked(_):
        state["active"] += 1
        state["peak"] = max(state["peak"], state["active"])
        await asyncio.sleep(0.05)
        state["active"] -= 1
        return js_response('f("x");')

    app = web.Application()
    app.router.add_get("/", page("a.js", "b.js", "c.js"))
    for name in ("a", "b", "c"):
        app.router.add_get(f"/{name}.js", tracked)
    base = await serve(app)

    results = await collect(make_config(base, max_concurrency=1))
    assert len(results) == 3
    assert state["peak"] == 1


@pytest.mark.asyncio()
async def test_script_timeout_is_a_transport_error(serve):
    async def hanging(_):
        await asyncio.sleep(2)
        return js_response('f("late");')

    app = web.Application()
    app.router.add_get("/", page("hang.js"))
    app.router.add_get("/hang.js", hanging)
    base = await serve(app)

    (result,) = await collect(make_config(base, timeout=0.5))
    assert isinstance(result.error, TransportError)
    assert result.error.status_text == "unknown"


@pytest.mark.asyncio()
@pytest.mark.parametrize(
    "spoof,expected", [(False, "TestAgent/1.0"), (True, "Chrome/131.0.0.0")]
)
async def test_network_identity(serve, spoof, expected):
    seen: list[str] = []

    async def root(request):
        seen.append(request.headers.get("User-Agent", ""))
        return page_response()

    app = web.Application()
    app.router.add_get("/", root)
    base = await serve(app)

    await collect(make_config(base, spoof=spoof))
    assert expected in seen[0]


@pytest.mark.asyncio()
async def test_coarse_mode_dumps_tokens_through_stoplist(serve):
    app = web.Application()
    app.router.add_get("/", page("bundle.js"))
    app.router.add_get(
        "/bundle.js", js('var endpoint = { url: "/api/keys" }; endpoint.url.length;')
    )
    base = await serve(app)

    (result,) = await collect(make_config(base, mode="coarse"), load_stoplist())
    assert {"endpoint", "url", "/api/keys"} <= set(result.strings)
    assert "length" not in result.strings


@pytest.mark.asyncio()
async def test_early_exit_cancels_pending_tasks(serve):
    async def slow(_):
        await asyncio.sleep(SLOW_SLEEP)
        return js_response('f("slow");')

    app = web.Application()
    app.router.add_get("/", page("fast.js", "slow.js"))
    app.router.add_get("/fast.js", js('f("fast");'))
    app.router.add_get("/slow.js", slow)
    base = await serve(app)

    async with Sifter(make_config(base)) as sifter:
        gen = sifter.sift()
        first = await gen.__anext__()
        await gen.aclose()
    assert first.reference.identifier == "fast.js"


@pytest.mark.asyncio()
async def test_unencodable_script_host_does_not_abort_run(serve):
    app = web.Application()
    app.router.add_get("/", page("http://a..b/x.js", "ok.js"))
    app.router.add_get("/ok.js", js('f("good");'))
    base = await serve(app)

    results = await collect(make_config(base))
    assert [(r.reference.identifier, r.strings) for r in results] == [("ok.js", ("good",))]


@pytest.mark.asyncio()
@pytest.mark.parametrize("url", ["http://a..b/x.js", "http://exa mple.com/x.js"])
async def test_fetcher_reports_malformed_urls_as_transport_errors(url):
    async with ClientSession() as session:
        with pytest.raises(TransportError) as exc_info:
            await Fetcher(session).fetch(url)
    assert exc_info.value.url == url
    assert exc_info.value.status_text == "unknown"
