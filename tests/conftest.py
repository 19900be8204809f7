# File: tests/conftest.py
from collections.abc import AsyncIterator, Awaitable, Callable
from pathlib import Path

import pytest
import pytest_asyncio
from aiohttp import web

from js_sifter.config import SifterConfig
from js_sifter.parser.js_parser import parse_script


@pytest.fixture()
def stoplist_file(tmp_path) -> Path:
    """
    Create a temporary stoplist extension file.
    """
    path = tmp_path / "stoplist.txt"
    path.write_text("noise\n\n  chatter  \n", encoding="utf-8")
    return path


@pytest.fixture()
def basic_config(tmp_path) -> SifterConfig:
    """
    Return a basic valid SifterConfig writing artifacts under tmp_path.
    """
    return SifterConfig(
        base_url="http://127.0.0.1/",
        timeout=2.0,
        user_agent="TestAgent/1.0",
        output_dir=tmp_path,
    )


@pytest.fixture()
def parse() -> Callable[[str], object]:
    """
    Parse a JavaScript snippet as a classic script.
    """
    return lambda source: parse_script(source)


@pytest_asyncio.fixture
async def serve(unused_tcp_port_factory) -> AsyncIterator[Callable[[web.Application], Awaitable[str]]]:
    """
    Start aiohttp applications on free ports; yields a coroutine returning the base URL.
    Every started application is cleaned up after the test.
    """
    runners: list[web.AppRunner] = []

    async def _serve(app: web.Application) -> str:
        runner = web.AppRunner(app)
        await runner.setup()
        port = unused_tcp_port_factory()
        site = web.TCPSite(runner, "127.0.0.1", port)
        await site.start()
        runners.append(runner)
        return f"http://127.0.0.1:{port}"

    yield _serve

    for runner in runners:
        await runner.cleanup()
