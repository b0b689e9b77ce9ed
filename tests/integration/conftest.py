from __future__ import annotations

import asyncio
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List

import httpx
import pytest
import requests
import yaml

from xmlmap import MessageBody, read_message

CASES_PATH = Path(__file__).resolve().parent / "cases.yml"


def load_cases() -> List[Dict[str, Any]]:
    return yaml.safe_load(CASES_PATH.read_text(encoding="utf-8"))


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    if "case" in metafunc.fixturenames:
        cases = load_cases()
        metafunc.parametrize("case", cases, ids=[case["name"] for case in cases])


@pytest.fixture(scope="session")
def cases_by_name() -> Dict[str, Dict[str, Any]]:
    return {case["name"]: case for case in load_cases()}


@pytest.fixture(scope="session")
def local_case_server(cases_by_name: Dict[str, Dict[str, Any]]) -> Iterator[str]:
    class Handler(BaseHTTPRequestHandler):
        def do_GET(self) -> None:  # noqa: N802
            name = self.path.rsplit("/", 1)[-1]
            case = cases_by_name.get(name)
            if case is None:
                self.send_response(404)
                self.send_header("Content-Type", "text/plain")
                self.end_headers()
                self.wfile.write(b"not found")
                return
            payload = case["body"].encode("utf-8")
            self.send_response(200)
            self.send_header("Content-Type", case["content_type"])
            self.send_header("Content-Length", str(len(payload)))
            self.end_headers()
            self.wfile.write(payload)

        def log_message(self, format: str, *args: Any) -> None:  # noqa: A003
            return

    server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        host, port = server.server_address
        yield f"http://{host}:{port}"
    finally:
        server.shutdown()
        thread.join(timeout=1)


def _fetch_httpx(url: str) -> MessageBody:
    with httpx.Client(timeout=5.0) as client:
        return read_message(client.get(url))


def _fetch_httpx_async(url: str) -> MessageBody:
    async def _fetch() -> MessageBody:
        async with httpx.AsyncClient(timeout=5.0) as client:
            return read_message(await client.get(url))

    return asyncio.run(_fetch())


def _fetch_requests(url: str) -> MessageBody:
    with requests.Session() as session:
        return read_message(session.get(url, timeout=5.0))


FETCHERS: Dict[str, Callable[[str], MessageBody]] = {
    "httpx": _fetch_httpx,
    "httpx-async": _fetch_httpx_async,
    "requests": _fetch_requests,
}


@pytest.fixture(params=sorted(FETCHERS))
def fetch(request: pytest.FixtureRequest, local_case_server: str) -> Callable[[str], MessageBody]:
    fetcher = FETCHERS[request.param]

    def _fetch(case_name: str) -> MessageBody:
        return fetcher(f"{local_case_server}/cases/{case_name}")

    return _fetch
