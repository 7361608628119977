"""Shared fixtures: a fake Judge0 endpoint behind httpx.MockTransport."""

import asyncio

import httpx
import pytest

from utils.judge import execute

RealAsyncClient = httpx.AsyncClient


class FakeJudge0:
    """Records every request and answers with `response` or raises `error`."""

    def __init__(self):
        self.requests = []
        self.response = httpx.Response(200, json={"compile_output": None, "stdout": None})
        self.error = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response

    def client(self, **kwargs) -> httpx.AsyncClient:
        return RealAsyncClient(transport=httpx.MockTransport(self.handler), **kwargs)

    def execute(self, source_code, language):
        async def _run():
            async with self.client() as client:
                return await execute(source_code, language, client)
        return asyncio.run(_run())


@pytest.fixture(autouse=True)
def judge0_env(monkeypatch):
    monkeypatch.setenv("RAPIDAPI_KEY", "test-key")
    monkeypatch.delenv("JUDGE0_URL", raising=False)
    monkeypatch.delenv("JUDGE0_TIMEOUT", raising=False)


@pytest.fixture
def judge0():
    return FakeJudge0()
