"""Unit tests for HttpPathRevalidator."""

import json

import httpx
import pytest

from forum.adapter.error import CacheRevalidationError
from forum.adapter.revalidation import HttpPathRevalidator

URL = "https://forum.example.com/api/revalidate"


class TestHttpPathRevalidator:
    """Tests for HttpPathRevalidator against a mocked transport."""

    @pytest.mark.asyncio
    async def test_posts_path_with_secret(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"revalidated": True})

        revalidator = HttpPathRevalidator(
            URL, secret="s3cret", transport=httpx.MockTransport(handler)
        )

        await revalidator.revalidate("/question/42")

        assert len(seen) == 1
        assert seen[0].method == "POST"
        assert str(seen[0].url) == URL
        assert seen[0].headers["X-Revalidate-Secret"] == "s3cret"
        assert json.loads(seen[0].content) == {"path": "/question/42"}

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(401))
        revalidator = HttpPathRevalidator(URL, secret="wrong", transport=transport)

        with pytest.raises(CacheRevalidationError, match="status 401"):
            await revalidator.revalidate("/question/42")

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        revalidator = HttpPathRevalidator(
            URL, secret="s3cret", transport=httpx.MockTransport(handler)
        )

        with pytest.raises(CacheRevalidationError) as exc_info:
            await revalidator.revalidate("/question/42")

        assert exc_info.value.path == "/question/42"

    @pytest.mark.asyncio
    async def test_disabled_sends_nothing(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200)

        revalidator = HttpPathRevalidator(
            URL,
            secret="s3cret",
            enabled=False,
            transport=httpx.MockTransport(handler),
        )

        await revalidator.revalidate("/question/42")

        assert seen == []
