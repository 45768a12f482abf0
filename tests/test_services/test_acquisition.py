"""Tests for header acquisition from files and URLs."""

import asyncio

import httpx
import pytest

from mime_sniffer.services.acquisition import fetch_remote_header, read_local_header
from mime_sniffer.utils.exceptions import AcquisitionError


def _client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestReadLocalHeader:

    def test_reads_first_bytes(self, tmp_path):
        path = tmp_path / "data.bin"
        path.write_bytes(bytes(range(64)))
        assert asyncio.run(read_local_header(str(path), 12)) == bytes(range(12))

    def test_short_file_returns_short_buffer(self, tmp_path):
        path = tmp_path / "short.bin"
        path.write_bytes(b"abc")
        assert asyncio.run(read_local_header(str(path), 12)) == b"abc"

    def test_missing_file(self, tmp_path):
        path = str(tmp_path / "missing.bin")
        with pytest.raises(AcquisitionError, match="Failed to read") as exc_info:
            asyncio.run(read_local_header(path, 12))
        assert exc_info.value.source == path
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_directory(self, tmp_path):
        with pytest.raises(AcquisitionError):
            asyncio.run(read_local_header(str(tmp_path), 12))

    def test_generous_timeout(self, tmp_path):
        path = tmp_path / "data.bin"
        path.write_bytes(b"%PDF-1.5")
        assert asyncio.run(read_local_header(str(path), 12, timeout=30)) == b"%PDF-1.5"


class TestFetchRemoteHeader:

    def test_caps_bytes_when_range_ignored(self):
        def handler(request):
            return httpx.Response(200, content=b"x" * 10_000)

        async def run():
            async with _client(handler) as client:
                return await fetch_remote_header("https://example.com/big", 12, client=client)

        assert asyncio.run(run()) == b"x" * 12

    def test_sends_range_header(self):
        seen = {}

        def handler(request):
            seen["range"] = request.headers.get("range")
            seen["encoding"] = request.headers.get("accept-encoding")
            return httpx.Response(206, content=b"0123456789")

        async def run():
            async with _client(handler) as client:
                return await fetch_remote_header("https://example.com/f", 10, client=client)

        assert asyncio.run(run()) == b"0123456789"
        assert seen["range"] == "bytes=0-9"
        assert seen["encoding"] == "identity"

    def test_no_range_header_when_disabled(self):
        seen = {}

        def handler(request):
            seen["range"] = request.headers.get("range")
            seen["encoding"] = request.headers.get("accept-encoding")
            return httpx.Response(200, content=b"abc")

        async def run():
            async with _client(handler) as client:
                return await fetch_remote_header(
                    "https://example.com/f", 12, client=client, use_range=False
                )

        assert asyncio.run(run()) == b"abc"
        assert seen["range"] is None
        assert seen["encoding"] != "identity"

    def test_error_status(self):
        def handler(request):
            return httpx.Response(403)

        async def run():
            async with _client(handler) as client:
                return await fetch_remote_header("https://example.com/f", 12, client=client)

        with pytest.raises(AcquisitionError, match="HTTP 403") as exc_info:
            asyncio.run(run())
        assert exc_info.value.details["status_code"] == 403

    def test_transport_error(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        async def run():
            async with _client(handler) as client:
                return await fetch_remote_header("https://example.com/f", 12, client=client)

        with pytest.raises(AcquisitionError, match="Failed to fetch"):
            asyncio.run(run())

    def test_supplied_client_left_open(self):
        def handler(request):
            return httpx.Response(200, content=b"%PDF")

        async def run():
            client = _client(handler)
            await fetch_remote_header("https://example.com/f", 12, client=client)
            closed = client.is_closed
            await client.aclose()
            return closed

        assert asyncio.run(run()) is False

    def test_blocked_private_network(self):
        with pytest.raises(AcquisitionError, match="non-public"):
            asyncio.run(
                fetch_remote_header(
                    "http://169.254.169.254/latest/meta-data/",
                    12,
                    block_private_networks=True,
                )
            )
