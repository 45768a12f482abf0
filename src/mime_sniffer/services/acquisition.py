"""Read the leading bytes of local files and remote resources."""

import asyncio

import httpx

from mime_sniffer.utils.exceptions import AcquisitionError
from mime_sniffer.utils.url_validation import is_public_url


def _read_prefix(path: str, size: int) -> bytes:
    with open(path, "rb") as fh:
        return fh.read(size)


async def read_local_header(
    path: str,
    size: int,
    timeout: float | None = None,
) -> bytes:
    """Read up to ``size`` bytes from the start of a local file.

    Files shorter than ``size`` yield a shorter buffer.

    Raises:
        AcquisitionError: If the file cannot be opened or read in time.
    """
    try:
        return await asyncio.wait_for(
            asyncio.to_thread(_read_prefix, path, size),
            timeout=timeout,
        )
    except asyncio.TimeoutError as e:
        raise AcquisitionError(
            f"Timed out reading {path} after {timeout}s",
            source=path,
            details={"timeout": timeout},
        ) from e
    except (OSError, ValueError) as e:
        raise AcquisitionError(
            f"Failed to read {path}: {e}", source=path
        ) from e


async def _stream_prefix(
    client: httpx.AsyncClient,
    url: str,
    size: int,
    use_range: bool,
) -> bytes:
    headers = {}
    if use_range:
        # A range over a compressed representation would not decode
        headers = {"Range": f"bytes=0-{size - 1}", "Accept-Encoding": "identity"}
    buffer = bytearray()

    async with client.stream("GET", url, headers=headers) as response:
        response.raise_for_status()
        # Servers may ignore Range and send the whole body; stop early either way
        async for chunk in response.aiter_bytes():
            buffer.extend(chunk)
            if len(buffer) >= size:
                break

    return bytes(buffer[:size])


async def fetch_remote_header(
    url: str,
    size: int,
    client: httpx.AsyncClient | None = None,
    timeout: float | None = None,
    use_range: bool = True,
    block_private_networks: bool = False,
) -> bytes:
    """Fetch up to ``size`` bytes from the start of a remote resource.

    Args:
        url: http(s) URL of the resource.
        size: Maximum number of bytes to return.
        client: Client to reuse; left open. A temporary one is used if None.
        timeout: Timeout in seconds for a temporary client (None = no limit).
        use_range: Send a ``Range`` header asking for the first bytes only.
        block_private_networks: Refuse URLs resolving to internal addresses.

    Raises:
        AcquisitionError: On transport errors, non-2xx responses or a
            blocked address.
    """
    if block_private_networks and not is_public_url(url):
        raise AcquisitionError(
            f"Refusing to fetch non-public URL: {url}", source=url
        )

    try:
        if client is not None:
            return await _stream_prefix(client, url, size, use_range)

        async with httpx.AsyncClient(
            follow_redirects=True,
            timeout=httpx.Timeout(timeout),
        ) as temp_client:
            return await _stream_prefix(temp_client, url, size, use_range)

    except httpx.HTTPStatusError as e:
        raise AcquisitionError(
            f"HTTP {e.response.status_code} fetching {url}",
            source=url,
            details={"status_code": e.response.status_code},
        ) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise AcquisitionError(
            f"Failed to fetch {url}: {e}", source=url
        ) from e
