"""MIME type resolution: content signature, then extension, then default."""

import enum
import logging
from dataclasses import dataclass

import httpx
import structlog

from mime_sniffer.config import SnifferSettings, get_settings
from mime_sniffer.core.extensions import (
    extension_from_source,
    is_remote,
    lookup_by_extension,
)
from mime_sniffer.core.signatures import match_signature
from mime_sniffer.services.acquisition import fetch_remote_header, read_local_header
from mime_sniffer.utils.exceptions import AcquisitionError

logger = structlog.wrap_logger(logging.getLogger(__name__))


class DetectionOutcome(str, enum.Enum):
    """Result of inspecting a source's content."""

    MATCHED = "matched"
    NO_MATCH = "no_match"
    ACQUISITION_FAILED = "acquisition_failed"


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of content sniffing for one source."""

    outcome: DetectionOutcome
    mime_type: str | None = None
    error: str | None = None

    @property
    def matched(self) -> bool:
        return self.outcome is DetectionOutcome.MATCHED


class MimeResolver:
    """Resolve the MIME type of a local path or http(s) URL.

    The leading ``header_size`` bytes are checked against the signature
    table first. When nothing matches, or the bytes cannot be read, the
    extension decides, and ``default_mime_type`` is the last resort.
    """

    def __init__(
        self,
        settings: SnifferSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.client = client

    async def _acquire(self, source: str) -> bytes:
        if is_remote(source):
            return await fetch_remote_header(
                source,
                self.settings.header_size,
                client=self.client,
                timeout=self.settings.http_timeout,
                use_range=self.settings.use_range_requests,
                block_private_networks=self.settings.block_private_networks,
            )
        return await read_local_header(
            source,
            self.settings.header_size,
            timeout=self.settings.file_timeout,
        )

    async def detect_content(self, source: str) -> DetectionResult:
        """Sniff the content of ``source`` without any fallback.

        I/O failures are reported as ``ACQUISITION_FAILED``, never raised.
        """
        try:
            header = await self._acquire(source)
        except AcquisitionError as e:
            logger.info(
                "Could not read source content",
                source=source,
                error=e.message,
            )
            return DetectionResult(DetectionOutcome.ACQUISITION_FAILED, error=e.message)

        mime_type = match_signature(header)
        if mime_type is None:
            return DetectionResult(DetectionOutcome.NO_MATCH)
        return DetectionResult(DetectionOutcome.MATCHED, mime_type=mime_type)

    def resolve_from_extension(self, source: str) -> str:
        """Resolve using only the extension of ``source``."""
        extension = extension_from_source(
            source, strip_query=self.settings.strip_url_query
        )
        mime_type = lookup_by_extension(extension) if extension else None
        if mime_type is not None:
            logger.debug("Resolved by extension", source=source, extension=extension)
            return mime_type

        logger.debug("Falling back to default MIME type", source=source, extension=extension)
        return self.settings.default_mime_type

    def resolve_header(self, header: bytes, source: str = "") -> str:
        """Apply the resolution policy to bytes the caller already holds."""
        mime_type = match_signature(header)
        if mime_type is not None:
            return mime_type
        return self.resolve_from_extension(source)

    async def resolve(self, source: str) -> str:
        """Resolve the MIME type of ``source``. Never raises for I/O errors."""
        result = await self.detect_content(source)
        if result.matched:
            return result.mime_type
        return self.resolve_from_extension(source)


_default_resolver: MimeResolver | None = None


def get_resolver() -> MimeResolver:
    """Get the shared resolver built from application settings."""
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = MimeResolver()
    return _default_resolver


async def get_mime_type(source: str) -> str:
    """Resolve the MIME type of a local path or http(s) URL.

    Always returns a MIME string; ``application/octet-stream`` (by
    default) when neither content nor extension are recognised.
    """
    return await get_resolver().resolve(source)
