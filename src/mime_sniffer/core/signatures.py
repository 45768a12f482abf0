"""Magic byte signatures and the prefix matcher.

A buffer is identified by scanning ``SIGNATURES`` in declaration order and
returning the MIME type of the first group with a matching signature.
Table order is therefore the tie-break when a buffer could satisfy more
than one group.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

import structlog

from mime_sniffer.utils.exceptions import SignatureConfigError

logger = structlog.wrap_logger(logging.getLogger(__name__))


@dataclass(frozen=True)
class Signature:
    """A byte pattern expected at ``offset`` in the buffer.

    When ``mask`` is set, only the bits set in ``mask[i]`` are compared at
    position ``i``. Without a mask every bit is significant.
    """

    pattern: bytes
    mask: bytes | None = None
    offset: int = 0

    def __post_init__(self) -> None:
        if not self.pattern:
            raise SignatureConfigError("Signature pattern must not be empty")
        if self.offset < 0:
            raise SignatureConfigError(
                f"Signature offset must be non-negative, got {self.offset}",
                {"offset": self.offset},
            )
        if self.mask is not None and len(self.mask) != len(self.pattern):
            raise SignatureConfigError(
                f"Signature mask length {len(self.mask)} does not match "
                f"pattern length {len(self.pattern)}",
                {"pattern": self.pattern.hex(), "mask": self.mask.hex()},
            )

    @property
    def span(self) -> int:
        """Number of buffer bytes needed to evaluate this signature."""
        return self.offset + len(self.pattern)

    def matches(self, buffer: bytes) -> bool:
        """Check whether ``buffer`` carries this signature.

        A buffer too short to hold the pattern at its offset never matches.
        """
        if len(buffer) < self.span:
            return False

        window = buffer[self.offset:self.span]
        if self.mask is None:
            return window == self.pattern

        return all(
            (byte & mask) == (expected & mask)
            for byte, expected, mask in zip(window, self.pattern, self.mask)
        )


@dataclass(frozen=True)
class SignatureGroup:
    """A MIME type and the signatures that identify it (any one suffices)."""

    mime_type: str
    signatures: tuple[Signature, ...]

    def __post_init__(self) -> None:
        if not self.mime_type:
            raise SignatureConfigError("Signature group needs a MIME type")
        if not self.signatures:
            raise SignatureConfigError(
                f"Signature group {self.mime_type} has no signatures",
                {"mime_type": self.mime_type},
            )

    def matches(self, buffer: bytes) -> bool:
        return any(signature.matches(buffer) for signature in self.signatures)


SIGNATURES: tuple[SignatureGroup, ...] = (
    SignatureGroup("application/pdf", (
        Signature(b"%PDF"),
    )),
    SignatureGroup("image/jpeg", (
        Signature(b"\xff\xd8\xff\xe0"),  # JFIF
        Signature(b"\xff\xd8\xff\xe1"),  # Exif
        Signature(b"\xff\xd8\xff\xe8"),  # SPIFF
    )),
    SignatureGroup("image/png", (
        Signature(b"\x89PNG\r\n\x1a\n"),
    )),
    SignatureGroup("image/gif", (
        Signature(b"GIF87a"),
        Signature(b"GIF89a"),
    )),
    SignatureGroup("audio/mpeg", (
        Signature(b"ID3"),  # ID3v2 tag
        Signature(b"\xff\xfb"),  # MPEG-1 Layer 3 frame sync
    )),
    SignatureGroup("video/mp4", (
        Signature(b"ftyp", offset=4),  # ISO BMFF box type
        Signature(b"mp42", offset=8),  # major brand
    )),
    SignatureGroup("video/webm", (
        Signature(b"\x1a\x45\xdf\xa3"),  # EBML header
    )),
)


def max_signature_span(groups: Iterable[SignatureGroup] = SIGNATURES) -> int:
    """Minimum header length that lets every signature in ``groups`` be tested."""
    return max(
        (signature.span for group in groups for signature in group.signatures),
        default=0,
    )


def match_signature(
    buffer: bytes,
    groups: Iterable[SignatureGroup] = SIGNATURES,
) -> str | None:
    """Return the MIME type of the first group matching ``buffer``, if any."""
    for group in groups:
        if group.matches(buffer):
            logger.debug(
                "Signature matched",
                mime_type=group.mime_type,
                buffer_size=len(buffer),
            )
            return group.mime_type

    return None
