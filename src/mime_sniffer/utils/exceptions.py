"""Custom exceptions for mime-sniffer."""

from typing import Any


class MimeSnifferError(Exception):
    """Base exception for mime-sniffer."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class SignatureConfigError(MimeSnifferError):
    """A signature or signature group is malformed."""

    pass


class AcquisitionError(MimeSnifferError):
    """Leading bytes could not be read from a file or URL."""

    def __init__(
        self,
        message: str,
        source: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source
