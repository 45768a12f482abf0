"""Identify MIME types from magic bytes with an extension fallback."""

import logging

from mime_sniffer.core.categories import (
    category_of,
    is_audio,
    is_audio_type,
    is_document,
    is_document_type,
    is_image,
    is_image_type,
    is_video,
    is_video_type,
)
from mime_sniffer.core.extensions import (
    EXTENSION_TO_MIME,
    extension_from_source,
    get_mime_extension,
    lookup_by_extension,
)
from mime_sniffer.core.resolver import (
    DetectionOutcome,
    DetectionResult,
    MimeResolver,
    get_mime_type,
)
from mime_sniffer.core.signatures import (
    SIGNATURES,
    Signature,
    SignatureGroup,
    match_signature,
)

__version__ = "0.1.0"

# Silent until the host application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "EXTENSION_TO_MIME",
    "SIGNATURES",
    "DetectionOutcome",
    "DetectionResult",
    "MimeResolver",
    "Signature",
    "SignatureGroup",
    "category_of",
    "extension_from_source",
    "get_mime_extension",
    "get_mime_type",
    "is_audio",
    "is_audio_type",
    "is_document",
    "is_document_type",
    "is_image",
    "is_image_type",
    "is_video",
    "is_video_type",
    "lookup_by_extension",
    "match_signature",
]
