"""Coarse media categories derived from a resolved MIME type."""

from mime_sniffer.core.resolver import get_mime_type

CATEGORY_DOCUMENT = "document"
CATEGORY_IMAGE = "image"
CATEGORY_AUDIO = "audio"
CATEGORY_VIDEO = "video"
CATEGORY_OTHER = "other"


def is_document_type(mime_type: str) -> bool:
    # Only application/* and text/plain; text/html is not a document
    return mime_type.startswith("application/") or mime_type == "text/plain"


def is_image_type(mime_type: str) -> bool:
    return mime_type.startswith("image/")


def is_audio_type(mime_type: str) -> bool:
    return mime_type.startswith("audio/")


def is_video_type(mime_type: str) -> bool:
    return mime_type.startswith("video/")


def category_of(mime_type: str) -> str:
    """Return ``'document'``, ``'image'``, ``'audio'``, ``'video'`` or ``'other'``."""
    if is_document_type(mime_type):
        return CATEGORY_DOCUMENT
    if is_image_type(mime_type):
        return CATEGORY_IMAGE
    if is_audio_type(mime_type):
        return CATEGORY_AUDIO
    if is_video_type(mime_type):
        return CATEGORY_VIDEO
    return CATEGORY_OTHER


async def is_document(source: str) -> bool:
    """Whether ``source`` resolves to a document type."""
    return is_document_type(await get_mime_type(source))


async def is_image(source: str) -> bool:
    """Whether ``source`` resolves to an image type."""
    return is_image_type(await get_mime_type(source))


async def is_audio(source: str) -> bool:
    """Whether ``source`` resolves to an audio type."""
    return is_audio_type(await get_mime_type(source))


async def is_video(source: str) -> bool:
    """Whether ``source`` resolves to a video type."""
    return is_video_type(await get_mime_type(source))
