"""Extension to MIME type registry."""

from types import MappingProxyType
from urllib.parse import urlsplit

# Declaration order matters for reverse lookups: the first extension
# listed for a MIME type is the one get_mime_extension returns.
EXTENSION_TO_MIME = MappingProxyType({
    # Documents
    "pdf": "application/pdf",
    "doc": "application/msword",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "txt": "text/plain",
    "rtf": "application/rtf",
    # Images
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "webp": "image/webp",
    "svg": "image/svg+xml",
    # Audio
    "mp3": "audio/mpeg",
    "wav": "audio/wav",
    "ogg": "audio/ogg",
    "m4a": "audio/mp4",
    # Video
    "mp4": "video/mp4",
    "webm": "video/webm",
    "avi": "video/x-msvideo",
    "mov": "video/quicktime",
    "mkv": "video/x-matroska",
})


def is_remote(source: str) -> bool:
    """Whether ``source`` names an http(s) resource rather than a local path."""
    return source.startswith(("http://", "https://"))


def lookup_by_extension(extension: str) -> str | None:
    """Look up the MIME type registered for ``extension``.

    Case-insensitive; a single leading dot is tolerated (``".PNG"``).
    """
    key = extension.lower()
    if key.startswith("."):
        key = key[1:]
    return EXTENSION_TO_MIME.get(key)


def get_mime_extension(mime_type: str) -> str | None:
    """Return the dotted extension first registered for ``mime_type``.

    Parameters such as ``; charset=utf-8`` are ignored. ``image/jpeg``
    yields ``.jpg`` because ``jpg`` is declared before ``jpeg``.
    """
    mime = mime_type.split(";")[0].strip().lower()
    for extension, registered in EXTENSION_TO_MIME.items():
        if registered == mime:
            return f".{extension}"
    return None


def extension_from_source(source: str, strip_query: bool = False) -> str:
    """Derive the lowercase extension (without the dot) from a path or URL.

    The extension is whatever follows the last ``.`` of the final path
    segment; an empty string is returned when there is none. A single
    leading dot marks a hidden file, not an extension (``.mp3`` has none).
    URLs are taken literally unless ``strip_query`` is set, so
    ``file.jpg?x=1`` gives ``jpg?x=1`` by default and ``jpg`` with
    ``strip_query=True``.
    """
    if strip_query and is_remote(source):
        source = urlsplit(source).path

    name = source.rpartition("/")[2]
    if name.startswith("."):
        name = name[1:]

    _, dot, extension = name.rpartition(".")
    if not dot:
        return ""
    return extension.lower()
