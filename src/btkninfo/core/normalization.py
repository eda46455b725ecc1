"""Normalization helpers for search keys, image paths and resource URLs."""

import re
from urllib.parse import urlsplit

IPFS_GATEWAY = "https://ipfs.io/ipfs/"

_IMAGE_EXTENSION_PATTERN = re.compile(r"\.(png|jpg|jpeg|gif|svg|webp)$", re.IGNORECASE)

# Checked in order against the lower-cased URL path
_EXTENSION_CONTENT_TYPES: tuple[tuple[str, str], ...] = (
    (".svg", "image/svg+xml"),
    (".jpg", "image/jpeg"),
    (".jpeg", "image/jpeg"),
    (".gif", "image/gif"),
    (".webp", "image/webp"),
)
DEFAULT_IMAGE_CONTENT_TYPE = "image/png"


def normalize_search_key(value: str) -> str:
    """Trim and lower-case a search key."""
    return value.strip().lower()


def strip_image_extension(path: str) -> str:
    """
    Remove one trailing image extension from an image request path.

    Examples:
        "btkn1abc.png"      -> "btkn1abc"
        "btkn1abc/logo.SVG" -> "btkn1abc/logo"
        "btkn1abc.txt"      -> "btkn1abc.txt"
    """
    return _IMAGE_EXTENSION_PATTERN.sub("", path)


def parse_token_uri(token_uri: str) -> str:
    """Rewrite ipfs:// URIs to the public HTTP gateway; other URIs pass through."""
    if token_uri.startswith("ipfs://"):
        return IPFS_GATEWAY + token_uri.split("://", 1)[1]
    return token_uri


def content_type_from_url(url: str) -> str:
    """Infer an image content type from the URL's file extension."""
    path = urlsplit(url).path.lower()
    for extension, content_type in _EXTENSION_CONTENT_TYPES:
        if path.endswith(extension):
            return content_type
    return DEFAULT_IMAGE_CONTENT_TYPE
