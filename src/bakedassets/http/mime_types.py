"""
=============================================================================
MIME TYPE DETECTION
=============================================================================

Maps asset key extensions to the MIME type sent as Content-Type.

=============================================================================
COMPRESSED VARIANTS
=============================================================================

A pre-compressed asset is stored next to the original under a derived key:

    app.js      → served as text/javascript
    app.js.br   → served as text/javascript + Content-Encoding: br
    app.js.gz   → served as text/javascript + Content-Encoding: gzip

The type of a variant is ALWAYS looked up from the original key. Looking
it up from "app.js.gz" would answer application/gzip and the browser would
download the script instead of running it.

=============================================================================
NO CHARSET PARAMETER
=============================================================================

Baked assets are opaque bytes; the handler cannot know their encoding, so
the bare MIME type is sent ("text/css", not "text/css; charset=utf-8").

=============================================================================
"""

import posixpath


# =============================================================================
# MIME TYPE DATABASE
# =============================================================================
#
# Lowercase extension (with dot) → MIME type.
# Limited to what a bundled web frontend actually ships.
#
# =============================================================================

MIME_TYPES = {
    # -------------------------------------------------------------------------
    # DOCUMENTS, STYLES, SCRIPTS
    # -------------------------------------------------------------------------
    ".html": "text/html",
    ".htm": "text/html",
    ".css": "text/css",
    ".js": "text/javascript",
    ".mjs": "text/javascript",     # ES modules
    ".json": "application/json",
    ".map": "application/json",    # Source maps
    ".webmanifest": "application/manifest+json",
    ".xml": "application/xml",
    ".txt": "text/plain",
    ".md": "text/markdown",
    ".csv": "text/csv",
    ".wasm": "application/wasm",   # Must be exact for streaming compilation

    # -------------------------------------------------------------------------
    # IMAGES
    # -------------------------------------------------------------------------
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
    ".webp": "image/webp",
    ".avif": "image/avif",
    ".bmp": "image/bmp",

    # -------------------------------------------------------------------------
    # FONTS
    # -------------------------------------------------------------------------
    ".woff": "font/woff",
    ".woff2": "font/woff2",
    ".ttf": "font/ttf",
    ".otf": "font/otf",
    ".eot": "application/vnd.ms-fontobject",

    # -------------------------------------------------------------------------
    # MEDIA
    # -------------------------------------------------------------------------
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
    ".ogg": "audio/ogg",
    ".mp4": "video/mp4",
    ".webm": "video/webm",

    # -------------------------------------------------------------------------
    # DOWNLOADS
    # -------------------------------------------------------------------------
    ".pdf": "application/pdf",
    ".zip": "application/zip",
    ".gz": "application/gzip",
    ".tar": "application/x-tar",
}

# "I don't know what this is, treat as binary"
DEFAULT_MIME_TYPE = "application/octet-stream"


def get_mime_type(key: str) -> str:
    """
    Get the MIME type for an asset key based on its extension.

    Args:
        key: Asset key or file name ("css/site.css", "logo.PNG")

    Returns:
        The MIME type, or application/octet-stream when the extension is
        missing or unknown.

    Examples:
        >>> get_mime_type("css/site.css")
        'text/css'

        >>> get_mime_type("LICENSE")
        'application/octet-stream'
    """
    extension = posixpath.splitext(key)[1].lower()  # .PNG → .png
    return MIME_TYPES.get(extension, DEFAULT_MIME_TYPE)
