"""
=============================================================================
REQUEST PATH → ASSET KEY
=============================================================================

Turns a request path into the key used to look an asset up in the store.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                     KEY RESOLUTION PIPELINE                         │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   mount_path = "/assets/"                                           │
    │                                                                      │
    │   "/assets/css/./site%20main.css"                                   │
    │        │                                                             │
    │        │ 1. in scope?  starts with "/assets/"  ── no ──► DECLINE    │
    │        ▼                                                             │
    │   "/assets/css/./site main.css"      2. percent-decode (once)       │
    │        ▼                                                             │
    │   "css/./site main.css"              3. relative to mount           │
    │        ▼                                                             │
    │   "css/site main.css"                4. lexical normalisation       │
    │        │                                                             │
    │        └─ starts with ".." ?  ── yes ──► REJECTED (as not found)    │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
SECURITY: PATH TRAVERSAL
=============================================================================

"/assets/../../etc/passwd" normalises to "../etc/passwd". That key would
escape the mount root, so it is rejected before the store is queried.
Rejection looks exactly like "not found" to the client; nothing reveals
which keys exist outside the mount.

Normalisation is purely lexical (posixpath). Nothing here touches a
filesystem, and the store itself has no notion of directories.

=============================================================================
MALFORMED PERCENT-ENCODING
=============================================================================

    "%zz", "%4"     invalid escapes pass through literally (standard
                    unquote behaviour); they just won't match a key
    "%ff%fe"        valid escapes but not UTF-8: the path is unresolvable
                    and the request declines like any other miss

=============================================================================
"""

from typing import Optional
from urllib.parse import unquote
import posixpath


# Key for the mount root itself ("/" or "/assets/"). It is never looked up
# literally; it only feeds the index.html fallback.
ROOT_KEY = "."

INDEX_FILE = "index.html"


def in_mount(request_path: str, mount_path: str) -> bool:
    """
    Check whether a (raw, still encoded) request path is under the mount.

    Plain, case-sensitive prefix match. Mount "/" accepts everything.

    >>> in_mount("/assets/app.js", "/assets/")
    True
    >>> in_mount("/assets", "/assets/")
    False
    """
    if mount_path == "/":
        return True
    return request_path.startswith(mount_path)


def decode_path(request_path: str) -> Optional[str]:
    """
    Percent-decode a request path, or return None if it is not UTF-8.
    """
    try:
        return unquote(request_path, errors="strict")
    except UnicodeDecodeError:
        return None


def resolve_key(request_path: str, mount_path: str) -> Optional[str]:
    """
    Compute the asset key for a request path under a mount path.

    Returns:
        The normalized key, ROOT_KEY for the mount root, or None when the
        path cannot name an asset (undecodable, or escaping the mount).

    Examples:
        >>> resolve_key("/css/site.css", "/")
        'css/site.css'
        >>> resolve_key("/assets/", "/assets/")
        '.'
        >>> resolve_key("/assets/../secret.txt", "/assets/") is None
        True
    """
    decoded = decode_path(request_path)
    if decoded is None:
        return None
    if not decoded.startswith("/"):
        decoded = "/" + decoded

    # Both paths are absolute, so relpath stays lexical (no getcwd()).
    # Duplicate slashes and "." segments disappear here as well.
    key = posixpath.relpath(decoded, mount_path)

    if key == ".." or key.startswith("../"):
        return None
    return key


def index_key(key: str) -> str:
    """
    Key of the index document for a directory-like key.

    >>> index_key(".")
    'index.html'
    >>> index_key("docs")
    'docs/index.html'
    """
    if key == ROOT_KEY:
        return INDEX_FILE
    return posixpath.normpath(posixpath.join(key, INDEX_FILE))
