"""
=============================================================================
ASSET STORES
=============================================================================

An asset store is a read-only key → bytes lookup filled once at startup.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    DISK FILES VS BAKED ASSETS                       │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   DISK (StaticFileHandler style)      BAKED (this package)          │
    │   ──────────────────────────────      ────────────────────          │
    │   stat() + open() per request         dict lookup per request       │
    │   files can change under you          immutable after startup       │
    │   needs a deployed directory          ships inside the package      │
    │   ETag / Last-Modified useful         Cache-Control is enough       │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Keys are POSIX relative paths: "index.html", "css/site.css",
"css/site.css.br". No leading slash, no "..", no empty segments.

=============================================================================
THE STORE CONTRACT
=============================================================================

    exists(key) → bool              cheap membership test
    open(key)   → (stream, size)    readable binary stream + its byte size
                                    raises AssetNotFoundError on a miss
    close()                         release resources owned by the store

The handler ALWAYS calls exists() before open(), and always closes the
stream it got from open(). Because stores are immutable at runtime no
locking is needed; any number of threads can read concurrently.

=============================================================================
"""

from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path
from typing import BinaryIO, Dict, Iterator, Mapping, Tuple, Union
import io
import logging
import posixpath

from .errors import AssetNotFoundError


logger = logging.getLogger(__name__)


class AssetStore(ABC):
    """
    Abstract read-only asset store.

    Implement exists() and open() to serve assets from anywhere: memory,
    a zip archive, a database blob table.
    """

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Return True if the store holds an asset under this exact key."""

    @abstractmethod
    def open(self, key: str) -> Tuple[BinaryIO, int]:
        """
        Open an asset for reading.

        Returns:
            (stream, size): a binary stream positioned at the start and the
            number of bytes it will yield.

        Raises:
            AssetNotFoundError: the key is not in the store.
        """

    def close(self) -> None:
        """Release resources held by the store. No-op by default."""


def is_valid_key(key: str) -> bool:
    """
    Check that a key is a normalized relative POSIX path.

    >>> is_valid_key("css/site.css")
    True
    >>> is_valid_key("/css/site.css"), is_valid_key("../x"), is_valid_key("a//b")
    (False, False, False)
    """
    if not key or key == "." or key.startswith("/"):
        return False
    if posixpath.normpath(key) != key:
        return False
    return key != ".." and not key.startswith("../")


class MemoryAssetStore(AssetStore):
    """
    Asset store backed by an in-memory dictionary.

    =========================================================================
    BAKING
    =========================================================================

        # From a literal mapping (tests, tiny apps)
        store = MemoryAssetStore({"index.html": "<h1>Hi</h1>"})

        # From a directory, read once at startup
        store = MemoryAssetStore.bake_folder("./public")

        # From package data, works inside wheels and zipapps
        store = MemoryAssetStore.bake_package("myapp", "static")

    The mapping is copied, so later changes to the source dict (or the
    source directory) never leak into a running server.

    =========================================================================
    """

    def __init__(self, assets: Mapping[str, Union[bytes, str]]):
        self._assets: Dict[str, bytes] = {}
        for key, content in assets.items():
            if not is_valid_key(key):
                raise ValueError(f"Invalid asset key: {key!r}")
            if isinstance(content, str):
                content = content.encode("utf-8")
            self._assets[key] = bytes(content)

    @classmethod
    def bake_folder(cls, folder: Union[str, Path]) -> "MemoryAssetStore":
        """
        Load every regular file under `folder` into a new store.

        Keys are paths relative to `folder` with "/" separators, so
        public/css/site.css becomes "css/site.css" on every platform.

        Raises:
            ValueError: `folder` is not a directory.
        """
        root = Path(folder)
        if not root.is_dir():
            raise ValueError(f"Asset folder does not exist: {folder}")

        assets = {}
        for path in sorted(root.rglob("*")):
            if path.is_file():
                assets[path.relative_to(root).as_posix()] = path.read_bytes()

        logger.info(f"Baked {len(assets)} assets from {root}")
        return cls(assets)

    @classmethod
    def bake_package(cls, package: str, subdir: str = "") -> "MemoryAssetStore":
        """
        Load package data shipped with an installed distribution.

        Uses importlib.resources, so it also works when the package is
        imported from a zip file.

        Args:
            package: Importable package name ("myapp")
            subdir:  Directory inside the package ("static"); "" for the
                     package root

        Raises:
            ValueError: `subdir` is not a directory inside the package.
        """
        root = resources.files(package)
        if subdir:
            root = root.joinpath(*subdir.strip("/").split("/"))
        if not root.is_dir():
            raise ValueError(f"Package {package!r} has no asset directory {subdir!r}")

        assets = dict(_walk_resources(root, ""))
        logger.info(f"Baked {len(assets)} assets from package {package}:{subdir or '/'}")
        return cls(assets)

    def exists(self, key: str) -> bool:
        return key in self._assets

    def open(self, key: str) -> Tuple[BinaryIO, int]:
        try:
            content = self._assets[key]
        except KeyError:
            raise AssetNotFoundError(key) from None
        return io.BytesIO(content), len(content)

    def keys(self) -> Iterator[str]:
        return iter(sorted(self._assets))

    def __contains__(self, key: object) -> bool:
        return key in self._assets

    def __len__(self) -> int:
        return len(self._assets)


def _walk_resources(node, prefix: str) -> Iterator[Tuple[str, bytes]]:
    """Yield (key, content) for every file below a Traversable."""
    for child in sorted(node.iterdir(), key=lambda entry: entry.name):
        key = f"{prefix}{child.name}"
        if child.is_dir():
            # Skip bytecode caches that live next to package data
            if child.name != "__pycache__":
                yield from _walk_resources(child, key + "/")
        elif child.is_file():
            yield key, child.read_bytes()
