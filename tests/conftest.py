"""
pytest configuration and fixtures.
"""

from typing import Dict, Tuple
import io

import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bakedassets import AssetStore, AssetNotFoundError, HandlerConfig, BakedFileHandler, MemoryAssetStore


STYLE_CSS = b"body { color: red; }"


@pytest.fixture
def assets() -> Dict[str, bytes]:
    """The asset set most tests serve from."""
    return {
        "style.css": STYLE_CSS,
        "script.js": b"console.log('hello');",
        "index.html": b"<h1>Index</h1>",
        "assets/style.css": b"body { color: blue; }",
        "docs/index.html": b"<h1>Docs</h1>",
        "app.js": b"var app = 1;",
        "app.js.br": b"BROTLI-BYTES",
        "app.js.gz": b"GZIP-BYTES",
        "only-gz.css.gz": b"GZIP-ONLY",
        "logo.PNG": b"\x89PNG\r\n",
        "LICENSE": b"MIT",
    }


@pytest.fixture
def store(assets) -> MemoryAssetStore:
    return MemoryAssetStore(assets)


@pytest.fixture
def handler(store) -> BakedFileHandler:
    """Handler with default options, mounted at /."""
    return BakedFileHandler(HandlerConfig(store=store))


class RecordingStore(AssetStore):
    """
    Store wrapper that records every call and the streams it hands out.

    Used to prove what the handler asked the store for (and what it did not).
    """

    def __init__(self, inner: AssetStore):
        self.inner = inner
        self.exists_calls: list[str] = []
        self.open_calls: list[str] = []
        self.streams: list[io.BytesIO] = []

    def exists(self, key: str) -> bool:
        self.exists_calls.append(key)
        return self.inner.exists(key)

    def open(self, key: str) -> Tuple[io.BytesIO, int]:
        self.open_calls.append(key)
        stream, size = self.inner.open(key)
        self.streams.append(stream)
        return stream, size

    @property
    def queried(self) -> bool:
        return bool(self.exists_calls or self.open_calls)


class FailingReadStream(io.BytesIO):
    """A stream that opens fine but blows up when read."""

    def read(self, *args, **kwargs):
        raise OSError("simulated read failure")


class FailingCloseStream(io.BytesIO):
    """A stream that reads fine, releases its buffer, then raises on close()."""

    def close(self):
        super().close()
        raise OSError("simulated close failure")


class BrokenStore(AssetStore):
    """
    A store whose exists() and open() disagree, or whose I/O fails.

    mode="missing": exists() says yes, open() raises AssetNotFoundError
    mode="read":    open() succeeds, reading the stream raises OSError
    mode="close":   reading works, closing the stream raises OSError
    mode="exists":  exists() itself raises OSError
    """

    def __init__(self, keys, mode: str = "missing"):
        self.keys = set(keys)
        self.mode = mode
        self.streams: list[io.BytesIO] = []
        self.open_calls: list[str] = []

    def exists(self, key: str) -> bool:
        if self.mode == "exists":
            raise OSError("simulated exists failure")
        return key in self.keys

    def open(self, key: str):
        self.open_calls.append(key)
        if self.mode == "missing":
            raise AssetNotFoundError(key)
        if self.mode == "close":
            stream = FailingCloseStream(b"body { color: red; }")
            self.streams.append(stream)
            return stream, 20
        stream = FailingReadStream(b"never read")
        self.streams.append(stream)
        return stream, 10


@pytest.fixture
def recording_store(store) -> RecordingStore:
    return RecordingStore(store)


@pytest.fixture
def store_missing_on_open() -> BrokenStore:
    """exists("style.css") is True but open() raises AssetNotFoundError."""
    return BrokenStore({"style.css"}, mode="missing")


@pytest.fixture
def store_failing_read() -> BrokenStore:
    """open("style.css") works but reading the stream raises OSError."""
    return BrokenStore({"style.css"}, mode="read")


@pytest.fixture
def store_failing_close() -> BrokenStore:
    """style.css reads fine but closing its stream raises OSError."""
    return BrokenStore({"style.css"}, mode="close")


@pytest.fixture
def store_failing_exists() -> BrokenStore:
    """Every exists() call raises OSError."""
    return BrokenStore({"style.css"}, mode="exists")
