"""
=============================================================================
HANDLER CONFIGURATION
=============================================================================

Configuration for a baked-asset handler, built once at startup.

=============================================================================
OPTIONS
=============================================================================

    ┌──────────────────────┬──────────────────┬────────────────────────────┐
    │ Option               │ Default          │ Effect                     │
    ├──────────────────────┼──────────────────┼────────────────────────────┤
    │ store                │ (required)       │ where assets come from     │
    │ fallthrough_on_miss  │ True             │ non-GET/HEAD → next handler│
    │                      │                  │ (False → 405)              │
    │ serve_index_html     │ True             │ "/docs/" → docs/index.html │
    │ cache_control        │ "max-age=604800" │ Cache-Control value,       │
    │                      │ (one week)       │ None omits the header      │
    │ mount_path           │ "/"              │ only paths under it are    │
    │                      │                  │ considered                 │
    └──────────────────────┴──────────────────┴────────────────────────────┘

fallthrough_on_miss only governs METHOD handling. A missing asset always
declines, whatever the flag says.

=============================================================================
IMMUTABILITY
=============================================================================

The dataclass is frozen: one instance is shared by every request on every
worker thread without locks. Use dataclasses.replace() for a variant:

    assets_config = replace(config, mount_path="/assets")

Values are validated in __post_init__, so a bad mount path fails at
startup instead of on the first request.

=============================================================================
"""

from dataclasses import dataclass
from typing import Optional

from .store import AssetStore


DEFAULT_CACHE_CONTROL = "max-age=604800"  # 1 week


def normalize_mount_path(mount_path: str) -> str:
    """
    Normalise a mount path to end with exactly one slash.

        "/"           → "/"
        "/assets"     → "/assets/"
        "/assets///"  → "/assets/"

    Raises:
        ValueError: empty, or not starting with "/".
    """
    if not mount_path or not mount_path.startswith("/"):
        raise ValueError(f"mount_path must start with '/': {mount_path!r}")
    return mount_path.rstrip("/") + "/"


@dataclass(frozen=True)
class HandlerConfig:
    """
    Immutable configuration for BakedFileHandler.

    Example:
        config = HandlerConfig(
            store=MemoryAssetStore.bake_folder("./public"),
            mount_path="/assets",
            cache_control="public, max-age=31536000, immutable",
        )
        config.mount_path  # "/assets/"
    """

    store: AssetStore
    fallthrough_on_miss: bool = True
    serve_index_html: bool = True
    cache_control: Optional[str] = DEFAULT_CACHE_CONTROL
    mount_path: str = "/"

    def __post_init__(self):
        if not isinstance(self.store, AssetStore):
            raise ValueError(f"store must be an AssetStore, got {type(self.store).__name__}")
        # frozen dataclass: assignment has to go through object.__setattr__
        object.__setattr__(self, "mount_path", normalize_mount_path(self.mount_path))

    @property
    def is_root_mount(self) -> bool:
        """True when the handler is responsible for the whole URL space."""
        return self.mount_path == "/"
