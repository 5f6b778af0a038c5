"""
Exceptions raised by asset stores.

Resolution itself never raises to the host chain: misses decline and store
failures become a 500 response. These types exist so that stores can say
precisely what went wrong and the handler can log it.
"""


class AssetStoreError(Exception):
    """
    Base class for failures inside an AssetStore.

    Carries the key that was being accessed so log lines can name it.
    """

    def __init__(self, message: str, key: str = ""):
        super().__init__(message)
        self.key = key


class AssetNotFoundError(AssetStoreError, KeyError):
    """
    Raised by AssetStore.open() for a key the store does not hold.

    Subclasses KeyError because a store is, at heart, a read-only mapping.
    """

    def __init__(self, key: str):
        super().__init__(f"Asset not found: {key!r}", key=key)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the whole message
        return self.args[0]
