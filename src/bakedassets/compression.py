"""
=============================================================================
PRE-COMPRESSED VARIANTS
=============================================================================

Baked assets are compressed at build time, not per request:

    ┌─────────────────────────────────────────────────────────────────────┐
    │          RUNTIME COMPRESSION VS PRE-COMPRESSED VARIANTS             │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   CompressionMiddleware style        Baked variants                 │
    │   ───────────────────────────        ──────────────                 │
    │   gzip.compress() every response     compressed once, at build      │
    │   CPU cost per request               zero CPU per request           │
    │   level 6 to stay fast               max level (brotli 11, gzip 9)  │
    │                                                                      │
    │   store:  app.js       ← identity                                   │
    │           app.js.br    ← Content-Encoding: br                       │
    │           app.js.gz    ← Content-Encoding: gzip                     │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
NEGOTIATION RULES
=============================================================================

1. Variants are tried in declaration order: Brotli, then gzip.
2. A variant is a candidate if its token APPEARS in Accept-Encoding.
   Quality values are not weighed:

       Accept-Encoding: gzip;q=1.0, br;q=0.5   → still Brotli first

   This is a deliberate simplification, not RFC 7231 negotiation.
3. If the preferred variant is missing from the store the next one is
   tried, then the identity asset.

=============================================================================
"""

from enum import Enum
from typing import FrozenSet, List


class CompressedVariant(Enum):
    """
    A pre-compressed encoding, in order of preference.

    Each member carries (Content-Encoding token, key suffix).
    """

    BROTLI = ("br", ".br")
    GZIP = ("gzip", ".gz")

    def __init__(self, encoding: str, suffix: str):
        self.encoding = encoding
        self.suffix = suffix

    def variant_key(self, key: str) -> str:
        """
        >>> CompressedVariant.GZIP.variant_key("app.js")
        'app.js.gz'
        """
        return key + self.suffix


def parse_accept_encoding(header: str) -> FrozenSet[str]:
    """
    Extract the set of content-coding tokens from an Accept-Encoding value.

    Parameters (";q=...") are dropped and tokens are lowercased.

    >>> sorted(parse_accept_encoding("gzip;q=1.0, BR;q=0.5, identity"))
    ['br', 'gzip', 'identity']
    """
    tokens = set()
    for part in header.split(","):
        token = part.split(";", 1)[0].strip().lower()
        if token:
            tokens.add(token)
    return frozenset(tokens)


def acceptable_variants(accept_encoding: str) -> List[CompressedVariant]:
    """
    Variants the client advertises, in server preference order.

    >>> acceptable_variants("gzip, deflate, br")
    [<CompressedVariant.BROTLI: ('br', '.br')>, <CompressedVariant.GZIP: ('gzip', '.gz')>]
    >>> acceptable_variants("")
    []
    """
    tokens = parse_accept_encoding(accept_encoding)
    return [variant for variant in CompressedVariant if variant.encoding in tokens]
