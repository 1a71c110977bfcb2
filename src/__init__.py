"""
StegoUTF8: Hide Text Inside Text with Zero-Width Unicode

This package conceals a short text payload inside ordinary host text by
writing each payload bit as one of two invisible code points (U+200B for 0,
U+FEFF for 1) and splicing the run into the host. The payload can later be
recovered, or every hidden character stripped to restore the host.

Core Components:
    - glyph_codec: Glyph alphabet, bit codec, scanner and cleaner
    - embed_strategies: The five embedding positions and their dispatch
    - stego_engine: encode/decode/clean on strings and files
    - cli: Command-line interface for all operations

Example:
    >>> from stego_utf8 import StegoEngine, EmbedPosition
    >>> engine = StegoEngine()
    >>> hidden = engine.encode("Dear Bob,\\nSee you soon.", "noon", EmbedPosition.TOP)
    >>> engine.decode(hidden)
    'noon'

Limitation:
    Payload characters must have code points 0-255 to round-trip.

License: MIT
"""

__version__ = "1.0.0"

from .glyph_codec import BitCodec, Cleaner, GlyphAlphabet, Scanner
from .embed_strategies import EmbedPosition, InsertionError, StegoError
from .stego_engine import (
    SourceReadError,
    StegoConfig,
    StegoEngine,
    clean,
    decode,
    encode,
)

__all__ = [
    "BitCodec",
    "Cleaner",
    "EmbedPosition",
    "GlyphAlphabet",
    "InsertionError",
    "Scanner",
    "SourceReadError",
    "StegoConfig",
    "StegoEngine",
    "StegoError",
    "clean",
    "decode",
    "encode",
]
