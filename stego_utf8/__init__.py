"""Compatibility wrapper package for StegoUTF8."""

from src import (  # re-export public API
    BitCodec,
    Cleaner,
    EmbedPosition,
    GlyphAlphabet,
    InsertionError,
    Scanner,
    SourceReadError,
    StegoConfig,
    StegoEngine,
    StegoError,
    clean,
    decode,
    encode,
    __version__,
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
