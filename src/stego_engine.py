"""
stego_engine.py - Encode, Decode and Clean Host Text

This module ties the glyph codec and the embedding strategies together into
the three operations callers actually use:

    encode: payload → BitCodec.pack → glyphs → strategy → embedded text
    decode: text → Scanner.extract → glyphs → BitCodec.unpack → payload
    clean:  text → Cleaner.strip → text without glyphs

Each operation also has a file-taking variant that reads the named file as
UTF-8 (newlines untouched) and delegates to the string version. A file that
cannot be read for any reason raises a single SourceReadError.

Guarantees:
    - decode() never raises. Truncated or malformed glyph runs degrade to a
      best-effort (possibly garbled) payload.
    - clean() is idempotent and leaves no glyph behind.
    - For TOP and BOTTOM, clean(encode(host, ...)) == host.

Example:
    >>> from stego_utf8 import StegoEngine, EmbedPosition
    >>> engine = StegoEngine()
    >>> hidden = engine.encode("Hello\\nWorld", "Hi", EmbedPosition.BOTTOM)
    >>> engine.decode(hidden)
    'Hi'
    >>> engine.clean(hidden)
    'Hello\\nWorld'
"""

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

try:
    from .embed_strategies import (
        DEFAULT_MAX_ATTEMPTS,
        EmbedPosition,
        StegoError,
        insert,
    )
    from .glyph_codec import BitCodec, Cleaner, GlyphAlphabet, Scanner
except ImportError:
    from embed_strategies import (
        DEFAULT_MAX_ATTEMPTS,
        EmbedPosition,
        StegoError,
        insert,
    )
    from glyph_codec import BitCodec, Cleaner, GlyphAlphabet, Scanner

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class SourceReadError(StegoError):
    """The source file could not be read."""

    def __init__(self, path: PathLike, message: str = "Unable to read the source file"):
        super().__init__(message)
        self.path = str(path)


# ═══════════════════════════════════════════════════════════════════════════════
# CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class StegoConfig:
    """
    Defaults applied when an encode call leaves them out.

    Attributes:
        default_position: Strategy used when no position is given
        default_k: Repeat count / line stride used when k is not given
        max_attempts: Rejected draws allowed per RANDOM insertion
    """

    default_position: EmbedPosition = EmbedPosition.NTHLINES
    default_k: int = 1
    max_attempts: int = DEFAULT_MAX_ATTEMPTS


# ═══════════════════════════════════════════════════════════════════════════════
# MAIN ENGINE
# ═══════════════════════════════════════════════════════════════════════════════


class StegoEngine:
    """
    Hide text in text with invisible glyphs, and get it back out.

    The engine holds no mutable state apart from the optional random source,
    so one instance can be shared. Pass a seeded ``random.Random`` to make the
    RANDOM and RANDOMINLINE strategies reproducible.
    """

    def __init__(self, config: Optional[StegoConfig] = None, rng: Optional[random.Random] = None):
        """
        Initialize the engine.

        Args:
            config: Defaults for position, k and the RANDOM retry cap.
            rng: Random source for the random strategies. Module-level
                ``random`` is used if None.
        """
        self._config = config or StegoConfig()
        self._rng = rng

    @property
    def config(self) -> StegoConfig:
        return self._config

    # ─────────────────────────────────────────────────────────────────────────
    # STRING OPERATIONS
    # ─────────────────────────────────────────────────────────────────────────

    def encode(
        self,
        host: str,
        payload: str,
        position: Union[EmbedPosition, str, int, None] = None,
        k: Optional[int] = None,
    ) -> str:
        """
        Hide a payload inside host text.

        Args:
            host: The visible carrier text.
            payload: The text to hide. Characters should have code points
                0-255; anything larger will not decode correctly.
            position: Where to embed. Defaults to the configured position.
            k: Repeat count or line stride. Defaults to the configured k.

        Returns:
            The host text with the invisible payload spliced in.

        Raises:
            ValueError: If k < 1 or the position is unknown.
            InsertionError: If RANDOM cannot find a free index.
        """
        position = EmbedPosition.parse(
            self._config.default_position if position is None else position
        )
        k = self._config.default_k if k is None else k

        glyphs = BitCodec.pack(payload)
        if any(ord(ch) > 0xFF for ch in payload):
            logger.warning("Payload contains characters above U+00FF; they will not decode correctly")

        embedded = insert(
            host,
            glyphs,
            position,
            k,
            rng=self._rng,
            max_attempts=self._config.max_attempts,
        )
        logger.debug(
            "Encoded %d char(s) as %d glyph(s) using %s (k=%d); %d glyph(s) added to host",
            len(payload),
            len(glyphs),
            position.name,
            k,
            len(embedded) - len(host),
        )
        return embedded

    def decode(self, text: str) -> str:
        """
        Recover a hidden payload from text.

        All visible characters are ignored; every glyph found is read in
        order. When several copies were embedded, their payloads come back
        concatenated. Never raises.
        """
        glyphs = Scanner.extract(text)
        if len(glyphs) % BitCodec.BITS_PER_CHAR:
            logger.debug("Dropping %d trailing bit(s)", len(glyphs) % BitCodec.BITS_PER_CHAR)
        return BitCodec.unpack(glyphs)

    def clean(self, text: str) -> str:
        """Strip every hidden glyph from text."""
        return Cleaner.strip(text)

    def has_hidden_payload(self, text: str) -> bool:
        """Quick check if text carries any glyphs at all."""
        return GlyphAlphabet.contains_glyphs(text)

    # ─────────────────────────────────────────────────────────────────────────
    # FILE OPERATIONS
    # ─────────────────────────────────────────────────────────────────────────

    def encode_file(
        self,
        path: PathLike,
        payload: str,
        position: Union[EmbedPosition, str, int, None] = None,
        k: Optional[int] = None,
    ) -> str:
        """Read a host file as UTF-8 and return it with the payload embedded."""
        return self.encode(self._read_source(path), payload, position, k)

    def decode_file(self, path: PathLike) -> str:
        """Read a file as UTF-8 and return its hidden payload."""
        return self.decode(self._read_source(path))

    def clean_file(self, path: PathLike) -> str:
        """Read a file as UTF-8 and return its content without glyphs."""
        return self.clean(self._read_source(path))

    @staticmethod
    def _read_source(path: PathLike) -> str:
        try:
            with open(path, encoding="utf-8", newline="") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Failed to read %s: %s", path, e)
            raise SourceReadError(path) from e

        logger.debug("Read %d char(s) from %s", len(content), path)
        return content


# ═══════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE
# ═══════════════════════════════════════════════════════════════════════════════

_default_engine = StegoEngine()


def encode(
    host: str,
    payload: str,
    position: Union[EmbedPosition, str, int, None] = None,
    k: Optional[int] = None,
) -> str:
    """Hide a payload in host text using a default engine."""
    return _default_engine.encode(host, payload, position, k)


def decode(text: str) -> str:
    """Recover a hidden payload using a default engine."""
    return _default_engine.decode(text)


def clean(text: str) -> str:
    """Strip hidden glyphs using a default engine."""
    return _default_engine.clean(text)

