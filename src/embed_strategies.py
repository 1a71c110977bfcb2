"""
embed_strategies.py - Where the Hidden Glyphs Go

This module decides *where* a glyph sequence is spliced into host text.
Each position in the EmbedPosition enumeration maps to one plain strategy
function with the same signature:

    strategy(host, glyphs, k, rng, max_attempts) -> embedded text

Strategies:
    TOP           Glyphs before the whole host (k ignored)
    BOTTOM        Glyphs after the whole host (k ignored)
    RANDOM        k insertions at random indices of the growing text
    NTHLINES      Glyphs appended to lines k-1, 2k-1, ...
    RANDOMINLINE  Glyphs at a random offset in lines 0, k, 2k, ...

Lines are always split and re-joined on "\\n" only, so "\\r\\n" hosts keep
their carriage returns at the end of each line.

Randomness:
    RANDOM and RANDOMINLINE draw from a ``random.Random``-compatible object
    (only ``randrange`` is used). Pass a seeded instance for reproducible
    output; the module-level ``random`` functions are used otherwise. This is
    not a cryptographic source.
"""

import logging
import random
from enum import Enum
from typing import Callable, Dict, Optional, Union

try:
    from .glyph_codec import GlyphAlphabet
except ImportError:
    from glyph_codec import GlyphAlphabet

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 1000


# ═══════════════════════════════════════════════════════════════════════════════
# ERRORS AND CONFIGURATION TYPES
# ═══════════════════════════════════════════════════════════════════════════════


class StegoError(Exception):
    """Base class for errors raised by the steganography engine."""


class InsertionError(StegoError):
    """The host is too small or too saturated with glyphs for the requested k."""


class EmbedPosition(Enum):
    """Where to splice the hidden glyph sequence into the host text."""

    TOP = 0
    BOTTOM = 1
    RANDOM = 2
    NTHLINES = 3
    RANDOMINLINE = 4

    @classmethod
    def parse(cls, value: Union["EmbedPosition", str, int]) -> "EmbedPosition":
        """
        Resolve a position from a member, a name or its number.

        Names are case-insensitive ("nthlines", "TOP"); numbers are the
        member values 0-4, also accepted as digit strings ("3").

        Raises:
            ValueError: If the value does not name a known position.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            if text.isdigit():
                return cls(int(text))
            try:
                return cls[text.upper()]
            except KeyError:
                raise ValueError(f"Unknown embed position: {value!r}") from None
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        raise ValueError(f"Unknown embed position: {value!r}")


# ═══════════════════════════════════════════════════════════════════════════════
# STRATEGIES
# ═══════════════════════════════════════════════════════════════════════════════


def _randrange(rng: Optional[random.Random], stop: int) -> int:
    # random.randrange(0) raises; an empty span has exactly one offset
    if stop <= 0:
        return 0
    return (rng or random).randrange(stop)


def insert_top(host: str, glyphs: str, k: int = 1, rng=None, max_attempts=None) -> str:
    return glyphs + host


def insert_bottom(host: str, glyphs: str, k: int = 1, rng=None, max_attempts=None) -> str:
    return host + glyphs


def insert_random(
    host: str,
    glyphs: str,
    k: int = 1,
    rng: Optional[random.Random] = None,
    max_attempts: Optional[int] = None,
) -> str:
    """
    Splice the glyphs in before k random indices of the text.

    Each draw indexes the *current* text, which grows with every insertion.
    A draw that lands on a glyph is rejected and redrawn, so consecutive
    copies never split an earlier run. Overlapping or adjacent insertions
    are allowed.

    Raises:
        InsertionError: If ``max_attempts`` consecutive draws are rejected,
            e.g. when the host consists entirely of glyphs.
        ValueError: If ``max_attempts`` is given and is not an integer >= 1.
    """
    limit = DEFAULT_MAX_ATTEMPTS if max_attempts is None else max_attempts
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError(f"max_attempts must be an integer >= 1, got {max_attempts!r}")
    text = host

    for copy_no in range(k):
        for _ in range(limit):
            index = _randrange(rng, len(text))
            if index < len(text) and GlyphAlphabet.is_glyph(text[index]):
                continue
            text = text[:index] + glyphs + text[index:]
            break
        else:
            logger.warning(
                "RANDOM insertion %d/%d gave up after %d rejected draws", copy_no + 1, k, limit
            )
            raise InsertionError(
                f"Host too small or too saturated for k={k}: "
                f"no free index found after {limit} attempts"
            )

    return text


def insert_nth_lines(host: str, glyphs: str, k: int = 1, rng=None, max_attempts=None) -> str:
    """
    Append the glyphs to the end of lines k-1, 2k-1, 3k-1, ...

    A host with fewer than k lines comes back unchanged.
    """
    lines = host.split("\n")
    if len(lines) < k:
        logger.warning(
            "NTHLINES: host has %d line(s), fewer than k=%d; nothing embedded", len(lines), k
        )

    counter = 1
    for i, line in enumerate(lines):
        if counter == k:
            lines[i] = line + glyphs
            counter = 0
        counter += 1

    return "\n".join(lines)


def insert_random_in_line(
    host: str,
    glyphs: str,
    k: int = 1,
    rng: Optional[random.Random] = None,
    max_attempts=None,
) -> str:
    """Splice the glyphs at a random offset of lines 0, k, 2k, ..."""
    lines = host.split("\n")

    for i in range(0, len(lines), k):
        line = lines[i]
        offset = _randrange(rng, len(line))
        lines[i] = line[:offset] + glyphs + line[offset:]

    return "\n".join(lines)


Strategy = Callable[..., str]

STRATEGIES: Dict[EmbedPosition, Strategy] = {
    EmbedPosition.TOP: insert_top,
    EmbedPosition.BOTTOM: insert_bottom,
    EmbedPosition.RANDOM: insert_random,
    EmbedPosition.NTHLINES: insert_nth_lines,
    EmbedPosition.RANDOMINLINE: insert_random_in_line,
}


def insert(
    host: str,
    glyphs: str,
    position: Union[EmbedPosition, str, int],
    k: int = 1,
    rng: Optional[random.Random] = None,
    max_attempts: Optional[int] = None,
) -> str:
    """
    Splice a glyph sequence into host text using the selected strategy.

    Args:
        host: The visible carrier text. Never modified.
        glyphs: Glyph sequence from BitCodec.pack().
        position: EmbedPosition member, name or number.
        k: Repeat count (RANDOM) or line stride (NTHLINES, RANDOMINLINE).
        rng: Optional random source for the random strategies.
        max_attempts: Retry cap per RANDOM insertion.

    Returns:
        The embedded text.

    Raises:
        ValueError: If k is not a positive integer or position is unknown.
        InsertionError: If the RANDOM strategy runs out of attempts.
    """
    if isinstance(k, bool) or not isinstance(k, int) or k < 1:
        raise ValueError(f"k must be an integer >= 1, got {k!r}")

    strategy = STRATEGIES[EmbedPosition.parse(position)]
    return strategy(host, glyphs, k, rng=rng, max_attempts=max_attempts)
