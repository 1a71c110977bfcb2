"""
glyph_codec.py - Invisible Glyph Alphabet and Bit Codec

This module implements the low-level primitives that turn a text payload into
a run of invisible Unicode characters and back again. Everything here is a
pure function over strings; nothing is ever mutated in place.

Encoding Scheme:
    ZERO_WIDTH_SPACE (U+200B)          → Binary '0'
    ZERO_WIDTH_NO_BREAK_SPACE (U+FEFF) → Binary '1'

    Each payload character is written as its code point in (at least) 8
    big-endian bits. There is no delimiter, length field or checksum: the
    decoder simply collects every glyph it can find, in order.

Known Limitation:
    Only characters with code points 0-255 round-trip. A larger code point
    renders as more than 8 bits and shifts the framing of everything after
    it. This is the wire format, so it is documented rather than "fixed".

Security Note:
    This is steganographic obscurity, not encryption. Anyone who knows the
    alphabet can read the payload back.
"""

from typing import Dict

# ═══════════════════════════════════════════════════════════════════════════════
# UNICODE CODE POINTS FOR THE GLYPH ALPHABET
# ═══════════════════════════════════════════════════════════════════════════════


class GlyphAlphabet:
    """
    Fixed two-symbol mapping between a bit and an invisible code point.

    Both characters are format characters with no visible rendering. They
    survive copy/paste, most editors and JSON/UTF-8 serialisation, which is
    what makes them usable as a hidden binary alphabet.

    The tables are class attributes built once at import time and never
    modified afterwards, so they can be shared across threads freely.
    """

    ZERO: str = "\u200b"  # ZERO WIDTH SPACE
    ONE: str = "\ufeff"  # ZERO WIDTH NO-BREAK SPACE (BOM)

    BIT_TO_GLYPH: Dict[str, str] = {"0": ZERO, "1": ONE}
    GLYPH_TO_BIT: Dict[str, str] = {ZERO: "0", ONE: "1"}

    ALL_CHARS: frozenset = frozenset(BIT_TO_GLYPH.values())

    @classmethod
    def is_glyph(cls, char: str) -> bool:
        """Check if a character is one of the two alphabet glyphs."""
        return char in cls.ALL_CHARS

    @classmethod
    def contains_glyphs(cls, text: str) -> bool:
        """Quick check if text contains any alphabet glyph."""
        return any(c in cls.ALL_CHARS for c in text)


# ═══════════════════════════════════════════════════════════════════════════════
# BIT CODEC: Text ⇄ Glyph Sequence
# ═══════════════════════════════════════════════════════════════════════════════


class BitCodec:
    """
    Converts text payloads to glyph sequences and back.

    Example:
        >>> glyphs = BitCodec.pack("Hi")
        >>> len(glyphs)
        16
        >>> BitCodec.unpack(glyphs)
        'Hi'
    """

    BITS_PER_CHAR = 8

    @classmethod
    def to_bits(cls, payload: str) -> str:
        """
        Render a payload as a flat string of '0'/'1' characters.

        Every code point is left-padded to 8 bits. Nothing is truncated, so a
        code point above 255 yields a longer group.
        """
        return "".join(format(ord(ch), "08b") for ch in payload)

    @classmethod
    def pack(cls, payload: str) -> str:
        """
        Encode a text payload into an invisible glyph sequence.

        Args:
            payload: The text to hide. May be empty.

        Returns:
            One glyph per bit, in bit order. Empty for an empty payload.
        """
        if not payload:
            return ""

        return "".join(GlyphAlphabet.BIT_TO_GLYPH[bit] for bit in cls.to_bits(payload))

    @classmethod
    def unpack(cls, glyphs: str) -> str:
        """
        Decode a glyph sequence back into text.

        Decoding is best effort and never raises:

        - characters that are not alphabet glyphs carry no bit and are skipped
        - a trailing group shorter than 8 bits is dropped

        Args:
            glyphs: Glyph sequence, normally produced by Scanner.extract().

        Returns:
            The decoded payload, possibly empty.
        """
        if not glyphs:
            return ""

        bits = "".join(GlyphAlphabet.GLYPH_TO_BIT.get(g, "") for g in glyphs)

        width = cls.BITS_PER_CHAR
        whole = len(bits) - len(bits) % width
        return "".join(chr(int(bits[i : i + width], 2)) for i in range(0, whole, width))


# ═══════════════════════════════════════════════════════════════════════════════
# SCANNER AND CLEANER
# ═══════════════════════════════════════════════════════════════════════════════


class Scanner:
    """Pulls the ordered glyph sub-sequence out of arbitrary text."""

    @staticmethod
    def extract(text: str) -> str:
        """Return every alphabet glyph in ``text``, in order, ignoring the rest."""
        return "".join(c for c in text if GlyphAlphabet.is_glyph(c))


class Cleaner:
    """Removes hidden glyphs from text."""

    @staticmethod
    def strip(text: str) -> str:
        """
        Remove all alphabet glyphs from text.

        The result contains no glyphs, and stripping it again returns it
        unchanged. Note that this also destroys any hidden payload.
        """
        return "".join(c for c in text if not GlyphAlphabet.is_glyph(c))
