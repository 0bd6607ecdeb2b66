"""Lossy conversion between PETSCII byte strings and Unicode text."""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator
from typing import overload

__all__ = [
    "Petscii",
    "petscii_to_unicode_char",
    "petscii_to_unicode_string",
    "REPLACEMENT_CHAR",
    "PETSCII_NONE",
]

# Unicode code point used for PETSCII bytes that have no translation.
REPLACEMENT_CHAR = "\ufffd"

# PETSCII byte used for Unicode characters that have no translation
# (the "upper left to lower right diagonal lines" graphic).
PETSCII_NONE = 0x7F

_N = REPLACEMENT_CHAR

_CONTROL = (_N,) * 32

# Space, punctuation, digits, '@' and the lower-case letters (0x20-0x5A).
_ASCII = tuple(" !\"#$%&'()*+,-./0123456789:;<=>?@" + string.ascii_lowercase)

# '[', pound sign, ']', up arrow, left arrow, horizontal line.
_SYMBOLS = ("[", "\u00a3", "]", "\u2191", "\u2190", "\u2501")

_UPPER = tuple(string.ascii_uppercase)

# Box vert/horiz, left checkerboard, box vert, checkerboard, \-diagonal lines.
_BOX = ("\u254b", _N, "\u2503", "\u2592", _N)

# Block graphics shared by the 0xA0 and 0xE0 ranges, minus their last four.
_GRAPHICS = (
    "\u00a0", "\u258c", "\u2584", "\u2594",
    "\u2581", "\u258e", "\u2592", "\u2595",
    _N, _N, "\u2595", "\u2523",
    "\u2597", "\u2517", "\u2513", "\u2582",
    "\u250f", "\u253b", "\u2533", "\u252b",
    "\u258e", "\u258d", "\u2595", "\u2594",
    "\u2594", "\u2583", "\u2713", "\u2596",
    "\u259d", "\u2518", "\u2598",
)

_PETSCII_TO_CHAR: tuple[str, ...] = (
    _CONTROL
    + _ASCII
    + _SYMBOLS
    + _UPPER
    + _BOX
    + _CONTROL
    + _GRAPHICS
    + ("\u259a",)
    + ("\u2501",)
    + _UPPER
    + _BOX
    + _GRAPHICS
    + ("\u2592",)
)

assert len(_PETSCII_TO_CHAR) == 256


def _build_reverse_map() -> dict[str, int]:
    reverse: dict[str, int] = {}
    for code, char in enumerate(_PETSCII_TO_CHAR):
        reverse.setdefault(char, code)
    return reverse


# The lowest PETSCII code wins when a character appears more than once.
_CHAR_TO_PETSCII = _build_reverse_map()


def petscii_to_unicode_char(byte: int) -> str:
    """Return the Unicode character for one PETSCII byte."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"PETSCII byte out of range: {byte}")
    return _PETSCII_TO_CHAR[byte]


def petscii_to_unicode_string(data: Iterable[int]) -> str:
    """Return the Unicode text for a sequence of PETSCII bytes."""
    return "".join(petscii_to_unicode_char(byte) for byte in data)


class Petscii:
    """An immutable PETSCII string with lossy Unicode conversion."""

    __slots__ = ("_data",)

    def __init__(self, data: Iterable[int] | bytes | bytearray | memoryview = b"") -> None:
        self._data = bytes(data)

    @classmethod
    def from_bytes(cls, data: Iterable[int] | bytes | bytearray | memoryview) -> Petscii:
        """Wrap raw PETSCII bytes."""
        return cls(data)

    @classmethod
    def from_padded_bytes(
        cls, data: Iterable[int] | bytes | bytearray | memoryview, pad_byte: int
    ) -> Petscii:
        """Wrap raw PETSCII bytes, dropping trailing pad bytes."""
        return cls(bytes(data).rstrip(bytes([pad_byte])))

    @classmethod
    def from_str(cls, text: str) -> Petscii:
        """Encode text, mapping characters without a PETSCII form to 0x7F."""
        return cls(_CHAR_TO_PETSCII.get(char, PETSCII_NONE) for char in text)

    def as_bytes(self) -> bytes:
        """Return the raw PETSCII bytes."""
        return self._data

    def to_padded_bytes(self, length: int, pad_byte: int) -> bytes:
        """Return the bytes padded with ``pad_byte`` to exactly ``length``.

        Raises ValueError if the string is longer than ``length``.
        """
        if len(self._data) > length:
            raise ValueError(
                f"PETSCII string of length {len(self._data)} does not fit in {length} bytes"
            )
        return self._data + bytes([pad_byte]) * (length - len(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return petscii_to_unicode_string(self._data)

    def __repr__(self) -> str:
        return '"' + str(self).replace('"', '\\"') + '"'

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> Petscii: ...

    def __getitem__(self, index: int | slice) -> int | Petscii:
        if isinstance(index, slice):
            return Petscii(self._data[index])
        return self._data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __bytes__(self) -> bytes:
        return self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Petscii):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash((Petscii, self._data))