# petscii

Commodore's 8-bit computers used their own variant of ASCII, commonly called
PETSCII. This package holds PETSCII strings and converts them to and from
Unicode text. The conversion is lossy in both directions:

- PETSCII bytes with no Unicode counterpart, such as control codes, become
  U+FFFD (`petscii.codec.REPLACEMENT_CHAR`).
- Unicode characters with no PETSCII counterpart become byte `0x7F`
  (`petscii.codec.PETSCII_NONE`).
- Where a Unicode character appears at more than one PETSCII code, encoding
  picks the lowest code.

Everything lives in the `petscii.codec` module. It is a library only; there
is no command-line tool.

## Installation

```
pip install petscii
```

## Usage

```python
from petscii.codec import Petscii, petscii_to_unicode_char, petscii_to_unicode_string

p = Petscii.from_bytes(b"\x41\x42\x43\xc1\xc2\xc3")
str(p)            # 'abcABC'
len(p)            # 6
p[0]              # 65
p[1:3]            # a Petscii holding b'BC', shown as "bc"
list(p)           # [65, 66, 67, 193, 194, 195]
bytes(p)          # b'ABC\xc1\xc2\xc3'

Petscii.from_str("Hello").as_bytes()   # b'hELLO'

petscii_to_unicode_char(0x7B)          # U+254B, the box cross '╋'
petscii_to_unicode_string(b"\x41\x00") # 'a' followed by U+FFFD
```

`petscii_to_unicode_char` raises `ValueError` for a value outside 0–255.

`Petscii` objects are immutable. They compare equal when their bytes are
equal, can be used as dictionary keys, and their `repr` is the decoded text
in double quotes, with any `"` escaped as `\"`.

### Fixed-width, padded fields

Disk directory entries and similar records store names in fixed-width
fields padded with a fill byte (often `0xA0`).

```python
name = Petscii.from_padded_bytes(b"ABC\xa0\xa0\xa0\xa0\xa0", 0xA0)
len(name)                        # 3
name.to_padded_bytes(8, 0xA0)    # b'ABC\xa0\xa0\xa0\xa0\xa0'
```

`from_padded_bytes` drops only trailing pad bytes. `to_padded_bytes` raises
`ValueError` when the string is longer than the requested length.

## Running the tests

```
pip install -e ".[test]"
pytest
```