# skatelib/core/slug.py
"""
Slug encoder

Turns free text into a canonical identifier fragment for labels and file names.

Output contract
- Empty, or matches `^[a-z0-9]+(-[a-z0-9]+)*$`.
- Never starts/ends with `-`, never contains `--`.
- Pure function of the input (no locale / OS dependence).

Behavior
- ASCII letters are lowercased, ASCII digits kept.
- Any other ASCII byte becomes a single `-` (runs collapse).
- Non-ASCII code points are transliterated with Unidecode ("ü" -> "u", "北" -> "Bei ");
  code points Unidecode has no mapping for count as one separator, while code points
  mapped to "" (combining marks in NFD input) emit nothing.

ASCII input is handled byte-by-byte; Unidecode is only called for non-ASCII code points.
"""

from __future__ import annotations

import re
from typing import Iterator

from unidecode import unidecode

SLUG_RE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")

_KEEP = frozenset(b"abcdefghijklmnopqrstuvwxyz0123456789")
_UPPER = frozenset(b"ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_DASH = ord("-")
_CASE_OFFSET = ord("a") - ord("A")


def _ascii_bytes(text: str) -> Iterator[int]:
    for ch in text:
        if ch < "\x80":
            yield ord(ch)
        else:
            # "" is a valid mapping (combining marks); only unmapped code points become "-"
            yield from unidecode(ch, errors="replace", replace_str="-").encode("ascii", errors="replace")


def slugify(text: str) -> str:
    """
    Convert `text` to a slug.

    Examples:
      slugify("Hello, World!") -> "hello-world"
      slugify("---") -> ""
    """
    slug = bytearray()
    # starts true so a leading separator is never emitted
    prev_is_dash = True

    for b in _ascii_bytes(str(text)):
        if b in _KEEP:
            slug.append(b)
            prev_is_dash = False
        elif b in _UPPER:
            slug.append(b + _CASE_OFFSET)
            prev_is_dash = False
        elif not prev_is_dash:
            slug.append(_DASH)
            prev_is_dash = True

    if slug.endswith(b"-"):
        slug.pop()
    return slug.decode("ascii")


def is_slug(text: str) -> bool:
    """True if `text` is a non-empty, already-canonical slug."""
    return bool(SLUG_RE.fullmatch(text))


__all__ = ["SLUG_RE", "slugify", "is_slug"]
