"""Fixed-size text buffer helpers.

Notes are stored in buffers with a hard byte ceiling. Lengths are counted on
the UTF-8 encoding with ``surrogateescape`` so bytes read from disk survive a
round trip unchanged, even when a truncation splits a multi-byte character.
"""

from __future__ import annotations

import os
from typing import Tuple

ENCODING = "utf-8"
ERRORS = "surrogateescape"

MAX_NOTES = 10
TITLE_CAPACITY = 32
CONTENT_CAPACITY = 1024

RESERVED_TITLES = {".", ".."}


def encode(text: str) -> bytes:
    return text.encode(ENCODING, ERRORS)


def decode(raw: bytes) -> str:
    return raw.decode(ENCODING, ERRORS)


def byte_length(text: str) -> int:
    return len(encode(text))


def copy_truncating(capacity: int, src: str) -> str:
    """Return at most ``capacity - 1`` bytes of ``src``.

    The last slot of a buffer is reserved for its terminator, so a capacity of
    32 holds 31 bytes of text. Excess bytes are dropped without notice.
    """

    if capacity <= 0 or not src:
        return ""
    raw = encode(src)
    if len(raw) < capacity:
        return src
    return decode(raw[: capacity - 1])


def append_line(content: str, text: str, capacity: int = CONTENT_CAPACITY) -> Tuple[str, bool]:
    """Append ``text`` as a new line of ``content``.

    Returns the new content and whether the line was applied. A line that does
    not fit (content + separator + terminator) leaves the content untouched.
    """

    current_len = byte_length(content)
    if current_len + byte_length(text) + 2 >= capacity:
        return content, False

    if current_len > 0:
        content += "\n"
        current_len += 1
    return content + copy_truncating(capacity - current_len, text), True


def is_safe_title(title: str) -> bool:
    """Return True when ``title`` can be used as a plain file name.

    Titles double as file names, so anything that could step out of the notes
    directory is refused.
    """

    if not title or title in RESERVED_TITLES or "\0" in title:
        return False
    separators = {"/", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    return not any(sep in title for sep in separators)


__all__ = [
    "MAX_NOTES",
    "TITLE_CAPACITY",
    "CONTENT_CAPACITY",
    "append_line",
    "byte_length",
    "copy_truncating",
    "decode",
    "encode",
    "is_safe_title",
]
