"""Counting code points in UTF-8 encoded strings."""

from __future__ import annotations

from typing import Union


def mbslen(data: Union[bytes, bytearray, memoryview, str]) -> int:
    """Return the number of UTF-8 code points in ``data``.

    Counting stops at the first NUL, as for a C string. Raises ``TypeError``
    for ``None`` and ``ValueError`` for an invalid or truncated sequence.
    """
    if data is None:
        raise TypeError("mbslen() argument must not be None")
    if isinstance(data, str):
        return len(data.split("\0", 1)[0])
    raw = bytes(data).split(b"\0", 1)[0]
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(f"invalid UTF-8 sequence at byte {exc.start}") from exc
    return len(text)