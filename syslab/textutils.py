"""Small text filters: splitting words onto lines and sorting lines."""

from __future__ import annotations

from typing import Iterable, List, Optional, TypeVar

T = TypeVar("T", str, bytes)


def linebreaker(text: str) -> str:
    """Return ``text`` with every space replaced by a newline."""
    return text.replace(" ", "\n")


def makewords(text: Optional[str]) -> Optional[str]:
    """Return ``text`` with every space replaced by a newline; ``None`` stays ``None``."""
    if text is None:
        return None
    return text.replace(" ", "\n")


def quick_sort(items: Iterable[T]) -> List[T]:
    """Return the items sorted in ascending order by a partitioning quicksort.

    Strings compare by code point, which matches the byte order of their
    UTF-8 encoding.
    """
    array = list(items)
    pending = [(0, len(array) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = array[high]
        boundary = low
        for j in range(low, high):
            if array[j] < pivot:
                array[boundary], array[j] = array[j], array[boundary]
                boundary += 1
        array[boundary], array[high] = array[high], array[boundary]
        pending.append((low, boundary - 1))
        pending.append((boundary + 1, high))
    return array


def sort_lines(lines: Iterable[str]) -> List[str]:
    """Cut each line at its first newline and return the results sorted."""
    return quick_sort(line.split("\n", 1)[0] for line in lines)