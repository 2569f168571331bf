"""A debugging allocator over a simulated heap.

Pointers are plain integers that address a simulated address space. The
:class:`BaseAllocator` hands out blocks and never overwrites freed memory.
The :class:`DebugAllocator` on top of it keeps allocation statistics and
reports invalid and double frees.
"""

from __future__ import annotations

import sys
from bisect import bisect_right
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Set, TextIO, Tuple

SIZE_MAX = (1 << 64) - 1
UINTPTR_MAX = SIZE_MAX
HEADER_SIZE = 8
ALIGNMENT = 16
HEAP_START = 0x5555_0000_0000
DEFAULT_LIMIT = 1 << 30

_U64 = SIZE_MAX


def _round_up(size: int) -> int:
    return (size + ALIGNMENT - 1) // ALIGNMENT * ALIGNMENT


def _check_size(name: str, value: int) -> None:
    if value < 0 or value > SIZE_MAX:
        raise ValueError(f"{name} must be between 0 and {SIZE_MAX}")


class BaseAllocator:
    """Block allocator that keeps freed blocks intact and may reuse them.

    About three times in four a request is served from a previously freed
    block that is large enough; otherwise a new block is carved from the
    heap. Requests that would take the heap past ``limit`` bytes fail.
    """

    def __init__(self, limit: int = DEFAULT_LIMIT) -> None:
        self.limit = limit
        self._allocs: Dict[int, int] = {}
        self._frees: List[Tuple[int, int]] = []
        self._disabled = False
        self._rng_state = 8973443640547502487
        self._blocks: Dict[int, bytearray] = {}
        self._starts: List[int] = []
        self._next = HEAP_START

    def _random(self) -> int:
        self._rng_state = (self._rng_state * 6364136223846793005 + 1) & _U64
        return self._rng_state >> 32

    def _new_block(self, size: int) -> Optional[int]:
        length = _round_up(max(size, 1))
        if self._next + length > HEAP_START + self.limit:
            return None
        addr = self._next
        self._next += length
        self._blocks[addr] = bytearray(length)
        self._starts.append(addr)
        return addr

    def _release(self, ptr: int) -> None:
        if self._blocks.pop(ptr, None) is not None:
            del self._starts[bisect_right(self._starts, ptr) - 1]
        self._allocs.pop(ptr, None)

    def malloc(self, size: int) -> Optional[int]:
        """Return the address of a block of at least ``size`` bytes, or ``None``."""
        if size < 0:
            raise ValueError("size must not be negative")
        if self._disabled:
            return self._new_block(size)

        ptr: Optional[int] = None
        if self._random() % 4 != 0:
            for _ in range(min(10, len(self._frees))):
                slot = self._random() % len(self._frees)
                addr, freed_size = self._frees[slot]
                if freed_size >= size:
                    ptr = addr
                    self._frees[slot] = self._frees[-1]
                    self._frees.pop()
                    break

        if ptr is None:
            ptr = self._new_block(size)
        if ptr is not None:
            self._allocs[ptr] = size
        return ptr

    def free(self, ptr: Optional[int]) -> None:
        """Mark the block at ``ptr`` free; unknown pointers are ignored."""
        if not ptr:
            return
        if self._disabled:
            self._release(ptr)
            return
        size = self._allocs.pop(ptr, None)
        if size is not None:
            self._frees.append((ptr, size))

    def disable(self, disabled: bool) -> None:
        """Switch to plain allocation: no tracking, and frees release memory."""
        self._disabled = bool(disabled)

    def _spans(self, addr: int, size: int) -> Iterator[Tuple[bytearray, int, int]]:
        end = addr + size
        pos = addr
        while pos < end:
            slot = bisect_right(self._starts, pos) - 1
            if slot < 0:
                raise IndexError(f"address {pos:#x} is outside the heap")
            start = self._starts[slot]
            buf = self._blocks[start]
            offset = pos - start
            if offset >= len(buf):
                raise IndexError(f"address {pos:#x} is outside the heap")
            count = min(len(buf) - offset, end - pos)
            yield buf, offset, count
            pos += count

    def _read(self, addr: int, size: int) -> bytes:
        if size < 0:
            raise ValueError("size must not be negative")
        return b"".join(
            bytes(buf[offset:offset + count])
            for buf, offset, count in self._spans(addr, size)
        )

    def _write(self, addr: int, data: bytes) -> None:
        data = bytes(data)
        spans = list(self._spans(addr, len(data)))
        done = 0
        for buf, offset, count in spans:
            buf[offset:offset + count] = data[done:done + count]
            done += count


@dataclass(frozen=True)
class DmallocStats:
    """Allocation statistics of a :class:`DebugAllocator`."""

    nactive: int
    active_size: int
    ntotal: int
    total_size: int
    nfail: int
    fail_size: int
    heap_min: int
    heap_max: int


class MemoryBugError(RuntimeError):
    """An invalid or double free was detected."""

    def __init__(self, message: str, ptr: int, reason: str) -> None:
        super().__init__(message)
        self.ptr = ptr
        self.reason = reason


class DebugAllocator:
    """Allocator that records statistics and catches bad frees.

    Each block carries an 8-byte header holding its requested size, stored
    in simulated memory just before the returned pointer.
    """

    def __init__(self, base: Optional[BaseAllocator] = None) -> None:
        self.base = BaseAllocator() if base is None else base
        self._nactive = 0
        self._active_size = 0
        self._ntotal = 0
        self._total_size = 0
        self._nfail = 0
        self._fail_size = 0
        self._heap_min = UINTPTR_MAX
        self._heap_max = 0
        self._allocated: Dict[int, None] = {}
        self._freed: Set[int] = set()

    def _fail(self, size: int) -> None:
        self._nfail = (self._nfail + 1) & _U64
        self._fail_size = (self._fail_size + size) & _U64

    def _block_size(self, ptr: int) -> int:
        return int.from_bytes(self.base._read(ptr - HEADER_SIZE, HEADER_SIZE), "little")

    def malloc(self, size: int, file: str = "?", line: int = 0) -> Optional[int]:
        """Allocate ``size`` bytes and return the pointer, or ``None`` on failure."""
        _check_size("size", size)
        if size > SIZE_MAX - HEADER_SIZE:
            self._fail(size)
            return None
        header = self.base.malloc(size + HEADER_SIZE)
        if header is None:
            self._fail(size)
            return None
        self.base._write(header, size.to_bytes(HEADER_SIZE, "little"))
        ptr = header + HEADER_SIZE
        self._nactive += 1
        self._active_size = (self._active_size + size) & _U64
        self._ntotal += 1
        self._total_size = (self._total_size + size) & _U64
        self._heap_min = min(self._heap_min, header)
        self._heap_max = max(self._heap_max, header + size + HEADER_SIZE)
        self._allocated[ptr] = None
        return ptr

    def free(self, ptr: Optional[int], file: str = "?", line: int = 0) -> None:
        """Release the block at ``ptr``; ``None`` or 0 does nothing.

        Raises :class:`MemoryBugError` for a pointer that is not the start of
        an active block.
        """
        if not ptr:
            return
        if ptr not in self._allocated:
            for other in self._allocated:
                other_size = self._block_size(other)
                if other < ptr < other + other_size:
                    raise MemoryBugError(
                        f"MEMORY BUG: {file}:{line}: invalid free of pointer "
                        f"{ptr:#x}, not allocated\n"
                        f" {file}:{line}: {ptr:#x} is {ptr - other} bytes inside "
                        f"a {other_size} byte region allocated here",
                        ptr,
                        "not allocated",
                    )
            if ptr in self._freed:
                raise MemoryBugError(
                    f"MEMORY BUG???: invalid free of pointer {ptr:#x}, double free",
                    ptr,
                    "double free",
                )
            raise MemoryBugError(
                f"MEMORY BUG???: invalid free of pointer {ptr:#x}, not in heap",
                ptr,
                "not in heap",
            )

        del self._allocated[ptr]
        self._freed.add(ptr)
        size = self._block_size(ptr)
        self._nactive -= 1
        self._active_size = (self._active_size - size) & _U64
        self.base.free(ptr - HEADER_SIZE)

    def calloc(
        self, nmemb: int, size: int, file: str = "?", line: int = 0
    ) -> Optional[int]:
        """Allocate ``nmemb`` zeroed elements of ``size`` bytes each."""
        _check_size("nmemb", nmemb)
        _check_size("size", size)
        if nmemb != 0 and size > SIZE_MAX // nmemb:
            self._fail((nmemb * size) & _U64)
            return None
        total = nmemb * size
        ptr = self.malloc(total, file, line)
        if ptr is not None:
            self.base._write(ptr, bytes(total))
        return ptr

    def realloc(
        self, ptr: Optional[int], size: int, file: str = "?", line: int = 0
    ) -> Optional[int]:
        """Move the block at ``ptr`` to a new block of ``size`` bytes.

        A missing ``ptr`` behaves like :meth:`malloc`; a zero ``size`` frees
        the block and returns ``None``. On failure the old block is kept.
        """
        if not ptr:
            return self.malloc(size, file, line)
        if size == 0:
            self.free(ptr, file, line)
            return None
        old_size = self._block_size(ptr)
        new_ptr = self.malloc(size, file, line)
        if new_ptr is None:
            return None
        self.base._write(new_ptr, self.base._read(ptr, min(old_size, size)))
        self.free(ptr, file, line)
        return new_ptr

    def read(self, ptr: int, size: int) -> bytes:
        """Return ``size`` bytes of simulated memory starting at ``ptr``."""
        return self.base._read(ptr, size)

    def write(self, ptr: int, data: bytes) -> None:
        """Store ``data`` in simulated memory starting at ``ptr``."""
        self.base._write(ptr, data)

    def statistics(self) -> DmallocStats:
        """Return the current allocation statistics."""
        return DmallocStats(
            nactive=self._nactive,
            active_size=self._active_size,
            ntotal=self._ntotal,
            total_size=self._total_size,
            nfail=self._nfail,
            fail_size=self._fail_size,
            heap_min=self._heap_min,
            heap_max=self._heap_max,
        )

    def format_statistics(self) -> str:
        """Return the two statistics lines, each ending in a newline."""
        s = self.statistics()
        return (
            f"alloc count: active {s.nactive:10d}   total {s.ntotal:10d}   "
            f"fail {s.nfail:10d}\n"
            f"alloc size:  active {s.active_size:10d}   total {s.total_size:10d}   "
            f"fail {s.fail_size:10d}\n"
        )

    def print_statistics(self, file: Optional[TextIO] = None) -> None:
        """Write the statistics to ``file`` (standard output by default)."""
        (sys.stdout if file is None else file).write(self.format_statistics())

    def leak_report(self) -> List[str]:
        """Return one line for every block that is still allocated."""
        return [
            f"LEAK CHECK: allocated object {ptr:#x} with size {self._block_size(ptr)}"
            for ptr in self._allocated
        ]

    def print_leak_report(self, file: Optional[TextIO] = None) -> None:
        """Write the leak report to ``file`` (standard output by default)."""
        out = sys.stdout if file is None else file
        for entry in self.leak_report():
            out.write(entry + "\n")