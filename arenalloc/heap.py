"""A first-fit, coalescing heap allocator over a fixed-size byte arena.

The arena is laid out as a 16-byte state area followed by a sequence of
blocks.  Each block is an 8-byte little-endian header holding the payload
size, with the lowest bit set while the block is allocated, followed by
the payload itself.  Addresses handed out and accepted are byte offsets
into the arena pointing at a block's payload.
"""

from __future__ import annotations

import struct
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

ALIGNMENT = 8
HEADER_SIZE = 8
STATE_SIZE = 16

_HEADER = struct.Struct("<Q")
_STATE = struct.Struct("<QQ")
_ALLOCATED = 1


class HeapError(Exception):
    """Raised when the heap cannot satisfy a request or an address is invalid."""


def align(nbytes: int) -> int:
    """Round ``nbytes`` up to the allocation granularity."""
    if nbytes < 0:
        raise ValueError(f"negative size: {nbytes}")
    return (nbytes + ALIGNMENT - 1) & ~(ALIGNMENT - 1)


@dataclass(frozen=True)
class Block:
    """One block of the heap: header offset, payload size and state."""

    offset: int
    size: int
    allocated: bool

    @property
    def addr(self) -> int:
        """Offset of the block's payload."""
        return self.offset + HEADER_SIZE

    @property
    def total(self) -> int:
        """Size of the block including its header."""
        return self.size + HEADER_SIZE


class Heap:
    """A heap managing ``size`` bytes of memory."""

    def __init__(self, size: int) -> None:
        if size % ALIGNMENT:
            raise ValueError(f"heap size must be a multiple of {ALIGNMENT}: {size}")
        if size < STATE_SIZE + HEADER_SIZE:
            raise ValueError(f"heap size too small: {size}")
        self.size = size
        self.start = STATE_SIZE
        self.end = size
        self.memory = bytearray(size)
        _STATE.pack_into(self.memory, 0, self.start, self.end)
        self._set_header(self.start, self.end - self.start - HEADER_SIZE)

    # -- header access -------------------------------------------------

    def _header(self, offset: int) -> int:
        return _HEADER.unpack_from(self.memory, offset)[0]

    def _set_header(self, offset: int, raw: int) -> None:
        _HEADER.pack_into(self.memory, offset, raw)

    def blocks(self) -> Iterator[Block]:
        """Yield every block of the heap in address order."""
        offset = self.start
        while offset < self.end:
            raw = self._header(offset)
            size = raw & ~_ALLOCATED
            yield Block(offset, size, bool(raw & _ALLOCATED))
            offset += HEADER_SIZE + size

    def _locate(self, addr: int) -> tuple[Optional[Block], Block]:
        """Return the allocated block at ``addr`` and the block before it."""
        prev: Optional[Block] = None
        for block in self.blocks():
            if block.addr == addr:
                if not block.allocated:
                    raise HeapError(f"block at {addr} is not allocated")
                return prev, block
            if block.addr > addr:
                break
            prev = block
        raise HeapError(f"no block at address {addr}")

    def _release_tail(self, offset: int, size: int) -> None:
        """Mark a free block at ``offset`` and merge it with a free successor."""
        following = offset + HEADER_SIZE + size
        if following < self.end:
            raw = self._header(following)
            if not raw & _ALLOCATED:
                size += raw + HEADER_SIZE
        self._set_header(offset, size)

    def _carve(self, offset: int, total: int, aligned: int) -> None:
        """Allocate ``aligned`` bytes of a ``total``-byte region, freeing any usable rest."""
        if total - aligned >= HEADER_SIZE + ALIGNMENT:
            self._set_header(offset, aligned | _ALLOCATED)
            self._release_tail(
                offset + HEADER_SIZE + aligned, total - aligned - HEADER_SIZE
            )
        else:
            self._set_header(offset, total | _ALLOCATED)

    # -- public interface ----------------------------------------------

    def alloc(self, nbytes: int) -> Optional[int]:
        """Allocate at least ``nbytes`` bytes; return None for zero bytes."""
        if nbytes == 0:
            return None
        aligned = align(nbytes)
        for block in self.blocks():
            if not block.allocated and block.size >= aligned:
                self._carve(block.offset, block.size, aligned)
                return block.addr
        raise HeapError(f"no free block for {nbytes} bytes")

    def free(self, addr: Optional[int]) -> None:
        """Release the block at ``addr``, merging it with free neighbours."""
        if addr is None:
            return
        prev, block = self._locate(addr)
        size = block.size
        following = block.offset + block.total
        if following < self.end:
            raw = self._header(following)
            if not raw & _ALLOCATED:
                size += raw + HEADER_SIZE
        self._set_header(block.offset, size)
        if prev is not None and not prev.allocated:
            self._set_header(prev.offset, prev.size + size + HEADER_SIZE)

    def realloc(self, addr: Optional[int], nbytes: int) -> Optional[int]:
        """Resize the block at ``addr``, moving it and its contents if needed.

        With no address this allocates; with zero bytes it frees and returns
        None.  If the heap cannot hold the larger block, HeapError is raised
        and the original block is left untouched.
        """
        if addr is None:
            return self.alloc(nbytes)
        if nbytes == 0:
            self.free(addr)
            return None

        prev, block = self._locate(addr)
        actual = block.size
        aligned = align(nbytes)
        if nbytes == actual:
            return addr
        if aligned <= actual:
            self._carve(block.offset, actual, aligned)
            return addr

        next_free: Optional[int] = None
        following = block.offset + block.total
        if following < self.end:
            raw = self._header(following)
            if not raw & _ALLOCATED:
                next_free = raw
        prev_free = prev.size if prev is not None and not prev.allocated else None

        target: Optional[tuple[int, int]] = None
        if next_free is not None and actual + next_free + HEADER_SIZE >= aligned:
            target = (block.offset, actual + next_free + HEADER_SIZE)
        elif prev_free is not None and prev_free + actual + HEADER_SIZE >= aligned:
            target = (prev.offset, prev_free + actual + HEADER_SIZE)
        elif (
            prev_free is not None
            and next_free is not None
            and prev_free + actual + next_free + 2 * HEADER_SIZE >= aligned
        ):
            target = (prev.offset, prev_free + actual + next_free + 2 * HEADER_SIZE)

        if target is not None:
            start, total = target
            contents = bytes(self.memory[addr : addr + actual])
            self.memory[start + HEADER_SIZE : start + HEADER_SIZE + actual] = contents
            self._carve(start, total, aligned)
            return start + HEADER_SIZE

        new_addr = self.alloc(aligned)
        self.memory[new_addr : new_addr + actual] = self.memory[addr : addr + actual]
        self.free(addr)
        return new_addr

    def read(self, addr: int, nbytes: int) -> bytes:
        """Return ``nbytes`` bytes from the payload of the allocated block at ``addr``."""
        _, block = self._locate(addr)
        if not 0 <= nbytes <= block.size:
            raise HeapError(f"read of {nbytes} bytes outside block of {block.size}")
        return bytes(self.memory[addr : addr + nbytes])

    def write(self, addr: int, data: bytes) -> None:
        """Copy ``data`` into the payload of the allocated block at ``addr``."""
        _, block = self._locate(addr)
        if len(data) > block.size:
            raise HeapError(f"write of {len(data)} bytes outside block of {block.size}")
        self.memory[addr : addr + len(data)] = data

    def free_bytes(self) -> int:
        """Return the total payload size of all free blocks."""
        return sum(block.size for block in self.blocks() if not block.allocated)