"""A first-fit heap that splits blocks but never merges freed neighbours.

It shares the arena layout of :class:`arenalloc.heap.Heap`.  Freed
blocks stay separate, and resizing always moves the data to a new block.
"""

from __future__ import annotations

from typing import Optional

from .heap import HEADER_SIZE, Heap, HeapError, align

_ALLOCATED = 1


class SimpleHeap(Heap):
    """A non-coalescing heap managing ``size`` bytes of memory."""

    def alloc(self, nbytes: int) -> Optional[int]:
        """Allocate at least ``nbytes`` bytes; return None for zero bytes."""
        if nbytes == 0:
            return None
        aligned = align(nbytes)
        for block in self.blocks():
            if block.allocated or block.size < aligned:
                continue
            remainder = block.size - aligned - HEADER_SIZE
            if remainder > 0:
                # The leftover becomes its own free block; it is not merged.
                self._set_header(block.offset + HEADER_SIZE + aligned, remainder)
                self._set_header(block.offset, aligned | _ALLOCATED)
            else:
                self._set_header(block.offset, block.size | _ALLOCATED)
            return block.addr
        raise HeapError(f"no free block for {nbytes} bytes")

    def free(self, addr: Optional[int]) -> None:
        """Mark the block at ``addr`` free without merging it with neighbours."""
        if addr is None:
            return
        _, block = self._locate(addr)
        self._set_header(block.offset, block.size)

    def realloc(self, addr: Optional[int], nbytes: int) -> Optional[int]:
        """Move the block at ``addr`` into a fresh block of ``nbytes`` bytes.

        With no address this allocates; with zero bytes it frees and returns
        None.  If no block is large enough, HeapError is raised and the
        original block is left untouched.
        """
        if addr is None:
            return self.alloc(nbytes)
        if nbytes == 0:
            self.free(addr)
            return None
        _, block = self._locate(addr)
        new_addr = self.alloc(nbytes)
        count = min(nbytes, block.size)
        self.memory[new_addr : new_addr + count] = self.memory[addr : addr + count]
        self.free(addr)
        return new_addr