"""Summaries and printable reports of a heap's block layout."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from .heap import Block, Heap

_CYAN = "\033[0;36m"
_MAGENTA = "\033[0;35m"
_RED = "\033[0;31m"
_GREEN = "\033[0;32m"
_RESET = "\033[0m"

_RULE = "=" * 25


@dataclass(frozen=True)
class HeapSummary:
    """Blocks of a heap together with its bounds and size totals."""

    start: int
    end: int
    blocks: tuple[Block, ...]

    @property
    def free_blocks(self) -> tuple[Block, ...]:
        """The blocks that are not allocated."""
        return tuple(b for b in self.blocks if not b.allocated)

    @property
    def total_size(self) -> int:
        """Sum of all block sizes including headers."""
        return sum(b.total for b in self.blocks)

    @property
    def expected_size(self) -> int:
        """Size of the managed area."""
        return self.end - self.start

    @property
    def consistent(self) -> bool:
        """True if the blocks exactly cover the managed area."""
        return self.total_size == self.expected_size


def summarize(heap: Heap) -> HeapSummary:
    """Return a summary of ``heap``."""
    if heap is None:
        raise ValueError("heap is None")
    return HeapSummary(heap.start, heap.end, tuple(heap.blocks()))


def render(heap: Optional[Heap], color: bool = True) -> str:
    """Return a textual report of the heap's free and full block lists."""
    if heap is None:
        return "Heap is NULL.\n"

    def paint(code: str, text: object) -> str:
        return f"{code}{text}{_RESET}" if color else str(text)

    summary = summarize(heap)

    def block_lines(block: Block, with_state: bool) -> list[str]:
        lines = [f"Block at {paint(_MAGENTA, hex(block.offset))}"]
        if with_state:
            lines.append(
                "  " + (paint(_RED, "Allocated") if block.allocated else paint(_GREEN, "Free"))
            )
        lines.append(f"   Size: {paint(_CYAN, block.size)}")
        lines.append(f"  Total: {paint(_CYAN, block.total)}")
        return lines

    lines = [
        "",
        "===== HEAP DEBUGGER =====",
        f"Heap Start:{paint(_CYAN, '   ' + hex(summary.start))}",
        f"Heap End:{paint(_CYAN, '     ' + hex(summary.end))}",
        "",
        f"Heap Size:{paint(_CYAN, '     ' + str(summary.expected_size))}",
        "",
        "======= FREE LIST =======",
    ]
    for block in summary.free_blocks:
        lines.extend(block_lines(block, with_state=False))
    lines.append("======= FULL LIST =======")
    for block in summary.blocks:
        lines.extend(block_lines(block, with_state=True))
    lines.extend(
        [
            _RULE,
            f"     Total Size: {paint(_CYAN, summary.total_size)}",
            f"  Expected Size: {paint(_CYAN, summary.expected_size)}",
            _RULE,
            "",
            "",
            "",
        ]
    )
    return "\n".join(lines)


def print_heap(
    heap: Optional[Heap], file: Optional[TextIO] = None, color: bool = True
) -> None:
    """Write the report of ``heap`` to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(render(heap, color))