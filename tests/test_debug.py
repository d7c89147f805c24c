import io

import pytest

from arenalloc.debug import HeapSummary, print_heap, render, summarize
from arenalloc.heap import Heap
from arenalloc.simple_heap import SimpleHeap


def test_summary_of_fresh_heap():
    heap = Heap(64)
    summary = summarize(heap)
    assert isinstance(summary, HeapSummary)
    assert len(summary.blocks) == 1
    assert summary.free_blocks == summary.blocks
    assert summary.expected_size == heap.end - heap.start
    assert summary.consistent


def test_summary_after_allocations_stays_consistent():
    heap = SimpleHeap(256)
    a = heap.alloc(8)
    heap.alloc(24)
    heap.free(a)
    summary = summarize(heap)
    assert summary.consistent
    assert summary.total_size == summary.expected_size
    assert sum(1 for b in summary.blocks if b.allocated) == 1


def test_summarize_none_raises():
    with pytest.raises(ValueError):
        summarize(None)


def test_render_none():
    assert render(None) == "Heap is NULL.\n"


def test_render_plain_has_no_escape_codes():
    heap = Heap(128)
    heap.alloc(8)
    text = render(heap, color=False)
    assert "\033" not in text
    assert "Allocated" in text
    assert "Free" in text
    assert "===== HEAP DEBUGGER =====" in text


def test_render_color_marks_allocated_red():
    heap = Heap(128)
    heap.alloc(8)
    text = render(heap, color=True)
    assert "\033[0;31mAllocated\033[0m" in text
    assert "\033[0;32mFree\033[0m" in text


def test_render_lists_free_blocks_then_all_blocks():
    heap = SimpleHeap(256)
    a = heap.alloc(8)
    heap.alloc(8)
    heap.free(a)
    summary = summarize(heap)
    text = render(heap, color=False)
    assert text.count("Block at") == len(summary.free_blocks) + len(summary.blocks)
    free_part, full_part = text.split("======= FULL LIST =======")
    assert free_part.count("Block at") == len(summary.free_blocks)
    assert f"Total Size: {summary.total_size}" in full_part
    assert f"Expected Size: {summary.expected_size}" in full_part


def test_print_heap_writes_render():
    heap = Heap(64)
    buffer = io.StringIO()
    print_heap(heap, buffer, color=False)
    assert buffer.getvalue() == render(heap, color=False)


def test_print_heap_none():
    buffer = io.StringIO()
    print_heap(None, buffer, color=False)
    assert buffer.getvalue() == "Heap is NULL.\n"