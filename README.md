# arenalloc

`arenalloc` is a small library that simulates a heap allocator inside a
fixed-size byte arena. It also includes mutable cons-cell linked lists and a
set of checks on C-style byte strings.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Heap allocator

`arenalloc.heap.Heap(size)` manages a `bytearray` of `size` bytes. The first
16 bytes hold the heap's bounds. After them comes a run of blocks. Each block
has an 8-byte little-endian header that stores its payload size, with the low
bit set while the block is allocated. Addresses are byte offsets of payloads
within the arena. Requested sizes are rounded up to a multiple of 8 by
`align()`. Allocation is first-fit. A freed block is merged with a free
neighbour on either side.

```python
from arenalloc.heap import Heap

heap = Heap(256)
a = heap.alloc(10)          # payload offset, 8-byte aligned
heap.write(a, b"hello")
b = heap.realloc(a, 40)     # may move; contents are preserved
assert heap.read(b, 5) == b"hello"
heap.free(b)

for block in heap.blocks():  # Block(offset, size, allocated), with .addr and .total
    print(block)
print(heap.free_bytes())
```

Behaviour at the edges:

- `alloc(0)` returns `None`. If no free block is large enough, `alloc` raises
  `HeapError`.
- `free(None)` does nothing. Freeing an address that is not the payload of an
  allocated block raises `HeapError`.
- `realloc(None, n)` works like `alloc(n)`. `realloc(addr, 0)` frees the block
  and returns `None`. A block that shrinks stays where it is. A block that
  grows first tries to take over a free neighbour. If that fails, it moves to
  a newly allocated block. When there is no room, `HeapError` is raised and
  the original block is left as it was.
- `read` and `write` raise `HeapError` when the address is not an allocated
  block, or when the access would run past the end of the block.
- `Heap(size)` raises `ValueError` if `size` is not a multiple of 8 or is
  smaller than 24 bytes.

`arenalloc.simple_heap.SimpleHeap` uses the same layout. It is a first-fit
allocator that splits blocks but never merges freed neighbours. Its `realloc`
always allocates a new block, copies `min(nbytes, old size)` bytes across and
frees the old block.

## Inspecting a heap

```python
from arenalloc.debug import summarize, render, print_heap

summary = summarize(heap)        # HeapSummary(start, end, blocks)
summary.free_blocks              # blocks that are not allocated
summary.total_size, summary.expected_size
summary.consistent               # True if the blocks exactly cover the area

text = render(heap, color=False) # free list and full list as text
print_heap(heap)                 # writes the coloured report to stdout
```

`render(None)` returns `"Heap is NULL.\n"`. When `color` is true, the report
uses ANSI colour codes.

## Cons lists

`arenalloc.conslist.Cons` is a mutable cell. It holds an unsigned 64-bit value
(`car`) and the next cell (`cdr`). An empty list is `None`. Iterating over a
cell yields the values from that cell to the end of the list.

```python
from arenalloc.conslist import from_iterable, insert_sorted, reverse, format_list

lst = from_iterable([1, 3, 5])
lst = insert_sorted(lst, 4)
print(format_list(reverse(lst)))   # [5, 4, 3, 1]
```

The module also provides `cons`, `first`, `rest` and `find`. `insert_sorted`
and `reverse` change the list in place and return the new head. `first`,
`rest`, `find` and `format_list` raise `ValueError` when given an empty list.

## String checks

`arenalloc.checks` works on the bytes of its argument up to the first NUL byte.
A `str` argument is encoded as UTF-8 first. The module provides:

- `check_length`: exactly 20 bytes long
- `check_uppercase`: every byte is in `A`–`Z`
- `check_palindrome`: reads the same forwards and backwards
- `checksum`, and `check_checksum`, which compares the checksum with 228
- `check_all`: passes all four checks

## What it does not do

`arenalloc` is a library only. It provides no command-line tool. The heap is a
simulation inside a Python `bytearray` and does not manage real process memory.