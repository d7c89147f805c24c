"""Simulated heap allocators over a byte arena, heap reports, cons lists and string checks."""

__version__ = "0.1.0"
__all__ = ["checks", "conslist", "heap", "simple_heap", "debug"]