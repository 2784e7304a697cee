"""
Output module.

File writing for generated artifacts.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter

__all__ = [
    "AtomicWriter",
]
