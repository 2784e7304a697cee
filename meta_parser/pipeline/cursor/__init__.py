"""
Cursor module.

Wraps the libclang syntax tree behind a small interface.
"""

from __future__ import annotations

from .cursor import Cursor, CursorType, NodeKind

__all__ = [
    "Cursor",
    "CursorType",
    "NodeKind",
]
