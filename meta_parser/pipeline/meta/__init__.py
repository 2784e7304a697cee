"""
Meta module.

Annotation parsing and the recognized policy keys.
"""

from __future__ import annotations

from .meta_info import MetaInfo
from .properties import NativeProperty

__all__ = [
    "MetaInfo",
    "NativeProperty",
]
