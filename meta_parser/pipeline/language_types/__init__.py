"""
Language types module.

Declared-entity model: classes, fields and methods with their
annotation-driven visibility rules.
"""

from __future__ import annotations

from .class_def import BaseClass, Class
from .field import Field
from .method import Method
from .type_info import TypeInfo

__all__ = [
    "TypeInfo",
    "BaseClass",
    "Class",
    "Field",
    "Method",
]
