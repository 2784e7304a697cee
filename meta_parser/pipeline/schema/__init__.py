"""
Schema module.

Contains the per-file schema modules, the type table and the builder that
produces them from the syntax tree.
"""

from __future__ import annotations

from .builder import SchemaBuilder
from .schema_module import SchemaModule, TypeTable

__all__ = [
    "SchemaBuilder",
    "SchemaModule",
    "TypeTable",
]
