"""
Base class for declared entities (classes, fields, methods).
"""

from __future__ import annotations

from ..config import MetaParserConfig
from ..meta import MetaInfo, NativeProperty


class TypeInfo:
    """A declaration together with its annotation metadata and namespace."""

    def __init__(self, cursor, current_namespace: list[str], config: MetaParserConfig | None = None):
        """
        Initialize the entity.

        Args:
            cursor: Declaration cursor
            current_namespace: Enclosing namespaces, outer to inner (copied)
            config: Naming configuration
        """
        self.config = config or MetaParserConfig()
        self.meta_data = MetaInfo(cursor)
        self.enabled = self.meta_data.get_flag(NativeProperty.ENABLE)
        self.namespace = list(current_namespace)

        # No cursor handle is kept, so the translation unit can be released
        self.source_file = cursor.source_file
        self.line = cursor.line

    def get_qualified_name(self, name: str) -> str:
        return "::".join([*self.namespace, name])
