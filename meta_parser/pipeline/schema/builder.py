"""
Schema builder.

Walks the syntax tree, recursing through namespaces, and groups the
classes that pass their visibility policy into per-file schema modules.
"""

from __future__ import annotations

import logging

from ..config import MetaParserConfig
from ..cursor import NodeKind
from ..language_types import Class
from .schema_module import SchemaModule, TypeTable

logger = logging.getLogger(__name__)

_CLASS_KINDS = (NodeKind.CLASS_DECL, NodeKind.STRUCT_DECL)


class SchemaBuilder:
    """Builds schema modules and the type table from a root cursor."""

    def __init__(self, config: MetaParserConfig | None = None):
        self.config = config or MetaParserConfig()
        self.type_table = TypeTable()
        self.schema_modules: dict[str, SchemaModule] = {}

    def build(self, root_cursor) -> dict[str, SchemaModule]:
        self.build_class_ast(root_cursor, [])
        return self.schema_modules

    def build_class_ast(self, cursor, current_namespace: list[str]) -> None:
        """
        Visit the children of a cursor.

        Args:
            cursor: Translation unit or namespace cursor
            current_namespace: Namespace stack, restored on return
        """
        for child in cursor.get_children():
            kind = child.kind

            if child.is_definition() and kind in _CLASS_KINDS:
                self.try_add_class(Class(child, current_namespace, self.config))
            elif kind == NodeKind.NAMESPACE:
                display_name = child.display_name
                if not display_name:
                    continue
                current_namespace.append(display_name)
                try:
                    self.build_class_ast(child, current_namespace)
                finally:
                    current_namespace.pop()

    def try_add_class(self, class_ptr: Class) -> bool:
        """Add a class to its file's module if its policy asks for generation."""
        if not class_ptr.should_compile():
            logger.debug("Skipping %s: no generation flags", class_ptr.qualified_name)
            return False

        source_file = class_ptr.source_file
        module = self.schema_modules.get(source_file)
        if module is None:
            module = self.schema_modules[source_file] = SchemaModule(name=source_file)
        module.classes.append(class_ptr)
        self.type_table.register(class_ptr.display_name, source_file)
        return True
