"""
Class and struct definitions.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...utils import normalize_type_name, strip_member_prefix
from ..config import MetaParserConfig
from ..cursor import NodeKind
from ..meta import NativeProperty
from .field import Field
from .method import Method
from .type_info import TypeInfo


@dataclass
class BaseClass:
    """A base specifier of a class (name only)."""

    name: str = ""

    @staticmethod
    def from_cursor(cursor) -> BaseClass:
        return BaseClass(name=cursor.type.display_name)


class Class(TypeInfo):
    """A class or struct definition with its direct members."""

    def __init__(self, cursor, current_namespace: list[str], config: MetaParserConfig | None = None):
        super().__init__(cursor, current_namespace, config)

        self.name = normalize_type_name(cursor.display_name, self.config.stripped_namespace_prefixes)
        self.qualified_name = cursor.type.display_name
        self.display_name = strip_member_prefix(self.qualified_name, self.config.member_prefix)

        self.base_classes: list[BaseClass] = []
        self.fields: list[Field] = []
        self.methods: list[Method] = []

        # Only direct children; nested types are not visited
        for child in cursor.get_children():
            kind = child.kind
            if kind == NodeKind.BASE_SPECIFIER:
                self.base_classes.append(BaseClass.from_cursor(child))
            elif kind == NodeKind.FIELD_DECL:
                self.fields.append(Field(child, current_namespace, self, self.config))
            elif kind == NodeKind.METHOD:
                self.methods.append(Method(child, current_namespace, self, self.config))

    def should_compile(self) -> bool:
        return self.should_compile_fields() or self.should_compile_methods()

    def should_compile_fields(self) -> bool:
        return (
            self.meta_data.get_flag(NativeProperty.ALL)
            or self.meta_data.get_flag(NativeProperty.FIELDS)
            or self.meta_data.get_flag(NativeProperty.WHITE_LIST_FIELDS)
        )

    def should_compile_methods(self) -> bool:
        return (
            self.meta_data.get_flag(NativeProperty.ALL)
            or self.meta_data.get_flag(NativeProperty.METHODS)
            or self.meta_data.get_flag(NativeProperty.WHITE_LIST_METHODS)
        )

    def is_accessible(self) -> bool:
        return self.enabled

    def __repr__(self) -> str:
        return f"Class({self.qualified_name!r}, fields={len(self.fields)}, methods={len(self.methods)})"
