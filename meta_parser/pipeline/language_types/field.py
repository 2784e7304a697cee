"""
Field declarations.
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING

from ...utils import get_string_without_quotes, normalize_type_name, strip_member_prefix
from ..config import MetaParserConfig
from ..meta import NativeProperty
from .type_info import TypeInfo

if TYPE_CHECKING:
    from .class_def import Class


class Field(TypeInfo):
    """A data member of a class."""

    def __init__(self, cursor, current_namespace: list[str], parent: Class, config: MetaParserConfig | None = None):
        super().__init__(cursor, current_namespace, config)

        self._parent = weakref.ref(parent)
        self.name = cursor.spelling
        self.display_name = strip_member_prefix(self.name, self.config.member_prefix)
        self.type = normalize_type_name(cursor.type.display_name, self.config.stripped_namespace_prefixes)
        self.is_const = cursor.type.is_const
        self.default = get_string_without_quotes(self.meta_data.get_property("default"))

    @property
    def parent(self) -> Class:
        return self._parent()

    @property
    def qualified_name(self) -> str:
        return self.get_qualified_name(self.name)

    def is_sequence(self) -> bool:
        return self.type.startswith(self.config.sequence_prefix)

    def should_compile(self) -> bool:
        return self.is_accessible()

    def is_accessible(self) -> bool:
        parent_meta = self.parent.meta_data

        # Blanket mode: every field unless disabled
        case1 = (
            parent_meta.get_flag(NativeProperty.FIELDS) or parent_meta.get_flag(NativeProperty.ALL)
        ) and not self.meta_data.get_flag(NativeProperty.DISABLE)

        # Whitelist mode: only explicitly enabled fields
        case2 = parent_meta.get_flag(NativeProperty.WHITE_LIST_FIELDS) and self.meta_data.get_flag(NativeProperty.ENABLE)

        return case1 or case2

    def __repr__(self) -> str:
        return f"Field({self.type} {self.name!r})"
