"""
Method declarations.
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING

from ..config import MetaParserConfig
from ..meta import NativeProperty
from .type_info import TypeInfo

if TYPE_CHECKING:
    from .class_def import Class


class Method(TypeInfo):
    """A member function of a class."""

    def __init__(self, cursor, current_namespace: list[str], parent: Class, config: MetaParserConfig | None = None):
        super().__init__(cursor, current_namespace, config)

        self._parent = weakref.ref(parent)
        self.name = cursor.spelling
        self.argument_count = max(cursor.type.argument_count, 0)

    @property
    def parent(self) -> Class:
        return self._parent()

    @property
    def qualified_name(self) -> str:
        return self.get_qualified_name(self.name)

    def should_compile(self) -> bool:
        return self.is_accessible()

    def is_accessible(self) -> bool:
        parent_meta = self.parent.meta_data

        case1 = (
            parent_meta.get_flag(NativeProperty.METHODS) or parent_meta.get_flag(NativeProperty.ALL)
        ) and not self.meta_data.get_flag(NativeProperty.DISABLE)

        case2 = parent_meta.get_flag(NativeProperty.WHITE_LIST_METHODS) and self.meta_data.get_flag(NativeProperty.ENABLE)

        return case1 or case2

    def __repr__(self) -> str:
        return f"Method({self.name!r})"
