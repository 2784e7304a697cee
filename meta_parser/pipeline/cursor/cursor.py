"""
Thin wrappers around libclang cursors and types.

The rest of the pipeline only sees `Cursor`, `CursorType` and `NodeKind`,
so model code never depends on clang.cindex directly.
"""

from __future__ import annotations

from enum import Enum

from clang.cindex import CursorKind, TypeKind


class NodeKind(Enum):
    """Kinds of syntax-tree nodes the pipeline distinguishes."""

    TRANSLATION_UNIT = "translation_unit"
    NAMESPACE = "namespace"
    CLASS_DECL = "class_decl"
    STRUCT_DECL = "struct_decl"
    BASE_SPECIFIER = "base_specifier"
    FIELD_DECL = "field_decl"
    METHOD = "method"
    ANNOTATE_ATTR = "annotate_attr"
    OTHER = "other"


_KIND_MAP = {
    CursorKind.TRANSLATION_UNIT: NodeKind.TRANSLATION_UNIT,
    CursorKind.NAMESPACE: NodeKind.NAMESPACE,
    CursorKind.CLASS_DECL: NodeKind.CLASS_DECL,
    CursorKind.STRUCT_DECL: NodeKind.STRUCT_DECL,
    CursorKind.CXX_BASE_SPECIFIER: NodeKind.BASE_SPECIFIER,
    CursorKind.FIELD_DECL: NodeKind.FIELD_DECL,
    CursorKind.CXX_METHOD: NodeKind.METHOD,
    CursorKind.ANNOTATE_ATTR: NodeKind.ANNOTATE_ATTR,
}

# libclang's CXCursor_LastPreprocessing shares its value with InclusionDirective
_LAST_PREPROCESSING = CursorKind.INCLUSION_DIRECTIVE


class CursorType:
    """Wrapper around a clang.cindex.Type."""

    def __init__(self, handle):
        self._handle = handle

    @property
    def display_name(self) -> str:
        return self._handle.spelling

    @property
    def is_const(self) -> bool:
        return self._handle.is_const_qualified()

    @property
    def canonical(self) -> CursorType:
        """The type with typedefs and aliases stripped."""
        return CursorType(self._handle.get_canonical())

    @property
    def declaration(self) -> Cursor:
        return Cursor(self._handle.get_declaration())

    @property
    def argument_count(self) -> int:
        """Number of arguments of a function type, -1 for other types."""
        if self._handle.kind != TypeKind.FUNCTIONPROTO:
            return -1
        return len(list(self._handle.argument_types()))

    def get_argument(self, index: int) -> CursorType:
        return CursorType(list(self._handle.argument_types())[index])

    @property
    def template_argument_count(self) -> int:
        return self._handle.get_num_template_arguments()

    def get_template_argument(self, index: int) -> CursorType:
        return CursorType(self._handle.get_template_argument_type(index))


class Cursor:
    """Wrapper around a clang.cindex.Cursor."""

    def __init__(self, handle):
        self._handle = handle

    @property
    def kind(self) -> NodeKind:
        return _KIND_MAP.get(self._handle.kind, NodeKind.OTHER)

    @property
    def spelling(self) -> str:
        return self._handle.spelling or ""

    @property
    def display_name(self) -> str:
        return self._handle.displayname or ""

    @property
    def source_file(self) -> str:
        location = self._handle.location
        if location is None or location.file is None:
            return ""
        return location.file.name

    @property
    def line(self) -> int:
        location = self._handle.location
        return location.line if location is not None else 0

    def is_definition(self) -> bool:
        return self._handle.is_definition()

    @property
    def type(self) -> CursorType:
        return CursorType(self._handle.type)

    def get_children(self) -> list[Cursor]:
        """Direct children, stopping after the last-preprocessing sentinel."""
        children = []
        for child in self._handle.get_children():
            children.append(Cursor(child))
            if child.kind == _LAST_PREPROCESSING:
                break
        return children
