"""
Annotation metadata attached to a declaration.

Annotations are written in the source as
`__attribute__((annotate("Fields, default:\\"1\\"")))` and reach us as
ANNOTATE_ATTR children of the declaration cursor.
"""

from __future__ import annotations

from ...utils import split, trim
from ..cursor import NodeKind
from .properties import NativeProperty


def _key(key: str | NativeProperty) -> str:
    return key.value if isinstance(key, NativeProperty) else key


class MetaInfo:
    """Key/value properties parsed from the annotations of one declaration."""

    def __init__(self, cursor):
        self._properties: dict[str, str] = {}
        for child in cursor.get_children():
            if child.kind != NodeKind.ANNOTATE_ATTR:
                continue
            for key, value in self.extract_properties(child.display_name):
                self._properties[key] = value

    @staticmethod
    def extract_properties(payload: str) -> list[tuple[str, str]]:
        """
        Split an annotation payload into (key, value) pairs.

        Args:
            payload: Comma-separated list of `key[:value]` tokens

        Returns:
            Pairs in payload order; a token without value maps to ""
        """
        properties = []
        for item in split(payload, ","):
            details = split(item, ":")
            if not details:
                continue
            key = trim(details[0])
            if not key:
                continue
            value = trim(details[1]) if len(details) > 1 else ""
            properties.append((key, value))
        return properties

    def get_property(self, key: str | NativeProperty) -> str:
        return self._properties.get(_key(key), "")

    def get_flag(self, key: str | NativeProperty) -> bool:
        return _key(key) in self._properties

    @property
    def properties(self) -> dict[str, str]:
        return dict(self._properties)

    def __repr__(self) -> str:
        return f"MetaInfo({self._properties!r})"
