"""
Per-file schema modules and the global type table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..language_types import Class

logger = logging.getLogger(__name__)


@dataclass
class SchemaModule:
    """The qualifying classes declared in one source file."""

    name: str = ""  # Declaring source file
    classes: list[Class] = field(default_factory=list)


class TypeTable:
    """Maps a type's display name to the file that declares it."""

    def __init__(self):
        self._entries: dict[str, str] = {}

    def register(self, name: str, source_file: str) -> None:
        previous = self._entries.get(name)
        if previous is not None and previous != source_file:
            logger.warning("Type '%s' declared in both %s and %s, using %s", name, previous, source_file, source_file)
        self._entries[name] = source_file

    def get_include_file(self, name: str) -> str | None:
        """Declaring file of a type, or None for types that are not generated."""
        return self._entries.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def items(self):
        return self._entries.items()
