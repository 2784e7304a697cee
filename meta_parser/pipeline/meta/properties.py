"""
Annotation keys understood by the visibility policy.
"""

from __future__ import annotations

from enum import Enum


class NativeProperty(str, Enum):
    """Recognized annotation flags."""

    ALL = "All"  # Generate every field and method
    FIELDS = "Fields"  # Generate every field
    METHODS = "Methods"  # Generate every method
    ENABLE = "Enable"  # Opt a member in under whitelist mode
    DISABLE = "Disable"  # Opt a member out under blanket mode
    WHITE_LIST_FIELDS = "WhiteListFields"  # Only enabled fields
    WHITE_LIST_METHODS = "WhiteListMethods"  # Only enabled methods

    def __str__(self) -> str:
        return self.value
