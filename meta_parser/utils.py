"""
Utility functions for name and path handling in generated code.
"""

import os
import re
from pathlib import Path

# Characters replaced when a type name is turned into an identifier fragment
_IDENTIFIER_REPLACEMENTS = str.maketrans({"<": "L", ":": "S", ">": "R", "*": "P"})

_NON_ALNUM_PATTERN = re.compile(r"[^0-9A-Za-z]")

_WHITESPACE = " \t\r\n"

DEFAULT_INCLUDE_GUARD = "META_INPUT_HEADER_H"


def split(text: str, separator: str) -> list[str]:
    """Split text on a separator, dropping empty pieces."""
    return [piece for piece in text.split(separator) if piece]


def trim(text: str) -> str:
    """Strip spaces, tabs and line breaks from both ends."""
    return text.strip(_WHITESPACE)


def strip_member_prefix(name: str, prefix: str = "m_") -> str:
    """Remove a conventional member prefix.

    Examples:
        "m_hp" -> "hp"
        "m_" -> "m_"
        "hp" -> "hp"
    """
    if prefix and len(name) > len(prefix) and name.startswith(prefix):
        return name[len(prefix) :]
    return name


def remove_all(text: str, fragments: list[str]) -> str:
    for fragment in fragments:
        if fragment:
            text = text.replace(fragment, "")
    return text


def normalize_type_name(type_name: str, stripped_prefixes: list[str]) -> str:
    """Remove whitespace and internal namespace prefixes from a type spelling."""
    return remove_all(type_name.replace(" ", ""), stripped_prefixes)


def format_qualified_name(type_name: str) -> str:
    """Map a type name onto an identifier fragment.

    Examples:
        "std::vector<int*>" -> "stdSSvectorLintPR"
    """
    return type_name.translate(_IDENTIFIER_REPLACEMENTS)


def get_name_without_container(type_name: str) -> str:
    """Return the text between the first '<' and the last '>'.

    Returns an empty string when the name is not a template instance.
    """
    left = type_name.find("<") + 1
    right = type_name.rfind(">")
    if 0 < left < right:
        return type_name[left:right]
    return ""


def get_string_without_quotes(text: str) -> str:
    """Return the content between the first and last double quote, or the text itself."""
    left = text.find('"') + 1
    right = text.rfind('"')
    if 0 < left < right:
        return text[left:right]
    return text


def to_upper_camel_case(name: str, separator: str = "_") -> str:
    """Convert a separated name to an UpperCamelCase C++ identifier.

    Only the first letter of each piece is changed, so "meta_example" gives
    "MetaExample" and "render_RHI" gives "RenderRHI". Characters that cannot
    appear in an identifier separate pieces too ("my-file.component" gives
    "MyFileComponent"), and a leading digit is prefixed with "_".
    """
    pieces = split(_NON_ALNUM_PATTERN.sub(separator, name), separator)
    identifier = "".join(piece[0].upper() + piece[1:] for piece in pieces)
    if identifier[:1].isdigit():
        identifier = f"_{identifier}"
    return identifier


def include_guard_name(file_path: str) -> str:
    """Build an include guard name from the file name of a path."""
    pieces = split(file_path.replace("\\", "/"), "/")
    if not pieces:
        return DEFAULT_INCLUDE_GUARD
    return _NON_ALNUM_PATTERN.sub("_", pieces[-1]).upper()


def make_relative_path(from_path: str | Path, to_path: str | Path) -> str:
    """Relative path from a directory to a file, always with forward slashes."""
    from_abs = os.path.abspath(os.fspath(from_path))
    to_abs = os.path.abspath(os.fspath(to_path))
    return Path(os.path.relpath(to_abs, from_abs)).as_posix()
