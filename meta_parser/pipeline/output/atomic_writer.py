"""
Atomic file writer for safe code generation.

Ensures that file writes are atomic to prevent half-written generated
headers when the build is interrupted.
"""

from __future__ import annotations

import re
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..errors import GenerationError

_CONDITIONAL_OPEN = re.compile(r"^\s*#\s*if(?:n?def)?\b", re.MULTILINE)
_CONDITIONAL_CLOSE = re.compile(r"^\s*#\s*endif\b", re.MULTILINE)


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate_cpp: Callable[[str], None] | None = None, atomic: bool = True):
        """Initialize the atomic writer.

        Args:
            validate_cpp: Optional validation function for generated C++
            atomic: Write through a temporary file (False writes in place)
        """
        self._validate_cpp = validate_cpp or self._default_validate_cpp
        self._atomic = atomic

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            GenerationError: If validation fails
            OSError: If file operations fail
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        if validate:
            self._validate_cpp(content)

        if not self._atomic:
            path.write_text(content, encoding="utf-8")
            return

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)
            temp_path.replace(path)
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

    def _default_validate_cpp(self, content: str) -> None:
        """Basic structural checks on generated C++.

        Raises:
            GenerationError: If braces or preprocessor conditionals are unbalanced
        """
        open_braces = content.count("{")
        close_braces = content.count("}")
        if open_braces != close_braces:
            raise GenerationError(f"Generated code has unbalanced braces: {open_braces} open, {close_braces} close")

        open_conditionals = len(_CONDITIONAL_OPEN.findall(content))
        close_conditionals = len(_CONDITIONAL_CLOSE.findall(content))
        if open_conditionals != close_conditionals:
            raise GenerationError(
                f"Generated code has unbalanced preprocessor blocks: {open_conditionals} #if, {close_conditionals} #endif"
            )
