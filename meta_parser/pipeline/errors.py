"""
Exceptions raised by the meta parser pipeline.

Each error carries the process exit code the command line reports for it.
"""

from __future__ import annotations


class MetaParserError(Exception):
    """Base class for fatal pipeline errors."""

    exit_code: int = -1


class ProjectFileError(MetaParserError):
    """Raised when the project listing file cannot be read."""

    exit_code = -1


class IncludeFileError(MetaParserError):
    """Raised when the generated include file cannot be written."""

    exit_code = -1


class MissingIncludeFileError(MetaParserError):
    """Raised when the generated include file is absent at parse time."""

    exit_code = -2


class TranslationUnitError(MetaParserError):
    """Raised when libclang cannot create a translation unit."""

    exit_code = -3


class TemplateNotFoundError(MetaParserError):
    """Raised when rendering a template name that was never loaded."""

    exit_code = -4


class GenerationError(MetaParserError):
    """Raised when generated content fails validation.

    This can happen when:
    - Braces in the rendered output are unbalanced
    - #if/#ifdef/#ifndef blocks are not closed by #endif
    """

    exit_code = -5
