"""
Pipeline - annotated C++ to reflection and serializer code.

This module provides a two-stage architecture:

1. Phase 1 (Parser): Write the project include header and parse it with libclang
2. Phase 2 (Schema): Build per-file schema modules and the type table from
   annotated class declarations
3. Phase 3 (Generators): Render one artifact per schema module for every
   generator
4. Phase 4 (Finish): Render the aggregate artifacts of every generator
"""

from __future__ import annotations

from .config import MetaParserConfig
from .errors import (
    GenerationError,
    IncludeFileError,
    MetaParserError,
    MissingIncludeFileError,
    ProjectFileError,
    TemplateNotFoundError,
    TranslationUnitError,
)
from .generators import Generator, ReflectionGenerator, SerializerGenerator
from .parser import MetaParser
from .rendering import TemplateService
from .schema import SchemaBuilder, SchemaModule, TypeTable

__all__ = [
    "MetaParser",
    "MetaParserConfig",
    "SchemaBuilder",
    "SchemaModule",
    "TypeTable",
    "Generator",
    "ReflectionGenerator",
    "SerializerGenerator",
    "TemplateService",
    "MetaParserError",
    "ProjectFileError",
    "IncludeFileError",
    "MissingIncludeFileError",
    "TranslationUnitError",
    "TemplateNotFoundError",
    "GenerationError",
]
