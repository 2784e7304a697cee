"""
Meta parser: drives the whole scan, build and generate sequence.

1. Write the generated include header listing every project header
2. Parse it with libclang
3. Build schema modules and the type table
4. Run every generator over every module, then finish them
"""

from __future__ import annotations

import logging
from pathlib import Path

from clang.cindex import Diagnostic, Index, TranslationUnit, TranslationUnitLoadError

from ..utils import include_guard_name, split
from .config import MetaParserConfig
from .cursor import Cursor
from .errors import IncludeFileError, MetaParserError, MissingIncludeFileError, ProjectFileError, TranslationUnitError
from .generators import Generator, ReflectionGenerator, SerializerGenerator
from .rendering import TemplateService
from .schema import SchemaBuilder, SchemaModule, TypeTable

logger = logging.getLogger(__name__)


class MetaParser:
    """Parses a C++ project and generates reflection and serializer code.

    Owns the libclang index and translation unit; use it as a context
    manager so both are released even when parsing fails.
    """

    def __init__(
        self,
        project_input_file: str,
        source_include_file_name: str,
        include_path: str,
        sys_include: str,
        module_name: str,
        is_show_errors: bool,
        config: MetaParserConfig | None = None,
        template_service: TemplateService | None = None,
    ):
        """
        Initialize the parser.

        Args:
            project_input_file: File listing the project headers, `;`-separated
            source_include_file_name: Header to generate and parse
            include_path: `;`-separated include paths; the first one is the
                root of the generated directory
            sys_include: System include path, `*` for none
            module_name: Name of the target being processed
            is_show_errors: Whether to log parse diagnostics
            config: Pipeline configuration
            template_service: Template service shared by the generators
        """
        self.config = config or MetaParserConfig()
        self.project_input_file = project_input_file
        self.source_include_file_name = source_include_file_name
        self.work_paths = split(include_path, ";")
        self.sys_include = sys_include
        self.module_name = module_name
        self.is_show_errors = is_show_errors

        if not self.work_paths:
            raise MetaParserError("At least one include path is required")

        self.builder = SchemaBuilder(self.config)
        self.template_service = template_service or TemplateService(strict=self.config.strict_templates)

        self.generators: list[Generator] = [
            SerializerGenerator(self.work_paths[0], self.type_table, self.template_service, self.config),
            ReflectionGenerator(self.work_paths[0], self.type_table, self.template_service, self.config),
        ]

        self._index: Index | None = None
        self._translation_unit: TranslationUnit | None = None

    @property
    def type_table(self) -> TypeTable:
        return self.builder.type_table

    @property
    def schema_modules(self) -> dict[str, SchemaModule]:
        return self.builder.schema_modules

    def __enter__(self) -> MetaParser:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the translation unit, then the index."""
        self._translation_unit = None
        self._index = None

    def get_include_file(self, name: str) -> str | None:
        return self.type_table.get_include_file(name)

    def parse_project(self) -> list[str]:
        """
        Write the generated include header from the project listing.

        Returns:
            The header paths listed in the project file

        Raises:
            ProjectFileError: If the listing cannot be read
            IncludeFileError: If the generated header cannot be written
        """
        logger.info("Parsing project file: %s", self.project_input_file)
        try:
            with open(self.project_input_file, encoding="utf-8") as f:
                context = f.read()
        except OSError as e:
            raise ProjectFileError(f"Could not load file: {self.project_input_file}") from e

        include_files = [item.strip().replace("\\", "/") for item in split(context, ";")]
        include_files = [item for item in include_files if item]

        guard = include_guard_name(self.source_include_file_name)
        lines = [f"#ifndef __{guard}__", f"#define __{guard}__"]
        lines.extend(f'#include "{include_file}"' for include_file in include_files)
        lines.append("#endif")

        logger.info("Generating the Source Include file: %s", self.source_include_file_name)
        try:
            with open(self.source_include_file_name, "w", encoding="utf-8") as f:
                f.write("\n".join(lines) + "\n")
        except OSError as e:
            raise IncludeFileError(f"Could not open the Source Include file: {self.source_include_file_name}") from e

        return include_files

    def clang_arguments(self) -> list[str]:
        arguments = list(self.config.clang_arguments)
        if self.sys_include != "*":
            arguments.append(f"-I{self.sys_include}")
        arguments.extend(f"-I{path}" for path in self.work_paths)
        return arguments

    def parse(self) -> None:
        """
        Parse the project and build the schema modules.

        Raises:
            MetaParserError: On any fatal condition (see errors module)
        """
        self.parse_project()

        logger.info("Parsing the whole project...")
        arguments = self.clang_arguments()

        if not Path(self.source_include_file_name).exists():
            raise MissingIncludeFileError(f"{self.source_include_file_name} is not exist")

        self._index = Index.create(excludeDecls=True)
        options = TranslationUnit.PARSE_SKIP_FUNCTION_BODIES if self.config.skip_function_bodies else 0
        try:
            self._translation_unit = self._index.parse(self.source_include_file_name, args=arguments, options=options)
        except TranslationUnitLoadError as e:
            raise TranslationUnitError(f"Could not parse {self.source_include_file_name}: {e}") from e

        if self.is_show_errors:
            self._log_diagnostics()

        self.builder.build(Cursor(self._translation_unit.cursor))

    def _log_diagnostics(self) -> None:
        for diagnostic in self._translation_unit.diagnostics:
            location = diagnostic.location
            where = f"{location.file}:{location.line}:{location.column}" if location.file else "<unknown>"
            if diagnostic.severity >= Diagnostic.Error:
                logger.error("%s: %s", where, diagnostic.spelling)
            else:
                logger.warning("%s: %s", where, diagnostic.spelling)

    def generate_files(self) -> int:
        """
        Run every generator over every schema module, then finish them.

        Returns:
            Number of artifacts that could not be generated
        """
        logger.info("Start generate runtime schemas(%d)...", len(self.schema_modules))

        failures = 0
        for path, schema in self.schema_modules.items():
            for generator in self.generators:
                if generator.generate(path, schema) != 0:
                    logger.warning("%s failed for %s", type(generator).__name__, path)
                    failures += 1

        self.finish()
        return failures

    def finish(self) -> None:
        for generator in self.generators:
            generator.finish()
