"""
Serializer generator.

Writes one `<stem>.serializer.gen.h` per source file with declarations for
every class whose fields are generated, then `all_serializer.h` and
`all_serializer.ipp` covering every class of the run.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ...utils import get_name_without_container
from ..config import MetaParserConfig
from ..rendering import TemplateService
from ..schema import SchemaModule, TypeTable
from .base import Generator

logger = logging.getLogger(__name__)


class SerializerGenerator(Generator):
    """Generates JSON serializer declarations and definitions."""

    KIND = "serializer"
    FILE_SUFFIX = ".serializer.gen.h"
    TEMPLATE_NAMES = ("allSerializer.h", "allSerializer.ipp", "commonSerializerGenFile")

    AGGREGATE_HEADER = "all_serializer.h"
    AGGREGATE_IMPLEMENTATION = "all_serializer.ipp"

    def __init__(
        self,
        source_directory: str,
        type_table: TypeTable,
        template_service: TemplateService,
        config: MetaParserConfig | None = None,
    ):
        super().__init__(source_directory, type_table, template_service, config)
        self.class_defines: list[dict[str, Any]] = []
        self.include_headfiles: list[dict[str, str]] = []

    def generate(self, path: str, schema: SchemaModule) -> int:
        file_path = self.process_file_name(path)

        include_headfiles = [{"headfile_name": self.relative_path(path)}]
        class_defines = []

        for class_temp in schema.classes:
            if not class_temp.should_compile_fields():
                continue

            class_def = self.gen_class_render_data(class_temp)

            for base_class in class_temp.base_classes:
                self._add_dependency(base_class.name, class_temp.namespace, file_path, include_headfiles)

            for field in class_temp.fields:
                if not field.should_compile() or not field.is_sequence():
                    continue
                element_type = get_name_without_container(field.type)
                self._add_dependency(element_type, class_temp.namespace, file_path, include_headfiles)

            class_defines.append(class_def)
            self.class_defines.append(class_def)

        data = {
            "class_defines": class_defines,
            "include_headfiles": include_headfiles,
        }
        status = self.render_to_file("commonSerializerGenFile", data, file_path)

        self.include_headfiles.append({"headfile_name": self.relative_path(file_path)})
        logger.debug("Serializer for %s: %d classes", path, len(class_defines))
        return status

    def _add_dependency(
        self,
        type_name: str,
        current_namespace: list[str],
        file_path: str,
        include_headfiles: list[dict[str, str]],
    ) -> None:
        """Include the serializer header generated for another type, if any."""
        if not type_name:
            return

        include_file = self.resolve_include_file(type_name, current_namespace)
        if include_file is None:
            # Not a generated type (builtin or external)
            return

        include_file_base = self.process_file_name(include_file)
        if include_file_base == file_path:
            return

        entry = {"headfile_name": self.relative_path(include_file_base)}
        if entry not in include_headfiles:
            include_headfiles.append(entry)

    def finish(self) -> None:
        data = {
            "class_defines": self.class_defines,
            "include_headfiles": self.include_headfiles,
        }
        self.render_to_file("allSerializer.h", data, str(Path(self.out_path) / self.AGGREGATE_HEADER))
        self.render_to_file("allSerializer.ipp", data, str(Path(self.out_path) / self.AGGREGATE_IMPLEMENTATION))
