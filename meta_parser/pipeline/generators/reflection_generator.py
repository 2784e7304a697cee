"""
Reflection descriptor generator.

Writes one `<stem>.reflection.gen.h` per source file and an
`all_reflection.h` entry point including all of them.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ...utils import format_qualified_name, get_name_without_container, to_upper_camel_case
from ..config import MetaParserConfig
from ..rendering import TemplateService
from ..schema import SchemaModule, TypeTable
from .base import Generator

logger = logging.getLogger(__name__)


class ReflectionGenerator(Generator):
    """Generates reflection registration code."""

    KIND = "reflection"
    FILE_SUFFIX = ".reflection.gen.h"
    TEMPLATE_NAMES = ("commonReflectionFile", "allReflectionFile")

    AGGREGATE_FILE = "all_reflection.h"

    def __init__(
        self,
        source_directory: str,
        type_table: TypeTable,
        template_service: TemplateService,
        config: MetaParserConfig | None = None,
    ):
        super().__init__(source_directory, type_table, template_service, config)
        self.head_file_list: list[str] = []
        self.sourcefile_list: list[str] = []

    def generate(self, path: str, schema: SchemaModule) -> int:
        file_path = self.process_file_name(path)

        include_headfiles = [{"headfile_name": self.relative_path(path)}]
        class_defines = []

        for class_temp in schema.classes:
            if not class_temp.should_compile():
                continue

            class_def = self.gen_class_render_data(class_temp)

            # type name -> (identifier fragment, element type)
            vector_map: dict[str, tuple[str, str]] = {}
            for field in class_temp.fields:
                if not field.should_compile() or not field.is_sequence():
                    continue
                vector_map[field.type] = (format_qualified_name(field.type), get_name_without_container(field.type))

            if vector_map:
                class_def["vector_exist"] = True
            class_def["vector_defines"] = [
                {
                    "vector_useful_name": useful_name,
                    "vector_type_name": type_name,
                    "vector_element_type_name": element_type,
                }
                for type_name, (useful_name, element_type) in sorted(vector_map.items())
            ]
            class_defines.append(class_def)

        sourcefile_name = to_upper_camel_case(Path(path).stem)
        data: dict[str, Any] = {
            "class_defines": class_defines,
            "include_headfiles": include_headfiles,
            "sourcefile_name_upper_camel_case": sourcefile_name,
        }

        status = self.render_to_file("commonReflectionFile", data, file_path)

        self.sourcefile_list.append(sourcefile_name)
        self.head_file_list.append(self.relative_path(file_path))
        logger.debug("Reflection for %s: %d classes", path, len(class_defines))
        return status

    def finish(self) -> None:
        data = {
            "include_headfiles": [{"headfile_name": head_file} for head_file in self.head_file_list],
            "sourcefile_names": [{"sourcefile_name_upper_camel_case": name} for name in self.sourcefile_list],
        }
        self.render_to_file("allReflectionFile", data, str(Path(self.out_path) / self.AGGREGATE_FILE))
