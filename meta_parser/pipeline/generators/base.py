"""
Base class for code generators.

Defines the interface every generator implements and the class render data
shared by all of them.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from ...utils import make_relative_path
from ..config import MetaParserConfig
from ..language_types import Class
from ..output import AtomicWriter
from ..rendering import PACKAGED_TEMPLATE_DIR, TemplateService
from ..schema import SchemaModule, TypeTable

logger = logging.getLogger(__name__)


class Generator(ABC):
    """Abstract base class for generators.

    A generator is driven in two passes: `generate` once per schema module,
    then `finish` once after every module has been generated.
    """

    # Output sub-directory under the generated directory
    KIND: str = ""

    # Template names loaded on construction
    TEMPLATE_NAMES: tuple[str, ...] = ()

    # Suffix replacing the extension of the source file
    FILE_SUFFIX: str = ""

    def __init__(
        self,
        source_directory: str,
        type_table: TypeTable,
        template_service: TemplateService,
        config: MetaParserConfig | None = None,
    ):
        """
        Initialize the generator.

        Args:
            source_directory: Root that generated include paths are relative to
            type_table: Type name to declaring file lookup
            template_service: Service used to render artifacts
            config: Pipeline configuration
        """
        self.config = config or MetaParserConfig()
        self.root_path = source_directory
        self.out_path = str(Path(source_directory) / self.config.generated_dir / self.KIND)
        self.type_table = type_table
        self.template_service = template_service
        self.writer = AtomicWriter(atomic=self.config.atomic_write)
        self.prepare_status(self.out_path)

    def prepare_status(self, path: str) -> None:
        """Create the output directory and load the generator's templates."""
        Path(path).mkdir(parents=True, exist_ok=True)

        template_dir = self.config.template_dir or PACKAGED_TEMPLATE_DIR
        for template_name in self.TEMPLATE_NAMES:
            self.template_service.load_templates(template_dir, template_name)

    @abstractmethod
    def generate(self, path: str, schema: SchemaModule) -> int:
        """
        Generate the artifact for one schema module.

        Args:
            path: Source file the module was declared in
            schema: The module's classes

        Returns:
            0 on success, non-zero on failure
        """

    def finish(self) -> None:
        """Emit aggregate artifacts after every module has been generated."""

    def process_file_name(self, path: str) -> str:
        """Output path of the artifact generated for a source file."""
        return str(Path(self.out_path) / f"{Path(path).stem}{self.FILE_SUFFIX}")

    def relative_path(self, path: str) -> str:
        return make_relative_path(self.root_path, path)

    def render_to_file(self, template_name: str, data: dict[str, Any], file_path: str) -> int:
        """
        Render a template and save the result.

        Returns:
            0 on success, 1 when the template was missing and an empty
            file was written instead
        """
        status = 0 if self.template_service.has_template(template_name) else 1
        rendered = self.template_service.render(template_name, data)
        self.save_file(rendered, file_path)
        return status

    def save_file(self, content: str, file_path: str) -> None:
        logger.debug("Writing %s", file_path)
        self.writer.write(Path(file_path), content + "\n", validate=self.config.validate_before_write)

    def resolve_include_file(self, type_name: str, current_namespace: list[str]) -> str | None:
        """
        Find the declaring file of a type through the type table.

        The name is qualified by each enclosing namespace from the innermost
        outwards, then tried as written.
        """
        candidates = ["::".join([*current_namespace[:depth], type_name]) for depth in range(len(current_namespace), 0, -1)]
        candidates.append(type_name)

        for candidate in candidates:
            include_file = self.type_table.get_include_file(candidate)
            if include_file is not None:
                return include_file
        return None

    def gen_class_render_data(self, class_temp: Class) -> dict[str, Any]:
        """
        Build the render data shared by every generator for one class.

        Args:
            class_temp: The class definition

        Returns:
            Dictionary of template variables
        """
        class_def: dict[str, Any] = {
            "class_name": class_temp.name,
            "class_base_class_size": len(class_temp.base_classes),
            "class_need_register": True,
        }

        if class_temp.base_classes:
            class_def["class_has_base"] = True
            class_def["class_base_class_defines"] = [
                {
                    "class_base_class_name": base_class.name,
                    "class_base_class_index": index,
                }
                for index, base_class in enumerate(class_temp.base_classes)
            ]

        class_def["class_field_defines"] = self.gen_class_field_render_data(class_temp)
        class_def["class_method_defines"] = self.gen_class_method_render_data(class_temp)
        return class_def

    def gen_class_field_render_data(self, class_temp: Class) -> list[dict[str, Any]]:
        field_defines = []
        for field in class_temp.fields:
            if not field.should_compile():
                continue
            field_defines.append(
                {
                    "class_field_name": field.name,
                    "class_field_type": field.type,
                    "class_field_display_name": field.display_name,
                    "class_field_is_vector": field.is_sequence(),
                    "class_field_is_const": field.is_const,
                    "class_field_default": field.default,
                }
            )
        return field_defines

    def gen_class_method_render_data(self, class_temp: Class) -> list[dict[str, Any]]:
        return [
            {
                "class_method_name": method.name,
                "class_method_argument_count": method.argument_count,
            }
            for method in class_temp.methods
            if method.should_compile()
        ]
