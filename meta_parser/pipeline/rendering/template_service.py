"""
Template service backed by Jinja2.

Templates are loaded by name from a directory and rendered against plain
dict/list data trees built by the generators.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import jinja2

from ..errors import TemplateNotFoundError

logger = logging.getLogger(__name__)

TEMPLATE_EXTENSION = ".jinja2"

PACKAGED_TEMPLATE_DIR = Path(__file__).parent.parent.parent / "templates"


class TemplateService:
    """Loads named templates and renders them."""

    def __init__(self, strict: bool = True):
        """
        Initialize the service.

        Args:
            strict: Raise TemplateNotFoundError for unknown names instead of
                rendering an empty string
        """
        self.strict = strict
        self._template_pool: dict[str, str] = {}
        self.jinja_env = jinja2.Environment(
            loader=jinja2.DictLoader(self._template_pool),
            lstrip_blocks=True,
            trim_blocks=True,
        )

    def load_template(self, template_name: str, path: str | Path) -> bool:
        """
        Load (or replace) a template from a file.

        Args:
            template_name: Name used for rendering
            path: Template file path

        Returns:
            True if the file was read
        """
        path = Path(path)
        try:
            source = path.read_text(encoding="utf-8")
        except OSError as e:
            logger.warning("Could not load template '%s' from %s: %s", template_name, path, e)
            return False
        self._template_pool[template_name] = source
        return True

    def load_templates(self, directory: str | Path, template_name: str) -> bool:
        """Load `<directory>/<template_name>.jinja2` under `template_name`."""
        return self.load_template(template_name, Path(directory) / f"{template_name}{TEMPLATE_EXTENSION}")

    def has_template(self, template_name: str) -> bool:
        return template_name in self._template_pool

    def render(self, template_name: str, data: dict[str, Any]) -> str:
        """
        Render a loaded template.

        Args:
            template_name: Name given at load time
            data: Data tree of scalars, dicts and lists

        Returns:
            Rendered text; "" for unknown names when not strict

        Raises:
            TemplateNotFoundError: If the name is unknown and strict is set
        """
        if template_name not in self._template_pool:
            if self.strict:
                raise TemplateNotFoundError(f"Template not loaded: {template_name}")
            logger.warning("Template '%s' not loaded, rendering empty output", template_name)
            return ""

        return self.jinja_env.get_template(template_name).render(data)
