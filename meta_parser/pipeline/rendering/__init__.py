"""
Rendering module.

Owned Jinja2 template service injected into every generator.
"""

from __future__ import annotations

from .template_service import PACKAGED_TEMPLATE_DIR, TemplateService

__all__ = [
    "PACKAGED_TEMPLATE_DIR",
    "TemplateService",
]
