"""Meta Parser

A build-time tool that scans annotated C++ declarations with libclang and
generates reflection descriptors and JSON serializers through Jinja2
templates.
"""

__version__ = "1.0.0"

from .pipeline import (
    MetaParser,
    MetaParserConfig,
    MetaParserError,
    ReflectionGenerator,
    SchemaBuilder,
    SerializerGenerator,
    TemplateService,
)

__all__ = [
    "MetaParser",
    "MetaParserConfig",
    "MetaParserError",
    "SchemaBuilder",
    "ReflectionGenerator",
    "SerializerGenerator",
    "TemplateService",
]
