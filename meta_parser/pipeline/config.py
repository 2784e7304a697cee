"""
Configuration for the meta parser pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_CLANG_ARGUMENTS = [
    "-x",
    "c++",
    "-std=c++11",
    "-D__REFLECTION_PARSER__",
    "-DNDEBUG",
    "-D__clang__",
    "-w",
    "-MG",
    "-M",
    "-ferror-limit=0",
]


@dataclass
class MetaParserConfig:
    """Configuration options for parsing and generation."""

    # Arguments passed to libclang before the include paths
    clang_arguments: list[str] = field(default_factory=lambda: list(DEFAULT_CLANG_ARGUMENTS))

    # Skip function bodies while parsing (declarations are all we need)
    skip_function_bodies: bool = True

    # Namespace prefixes removed from class and field type names (e.g. "Engine::")
    stripped_namespace_prefixes: list[str] = field(default_factory=list)

    # Prefix removed from member names to build display names
    member_prefix: str = "m_"

    # Type prefix identifying sequence fields
    sequence_prefix: str = "std::vector<"

    # Output directory name, relative to the first include path
    generated_dir: str = "_generated"

    # Directory holding the .jinja2 templates (empty = packaged templates)
    template_dir: str = ""

    # Raise on unknown templates instead of rendering an empty string
    strict_templates: bool = True

    # Check generated files for balanced braces and preprocessor blocks
    validate_before_write: bool = True

    # Write through a temporary file and atomic replace
    atomic_write: bool = True

    @staticmethod
    def from_dict(d: dict) -> MetaParserConfig:
        """Create a config from a dictionary."""
        config = MetaParserConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "clang_arguments": self.clang_arguments,
            "skip_function_bodies": self.skip_function_bodies,
            "stripped_namespace_prefixes": self.stripped_namespace_prefixes,
            "member_prefix": self.member_prefix,
            "sequence_prefix": self.sequence_prefix,
            "generated_dir": self.generated_dir,
            "template_dir": self.template_dir,
            "strict_templates": self.strict_templates,
            "validate_before_write": self.validate_before_write,
            "atomic_write": self.atomic_write,
        }
