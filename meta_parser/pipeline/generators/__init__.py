"""
Code generators.

Contains the generator interface and the reflection and serializer
generators.
"""

from __future__ import annotations

from .base import Generator
from .reflection_generator import ReflectionGenerator
from .serializer_generator import SerializerGenerator

__all__ = [
    "Generator",
    "ReflectionGenerator",
    "SerializerGenerator",
]
