"""Class model used by the assemblers and its PHP renderer."""

from .classes import ClassGenerator
from .members import (
    INDENTATION,
    VISIBILITIES,
    VISIBILITY_PRIVATE,
    VISIBILITY_PROTECTED,
    VISIBILITY_PUBLIC,
    DocBlockGenerator,
    InvalidIdentifierError,
    MethodGenerator,
    ParameterGenerator,
    PropertyGenerator,
    Tag,
    render_type_hint,
)
from .renderer import ClassRenderer

__all__ = [
    "INDENTATION",
    "VISIBILITIES",
    "VISIBILITY_PRIVATE",
    "VISIBILITY_PROTECTED",
    "VISIBILITY_PUBLIC",
    "ClassGenerator",
    "ClassRenderer",
    "DocBlockGenerator",
    "InvalidIdentifierError",
    "MethodGenerator",
    "ParameterGenerator",
    "PropertyGenerator",
    "Tag",
    "render_type_hint",
]
