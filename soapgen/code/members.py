"""Member-level builders for generated PHP classes."""

from __future__ import annotations

from dataclasses import dataclass, field
import re
from typing import List, Optional, Sequence

from ..normalizer import NAMESPACE_SEPARATOR, is_known_type

INDENTATION = "    "

VISIBILITY_PUBLIC = "public"
VISIBILITY_PROTECTED = "protected"
VISIBILITY_PRIVATE = "private"
VISIBILITIES: tuple[str, ...] = (VISIBILITY_PUBLIC, VISIBILITY_PROTECTED, VISIBILITY_PRIVATE)

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class InvalidIdentifierError(ValueError):
    """Raised when a class member would be emitted with an invalid name."""


def assert_identifier(name: str, kind: str) -> str:
    if not isinstance(name, str) or not _IDENTIFIER.match(name):
        raise InvalidIdentifierError(f"'{name}' is not a valid {kind} name")
    return name


def assert_visibility(visibility: str) -> str:
    if visibility not in VISIBILITIES:
        raise ValueError(f"Unknown visibility '{visibility}', expected one of {', '.join(VISIBILITIES)}")
    return visibility


def render_type_hint(type_name: str) -> str:
    """Render a native type declaration, fully qualifying class names."""
    nullable = type_name.startswith("?")
    bare = type_name.lstrip("?")
    if not is_known_type(bare):
        bare = NAMESPACE_SEPARATOR + bare.lstrip(NAMESPACE_SEPARATOR)
    return f"?{bare}" if nullable else bare


def php_literal(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace("'", "\\'")
        return f"'{escaped}'"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(php_literal(item) for item in value) + "]"
    raise TypeError(f"Cannot render {type(value).__name__} as a PHP literal")


def _indent_lines(text: str, indentation: str) -> List[str]:
    return [f"{indentation}{line}" if line.strip() else "" for line in text.splitlines()]


@dataclass(frozen=True)
class Tag:
    """A single ``@name description`` docblock tag."""

    name: str
    description: str = ""


@dataclass
class DocBlockGenerator:
    """Documentation block; lines are never wrapped."""

    short_description: str = ""
    long_description: str = ""
    tags: List[Tag] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.short_description or self.long_description or self.tags)

    def generate(self, indentation: str = "") -> str:
        lines: List[str] = []
        if self.short_description:
            lines.extend(self.short_description.splitlines())
        if self.long_description:
            if lines:
                lines.append("")
            lines.extend(self.long_description.splitlines())
        if self.tags:
            if lines:
                lines.append("")
            lines.extend(f"@{tag.name} {tag.description}".rstrip() for tag in self.tags)

        output = [f"{indentation}/**"]
        for line in lines:
            output.append(f"{indentation} * {line}".rstrip() if line else f"{indentation} *")
        output.append(f"{indentation} */")
        return "\n".join(output)


@dataclass
class ParameterGenerator:
    name: str
    type: Optional[str] = None

    def __post_init__(self) -> None:
        assert_identifier(self.name, "parameter")

    def generate(self) -> str:
        if self.type:
            return f"{render_type_hint(self.type)} ${self.name}"
        return f"${self.name}"


@dataclass
class PropertyGenerator:
    """Class field. ``omit_default_value`` suppresses the ``= value`` part."""

    name: str
    visibility: str = VISIBILITY_PRIVATE
    type: Optional[str] = None
    default_value: object = None
    omit_default_value: bool = True
    docblock: Optional[DocBlockGenerator] = None

    def __post_init__(self) -> None:
        assert_identifier(self.name, "property")
        assert_visibility(self.visibility)

    def generate(self, indentation: str = INDENTATION) -> str:
        lines: List[str] = []
        if self.docblock is not None and not self.docblock.is_empty():
            lines.append(self.docblock.generate(indentation))
        declaration = f"{indentation}{self.visibility} "
        if self.type:
            declaration += f"{render_type_hint(self.type)} "
        declaration += f"${self.name}"
        if not self.omit_default_value:
            declaration += f" = {php_literal(self.default_value)}"
        lines.append(declaration + ";")
        return "\n".join(lines)


@dataclass
class MethodGenerator:
    name: str
    parameters: Sequence[ParameterGenerator] = field(default_factory=list)
    visibility: str = VISIBILITY_PUBLIC
    static: bool = False
    body: str = ""
    return_type: Optional[str] = None
    docblock: Optional[DocBlockGenerator] = None

    def __post_init__(self) -> None:
        assert_identifier(self.name, "method")
        assert_visibility(self.visibility)
        self.parameters = list(self.parameters)

    @property
    def parameter_names(self) -> List[str]:
        return [parameter.name for parameter in self.parameters]

    def generate(self, indentation: str = INDENTATION) -> str:
        lines: List[str] = []
        if self.docblock is not None and not self.docblock.is_empty():
            lines.append(self.docblock.generate(indentation))
        modifiers = f"{self.visibility} static" if self.static else self.visibility
        params = ", ".join(parameter.generate() for parameter in self.parameters)
        signature = f"{indentation}{modifiers} function {self.name}({params})"
        if self.return_type:
            signature += f" : {render_type_hint(self.return_type)}"
        lines.append(signature)
        lines.append(f"{indentation}{{")
        lines.extend(_indent_lines(self.body, indentation * 2))
        lines.append(f"{indentation}}}")
        return "\n".join(lines)


__all__ = [
    "INDENTATION",
    "VISIBILITIES",
    "VISIBILITY_PRIVATE",
    "VISIBILITY_PROTECTED",
    "VISIBILITY_PUBLIC",
    "DocBlockGenerator",
    "InvalidIdentifierError",
    "MethodGenerator",
    "ParameterGenerator",
    "PropertyGenerator",
    "Tag",
    "assert_identifier",
    "assert_visibility",
    "php_literal",
    "render_type_hint",
]
