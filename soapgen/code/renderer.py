"""Render class models to PHP source through Jinja2 templates."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, List

from jinja2 import Environment, FileSystemLoader

from ..normalizer import NAMESPACE_SEPARATOR, split_fqcn
from .members import INDENTATION

if TYPE_CHECKING:  # pragma: no cover - typing aid
    from .classes import ClassGenerator

CLASS_TEMPLATE = "class.php.j2"
FILE_TEMPLATE = "file.php.j2"


class ClassRenderer:
    """Turns a ``ClassGenerator`` into source text.

    A custom ``templates_dir`` is searched before the bundled templates, so a
    project only needs to override the templates it wants to change.
    """

    def __init__(self, templates_dir: Path | None = None, *, indentation: str = INDENTATION) -> None:
        self.templates_dir = templates_dir
        self.indentation = indentation
        self._env = self._create_env(templates_dir)

    def render(self, class_: "ClassGenerator") -> str:
        template = self._env.get_template(CLASS_TEMPLATE)
        return template.render(**self._template_context(class_))

    def render_file(self, class_: "ClassGenerator") -> str:
        template = self._env.get_template(FILE_TEMPLATE)
        return template.render(**self._template_context(class_))

    def render_template(self, name: str, **context: object) -> str:
        """Render any template found on the search path, e.g. a method body."""
        return self._env.get_template(name).render(**context)

    def _template_context(self, class_: "ClassGenerator") -> dict[str, object]:
        return {
            "namespace": class_.namespace_name,
            "uses": self._uses(class_),
            "docblock": class_.docblock.generate() if class_.docblock and not class_.docblock.is_empty() else None,
            "declaration": self._declaration(class_),
            "members": self._members(class_),
        }

    def _uses(self, class_: "ClassGenerator") -> List[str]:
        statements = []
        for fqcn in sorted(class_.get_uses()):
            alias = class_.get_use_alias(fqcn)
            statements.append(f"{fqcn} as {alias}" if alias else fqcn)
        return statements

    def _declaration(self, class_: "ClassGenerator") -> str:
        declaration = f"class {class_.name}"
        interfaces = class_.get_implemented_interfaces()
        if interfaces:
            declaration += " implements " + ", ".join(
                self._reference(class_, interface) for interface in interfaces
            )
        return declaration

    def _members(self, class_: "ClassGenerator") -> List[str]:
        members = [prop.generate(self.indentation) for prop in class_.get_properties()]
        members.extend(method.generate(self.indentation) for method in class_.get_methods())
        return members

    @staticmethod
    def _reference(class_: "ClassGenerator", name: str) -> str:
        name = name.lstrip(NAMESPACE_SEPARATOR)
        if class_.has_use(name):
            return class_.get_use_alias(name) or split_fqcn(name)[1]
        if not class_.namespace_name and NAMESPACE_SEPARATOR not in name:
            return name
        return NAMESPACE_SEPARATOR + name

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories: list[str] = []
        if templates_dir:
            directories.append(str(templates_dir))
        default_dir = str(Path(__file__).with_name("templates"))
        if default_dir not in directories:
            directories.append(default_dir)
        return Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )


__all__ = ["ClassRenderer"]
