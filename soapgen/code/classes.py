"""Mutable class model shared by every assembler touching one class."""

from __future__ import annotations

from typing import Dict, List, Optional

from ..normalizer import NAMESPACE_SEPARATOR, normalize_namespace
from .members import DocBlockGenerator, MethodGenerator, PropertyGenerator, assert_identifier


class ClassGenerator:
    """In-progress PHP class: namespace, imports, interfaces, fields and methods.

    Fields and methods live in name-keyed maps that keep insertion order, so
    adding a member under an existing name replaces the previous definition
    instead of duplicating it.
    """

    def __init__(
        self,
        name: str,
        namespace_name: str | None = None,
        *,
        docblock: DocBlockGenerator | None = None,
    ) -> None:
        self.name = assert_identifier(name, "class")
        self.namespace_name = normalize_namespace(namespace_name) if namespace_name else None
        self.docblock = docblock
        self._uses: Dict[str, Optional[str]] = {}
        self._interfaces: List[str] = []
        self._properties: Dict[str, PropertyGenerator] = {}
        self._methods: Dict[str, MethodGenerator] = {}

    def __repr__(self) -> str:
        return f"ClassGenerator({self.fqcn!r})"

    @property
    def fqcn(self) -> str:
        if not self.namespace_name:
            return self.name
        return f"{self.namespace_name}{NAMESPACE_SEPARATOR}{self.name}"

    # imports

    def add_use(self, fqcn: str, alias: str | None = None) -> None:
        fqcn = fqcn.lstrip(NAMESPACE_SEPARATOR)
        if not fqcn:
            raise ValueError("Cannot import an empty name")
        if fqcn not in self._uses:
            self._uses[fqcn] = alias

    def has_use(self, fqcn: str) -> bool:
        return fqcn.lstrip(NAMESPACE_SEPARATOR) in self._uses

    def get_uses(self) -> List[str]:
        return list(self._uses)

    def get_use_alias(self, fqcn: str) -> Optional[str]:
        return self._uses.get(fqcn.lstrip(NAMESPACE_SEPARATOR))

    # interfaces

    def add_implemented_interface(self, interface: str) -> bool:
        """Declare ``interface``; returns False when it was already declared."""
        interface = interface.lstrip(NAMESPACE_SEPARATOR)
        if interface in self._interfaces:
            return False
        self._interfaces.append(interface)
        return True

    def has_implemented_interface(self, interface: str) -> bool:
        return interface.lstrip(NAMESPACE_SEPARATOR) in self._interfaces

    def get_implemented_interfaces(self) -> List[str]:
        return list(self._interfaces)

    # properties

    def add_property_from_generator(self, prop: PropertyGenerator) -> None:
        self._properties[prop.name] = prop

    def has_property(self, name: str) -> bool:
        return name in self._properties

    def get_property(self, name: str) -> Optional[PropertyGenerator]:
        return self._properties.get(name)

    def remove_property(self, name: str) -> None:
        self._properties.pop(name, None)

    def get_properties(self) -> List[PropertyGenerator]:
        return list(self._properties.values())

    # methods

    def add_method_from_generator(self, method: MethodGenerator) -> None:
        self._methods[method.name] = method

    def has_method(self, name: str) -> bool:
        return name in self._methods

    def get_method(self, name: str) -> Optional[MethodGenerator]:
        return self._methods.get(name)

    def remove_method(self, name: str) -> None:
        self._methods.pop(name, None)

    def get_methods(self) -> List[MethodGenerator]:
        return list(self._methods.values())

    def set_docblock(self, docblock: DocBlockGenerator | None) -> None:
        self.docblock = docblock

    def generate(self) -> str:
        from .renderer import ClassRenderer

        return ClassRenderer().render(self)


__all__ = ["ClassGenerator"]
