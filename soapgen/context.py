"""Generation contexts pairing a class model with the metadata of one step."""

from __future__ import annotations

from dataclasses import dataclass

from .code import ClassGenerator
from .models import ClientMethod, Property, Type
from .normalizer import NAMESPACE_SEPARATOR, normalize_namespace


class Context:
    """Base for every context variant handed to an assembler."""

    kind: str = "context"

    def describe(self) -> str:
        """Identify the class and member being generated, for error messages."""
        return self.kind


@dataclass
class ClientContext(Context):
    class_: ClassGenerator
    name: str
    namespace: str

    kind = "client"

    def describe(self) -> str:
        return f"client {self.class_.fqcn}"


@dataclass
class ClientMethodContext(Context):
    class_: ClassGenerator
    method: ClientMethod

    kind = "client method"

    def describe(self) -> str:
        return f"method {self.class_.fqcn}::{self.method.name}"


@dataclass
class TypeContext(Context):
    class_: ClassGenerator
    type: Type

    kind = "type"

    def describe(self) -> str:
        return f"type {self.class_.fqcn}"


@dataclass
class PropertyContext(Context):
    class_: ClassGenerator
    type: Type
    property: Property

    kind = "property"

    def describe(self) -> str:
        return f"property {self.class_.fqcn}::${self.property.name}"


@dataclass
class ClientFactoryContext(Context):
    """Naming for the generated client factory; carries no class model."""

    client_name: str
    client_namespace: str
    classmap_name: str
    classmap_namespace: str

    kind = "client factory"

    def __post_init__(self) -> None:
        self.client_namespace = normalize_namespace(self.client_namespace)
        self.classmap_namespace = normalize_namespace(self.classmap_namespace)

    @property
    def client_fqcn(self) -> str:
        return NAMESPACE_SEPARATOR.join(part for part in (self.client_namespace, self.client_name) if part)

    @property
    def classmap_fqcn(self) -> str:
        return NAMESPACE_SEPARATOR.join(part for part in (self.classmap_namespace, self.classmap_name) if part)

    @property
    def factory_name(self) -> str:
        return f"{self.client_name}Factory"

    def describe(self) -> str:
        return f"client factory {self.client_fqcn}Factory"


__all__ = [
    "ClientContext",
    "ClientFactoryContext",
    "ClientMethodContext",
    "Context",
    "PropertyContext",
    "TypeContext",
]
