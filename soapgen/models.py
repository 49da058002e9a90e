"""Read-only metadata models consumed by the assemblers."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from .bounds import UNBOUNDED, ArrayBoundsCalculator
from .normalizer import NAMESPACE_SEPARATOR, is_known_type, normalize_classname, normalize_namespace


@dataclass(frozen=True)
class TypeMeta:
    """Schema facts attached to a property or parameter type."""

    docs: Optional[str] = None
    is_nullable: bool = False
    is_list: bool = False
    min_occurs: Optional[int] = None
    max_occurs: Optional[int] = None

    def with_docs(self, docs: Optional[str]) -> "TypeMeta":
        return replace(self, docs=docs)

    def with_is_nullable(self, is_nullable: bool) -> "TypeMeta":
        return replace(self, is_nullable=is_nullable)

    def with_is_list(self, is_list: bool) -> "TypeMeta":
        return replace(self, is_list=is_list)

    def with_occurs(self, min_occurs: Optional[int], max_occurs: Optional[int]) -> "TypeMeta":
        return replace(self, min_occurs=min_occurs, max_occurs=max_occurs)


@dataclass(frozen=True)
class Property:
    """A single property of a generated type.

    ``type`` is the name used in documentation: a built-in type such as
    ``string`` or a fully-qualified class name with a leading separator.
    ``namespace`` is the namespace the property's type belongs to, which can
    differ from the namespace of the owning type.
    """

    name: str
    type: str
    namespace: str = ""
    meta: TypeMeta = field(default_factory=TypeMeta)

    @classmethod
    def from_meta(
        cls,
        namespace: str,
        name: str,
        type_name: str,
        meta: TypeMeta | None = None,
    ) -> "Property":
        namespace = normalize_namespace(namespace)
        if is_known_type(type_name):
            resolved = type_name
        else:
            short_name = normalize_classname(type_name.split(NAMESPACE_SEPARATOR)[-1])
            qualified = NAMESPACE_SEPARATOR.join(part for part in (namespace, short_name) if part)
            resolved = NAMESPACE_SEPARATOR + qualified
        return cls(name=name, type=resolved, namespace=namespace, meta=meta or TypeMeta())

    @property
    def docs(self) -> str:
        return self.meta.docs or ""

    @property
    def is_nullable(self) -> bool:
        return self.meta.is_nullable

    @property
    def is_list(self) -> bool:
        return self.meta.is_list

    @property
    def php_type(self) -> str:
        """Return the native type hint for the property."""
        if self.meta.is_list:
            return "array"
        return self.type

    @property
    def doc_block_type(self) -> str:
        """Return the documentation type, including collection bounds for lists."""
        if not self.meta.is_list:
            return self.type
        bounds = ArrayBoundsCalculator()(self.meta)
        return f"array<{bounds}, {self.type}>"


@dataclass(frozen=True)
class Type:
    """A complex type that becomes one generated class."""

    namespace: str
    name: str
    properties: Tuple[Property, ...] = ()
    xsd_type: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "namespace", normalize_namespace(self.namespace))
        object.__setattr__(self, "properties", tuple(self.properties))
        seen: set[str] = set()
        for prop in self.properties:
            if prop.name in seen:
                raise ValueError(f"Duplicate property '{prop.name}' on type {self.name}")
            seen.add(prop.name)

    @property
    def fqcn(self) -> str:
        return NAMESPACE_SEPARATOR.join(part for part in (self.namespace, self.name) if part)

    @property
    def first_property(self) -> Optional[Property]:
        return self.properties[0] if self.properties else None


@dataclass(frozen=True)
class Parameter:
    """Named, typed operation parameter."""

    name: str
    type: str


@dataclass(frozen=True)
class ReturnType:
    """Declared return type of an operation."""

    type: str
    is_mixed: bool = False

    @property
    def should_generate_as_mixed_result(self) -> bool:
        return self.is_mixed


@dataclass(frozen=True)
class ClientMethod:
    """A remote operation exposed as a client method."""

    name: str
    parameters: Tuple[Parameter, ...] = ()
    return_type: ReturnType = field(default_factory=lambda: ReturnType("mixed", is_mixed=True))
    docs: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", tuple(self.parameters))

    @property
    def parameters_count(self) -> int:
        return len(self.parameters)

    @property
    def should_generate_as_multi_arguments_request(self) -> bool:
        return self.parameters_count > 1


@dataclass(frozen=True)
class Client:
    """The service client described by the metadata."""

    name: str
    namespace: str
    methods: Tuple[ClientMethod, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "namespace", normalize_namespace(self.namespace))
        object.__setattr__(self, "methods", tuple(self.methods))

    @property
    def fqcn(self) -> str:
        return NAMESPACE_SEPARATOR.join(part for part in (self.namespace, self.name) if part)


@dataclass(frozen=True)
class Metadata:
    """Resolved service metadata: every type plus the client operations."""

    types: Tuple[Type, ...] = ()
    methods: Tuple[ClientMethod, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "types", tuple(self.types))
        object.__setattr__(self, "methods", tuple(self.methods))


__all__ = [
    "UNBOUNDED",
    "Client",
    "ClientMethod",
    "Metadata",
    "Parameter",
    "Property",
    "ReturnType",
    "Type",
    "TypeMeta",
]
