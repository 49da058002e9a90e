"""Assembler implementations and discovery utilities."""

from __future__ import annotations

from importlib import metadata
from pathlib import Path
from typing import Callable, Iterable, List, Sequence, Set

from ..config import SoapGenConfig
from .accessors import AccessorAssemblerOptions, GetterAssembler, ImmutableSetterAssembler
from .base import Assembler, AssemblerError
from .client_method import ArgumentStyle, ClientMethodAssembler
from .constructor import ClientConstructorAssembler
from .interface import InterfaceAssembler, RequestAssembler, ResultAssembler
from .iterator import IteratorAssembler
from .json_serializable import JsonSerializableAssembler
from .property import PropertyAssembler, PropertyAssemblerOptions
from .result_provider import ResultProviderAssembler
from .use import UseAssembler

_ENTRY_POINT_GROUP = "soapgen.assemblers"

AssemblerFactory = Callable[[SoapGenConfig], Assembler]


def _property_assembler(config: SoapGenConfig) -> Assembler:
    return PropertyAssembler(
        PropertyAssemblerOptions(
            visibility=config.property_options.visibility,
            type_hints=config.property_options.type_hints,
            doc_blocks=config.property_options.doc_blocks,
            optional_value=config.property_options.optional_value,
        )
    )


def _accessor_options(config: SoapGenConfig) -> AccessorAssemblerOptions:
    return AccessorAssemblerOptions(
        type_hints=config.accessors.type_hints,
        doc_blocks=config.accessors.doc_blocks,
    )


_BUILTIN_FACTORIES: dict[str, AssemblerFactory] = {
    "constructor": lambda config: ClientConstructorAssembler(),
    "client_method": lambda config: ClientMethodAssembler(),
    "property": _property_assembler,
    "getter": lambda config: GetterAssembler(_accessor_options(config)),
    "immutable_setter": lambda config: ImmutableSetterAssembler(_accessor_options(config)),
    "iterator": lambda config: IteratorAssembler(),
    "json_serializable": lambda config: JsonSerializableAssembler(),
    "result_provider": lambda config: ResultProviderAssembler(config.result_provider.wrapper_class),
    "request": lambda config: RequestAssembler(),
    "result": lambda config: ResultAssembler(),
}


def discover_assemblers(
    enabled: Sequence[str] | None = None,
    *,
    config: SoapGenConfig | None = None,
) -> List[Assembler]:
    """Return instantiated assemblers in the requested order.

    Without ``enabled`` every built-in and plugin assembler is returned.
    Plugins register a class or factory under the ``soapgen.assemblers``
    entry-point group.
    """
    if config is None:
        config = SoapGenConfig(root=Path.cwd())

    factories: dict[str, Callable[[], Assembler]] = {}
    for name, builtin in _BUILTIN_FACTORIES.items():
        factories[name] = lambda builtin=builtin: builtin(config)

    for entry in _iter_entry_points():
        key = entry.name.lower()
        if key in factories:
            continue

        def _factory(entry: metadata.EntryPoint = entry) -> Assembler:
            try:
                loaded = entry.load()
            except Exception as exc:  # pragma: no cover - defensive guard
                raise RuntimeError(f"Failed to load assembler entry point '{entry.name}': {exc}") from exc
            return _coerce_assembler(loaded)

        factories[key] = _factory

    names = [name.lower() for name in enabled] if enabled is not None else list(factories)
    missing = [name for name in names if name not in factories]
    if missing:
        raise ValueError(f"Unknown assemblers requested: {', '.join(sorted(set(missing)))}")

    assemblers: List[Assembler] = []
    seen: Set[str] = set()
    for name in names:
        if name in seen:
            continue
        instance = factories[name]()
        if not isinstance(instance, Assembler):
            raise TypeError(f"Assembler factory for '{name}' did not return an Assembler instance")
        assemblers.append(instance)
        seen.add(name)
    return assemblers


def _coerce_assembler(obj: object) -> Assembler:
    if isinstance(obj, Assembler):
        return obj
    if isinstance(obj, type) and issubclass(obj, Assembler):
        return obj()
    if callable(obj):
        instance = obj()
        if isinstance(instance, Assembler):
            return instance
    raise TypeError("Assembler entry point must be an Assembler subclass or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points().select(group=_ENTRY_POINT_GROUP)


__all__ = [
    "AccessorAssemblerOptions",
    "ArgumentStyle",
    "Assembler",
    "AssemblerError",
    "ClientConstructorAssembler",
    "ClientMethodAssembler",
    "GetterAssembler",
    "ImmutableSetterAssembler",
    "InterfaceAssembler",
    "IteratorAssembler",
    "JsonSerializableAssembler",
    "PropertyAssembler",
    "PropertyAssemblerOptions",
    "RequestAssembler",
    "ResultAssembler",
    "ResultProviderAssembler",
    "UseAssembler",
    "discover_assemblers",
]
