"""Load resolved service metadata snapshots (YAML or JSON)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .bounds import UNBOUNDED
from .code.members import assert_identifier
from .models import ClientMethod, Metadata, Parameter, Property, ReturnType, Type, TypeMeta
from .normalizer import (
    NAMESPACE_SEPARATOR,
    get_class_name_from_fqn,
    get_namespace_from_fqn,
    is_known_type,
    normalize_classname,
    normalize_namespace,
    normalize_property,
)


class MetadataError(RuntimeError):
    """Raised when a metadata snapshot is missing or malformed."""


def load_metadata(path: Path, *, types_namespace: str = "") -> Metadata:
    """Read a metadata snapshot; unqualified type names land in ``types_namespace``."""
    if not path.exists():
        raise MetadataError(f"Metadata file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise MetadataError(f"Failed to parse {path.name}: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise MetadataError(f"{path.name} must contain a mapping at the root")
    return parse_metadata(data, types_namespace=types_namespace)


def parse_metadata(data: Dict[str, Any], *, types_namespace: str = "") -> Metadata:
    namespace = normalize_namespace(types_namespace)
    types = [
        _parse_type(item, namespace, f"types[{index}]")
        for index, item in enumerate(_as_list(data.get("types"), "types"))
    ]
    methods = [
        _parse_method(item, namespace, f"methods[{index}]")
        for index, item in enumerate(_as_list(data.get("methods"), "methods"))
    ]
    return Metadata(types=tuple(types), methods=tuple(methods))


def _parse_type(item: Any, default_namespace: str, where: str) -> Type:
    item = _as_mapping(item, where)
    name = _required_str(item, "name", where)
    namespace = normalize_namespace(str(item.get("namespace") or default_namespace))
    properties = [
        _parse_property(prop, namespace, f"{where}.properties[{index}]")
        for index, prop in enumerate(_as_list(item.get("properties"), f"{where}.properties"))
    ]
    try:
        return Type(
            namespace=namespace,
            name=assert_identifier(normalize_classname(name), "class"),
            properties=tuple(properties),
            xsd_type=str(item.get("xsd_type") or name),
        )
    except ValueError as exc:
        raise MetadataError(f"{where}: {exc}") from exc


def _parse_property(item: Any, type_namespace: str, where: str) -> Property:
    item = _as_mapping(item, where)
    name = normalize_property(_required_str(item, "name", where))
    type_name = _required_str(item, "type", where)
    namespace = str(item.get("namespace") or type_namespace)
    if not is_known_type(type_name) and NAMESPACE_SEPARATOR in type_name.strip(NAMESPACE_SEPARATOR):
        namespace = get_namespace_from_fqn(type_name)
        type_name = get_class_name_from_fqn(type_name)

    meta = TypeMeta(
        docs=_optional_str(item.get("docs")),
        is_nullable=bool(item.get("nullable", False)),
        is_list=bool(item.get("list", False)),
        min_occurs=_occurs(item.get("min_occurs"), where),
        max_occurs=_occurs(item.get("max_occurs"), where),
    )
    return Property.from_meta(namespace, name, type_name, meta)


def _parse_method(item: Any, types_namespace: str, where: str) -> ClientMethod:
    item = _as_mapping(item, where)
    name = _required_str(item, "name", where)
    parameters = []
    for index, raw in enumerate(_as_list(item.get("parameters"), f"{where}.parameters")):
        raw = _as_mapping(raw, f"{where}.parameters[{index}]")
        parameters.append(
            Parameter(
                name=normalize_property(_required_str(raw, "name", f"{where}.parameters[{index}]")),
                type=qualify_type(
                    _required_str(raw, "type", f"{where}.parameters[{index}]"), types_namespace
                ),
            )
        )

    returns = item.get("returns")
    if returns is None:
        return_type = ReturnType("mixed", is_mixed=True)
    else:
        returns = _as_mapping(returns, f"{where}.returns")
        return_type = ReturnType(
            type=qualify_type(_required_str(returns, "type", f"{where}.returns"), types_namespace),
            is_mixed=bool(returns.get("mixed", False)),
        )

    return ClientMethod(
        name=name,
        parameters=tuple(parameters),
        return_type=return_type,
        docs=_optional_str(item.get("docs")),
    )


def qualify_type(type_name: str, namespace: str) -> str:
    """Place short class names into ``namespace``; built-ins and qualified names pass through."""
    if is_known_type(type_name):
        return type_name
    stripped = type_name.lstrip(NAMESPACE_SEPARATOR)
    if NAMESPACE_SEPARATOR in stripped or not namespace:
        return stripped
    return f"{namespace}{NAMESPACE_SEPARATOR}{normalize_classname(stripped)}"


def _occurs(value: Any, where: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, str) and value.strip().lower() == "unbounded":
        return UNBOUNDED
    if isinstance(value, bool):
        raise MetadataError(f"{where}: occurrence bounds must be integers or 'unbounded'")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise MetadataError(f"{where}: occurrence bounds must be integers or 'unbounded'") from exc


def _as_mapping(value: Any, where: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise MetadataError(f"{where} must be a mapping")
    return value


def _as_list(value: Any, where: str) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise MetadataError(f"{where} must be a list")
    return value


def _required_str(item: Dict[str, Any], key: str, where: str) -> str:
    value = item.get(key)
    if not isinstance(value, str) or not value.strip():
        raise MetadataError(f"{where}.{key} must be a non-empty string")
    return value.strip()


def _optional_str(value: Any) -> Optional[str]:
    return str(value) if value is not None else None


__all__ = ["MetadataError", "load_metadata", "parse_metadata", "qualify_type"]
