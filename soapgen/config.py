"""Configuration loading for soapgen (.soapgen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import re
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .code import VISIBILITIES, VISIBILITY_PRIVATE
from .normalizer import normalize_namespace

CONFIG_FILENAME = ".soapgen.yml"

DEFAULT_CLIENT_ASSEMBLERS: tuple[str, ...] = ("constructor", "client_method")
DEFAULT_TYPE_ASSEMBLERS: tuple[str, ...] = ("property", "getter")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ClientConfig:
    """Generated client class settings."""

    name: str = "Client"
    namespace: str = ""
    destination: Optional[Path] = None
    assemblers: List[str] = field(default_factory=lambda: list(DEFAULT_CLIENT_ASSEMBLERS))


@dataclass
class ClassmapConfig:
    """Class map naming referenced by the generated client factory."""

    name: str = "Classmap"
    namespace: Optional[str] = None


@dataclass
class TypeRule:
    """Extra assemblers for types whose name matches ``pattern``."""

    pattern: str
    assemblers: List[str] = field(default_factory=list)

    def matches(self, type_name: str) -> bool:
        return re.search(self.pattern, type_name) is not None


@dataclass
class TypesConfig:
    """Generated type class settings."""

    namespace: str = ""
    destination: Optional[Path] = None
    assemblers: List[str] = field(default_factory=lambda: list(DEFAULT_TYPE_ASSEMBLERS))
    rules: List[TypeRule] = field(default_factory=list)

    def assemblers_for(self, type_name: str) -> List[str]:
        """Configured assemblers plus those of every matching rule, without repeats."""
        names = list(self.assemblers)
        for rule in self.rules:
            if rule.matches(type_name):
                names.extend(name for name in rule.assemblers if name not in names)
        return names


@dataclass
class PropertyConfig:
    visibility: str = VISIBILITY_PRIVATE
    type_hints: bool = True
    doc_blocks: bool = True
    optional_value: bool = False


@dataclass
class AccessorConfig:
    type_hints: bool = True
    doc_blocks: bool = True


@dataclass
class ResultProviderConfig:
    wrapper_class: Optional[str] = None


@dataclass
class SoapGenConfig:
    """Represents the settings defined in .soapgen.yml."""

    root: Path
    client: ClientConfig = field(default_factory=ClientConfig)
    classmap: ClassmapConfig = field(default_factory=ClassmapConfig)
    types: TypesConfig = field(default_factory=TypesConfig)
    property_options: PropertyConfig = field(default_factory=PropertyConfig)
    accessors: AccessorConfig = field(default_factory=AccessorConfig)
    result_provider: ResultProviderConfig = field(default_factory=ResultProviderConfig)
    templates_dir: Optional[Path] = None

    @property
    def classmap_namespace(self) -> str:
        if self.classmap.namespace is not None:
            return self.classmap.namespace
        return self.client.namespace


def load_config(config_path: Path) -> SoapGenConfig:
    """Load configuration from disk; a missing file yields the defaults."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return SoapGenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    client_data = _as_dict(data.get("client"))
    client = ClientConfig(
        name=_as_str(client_data.get("name")) or "Client",
        namespace=normalize_namespace(_as_str(client_data.get("namespace")) or ""),
        destination=_as_path(root, client_data.get("destination")),
        assemblers=_as_str_list(client_data.get("assemblers"), DEFAULT_CLIENT_ASSEMBLERS),
    )

    classmap_data = _as_dict(data.get("classmap"))
    classmap_namespace = _as_str(classmap_data.get("namespace"))
    classmap = ClassmapConfig(
        name=_as_str(classmap_data.get("name")) or "Classmap",
        namespace=normalize_namespace(classmap_namespace) if classmap_namespace is not None else None,
    )

    types_data = _as_dict(data.get("types"))
    types = TypesConfig(
        namespace=normalize_namespace(_as_str(types_data.get("namespace")) or ""),
        destination=_as_path(root, types_data.get("destination")),
        assemblers=_as_str_list(types_data.get("assemblers"), DEFAULT_TYPE_ASSEMBLERS),
        rules=_parse_rules(types_data.get("rules")),
    )

    property_data = _as_dict(data.get("property"))
    visibility = _as_str(property_data.get("visibility")) or VISIBILITY_PRIVATE
    if visibility not in VISIBILITIES:
        raise ConfigError(
            f"property.visibility must be one of {', '.join(VISIBILITIES)}, got '{visibility}'"
        )
    property_config = PropertyConfig(
        visibility=visibility,
        type_hints=_as_bool(property_data.get("type_hints"), True),
        doc_blocks=_as_bool(property_data.get("doc_blocks"), True),
        optional_value=_as_bool(property_data.get("optional_value"), False),
    )

    accessor_data = _as_dict(data.get("accessors"))
    accessors = AccessorConfig(
        type_hints=_as_bool(accessor_data.get("type_hints"), True),
        doc_blocks=_as_bool(accessor_data.get("doc_blocks"), True),
    )

    result_provider_data = _as_dict(data.get("result_provider"))
    result_provider = ResultProviderConfig(
        wrapper_class=_as_str(result_provider_data.get("wrapper_class")),
    )

    return SoapGenConfig(
        root=root,
        client=client,
        classmap=classmap,
        types=types,
        property_options=property_config,
        accessors=accessors,
        result_provider=result_provider,
        templates_dir=_as_path(root, data.get("templates_dir")),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _parse_rules(value: Any) -> List[TypeRule]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError("types.rules must be a list")
    rules: List[TypeRule] = []
    for index, item in enumerate(value):
        item = _as_dict(item)
        pattern = _as_str(item.get("pattern"))
        if not pattern:
            raise ConfigError(f"types.rules[{index}] is missing a pattern")
        try:
            re.compile(pattern)
        except re.error as exc:
            raise ConfigError(f"types.rules[{index}] has an invalid pattern: {exc}") from exc
        rules.append(TypeRule(pattern=pattern, assemblers=_as_str_list(item.get("assemblers"), ())))
    return rules


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_path(root: Path, value: Any) -> Optional[Path]:
    text = _as_str(value)
    return root / text if text else None


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return default


def _as_str_list(value: Any, default: Sequence[str]) -> List[str]:
    if value is None:
        return list(default)
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return list(default)


__all__ = [
    "AccessorConfig",
    "ClassmapConfig",
    "ClientConfig",
    "ConfigError",
    "PropertyConfig",
    "ResultProviderConfig",
    "SoapGenConfig",
    "TypeRule",
    "TypesConfig",
    "load_config",
]
