"""Name normalization and import resolution for generated PHP code."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, List, Tuple

if TYPE_CHECKING:  # pragma: no cover - typing aid
    from .code import ClassGenerator

NAMESPACE_SEPARATOR = "\\"

KNOWN_TYPES: frozenset[str] = frozenset(
    {
        "array",
        "bool",
        "boolean",
        "callable",
        "double",
        "false",
        "float",
        "int",
        "integer",
        "iterable",
        "mixed",
        "never",
        "null",
        "object",
        "resource",
        "self",
        "static",
        "string",
        "true",
        "void",
    }
)

RESERVED_KEYWORDS: frozenset[str] = frozenset(
    {
        "__halt_compiler", "abstract", "and", "array", "as", "bool", "break", "callable",
        "case", "catch", "class", "clone", "const", "continue", "declare", "default", "die",
        "do", "echo", "else", "elseif", "empty", "enddeclare", "endfor", "endforeach",
        "endif", "endswitch", "endwhile", "enum", "eval", "exit", "extends", "false",
        "final", "finally", "float", "fn", "for", "foreach", "function", "global", "goto",
        "if", "implements", "include", "include_once", "instanceof", "insteadof", "int",
        "interface", "isset", "iterable", "list", "match", "mixed", "namespace", "never",
        "new", "null", "object", "or", "parent", "print", "private", "protected", "public",
        "readonly", "require", "require_once", "resource", "return", "self", "static",
        "string", "switch", "throw", "trait", "true", "try", "unset", "use", "var", "void",
        "while", "xor", "yield",
    }
)

_WORD_SPLIT = re.compile(r"[^A-Za-z0-9]+")
_INVALID_PROPERTY_CHARS = re.compile(r"[^A-Za-z0-9_]")


def is_known_type(type_name: str) -> bool:
    """Return True for built-in types that never need an import."""
    return type_name.lstrip("?").lower() in KNOWN_TYPES


def normalize_namespace(namespace: str) -> str:
    return namespace.replace("/", NAMESPACE_SEPARATOR).strip(NAMESPACE_SEPARATOR)


def camelize(word: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in _WORD_SPLIT.split(word) if part)


def normalize_classname(name: str) -> str:
    """Return a valid PHP class name, suffixing reserved words with ``Type``."""
    normalized = camelize(name)
    if normalized.lower() in RESERVED_KEYWORDS:
        normalized += "Type"
    return normalized


def normalize_method_name(name: str) -> str:
    normalized = camelize(name)
    return normalized[:1].lower() + normalized[1:]


def normalize_property(name: str) -> str:
    normalized = _INVALID_PROPERTY_CHARS.sub("_", name)
    if normalized[:1].isdigit():
        normalized = "_" + normalized
    return normalized


def generate_property_method(prefix: str, property_name: str) -> str:
    """Build accessor names such as ``getFirstName`` from ``first_name``."""
    return prefix + camelize(normalize_property(property_name))


def split_fqcn(fqcn: str) -> Tuple[List[str], str]:
    """Split a qualified name into namespace segments and the short name."""
    parts = fqcn.lstrip(NAMESPACE_SEPARATOR).split(NAMESPACE_SEPARATOR)
    short_name = parts.pop()
    return parts, short_name


def get_class_name_from_fqn(fqn: str) -> str:
    return split_fqcn(fqn)[1]


def get_namespace_from_fqn(fqn: str) -> str:
    return NAMESPACE_SEPARATOR.join(split_fqcn(fqn)[0])


def generate_class_name_and_add_import(
    fqcn: str, class_: "ClassGenerator", *, prefixed: bool = False
) -> str:
    """Return the display name for ``fqcn`` and make sure ``class_`` imports it.

    Built-in types are returned unchanged. In prefixed mode the last namespace
    segment stays in front of the short name (``Type\\Address``) and the
    import targets that namespace instead of the class, so identically named
    types from different schema namespaces do not clash. Imports are
    deduplicated by exact name only.
    """
    if is_known_type(fqcn):
        return fqcn

    fqcn = fqcn.lstrip(NAMESPACE_SEPARATOR)
    if not fqcn:
        raise ValueError("Cannot resolve an empty class name")

    parts, class_name = split_fqcn(fqcn)
    import_name = fqcn
    if prefixed and parts:
        prefix = parts.pop()
        class_name = f"{prefix}{NAMESPACE_SEPARATOR}{class_name}"
        import_name = NAMESPACE_SEPARATOR.join([*parts, prefix])

    if import_name == class_.fqcn:
        return class_name

    class_namespace = NAMESPACE_SEPARATOR.join(parts)
    current_namespace = class_.namespace_name or ""
    if class_namespace != current_namespace or not class_.has_use(import_name):
        class_.add_use(import_name)

    return class_name


__all__ = [
    "KNOWN_TYPES",
    "NAMESPACE_SEPARATOR",
    "RESERVED_KEYWORDS",
    "camelize",
    "generate_class_name_and_add_import",
    "generate_property_method",
    "get_class_name_from_fqn",
    "get_namespace_from_fqn",
    "is_known_type",
    "normalize_classname",
    "normalize_method_name",
    "normalize_namespace",
    "normalize_property",
    "split_fqcn",
]
