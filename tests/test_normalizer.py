"""Tests for soapgen.normalizer."""

from __future__ import annotations

import pytest

from soapgen.code import ClassGenerator
from soapgen.normalizer import (
    camelize,
    generate_class_name_and_add_import,
    generate_property_method,
    get_class_name_from_fqn,
    get_namespace_from_fqn,
    is_known_type,
    normalize_classname,
    normalize_method_name,
    normalize_namespace,
    normalize_property,
)


@pytest.mark.parametrize("name", ["string", "int", "?string", "Mixed", "array"])
def test_is_known_type_recognises_builtins(name: str) -> None:
    assert is_known_type(name)


def test_is_known_type_rejects_classes() -> None:
    assert not is_known_type("App\\Type\\Address")


def test_normalize_namespace_converts_slashes_and_trims() -> None:
    assert normalize_namespace("/App/Type/") == "App\\Type"
    assert normalize_namespace("\\App\\Type\\") == "App\\Type"


def test_name_normalizers() -> None:
    assert camelize("get_user-info") == "GetUserInfo"
    assert normalize_classname("list") == "ListType"
    assert normalize_classname("address") == "Address"
    assert normalize_method_name("GetUser") == "getUser"
    assert normalize_property("first-name") == "first_name"
    assert normalize_property("1st") == "_1st"
    assert generate_property_method("get", "first_name") == "getFirstName"


def test_fqcn_helpers() -> None:
    assert get_class_name_from_fqn("\\App\\Type\\Address") == "Address"
    assert get_namespace_from_fqn("\\App\\Type\\Address") == "App\\Type"
    assert get_namespace_from_fqn("Address") == ""


def test_known_type_is_returned_without_import() -> None:
    class_ = ClassGenerator("MyType", "MyNamespace")

    assert generate_class_name_and_add_import("string", class_) == "string"
    assert class_.get_uses() == []


def test_class_reference_is_imported_once() -> None:
    class_ = ClassGenerator("MyType", "MyNamespace")

    assert generate_class_name_and_add_import("\\App\\Type\\Address", class_) == "Address"
    assert generate_class_name_and_add_import("App\\Type\\Address", class_) == "Address"
    assert class_.get_uses() == ["App\\Type\\Address"]


def test_prefixed_mode_imports_the_namespace() -> None:
    class_ = ClassGenerator("Client", "App")

    name = generate_class_name_and_add_import("App\\Type\\Address", class_, prefixed=True)

    assert name == "Type\\Address"
    assert class_.get_uses() == ["App\\Type"]


def test_prefixed_mode_without_namespace_falls_back() -> None:
    class_ = ClassGenerator("Client", "App")

    assert generate_class_name_and_add_import("Address", class_, prefixed=True) == "Address"
    assert class_.get_uses() == ["Address"]


def test_same_short_name_from_different_namespaces_is_not_disambiguated() -> None:
    class_ = ClassGenerator("Client", "App")

    first = generate_class_name_and_add_import("A\\Address", class_)
    second = generate_class_name_and_add_import("B\\Address", class_)

    assert first == second == "Address"
    assert class_.get_uses() == ["A\\Address", "B\\Address"]


def test_class_never_imports_itself() -> None:
    class_ = ClassGenerator("Address", "App\\Type")

    assert generate_class_name_and_add_import("App\\Type\\Address", class_) == "Address"
    assert class_.get_uses() == []


def test_empty_name_is_rejected() -> None:
    with pytest.raises(ValueError):
        generate_class_name_and_add_import("\\", ClassGenerator("MyType"))
