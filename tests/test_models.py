"""Tests for soapgen.models."""

from __future__ import annotations

import pytest

from soapgen.models import Client, ClientMethod, Parameter, Property, ReturnType, Type, TypeMeta


def test_property_from_meta_qualifies_class_types() -> None:
    prop = Property.from_meta("App/Type", "address", "address")

    assert prop.type == "\\App\\Type\\Address"
    assert prop.namespace == "App\\Type"


def test_property_from_meta_keeps_builtins() -> None:
    prop = Property.from_meta("App\\Type", "name", "string", TypeMeta(docs="The name"))

    assert prop.type == "string"
    assert prop.docs == "The name"
    assert prop.php_type == "string"
    assert prop.doc_block_type == "string"


def test_list_property_types() -> None:
    meta = TypeMeta(is_list=True, min_occurs=1, max_occurs=3)
    prop = Property.from_meta("App", "items", "Item", meta)

    assert prop.php_type == "array"
    assert prop.doc_block_type == "array<int<1,3>, \\App\\Item>"


def test_type_meta_builders_return_copies() -> None:
    meta = TypeMeta()
    updated = meta.with_docs("docs").with_is_nullable(True).with_is_list(True).with_occurs(1, -1)

    assert meta == TypeMeta()
    assert updated == TypeMeta("docs", True, True, 1, -1)


def test_type_rejects_duplicate_properties() -> None:
    prop = Property.from_meta("App", "name", "string")
    with pytest.raises(ValueError, match="Duplicate property 'name'"):
        Type(namespace="App", name="User", properties=(prop, prop))


def test_type_accessors() -> None:
    empty = Type(namespace="/App/Type/", name="Empty")

    assert empty.namespace == "App\\Type"
    assert empty.fqcn == "App\\Type\\Empty"
    assert empty.first_property is None


def test_client_method_argument_counts() -> None:
    none = ClientMethod("ping")
    single = ClientMethod("getUser", (Parameter("id", "int"),))
    multi = ClientMethod("search", [Parameter("name", "string"), Parameter("limit", "int")])

    assert none.return_type == ReturnType("mixed", is_mixed=True)
    assert not single.should_generate_as_multi_arguments_request
    assert multi.should_generate_as_multi_arguments_request
    assert multi.parameters_count == 2
    assert isinstance(multi.parameters, tuple)


def test_client_fqcn() -> None:
    client = Client("Client", "/App/Soap/", [ClientMethod("ping")])

    assert client.fqcn == "App\\Soap\\Client"
    assert client.methods == (ClientMethod("ping"),)
