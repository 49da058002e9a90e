"""Tests for the class model and member builders."""

from __future__ import annotations

import pytest

from soapgen.code import (
    ClassGenerator,
    DocBlockGenerator,
    InvalidIdentifierError,
    MethodGenerator,
    ParameterGenerator,
    PropertyGenerator,
    Tag,
)
from soapgen.code.members import php_literal, render_type_hint


def test_uses_are_unique_and_stripped() -> None:
    class_ = ClassGenerator("MyType", "MyNamespace")
    class_.add_use("\\App\\Type\\Address")
    class_.add_use("App\\Type\\Address", alias="Other")

    assert class_.get_uses() == ["App\\Type\\Address"]
    assert class_.has_use("\\App\\Type\\Address")
    assert class_.get_use_alias("App\\Type\\Address") is None


def test_interfaces_are_declared_once() -> None:
    class_ = ClassGenerator("MyType")

    assert class_.add_implemented_interface("\\JsonSerializable") is True
    assert class_.add_implemented_interface("JsonSerializable") is False
    assert class_.get_implemented_interfaces() == ["JsonSerializable"]


def test_members_are_replaced_by_name_in_insertion_order() -> None:
    class_ = ClassGenerator("MyType")
    class_.add_method_from_generator(MethodGenerator("first", body="return 1;"))
    class_.add_method_from_generator(MethodGenerator("second"))
    class_.add_method_from_generator(MethodGenerator("first", body="return 2;"))

    assert [method.name for method in class_.get_methods()] == ["first", "second"]
    assert class_.get_method("first").body == "return 2;"

    class_.remove_method("missing")
    class_.remove_property("missing")
    class_.add_property_from_generator(PropertyGenerator("value"))
    class_.remove_property("value")
    assert not class_.has_property("value")


def test_invalid_identifiers_are_rejected() -> None:
    with pytest.raises(InvalidIdentifierError):
        ClassGenerator("1Type")
    with pytest.raises(InvalidIdentifierError):
        PropertyGenerator("first-name")
    with pytest.raises(InvalidIdentifierError):
        ParameterGenerator("$id")
    with pytest.raises(ValueError):
        MethodGenerator("run", visibility="internal")


def test_docblock_sections_are_separated() -> None:
    docblock = DocBlockGenerator(
        short_description="Finds users.",
        long_description="Line one\nLine two",
        tags=[Tag("param", "string $name"), Tag("return", "array")],
    )

    assert docblock.generate() == "\n".join(
        [
            "/**",
            " * Finds users.",
            " *",
            " * Line one",
            " * Line two",
            " *",
            " * @param string $name",
            " * @return array",
            " */",
        ]
    )
    assert DocBlockGenerator().is_empty()


def test_method_generation() -> None:
    method = MethodGenerator(
        "factory",
        parameters=[ParameterGenerator("wsdl", "string")],
        static=True,
        body="$a = 1;\n\nreturn $a;",
        return_type="App\\Client",
    )

    assert method.generate() == "\n".join(
        [
            "    public static function factory(string $wsdl) : \\App\\Client",
            "    {",
            "        $a = 1;",
            "",
            "        return $a;",
            "    }",
        ]
    )
    assert method.parameter_names == ["wsdl"]


def test_property_generation_with_default() -> None:
    prop = PropertyGenerator("name", type="?string", default_value=None, omit_default_value=False)

    assert prop.generate() == "    private ?string $name = null;"


def test_type_hints_and_literals() -> None:
    assert render_type_hint("?App\\Type\\Address") == "?\\App\\Type\\Address"
    assert render_type_hint("\\App\\Client") == "\\App\\Client"
    assert render_type_hint("static") == "static"
    assert php_literal("it's") == "'it\\'s'"
    assert php_literal([1, True, None]) == "[1, true, null]"


def test_generated_classes_have_no_parent_class() -> None:
    with pytest.raises(TypeError):
        ClassGenerator("Child", "App", extended_class="App\\Base")  # type: ignore[call-arg]

    assert not hasattr(ClassGenerator("Child", "App"), "extended_class")
