"""Getter and immutable setter methods for type properties."""

from __future__ import annotations

from dataclasses import dataclass

from ..code import DocBlockGenerator, MethodGenerator, ParameterGenerator, Tag
from ..context import Context, PropertyContext
from ..logging import get_logger
from ..normalizer import generate_property_method
from .base import Assembler
from .property import documented_type, nullable_type_hint

logger = get_logger("assemblers.accessors")


@dataclass(frozen=True)
class AccessorAssemblerOptions:
    type_hints: bool = True
    doc_blocks: bool = True


class GetterAssembler(Assembler):
    """Generates ``getFoo()`` returning the ``foo`` field."""

    context_type = PropertyContext

    def __init__(self, options: AccessorAssemblerOptions | None = None) -> None:
        self.options = options or AccessorAssemblerOptions()

    def assemble(self, context: Context) -> None:
        context = self._expect(context, PropertyContext)
        class_ = context.class_
        prop = context.property
        with self._guard(context):
            method_name = generate_property_method("get", prop.name)
            method = MethodGenerator(
                method_name,
                body=f"return $this->{prop.name};",
                return_type=nullable_type_hint(prop, prop.is_nullable) if self.options.type_hints else None,
            )
            if self.options.doc_blocks:
                method.docblock = DocBlockGenerator(
                    tags=[Tag("return", documented_type(prop, prop.is_nullable))]
                )
            class_.remove_method(method_name)
            class_.add_method_from_generator(method)
            logger.debug("Generated %s::%s", class_.fqcn, method_name)


class ImmutableSetterAssembler(Assembler):
    """Generates ``withFoo($foo)`` returning a modified clone."""

    context_type = PropertyContext

    def __init__(self, options: AccessorAssemblerOptions | None = None) -> None:
        self.options = options or AccessorAssemblerOptions()

    def assemble(self, context: Context) -> None:
        context = self._expect(context, PropertyContext)
        class_ = context.class_
        prop = context.property
        with self._guard(context):
            method_name = generate_property_method("with", prop.name)
            type_hint = nullable_type_hint(prop, prop.is_nullable)
            method = MethodGenerator(
                method_name,
                parameters=[
                    ParameterGenerator(prop.name, type_hint if self.options.type_hints else None)
                ],
                body="\n".join(
                    [
                        "$new = clone $this;",
                        f"$new->{prop.name} = ${prop.name};",
                        "",
                        "return $new;",
                    ]
                ),
                return_type="static" if self.options.type_hints else None,
            )
            if self.options.doc_blocks:
                method.docblock = DocBlockGenerator(
                    tags=[
                        Tag("param", f"{documented_type(prop, prop.is_nullable)} ${prop.name}"),
                        Tag("return", "static"),
                    ]
                )
            class_.remove_method(method_name)
            class_.add_method_from_generator(method)
            logger.debug("Generated %s::%s", class_.fqcn, method_name)
