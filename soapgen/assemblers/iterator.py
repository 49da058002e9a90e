"""Iteration support over the first property of a type."""

from __future__ import annotations

from ..bounds import ArrayBoundsCalculator
from ..code import ClassGenerator, DocBlockGenerator, MethodGenerator, Tag
from ..context import Context, TypeContext
from ..logging import get_logger
from ..models import Property
from ..runtime import ARRAY_ITERATOR, ITERATOR_AGGREGATE
from .base import Assembler
from .interface import InterfaceAssembler

logger = get_logger("assemblers.iterator")

METHOD_NAME = "getIterator"


class IteratorAssembler(Assembler):
    """Implements ``IteratorAggregate`` by iterating the first declared property.

    Types without properties still get the interface but no method.
    """

    context_type = TypeContext

    def __init__(self) -> None:
        self._bounds = ArrayBoundsCalculator()

    def assemble(self, context: Context) -> None:
        context = self._expect(context, TypeContext)
        class_ = context.class_
        first_property = context.type.first_property
        with self._guard(context):
            interface_assembler = InterfaceAssembler(ITERATOR_AGGREGATE)
            if interface_assembler.can_assemble(context):
                interface_assembler.assemble(context)

            if first_property is None:
                logger.debug("Skipping %s on %s: type has no properties", METHOD_NAME, class_.fqcn)
                return
            self._implement_get_iterator(class_, first_property)

    def _implement_get_iterator(self, class_: ClassGenerator, first_property: Property) -> None:
        array_info = f"<{self._bounds(first_property.meta)}, {first_property.type}>"

        class_.remove_method(METHOD_NAME)
        class_.add_method_from_generator(
            MethodGenerator(
                METHOD_NAME,
                body=f"return new \\{ARRAY_ITERATOR}($this->{first_property.name});",
                return_type=ARRAY_ITERATOR,
                docblock=DocBlockGenerator(
                    tags=[
                        Tag("return", f"\\{ARRAY_ITERATOR}|{first_property.type}[]"),
                        Tag("phpstan-return", f"\\{ARRAY_ITERATOR}{array_info}"),
                        Tag("psalm-return", f"\\{ARRAY_ITERATOR}{array_info}"),
                    ]
                ),
            )
        )
        class_.set_docblock(
            DocBlockGenerator(
                tags=[
                    Tag("phpstan-implements", f"\\{ITERATOR_AGGREGATE}{array_info}"),
                    Tag("psalm-implements", f"\\{ITERATOR_AGGREGATE}{array_info}"),
                ]
            )
        )
        logger.debug("Generated %s::%s over $%s", class_.fqcn, METHOD_NAME, first_property.name)
