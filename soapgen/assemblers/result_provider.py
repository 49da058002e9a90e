"""Exposes the first property of a response type as the call result."""

from __future__ import annotations

from ..code import ClassGenerator, DocBlockGenerator, MethodGenerator, Tag
from ..context import Context, TypeContext
from ..logging import get_logger
from ..models import Property
from ..normalizer import NAMESPACE_SEPARATOR, get_class_name_from_fqn
from ..runtime import RESULT_INTERFACE, RESULT_PROVIDER_INTERFACE
from .base import Assembler
from .interface import InterfaceAssembler
from .use import UseAssembler

logger = get_logger("assemblers.result_provider")

METHOD_NAME = "getResult"


class ResultProviderAssembler(Assembler):
    """Implements ``getResult`` on top of the first declared property.

    With a ``wrapper_class`` the property value is passed to a new wrapper
    instance; otherwise it is returned as-is.
    """

    context_type = TypeContext

    def __init__(self, wrapper_class: str | None = None) -> None:
        wrapper_class = wrapper_class.lstrip(NAMESPACE_SEPARATOR) if wrapper_class else None
        self.wrapper_class = wrapper_class or None

    def assemble(self, context: Context) -> None:
        context = self._expect(context, TypeContext)
        class_ = context.class_
        first_property = context.type.first_property
        with self._guard(context):
            interface_assembler = InterfaceAssembler(RESULT_PROVIDER_INTERFACE)
            if interface_assembler.can_assemble(context):
                interface_assembler.assemble(context)

            if first_property is None:
                logger.debug("Skipping %s on %s: type has no properties", METHOD_NAME, class_.fqcn)
                return
            self._implement_get_result(context, class_, first_property)

    def _implement_get_result(self, context: TypeContext, class_: ClassGenerator, prop: Property) -> None:
        use_assembler = UseAssembler(self.wrapper_class or RESULT_INTERFACE)
        if use_assembler.can_assemble(context):
            use_assembler.assemble(context)

        class_.remove_method(METHOD_NAME)
        class_.add_method_from_generator(
            MethodGenerator(
                METHOD_NAME,
                return_type=RESULT_INTERFACE,
                body=self._generate_body(prop),
                docblock=DocBlockGenerator(tags=[Tag("return", self._generate_return_tag(prop))]),
            )
        )
        logger.debug("Generated %s::%s from $%s", class_.fqcn, METHOD_NAME, prop.name)

    def _generate_body(self, prop: Property) -> str:
        if self.wrapper_class is None:
            return f"return $this->{prop.name};"
        return f"return new {get_class_name_from_fqn(self.wrapper_class)}($this->{prop.name});"

    def _generate_return_tag(self, prop: Property) -> str:
        if self.wrapper_class is None:
            return f"{prop.type}|{get_class_name_from_fqn(RESULT_INTERFACE)}"
        return get_class_name_from_fqn(self.wrapper_class)
