"""Constructor and caller field for generated clients."""

from __future__ import annotations

from ..code import (
    VISIBILITY_PRIVATE,
    DocBlockGenerator,
    MethodGenerator,
    ParameterGenerator,
    PropertyGenerator,
    Tag,
)
from ..context import ClientContext, Context
from ..logging import get_logger
from ..normalizer import generate_class_name_and_add_import
from ..runtime import CALLER
from .base import Assembler

logger = get_logger("assemblers.constructor")

CALLER_PROPERTY = "caller"
CONSTRUCTOR = "__construct"


class ClientConstructorAssembler(Assembler):
    """Stores the call dispatcher injected through the client constructor."""

    context_type = ClientContext

    def assemble(self, context: Context) -> None:
        context = self._expect(context, ClientContext)
        class_ = context.class_
        with self._guard(context):
            caller = generate_class_name_and_add_import(CALLER, class_)
            class_.add_property_from_generator(self._generate_caller_property(caller))
            class_.add_method_from_generator(self._generate_constructor())
            logger.debug("Generated constructor for %s", class_.fqcn)

    @staticmethod
    def _generate_caller_property(caller: str) -> PropertyGenerator:
        return PropertyGenerator(
            CALLER_PROPERTY,
            visibility=VISIBILITY_PRIVATE,
            docblock=DocBlockGenerator(tags=[Tag("var", caller)]),
        )

    @staticmethod
    def _generate_constructor() -> MethodGenerator:
        return MethodGenerator(
            CONSTRUCTOR,
            parameters=[ParameterGenerator(CALLER_PROPERTY, CALLER)],
            body=f"$this->{CALLER_PROPERTY} = ${CALLER_PROPERTY};",
        )
