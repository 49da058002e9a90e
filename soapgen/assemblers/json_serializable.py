"""JSON serialization support for generated types."""

from __future__ import annotations

from ..code import INDENTATION, MethodGenerator
from ..context import Context, TypeContext
from ..logging import get_logger
from ..models import Type
from ..runtime import JSON_SERIALIZABLE
from .base import Assembler
from .interface import InterfaceAssembler

logger = get_logger("assemblers.json_serializable")

METHOD_NAME = "jsonSerialize"


class JsonSerializableAssembler(Assembler):
    """Implements ``jsonSerialize`` mapping every property name to its field."""

    context_type = TypeContext

    def assemble(self, context: Context) -> None:
        context = self._expect(context, TypeContext)
        class_ = context.class_
        with self._guard(context):
            interface_assembler = InterfaceAssembler(JSON_SERIALIZABLE)
            if interface_assembler.can_assemble(context):
                interface_assembler.assemble(context)

            class_.remove_method(METHOD_NAME)
            class_.add_method_from_generator(
                MethodGenerator(
                    METHOD_NAME,
                    body=self._generate_body(context.type),
                    return_type="array",
                )
            )
            logger.debug(
                "Generated %s::%s with %d keys", class_.fqcn, METHOD_NAME, len(context.type.properties)
            )

    @staticmethod
    def _generate_body(type_: Type) -> str:
        lines = ["return ["]
        for prop in type_.properties:
            lines.append(f"{INDENTATION}'{prop.name}' => $this->{prop.name},")
        lines.append("];")
        return "\n".join(lines)
