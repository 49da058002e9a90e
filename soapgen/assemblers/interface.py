"""Declares implemented interfaces on generated types."""

from __future__ import annotations

from ..context import Context, TypeContext
from ..logging import get_logger
from ..normalizer import NAMESPACE_SEPARATOR
from ..runtime import REQUEST_INTERFACE, RESULT_INTERFACE
from .base import Assembler
from .use import UseAssembler

logger = get_logger("assemblers.interface")


class InterfaceAssembler(Assembler):
    """Imports an interface and adds it to the class once."""

    context_type = TypeContext

    def __init__(self, interface_name: str) -> None:
        self.interface_name = interface_name.lstrip(NAMESPACE_SEPARATOR)

    def assemble(self, context: Context) -> None:
        context = self._expect(context, TypeContext)
        class_ = context.class_
        with self._guard(context):
            use_assembler = UseAssembler(self.interface_name)
            if use_assembler.can_assemble(context):
                use_assembler.assemble(context)
            if class_.add_implemented_interface(self.interface_name):
                logger.debug("%s implements %s", class_.fqcn, self.interface_name)


class RequestAssembler(InterfaceAssembler):
    """Marks a type as usable as a request payload."""

    def __init__(self) -> None:
        super().__init__(REQUEST_INTERFACE)


class ResultAssembler(InterfaceAssembler):
    """Marks a type as a call result."""

    def __init__(self) -> None:
        super().__init__(RESULT_INTERFACE)
