"""Adds an import statement to a generated type."""

from __future__ import annotations

from ..context import Context, TypeContext
from ..logging import get_logger
from ..normalizer import NAMESPACE_SEPARATOR
from .base import Assembler

logger = get_logger("assemblers.use")


class UseAssembler(Assembler):
    """Imports ``use_name`` into the class unless it is already imported."""

    context_type = TypeContext

    def __init__(self, use_name: str, alias: str | None = None) -> None:
        self.use_name = use_name.lstrip(NAMESPACE_SEPARATOR)
        self.alias = alias

    def assemble(self, context: Context) -> None:
        context = self._expect(context, TypeContext)
        class_ = context.class_
        with self._guard(context):
            if self.use_name == class_.fqcn or class_.has_use(self.use_name):
                return
            logger.debug("Importing %s into %s", self.use_name, class_.fqcn)
            class_.add_use(self.use_name, self.alias)
