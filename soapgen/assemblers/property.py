"""Class fields generated from type properties."""

from __future__ import annotations

from dataclasses import dataclass, replace

from ..code import VISIBILITY_PRIVATE, DocBlockGenerator, PropertyGenerator, Tag
from ..code.members import assert_visibility
from ..context import Context, PropertyContext
from ..logging import get_logger
from ..models import Property
from .base import Assembler

logger = get_logger("assemblers.property")

_NOT_NULLABLE = frozenset({"mixed", "null"})


def nullable_type_hint(prop: Property, nullable: bool) -> str:
    """Native type hint for ``prop``, prefixed with ``?`` when it may be null."""
    php_type = prop.php_type
    if nullable and php_type.lower() not in _NOT_NULLABLE:
        return f"?{php_type}"
    return php_type


def documented_type(prop: Property, nullable: bool) -> str:
    doc_type = prop.doc_block_type
    return f"null | {doc_type}" if nullable else doc_type


@dataclass(frozen=True)
class PropertyAssemblerOptions:
    """Rendering switches for generated fields; ``with_*`` return copies."""

    visibility: str = VISIBILITY_PRIVATE
    type_hints: bool = True
    doc_blocks: bool = True
    optional_value: bool = False

    def __post_init__(self) -> None:
        assert_visibility(self.visibility)

    @classmethod
    def create(cls) -> "PropertyAssemblerOptions":
        return cls()

    def with_visibility(self, visibility: str) -> "PropertyAssemblerOptions":
        return replace(self, visibility=visibility)

    def with_type_hints(self, type_hints: bool = True) -> "PropertyAssemblerOptions":
        return replace(self, type_hints=type_hints)

    def with_doc_blocks(self, doc_blocks: bool = True) -> "PropertyAssemblerOptions":
        return replace(self, doc_blocks=doc_blocks)

    def with_optional_value(self, optional_value: bool = True) -> "PropertyAssemblerOptions":
        return replace(self, optional_value=optional_value)


class PropertyAssembler(Assembler):
    """Adds or replaces the field backing one property."""

    context_type = PropertyContext

    def __init__(self, options: PropertyAssemblerOptions | None = None) -> None:
        self.options = options or PropertyAssemblerOptions.create()

    def assemble(self, context: Context) -> None:
        context = self._expect(context, PropertyContext)
        class_ = context.class_
        prop = context.property
        with self._guard(context):
            nullable = self.options.optional_value or prop.is_nullable
            generator = PropertyGenerator(
                prop.name,
                visibility=self.options.visibility,
                type=nullable_type_hint(prop, nullable) if self.options.type_hints else None,
                default_value=None,
                omit_default_value=not nullable,
            )
            if self.options.doc_blocks:
                generator.docblock = DocBlockGenerator(
                    short_description=prop.docs,
                    tags=[Tag("var", documented_type(prop, nullable))],
                )
            class_.remove_property(prop.name)
            class_.add_property_from_generator(generator)
            logger.debug("Generated field %s::$%s", class_.fqcn, prop.name)
