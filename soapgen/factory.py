"""Generates the factory class that wires a client to the SOAP engine."""

from __future__ import annotations

from .code import ClassGenerator, ClassRenderer, DocBlockGenerator, MethodGenerator, ParameterGenerator
from .context import ClientFactoryContext
from .logging import get_logger
from .runtime import (
    DEFAULT_ENGINE_FACTORY,
    ENCODER_REGISTRY,
    ENGINE_CALLER,
    ENGINE_OPTIONS,
    EVENT_DISPATCHER,
    EVENT_DISPATCHING_CALLER,
)

logger = get_logger("factory")

BODY_TEMPLATE = "factory_body.php.j2"


class ClientFactoryGenerator:
    """Builds ``<Client>Factory`` with a static ``factory(string $wsdl)`` method."""

    def __init__(self, renderer: ClassRenderer | None = None) -> None:
        self.renderer = renderer or ClassRenderer()

    def build(self, context: ClientFactoryContext) -> ClassGenerator:
        class_ = ClassGenerator(context.factory_name, context.client_namespace)
        for use in (
            context.client_fqcn,
            context.classmap_fqcn,
            EVENT_DISPATCHER,
            DEFAULT_ENGINE_FACTORY,
            ENGINE_OPTIONS,
            EVENT_DISPATCHING_CALLER,
            ENGINE_CALLER,
            ENCODER_REGISTRY,
        ):
            class_.add_use(use)
        class_.add_method_from_generator(self._generate_factory_method(context))
        logger.debug("Built %s", class_.fqcn)
        return class_

    def generate(self, context: ClientFactoryContext) -> str:
        """Return the complete PHP file for the factory."""
        return self.renderer.render_file(self.build(context))

    def _generate_factory_method(self, context: ClientFactoryContext) -> MethodGenerator:
        body = self.renderer.render_template(
            BODY_TEMPLATE,
            client_name=context.client_name,
            classmap_name=context.classmap_name,
        )
        return MethodGenerator(
            "factory",
            parameters=[ParameterGenerator("wsdl", "string")],
            static=True,
            body=body,
            return_type=context.client_fqcn,
            docblock=DocBlockGenerator(
                short_description=(
                    "This factory can be used as a starting point "
                    "to create your own specialized factory. Feel free to modify."
                )
            ),
        )


__all__ = ["ClientFactoryGenerator"]
