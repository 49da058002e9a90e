"""Client methods that dispatch one remote operation each."""

from __future__ import annotations

import enum
from typing import List, Optional

from ..code import ClassGenerator, DocBlockGenerator, MethodGenerator, ParameterGenerator, Tag
from ..context import ClientMethodContext, Context
from ..logging import get_logger
from ..models import ClientMethod
from ..normalizer import NAMESPACE_SEPARATOR, generate_class_name_and_add_import, normalize_method_name
from ..runtime import (
    ASSERT_INSTANCE_OF,
    MIXED_RESULT,
    MULTI_ARGUMENT_PARAMETER,
    MULTI_ARGUMENT_REQUEST,
    REQUEST_INTERFACE,
    RESULT_INTERFACE,
    SOAP_EXCEPTION,
)
from .base import Assembler

logger = get_logger("assemblers.client_method")


class ArgumentStyle(enum.Enum):
    """How the operation's parameters reach the transport."""

    NONE = "none"
    SINGLE = "single"
    MULTI = "multi"

    @classmethod
    def for_method(cls, method: ClientMethod) -> "ArgumentStyle":
        if method.parameters_count == 0:
            return cls.NONE
        if method.should_generate_as_multi_arguments_request:
            return cls.MULTI
        return cls.SINGLE


class ClientMethodAssembler(Assembler):
    """Generates the client method for a single operation.

    The argument style is decided once per operation and drives the
    signature, the call expression and the docblock together:

    * no parameters: no signature parameter, an empty multi-argument request
      is sent;
    * one parameter: the typed parameter is passed through unchanged;
    * several parameters: one aggregate ``$multiArgumentRequest`` parameter
      whose docblock lists the original parameters.
    """

    context_type = ClientMethodContext

    def assemble(self, context: Context) -> None:
        context = self._expect(context, ClientMethodContext)
        class_ = context.class_
        method = context.method
        with self._guard(context):
            php_method_name = normalize_method_name(method.name)
            style = ArgumentStyle.for_method(method)
            param = self._create_param(method, style)
            if style is ArgumentStyle.MULTI:
                docblock = self._generate_multi_argument_docblock(context)
            else:
                docblock = self._generate_single_argument_docblock(context)
            body = self._generate_method_body(class_, param, method)
            generator = MethodGenerator(
                php_method_name,
                parameters=[] if param is None else [param],
                body=body,
                return_type=self.decide_on_return_type(context, use_fqcn=True),
                docblock=docblock,
            )

            class_.remove_method(php_method_name)
            class_.add_method_from_generator(generator)
            logger.debug(
                "Generated %s::%s (%s arguments)", class_.fqcn, php_method_name, style.value
            )

    @staticmethod
    def _create_param(method: ClientMethod, style: ArgumentStyle) -> Optional[ParameterGenerator]:
        if style is ArgumentStyle.NONE:
            return None
        if style is ArgumentStyle.SINGLE:
            parameter = method.parameters[0]
            return ParameterGenerator(parameter.name, parameter.type)
        return ParameterGenerator(MULTI_ARGUMENT_PARAMETER, MULTI_ARGUMENT_REQUEST)

    def _generate_method_body(
        self, class_: ClassGenerator, param: Optional[ParameterGenerator], method: ClientMethod
    ) -> str:
        if param is None:
            request = f"new {generate_class_name_and_add_import(MULTI_ARGUMENT_REQUEST, class_)}([])"
        else:
            request = f"${param.name}"

        return_type = self._return_type_fqcn(method)
        code = [
            f"$response = ($this->caller)('{method.name}', {request});",
            "",
            ASSERT_INSTANCE_OF.format(type=return_type.lstrip(NAMESPACE_SEPARATOR)),
            ASSERT_INSTANCE_OF.format(type=RESULT_INTERFACE),
            "",
            "return $response;",
        ]
        return "\n".join(code)

    def _generate_multi_argument_docblock(self, context: ClientMethodContext) -> DocBlockGenerator:
        class_ = context.class_
        description: List[str] = ["MultiArgumentRequest with following params:\n"]
        for parameter in context.method.parameters:
            description.append(f"{parameter.type} ${parameter.name}")

        return DocBlockGenerator(
            short_description=context.method.docs or "",
            long_description="\n".join(description),
            tags=[
                Tag(
                    "param",
                    f"{generate_class_name_and_add_import(MULTI_ARGUMENT_REQUEST, class_)} "
                    f"${MULTI_ARGUMENT_PARAMETER}",
                ),
                self._return_tag(context),
                Tag("throws", generate_class_name_and_add_import(SOAP_EXCEPTION, class_)),
            ],
        )

    def _generate_single_argument_docblock(self, context: ClientMethodContext) -> DocBlockGenerator:
        class_ = context.class_
        method = context.method
        tags = [
            self._return_tag(context),
            Tag("throws", generate_class_name_and_add_import(SOAP_EXCEPTION, class_)),
        ]
        if method.parameters:
            parameter = method.parameters[0]
            request = generate_class_name_and_add_import(REQUEST_INTERFACE, class_)
            param_type = generate_class_name_and_add_import(parameter.type, class_, prefixed=True)
            tags.insert(0, Tag("param", f"{request} & {param_type} ${parameter.name}"))

        return DocBlockGenerator(short_description=method.docs or "", tags=tags)

    def _return_tag(self, context: ClientMethodContext) -> Tag:
        result = generate_class_name_and_add_import(RESULT_INTERFACE, context.class_)
        return Tag("return", f"{result} & {self.decide_on_return_type(context, use_fqcn=False)}")

    @staticmethod
    def _return_type_fqcn(method: ClientMethod) -> str:
        if method.return_type.should_generate_as_mixed_result:
            return MIXED_RESULT
        return method.return_type.type

    def decide_on_return_type(self, context: ClientMethodContext, *, use_fqcn: bool) -> str:
        """Return type for the signature (``use_fqcn``) or for documentation.

        Operations whose result shape is unknown return the generic
        ``MixedResult`` wrapper; documentation parameterizes it with the
        declared inner type.
        """
        return_type = context.method.return_type
        if use_fqcn:
            return self._return_type_fqcn(context.method)
        if return_type.should_generate_as_mixed_result:
            wrapper = generate_class_name_and_add_import(MIXED_RESULT, context.class_)
            return f"{wrapper}<{return_type.type}>"
        return generate_class_name_and_add_import(return_type.type, context.class_, prefixed=True)
