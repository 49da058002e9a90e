"""Names of the PHP runtime types referenced by generated code."""

from __future__ import annotations

CALLER: str = "Phpro\\SoapClient\\Caller\\Caller"
ENGINE_CALLER: str = "Phpro\\SoapClient\\Caller\\EngineCaller"
EVENT_DISPATCHING_CALLER: str = "Phpro\\SoapClient\\Caller\\EventDispatchingCaller"
DEFAULT_ENGINE_FACTORY: str = "Phpro\\SoapClient\\Soap\\DefaultEngineFactory"
ENGINE_OPTIONS: str = "Phpro\\SoapClient\\Soap\\EngineOptions"
ENCODER_REGISTRY: str = "Soap\\Encoding\\EncoderRegistry"
EVENT_DISPATCHER: str = "Symfony\\Component\\EventDispatcher\\EventDispatcher"

MULTI_ARGUMENT_REQUEST: str = "Phpro\\SoapClient\\Type\\MultiArgumentRequest"
MULTI_ARGUMENT_PARAMETER: str = "multiArgumentRequest"
REQUEST_INTERFACE: str = "Phpro\\SoapClient\\Type\\RequestInterface"
RESULT_INTERFACE: str = "Phpro\\SoapClient\\Type\\ResultInterface"
RESULT_PROVIDER_INTERFACE: str = "Phpro\\SoapClient\\Type\\ResultProviderInterface"
MIXED_RESULT: str = "Phpro\\SoapClient\\Type\\MixedResult"
SOAP_EXCEPTION: str = "Phpro\\SoapClient\\Exception\\SoapException"

ITERATOR_AGGREGATE: str = "IteratorAggregate"
ARRAY_ITERATOR: str = "ArrayIterator"
JSON_SERIALIZABLE: str = "JsonSerializable"

ASSERT_INSTANCE_OF: str = "\\Psl\\Type\\instance_of(\\{type}::class)->assert($response);"


__all__ = [
    "ARRAY_ITERATOR",
    "ASSERT_INSTANCE_OF",
    "CALLER",
    "DEFAULT_ENGINE_FACTORY",
    "ENCODER_REGISTRY",
    "ENGINE_CALLER",
    "ENGINE_OPTIONS",
    "EVENT_DISPATCHER",
    "EVENT_DISPATCHING_CALLER",
    "ITERATOR_AGGREGATE",
    "JSON_SERIALIZABLE",
    "MIXED_RESULT",
    "MULTI_ARGUMENT_PARAMETER",
    "MULTI_ARGUMENT_REQUEST",
    "REQUEST_INTERFACE",
    "RESULT_INTERFACE",
    "RESULT_PROVIDER_INTERFACE",
    "SOAP_EXCEPTION",
]
