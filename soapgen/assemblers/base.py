"""Base classes for assembler plugins."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, Type, TypeVar

from ..context import Context

ContextT = TypeVar("ContextT", bound=Context)


class AssemblerError(RuntimeError):
    """Uniform failure raised by every assembler."""

    def __init__(self, message: str, *, context: Context | None = None) -> None:
        super().__init__(message)
        self.context = context

    @classmethod
    def unexpected_context(
        cls, assembler: "Assembler", expected: Type[Context], context: object
    ) -> "AssemblerError":
        message = (
            f"{type(assembler).__name__}.assemble expects a {expected.__name__} as input, "
            f"{type(context).__name__} given"
        )
        if isinstance(context, Context):
            return cls(f"{message} while generating {context.describe()}", context=context)
        return cls(message)

    @classmethod
    def from_exception(cls, exc: Exception, context: Context) -> "AssemblerError":
        return cls(f"Failed to assemble {context.describe()}: {exc}", context=context)


class Assembler(ABC):
    """Contract for generation steps that mutate the class model of a context."""

    #: Context variant this assembler accepts.
    context_type: Type[Context] = Context

    def can_assemble(self, context: Context) -> bool:
        """Return True when ``context`` is a variant this assembler processes."""
        return isinstance(context, self.context_type)

    @abstractmethod
    def assemble(self, context: Context) -> None:
        """Mutate the class model of ``context``; raises ``AssemblerError``."""

    def _expect(self, context: object, expected: Type[ContextT]) -> ContextT:
        if not isinstance(context, expected):
            raise AssemblerError.unexpected_context(self, expected, context)
        return context

    @staticmethod
    @contextmanager
    def _guard(context: Context) -> Iterator[None]:
        """Re-raise any failure inside the block as an ``AssemblerError``."""
        try:
            yield
        except AssemblerError:
            raise
        except Exception as exc:
            raise AssemblerError.from_exception(exc, context) from exc


__all__ = ["Assembler", "AssemblerError"]
