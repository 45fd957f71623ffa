"""
Error taxonomy for the embedcore package.

The core never logs and never swallows failures. Every failure is raised to
the immediate caller as one of a small, closed set of exception types so the
embedding pipeline can decide its own retry / skip policy:

    • EmbeddableError     → base class, default error kind of built-in types
    • EmptyInputError     → a container was requested from zero elements
    • SerializationError  → a structured value could not be rendered to text
"""

from typing import Optional


class EmbeddableError(Exception):
    """Base class for every failure raised by the embeddable layer."""


class EmptyInputError(EmbeddableError, ValueError):
    """
    Raised when a NonEmptyCollection is requested from zero elements.

    This is always a caller error: the constructors forbid the empty case
    explicitly, so the condition can be checked before calling.
    """

    def __init__(self, message: str = "Cannot create NonEmptyCollection from empty input.") -> None:
        super().__init__(message)


class SerializationError(EmbeddableError):
    """
    Raised when a structured value cannot be rendered to its textual form.

    Attributes
    ----------
    detail : Exception | None
        The underlying serializer failure (e.g. the TypeError raised by the
        json module for an unsupported member type).
    """

    def __init__(self, detail: Optional[Exception] = None) -> None:
        self.detail = detail
        super().__init__(f"SerdeError: {detail}")


__all__ = [
    "EmbeddableError",
    "EmptyInputError",
    "SerializationError",
]
