"""
The Embeddable capability and its built-in implementations.

A domain type is *embeddable* when it can say which of its textual fragments
should be turned into embedding vectors. It does so by exposing:

    • embeddable(self) -> NonEmptyCollection[str]
    • Error: the exception type raised when fragments cannot be produced

Example
-------
    class Definition:
        Error = EmbeddableError

        def __init__(self, word: str, definition: str) -> None:
            self.word = word
            self.definition = definition

        def embeddable(self) -> NonEmptyCollection[str]:
            # Only the definition text gets a vector.
            return NonEmptyCollection.from_single(self.definition)

The order of the returned fragments matters: position is the only thing that
links a fragment to the vector generated for it downstream.

Built-in types are covered by `to_fragments`:

    • str, bool, int, float      → one fragment, canonical textual form
    • dict / JsonValue           → one fragment, canonical JSON text
    • list / tuple / sequences   → every element in order, merged (fail-fast)
"""

from __future__ import annotations

import functools
import json
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Protocol, Tuple, Type, TypeVar

from embedcore.collection import NonEmptyCollection
from embedcore.errors import EmbeddableError, SerializationError

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


# ---------------------------------------------------------------------------
# Embeddable
# ---------------------------------------------------------------------------
# Structural contract, generic over the implementer's error type.
#
# Any object with a compatible `embeddable()` method is accepted; there is no
# base class to inherit from. `Error` documents which exception type the
# implementation raises so callers can catch it precisely.
# ---------------------------------------------------------------------------
class Embeddable(Protocol[E]):
    Error: Type[E]

    def embeddable(self) -> NonEmptyCollection[str]:
        """
        Return the ordered text fragments to embed.
        Raises `Error` when the fragments cannot be produced.
        """
        ...


def _json_fragment(value: Any, ensure_ascii: bool = False) -> str:
    try:
        return json.dumps(
            value,
            separators=(",", ":"),
            sort_keys=True,
            ensure_ascii=ensure_ascii,
            allow_nan=False,
        )
    except (TypeError, ValueError) as exc:
        # TypeError: unsupported member type or non-string keys that cannot
        # be sorted. ValueError: NaN / Infinity or a circular reference.
        raise SerializationError(exc) from exc


@dataclass(frozen=True)
class JsonValue:
    """
    A structured, JSON-like value embedded as its canonical serialized text.

    Canonical form is compact (no whitespace) with object keys sorted, so
    equal values always produce identical fragments. This holds for string
    keys: int, float, bool and None keys are sorted by their own value before
    json converts them to text, so {2: "a", 10: "b"} gives {"2":"a","10":"b"}
    while {"2": "a", "10": "b"} gives {"10":"b","2":"a"}. Mixed key types
    cannot be sorted and raise SerializationError.

    Parameters
    ----------
    value : Any
        Any value the json module can serialize.
    ensure_ascii : bool, optional
        Escape non-ASCII characters in the output. Defaults to False.
    """

    value: Any
    ensure_ascii: bool = False

    Error = EmbeddableError

    def embeddable(self) -> NonEmptyCollection[str]:
        return NonEmptyCollection.from_single(
            _json_fragment(self.value, ensure_ascii=self.ensure_ascii)
        )


class EmbeddableSequence(Generic[T]):
    """
    A homogeneous sequence of embeddable items.

    Each element is embedded independently, in order. The first element that
    fails stops the whole conversion and its exception is raised unchanged:
    there are no partial results and no aggregated errors. On success, the
    per-element collections are merged so that element order and each
    element's own fragment order are both preserved.

    `Error` is the element type's error kind.
    """

    def __init__(self, items: Iterable[T]) -> None:
        self.items: Tuple[T, ...] = tuple(items)
        self.Error: Type[Exception] = (
            getattr(type(self.items[0]), "Error", EmbeddableError)
            if self.items
            else EmbeddableError
        )

    def embeddable(self) -> NonEmptyCollection[str]:
        # Collect eagerly so a failure never leaves a partial fragment list.
        collections = [to_fragments(item) for item in self.items]
        return NonEmptyCollection.merge(collections)

    def __repr__(self) -> str:
        return f"EmbeddableSequence({list(self.items)!r})"


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------
def to_fragments(value: Any) -> NonEmptyCollection[str]:
    """
    Convert any embeddable value into its ordered fragment collection.

    Objects that implement `embeddable()` are always asked directly, even when
    they subclass a built-in type. Everything else goes through the built-in
    implementations registered with `register_default`.

    Raises
    ------
    EmbeddableError
        (or the implementer's own `Error`) when fragments cannot be produced.
    TypeError
        If the value is neither embeddable nor a supported built-in type.
    """
    method = getattr(value, "embeddable", None)
    if callable(method):
        return method()
    return _default_fragments(value)


@functools.singledispatch
def _default_fragments(value: Any) -> NonEmptyCollection[str]:
    raise TypeError(
        f"Type '{type(value).__name__}' is not embeddable. Implement "
        "embeddable() or register a default with register_default()."
    )


def register_default(cls: Type[Any]) -> Callable[..., Any]:
    """
    Register a default fragment conversion for a type you do not own.

        @register_default(Decimal)
        def _(value):
            return NonEmptyCollection.from_single(str(value))
    """
    return _default_fragments.register(cls)


@_default_fragments.register(str)
def _str_fragments(value: str) -> NonEmptyCollection[str]:
    return NonEmptyCollection.from_single(value)


@_default_fragments.register(bool)
def _bool_fragments(value: bool) -> NonEmptyCollection[str]:
    return NonEmptyCollection.from_single("true" if value else "false")


@_default_fragments.register(int)
def _int_fragments(value: int) -> NonEmptyCollection[str]:
    return NonEmptyCollection.from_single(str(value))


# repr keeps the float form: 1.0 -> "1.0", 1e20 -> "1e+20", nan -> "nan".
# Integral floats are not shortened to integer text.
@_default_fragments.register(float)
def _float_fragments(value: float) -> NonEmptyCollection[str]:
    return NonEmptyCollection.from_single(repr(value))


@_default_fragments.register(dict)
def _dict_fragments(value: dict) -> NonEmptyCollection[str]:
    return JsonValue(value).embeddable()


@_default_fragments.register(list)
@_default_fragments.register(tuple)
def _sequence_fragments(value: Iterable[Any]) -> NonEmptyCollection[str]:
    return EmbeddableSequence(value).embeddable()


__all__ = [
    "Embeddable",
    "EmbeddableSequence",
    "JsonValue",
    "register_default",
    "to_fragments",
]
