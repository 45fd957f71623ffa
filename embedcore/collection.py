"""
NonEmptyCollection: an ordered container that always holds at least one item.

This is the mandated return shape of the Embeddable capability. The pipeline
that consumes it relies on two guarantees:

    • there is always at least one fragment to embed
    • fragment order is stable, because position is the only key that links
      a fragment to the vector produced for it

The container has exactly one designated `first` element and zero or more
`rest` elements. There is no representation of an empty collection: every
constructor either produces ≥1 element or raises EmptyInputError.

Instances are immutable. Accessors return shallow copies of the stored
elements so callers cannot change the collection through returned values.
"""

from __future__ import annotations

import copy
from typing import Any, Generic, Iterable, Iterator, List, Tuple, TypeVar

from embedcore.errors import EmptyInputError

T = TypeVar("T")


class NonEmptyCollection(Generic[T]):
    """
    Immutable, order-preserving collection guaranteed to hold ≥1 element.

    Construct instances through `from_single`, `from_sequence` or `merge`.

    Examples
    --------
        fragments = NonEmptyCollection.from_sequence(["title", "body"])
        fragments.first()  # "title"
        fragments.rest()   # ["body"]
        fragments.all()    # ["title", "body"]
    """

    __slots__ = ("_first", "_rest")

    def __init__(self, first: T, rest: Iterable[T] = ()) -> None:
        self._first = first
        self._rest: Tuple[T, ...] = tuple(rest)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------
    @classmethod
    def from_single(cls, item: T) -> "NonEmptyCollection[T]":
        """Create a one-element collection. Never fails."""
        return cls(item)

    @classmethod
    def from_sequence(cls, items: Iterable[T]) -> "NonEmptyCollection[T]":
        """
        Create a collection from an ordered sequence of items.

        The first item becomes `first`, the remaining items become `rest`,
        in their original order. The input is consumed exactly once, so
        generators are accepted.

        Raises
        ------
        EmptyInputError
            If `items` yields no elements.
        """
        iterator = iter(items)
        try:
            first = next(iterator)
        except StopIteration:
            raise EmptyInputError() from None
        return cls(first, iterator)

    @classmethod
    def merge(
        cls, collections: Iterable["NonEmptyCollection[T]"]
    ) -> "NonEmptyCollection[T]":
        """
        Flatten several collections into one.

        Each collection's `all()` output is concatenated in the order the
        collections are given. Zero collections is the same illegal state as
        an empty element list and raises EmptyInputError.
        """
        return cls.from_sequence(
            item for collection in collections for item in collection.all()
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def first(self) -> T:
        """Return a copy of the designated first element."""
        return copy.copy(self._first)

    def rest(self) -> List[T]:
        """Return copies of the elements after `first`, possibly empty."""
        return [copy.copy(item) for item in self._rest]

    def all(self) -> List[T]:
        """Return copies of every element in original insertion order."""
        return [self.first()] + self.rest()

    # ------------------------------------------------------------------
    # Python protocol support
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return 1 + len(self._rest)

    def __iter__(self) -> Iterator[T]:
        return iter(self.all())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, NonEmptyCollection):
            return NotImplemented
        return self._items() == other._items()

    def __hash__(self) -> int:
        return hash(self._items())

    def __repr__(self) -> str:
        return f"NonEmptyCollection({list(self._items())!r})"

    def _items(self) -> Tuple[Any, ...]:
        return (self._first,) + self._rest
