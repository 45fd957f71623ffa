"""
Public API for embedcore.

Callers can rely on:

    from embedcore import NonEmptyCollection, to_fragments
    from embedcore import EmbeddableError, EmptyInputError, SerializationError

without needing to know anything about the internal module layout.
"""

from .collection import NonEmptyCollection
from .embeddable import (
    Embeddable,
    EmbeddableSequence,
    JsonValue,
    register_default,
    to_fragments,
)
from .errors import EmbeddableError, EmptyInputError, SerializationError
from .pipeline import EmbeddingClient, FragmentEmbedding, embed_value, pair_vectors

__all__ = [
    "NonEmptyCollection",
    "Embeddable",
    "EmbeddableSequence",
    "JsonValue",
    "register_default",
    "to_fragments",
    "EmbeddableError",
    "EmptyInputError",
    "SerializationError",
    "EmbeddingClient",
    "FragmentEmbedding",
    "embed_value",
    "pair_vectors",
]
