"""
Fragment / vector correlation helpers for the embedding pipeline.

The core never calls an embedding model. These helpers sit at the boundary:
the caller supplies an EmbeddingClient (any object with a compatible
`generate(text)` method) or the raw vectors returned by one, and the helpers
re-associate each vector with the fragment it was produced for.

Position is the only correlation key, so a count mismatch between fragments
and vectors is raised immediately instead of being silently truncated.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Protocol

from embedcore.collection import NonEmptyCollection
from embedcore.embeddable import to_fragments


# ---------------------------------------------------------------------------
# EmbeddingClient
# ---------------------------------------------------------------------------
# Structural interface for whatever produces vectors. Real providers, mocks
# and test doubles are all accepted as long as they expose generate().
# ---------------------------------------------------------------------------
class EmbeddingClient(Protocol):
    def generate(self, text: str) -> List[float]:
        """Return the embedding vector for a single fragment."""
        ...


@dataclass(frozen=True)
class FragmentEmbedding:
    """A fragment paired with the vector generated for it."""

    position: int
    fragment: str
    vector: List[float]


def pair_vectors(
    fragments: NonEmptyCollection[str],
    vectors: Iterable[List[float]],
) -> NonEmptyCollection[FragmentEmbedding]:
    """
    Pair each fragment with the vector at the same position.

    Parameters
    ----------
    fragments : NonEmptyCollection[str]
        Fragments in the order they were sent to the embedding model.
    vectors : Iterable[List[float]]
        Vectors in the order the model returned them.

    Raises
    ------
    ValueError
        If the number of vectors differs from the number of fragments.
    """
    texts = fragments.all()
    vector_list = list(vectors)

    if len(vector_list) != len(texts):
        raise ValueError(
            f"Expected {len(texts)} vectors for {len(texts)} fragments, "
            f"got {len(vector_list)}."
        )

    return NonEmptyCollection.from_sequence(
        FragmentEmbedding(position=i, fragment=text, vector=vector)
        for i, (text, vector) in enumerate(zip(texts, vector_list))
    )


def embed_value(
    value: Any, client: EmbeddingClient
) -> NonEmptyCollection[FragmentEmbedding]:
    """
    Extract fragments from `value` and embed each one with `client`.

    The client is called once per fragment, in fragment order. Extraction
    errors and client errors propagate unchanged.
    """
    fragments = to_fragments(value)
    vectors = [client.generate(text) for text in fragments.all()]
    return pair_vectors(fragments, vectors)


__all__ = [
    "EmbeddingClient",
    "FragmentEmbedding",
    "embed_value",
    "pair_vectors",
]
