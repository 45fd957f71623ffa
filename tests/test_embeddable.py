"""
Unit tests for the Embeddable capability and its built-in implementations.

These tests verify:
    • scalar types convert to a single canonical fragment
    • structured values serialize to canonical JSON, or raise SerializationError
    • sequences flatten in order and fail fast on the first failing element
    • domain types implementing embeddable() are always asked directly
"""

import math
from decimal import Decimal

import pytest

from embedcore import (
    EmbeddableError,
    EmbeddableSequence,
    EmptyInputError,
    JsonValue,
    NonEmptyCollection,
    SerializationError,
    register_default,
    to_fragments,
)
from tests.fakes import FailingDocument, FakeDocument, FragmentError


# =====================================================================
# Scalars
# =====================================================================


@pytest.mark.parametrize(
    "value, expected",
    [
        (42, "42"),
        (-7, "-7"),
        (2**70, "1180591620717411303424"),
        (1.5, "1.5"),
        (0.1, "0.1"),
        (True, "true"),
        (False, "false"),
        ("hello world", "hello world"),
        ("x", "x"),
        ("", ""),
    ],
)
def test_scalar_embeds_to_single_fragment(value, expected) -> None:
    fragments = to_fragments(value)

    assert fragments.all() == [expected]


def test_integer_42() -> None:
    assert to_fragments(42).all() == ["42"]


def test_special_floats_render_without_failing() -> None:
    assert to_fragments(math.inf).all() == ["inf"]
    assert to_fragments(math.nan).all() == ["nan"]


# =====================================================================
# Structured values
# =====================================================================


def test_dict_serializes_to_canonical_json() -> None:
    assert to_fragments({"a": 1}).all() == ['{"a":1}']


def test_json_keys_are_sorted_and_compact() -> None:
    value = {"b": [1, 2], "a": {"d": None, "c": True}}

    assert to_fragments(value).all() == ['{"a":{"c":true,"d":null},"b":[1,2]}']


def test_json_value_wraps_any_json_like_value() -> None:
    assert JsonValue([1, "two", None]).embeddable().all() == ['[1,"two",null]']
    assert JsonValue("text").embeddable().all() == ['"text"']
    assert JsonValue(None).embeddable().all() == ["null"]


def test_json_value_keeps_unicode_unless_ascii_requested() -> None:
    assert JsonValue({"t": "café"}).embeddable().all() == ['{"t":"café"}']
    assert JsonValue({"t": "café"}, ensure_ascii=True).embeddable().all() == [
        '{"t":"caf\\u00e9"}'
    ]


@pytest.mark.parametrize(
    "value",
    [
        {"a": object()},
        {"a": math.nan},
        {"a": math.inf},
        {1: "x", "b": "y"},
    ],
)
def test_unserializable_value_raises_serialization_error(value) -> None:
    with pytest.raises(SerializationError) as excinfo:
        to_fragments(value)

    err = excinfo.value
    assert isinstance(err, EmbeddableError)
    assert err.detail is not None
    assert err.__cause__ is err.detail
    assert str(err).startswith("SerdeError: ")


def test_circular_value_raises_serialization_error() -> None:
    value: dict = {}
    value["self"] = value

    with pytest.raises(SerializationError):
        to_fragments(value)


# =====================================================================
# Sequences
# =====================================================================


def test_sequence_flattens_in_element_then_fragment_order() -> None:
    a = FakeDocument("a1", "a2")
    b = FakeDocument("b1")

    assert to_fragments([a, b]).all() == ["a1", "a2", "b1"]


def test_sequence_of_scalars() -> None:
    assert to_fragments([1, 2, 3]).all() == ["1", "2", "3"]
    assert to_fragments(("x", "y")).all() == ["x", "y"]


def test_nested_sequences_flatten() -> None:
    assert to_fragments([[1, 2], [3], [[4, 5]]]).all() == ["1", "2", "3", "4", "5"]


def test_sequence_fails_fast_with_element_error() -> None:
    a = FakeDocument("a1", "a2")
    b = FailingDocument("b is broken")
    c = FakeDocument("c1")

    with pytest.raises(FragmentError, match="b is broken"):
        to_fragments([a, b, c])

    assert a.calls == 1
    assert b.calls == 1
    assert c.calls == 0


def test_sequence_propagates_serialization_error_verbatim() -> None:
    with pytest.raises(SerializationError):
        to_fragments([{"ok": 1}, {"bad": object()}])


def test_empty_sequence_raises_empty_input_error() -> None:
    with pytest.raises(EmptyInputError):
        to_fragments([])

    with pytest.raises(EmptyInputError):
        EmbeddableSequence([]).embeddable()


def test_sequence_error_kind_matches_element_error_kind() -> None:
    assert EmbeddableSequence([FakeDocument("a")]).Error is FragmentError
    assert EmbeddableSequence([1, 2]).Error is EmbeddableError
    assert EmbeddableSequence([]).Error is EmbeddableError


def test_sequence_wrapper_accepts_generators() -> None:
    seq = EmbeddableSequence(FakeDocument(str(i)) for i in range(3))

    assert seq.embeddable().all() == ["0", "1", "2"]


# =====================================================================
# Domain types and dispatch
# =====================================================================


def test_domain_type_embeddable_is_used() -> None:
    doc = FakeDocument("only the definition")

    assert to_fragments(doc) == NonEmptyCollection.from_single("only the definition")


def test_embeddable_method_wins_over_builtin_default() -> None:
    class Tags(list):
        Error = EmbeddableError

        def embeddable(self) -> NonEmptyCollection[str]:
            return NonEmptyCollection.from_single(", ".join(self))

    assert to_fragments(Tags(["a", "b"])).all() == ["a, b"]


def test_unsupported_type_raises_type_error() -> None:
    with pytest.raises(TypeError, match="not embeddable"):
        to_fragments(object())

    with pytest.raises(TypeError):
        to_fragments(None)


def test_register_default_extends_dispatch() -> None:
    class Money(Decimal):
        pass

    @register_default(Money)
    def _money(value):
        return NonEmptyCollection.from_single(f"{value:.2f}")

    assert to_fragments(Money("3.5")).all() == ["3.50"]


@pytest.mark.parametrize(
    "value, expected",
    [
        (1.0, "1.0"),
        (1e20, "1e+20"),
        (-0.0, "-0.0"),
    ],
)
def test_float_keeps_repr_form(value, expected) -> None:
    assert to_fragments(value).all() == [expected]


def test_non_string_keys_sort_by_value_before_conversion() -> None:
    assert to_fragments({2: "a", 10: "b"}).all() == ['{"2":"a","10":"b"}']
    assert to_fragments({"2": "a", "10": "b"}).all() == ['{"10":"b","2":"a"}']
