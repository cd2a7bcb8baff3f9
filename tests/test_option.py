"""Tests for the Option type and its combinators."""

import math

import pytest

from fp_core import (
    NOTHING,
    Err,
    Nothing,
    Ok,
    Some,
    chain_option,
    fold_option,
    from_falsy,
    from_nullable,
    from_predicate,
    get_or_else,
    is_nothing,
    is_some,
    map_option,
    sequence_option,
    to_result,
)


class TestFromFalsy:
    """Tests for the falsy-to-absent constructor."""

    @pytest.mark.parametrize("value", ["", None, 0, 0.0, False, [], {}, math.nan])
    def test_falsy_values_are_absent(self, value):
        assert from_falsy(value) == NOTHING
        assert is_nothing(from_falsy(value))

    @pytest.mark.parametrize("value", ["MS Word", " ", 1, -1, 0.5, True, [0], {"a": 1}])
    def test_truthy_values_are_present(self, value):
        option = from_falsy(value)

        assert is_some(option)
        assert option.value is value

    def test_nothing_instances_are_equal(self):
        assert Nothing() == NOTHING


class TestFromNullable:
    """Tests for from_nullable, which only treats None as absent."""

    def test_none_is_absent(self):
        assert from_nullable(None) == NOTHING

    def test_empty_string_is_present(self):
        assert from_nullable("") == Some("")


class TestFromPredicate:
    """Tests for predicate-based constructors."""

    def test_predicate_decides_presence(self):
        positive = from_predicate(lambda x: x > 0)

        assert positive(3) == Some(3)
        assert positive(-3) == NOTHING


class TestSequenceOption:
    """Tests for the all-or-nothing combinator."""

    def test_all_present_yields_tuple_in_order(self):
        assert sequence_option(Some("a"), Some("b")) == Some(("a", "b"))

    @pytest.mark.parametrize(
        "options",
        [
            (NOTHING, Some("b")),
            (Some("a"), NOTHING),
            (NOTHING, NOTHING),
        ],
    )
    def test_any_absent_yields_nothing(self, options):
        assert sequence_option(*options) == NOTHING

    def test_generic_over_arity(self):
        assert sequence_option(Some(1), Some(2), Some(3)) == Some((1, 2, 3))
        assert sequence_option(Some(1), Some(2), NOTHING) == NOTHING
        assert sequence_option() == Some(())


class TestMapAndFallback:
    """Tests for map_option, get_or_else and friends."""

    def test_map_applies_to_present_value(self):
        assert map_option(lambda x: x * 2)(Some(2)) == Some(4)

    def test_map_skips_absent_value(self):
        calls = []

        result = map_option(calls.append)(NOTHING)

        assert result == NOTHING
        assert calls == []

    def test_map_identity_is_noop(self):
        assert map_option(lambda x: x)(Some("x")) == Some("x")
        assert map_option(lambda x: x)(NOTHING) == NOTHING

    def test_get_or_else_invokes_fallback_once_on_nothing(self):
        calls = []

        def fallback():
            calls.append(1)
            return "-"

        assert get_or_else(fallback)(NOTHING) == "-"
        assert len(calls) == 1

    def test_get_or_else_never_invokes_fallback_on_some(self):
        def fallback():
            raise AssertionError("fallback must not be called")

        assert get_or_else(fallback)(Some("value")) == "value"

    def test_chain_flattens(self):
        half = chain_option(lambda x: Some(x // 2) if x % 2 == 0 else NOTHING)

        assert half(Some(4)) == Some(2)
        assert half(Some(3)) == NOTHING
        assert half(NOTHING) == NOTHING

    def test_fold_collapses_both_branches(self):
        describe = fold_option(lambda: "none", lambda x: f"some {x}")

        assert describe(Some(1)) == "some 1"
        assert describe(NOTHING) == "none"

    def test_to_result(self):
        convert = to_result(lambda: "missing")

        assert convert(Some(1)) == Ok(1)
        assert convert(NOTHING) == Err("missing")


class TestPatternMatching:
    """Options support structural pattern matching."""

    def test_match_some_and_nothing(self):
        def describe(option):
            match option:
                case Some(value):
                    return f"got {value}"
                case Nothing():
                    return "nothing"

        assert describe(Some(5)) == "got 5"
        assert describe(NOTHING) == "nothing"

    def test_options_are_immutable(self):
        option = Some(1)

        with pytest.raises(AttributeError):
            option.value = 2


class TestNonOptionInput:
    """Combinators reject values that are neither Some nor Nothing."""

    @pytest.mark.parametrize(
        "combinator",
        [
            map_option(str),
            chain_option(Some),
            get_or_else(lambda: "-"),
            fold_option(lambda: "none", str),
            to_result(lambda: "missing"),
        ],
    )
    def test_stray_none_raises(self, combinator):
        with pytest.raises(TypeError, match="Unexpected option type: NoneType"):
            combinator(None)

    def test_sequence_rejects_raw_value(self):
        with pytest.raises(TypeError, match="Unexpected option type: str"):
            sequence_option(Some("a"), "b")
