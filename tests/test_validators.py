"""
Tests for concord.validators.
"""

import pytest

from concord import (
    SUCCESS,
    ConstructionError,
    Failure,
    Violation,
    between,
    blank,
    ends_with,
    eq,
    fail,
    ge,
    gt,
    is_null,
    le,
    lt,
    matches,
    ne,
    not_blank,
    not_null,
    predicate,
    starts_with,
)


class TestComparisons:
    def test_gt_gte_lt_lte(self):
        assert gt(5)(6) == SUCCESS
        assert isinstance(gt(5)(5), Failure)
        assert ge(5)(5) == SUCCESS
        assert lt(5)(4) == SUCCESS
        assert isinstance(lt(5)(5), Failure)
        assert le(5)(5) == SUCCESS

    def test_descriptions(self):
        assert gt(5)(1) == fail(1, "got 1, expected more than 5")
        assert ge(5)(1) == fail(1, "got 1, expected 5 or more")
        assert lt(5)(9) == fail(9, "got 9, expected less than 5")
        assert le(5)(9) == fail(9, "got 9, expected 5 or less")

    def test_uncomparable_values_fail_instead_of_raising(self):
        result = gt(5)("five")
        assert isinstance(result, Failure)
        (violation,) = result.violations
        assert violation.value == "five"
        assert "not comparable" in violation.constraint

    def test_equal_validators_compare_equal(self):
        assert gt(5) == gt(5)
        assert gt(5) != gt(6)


class TestEquality:
    def test_eq(self):
        assert eq("a")("a") == SUCCESS
        assert eq("a")("b") == fail("b", "does not equal 'a'")

    def test_ne(self):
        assert ne("a")("b") == SUCCESS
        assert ne("a")("a") == fail("a", "equals 'a'")


class TestBetween:
    def test_inclusive(self):
        v = between(0, 10)
        assert v(0) == SUCCESS
        assert v(10) == SUCCESS
        assert v(11) == fail(11, "got 11, expected between 0 and 10")

    def test_exclusive(self):
        v = between(0, 10, inclusive=False)
        assert v(5) == SUCCESS
        assert v(0) == fail(0, "got 0, expected between 0 and 10 (exclusively)")

    def test_uncomparable(self):
        assert isinstance(between(0, 10)(None), Failure)


class TestNulls:
    def test_is_null(self):
        assert is_null(None) == SUCCESS
        assert is_null(0) == fail(0, "is not a null")

    def test_not_null(self):
        assert not_null(0) == SUCCESS
        assert not_null(None) == fail(None, "is a null")


class TestStrings:
    def test_matches(self):
        v = matches(r"^[a-z]+$")
        assert v("hello") == SUCCESS
        assert isinstance(v("Hello"), Failure)
        assert isinstance(v(123), Failure)

    def test_invalid_pattern_fails_at_construction(self):
        with pytest.raises(ConstructionError):
            matches("[unclosed")

    def test_starts_and_ends_with(self):
        assert starts_with("ab")("abc") == SUCCESS
        assert starts_with("ab")("cab") == fail("cab", "must start with 'ab'")
        assert ends_with("bc")("abc") == SUCCESS
        assert isinstance(ends_with("bc")(None), Failure)

    def test_blank(self):
        assert blank("   ") == SUCCESS
        assert blank(None) == SUCCESS
        assert blank("x") == fail("x", "must be blank")

    def test_not_blank(self):
        assert not_blank("x") == SUCCESS
        assert not_blank(" \t") == fail(" \t", "must not be blank")
        assert isinstance(not_blank(None), Failure)


class TestPredicate:
    def test_predicate(self):
        v = predicate(lambda x: x % 2 == 0, "must be even")
        assert v(4) == SUCCESS
        assert v(3) == Failure(frozenset({Violation(3, "must be even")}))

    def test_default_constraint_uses_function_name(self):
        assert predicate(str.isalpha)("a1") == fail("a1", "failed isalpha")

    def test_non_callable_rejected(self):
        with pytest.raises(ConstructionError):
            predicate("nope")
