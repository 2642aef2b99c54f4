"""
Tests for concord.types: Path, Violation and the Result algebra.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from concord import (
    SUCCESS,
    Failure,
    Generic,
    Indexed,
    Path,
    Success,
    Violation,
    aggregate,
    combine,
    fail,
    failure,
    success,
)


class TestPath:
    def test_empty_path(self):
        assert Path.empty == Path()
        assert len(Path.empty) == 0
        assert not Path.empty

    def test_structural_equality(self):
        assert Path.of(Indexed(2)) == Path.of(Indexed(2))
        assert Path.of(Indexed(2)) != Path.of(Indexed(3))
        assert Path.of(Generic("a"), Indexed(0)) != Path.of(Indexed(0), Generic("a"))

    def test_prepend_puts_element_outermost(self):
        path = Path.of(Indexed(1)).prepend(Generic("items"))
        assert list(path) == [Generic("items"), Indexed(1)]

    def test_concatenation(self):
        assert Path.of(Generic("a")) + Path.of(Indexed(0)) == Path.of(Generic("a"), Indexed(0))

    def test_negative_index_rejected(self):
        with pytest.raises(ValueError):
            Indexed(-1)

    def test_str(self):
        assert str(Path.of(Generic("order"), Generic("items"), Indexed(2), Generic("sku"))) == (
            "order.items[2].sku"
        )
        assert str(Path.of(Indexed(0), Indexed(1))) == "[0][1]"
        assert str(Path.empty) == ""


class TestViolation:
    def test_defaults_to_empty_path(self):
        assert Violation(1, "bad").path == Path.empty

    def test_prefixed(self):
        v = Violation(1, "bad", Path.of(Generic("x"))).prefixed(Indexed(3))
        assert v.path == Path.of(Indexed(3), Generic("x"))
        assert v.value == 1
        assert v.constraint == "bad"

    def test_with_value_keeps_path_and_constraint(self):
        original = Violation(1, "bad", Path.of(Indexed(0)))
        rewritten = original.with_value("subject")
        assert rewritten == Violation("subject", "bad", Path.of(Indexed(0)))

    def test_unhashable_value_can_live_in_a_set(self):
        violations = {Violation([1, 2], "bad"), Violation([1, 2], "bad"), Violation([3], "bad")}
        assert len(violations) == 2

    def test_str(self):
        assert str(Violation(1, "bad")) == "bad"
        assert str(Violation(1, "bad", Path.of(Indexed(4)))) == "[4]: bad"


class TestResult:
    def test_success_is_shared(self):
        assert success() is SUCCESS
        assert success() == Success()
        assert success().is_success()
        assert not success().is_failure()

    def test_failure_holds_a_set(self):
        v = Violation(1, "bad")
        result = failure([v, v])
        assert isinstance(result, Failure)
        assert result.violations == frozenset({v})
        assert result.is_failure()

    def test_empty_failure_is_a_programming_error(self):
        with pytest.raises(ValueError):
            failure([])

    def test_truthiness(self):
        assert SUCCESS
        assert not fail(1, "bad")

    def test_fail_shorthand(self):
        assert fail(1, "bad") == Failure(frozenset({Violation(1, "bad")}))

    def test_combine_table(self):
        a = fail(1, "a")
        b = fail(2, "b")
        assert combine(SUCCESS, SUCCESS) == SUCCESS
        assert combine(SUCCESS, a) == a
        assert combine(a, SUCCESS) == a
        assert combine(a, b) == failure([Violation(1, "a"), Violation(2, "b")])

    def test_combine_deduplicates_equal_violations(self):
        assert combine(fail(1, "a"), fail(1, "a")) == fail(1, "a")

    def test_combine_keeps_violations_differing_by_path(self):
        left = fail(1, "a", Path.of(Indexed(0)))
        right = fail(1, "a", Path.of(Indexed(1)))
        assert len(combine(left, right).violations) == 2

    def test_and_operator(self):
        assert (SUCCESS & fail(1, "a")) == fail(1, "a")

    def test_aggregate_of_nothing_is_success(self):
        assert aggregate([]) == SUCCESS

    def test_prefixed_failure(self):
        result = fail(1, "a").prefixed(Indexed(5))
        assert result == fail(1, "a", Path.of(Indexed(5)))
        assert SUCCESS.prefixed(Indexed(5)) is SUCCESS


violations = st.builds(
    Violation,
    value=st.one_of(st.integers(), st.text(max_size=5), st.lists(st.integers(), max_size=3)),
    constraint=st.sampled_from(["a", "b", "c"]),
    path=st.lists(st.integers(min_value=0, max_value=3), max_size=2).map(
        lambda xs: Path.of(*(Indexed(x) for x in xs))
    ),
)

results = st.one_of(
    st.just(SUCCESS),
    st.lists(violations, min_size=1, max_size=4).map(failure),
)


class TestMonoidLaws:
    @given(results)
    def test_right_identity(self, a):
        assert combine(a, SUCCESS) == a

    @given(results)
    def test_left_identity(self, a):
        assert combine(SUCCESS, a) == a

    @given(results, results, results)
    def test_associativity(self, a, b, c):
        assert combine(combine(a, b), c) == combine(a, combine(b, c))

    @given(results, results)
    def test_commutative_outcome(self, a, b):
        assert combine(a, b) == combine(b, a)

    @given(st.lists(results, max_size=6))
    def test_aggregate_equals_pairwise_fold(self, rs):
        folded = SUCCESS
        for r in rs:
            folded = combine(folded, r)
        assert aggregate(rs) == folded
