"""Tests for the generic edge-typed interval."""

from __future__ import annotations

import dataclasses

import pytest

from recurring.domain.interval import Edge, Interval, InvalidIntervalError

C = Edge.CLOSED
O = Edge.OPEN  # noqa: E741


class TestEdge:
    def test_members(self) -> None:
        assert {e.value for e in Edge} == {"closed", "open"}

    def test_parses_from_string(self) -> None:
        assert Edge("closed") is Edge.CLOSED
        assert Edge("open") is Edge.OPEN
        assert Edge.OPEN == "open"


class TestConstruction:
    def test_from_larger_than_till_raises(self) -> None:
        with pytest.raises(InvalidIntervalError, match="invalid interval"):
            Interval(5, 4, C, C)

    def test_error_names_both_bounds(self) -> None:
        with pytest.raises(InvalidIntervalError, match="from 5 till 4"):
            Interval.open_interval(5, 4)

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Interval.closed_interval(2, 1)

    @pytest.mark.parametrize("edges", [(C, C), (C, O), (O, C), (O, O)])
    def test_equal_bounds_allowed(self, edges: tuple[Edge, Edge]) -> None:
        iv = Interval(3, 3, *edges)
        assert iv.start == iv.end == 3

    def test_closed_interval(self) -> None:
        iv = Interval.closed_interval(1, 2)
        assert iv == Interval(1, 2, C, C)
        assert iv.is_closed()
        assert not iv.is_open()

    def test_open_interval(self) -> None:
        iv = Interval.open_interval(1, 2)
        assert iv == Interval(1, 2, O, O)
        assert iv.is_open()
        assert not iv.is_closed()

    def test_half_open_is_neither(self) -> None:
        iv = Interval(1, 2, C, O)
        assert not iv.is_open()
        assert not iv.is_closed()
        assert iv.is_start_closed()
        assert iv.is_end_open()
        assert not iv.is_start_open()
        assert not iv.is_end_closed()

    def test_frozen(self) -> None:
        iv = Interval.closed_interval(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            iv.start = 0  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert len({Interval.closed_interval(1, 2), Interval.closed_interval(1, 2)}) == 1

    def test_equality_includes_edges(self) -> None:
        assert Interval.closed_interval(1, 2) != Interval.open_interval(1, 2)


class TestFromOptional:
    def test_both_present(self) -> None:
        assert Interval.from_optional(1, 2, C, O) == Interval(1, 2, C, O)

    @pytest.mark.parametrize(("start", "end"), [(None, 2), (1, None), (None, None)])
    def test_missing_side_is_none(self, start: int | None, end: int | None) -> None:
        assert Interval.from_optional(start, end, C, C) is None

    def test_closed_and_open_variants(self) -> None:
        assert Interval.closed_from_optional(1, 2) == Interval.closed_interval(1, 2)
        assert Interval.open_from_optional(1, 2) == Interval.open_interval(1, 2)
        assert Interval.closed_from_optional(None, 2) is None
        assert Interval.open_from_optional(1, None) is None

    def test_still_validates_order(self) -> None:
        with pytest.raises(InvalidIntervalError):
            Interval.from_optional(2, 1, C, C)


class TestDegenerate:
    @pytest.mark.parametrize("edges", [(C, O), (O, C), (O, O)])
    def test_empty(self, edges: tuple[Edge, Edge]) -> None:
        iv = Interval(7, 7, *edges)
        assert iv.is_empty()
        assert not iv.is_point_interval()

    def test_point(self) -> None:
        iv = Interval.closed_interval(7, 7)
        assert iv.is_point_interval()
        assert not iv.is_empty()

    @pytest.mark.parametrize("edges", [(C, C), (C, O), (O, C), (O, O)])
    def test_non_degenerate_is_neither(self, edges: tuple[Edge, Edge]) -> None:
        iv = Interval(1, 2, *edges)
        assert not iv.is_empty()
        assert not iv.is_point_interval()


class TestContains:
    @pytest.mark.parametrize("edges", [(C, C), (C, O), (O, C), (O, O)])
    def test_reflexive(self, edges: tuple[Edge, Edge]) -> None:
        iv = Interval(1, 10, *edges)
        assert iv.contains(iv)

    def test_strictly_inside(self) -> None:
        assert Interval.open_interval(0, 10).contains(Interval.closed_interval(2, 3))

    def test_outside(self) -> None:
        assert not Interval.closed_interval(0, 10).contains(Interval.closed_interval(5, 11))
        assert not Interval.closed_interval(0, 10).contains(Interval.closed_interval(-1, 5))

    def test_shared_start_requires_matching_edge(self) -> None:
        outer = Interval(0, 10, C, C)
        assert outer.contains(Interval(0, 5, C, C))
        assert not outer.contains(Interval(0, 5, O, C))

    def test_shared_end_requires_matching_edge(self) -> None:
        outer = Interval(0, 10, C, O)
        assert outer.contains(Interval(5, 10, C, O))
        assert not outer.contains(Interval(5, 10, C, C))

    def test_closed_does_not_contain_open_with_same_bounds(self) -> None:
        assert not Interval.closed_interval(0, 10).contains(Interval.open_interval(0, 10))

    def test_end_at_open_upper_bound(self) -> None:
        valid = Interval(0, 24, C, O)
        assert not valid.contains(Interval.closed_interval(24, 25))


class TestIntersects:
    def test_contained(self) -> None:
        assert Interval.closed_interval(0, 10).intersects(Interval.closed_interval(2, 3))

    def test_other_straddles_self(self) -> None:
        assert Interval.closed_interval(2, 3).intersects(Interval.closed_interval(0, 10))

    def test_partial_overlap(self) -> None:
        a = Interval.closed_interval(0, 5)
        b = Interval.closed_interval(3, 8)
        assert a.intersects(b)
        assert b.intersects(a)

    def test_disjoint(self) -> None:
        a = Interval.closed_interval(0, 2)
        b = Interval.closed_interval(3, 4)
        assert not a.intersects(b)
        assert not b.intersects(a)

    def test_touching_closed_edges(self) -> None:
        a = Interval.closed_interval(0, 5)
        b = Interval.closed_interval(5, 8)
        assert a.intersects(b)
        assert b.intersects(a)

    @pytest.mark.parametrize(("a_end", "b_start"), [(O, C), (C, O), (O, O)])
    def test_touching_with_open_edge(self, a_end: Edge, b_start: Edge) -> None:
        a = Interval(0, 5, C, a_end)
        b = Interval(5, 8, b_start, C)
        assert not a.intersects(b)
        assert not b.intersects(a)

    def test_empty_inside_shares_nothing(self) -> None:
        outer = Interval.closed_interval(0, 10)
        empty = Interval.open_interval(3, 3)
        assert outer.contains(empty)
        assert not outer.intersects(empty)
        assert not empty.intersects(outer)

    @pytest.mark.parametrize("edges", [(C, O), (O, C), (O, O)])
    def test_empty_never_intersects_itself(self, edges: tuple[Edge, Edge]) -> None:
        empty = Interval(5, 5, *edges)
        assert not empty.intersects(empty)
        assert not empty.intersects(Interval.open_interval(5, 5))

    def test_point_intersects_itself(self) -> None:
        point = Interval.closed_interval(5, 5)
        assert point.intersects(point)

    def test_same_bounds_different_edges(self) -> None:
        a = Interval.closed_interval(0, 10)
        b = Interval.open_interval(0, 10)
        assert a.intersects(b)
        assert b.intersects(a)


class TestDuration:
    def test_difference_of_bounds(self) -> None:
        assert Interval.closed_interval(3, 10).duration() == 7

    def test_zero_iff_degenerate(self) -> None:
        assert Interval.open_interval(4, 4).duration() == 0
        assert Interval.closed_interval(4, 5).duration() != 0


class TestStr:
    def test_notation(self) -> None:
        assert str(Interval(1, 2, C, O)) == "[1, 2)"
        assert str(Interval(1, 2, O, C)) == "(1, 2]"
