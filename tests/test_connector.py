"""Tests for connector.py — unit-step connections and distance-2 bridging."""

from __future__ import annotations

import pytest

from jilattice.connector import connect, taxicab_distance
from jilattice.models import Connection
from jilattice.vectors import vectors_equal


def _pairs(result):
    return [(c.index1, c.index2, c.type) for c in result.connections]


class TestTaxicabDistance:
    def test_integer_steps(self):
        assert taxicab_distance([1, -1], [0, 1]) == 3

    def test_pads_shorter(self):
        assert taxicab_distance([1], [1, 0, 2]) == 2

    def test_fractional_difference(self):
        assert taxicab_distance([0.5], [0]) is None

    def test_near_integer_is_accepted(self):
        assert taxicab_distance([1 + 1e-9], [0]) == 1


class TestConnect:
    def test_unit_steps(self):
        result = connect([[0, 0], [1, 0], [1, 1], [3, 1]], 1)
        assert _pairs(result) == [(0, 1, "primary"), (1, 2, "primary")]
        assert result.auxiliary_monzos == []

    def test_max_distance_zero(self):
        result = connect([[0], [1]], 0)
        assert result.connections == []
        assert result.auxiliary_monzos == []

    def test_unsupported_distance(self):
        with pytest.raises(ValueError, match="max distance"):
            connect([[0], [1]], 3)

    def test_straight_bridge(self):
        result = connect([[0], [-1], [2]], 2)
        assert result.auxiliary_monzos == [[1]]
        assert _pairs(result) == [
            (0, 1, "primary"),
            (0, 3, "auxiliary"),
            (2, 3, "auxiliary"),
        ]

    def test_square_bridge_adds_both_corners(self):
        result = connect([[0, 0], [1, 1]], 2)
        # Corners are built from the second monzo.
        assert result.auxiliary_monzos == [[0, 1], [1, 0]]
        assert all(c.type == "auxiliary" for c in result.connections)
        assert len(result.connections) == 4

    def test_bridge_not_duplicated(self):
        # Both pairs share the same corner.
        result = connect([[0, 0], [1, 1], [2, 0]], 2)
        for i, a in enumerate(result.auxiliary_monzos):
            for b in result.auxiliary_monzos[i + 1:]:
                assert not vectors_equal(a, b)

    def test_existing_midpoint_is_reused(self):
        result = connect([[0], [2], [1]], 2)
        assert result.auxiliary_monzos == []
        assert _pairs(result) == [(0, 2, "primary"), (1, 2, "primary")]

    def test_other_shapes_not_bridged(self):
        result = connect([[0, 0, 0], [0, 0, 0, 0.5]], 2)
        assert result.auxiliary_monzos == []
        assert result.connections == []

    def test_connections_are_unit_steps(self):
        monzos = [[-1, -1, 0, 1], [-2, 0, 1], [-3, -1, 1, 1], [0, -1, 1], [-2, 0, 0, 1], [1]]
        result = connect(monzos, 2)
        combined = monzos + result.auxiliary_monzos
        for c in result.connections:
            assert isinstance(c, Connection)
            assert c.index1 < c.index2
            assert taxicab_distance(combined[c.index1], combined[c.index2]) == 1
            expected = "primary" if c.index2 < len(monzos) else "auxiliary"
            assert c.type == expected
