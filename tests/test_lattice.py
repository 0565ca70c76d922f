"""Tests for lattice.py — planar just intonation lattices."""

from __future__ import annotations

import math

import pytest

from jilattice import (
    LatticeConfig,
    align,
    kraig_grady_9,
    merge_edges,
    prime_ring_72,
    scott_dakota_24,
    span_lattice,
)
from jilattice.models import Edge, Vertex


# ═══════════════════════════════════════════════════════════════════
# Fixtures
# ═══════════════════════════════════════════════════════════════════


@pytest.fixture
def seven_limit_box():
    """1, 5/4, 7/4 times 1, 3/2, 9/8 with the equave written out on the root."""
    return [
        [1],
        [-2, 0, 1],
        [-2, 0, 0, 1],
        [-1, 1],
        [-3, 1, 1],
        [-4, 1, 0, 1],
        [-3, 2],
        [-5, 2, 1],
        [-5, 2, 0, 1],
    ]


# ═══════════════════════════════════════════════════════════════════
# Kraig Grady coordinates
# ═══════════════════════════════════════════════════════════════════


class TestKraigGrady:
    def test_seven_limit_box(self, seven_limit_box):
        vertices, edges = span_lattice(seven_limit_box, kraig_grady_9())
        assert vertices == [
            Vertex(0, 0, 0),
            Vertex(0, -40, 1),
            Vertex(13, -11, 2),
            Vertex(40, 0, 3),
            Vertex(40, -40, 4),
            Vertex(53, -11, 5),
            Vertex(80, 0, 6),
            Vertex(80, -40, 7),
            Vertex(93, -11, 8),
        ]
        assert edges == [
            Edge(0, 0, 0, -40),
            Edge(0, 0, 13, -11),
            Edge(0, 0, 40, 0),
            Edge(0, -40, 40, -40),
            Edge(13, -11, 53, -11),
            Edge(40, 0, 40, -40),
            Edge(40, 0, 53, -11),
            Edge(40, 0, 80, 0),
            Edge(40, -40, 80, -40),
            Edge(53, -11, 93, -11),
            Edge(80, 0, 80, -40),
            Edge(80, 0, 93, -11),
        ]

    def test_straight_line_at_max_distance_2(self):
        config = kraig_grady_9()
        config.max_distance = 2
        vertices, edges = span_lattice([[1], [2, -1], [-3, 2]], config)
        assert vertices == [
            Vertex(0, 0, 0),
            Vertex(-40, 0, 1),
            Vertex(80, 0, 2),
            Vertex(40, 0),
        ]
        assert edges == [
            Edge(0, 0, -40, 0, "primary"),
            Edge(0, 0, 40, 0, "auxiliary"),
            Edge(80, 0, 40, 0, "auxiliary"),
        ]

    def test_does_not_over_connect_at_max_distance_2(self):
        config = kraig_grady_9()
        config.max_distance = 2
        vertices, edges = span_lattice([[1], [0, -1], [0, 1], [0, 0, 1]], config)
        assert vertices == [
            Vertex(0, 0, 0),
            Vertex(-40, 0, 1),
            Vertex(40, 0, 2),
            Vertex(0, -40, 3),
            Vertex(-40, -40),
            Vertex(40, -40),
        ]
        assert edges == [
            Edge(0, 0, -40, 0, "primary"),
            Edge(0, 0, 40, 0, "primary"),
            Edge(0, 0, 0, -40, "primary"),
            Edge(-40, 0, -40, -40, "auxiliary"),
            Edge(40, 0, 40, -40, "auxiliary"),
            Edge(0, -40, -40, -40, "auxiliary"),
            Edge(0, -40, 40, -40, "auxiliary"),
        ]

    def test_three_as_equave(self):
        vertices, edges = span_lattice([[0, 1], [1], [0, 0, 1]], kraig_grady_9(1))
        assert vertices == [
            Vertex(0, 0, 0),
            Vertex(-23, -45, 1),
            Vertex(0, -40, 2),
        ]
        assert edges == [
            Edge(0, 0, -23, -45),
            Edge(0, 0, 0, -40),
        ]

    def test_merged_edges(self, seven_limit_box):
        config = kraig_grady_9()
        plain = span_lattice(seven_limit_box, config)
        config.merge_edges = True
        merged = span_lattice(seven_limit_box, config)
        assert merged.metadata["merged"] is True
        assert merged.vertices == plain.vertices
        assert merged.edges == merge_edges(plain.edges)
        # Three rows of fifths collapse into one edge each.
        assert Edge(0, 0, 80, 0) in merged.edges
        assert len(merged.edges) == 9

    def test_graph_validates(self, seven_limit_box):
        graph = span_lattice(seven_limit_box, kraig_grady_9())
        assert graph.validate(strict=True) == []


# ═══════════════════════════════════════════════════════════════════
# Prime ring coordinates
# ═══════════════════════════════════════════════════════════════════


class TestScottDakota:
    def test_abstract_five_limit(self):
        monzos = [[], [0, 1], [0, 2], [0, 3], [0, 0, 1], [0, 1, 1], [0, 2, 1]]
        config = scott_dakota_24()
        config.edge_monzos = [[0, -2, -1]]
        vertices, edges = span_lattice(monzos, config)
        assert vertices == [
            Vertex(0, 0, 0),
            Vertex(31, 9, 1),
            Vertex(62, 18, 2),
            Vertex(93, 27, 3),
            Vertex(26, -14, 4),
            Vertex(57, -5, 5),
            Vertex(88, 4, 6),
        ]
        assert edges == [
            Edge(0, 0, 31, 9),
            Edge(0, 0, 26, -14),
            Edge(31, 9, 62, 18),
            Edge(31, 9, 57, -5),
            Edge(62, 18, 93, 27),
            Edge(62, 18, 88, 4),
            Edge(26, -14, 57, -5),
            Edge(57, -5, 88, 4),
            Edge(0, 0, 88, 4, "custom"),
        ]

    def test_max_distance_zero(self):
        config = scott_dakota_24()
        config.max_distance = 0
        vertices, edges = span_lattice([[], [0, 1], [0, 0, 1]], config)
        assert vertices == [Vertex(0, 0, 0), Vertex(31, 9, 1), Vertex(26, -14, 2)]
        assert edges == []


class TestPrimeRing72:
    def test_horizontally_as_unique_as_possible(self):
        assert len(set(prime_ring_72().horizontal_coordinates)) == 35

    def test_vertically_as_unique_as_possible(self):
        assert len(set(prime_ring_72().vertical_coordinates)) == 35

    def test_combination_product_set_at_max_distance_2(self):
        config = prime_ring_72()
        config.max_distance = 2
        monzos = [
            [-1, -1, 0, 1],
            [-2, 0, 1],
            [-3, -1, 1, 1],
            [0, -1, 1],
            [-2, 0, 0, 1],
            [1],
        ]
        vertices, edges = span_lattice(monzos, config)
        assert vertices == [
            Vertex(-45, 16, 0),
            Vertex(53, -33, 1),
            Vertex(8, -17, 2),
            Vertex(-16, -51, 3),
            Vertex(24, 34, 4),
            Vertex(0, 0, 5),
            Vertex(-69, -18),
            Vertex(77, 1),
        ]
        assert edges == [
            Edge(-45, 16, 8, -17, "primary"),
            Edge(-45, 16, 24, 34, "primary"),
            Edge(-45, 16, -69, -18, "auxiliary"),
            Edge(53, -33, -16, -51, "primary"),
            Edge(53, -33, 0, 0, "primary"),
            Edge(53, -33, 77, 1, "auxiliary"),
            Edge(8, -17, -16, -51, "primary"),
            Edge(8, -17, 77, 1, "auxiliary"),
            Edge(-16, -51, -69, -18, "auxiliary"),
            Edge(24, 34, 0, 0, "primary"),
            Edge(24, 34, 77, 1, "auxiliary"),
            Edge(0, 0, -69, -18, "auxiliary"),
        ]


class TestConfig:
    def test_presets_are_fresh(self):
        a = kraig_grady_9()
        a.horizontal_coordinates[1] = 1000
        assert kraig_grady_9().horizontal_coordinates[1] == 40

    def test_unsupported_distance(self):
        config = kraig_grady_9()
        config.max_distance = 3
        with pytest.raises(ValueError):
            span_lattice([[0], [0, 1]], config)


# ═══════════════════════════════════════════════════════════════════
# Alignment
# ═══════════════════════════════════════════════════════════════════


class TestAlign:
    def test_rotates_prime_onto_x_axis(self):
        config = LatticeConfig([0, 0, 3, 1], [0, 0, 4, 0])
        align(config, 2)
        assert config.horizontal_coordinates[2] == pytest.approx(5)
        assert config.vertical_coordinates[2] == pytest.approx(0, abs=1e-12)
        # Rotation keeps lengths.
        x, y = config.horizontal_coordinates[3], config.vertical_coordinates[3]
        assert math.hypot(x, y) == pytest.approx(1)

    def test_already_horizontal_is_unchanged(self):
        config = kraig_grady_9()
        xs = list(config.horizontal_coordinates)
        ys = list(config.vertical_coordinates)
        align(config, 1)
        assert config.horizontal_coordinates == pytest.approx(xs)
        assert config.vertical_coordinates == pytest.approx(ys)

    def test_tonnetz(self):
        config = LatticeConfig([0, 1, 0], [0, 0, -1])
        align(config, 1, 2)
        assert config.horizontal_coordinates[1] == pytest.approx(1)
        assert config.vertical_coordinates[1] == pytest.approx(0, abs=1e-12)
        assert config.horizontal_coordinates[2] == pytest.approx(0.5)
        assert config.vertical_coordinates[2] == pytest.approx(-math.sqrt(3) / 2)

    def test_tonnetz_keeps_length(self):
        config = kraig_grady_9()
        align(config, 1, 2)
        x, y = config.horizontal_coordinates[2], config.vertical_coordinates[2]
        assert math.hypot(x, y) == pytest.approx(40)
        assert math.degrees(math.atan2(-y, x)) == pytest.approx(60)

    def test_zero_length_prime(self):
        with pytest.raises(ValueError, match="no screen displacement"):
            align(kraig_grady_9(), 0)

    def test_collinear_primes(self):
        config = LatticeConfig([0, 1, 2], [0, 0, 0])
        with pytest.raises(ValueError, match="collinear"):
            align(config, 1, 2)
