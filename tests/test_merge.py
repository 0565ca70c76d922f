"""Tests for merge.py — fusing collinear edges."""

from __future__ import annotations

from jilattice.merge import merge_edges, merge_edges_3d
import itertools

from jilattice.models import Edge, Edge3D


class TestMergeEdges:
    def test_collinear_chain(self):
        edges = [Edge(1, 0, 2, 0), Edge(0, 0, 1, 0), Edge(2, 0, 3, 0)]
        assert merge_edges(edges) == [Edge(0, 0, 3, 0)]

    def test_reversed_input_is_oriented(self):
        edges = [Edge(1, 1, 0, 0), Edge(2, 2, 1, 1)]
        assert merge_edges(edges) == [Edge(0, 0, 2, 2)]

    def test_bend_is_kept(self):
        edges = [Edge(0, 0, 1, 0), Edge(1, 0, 1, 1)]
        assert merge_edges(edges) == [Edge(0, 0, 1, 0), Edge(1, 0, 1, 1)]

    def test_types_do_not_mix(self):
        edges = [Edge(0, 0, 1, 0, "primary"), Edge(1, 0, 2, 0, "auxiliary")]
        assert len(merge_edges(edges)) == 2

    def test_opposite_direction_does_not_fold_back(self):
        edges = [Edge(0, 0, 2, 0), Edge(2, 0, 1, 0)]
        merged = merge_edges(edges)
        assert Edge(0, 0, 2, 0) in merged
        assert len(merged) == 2

    def test_idempotent(self):
        edges = [
            Edge(0, 0, 1, 0), Edge(1, 0, 2, 0), Edge(0, 0, 0, 1),
            Edge(0, 1, 0, 2), Edge(1, 0, 1, 1, "custom"),
        ]
        once = merge_edges(edges)
        assert merge_edges(once) == once

    def test_input_order_does_not_matter(self):
        # Two overlapping runs share the start point (1, 0).
        edges = [Edge(0, 0, 1, 0), Edge(1, 0, 2, 0), Edge(1, 0, 3, 0)]
        expected = merge_edges(edges)
        assert expected == [Edge(0, 0, 2, 0), Edge(1, 0, 3, 0)]
        for ordering in itertools.permutations(edges):
            assert merge_edges(ordering) == expected
            assert merge_edges([e.reversed() for e in ordering]) == expected

    def test_empty(self):
        assert merge_edges([]) == []

    def test_covers_same_points(self):
        edges = [Edge(0, 0, 40, 0), Edge(40, 0, 80, 0), Edge(0, 0, 0, -40)]
        merged = merge_edges(edges)
        assert Edge(0, -40, 0, 0) in merged
        assert Edge(0, 0, 80, 0) in merged
        assert len(merged) == 2


class TestMergeEdges3D:
    def test_collinear_chain(self):
        edges = [Edge3D(0, 0, 0, 1, 1, 1), Edge3D(1, 1, 1, 2, 2, 2)]
        assert merge_edges_3d(edges) == [Edge3D(0, 0, 0, 2, 2, 2)]

    def test_out_of_plane_bend_is_kept(self):
        # Collinear in the xy-projection but bending in z.
        edges = [Edge3D(0, 0, 0, 1, 0, 0), Edge3D(1, 0, 0, 2, 0, 1)]
        assert len(merge_edges_3d(edges)) == 2

    def test_idempotent(self):
        edges = [
            Edge3D(0, 0, 0, 40, 0, 0), Edge3D(40, 0, 0, 80, 0, 0),
            Edge3D(0, 0, 0, 0, 0, 40),
        ]
        once = merge_edges_3d(edges)
        assert len(once) == 2
        assert merge_edges_3d(once) == once

    def test_input_order_does_not_matter(self):
        edges = [
            Edge3D(0, 0, 0, 0, 0, 1),
            Edge3D(0, 0, 1, 0, 0, 2),
            Edge3D(0, 0, 1, 0, 0, 3),
        ]
        expected = merge_edges_3d(edges)
        assert expected == [Edge3D(0, 0, 0, 0, 0, 2), Edge3D(0, 0, 1, 0, 0, 3)]
        for ordering in itertools.permutations(edges):
            assert merge_edges_3d(ordering) == expected
