"""
Tests for region extraction: seeds, growth, region lookup.
"""

import random

from linepuzzle.engine.boundary_builder import BoundaryBuilder
from linepuzzle.engine.region_extractor import (
    RegionExtractor,
    find_seeds,
    regions_complete,
    surrounding_region,
)
from linepuzzle.models.node_loop import Region


def board_of(graph):
    return BoundaryBuilder(graph.bounded_copy()).build()


def cells(cols, rows):
    return [(x + 0.5, y + 0.5) for y in range(rows - 1) for x in range(cols - 1)]


def group_cells(points, regions):
    """Partition points by the region they fall in (None is the remainder)."""
    groups = {}
    for p in points:
        groups.setdefault(id(surrounding_region(p, regions)), set()).add(p)
    return sorted(groups.values(), key=min)


# ============================================================================
# Seeds
# ============================================================================

class TestFindSeeds:

    def test_single_seed(self, grid3, split_path):
        graph, at = grid3
        seeds = find_seeds(split_path, board_of(graph))
        assert seeds == [[at[(1, 0)], at[(1, 1)], at[(1, 2)]]]

    def test_path_along_boundary_has_no_seed(self, grid3):
        graph, at = grid3
        path = [at[c] for c in [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2), "end"]]
        assert find_seeds(path, board_of(graph)) == []

    def test_two_seeds(self, grid):
        graph, at = grid(4, 3, start=(1, 0), end_from=(2, 0), end_pos=(2, -0.4))
        path = [at[c] for c in [(1, 0), (1, 1), (1, 2), (2, 2), (2, 1), (2, 0), "end"]]
        seeds = find_seeds(path, board_of(graph))
        assert seeds == [
            [at[(1, 0)], at[(1, 1)], at[(1, 2)]],
            [at[(2, 2)], at[(2, 1)], at[(2, 0)]],
        ]

    def test_chord_is_a_two_node_seed(self, grid):
        graph, at = grid(3, 2, start=(1, 0), end_from=(1, 1))
        path = [at[(1, 0)], at[(1, 1)], at["end"]]
        assert find_seeds(path, board_of(graph)) == [[at[(1, 0)], at[(1, 1)]]]

    def test_spur_from_interior_start(self, grid):
        graph, at = grid(3, 3, start=(1, 1))
        path = [at[c] for c in [(1, 1), (1, 2), (2, 2), "end"]]
        assert find_seeds(path, board_of(graph)) == []


# ============================================================================
# Extraction
# ============================================================================

class TestExtract:

    def test_split_in_two(self, grid3, split_path, rng):
        graph, _ = grid3
        regions = RegionExtractor(board_of(graph), graph, rng=rng).extract(split_path)

        assert len(regions) == 1
        assert regions_complete(regions)
        left, right = (0.5, 0.5), (1.5, 1.5)
        assert surrounding_region(left, regions) is not surrounding_region(right, regions)
        # cells on the same side share a region
        assert surrounding_region((0.5, 1.5), regions) is surrounding_region(left, regions)

    def test_region_keeps_its_seed(self, grid3, split_path, rng):
        graph, at = grid3
        region = RegionExtractor(board_of(graph), graph, rng=rng).extract(split_path)[0]
        assert region.seed() == [at[(1, 0)], at[(1, 1)], at[(1, 2)]]
        assert len(region.vertices) == 6

    def test_three_strips(self, grid):
        graph, at = grid(4, 3, start=(1, 0), end_from=(2, 0), end_pos=(2, -0.4))
        path = [at[c] for c in [(1, 0), (1, 1), (1, 2), (2, 2), (2, 1), (2, 0), "end"]]
        boundary = board_of(graph)

        # every tie-break order must give the same partition
        for seed in range(25):
            regions = RegionExtractor(boundary, graph, rng=random.Random(seed)).extract(path)
            assert len(regions) == 2
            assert regions_complete(regions)
            groups = group_cells(cells(4, 3), regions)
            assert groups == [
                {(0.5, 0.5), (0.5, 1.5)},
                {(1.5, 0.5), (1.5, 1.5)},
                {(2.5, 0.5), (2.5, 1.5)},
            ]

    def test_chord_region(self, grid, rng):
        graph, at = grid(3, 2, start=(1, 0), end_from=(1, 1))
        path = [at[(1, 0)], at[(1, 1)], at["end"]]
        regions = RegionExtractor(board_of(graph), graph, rng=rng).extract(path)

        assert len(regions) == 1
        assert regions_complete(regions)
        assert surrounding_region((0.5, 0.5), regions) is not surrounding_region((1.5, 0.5), regions)

    def test_no_seeds_no_regions(self, grid3, rng):
        graph, at = grid3
        path = [at[c] for c in [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2), "end"]]
        assert RegionExtractor(board_of(graph), graph, rng=rng).extract(path) == []

    def test_exhausted_retries_leave_region_open(self, grid3, split_path, rng):
        graph, _ = grid3
        extractor = RegionExtractor(board_of(graph), graph, rng=rng, max_attempts=0, max_passes=1)
        regions = extractor.extract(split_path)
        assert len(regions) == 1
        assert not regions_complete(regions)


# ============================================================================
# Region helpers
# ============================================================================

class TestRegionHelpers:

    def test_surrounding_region_ignores_open_regions(self, grid3):
        _, at = grid3
        open_region = Region([at[(0, 0)], at[(1, 0)], at[(1, 1)], at[(0, 1)]])
        assert surrounding_region((0.5, 0.5), [open_region]) is None

    def test_surrounding_region_closed(self, grid3):
        _, at = grid3
        square = Region([at[(0, 0)], at[(1, 0)], at[(1, 1)], at[(0, 1)], at[(0, 0)]])
        assert surrounding_region((0.5, 0.5), [square]) is square
        assert surrounding_region((1.5, 0.5), [square]) is None

    def test_reset_returns_to_seed(self, grid3):
        _, at = grid3
        region = Region([at[(1, 0)], at[(1, 1)]])
        region.nodes.extend([at[(0, 1)], at[(0, 0)]])
        region.reset()
        assert region.nodes == [at[(1, 0)], at[(1, 1)]]

    def test_duplicate_region_is_rejected(self, grid3, rng):
        graph, at = grid3
        loop = [at[(0, 0)], at[(1, 0)], at[(1, 1)], at[(0, 1)], at[(0, 0)]]
        regions = [Region(loop), Region(list(reversed(loop)))]
        extractor = RegionExtractor(board_of(graph), graph, rng=rng)
        assert extractor._is_new_face(0, regions, [])
        assert not extractor._is_new_face(1, regions, [])

    def test_region_swallowing_a_wall_is_rejected(self, grid3, rng):
        graph, at = grid3
        whole = Region([at[c] for c in [(0, 0), (2, 0), (2, 2), (0, 2), (0, 0)]])
        wall = [(at[(1, 0)], at[(1, 1)])]
        extractor = RegionExtractor(board_of(graph), graph, rng=rng)
        assert not extractor._is_new_face(0, [whole], wall)
