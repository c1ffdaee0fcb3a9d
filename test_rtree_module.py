# test_rtree_module.py
"""
The R-tree index honours the same contract as the grid and serves as an
exact reference for it.
"""

import numpy as np
import pytest

from point_module import Point
from rtree_module import RTreeSpatial
from spatial_base import SpatialBase
from spatial_index import BasicSpatial, GridConfig


def test_both_indexes_implement_the_contract():
    assert isinstance(RTreeSpatial(), SpatialBase)
    assert isinstance(BasicSpatial(), SpatialBase)


def test_contract_cannot_be_instantiated():
    with pytest.raises(TypeError):
        SpatialBase()


def test_empty_returns_none():
    assert RTreeSpatial().nearest_neighbor(Point([1, 1])) is None


def test_nearest_and_duplicates():
    spatial = RTreeSpatial()
    for c in ([5, 5], [15, 5], [995, 995], [5, 5]):
        spatial.insert(Point(c))
    assert len(spatial) == 4
    assert spatial.nearest_neighbor(Point([6, 6])) == Point([5, 5])
    assert spatial.nearest_neighbor(Point([1001, 1001])) == Point([995, 995])


def test_no_domain_bound():
    spatial = RTreeSpatial()
    spatial.insert(Point([-5000, 20000]))
    spatial.insert(Point([0, 0]))
    assert spatial.nearest_neighbor(Point([-4000, 19000])) == Point([-5000, 20000])


@pytest.mark.parametrize("make_index", [
    RTreeSpatial,
    lambda: BasicSpatial(GridConfig(bucket_width=10, domain_max=1000)),
])
def test_indexes_are_interchangeable(make_index):
    spatial = make_index()
    rng = np.random.default_rng(3)
    # one point per bucket centre, so the grid answer is exact as well
    centres = [Point([10 * i + 5, 10 * j + 5]) for i in range(10) for j in range(10)]
    for p in centres:
        spatial.insert(p)
    for q in rng.uniform(0, 100, size=(100, 2)):
        q = Point(q)
        best = min(p.distance(q) for p in centres)
        assert spatial.nearest_neighbor(q).distance(q) == pytest.approx(best)
