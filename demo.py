# demo.py

import numpy as np
from point_module import Point
from spatial_index import BasicSpatial, GridConfig


def describe_query(spatial, q):
    found = spatial.nearest_neighbor(Point(q))
    if found is None:
        return f"query {q}: nothing found"
    return (f"query {q}: home bucket {spatial.bucket_index(Point(q))}, nearest {found}, "
            f"distance {found.distance(Point(q)):.2f}")


def main():
    spatial = BasicSpatial(GridConfig(bucket_width=10, domain_max=1000))
    print(describe_query(spatial, (6, 6)))

    for c in [(5, 5), (15, 5), (995, 995), (535, 505)]:
        spatial.insert(Point(c))

    for q in [(6, 6), (1001, 1001), (505, 505), (-40, 700)]:
        print(describe_query(spatial, q))

    legacy = BasicSpatial(GridConfig(bucket_width=10, domain_max=1000, full_ring=False))
    legacy.insert(Point((535, 505)))
    print("top/bottom-only scan:", describe_query(legacy, (505, 505)))

    rng = np.random.default_rng(0)
    for c in rng.uniform(0, 1000, size=(10000, 2)):
        spatial.insert(Point(c))
    print(spatial.stats())


if __name__ == "__main__":
    main()
