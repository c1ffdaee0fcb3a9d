import rtree.index as index

from spatial_base import SpatialBase, P


class RTreeSpatial(SpatialBase[P]):
    """
    Drop-in replacement for the grid-based spatial index.
    Stores each point as a degenerate bounding box in an R-tree, so the
    nearest neighbour is exact and no domain bound is needed.
    """

    def __init__(self):
        # Rtree configuration
        p = index.Property()
        p.dimension = 2
        self.idx = index.Index(properties=p)

        # Keep mapping from Rtree IDs -> point objects
        self.points = {}
        self.next_id = 0

    def __len__(self):
        return len(self.points)

    @staticmethod
    def _bbox(point):
        x, y = float(point.get(0)), float(point.get(1))
        # Rtree requires bounding boxes (min coords, max coords)
        return (x, y, x, y)

    def insert(self, new_point: P) -> None:
        pid = self.next_id
        self.next_id += 1

        self.idx.insert(pid, self._bbox(new_point))
        self.points[pid] = new_point

    def nearest_neighbor(self, reference: P):
        """
        Return the stored point closest to reference, None if empty.
        On ties libspatialindex may report several ids; the lowest one
        (earliest inserted) wins.
        """
        if not self.points:
            return None
        results = list(self.idx.nearest(self._bbox(reference), 1))
        return self.points[min(results)]
