# spatial_index.py

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from config import BUCKET_WIDTH, DOMAIN_MAX, FULL_RING_SCAN
from spatial_base import SpatialBase, P


@dataclass(frozen=True)
class GridConfig:
    """
    Resolution and extent of a BasicSpatial grid.

    Parameters
    ----------
    bucket_width : float
        Side of one bucket along each axis. Must be > 0.
    domain_max : float
        Upper coordinate bound; the grid covers [0, domain_max] on both axes.
        Must be >= 0.
    full_ring : bool
        Scan all four sides of every search ring. False keeps only the top
        and bottom rows, which misses points lying beside the query.
    """
    bucket_width: float = BUCKET_WIDTH
    domain_max: float = DOMAIN_MAX
    full_ring: bool = FULL_RING_SCAN

    def __post_init__(self):
        # NaN fails both checks
        if not (self.bucket_width > 0 and math.isfinite(self.bucket_width)):
            raise ValueError(f"bucket_width must be positive and finite, got {self.bucket_width}")
        if not (self.domain_max >= 0 and math.isfinite(self.domain_max)):
            raise ValueError(f"domain_max must be non-negative and finite, got {self.domain_max}")
        if not math.isfinite(self.domain_max / self.bucket_width):
            raise ValueError(f"domain_max / bucket_width overflows: {self.domain_max} / {self.bucket_width}")

    @property
    def side_length(self):
        return math.floor(self.domain_max / self.bucket_width) + 1


class BasicSpatial(SpatialBase[P]):
    """
    Uniform bucket grid with expanding-ring nearest neighbour search.

    Points are grouped into a side x side matrix of buckets, side being
    floor(domain_max / bucket_width) + 1. A query starts at the bucket its
    own coordinates fall into and scans square rings of buckets around it,
    one bucket wider each step, until a point turns up; one more ring is then
    scanned to catch closer points sitting just outside the first hit's ring.

    The result is approximate: a point two rings out can still be closer
    than a hit in a ring corner. Query time depends heavily on bucket_width
    relative to point density. With 10000 uniform points in [0, 1000]^2 a
    width around 10 is fastest; sparser data wants wider buckets.

    Coordinates outside [0, domain_max] are clamped into the boundary
    buckets, both on insert and for the query's home bucket.

    Not thread-safe for inserts. Concurrent nearest_neighbor calls are fine
    as long as nothing is being inserted.
    """

    def __init__(self, grid_config: Optional[GridConfig] = None):
        self.config = grid_config if grid_config is not None else GridConfig()
        self.side = self.config.side_length
        self.last = self.side - 1
        # flat storage, bucket (x, y) lives at x * side + y
        self.grid: List[List[P]] = [[] for _ in range(self.side * self.side)]
        self.count = 0

    def __len__(self):
        return self.count

    def quantize(self, coord) -> int:
        """Bucket index along one axis, unclamped."""
        return math.floor(coord / self.config.bucket_width)

    def _clamp(self, index):
        return min(max(index, 0), self.last)

    def _key(self, bx, by):
        return bx * self.side + by

    def bucket_index(self, point: P) -> Tuple[int, int]:
        """Grid cell a point is stored in (or a query starts from)."""
        return self._axis_index(point.get(0)), self._axis_index(point.get(1))

    def _axis_index(self, coord):
        # clamp the coordinate first so huge values cannot overflow the division
        coord = min(max(coord, 0), self.config.domain_max)
        return self._clamp(self.quantize(coord))

    def bucket(self, bx, by) -> Tuple[P, ...]:
        """Points stored in bucket (bx, by), in insertion order."""
        if not (0 <= bx <= self.last and 0 <= by <= self.last):
            raise IndexError(f"bucket ({bx}, {by}) outside a {self.side}x{self.side} grid")
        return tuple(self.grid[self._key(bx, by)])

    def insert(self, new_point: P) -> None:
        bx, by = self.bucket_index(new_point)
        self.grid[self._key(bx, by)].append(new_point)
        self.count += 1

    def nearest_neighbor(self, reference: P) -> Optional[P]:
        x, y = self.bucket_index(reference)

        cur_max_x, cur_max_y = x, y
        cur_min_x, cur_min_y = x, y

        nearest = None
        dist = math.inf

        while nearest is None:
            if (cur_max_x > self.last and cur_max_y > self.last
                    and cur_min_x < 0 and cur_min_y < 0):
                return None

            nearest, dist = self._scan_ring(cur_max_x, cur_max_y, cur_min_x, cur_min_y,
                                            reference, nearest, dist)
            cur_max_x += 1
            cur_max_y += 1
            cur_min_x -= 1
            cur_min_y -= 1

            if nearest is not None:
                nearest, dist = self._scan_ring(cur_max_x, cur_max_y, cur_min_x, cur_min_y,
                                                reference, nearest, dist)
        return nearest

    def _scan_ring(self, max_x, max_y, min_x, min_y, reference, nearest, dist):
        """
        Visit the buckets on the border of a ring, clamped to the grid.

        Order: top row (y = max_y) right to left, bottom row (y = min_y)
        right to left, then with full_ring the right column (x = max_x) and
        the left column (x = min_x), each top to bottom excluding the corners.
        Ties keep whichever point was seen first.
        """
        max_x = min(max_x, self.last)
        max_y = min(max_y, self.last)
        min_x = max(min_x, 0)
        min_y = max(min_y, 0)

        # horizontal
        for row in (max_y, min_y):
            for cur_x in range(max_x, min_x - 1, -1):
                nearest, dist = self._scan_bucket(cur_x, row, reference, nearest, dist)

        if not self.config.full_ring:
            return nearest, dist

        # vertical
        for col in (max_x, min_x):
            for cur_y in range(max_y - 1, min_y, -1):
                nearest, dist = self._scan_bucket(col, cur_y, reference, nearest, dist)

        return nearest, dist

    def _scan_bucket(self, bx, by, reference, nearest, dist):
        for candidate in self.grid[self._key(bx, by)]:
            d = candidate.distance(reference)
            if nearest is None or d < dist:
                nearest = candidate
                dist = d
        return nearest, dist

    def stats(self):
        """Occupancy summary, handy for picking a bucket width."""
        loads = [len(b) for b in self.grid]
        occupied = sum(1 for n in loads if n)
        return {
            'points': self.count,
            'buckets': len(loads),
            'occupied_buckets': occupied,
            'max_bucket_load': max(loads) if loads else 0,
            'mean_occupied_load': self.count / occupied if occupied else 0.0,
        }
