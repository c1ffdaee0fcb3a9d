# point_module.py

import numpy as np

class Point:
    def __init__(self, x):
        """
        Initialize a point from its coordinates.

        Parameters
        ----------
        x : array-like
            Coordinates [x, y]. Stored as a read-only float array so the
            point behaves like a value once it is inside an index.
        """
        coords = np.array(x, dtype=float)
        if coords.shape != (2,):
            raise ValueError(f"Point expects 2 coordinates, got shape {coords.shape}")
        if not np.all(np.isfinite(coords)):
            raise ValueError(f"Point coordinates must be finite, got {coords}")
        coords.setflags(write=False)
        self.x = coords

    def get(self, axis):
        """Coordinate along axis 0 (x) or 1 (y)."""
        if axis not in (0, 1):
            raise IndexError(f"axis must be 0 or 1, got {axis}")
        return float(self.x[axis])

    def distance(self, other):
        return float(np.linalg.norm(self.x - other.x))

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return bool(np.array_equal(self.x, other.x))

    def __hash__(self):
        return hash((float(self.x[0]), float(self.x[1])))

    def __repr__(self):
        return f"Point({self.x[0]:g}, {self.x[1]:g})"
