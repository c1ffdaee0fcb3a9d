# spatial_base.py
"""
Contracts shared by the spatial indexes.

Any index that stores points and answers single nearest-neighbour queries
implements SpatialBase, so the grid and the R-tree can be swapped freely.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, Protocol, TypeVar


class SpatialPoint(Protocol):
    """What an index needs from a point: per-axis coordinates and a metric."""

    def get(self, axis: int) -> float:
        ...

    def distance(self, other: "SpatialPoint") -> float:
        ...


P = TypeVar("P", bound=SpatialPoint)


class SpatialBase(ABC, Generic[P]):

    @abstractmethod
    def insert(self, new_point: P) -> None:
        """Store a point. Duplicates are kept."""

    @abstractmethod
    def nearest_neighbor(self, reference: P) -> Optional[P]:
        """
        Return the stored point closest to reference, or None when the
        index has nothing to offer. reference need not be stored.
        """
