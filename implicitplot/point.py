"""Two-dimensional points that can be chained into polylines."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Point:
    """A point in the plane with optional links to its neighbours on a curve."""

    x: float = 0.0
    y: float = 0.0
    previous: Optional["Point"] = field(default=None, repr=False)
    next: Optional["Point"] = field(default=None, repr=False)

    def dist(self, other: Optional["Point"]) -> float:
        """Euclidean distance to ``other``, or -1 when there is no other point."""
        if other is None:
            return -1.0
        return math.hypot(other.x - self.x, other.y - self.y)