"""Spatial subdivision of curve samples and linking of samples into polylines."""

from __future__ import annotations

import math
from typing import List, Optional, Protocol, Sequence, Tuple

from .point import Point


class _Evaluable(Protocol):
    def evaluate(self, x: float, y: float) -> float: ...


def nearest_neighbour(
    point: Point, points: Sequence[Point], seen: Sequence[bool]
) -> Tuple[Optional[int], float]:
    """Index and distance of the closest point not yet seen.

    Returns ``(None, math.inf)`` when every point has been seen.
    """
    best_index: Optional[int] = None
    best_distance = math.inf
    for index, (candidate, was_seen) in enumerate(zip(points, seen)):
        if was_seen:
            continue
        distance = point.dist(candidate)
        if distance < best_distance:
            best_distance = distance
            best_index = index
    return best_index, best_distance


def _grow_chain(
    points: List[Point], seen: List[bool], first: int, second: int, unlinked: List[Point]
) -> None:
    """Extend a chain from both ends, always taking the shorter step."""
    while True:
        seen[first] = True
        seen[second] = True
        candidate1, dist1 = nearest_neighbour(points[first], points, seen)
        candidate2, dist2 = nearest_neighbour(points[second], points, seen)
        if candidate1 is None or candidate2 is None:
            unlinked.append(points[first])
            unlinked.append(points[second])
            return
        if dist1 < dist2:
            points[first].previous = points[candidate1]
            points[candidate1].next = points[first]
            first = candidate1
        else:
            points[candidate2].previous = points[second]
            points[second].next = points[candidate2]
            second = candidate2


def link_unlinked(unlinked: List[Point], max_step: float) -> None:
    """Join chain ends to their nearest other end when closer than ``max_step``.

    Ends that get linked are removed from ``unlinked`` in place.
    """
    if len(unlinked) <= 1:
        return
    linked = set()
    for i, point in enumerate(unlinked):
        best_distance = math.inf
        best: Optional[Point] = None
        for j, other in enumerate(unlinked):
            if i == j:
                continue
            distance = point.dist(other)
            if distance < best_distance:
                best_distance = distance
                best = other
        if best is None or not best_distance < max_step:
            continue
        if point.previous is None:
            point.previous = best
        else:
            point.next = best
        if best.previous is None:
            best.previous = point
        else:
            best.next = point
        linked.add(i)
    unlinked[:] = [p for i, p in enumerate(unlinked) if i not in linked]


class Quadtree:
    """A region of the plane holding points, split into quadrants when crowded."""

    def __init__(self, subdivision: int, max_points: int) -> None:
        if subdivision < 4:
            raise ValueError("a quadtree needs at least 4 subdivisions")
        self.subdivision = subdivision
        self.max_points = max_points
        self.children: List[Quadtree] = []
        self.points: List[Point] = []
        self.divided = False
        self.center = Point(0.0, 0.0)
        self.min_x = math.inf
        self.min_y = math.inf
        self.max_x = -math.inf
        self.max_y = -math.inf
        self.point_count = 0
        self.curvature: Optional[Sequence[_Evaluable]] = None

    def add_point(self, point: Point) -> None:
        """Store a point and widen the bounding box to include it."""
        self.min_x = min(self.min_x, point.x)
        self.max_x = max(self.max_x, point.x)
        self.min_y = min(self.min_y, point.y)
        self.max_y = max(self.max_y, point.y)
        self.point_count += 1
        self.points.append(point)

    def extend(self, points) -> None:
        """Add every point of an iterable."""
        for point in points:
            self.add_point(point)

    def divide_space(self) -> None:
        """Split recursively into quadrants while a node holds too many points."""
        if self.point_count < self.max_points:
            return
        cx = (self.max_x + self.min_x) / 2
        cy = (self.max_y + self.min_y) / 2
        self.center = Point(cx, cy)
        self.divided = True
        self.children = [
            Quadtree(self.subdivision, self.max_points) for _ in range(self.subdivision)
        ]
        bounds = (
            (self.min_x, cy, cx, self.max_y),
            (cx, cy, self.max_x, self.max_y),
            (self.min_x, self.min_y, cx, cy),
            (cx, self.min_y, self.max_x, cy),
        )
        for child, (min_x, min_y, max_x, max_y) in zip(self.children, bounds):
            child.min_x, child.min_y, child.max_x, child.max_y = min_x, min_y, max_x, max_y

        for point in self.points:
            if point.x < cx:
                quadrant = 2 if point.y < cy else 0
            else:
                quadrant = 1 if point.y > cy else 3
            self.children[quadrant].add_point(point)

        for child in self.children[:4]:
            child.divide_space()

    def remove_duplicates(self, precision: float) -> None:
        """Drop every point that has a later point closer than ``precision``."""
        points = self.points
        self.points = [
            point
            for i, point in enumerate(points)
            if not any(point.dist(other) < precision for other in points[i + 1:])
        ]

    def link_points(self, unlinked: List[Point], max_step: float) -> None:
        """Chain the points of each leaf and collect the loose chain ends.

        Chain ends are appended to ``unlinked``; in a divided node the ends
        gathered from its children are then joined where close enough.
        """
        if self.divided:
            for child in self.children:
                child.link_points(unlinked, max_step)
            link_unlinked(unlinked, max_step)
            return

        points = self.points
        if len(points) == 1:
            unlinked.append(points[0])
            return
        if len(points) < 2:
            return

        start = points[0]
        seen = [False] * len(points)
        seen[0] = True
        first, _ = nearest_neighbour(start, points, seen)
        seen[first] = True
        second, _ = nearest_neighbour(start, points, seen)

        if second is None:
            points[first].previous = start
            start.next = points[first]
            unlinked.append(points[first])
            unlinked.append(start)
            return

        start.previous = points[first]
        start.next = points[second]
        points[second].previous = start
        points[first].next = start
        _grow_chain(points, seen, first, second, unlinked)

    def curvature_at(self, x: float, y: float) -> float:
        """Curvature of the implicit curve at (x, y) from the attached derivatives.

        The derivatives are, in order: P_y, P_x, P_yy, P_xx, P_xy.
        """
        if self.curvature is None:
            raise ValueError("no curvature derivatives attached to this quadtree")
        py, px, pyy, pxx, pxy = (p.evaluate(x, y) for p in self.curvature)
        gradient_sq = py * py + px * px
        if gradient_sq == 0:
            return math.nan
        numerator = py * py * pxx + px * px * pyy - 2 * py * px * pxy
        return numerator / gradient_sq * math.sqrt(gradient_sq)