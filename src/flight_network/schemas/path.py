"""
Path result schemas.

Defines the output contract for shortest / alternative path searches.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class PathSegment:
    """
    One flight of a path: the edge actually traversed.

    The airline is the one on the specific edge chosen by the search, not
    any airline flying the same airport pair.
    """

    segment_index: int
    departure_airport: str
    arrival_airport: str
    distance: float
    airline: str
    speed: float

    # Optional display fields
    departure_name: Optional[str] = None
    arrival_name: Optional[str] = None

    @property
    def flight_time(self) -> float:
        """Flight duration in minutes at the segment's cruise speed."""
        return self.distance / self.speed * 60


@dataclass(frozen=True)
class PathResult:
    """
    Immutable representation of a path between two airports.

    Invariants:
        len(segments) == len(path) - 1
        total_distance == sum of segment distances
        airlines[i] == segments[i].airline

    ``total_time`` is in minutes.
    """

    path: Tuple[str, ...]
    total_distance: float
    total_time: float
    airlines: Tuple[str, ...]
    segments: Tuple[PathSegment, ...]

    def __post_init__(self) -> None:
        """Validate segment alignment."""
        if not self.path:
            raise ValueError("Path must contain at least one airport")
        if len(self.segments) != len(self.path) - 1:
            raise ValueError(
                f"Expected {len(self.path) - 1} segments for path of "
                f"{len(self.path)} airports, got {len(self.segments)}"
            )
        if len(self.airlines) != len(self.segments):
            raise ValueError("airlines must align with segments")

    @property
    def origin(self) -> str:
        return self.path[0]

    @property
    def destination(self) -> str:
        return self.path[-1]

    @property
    def num_segments(self) -> int:
        return len(self.segments)

    @property
    def num_stops(self) -> int:
        """Intermediate airports between origin and destination."""
        return max(len(self.path) - 2, 0)

    @classmethod
    def trivial(cls, code: str) -> "PathResult":
        """Zero-length result for origin == destination."""
        return cls(path=(code,), total_distance=0.0, total_time=0.0, airlines=(), segments=())

    @classmethod
    def from_segments(
        cls,
        path: Sequence[str],
        segments: Sequence[PathSegment],
        total_distance: float,
        total_time: float,
    ) -> "PathResult":
        """
        Factory method to create PathResult from ordered segments.

        Args:
            path: Airport codes, origin first.
            segments: One segment per consecutive pair in path.
            total_distance: Distance in km as accumulated by the search.
            total_time: Time in minutes as accumulated by the search.

        Returns:
            Validated PathResult instance.
        """
        return cls(
            path=tuple(path),
            total_distance=total_distance,
            total_time=total_time,
            airlines=tuple(seg.airline for seg in segments),
            segments=tuple(segments),
        )
