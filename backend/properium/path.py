"""Location path: dotted address into an object graph."""

from typing import Iterator, Optional, Union

from properium.errors import join_path


class LocationPath:
    """Immutable sequence of path segments, rendered only when a failure is raised."""

    __slots__ = ("_segments",)

    def __init__(self, *segments: Optional[str]):
        self._segments: tuple = tuple(segments)

    @classmethod
    def of(cls, root: Union["LocationPath", str, None] = None) -> "LocationPath":
        """Coerce a root label (or an existing path) into a LocationPath."""
        if isinstance(root, LocationPath):
            return root
        return cls(root)

    def child(self, segment: str) -> "LocationPath":
        return LocationPath(*self._segments, segment)

    def index(self, position: int) -> "LocationPath":
        """Child path for an array element, e.g. ``friends.[0]``."""
        return self.child(f"[{position}]")

    @property
    def segments(self) -> tuple:
        return self._segments

    def __iter__(self) -> Iterator[Optional[str]]:
        return iter(self._segments)

    def __str__(self) -> str:
        return join_path(self._segments)

    def __repr__(self) -> str:
        return f"LocationPath({str(self)!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, LocationPath):
            return str(self) == str(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))
