"""
Zoom level <-> search radius mapping.

The map frontend asks for a search radius after every zoom/pan change and
asks for a zoom level when it restores a stored radius. The two directions
are intentionally not inverses of each other:

* ``radius_for_zoom`` uses a coarse set of hand-tuned threshold bands with
  only five output values.
* ``zoom_for_radius`` picks the nearest entry of the richer zoom/radius table.

Both are total functions over immutable data and never raise.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, Mapping, Optional, Tuple

from app.core.exceptions import InvalidZoomTableError

logger = logging.getLogger(__name__)


# (threshold zoom, radius in meters), ascending by threshold
RADIUS_BANDS: Tuple[Tuple[int, int], ...] = (
    (9, 50000),
    (11, 20000),
    (12, 10000),
    (13, 3000),
)
FINEST_BAND_RADIUS = 2000


@dataclass(frozen=True)
class ZoomRadiusEntry:
    """A single zoom level paired with its search radius in meters."""
    zoom: int
    radius: int


class ZoomRadiusTable:
    """
    Immutable, zoom-ordered table of ZoomRadiusEntry values.

    Construction enforces that zoom levels are unique, radii are positive and
    the radius never grows as the zoom level increases.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries):
        ordered = tuple(sorted(entries, key=lambda e: e.zoom))
        self._validate(ordered)
        object.__setattr__(self, "_entries", ordered)

    def __setattr__(self, name, value):
        raise AttributeError("ZoomRadiusTable is immutable")

    @classmethod
    def from_mapping(cls, table: Mapping[int, int]) -> "ZoomRadiusTable":
        """Build a table from a ``{zoom: radius}`` mapping."""
        return cls(ZoomRadiusEntry(int(zoom), int(radius)) for zoom, radius in table.items())

    @staticmethod
    def _validate(entries: Tuple[ZoomRadiusEntry, ...]) -> None:
        as_dict = {e.zoom: e.radius for e in entries}
        if not entries:
            raise InvalidZoomTableError("Zoom/radius table must contain at least one entry")

        if len(as_dict) != len(entries):
            raise InvalidZoomTableError("Zoom levels in the zoom/radius table must be unique", as_dict)

        for entry in entries:
            if entry.radius <= 0:
                raise InvalidZoomTableError(
                    f"Radius for zoom {entry.zoom} must be positive, got {entry.radius}", as_dict
                )

        for coarser, finer in zip(entries, entries[1:]):
            if finer.radius > coarser.radius:
                raise InvalidZoomTableError(
                    f"Radius must not increase with zoom: zoom {coarser.zoom} -> {coarser.radius}m, "
                    f"zoom {finer.zoom} -> {finer.radius}m",
                    as_dict
                )

    @property
    def entries(self) -> Tuple[ZoomRadiusEntry, ...]:
        return self._entries

    @property
    def min_zoom(self) -> int:
        return self._entries[0].zoom

    @property
    def max_zoom(self) -> int:
        return self._entries[-1].zoom

    def as_dict(self) -> Dict[int, int]:
        return {e.zoom: e.radius for e in self._entries}

    def __iter__(self) -> Iterator[ZoomRadiusEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other):
        if not isinstance(other, ZoomRadiusTable):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self):
        return hash(self._entries)

    def __repr__(self):
        return f"ZoomRadiusTable({self.as_dict()!r})"


class ZoomRadiusMapper:
    """Bidirectional lookup between map zoom levels and search radii."""

    def __init__(self, table: ZoomRadiusTable):
        self._table = table

    @property
    def table(self) -> ZoomRadiusTable:
        return self._table

    def radius_for_zoom(self, zoom: float) -> int:
        """
        Search radius in meters for a (possibly fractional) zoom level.

        Returns the radius of the first band whose threshold zoom is at or
        above ``zoom``; anything finer than the last threshold gets the
        finest band radius.
        """
        for threshold, radius in RADIUS_BANDS:
            if zoom <= threshold:
                return radius
        return FINEST_BAND_RADIUS

    def zoom_for_radius(self, radius: float) -> int:
        """
        Zoom level whose tabulated radius is closest to ``radius``.

        Entries are scanned in ascending zoom order and only a strictly
        smaller difference replaces the current best, so on a tie the
        coarser zoom (larger radius) wins.
        """
        table = self._table.entries
        # Infinite radii would tie on every entry; clamp them to the table range
        radius = min(max(radius, table[-1].radius), table[0].radius)

        best: Optional[ZoomRadiusEntry] = None
        best_diff = 0.0
        for entry in self._table:
            diff = abs(entry.radius - radius)
            if best is None or diff < best_diff:
                best = entry
                best_diff = diff
        return best.zoom


def create_zoom_radius_mapper(table: Mapping[int, int]) -> ZoomRadiusMapper:
    """Validate ``table`` and wrap it in a mapper."""
    zoom_table = ZoomRadiusTable.from_mapping(table)
    logger.info(
        f"Zoom/radius table loaded with {len(zoom_table)} entries "
        f"(zoom {zoom_table.min_zoom}-{zoom_table.max_zoom})",
        extra={"zoom_radius_table": zoom_table.as_dict()}
    )
    return ZoomRadiusMapper(zoom_table)
