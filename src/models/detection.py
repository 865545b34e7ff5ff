"""
Geometry and candidate models produced by the foreground extractor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple


Point = Tuple[float, float]


@dataclass(frozen=True)
class BoundingBox:
    """
    An axis-aligned box in pixel coordinates.

    Attributes:
        x1: Left edge x coordinate.
        y1: Top edge y coordinate.
        x2: Right edge x coordinate.
        y2: Bottom edge y coordinate.
    """
    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def width(self) -> float:
        return self.x2 - self.x1

    @property
    def height(self) -> float:
        return self.y2 - self.y1

    @property
    def center(self) -> Point:
        return ((self.x1 + self.x2) / 2, (self.y1 + self.y2) / 2)

    @property
    def area(self) -> float:
        return self.width * self.height

    def as_xywh(self) -> Tuple[float, float, float, float]:
        """Return as (x, y, width, height) tuple."""
        return (self.x1, self.y1, self.width, self.height)

    def normalized(self, frame_width: float, frame_height: float) -> "BoundingBox":
        """
        Scale the box into [0, 1] frame coordinates.

        Args:
            frame_width: Frame width in pixels.
            frame_height: Frame height in pixels.
        """
        return BoundingBox(
            x1=self.x1 / frame_width,
            y1=self.y1 / frame_height,
            x2=self.x2 / frame_width,
            y2=self.y2 / frame_height,
        )

    @classmethod
    def from_xywh(cls, x: float, y: float, w: float, h: float) -> "BoundingBox":
        """Create from (x, y, width, height) format."""
        return cls(x1=x, y1=y, x2=x + w, y2=y + h)


@dataclass(frozen=True)
class Candidate:
    """
    A foreground blob proposed for association with the track.

    Attributes:
        bbox: Bounding box of the blob.
        area: Blob area in pixels (contour area, not box area).
    """
    bbox: BoundingBox
    area: float

    @property
    def center(self) -> Point:
        return self.bbox.center

    @property
    def is_well_formed(self) -> bool:
        """False for negative width, height or area."""
        return self.bbox.width >= 0 and self.bbox.height >= 0 and self.area >= 0

    @classmethod
    def from_xywh(cls, x: float, y: float, w: float, h: float, area: float) -> "Candidate":
        """Create from (x, y, width, height) plus area."""
        return cls(bbox=BoundingBox.from_xywh(x, y, w, h), area=area)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Candidate":
        """Adapter: Create from a {x, y, width, height, area} mapping."""
        return cls.from_xywh(
            float(d.get("x", 0)),
            float(d.get("y", 0)),
            float(d.get("width", 0)),
            float(d.get("height", 0)),
            float(d.get("area", 0)),
        )


def candidates_from_dicts(items: List[Dict[str, Any]]) -> List[Candidate]:
    """
    Adapter: Convert a list of candidate mappings to Candidate objects.

    Args:
        items: Mappings with x, y, width, height and area keys.
    """
    if not items:
        return []
    return [Candidate.from_dict(item) for item in items]
