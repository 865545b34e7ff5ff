"""
Per-frame tracking result models.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from .detection import BoundingBox, Point


class TrackStatus(str, Enum):
    """Outcome of a single tracker update."""
    DETECTED = "detected"
    PREDICTED = "predicted"
    LOST = "lost"


@dataclass(frozen=True)
class DetectionResult:
    """
    Best estimate of the tracked object's location for one frame.

    Attributes:
        bounding_box: Matched or carried-forward box. None before the first detection.
        center: Smoothed center point. None before the first detection.
        is_detected: True if a real candidate was matched this frame.
        is_valid: False once the track is lost; position must not be used then.
        miss_count: Consecutive misses at the time of the result.
    """
    bounding_box: Optional[BoundingBox] = None
    center: Optional[Point] = None
    is_detected: bool = False
    is_valid: bool = False
    miss_count: int = 0

    @property
    def state(self) -> TrackStatus:
        if not self.is_valid:
            return TrackStatus.LOST
        if self.is_detected:
            return TrackStatus.DETECTED
        return TrackStatus.PREDICTED

    @classmethod
    def lost(cls, miss_count: int = 0) -> "DetectionResult":
        """Result carrying no usable position."""
        return cls(miss_count=miss_count)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bounding_box": self.bounding_box.as_xywh() if self.bounding_box else None,
            "center": self.center,
            "is_detected": self.is_detected,
            "is_valid": self.is_valid,
            "miss_count": self.miss_count,
            "state": self.state.value,
        }


@dataclass(frozen=True)
class FrameAnnotation:
    """
    A valid result converted to normalized frame coordinates.

    Attributes:
        frame_index: Frame number the annotation belongs to.
        bbox: Box in [0, 1] coordinates.
        confidence: Fixed confidence for the result's state.
        state: DETECTED or PREDICTED.
    """
    frame_index: int
    bbox: BoundingBox
    confidence: float
    state: TrackStatus


@dataclass
class TrackedObject:
    """The single object followed through an auto-detect run, keyed by frame index."""
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    annotations: Dict[int, BoundingBox] = field(default_factory=dict)
    confidence: Dict[int, float] = field(default_factory=dict)
    states: Dict[int, TrackStatus] = field(default_factory=dict)

    def add(self, annotation: FrameAnnotation) -> None:
        self.annotations[annotation.frame_index] = annotation.bbox
        self.confidence[annotation.frame_index] = annotation.confidence
        self.states[annotation.frame_index] = annotation.state

    @property
    def frame_count(self) -> int:
        return len(self.annotations)
