"""
Typed models for the motion tracker.

Candidates come from the foreground extractor, results from the tracker.
"""

from .frame import FrameData
from .detection import BoundingBox, Candidate, candidates_from_dicts
from .result import DetectionResult, FrameAnnotation, TrackedObject, TrackStatus
from .config import (
    Config,
    TrackerConfig,
    ForegroundConfig,
    SessionConfig,
)

__all__ = [
    # Frame
    "FrameData",
    # Detection
    "BoundingBox",
    "Candidate",
    "candidates_from_dicts",
    # Results
    "DetectionResult",
    "FrameAnnotation",
    "TrackedObject",
    "TrackStatus",
    # Config
    "Config",
    "TrackerConfig",
    "ForegroundConfig",
    "SessionConfig",
]
