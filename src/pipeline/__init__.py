"""
Pipeline module for the motion tracker.

The pipeline orchestrates the per-frame flow:
- Foreground extraction
- Single-object tracking
- Batch auto-detect sessions with progress and cancellation
"""

from .detector import MotionDetector
from .session import AutoDetectSession, DetectionCancelledError, NoObjectsDetectedError

__all__ = [
    "MotionDetector",
    "AutoDetectSession",
    "DetectionCancelledError",
    "NoObjectsDetectedError",
]
