"""
Tracking module.

The canonical tracker implementation is in tracking.tracker.
"""

from .tracker import MotionTracker

__all__ = ["MotionTracker"]
