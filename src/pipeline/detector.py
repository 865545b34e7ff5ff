"""
Frame-level motion detector.

Couples a ForegroundExtractor with a MotionTracker so callers can feed raw
frames instead of candidate lists.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from detection.base import ForegroundExtractor
from detection.bgsub_extractor import BackgroundSubtractionExtractor
from models.config import Config
from models.detection import Candidate
from models.result import DetectionResult
from tracking.tracker import MotionTracker


class MotionDetector:
    """
    Runs extraction and tracking for one video stream.

    Example:
        detector = MotionDetector.from_config(config)
        for frame in frames:
            result = detector.process_frame(frame)
    """

    def __init__(self, extractor: ForegroundExtractor, tracker: MotionTracker):
        self.extractor = extractor
        self.tracker = tracker
        self._last_candidates: List[Candidate] = []

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> "MotionDetector":
        """Build a detector with a MOG2 extractor from application config."""
        config = config or Config()
        return cls(
            BackgroundSubtractionExtractor(config.foreground),
            MotionTracker(config.tracker),
        )

    @property
    def last_candidates(self) -> List[Candidate]:
        """Candidates found in the most recent frame."""
        return list(self._last_candidates)

    def process_frame(self, frame: np.ndarray) -> DetectionResult:
        """
        Extract candidates from the frame and update the track.

        Args:
            frame: BGR or grayscale frame.
        """
        self._last_candidates = self.extractor.extract(frame)
        result = self.tracker.update(self._last_candidates)
        logging.debug(
            f"[DETECT] candidates={len(self._last_candidates)} state={result.state.value} "
            f"misses={result.miss_count}"
        )
        return result

    def reset(self) -> None:
        """Reset the track. The background model keeps learning."""
        self.tracker.reset()
        self._last_candidates = []

    def reset_background(self) -> None:
        """Reset the background model as well as the track."""
        self.extractor.reset()
        self.reset()
