"""
Single-object motion tracker.

Associates one foreground candidate per frame with the current track using
nearest-center matching inside a jump radius, smooths the center with an
exponential moving average and carries the last box forward through misses.

Detection (background subtraction, contours) is NOT done here. Candidates
come from a `detection.ForegroundExtractor`.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional

from models.config import TrackerConfig
from models.detection import BoundingBox, Candidate, Point
from models.result import DetectionResult


class MotionTracker:
    """
    Tracks a single moving region across frames.

    This tracker is responsible for:
    - Filtering candidates by area
    - Picking the largest candidate to start a track
    - Matching the nearest candidate within max_jump_distance afterwards
    - Counting consecutive misses and flagging the track as lost

    Calls must be serialized; use one tracker per video stream.

    Example:
        tracker = MotionTracker(TrackerConfig(max_misses=3))
        result = tracker.update(candidates)
        if result.is_valid:
            draw(result.bounding_box)
    """

    def __init__(self, config: Optional[TrackerConfig] = None):
        """
        Initialize the motion tracker.

        Args:
            config: Tracker configuration. Defaults to TrackerConfig().
        """
        self._config = config or TrackerConfig()
        self._smoothed_center: Optional[Point] = None
        self._last_bbox: Optional[BoundingBox] = None
        self._miss_count = 0
        self._is_initialized = False

        logging.info(f"Motion tracker initialized: {self._config.to_dict()}")

    @property
    def config(self) -> TrackerConfig:
        return self._config

    @property
    def smoothed_center(self) -> Optional[Point]:
        return self._smoothed_center

    @property
    def last_bounding_box(self) -> Optional[BoundingBox]:
        return self._last_bbox

    @property
    def miss_count(self) -> int:
        return self._miss_count

    @property
    def is_initialized(self) -> bool:
        return self._is_initialized

    def configure(self, config: TrackerConfig) -> None:
        """Replace the configuration; applies from the next update."""
        self._config = config
        logging.debug(f"Motion tracker reconfigured: {config.to_dict()}")

    def reset(self) -> None:
        """Drop the current track so the next update starts a new one."""
        self._smoothed_center = None
        self._last_bbox = None
        self._miss_count = 0
        self._is_initialized = False

    def update(self, candidates: Iterable[Candidate]) -> DetectionResult:
        """
        Update the track with the candidates found in one frame.

        Args:
            candidates: Foreground candidates for the current frame, in
                extractor order. May be empty.

        Returns:
            DetectionResult for this frame.
        """
        eligible = self._filter_candidates(candidates)

        if not self._is_initialized:
            return self._initialize(eligible)

        match = self._select_nearest(eligible)
        if match is not None:
            return self._apply_match(match)
        return self._apply_miss()

    def _filter_candidates(self, candidates: Iterable[Candidate]) -> List[Candidate]:
        """Keep well-formed candidates with area >= min_area."""
        if candidates is None:
            return []
        min_area = self._config.min_area
        return [c for c in candidates if c.is_well_formed and c.area >= min_area]

    def _initialize(self, eligible: List[Candidate]) -> DetectionResult:
        if not eligible:
            return DetectionResult.lost()

        # max() keeps the first of equal areas
        first = max(eligible, key=lambda c: c.area)
        self._smoothed_center = first.center
        self._last_bbox = first.bbox
        self._miss_count = 0
        self._is_initialized = True

        logging.info(
            f"Track acquired at ({first.center[0]:.1f}, {first.center[1]:.1f}), "
            f"area={first.area:.0f}"
        )
        return self._result(is_detected=True, is_valid=True)

    def _select_nearest(self, eligible: List[Candidate]) -> Optional[Candidate]:
        """Nearest candidate to the smoothed center within max_jump_distance."""
        best: Optional[Candidate] = None
        best_distance = math.inf
        cx, cy = self._smoothed_center

        for candidate in eligible:
            px, py = candidate.center
            distance = math.hypot(px - cx, py - cy)
            if distance > self._config.max_jump_distance:
                continue
            if distance < best_distance:
                best = candidate
                best_distance = distance

        return best

    def _apply_match(self, match: Candidate) -> DetectionResult:
        alpha = self._config.smooth_alpha
        cx, cy = self._smoothed_center
        px, py = match.center
        self._smoothed_center = (
            alpha * px + (1 - alpha) * cx,
            alpha * py + (1 - alpha) * cy,
        )
        self._last_bbox = match.bbox

        if self._miss_count > 0:
            logging.debug(f"Track re-acquired after {self._miss_count} missed frames")
        self._miss_count = 0

        return self._result(is_detected=True, is_valid=True)

    def _apply_miss(self) -> DetectionResult:
        self._miss_count += 1
        is_valid = self._miss_count <= self._config.max_misses
        result = self._result(is_detected=False, is_valid=is_valid)

        if not is_valid:
            if self._miss_count - 1 <= self._config.max_misses:
                logging.info(f"Track lost after {self._miss_count} missed frames")
            if self._config.reset_on_loss:
                self.reset()

        return result

    def _result(self, is_detected: bool, is_valid: bool) -> DetectionResult:
        return DetectionResult(
            bounding_box=self._last_bbox,
            center=self._smoothed_center,
            is_detected=is_detected,
            is_valid=is_valid,
            miss_count=self._miss_count,
        )
