"""
Auto-detect session over a range of frames.

Runs a MotionDetector over every frame, keeps the valid results as
normalized annotations and returns them as one TrackedObject.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from models.config import SessionConfig
from models.frame import FrameData
from models.result import DetectionResult, FrameAnnotation, TrackedObject, TrackStatus
from .detector import MotionDetector


ProgressCallback = Callable[[int, Optional[int], int], None]


class DetectionCancelledError(RuntimeError):
    """Raised when cancel() stops a running session."""


class NoObjectsDetectedError(RuntimeError):
    """Raised when a run finishes without a single valid result."""


class AutoDetectSession:
    """
    Batch motion detection over a sequence of frames.

    The session:
    - Feeds each frame through the detector in order
    - Converts valid results to normalized annotations
    - Reports progress and per-frame results through callbacks
    - Can be cancelled between frames

    Example:
        session = AutoDetectSession(MotionDetector.from_config(config))
        tracked = session.run(frames, progress_callback=print)
    """

    def __init__(self, detector: MotionDetector, config: Optional[SessionConfig] = None):
        self.detector = detector
        self.config = config or SessionConfig()
        self._cancelled = False
        self._callbacks: List[Callable[[FrameData, DetectionResult], None]] = []

    def add_callback(self, callback: Callable[[FrameData, DetectionResult], None]) -> None:
        """
        Add a callback to be called after each frame is processed.

        Args:
            callback: Function taking (frame_data, result) as arguments.
        """
        self._callbacks.append(callback)

    def cancel(self) -> None:
        """Stop the run at the next frame boundary."""
        self._cancelled = True

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    def run(
        self,
        frames: Iterable[FrameData],
        progress_callback: Optional[ProgressCallback] = None,
    ) -> TrackedObject:
        """
        Process all frames and collect the tracked object's annotations.

        Args:
            frames: Frames in playback order.
            progress_callback: Called as (current, total, frame_index) after
                each frame. total is None when frames has no length.

        Returns:
            TrackedObject holding one annotation per valid frame.

        Raises:
            DetectionCancelledError: cancel() was called during the run.
            NoObjectsDetectedError: No frame produced a valid result.
        """
        self._cancelled = False
        total = len(frames) if hasattr(frames, "__len__") else None
        tracked = TrackedObject()
        processed = 0

        logging.info(f"Auto-detect started: frames={total if total is not None else 'unknown'}")

        for frame_data in frames:
            if self._cancelled:
                logging.info(f"Auto-detect cancelled after {processed} frames")
                raise DetectionCancelledError("Auto-detect cancelled")

            processed += 1

            if frame_data.is_empty:
                logging.warning(f"Skipping empty frame {frame_data.frame_index}")
                continue

            result = self.detector.process_frame(frame_data.frame)

            # A lost track would otherwise only re-match near its old position
            if (
                self.config.restart_on_loss
                and result.state == TrackStatus.LOST
                and self.detector.tracker.is_initialized
            ):
                logging.info(f"Restarting track at frame {frame_data.frame_index}")
                self.detector.reset()

            annotation = self._annotate(frame_data, result)
            if annotation is not None:
                tracked.add(annotation)

            for callback in self._callbacks:
                try:
                    callback(frame_data, result)
                except Exception as e:
                    logging.warning(f"Callback error: {e}")

            if progress_callback is not None:
                progress_callback(processed, total, frame_data.frame_index)

        if tracked.frame_count == 0:
            raise NoObjectsDetectedError("No moving object detected")

        logging.info(
            f"Auto-detect finished: frames={processed}, annotated={tracked.frame_count}"
        )
        return tracked

    def _annotate(self, frame_data: FrameData, result: DetectionResult) -> Optional[FrameAnnotation]:
        """Normalized annotation for a valid result, None otherwise."""
        if not result.is_valid or result.bounding_box is None:
            return None

        if result.state == TrackStatus.DETECTED:
            confidence = self.config.detected_confidence
        else:
            confidence = self.config.predicted_confidence

        return FrameAnnotation(
            frame_index=frame_data.frame_index,
            bbox=result.bounding_box.normalized(frame_data.width, frame_data.height),
            confidence=confidence,
            state=result.state,
        )
