"""
Background-subtraction foreground extractor.

Runs OpenCV MOG2 on a blurred grayscale frame, cleans the mask with
morphology and reports every external contour as a candidate.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import cv2
import numpy as np

from models.config import ForegroundConfig
from models.detection import BoundingBox, Candidate
from .base import ForegroundExtractor

# MOG2 marks shadows with 127, foreground with 255
SHADOW_THRESHOLD = 200


class BackgroundSubtractionExtractor(ForegroundExtractor):
    """Extract moving blobs using MOG2 background subtraction and contour analysis."""

    def __init__(self, config: Optional[ForegroundConfig] = None) -> None:
        """
        Initialize the extractor.

        Args:
            config: Background model and mask cleanup settings.
        """
        self.config = config or ForegroundConfig()
        self.bg_subtractor = self._create_subtractor()
        self.kernel = cv2.getStructuringElement(
            cv2.MORPH_ELLIPSE, (self.config.morph_kernel, self.config.morph_kernel)
        )
        self.frame_count = 0
        self._mask: Optional[np.ndarray] = None

        logging.info(
            f"Foreground extractor initialized: history={self.config.history}, "
            f"var_threshold={self.config.var_threshold}"
        )

    @property
    def foreground_mask(self) -> Optional[np.ndarray]:
        return self._mask

    def _create_subtractor(self):
        return cv2.createBackgroundSubtractorMOG2(
            history=self.config.history,
            varThreshold=self.config.var_threshold,
            detectShadows=self.config.detect_shadows,
        )

    def extract(self, frame: np.ndarray) -> List[Candidate]:
        """
        Find foreground candidates in the frame.

        Args:
            frame: BGR or grayscale frame.

        Returns:
            Candidates in contour order. Empty for an empty frame.
        """
        if frame is None or frame.size == 0:
            return []

        self.frame_count += 1

        if frame.ndim == 3:
            gray = cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)
        else:
            gray = frame

        k = self.config.blur_kernel
        if k > 1:
            gray = cv2.GaussianBlur(gray, (k, k), 0)

        fg_mask = self.bg_subtractor.apply(gray)

        # Remove speckle, then grow blobs so fragments join
        fg_mask = cv2.morphologyEx(fg_mask, cv2.MORPH_OPEN, self.kernel)
        if self.config.dilate_iterations > 0:
            fg_mask = cv2.dilate(fg_mask, self.kernel, iterations=self.config.dilate_iterations)

        if self.config.remove_shadows:
            _, fg_mask = cv2.threshold(fg_mask, SHADOW_THRESHOLD, 255, cv2.THRESH_BINARY)

        self._mask = fg_mask

        # MOG2 reports the whole first frame as foreground
        if self.frame_count == 1:
            return []

        contours, _ = cv2.findContours(fg_mask, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)

        candidates = []
        for contour in contours:
            x, y, w, h = cv2.boundingRect(contour)
            candidates.append(
                Candidate(
                    bbox=BoundingBox.from_xywh(float(x), float(y), float(w), float(h)),
                    area=float(cv2.contourArea(contour)),
                )
            )

        return candidates

    def reset(self) -> None:
        """Reset the background model."""
        self.bg_subtractor = self._create_subtractor()
        self._mask = None
        self.frame_count = 0
        logging.info("Background model reset")
