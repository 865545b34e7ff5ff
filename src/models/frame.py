"""
FrameData model for frames handed to the motion detector.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class FrameData:
    """
    A decoded video frame plus its position in the sequence.

    Attributes:
        frame: Pixel data as a numpy array (BGR or single-channel).
        width: Frame width in pixels.
        height: Frame height in pixels.
        frame_index: Frame number within the source sequence.
    """
    frame: np.ndarray
    width: int
    height: int
    frame_index: int = 0

    @classmethod
    def from_numpy(
        cls,
        frame: np.ndarray,
        frame_index: int = 0,
    ) -> "FrameData":
        """Create FrameData from a numpy array."""
        h, w = frame.shape[:2]
        return cls(
            frame=frame,
            width=w,
            height=h,
            frame_index=frame_index,
        )

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0
