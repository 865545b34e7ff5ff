"""
Foreground extraction interface.

The tracker only needs candidate regions, so any segmentation backend can
sit behind this interface:
- classical CV (background subtraction)
- precomputed masks
- recorded candidate lists
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from models.detection import Candidate


class ForegroundExtractor:
    """Extractor interface returning foreground candidates in pixel-space."""

    @property
    def foreground_mask(self) -> Optional[np.ndarray]:
        """Binary mask from the last extract() call, if the backend keeps one."""
        return None

    def extract(self, frame: np.ndarray) -> List[Candidate]:
        raise NotImplementedError

    def reset(self) -> None:
        """Forget any learned background state."""
        pass
