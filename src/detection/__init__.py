"""
Foreground extraction.

Turns frames into candidate regions for the tracker.
"""

from .base import ForegroundExtractor
from .bgsub_extractor import BackgroundSubtractionExtractor

__all__ = ["ForegroundExtractor", "BackgroundSubtractionExtractor"]
