"""
Typed configuration models matching the YAML config structure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class TrackerConfig:
    """
    Motion tracker configuration.

    Values are not range-checked; out-of-range values degrade gracefully
    (smooth_alpha=0 freezes the estimate, negative max_misses loses the
    track on the first miss).
    """
    min_area: float = 400.0
    max_jump_distance: float = 100.0
    max_misses: int = 15
    smooth_alpha: float = 0.5
    reset_on_loss: bool = False

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "TrackerConfig":
        return cls(
            min_area=d.get("min_area", 400.0),
            max_jump_distance=d.get("max_jump_distance", 100.0),
            max_misses=d.get("max_misses", 15),
            smooth_alpha=d.get("smooth_alpha", 0.5),
            reset_on_loss=d.get("reset_on_loss", False),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "min_area": self.min_area,
            "max_jump_distance": self.max_jump_distance,
            "max_misses": self.max_misses,
            "smooth_alpha": self.smooth_alpha,
            "reset_on_loss": self.reset_on_loss,
        }


@dataclass
class ForegroundConfig:
    """Background subtraction and mask cleanup configuration."""
    history: int = 500
    var_threshold: float = 25.0
    detect_shadows: bool = True
    remove_shadows: bool = False
    blur_kernel: int = 5
    morph_kernel: int = 5
    dilate_iterations: int = 2

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ForegroundConfig":
        return cls(
            history=d.get("history", 500),
            var_threshold=d.get("var_threshold", 25.0),
            detect_shadows=d.get("detect_shadows", True),
            remove_shadows=d.get("remove_shadows", False),
            blur_kernel=d.get("blur_kernel", 5),
            morph_kernel=d.get("morph_kernel", 5),
            dilate_iterations=d.get("dilate_iterations", 2),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "history": self.history,
            "var_threshold": self.var_threshold,
            "detect_shadows": self.detect_shadows,
            "remove_shadows": self.remove_shadows,
            "blur_kernel": self.blur_kernel,
            "morph_kernel": self.morph_kernel,
            "dilate_iterations": self.dilate_iterations,
        }


@dataclass
class SessionConfig:
    """Auto-detect session configuration."""
    detected_confidence: float = 0.9
    predicted_confidence: float = 0.5
    restart_on_loss: bool = True

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SessionConfig":
        return cls(
            detected_confidence=d.get("detected_confidence", 0.9),
            predicted_confidence=d.get("predicted_confidence", 0.5),
            restart_on_loss=d.get("restart_on_loss", True),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "detected_confidence": self.detected_confidence,
            "predicted_confidence": self.predicted_confidence,
            "restart_on_loss": self.restart_on_loss,
        }


@dataclass
class Config:
    """
    Complete application configuration.

    This is a typed representation of the YAML config structure.
    """
    tracker: TrackerConfig = field(default_factory=TrackerConfig)
    foreground: ForegroundConfig = field(default_factory=ForegroundConfig)
    session: SessionConfig = field(default_factory=SessionConfig)
    log_path: str = "logs/motion_tracker.log"
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Config":
        """Adapter: Create Config from raw dictionary (e.g., from load_config)."""
        return cls(
            tracker=TrackerConfig.from_dict(d.get("tracker") or {}),
            foreground=ForegroundConfig.from_dict(d.get("foreground") or {}),
            session=SessionConfig.from_dict(d.get("session") or {}),
            log_path=d.get("log_path", "logs/motion_tracker.log"),
            log_level=d.get("log_level", "INFO"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to dictionary (for saving or logging)."""
        return {
            "tracker": self.tracker.to_dict(),
            "foreground": self.foreground.to_dict(),
            "session": self.session.to_dict(),
            "log_path": self.log_path,
            "log_level": self.log_level,
        }
