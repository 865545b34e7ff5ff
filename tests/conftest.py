"""
Pytest configuration and shared fixtures.
"""

import os
import sys

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from models.detection import Candidate  # noqa: E402


@pytest.fixture
def temp_config_dir(tmp_path):
    """Create a temporary config directory with default.yaml."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()

    default_yaml = config_dir / "default.yaml"
    default_yaml.write_text("""
tracker:
  min_area: 400
  max_jump_distance: 100
  max_misses: 15
  smooth_alpha: 0.5

foreground:
  history: 500
  var_threshold: 25.0

log_path: ""
log_level: "INFO"
""")

    return config_dir


@pytest.fixture
def valid_config():
    """Return a valid configuration dictionary."""
    return {
        "tracker": {
            "min_area": 400,
            "max_jump_distance": 100,
            "max_misses": 15,
            "smooth_alpha": 0.5,
            "reset_on_loss": False,
        },
        "foreground": {
            "history": 500,
            "var_threshold": 25.0,
            "detect_shadows": True,
        },
        "session": {
            "detected_confidence": 0.9,
            "predicted_confidence": 0.5,
        },
        "log_path": "logs/test.log",
        "log_level": "INFO",
    }


@pytest.fixture
def make_candidate():
    """Build a candidate centered at (cx, cy) with the given size and area."""
    def _make(cx, cy, size=30, area=900):
        half = size / 2
        return Candidate.from_xywh(cx - half, cy - half, size, size, area)
    return _make
