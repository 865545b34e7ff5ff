"""
Command-line entry point for the motion tracker.

Replays recorded per-frame candidate lists through the tracker and logs the
result of every frame. Useful for tuning tracker settings without re-running
background subtraction.

Usage:
    python src/main.py --config config/config.yaml --candidates run.yaml

Arguments:
    --config: Path to configuration file
    --candidates: YAML file with a `frames` list of candidate lists
    --log-level: Override the configured log level
"""

import argparse
import logging
import os
import sys
from typing import Any, Dict, List, Optional, Tuple

import yaml

from models.config import Config
from models.detection import Candidate, candidates_from_dicts
from models.result import DetectionResult, TrackStatus
from ops.logging import setup_logging
from tracking.tracker import MotionTracker

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into base and return base."""
    for k, v in (override or {}).items():
        if isinstance(v, dict) and isinstance(base.get(k), dict):
            _deep_merge(base[k], v)
        else:
            base[k] = v
    return base


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Load configuration with layering:
    - `config/default.yaml` (checked in)
    - `config/config.yaml` (local overrides)
    - plus any explicitly provided `--config` path (treated as overrides)
    """
    config_dir = os.path.dirname(config_path)
    layers = [
        os.path.abspath(os.path.join(config_dir, "default.yaml")),
        os.path.abspath(os.path.join(config_dir, "config.yaml")),
    ]
    # --config pointing at default.yaml or config.yaml must not apply twice
    if os.path.abspath(config_path) not in layers:
        layers.append(os.path.abspath(config_path))

    merged: Dict[str, Any] = {}
    try:
        for path in layers:
            # Every layer is optional; later layers win
            if not os.path.exists(path):
                continue
            with open(path, "r") as f:
                _deep_merge(merged, yaml.safe_load(f) or {})
            logging.debug(f"Loaded config layer: {path}")
        return merged
    except (OSError, yaml.YAMLError) as e:
        logging.error(f"Failed to load configuration: {e}")
        sys.exit(1)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_config(config: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
    """
    Validate configuration file structure and value types.

    Ranges are not checked; the tracker accepts any numbers.

    Args:
        config: Configuration dictionary

    Returns:
        Tuple of (is_valid, error_message)
    """
    required_sections = ['tracker', 'log_path', 'log_level']
    for section in required_sections:
        if section not in config:
            return False, f"Missing required configuration section: {section}"

    tracker = config.get('tracker')
    if not isinstance(tracker, dict):
        return False, "tracker must be a mapping"
    for key in ('min_area', 'max_jump_distance', 'smooth_alpha'):
        if key in tracker and not _is_number(tracker[key]):
            return False, f"tracker.{key} must be a number"
    if 'max_misses' in tracker and (
        not isinstance(tracker['max_misses'], int) or isinstance(tracker['max_misses'], bool)
    ):
        return False, "tracker.max_misses must be an integer"
    if 'reset_on_loss' in tracker and not isinstance(tracker['reset_on_loss'], bool):
        return False, "tracker.reset_on_loss must be a boolean"

    foreground = config.get('foreground', {}) or {}
    if not isinstance(foreground, dict):
        return False, "foreground must be a mapping"
    for key in ('history', 'blur_kernel', 'morph_kernel', 'dilate_iterations'):
        if key in foreground and (
            not isinstance(foreground[key], int) or isinstance(foreground[key], bool)
        ):
            return False, f"foreground.{key} must be an integer"
    for key in ('blur_kernel', 'morph_kernel'):
        if key in foreground and foreground[key] > 1 and foreground[key] % 2 == 0:
            return False, f"foreground.{key} must be odd"
    if 'var_threshold' in foreground and not _is_number(foreground['var_threshold']):
        return False, "foreground.var_threshold must be a number"
    for key in ('detect_shadows', 'remove_shadows'):
        if key in foreground and not isinstance(foreground[key], bool):
            return False, f"foreground.{key} must be a boolean"

    session = config.get('session', {}) or {}
    if not isinstance(session, dict):
        return False, "session must be a mapping"
    for key in ('detected_confidence', 'predicted_confidence'):
        if key in session and not _is_number(session[key]):
            return False, f"session.{key} must be a number"
    if 'restart_on_loss' in session and not isinstance(session['restart_on_loss'], bool):
        return False, "session.restart_on_loss must be a boolean"

    if config['log_level'] not in LOG_LEVELS:
        return False, f"log_level must be one of: {', '.join(LOG_LEVELS)}"
    if not isinstance(config['log_path'], str):
        return False, "log_path must be a string"

    return True, None


def load_candidate_frames(path: str) -> List[List[Candidate]]:
    """
    Read recorded candidates.

    The file holds a `frames` list; each frame is a list of
    {x, y, width, height, area} mappings (possibly empty).
    """
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    frames = data.get("frames") if isinstance(data, dict) else None
    if not isinstance(frames, list):
        raise ValueError(f"{path}: expected a 'frames' list")

    return [candidates_from_dicts(frame or []) for frame in frames]


def replay(tracker: MotionTracker, frames: List[List[Candidate]]) -> Dict[str, int]:
    """
    Feed candidate lists through the tracker, one update per frame.

    Returns:
        Count of results per TrackStatus value.
    """
    summary = {status.value: 0 for status in TrackStatus}
    for index, candidates in enumerate(frames, start=1):
        result: DetectionResult = tracker.update(candidates)
        summary[result.state.value] += 1
        logging.info(f"frame={index} candidates={len(candidates)} result={result.to_dict()}")
    return summary


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Single-object motion tracker")
    parser.add_argument("--config", default="config/config.yaml", help="Path to configuration file")
    parser.add_argument("--candidates", required=True, help="YAML file with recorded candidates")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Override configured log level")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    raw_config = load_config(args.config)
    if args.log_level:
        raw_config["log_level"] = args.log_level

    is_valid, error = validate_config(raw_config)
    if not is_valid:
        logging.error(f"Invalid configuration: {error}")
        return 1

    config = Config.from_dict(raw_config)
    setup_logging(config.log_path, config.log_level)

    try:
        frames = load_candidate_frames(args.candidates)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logging.error(f"Failed to load candidates: {e}")
        return 1

    tracker = MotionTracker(config.tracker)
    summary = replay(tracker, frames)

    print(
        f"frames={len(frames)} detected={summary['detected']} "
        f"predicted={summary['predicted']} lost={summary['lost']}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
