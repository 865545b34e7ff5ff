"""
Smoke tests for configuration loading, validation and the replay CLI.
"""

import pytest

from main import load_config, validate_config, load_candidate_frames, replay, main
from models.config import TrackerConfig
from tracking.tracker import MotionTracker


class TestValidateConfig:
    """Tests for validate_config function."""

    def test_valid_config_passes(self, valid_config):
        """A complete valid config passes validation."""
        is_valid, error = validate_config(valid_config)

        assert is_valid is True
        assert error is None

    def test_missing_tracker_section(self, valid_config):
        """Missing tracker section fails validation."""
        del valid_config["tracker"]

        is_valid, error = validate_config(valid_config)

        assert is_valid is False
        assert "tracker" in error.lower()

    def test_missing_log_level(self, valid_config):
        """Missing log_level fails validation."""
        del valid_config["log_level"]

        is_valid, error = validate_config(valid_config)

        assert is_valid is False
        assert "log_level" in error.lower()

    def test_optional_sections(self, valid_config):
        """Foreground and session sections may be omitted."""
        del valid_config["foreground"]
        del valid_config["session"]

        is_valid, error = validate_config(valid_config)

        assert is_valid is True

    def test_non_numeric_tracker_value(self, valid_config):
        valid_config["tracker"]["smooth_alpha"] = "fast"

        is_valid, error = validate_config(valid_config)

        assert is_valid is False
        assert "smooth_alpha" in error

    def test_bool_is_not_a_number(self, valid_config):
        valid_config["tracker"]["min_area"] = True

        is_valid, error = validate_config(valid_config)

        assert is_valid is False
        assert "min_area" in error

    def test_max_misses_must_be_int(self, valid_config):
        valid_config["tracker"]["max_misses"] = 2.5

        is_valid, error = validate_config(valid_config)

        assert is_valid is False
        assert "max_misses" in error

    def test_out_of_range_values_accepted(self, valid_config):
        """Ranges are not validated."""
        valid_config["tracker"]["smooth_alpha"] = 1.7
        valid_config["tracker"]["max_misses"] = -3

        is_valid, error = validate_config(valid_config)

        assert is_valid is True

    def test_even_blur_kernel_rejected(self, valid_config):
        valid_config["foreground"]["blur_kernel"] = 4

        is_valid, error = validate_config(valid_config)

        assert is_valid is False
        assert "blur_kernel" in error

    def test_invalid_log_level(self, valid_config):
        valid_config["log_level"] = "LOUD"

        is_valid, error = validate_config(valid_config)

        assert is_valid is False
        assert "log_level" in error


class TestLoadConfig:
    """Tests for layered configuration loading."""

    def test_loads_default(self, temp_config_dir):
        config = load_config(str(temp_config_dir / "config.yaml"))

        assert config["tracker"]["max_misses"] == 15
        assert config["foreground"]["history"] == 500

    def test_local_override(self, temp_config_dir):
        (temp_config_dir / "config.yaml").write_text("tracker:\n  max_misses: 3\n")

        config = load_config(str(temp_config_dir / "config.yaml"))

        assert config["tracker"]["max_misses"] == 3
        assert config["tracker"]["min_area"] == 400

    def test_explicit_override(self, temp_config_dir):
        (temp_config_dir / "config.yaml").write_text("tracker:\n  max_misses: 3\n")
        explicit = temp_config_dir / "night.yaml"
        explicit.write_text("tracker:\n  smooth_alpha: 0.2\n")

        config = load_config(str(explicit))

        assert config["tracker"]["max_misses"] == 3
        assert config["tracker"]["smooth_alpha"] == 0.2

    def test_config_pointing_at_default(self, temp_config_dir):
        """Passing default.yaml still lets config.yaml override it."""
        (temp_config_dir / "config.yaml").write_text("tracker:\n  max_misses: 3\n")

        config = load_config(str(temp_config_dir / "default.yaml"))

        assert config["tracker"]["max_misses"] == 3

    def test_missing_layers(self, tmp_path):
        """A directory with no config files yields an empty config."""
        assert load_config(str(tmp_path / "config.yaml")) == {}

    def test_bad_yaml_exits(self, temp_config_dir):
        (temp_config_dir / "config.yaml").write_text("tracker: [unclosed\n")

        with pytest.raises(SystemExit):
            load_config(str(temp_config_dir / "config.yaml"))


CANDIDATES_YAML = """
frames:
  - [{x: 10, y: 10, width: 30, height: 30, area: 900}]
  - []
  - []
  - []
  - []
"""


class TestReplay:
    """Tests for candidate replay."""

    def test_load_candidate_frames(self, tmp_path):
        path = tmp_path / "run.yaml"
        path.write_text(CANDIDATES_YAML)

        frames = load_candidate_frames(str(path))

        assert len(frames) == 5
        assert frames[0][0].center == (25.0, 25.0)
        assert frames[1] == []

    def test_load_requires_frames(self, tmp_path):
        path = tmp_path / "run.yaml"
        path.write_text("candidates: []\n")

        with pytest.raises(ValueError):
            load_candidate_frames(str(path))

    def test_replay_summary(self, tmp_path):
        path = tmp_path / "run.yaml"
        path.write_text(CANDIDATES_YAML)
        tracker = MotionTracker(TrackerConfig(max_misses=3))

        summary = replay(tracker, load_candidate_frames(str(path)))

        assert summary == {"detected": 1, "predicted": 3, "lost": 1}

    def test_main_runs(self, temp_config_dir, tmp_path, capsys):
        (temp_config_dir / "config.yaml").write_text("tracker:\n  max_misses: 3\n")
        path = tmp_path / "run.yaml"
        path.write_text(CANDIDATES_YAML)

        code = main([
            "--config", str(temp_config_dir / "config.yaml"),
            "--candidates", str(path),
        ])

        assert code == 0
        assert "detected=1 predicted=3 lost=1" in capsys.readouterr().out

    def test_main_invalid_config(self, temp_config_dir, tmp_path):
        (temp_config_dir / "config.yaml").write_text("log_level: LOUD\n")
        path = tmp_path / "run.yaml"
        path.write_text(CANDIDATES_YAML)

        code = main([
            "--config", str(temp_config_dir / "config.yaml"),
            "--candidates", str(path),
        ])

        assert code == 1

    def test_main_missing_candidates(self, temp_config_dir, tmp_path):
        code = main([
            "--config", str(temp_config_dir / "config.yaml"),
            "--candidates", str(tmp_path / "missing.yaml"),
        ])

        assert code == 1
