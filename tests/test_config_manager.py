"""
Tests for ConfigManager: YAML loading, fallback and validation.
"""

import pytest

from autotween.engine.scheduler import AnimationScheduler
from autotween.managers.config_manager import ConfigManager
from autotween.models.config import DEFAULT_MAX_DELTA
from autotween.models.enums import CurveID, LogLevel
from autotween.models.errors import ConfigError


def write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


class TestLoad:

    def test_packaged_config(self):
        config = ConfigManager().load()

        assert config.max_delta == pytest.approx(1.0 / 15.0)
        assert config.fps == 60
        assert config.default_curve == CurveID.SMOOTHSTEP
        assert set(config.curves) == {"parabola", "overshoot"}
        assert config.curves["parabola"](0.5) == 1.0

    def test_custom_file(self, tmp_path):
        path = write(tmp_path / "animator.yaml", """
animator:
  max_delta: 0.05
  fps: 30
  default_curve: linear
  pool_prewarm: 8
logging:
  level: debug
  use_colors: false
""")
        config = ConfigManager(str(path)).load()

        assert config.max_delta == 0.05
        assert config.fps == 30
        assert config.default_curve == CurveID.LINEAR
        assert config.pool_prewarm == 8
        assert config.log_level == LogLevel.DEBUG
        assert config.use_colors is False
        assert config.curves == {}

    def test_missing_file_falls_back_to_defaults(self, tmp_path):
        manager = ConfigManager(str(tmp_path / "nope.yaml"))
        config = manager.load()

        assert config.max_delta == pytest.approx(DEFAULT_MAX_DELTA)
        assert config.curves == {}
        assert "animator" in manager.data

    def test_broken_yaml_falls_back(self, tmp_path):
        path = write(tmp_path / "broken.yaml", "animator: [unclosed")
        config = ConfigManager(str(path)).load()
        assert config.fps == 60

    def test_empty_file_uses_builtin_defaults(self, tmp_path):
        path = write(tmp_path / "empty.yaml", "")
        config = ConfigManager(str(path)).load()

        assert config.max_delta == DEFAULT_MAX_DELTA
        assert config.log_level == LogLevel.INFO


class TestParse:

    def test_fraction_string(self):
        assert ConfigManager.parse({"max_delta": "1/30"}).max_delta == pytest.approx(1.0 / 30.0)

    def test_plain_number_string(self):
        assert ConfigManager.parse({"max_delta": "0.1"}).max_delta == 0.1

    @pytest.mark.parametrize("value", ["abc", "1/0"])
    def test_bad_fraction(self, value):
        with pytest.raises(ConfigError) as exc_info:
            ConfigManager.parse({"max_delta": value})
        assert exc_info.value.details["key"] == "max_delta"

    def test_non_positive_max_delta(self):
        with pytest.raises(ConfigError):
            ConfigManager.parse({"max_delta": 0})

    def test_fps_clamped(self):
        assert ConfigManager.parse({"fps": 1000}).fps == 240
        assert ConfigManager.parse({"fps": 0}).fps == 1

    def test_negative_prewarm(self):
        with pytest.raises(ConfigError):
            ConfigManager.parse({"pool_prewarm": -1})

    def test_unknown_curve(self):
        with pytest.raises(ConfigError) as exc_info:
            ConfigManager.parse({"default_curve": "WOBBLE"})
        assert exc_info.value.code == "INVALID_CONFIG"

    def test_non_string_enum(self):
        with pytest.raises(ConfigError):
            ConfigManager.parse({"logging": {"level": 3}})


class TestConfigCurves:

    def test_scheduler_selects_config_curve_by_name(self, context, pool):
        config = ConfigManager().load()
        scheduler = AnimationScheduler(context=context, pool=pool, config=config)

        assert scheduler.resolve_curve("overshoot") is config.curves["overshoot"]
        assert scheduler.resolve_curve("parabola")(0.5) == 1.0
