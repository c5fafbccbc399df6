"""
Config Manager

Loads animator.yaml into an AnimatorConfig, falling back to
factory_defaults.yaml when the main file is missing or unreadable.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

from autotween.models.config import AnimatorConfig, DEFAULT_MAX_DELTA
from autotween.models.curve import AnimationCurve
from autotween.models.enums import CurveID, LogCategory, LogLevel
from autotween.models.errors import ConfigError
from autotween.utils.logger import get_category_logger

log = get_category_logger(LogCategory.CONFIG)

E = TypeVar("E")


class ConfigManager:
    """
    Animator configuration loader

    Paths are resolved relative to the autotween package directory unless
    absolute.

    Example:
        config = ConfigManager().load()
        config.max_delta      # 0.0667
        config.default_curve  # CurveID.SMOOTHSTEP

        # Custom file
        config = ConfigManager("/etc/myapp/animator.yaml").load()
    """

    def __init__(self, config_path="config/animator.yaml", defaults_path="config/factory_defaults.yaml"):
        """
        Args:
            config_path: Main config file
            defaults_path: Factory defaults used if the main file fails to load
        """
        self.config_path = Path(config_path)
        self.factory_defaults_path = Path(defaults_path)
        self.data: Dict[str, Any] = {}
        self.config: Optional[AnimatorConfig] = None

    def _resolve(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        package_dir = Path(__file__).parent.parent
        return package_dir / path

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        with open(self._resolve(path), "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data or {}

    def load(self) -> AnimatorConfig:
        """
        Load config with factory defaults fallback

        Returns:
            Parsed AnimatorConfig

        Raises:
            ConfigError: if a value is present but invalid
        """
        try:
            self.data = self._read_yaml(self.config_path)
            log.info("Loaded animator config", path=str(self.config_path))
        except (OSError, yaml.YAMLError) as ex:
            log.error("Failed to load animator config", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")
            self.data = self._read_yaml(self.factory_defaults_path)

        self.config = self.parse(self.data)
        log.info("Animator config ready", config=repr(self.config))
        return self.config

    @classmethod
    def parse(cls, data: Dict[str, Any]) -> AnimatorConfig:
        """Build AnimatorConfig from a raw dict (the 'animator' section if present)"""
        section = data.get("animator", data)
        logging_section = data.get("logging", {})

        max_delta = section.get("max_delta", DEFAULT_MAX_DELTA)
        if isinstance(max_delta, str):
            max_delta = cls._parse_fraction("max_delta", max_delta)
        max_delta = float(max_delta)
        if max_delta <= 0:
            raise ConfigError("max_delta", max_delta, "must be > 0")

        fps = int(section.get("fps", 60))
        if fps < 1 or fps > 240:
            log.warn("fps out of range, clamping", fps=fps)
            fps = max(1, min(fps, 240))

        prewarm = int(section.get("pool_prewarm", 0))
        if prewarm < 0:
            raise ConfigError("pool_prewarm", prewarm, "must be >= 0")

        curves = {
            name: AnimationCurve.from_points(points)
            for name, points in (data.get("curves") or {}).items()
        }

        return AnimatorConfig(
            max_delta=max_delta,
            fps=fps,
            default_curve=cls._to_enum(CurveID, "default_curve", section.get("default_curve", "SMOOTHSTEP")),
            log_level=cls._to_enum(LogLevel, "level", logging_section.get("level", "INFO")),
            use_colors=bool(logging_section.get("use_colors", True)),
            pool_prewarm=prewarm,
            curves=curves,
        )

    @staticmethod
    def _parse_fraction(key: str, value: str) -> float:
        """Accept '1/15' style values"""
        try:
            if "/" in value:
                num, den = value.split("/", 1)
                return float(num) / float(den)
            return float(value)
        except (ValueError, ZeroDivisionError):
            raise ConfigError(key, value, "expected a number or fraction like 1/15")

    @staticmethod
    def _to_enum(enum_class: Type[E], key: str, value) -> E:
        if isinstance(value, enum_class):
            return value
        if isinstance(value, str):
            try:
                return enum_class[value.upper()]
            except KeyError:
                raise ConfigError(key, value, f"unknown {enum_class.__name__}")
        raise ConfigError(key, value, f"expected str, got {type(value).__name__}")
