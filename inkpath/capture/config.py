"""Configuration for stroke capture and cleanup."""

import os
from dataclasses import dataclass, field
from typing import Optional

import yaml


@dataclass
class CleanupConfig:
    min_distance: float = 0.002
    smoothing_enabled: bool = True
    simplify_enabled: bool = True
    tolerance: float = 0.001
    simplify_threshold: int = 50


@dataclass
class StyleConfig:
    color: str = "#000000"
    width: float = 3.0
    opacity: float = 1.0


@dataclass
class CanvasConfig:
    width: float = 1080.0
    height: float = 1920.0


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: str = ""
    max_size_mb: int = 10
    backup_count: int = 3


@dataclass
class CaptureConfig:
    cleanup: CleanupConfig = field(default_factory=CleanupConfig)
    default_style: StyleConfig = field(default_factory=StyleConfig)
    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: str) -> "CaptureConfig":
        """Load configuration from a YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        config = cls()

        if "cleanup" in data:
            c = data["cleanup"]
            config.cleanup = CleanupConfig(
                min_distance=c.get("min_distance", 0.002),
                smoothing_enabled=c.get("smoothing_enabled", True),
                simplify_enabled=c.get("simplify_enabled", True),
                tolerance=c.get("tolerance", 0.001),
                simplify_threshold=c.get("simplify_threshold", 50),
            )

        if "default_style" in data:
            s = data["default_style"]
            config.default_style = StyleConfig(
                color=s.get("color", "#000000"),
                width=s.get("width", 3.0),
                opacity=s.get("opacity", 1.0),
            )

        if "canvas" in data:
            cv = data["canvas"]
            config.canvas = CanvasConfig(
                width=cv.get("width", 1080.0),
                height=cv.get("height", 1920.0),
            )

        if "logging" in data:
            lg = data["logging"]
            config.logging = LoggingConfig(
                level=lg.get("level", "INFO"),
                file=lg.get("file", ""),
                max_size_mb=lg.get("max_size_mb", 10),
                backup_count=lg.get("backup_count", 3),
            )

        return config

    @classmethod
    def load(cls, path: Optional[str] = None) -> "CaptureConfig":
        """Load config from path, falling back to defaults."""
        search_paths = [
            path,
            os.environ.get("INKPATH_CONFIG"),
            os.path.expanduser("~/.inkpath/config.yaml"),
        ]
        for p in search_paths:
            if p and os.path.isfile(p):
                return cls.from_yaml(p)
        return cls()
