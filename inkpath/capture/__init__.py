"""Stroke capture and cleanup pipeline for inkpath."""

from .cleanup import filter_noise, process_points, process_stroke, simplify, smooth
from .config import CaptureConfig, CleanupConfig
from .geometry import distance, perpendicular_distance
from .history import StrokeHistory
from .lifecycle import DrawingSession
from .normalization import denormalize, normalize, point_from_sample

__all__ = [
    "filter_noise",
    "smooth",
    "simplify",
    "process_points",
    "process_stroke",
    "CaptureConfig",
    "CleanupConfig",
    "distance",
    "perpendicular_distance",
    "StrokeHistory",
    "DrawingSession",
    "normalize",
    "denormalize",
    "point_from_sample",
]
