"""inkpath - freehand stroke capture and cleanup."""

__version__ = "0.1.0"
