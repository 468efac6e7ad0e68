"""Business logic services for inkpath."""

from .registry import SessionLimitError, SessionRegistry, registry, summarize

__all__ = ["SessionLimitError", "SessionRegistry", "registry", "summarize"]
