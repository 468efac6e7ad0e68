"""Identifier generation for strokes and sessions."""

import secrets
import string
import time

_ALPHABET = string.ascii_lowercase + string.digits


def _suffix(length: int = 9) -> str:
    return "".join(secrets.choice(_ALPHABET) for _ in range(length))


def generate_stroke_id() -> str:
    return f"stroke_{int(time.time() * 1000)}_{_suffix()}"


def generate_session_id() -> str:
    return f"session_{int(time.time() * 1000)}_{_suffix()}"
