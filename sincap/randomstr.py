"""Random string generation."""

from __future__ import annotations

import random
import string

LETTERS = string.ascii_lowercase + string.ascii_uppercase
DEFAULT_LENGTH = 32

_rng = random.Random()


def get_string(length: int = DEFAULT_LENGTH) -> str:
    """Return a random string of ASCII letters with the given length."""
    if length < 0:
        raise ValueError("length must not be negative")
    return "".join(_rng.choices(LETTERS, k=length))