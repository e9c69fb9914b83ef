"""Core utility functions for pathwise."""

from __future__ import annotations

import math
from datetime import datetime, timezone
from numbers import Real
from typing import Any


def utc_now() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


def is_valid_weight(weight: Any) -> bool:
    """Check that a weight is a finite real number (bool excluded)."""
    if isinstance(weight, bool) or not isinstance(weight, Real):
        return False
    return math.isfinite(weight)
