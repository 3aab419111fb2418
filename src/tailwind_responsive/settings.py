"""Global configuration for tailwind_responsive.

Breakpoint thresholds are fixed in ``responsive`` and intentionally not
configurable here. Malformed environment values fall back to the defaults
with a warning rather than breaking import.
"""

from __future__ import annotations

import logging
import math
import os
from typing import Final

LOG_LEVELS: Final = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_logger = logging.getLogger(__name__)


def env_log_level(name: str, default: str = "WARNING") -> str:
    raw = os.environ.get(name)
    if raw is None:
        return default
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        _logger.warning("Ignoring %s=%r; expected one of %s", name, raw, ", ".join(LOG_LEVELS))
        return default
    return level


def env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        value = math.nan
    if not math.isfinite(value):
        _logger.warning("Ignoring %s=%r; expected a finite number", name, raw)
        return default
    return value


LOG_LEVEL: Final = env_log_level("TAILWIND_RESPONSIVE_LOG_LEVEL")
# Width reported by screen_width() when no QGuiApplication / screen exists (headless).
FALLBACK_WIDTH: Final = env_float("TAILWIND_RESPONSIVE_FALLBACK_WIDTH", 0.0)
