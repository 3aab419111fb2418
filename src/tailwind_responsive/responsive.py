"""Tailwind-style responsive breakpoints.

Maps a measured width (logical pixels) to one of six semantic tiers and picks
the most specific value supplied for that tier. The scale mirrors Tailwind CSS:

 - initial: < 640px   (mobile)
 - sm: >= 640px       (tablet)
 - md: >= 768px       (tablet landscape)
 - lg: >= 1024px      (desktop)
 - xl: >= 1280px      (large desktop)
 - xxl: >= 1536px     (Tailwind's ``2xl``; extra large screens)

Ranges are open-ended upward, so lookups walk the table from the largest tier
down and stop at the first threshold the width satisfies.

Fallback Policy
---------------
``resolve`` returns the value of the largest tier that both matches the width
and was supplied. Unset tiers fall through to the next smaller one, which makes
values "sticky" upward: a value given only for ``sm`` applies to every width
>= 640. When nothing matches, ``initial`` is returned.

Non-finite widths: NaN resolves to ``initial``, +inf to ``xxl`` and -inf to
``initial``. Negative widths are treated like the smallest width.

Everything here is pure and Qt-free; width measurement lives in
``tailwind_responsive.width_provider``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Mapping, Optional, Tuple, TypeVar

__all__ = [
    "Breakpoint",
    "BREAKPOINTS",
    "INITIAL",
    "list_breakpoints",
    "get_breakpoint",
    "breakpoint_index",
    "classify",
    "classify_width",
    "resolve",
    "resolve_values",
]

T = TypeVar("T")

_logger = logging.getLogger(__name__)

INITIAL = "initial"


@dataclass(frozen=True)
class Breakpoint:
    """Named width tier.

    Attributes
    ----------
    name: str
        Semantic identifier (initial|sm|md|lg|xl|xxl).
    min_width: float
        Inclusive lower pixel boundary (0 for ``initial``).
    """

    name: str
    min_width: float

    def matches(self, width: float) -> bool:
        return width >= self.min_width


# Ascending by min_width. ``initial`` has no real lower bound; it is the
# fallback when no other tier matches.
BREAKPOINTS: Tuple[Breakpoint, ...] = (
    Breakpoint(INITIAL, 0),
    Breakpoint("sm", 640),
    Breakpoint("md", 768),
    Breakpoint("lg", 1024),
    Breakpoint("xl", 1280),
    Breakpoint("xxl", 1536),
)

_BY_NAME = {bp.name: bp for bp in BREAKPOINTS}
_INDEX = {bp.name: i for i, bp in enumerate(BREAKPOINTS)}
# Tiers with an explicit threshold, largest first.
_DESCENDING: Tuple[Breakpoint, ...] = tuple(reversed(BREAKPOINTS[1:]))


def list_breakpoints() -> List[Breakpoint]:
    return list(BREAKPOINTS)


def get_breakpoint(name: str) -> Breakpoint:
    bp = _BY_NAME.get(name)
    if bp is None:
        raise KeyError(f"Unknown breakpoint: {name}")
    return bp


def breakpoint_index(name: str) -> int:
    """Return tier order (``initial`` = 0 ... ``xxl`` = 5)."""
    try:
        return _INDEX[name]
    except KeyError:
        raise KeyError(f"Unknown breakpoint: {name}") from None


def classify_width(width: float) -> Breakpoint:
    """Return the Breakpoint record matching ``width``."""
    if _is_nan(width):
        _logger.debug("NaN width classified as %s", INITIAL)
        return BREAKPOINTS[0]
    for bp in _DESCENDING:
        if bp.matches(width):
            return bp
    return BREAKPOINTS[0]


def classify(width: float) -> str:
    """Return the breakpoint name for ``width``."""
    return classify_width(width).name


def resolve(
    width: float,
    initial: T,
    sm: Optional[T] = None,
    md: Optional[T] = None,
    lg: Optional[T] = None,
    xl: Optional[T] = None,
    xxl: Optional[T] = None,
) -> T:
    """Select the value for the largest supplied tier that ``width`` reaches.

    Example::

        padding = resolve(width, 8, sm=16, lg=24)
        # 500 -> 8, 700 -> 16, 900 -> 16, 1100 -> 24, 3000 -> 24
    """
    return _select(width, {"sm": sm, "md": md, "lg": lg, "xl": xl, "xxl": xxl}, initial)


def resolve_values(width: float, values: Mapping[str, Optional[T]], initial: T) -> T:
    """Mapping form of :func:`resolve`.

    ``values`` maps tier names (sm..xxl) to optional values; missing keys and
    ``None`` entries are unset. ``initial`` must be passed separately.
    """
    for name in values:
        if name == INITIAL:
            raise ValueError("Pass the initial value via the 'initial' argument")
        get_breakpoint(name)
    return _select(width, values, initial)


def _select(width: float, values: Mapping[str, Optional[T]], initial: T) -> T:
    if _is_nan(width):
        _logger.debug("NaN width resolved to initial value")
        return initial
    for bp in _DESCENDING:
        if not bp.matches(width):
            continue
        value = values.get(bp.name)
        if value is not None:
            return value
    return initial


def _is_nan(width: float) -> bool:
    # NaN is the only value unequal to itself (float, numpy, Decimal alike).
    return width != width
