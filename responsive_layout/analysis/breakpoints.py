"""
Breakpoint selection from the horizontal extent of a design.
"""

from typing import List, Sequence, Union

from responsive_layout.models import Breakpoint, BreakpointName, VisualElement

MOBILE_BREAKPOINT = 375
TABLET_BREAKPOINT = 768
MAX_CONTENT_WIDTH = 1200


def max_extent(elements: Sequence[VisualElement]) -> float:
    """Rightmost x covered by any element (0 for an empty design)."""
    if not elements:
        return 0.0
    return max(element.right for element in elements)


Width = Union[int, float]


def _as_width(value: float) -> Width:
    return int(value) if float(value).is_integer() else value


def detect_optimal_breakpoints(elements: Sequence[VisualElement]) -> List[Width]:
    """
    Derive ascending target widths from the design's extent.

    Args:
        elements: Normalized elements.

    Returns:
        Strictly ascending widths; the last one never exceeds 1200.
        Whole widths are ints so they serialize without a fraction.
    """
    extent = max_extent(elements)
    breakpoints: List[Width] = []

    # Single column below this
    if extent > 400:
        breakpoints.append(MOBILE_BREAKPOINT)

    # Two columns below this
    if extent > 800:
        breakpoints.append(TABLET_BREAKPOINT)

    breakpoints.append(_as_width(min(extent, MAX_CONTENT_WIDTH)))
    return breakpoints


def breakpoint_for_width(width: float) -> BreakpointName:
    """Map a viewport width onto its breakpoint tier."""
    if width < Breakpoint.tablet().width:
        return BreakpointName.MOBILE
    if width < Breakpoint.desktop().width:
        return BreakpointName.TABLET
    if width < Breakpoint.wide().width:
        return BreakpointName.DESKTOP
    return BreakpointName.WIDE
