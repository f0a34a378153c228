"""
Per-breakpoint style derivation for classified layouts.
"""

import re
from typing import Any, Dict

from responsive_layout.models import (
    BreakpointStyle,
    LayoutDecision,
    LayoutKind,
    ResponsiveStyleSet,
    VisualElement,
)

DEFAULT_FONT_SIZE = 16.0
DEFAULT_MARGIN = "0.5rem"

MOBILE_FONT_SCALE = 0.85
MOBILE_MIN_FONT_SIZE = 14.0
MOBILE_SPACING_SCALE = 0.75
MOBILE_FULL_WIDTH_ABOVE = 300

TABLET_FONT_SCALE = 0.9
TABLET_MIN_FONT_SIZE = 15.0
TABLET_SPACING_SCALE = 0.85
TABLET_FLEX_BASIS = "1 1 45%"

CONTAINER_KINDS = {"group", "container", "frame", "section", "card"}
SHAPE_KINDS = {"rect", "rectangle", "circle", "ellipse", "polygon", "triangle"}

_NUMERIC_PREFIX = re.compile(r"^(-?(?:\d+\.?\d*|\.\d+))(.*)$")


def format_number(value: float) -> str:
    """Render a number without float noise or a trailing ``.0``."""
    value = round(float(value), 4)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def scale_spacing(value: str, factor: float) -> str:
    """
    Scale the numeric part of a spacing value, keeping its unit.

    Each whitespace-separated token is scaled on its own, so shorthand
    like ``"1rem 2rem"`` works. Tokens without a leading number are kept.

    Args:
        value: CSS spacing value such as ``"1rem"`` or ``"12px"``.
        factor: Multiplier for the numeric coefficient.

    Returns:
        Scaled spacing value.
    """
    tokens = []
    for token in value.split():
        match = _NUMERIC_PREFIX.match(token)
        if match:
            tokens.append(f"{format_number(float(match.group(1)) * factor)}{match.group(2)}")
        else:
            tokens.append(token)
    return " ".join(tokens)


def calculate_padding(element: VisualElement) -> str:
    """Default padding from the element kind."""
    kind = element.kind.lower()
    if kind in CONTAINER_KINDS:
        return "1rem"
    style = element.style
    if kind in SHAPE_KINDS and (style.has_fill or style.color or style.background_color):
        return "0.75rem"
    return "0"


def calculate_margin(element: VisualElement) -> str:
    """Default margin; the same for every kind."""
    return DEFAULT_MARGIN


def extract_base_style(element: VisualElement) -> BreakpointStyle:
    """Desktop style taken straight from the element."""
    style = element.style
    return BreakpointStyle(
        width=element.size.width,
        height=element.size.height,
        padding=style.padding_hint or calculate_padding(element),
        margin=style.margin_hint or calculate_margin(element),
        font_size=style.font_size or DEFAULT_FONT_SIZE,
        color=style.color,
        background_color=style.background_color,
    )


def _scale_common(
    styles: BreakpointStyle,
    font_scale: float,
    min_font_size: float,
    spacing_scale: float
) -> Dict[str, Any]:
    update: Dict[str, Any] = {}
    if styles.font_size:
        update["font_size"] = max(min_font_size, styles.font_size * font_scale)
    if styles.padding:
        update["padding"] = scale_spacing(styles.padding, spacing_scale)
    if styles.margin:
        update["margin"] = scale_spacing(styles.margin, spacing_scale)
    return update


def adapt_for_mobile(styles: BreakpointStyle, decision: LayoutDecision) -> BreakpointStyle:
    """
    Derive the mobile style.

    Grid and flow children always span the full width. Absolute children
    wider than 300 go full width but keep their original width as a cap.
    """
    update = _scale_common(styles, MOBILE_FONT_SCALE, MOBILE_MIN_FONT_SIZE, MOBILE_SPACING_SCALE)

    if decision.kind in (LayoutKind.GRID, LayoutKind.FLOW):
        update["width"] = "100%"
    elif isinstance(styles.width, (int, float)) and styles.width > MOBILE_FULL_WIDTH_ABOVE:
        update["width"] = "100%"
        update["max_width"] = styles.width

    return styles.model_copy(update=update)


def adapt_for_tablet(styles: BreakpointStyle, decision: LayoutDecision) -> BreakpointStyle:
    """Derive the tablet style."""
    update = _scale_common(styles, TABLET_FONT_SCALE, TABLET_MIN_FONT_SIZE, TABLET_SPACING_SCALE)

    if decision.kind == LayoutKind.GRID and decision.columns and decision.columns > 2:
        update["width"] = "50%"
    elif decision.kind == LayoutKind.FLOW:
        update["width"] = "auto"
        update["flex"] = TABLET_FLEX_BASIS

    return styles.model_copy(update=update)


def generate_responsive_styles(
    element: VisualElement,
    decision: LayoutDecision
) -> ResponsiveStyleSet:
    """
    Build mobile, tablet and desktop styles for one element.

    Args:
        element: Normalized element.
        decision: Layout classification of the element's design.

    Returns:
        ResponsiveStyleSet; desktop is the unchanged base style.
    """
    base = extract_base_style(element)
    return ResponsiveStyleSet(
        element_id=element.id,
        mobile=adapt_for_mobile(base, decision),
        tablet=adapt_for_tablet(base, decision),
        desktop=base,
    )
