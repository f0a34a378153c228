"""
CSS generation for inferred layouts.

One builder per layout kind keeps the three stylesheets independent.
"""

from typing import Dict, List, Sequence, Union

from responsive_layout.models import (
    BreakpointName,
    LayoutDecision,
    LayoutKind,
    MainAxis,
    ResponsiveStyleSet,
)
from responsive_layout.pipeline.styles import format_number

CONTAINER_SELECTOR = ".container"
ITEM_SELECTOR = ".container .item"
GAP = "1rem"

# Overrides, widest first
TABLET_MAX_WIDTH = 768
MOBILE_MAX_WIDTH = 640
FLOW_ITEM_MAX_WIDTH = 1024
CONTAINER_MAX_WIDTH = 1200


def _rule(selector: str, declarations: Dict[str, str]) -> str:
    lines = [f"{selector} {{"]
    for prop, value in declarations.items():
        lines.append(f"  {prop}: {value};")
    lines.append("}")
    return "\n".join(lines)


def _media(max_width: int, rules: List[str]) -> str:
    body = "\n".join(
        "\n".join(f"  {line}" for line in rule.splitlines()) for rule in rules
    )
    return f"@media (max-width: {max_width}px) {{\n{body}\n}}"


def css_value(value: Union[float, str]) -> str:
    """Render a style value, adding ``px`` to bare numbers."""
    if isinstance(value, (int, float)):
        return f"{format_number(value)}px"
    return value


def generate_grid_css(columns: int, rows: int) -> str:
    """Grid container collapsing to two columns, then one."""
    return "\n\n".join([
        _rule(CONTAINER_SELECTOR, {
            "display": "grid",
            "grid-template-columns": f"repeat({columns}, 1fr)",
            "grid-template-rows": f"repeat({rows}, auto)",
            "gap": GAP,
        }),
        _media(TABLET_MAX_WIDTH, [
            _rule(CONTAINER_SELECTOR, {"grid-template-columns": "repeat(2, 1fr)"}),
        ]),
        _media(MOBILE_MAX_WIDTH, [
            _rule(CONTAINER_SELECTOR, {"grid-template-columns": "1fr"}),
        ]),
    ]) + "\n"


def generate_flex_css(main_axis: MainAxis) -> str:
    """
    Wrapping flex container whose items step from thirds to halves to full width.

    Below the tablet width items always stack in a column, whatever the
    main axis.
    """
    direction = "row" if main_axis == MainAxis.HORIZONTAL else "column"
    return "\n\n".join([
        _rule(CONTAINER_SELECTOR, {
            "display": "flex",
            "flex-direction": direction,
            "flex-wrap": "wrap",
            "gap": GAP,
        }),
        _rule(ITEM_SELECTOR, {"flex": f"1 1 calc(33.333% - {GAP})"}),
        _media(FLOW_ITEM_MAX_WIDTH, [
            _rule(ITEM_SELECTOR, {"flex": f"1 1 calc(50% - {GAP})"}),
        ]),
        _media(TABLET_MAX_WIDTH, [
            _rule(CONTAINER_SELECTOR, {"flex-direction": "column"}),
        ]),
        _media(MOBILE_MAX_WIDTH, [
            _rule(ITEM_SELECTOR, {"flex": "1 1 100%"}),
        ]),
    ]) + "\n"


def generate_absolute_css() -> str:
    """Centered, relatively positioned container with narrow-screen side padding."""
    return "\n\n".join([
        _rule(CONTAINER_SELECTOR, {
            "position": "relative",
            "width": "100%",
            "max-width": f"{CONTAINER_MAX_WIDTH}px",
            "margin": "0 auto",
        }),
        _media(TABLET_MAX_WIDTH, [
            _rule(CONTAINER_SELECTOR, {"padding": f"0 {GAP}"}),
        ]),
    ]) + "\n"


def generate_layout_css(decision: LayoutDecision) -> str:
    """
    Generate the container stylesheet for a layout decision.

    Args:
        decision: Classified layout.

    Returns:
        CSS text.
    """
    if decision.kind == LayoutKind.GRID:
        return generate_grid_css(decision.columns, decision.rows)
    elif decision.kind == LayoutKind.FLOW:
        return generate_flex_css(decision.main_axis)
    return generate_absolute_css()


def element_selector(index: int) -> str:
    return f".item-{index + 1}"


def generate_element_css(style_sets: Sequence[ResponsiveStyleSet]) -> str:
    """
    Per-element rules: desktop as the base, tablet and mobile as overrides.

    Args:
        style_sets: Responsive styles in element order.

    Returns:
        CSS text, empty when there are no elements.
    """
    if not style_sets:
        return ""

    def rules_for(name: BreakpointName) -> List[str]:
        return [
            _rule(element_selector(index), {
                prop: css_value(value)
                for prop, value in style_set.get_style(name).to_css_dict().items()
            })
            for index, style_set in enumerate(style_sets)
        ]

    return "\n\n".join([
        "\n\n".join(rules_for(BreakpointName.DESKTOP)),
        _media(TABLET_MAX_WIDTH, rules_for(BreakpointName.TABLET)),
        _media(MOBILE_MAX_WIDTH, rules_for(BreakpointName.MOBILE)),
    ]) + "\n"


def generate_stylesheet(
    decision: LayoutDecision,
    style_sets: Sequence[ResponsiveStyleSet]
) -> str:
    """Container rules followed by per-element rules."""
    element_css = generate_element_css(style_sets)
    layout_css = generate_layout_css(decision)
    return f"{layout_css}\n{element_css}" if element_css else layout_css
