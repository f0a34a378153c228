"""
Tests for per-breakpoint style adaptation.
"""

import pytest

from responsive_layout.io.element_loader import normalize_element
from responsive_layout.models import LayoutDecision, MainAxis
from responsive_layout.pipeline.styles import (
    calculate_padding,
    extract_base_style,
    format_number,
    generate_responsive_styles,
    scale_spacing,
)

GRID_2 = LayoutDecision.grid(columns=2, rows=2)
GRID_3 = LayoutDecision.grid(columns=3, rows=2)
FLOW = LayoutDecision.flow(MainAxis.HORIZONTAL)
ABSOLUTE = LayoutDecision.absolute()


def _element(**fields):
    record = {"left": 0, "top": 0, "width": 200, "height": 80}
    record.update(fields)
    return normalize_element(record)


def test_base_style_defaults():
    base = extract_base_style(_element())
    assert base.width == 200
    assert base.height == 80
    assert base.font_size == 16
    assert base.padding == "0"
    assert base.margin == "0.5rem"
    assert base.color is None


@pytest.mark.parametrize("kind, fill, expected", [
    ("group", None, "1rem"),
    ("container", "#fff", "1rem"),
    ("rect", "#fff", "0.75rem"),
    ("rect", None, "0"),
    ("rect", {"type": "linear", "colorStops": []}, "0.75rem"),
    ("circle", {"source": "tile.png", "repeat": "repeat"}, "0.75rem"),
    ("text", "#000", "0"),
    ("mystery", None, "0"),
])
def test_padding_from_kind(kind, fill, expected):
    assert calculate_padding(_element(type=kind, fill=fill)) == expected


def test_explicit_spacing_hints_win():
    element = normalize_element({"kind": "group", "style": {"paddingHint": "8px", "marginHint": "2em"}})
    base = extract_base_style(element)
    assert base.padding == "8px"
    assert base.margin == "2em"


@pytest.mark.parametrize("value, factor, expected", [
    ("1rem", 0.75, "0.75rem"),
    ("0.5rem", 0.75, "0.375rem"),
    ("0.75rem", 0.85, "0.6375rem"),
    ("0", 0.75, "0"),
    ("12px 24px", 0.5, "6px 12px"),
    ("auto", 0.75, "auto"),
])
def test_scale_spacing_keeps_unit(value, factor, expected):
    assert scale_spacing(value, factor) == expected


def test_format_number():
    assert format_number(1200.0) == "1200"
    assert format_number(0.6374999999999999) == "0.6375"


def test_desktop_is_base_style():
    element = _element(fontSize=24, type="group")
    styles = generate_responsive_styles(element, GRID_3)
    assert styles.desktop == extract_base_style(element)


@pytest.mark.parametrize("decision", [GRID_2, GRID_3, FLOW])
@pytest.mark.parametrize("width", [10, 300, 301, 2000])
def test_mobile_width_is_full_for_grid_and_flow(decision, width):
    styles = generate_responsive_styles(_element(width=width), decision)
    assert styles.mobile.width == "100%"


def test_mobile_absolute_wide_element_keeps_max_width():
    styles = generate_responsive_styles(_element(width=500), ABSOLUTE)
    assert styles.mobile.width == "100%"
    assert styles.mobile.max_width == 500


def test_mobile_absolute_narrow_element_keeps_width():
    styles = generate_responsive_styles(_element(width=300), ABSOLUTE)
    assert styles.mobile.width == 300
    assert styles.mobile.max_width is None


@pytest.mark.parametrize("base, mobile, tablet", [
    (16, 14, 15),
    (40, 34, 36),
    (10, 14, 15),
])
def test_font_scaling_bounds(base, mobile, tablet):
    styles = generate_responsive_styles(_element(fontSize=base), FLOW)
    assert styles.mobile.font_size == pytest.approx(mobile)
    assert styles.tablet.font_size == pytest.approx(tablet)


def test_tablet_width_rules():
    assert generate_responsive_styles(_element(), GRID_3).tablet.width == "50%"
    assert generate_responsive_styles(_element(), GRID_2).tablet.width == 200
    assert generate_responsive_styles(_element(), ABSOLUTE).tablet.width == 200

    flow_tablet = generate_responsive_styles(_element(), FLOW).tablet
    assert flow_tablet.width == "auto"
    assert flow_tablet.flex == "1 1 45%"


def test_spacing_scaled_per_breakpoint():
    styles = generate_responsive_styles(_element(type="group"), GRID_2)
    assert (styles.mobile.padding, styles.mobile.margin) == ("0.75rem", "0.375rem")
    assert (styles.tablet.padding, styles.tablet.margin) == ("0.85rem", "0.425rem")
    assert (styles.desktop.padding, styles.desktop.margin) == ("1rem", "0.5rem")


def test_missing_optional_fields_are_omitted():
    css = generate_responsive_styles(_element(), ABSOLUTE).mobile.to_css_dict()
    assert "color" not in css
    assert "background-color" not in css
    assert "flex" not in css
    assert "max-width" not in css
