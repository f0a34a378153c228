"""
Tests for layout classification.
"""

import pytest

from responsive_layout.analysis.classifier import analyze_layout, classify_layout, dominant_axis
from responsive_layout.analysis.clustering import cluster_elements
from responsive_layout.io.element_loader import normalize_elements
from responsive_layout.models import (
    Clusters,
    InferenceOptions,
    LayoutDecision,
    LayoutKind,
    MainAxis,
)


def _records(*points):
    return [{"left": x, "top": y, "width": 100, "height": 100} for x, y in points]


def test_single_element_is_absolute():
    assert analyze_layout(_records((10, 10))) == LayoutDecision.absolute()


@pytest.mark.parametrize("width", [0, 50, 5000])
def test_single_element_is_absolute_for_any_size(width):
    records = [{"left": 0, "top": 0, "width": width, "height": width}]
    assert analyze_layout(records).kind == LayoutKind.ABSOLUTE


def test_empty_design_is_absolute():
    assert analyze_layout([]) == LayoutDecision.absolute()


def test_grid_detection():
    decision = analyze_layout(_records((0, 0), (200, 0), (0, 200), (200, 200)))
    assert decision == LayoutDecision.grid(columns=2, rows=2)


def test_horizontal_flow_detection():
    decision = analyze_layout(_records((0, 0), (150, 0), (300, 0)))
    assert decision == LayoutDecision.flow(MainAxis.HORIZONTAL)


def test_vertical_flow_detection():
    decision = analyze_layout(_records((0, 0), (0, 150), (0, 300)))
    assert decision == LayoutDecision.flow(MainAxis.VERTICAL)


def test_grid_takes_precedence_over_flow():
    """Test a wide 3x2 grid is a grid even though it also looks horizontal."""
    records = _records((0, 0), (300, 0), (600, 0), (0, 100), (300, 100), (600, 100))
    decision = analyze_layout(records)
    assert decision == LayoutDecision.grid(columns=3, rows=2)


def test_coincident_elements_are_absolute():
    assert analyze_layout(_records((40, 40), (40, 40), (40, 40))).kind == LayoutKind.ABSOLUTE


def test_diagonal_scatter_is_absolute():
    """Test equal x and y spacing is ambiguous."""
    elements = normalize_elements(_records((0, 0), (30, 30), (60, 60)))
    assert dominant_axis(elements) is None
    assert classify_layout(cluster_elements(elements), elements).kind == LayoutKind.ABSOLUTE


def test_axis_ratio_uses_input_order():
    """Test deltas are taken between neighbours in input order, not sorted order."""
    elements = normalize_elements(_records((0, 0), (300, 10), (100, 0), (200, 10)))
    # input-order dx: 300, 200, 100 -> 200; dy: 10, 10, 10 -> 10
    assert dominant_axis(elements) == MainAxis.HORIZONTAL


def test_ratio_must_exceed_twice_the_other_axis():
    elements = normalize_elements(_records((0, 0), (100, 50)))
    assert dominant_axis(elements) is None

    elements = normalize_elements(_records((0, 0), (101, 50)))
    assert dominant_axis(elements) == MainAxis.HORIZONTAL


def test_classify_without_elements_falls_back_to_absolute():
    clusters = Clusters(rows=[[0, 1]], cols=[[0], [1]])
    assert classify_layout(clusters) == LayoutDecision.absolute()


def test_threshold_option_changes_clustering():
    records = _records((0, 0), (40, 0), (0, 40), (40, 40))
    assert analyze_layout(records).kind != LayoutKind.GRID
    assert analyze_layout(records, InferenceOptions(threshold=10)) == LayoutDecision.grid(columns=2, rows=2)


def test_classification_is_deterministic():
    records = _records((0, 0), (200, 0), (0, 200), (200, 200))
    assert analyze_layout(records) == analyze_layout(records)
