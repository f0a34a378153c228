"""
Layout classification from row/column clusters and element spacing.
"""

from typing import Any, Iterable, Optional, Sequence

import numpy as np

from responsive_layout.analysis.clustering import cluster_elements
from responsive_layout.io.element_loader import normalize_elements
from responsive_layout.models import (
    Clusters,
    InferenceOptions,
    LayoutDecision,
    MainAxis,
    VisualElement,
)

# A flow needs one axis to dominate the other by this factor.
AXIS_RATIO = 2.0


def dominant_axis(elements: Sequence[VisualElement]) -> Optional[MainAxis]:
    """
    Find the axis along which consecutive elements mostly advance.

    Deltas are taken between neighbours in input order, not sorted order.

    Args:
        elements: Normalized elements.

    Returns:
        MainAxis, or None when the spacing is ambiguous or there are
        fewer than two elements.
    """
    if len(elements) < 2:
        return None

    xs = np.array([element.position.x for element in elements], dtype=float)
    ys = np.array([element.position.y for element in elements], dtype=float)
    avg_dx = float(np.abs(np.diff(xs)).mean())
    avg_dy = float(np.abs(np.diff(ys)).mean())

    if avg_dx > avg_dy * AXIS_RATIO:
        return MainAxis.HORIZONTAL
    if avg_dy > avg_dx * AXIS_RATIO:
        return MainAxis.VERTICAL
    return None


def classify_layout(
    clusters: Clusters,
    elements: Optional[Sequence[VisualElement]] = None
) -> LayoutDecision:
    """
    Decide between grid, flow and absolute layout.

    Grid is checked first: a real grid also passes weak flow tests.

    Args:
        clusters: Row and column clusters.
        elements: Elements used for the axis-ratio test.

    Returns:
        LayoutDecision.
    """
    if len(clusters.rows) > 1 and len(clusters.cols) > 1:
        return LayoutDecision.grid(columns=len(clusters.cols), rows=len(clusters.rows))

    axis = dominant_axis(elements) if elements is not None else None
    if axis is not None:
        return LayoutDecision.flow(axis)

    return LayoutDecision.absolute()


def analyze_layout(
    records: Iterable[Any],
    options: Optional[InferenceOptions] = None
) -> LayoutDecision:
    """Normalize, cluster and classify in one call."""
    options = options or InferenceOptions()
    elements = normalize_elements(records)
    clusters = cluster_elements(elements, options.threshold)
    return classify_layout(clusters, elements)
