"""
Row and column clustering of positioned elements.

Elements are sorted along one axis and grouped with a running gap test:
an element joins the current group when its coordinate is within
``threshold`` of the previous element in sorted order. Chains of close
neighbours therefore form one group even if its ends are far apart.
"""

from functools import reduce
from typing import List, Literal, Sequence, Tuple

from responsive_layout.models import Clusters, VisualElement

DEFAULT_THRESHOLD = 50.0

Axis = Literal["x", "y"]

# (groups so far, last coordinate); groups are appended to in place
_FoldState = Tuple[List[List[int]], float]


def _coordinate(element: VisualElement, axis: Axis) -> float:
    return element.position.x if axis == "x" else element.position.y


def cluster_axis(
    elements: Sequence[VisualElement],
    axis: Axis,
    threshold: float = DEFAULT_THRESHOLD
) -> List[List[int]]:
    """
    Group element indices that share a band along one axis.

    Args:
        elements: Normalized elements (not modified).
        axis: "y" groups rows, "x" groups columns.
        threshold: Maximum gap between consecutive sorted coordinates.

    Returns:
        Groups of indices into ``elements``, ordered along the axis.
    """
    ordered = sorted(
        ((index, _coordinate(element, axis)) for index, element in enumerate(elements)),
        key=lambda item: item[1],
    )

    def step(state: _FoldState, item: Tuple[int, float]) -> _FoldState:
        groups, last = state
        index, coordinate = item
        if not groups or abs(coordinate - last) > threshold:
            groups.append([index])
        else:
            groups[-1].append(index)
        return groups, coordinate

    groups, _ = reduce(step, ordered, ([], float("-inf")))
    return groups


def detect_rows(
    elements: Sequence[VisualElement],
    threshold: float = DEFAULT_THRESHOLD
) -> List[List[int]]:
    """Group elements by vertical proximity of their top edge."""
    return cluster_axis(elements, "y", threshold)


def detect_columns(
    elements: Sequence[VisualElement],
    threshold: float = DEFAULT_THRESHOLD
) -> List[List[int]]:
    """Group elements by horizontal proximity of their left edge."""
    return cluster_axis(elements, "x", threshold)


def cluster_elements(
    elements: Sequence[VisualElement],
    threshold: float = DEFAULT_THRESHOLD
) -> Clusters:
    """Compute both row and column clusters."""
    return Clusters(
        rows=detect_rows(elements, threshold),
        cols=detect_columns(elements, threshold),
    )
