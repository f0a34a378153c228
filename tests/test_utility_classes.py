"""
Tests for utility class generation.
"""

import pytest

from responsive_layout.io.element_loader import normalize_element, normalize_elements
from responsive_layout.rendering.utility_classes import (
    PADDING_CLASSES,
    generate_all_utility_classes,
    generate_utility_classes,
)


@pytest.mark.parametrize("width, expected", [
    (1000, "w-full"),
    (901, "w-full"),
    (900, "w-full lg:w-3/4"),
    (700, "w-full lg:w-3/4"),
    (600, "w-full md:w-1/2"),
    (400, "w-full md:w-1/2"),
    (300, "w-full sm:w-auto"),
    (100, "w-full sm:w-auto"),
])
def test_width_tokens(width, expected):
    classes = generate_utility_classes(normalize_element({"width": width}))
    assert classes == f"{expected} {PADDING_CLASSES}"


@pytest.mark.parametrize("font_size, expected", [
    (48, "text-2xl sm:text-3xl lg:text-4xl"),
    (32, "text-lg sm:text-xl lg:text-2xl"),
    (21, "text-lg sm:text-xl lg:text-2xl"),
    (20, "text-sm sm:text-base"),
    (12, "text-sm sm:text-base"),
])
def test_font_tokens(font_size, expected):
    classes = generate_utility_classes(normalize_element({"width": 1000, "fontSize": font_size}))
    assert classes.endswith(expected)
    assert PADDING_CLASSES in classes


def test_no_font_tokens_without_font_size():
    classes = generate_utility_classes(normalize_element({"width": 100}))
    assert "text-" not in classes


def test_all_utility_classes_follow_element_order():
    elements = normalize_elements([{"width": 1000}, {"width": 100}])
    classes = generate_all_utility_classes(elements)
    assert classes[0].startswith("w-full p-2")
    assert classes[1].startswith("w-full sm:w-auto")
