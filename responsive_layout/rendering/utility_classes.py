"""
Tailwind-style utility class tokens per element.
"""

from typing import List, Sequence

from responsive_layout.models import VisualElement

PADDING_CLASSES = "p-2 sm:p-4 lg:p-6"


def width_classes(width: float) -> str:
    if width > 900:
        return "w-full"
    elif width > 600:
        return "w-full lg:w-3/4"
    elif width > 300:
        return "w-full md:w-1/2"
    return "w-full sm:w-auto"


def text_classes(font_size: float) -> str:
    if font_size > 32:
        return "text-2xl sm:text-3xl lg:text-4xl"
    elif font_size > 20:
        return "text-lg sm:text-xl lg:text-2xl"
    return "text-sm sm:text-base"


def generate_utility_classes(element: VisualElement) -> str:
    """
    Utility classes derived from an element's width and font size.

    Text tokens are left out when the element carries no font size.

    Args:
        element: Normalized element.

    Returns:
        Space-separated class string.
    """
    classes = [width_classes(element.size.width), PADDING_CLASSES]
    if element.style.font_size:
        classes.append(text_classes(element.style.font_size))
    return " ".join(classes)


def generate_all_utility_classes(elements: Sequence[VisualElement]) -> List[str]:
    return [generate_utility_classes(element) for element in elements]
