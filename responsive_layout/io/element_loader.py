"""
Utilities for loading and normalizing canvas elements, and for writing
generated layout artifacts.
"""

import json
import math
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from responsive_layout.models import (
    ElementStyle,
    GeneratedLayout,
    Position,
    Size,
    VisualElement,
)
from responsive_layout.rendering.skeleton import skeleton_to_dict


def _get(record: Any, *names: str) -> Any:
    """Return the first non-None field among several spellings."""
    for name in names:
        if isinstance(record, Mapping):
            value = record.get(name)
        else:
            value = getattr(record, name, None)
        if value is not None:
            return value
    return None


def _to_number(value: Any) -> Optional[float]:
    """Coerce a loosely-typed value to a finite float, or None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _to_text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _normalize_style(record: Any) -> ElementStyle:
    style = _get(record, "style")
    if style is None or isinstance(style, str):
        style = {}

    # Nested style keys win over flat canvas attributes.
    fill = _get(style, "color", "fill") or _get(record, "color", "fill")
    background = (
        _get(style, "background_color", "backgroundColor")
        or _get(record, "background_color", "backgroundColor")
    )
    return ElementStyle(
        font_size=_to_number(
            _get(style, "font_size", "fontSize") or _get(record, "font_size", "fontSize")
        ),
        color=_to_text(fill),
        background_color=_to_text(background),
        # Gradient and pattern fills are objects, not color strings
        has_fill=bool(fill or background or _get(style, "has_fill")),
        padding_hint=_to_text(_get(style, "padding_hint", "paddingHint")),
        margin_hint=_to_text(_get(style, "margin_hint", "marginHint")),
    )


def normalize_element(record: Any, index: int = 0) -> VisualElement:
    """
    Convert one element-like record into a VisualElement.

    Accepts nested ``position``/``size``/``style`` records as well as the flat
    canvas spelling (``left``, ``top``, ``width``, ``height``, ``fontSize``,
    ``fill``, ``type``). Missing or malformed numbers become 0.

    Args:
        record: Mapping, object with attributes, or VisualElement.
        index: Position in the input sequence, used as the fallback id.

    Returns:
        Normalized VisualElement.
    """
    if isinstance(record, VisualElement):
        return record

    position = _get(record, "position")
    if isinstance(position, (Mapping, Position)):
        x, y = _get(position, "x"), _get(position, "y")
    else:
        x, y = _get(record, "left", "x"), _get(record, "top", "y")

    size = _get(record, "size")
    if isinstance(size, (Mapping, Size)):
        width, height = _get(size, "width"), _get(size, "height")
    else:
        width, height = _get(record, "width"), _get(record, "height")

    element_id = _get(record, "id")
    kind = _get(record, "kind", "type")

    return VisualElement(
        id=str(element_id) if element_id is not None else str(index),
        position=Position(x=_to_number(x) or 0.0, y=_to_number(y) or 0.0),
        size=Size(width=_to_number(width) or 0.0, height=_to_number(height) or 0.0),
        style=_normalize_style(record),
        kind=kind if isinstance(kind, str) else "",
    )


def normalize_elements(records: Optional[Iterable[Any]]) -> List[VisualElement]:
    """Normalize a sequence of element-like records, preserving order."""
    if records is None:
        return []
    return [normalize_element(record, index) for index, record in enumerate(records)]


class ElementLoader:
    """Loads canvas designs from JSON documents."""

    def load_document(self, document: Any) -> List[VisualElement]:
        """
        Extract and normalize elements from a parsed design document.

        Args:
            document: Either a list of elements or an object holding them
                under ``objects`` or ``elements``.

        Returns:
            List of normalized elements.
        """
        if isinstance(document, list):
            return normalize_elements(document)
        if isinstance(document, Mapping):
            for key in ("objects", "elements"):
                if isinstance(document.get(key), list):
                    return normalize_elements(document[key])
        raise ValueError("Design document must be a list of elements or contain 'objects'/'elements'")

    def load_file(self, design_path: Union[str, Path]) -> List[VisualElement]:
        """
        Load a design from a JSON file.

        Args:
            design_path: Path to the JSON design.

        Returns:
            List of normalized elements.
        """
        design_path = Path(design_path)
        if not design_path.exists():
            raise FileNotFoundError(f"Design not found: {design_path}")

        with open(design_path, "r", encoding="utf-8") as f:
            document = json.load(f)
        return self.load_document(document)


class ArtifactManager:
    """Manages writing generated layout artifacts."""

    def __init__(self, output_dir: Union[str, Path] = "outputs"):
        """
        Initialize artifact manager.

        Args:
            output_dir: Root directory for generated outputs.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def create_design_directory(self, design_id: str) -> Path:
        """Create (if needed) and return the output directory for a design."""
        design_dir = self.output_dir / design_id
        design_dir.mkdir(parents=True, exist_ok=True)
        (design_dir / "logs").mkdir(exist_ok=True)
        return design_dir

    def save_text(self, design_id: str, content: str, filename: str) -> Path:
        design_dir = self.create_design_directory(design_id)
        path = design_dir / filename
        path.write_text(content, encoding="utf-8")
        return path

    def save_json(self, design_id: str, payload: Any, filename: str) -> Path:
        return self.save_text(
            design_id,
            json.dumps(payload, indent=2, ensure_ascii=False),
            filename,
        )

    def save_layout(self, layout: GeneratedLayout) -> Dict[str, Path]:
        """
        Save every artifact of a generated layout.

        Args:
            layout: Pipeline output.

        Returns:
            Mapping of artifact name to written path.
        """
        design_id = layout.design_id
        return {
            "css": self.save_text(design_id, layout.css, "styles.css"),
            "skeleton": self.save_json(design_id, skeleton_to_dict(layout.skeleton), "skeleton.json"),
            "component": self.save_text(design_id, layout.component_source, "Component.jsx"),
            "classes": self.save_json(design_id, layout.utility_classes, "classes.json"),
            "layout": self.save_json(
                design_id,
                {
                    "decision": layout.decision.model_dump(mode="json", exclude_none=True),
                    "clusters": layout.clusters.model_dump(),
                    "breakpoints": layout.breakpoints,
                    "styles": [s.model_dump(mode="json", exclude_none=True) for s in layout.style_sets],
                    "generation_timestamp": layout.generation_timestamp.isoformat(),
                    "generation_metadata": layout.generation_metadata,
                },
                "layout.json",
            ),
        }

    def load_text(self, design_id: str, filename: str) -> str:
        path = self.output_dir / design_id / filename
        if not path.exists():
            raise FileNotFoundError(f"Artifact not found: {path}")
        return path.read_text(encoding="utf-8")
