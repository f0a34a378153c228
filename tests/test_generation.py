"""
Tests for the end-to-end generation pipeline.
"""

import pytest

from responsive_layout.models import LayoutDecision, LayoutKind, MainAxis
from responsive_layout.pipeline.generation import ResponsiveGenerator
from responsive_layout.rendering.css_renderer import generate_grid_css


@pytest.fixture
def grid_design():
    """Four cards on a 2x2 grid."""
    return [
        {"id": "a", "type": "rect", "left": 0, "top": 0, "width": 400, "height": 200, "fill": "#eee"},
        {"id": "b", "type": "rect", "left": 450, "top": 0, "width": 400, "height": 200, "fill": "#eee"},
        {"id": "c", "type": "text", "left": 0, "top": 250, "width": 400, "height": 40, "fontSize": 24},
        {"id": "d", "type": "group", "left": 450, "top": 250, "width": 400, "height": 200},
    ]


def test_generate_grid_design(grid_design):
    layout = ResponsiveGenerator().generate(grid_design, design_id="cards")

    assert layout.design_id == "cards"
    assert layout.decision == LayoutDecision.grid(columns=2, rows=2)
    assert layout.breakpoints == [375, 768, 850]
    assert layout.model_dump(mode="json")["breakpoints"] == [375, 768, 850]
    assert isinstance(layout.breakpoints[-1], int)
    assert layout.css.startswith(generate_grid_css(2, 2))
    assert len(layout.skeleton.children) == 4
    assert "lg:grid-cols-2" in layout.component_source
    assert layout.utility_classes[2] == "w-full md:w-1/2 p-2 sm:p-4 lg:p-6 text-lg sm:text-xl lg:text-2xl"
    assert [s.element_id for s in layout.style_sets] == ["a", "b", "c", "d"]
    assert all(s.mobile.width == "100%" for s in layout.style_sets)
    assert layout.generation_metadata == {"element_count": 4, "threshold": 50.0}


def test_generate_does_not_mutate_input(grid_design):
    snapshot = [dict(record) for record in grid_design]
    ResponsiveGenerator().generate(grid_design)
    assert grid_design == snapshot


def test_generate_is_deterministic(grid_design):
    generator = ResponsiveGenerator()
    first = generator.generate(grid_design)
    second = generator.generate(grid_design)

    assert first.css == second.css
    assert first.component_source == second.component_source
    assert first.skeleton == second.skeleton
    assert first.utility_classes == second.utility_classes
    assert first.breakpoints == second.breakpoints


def test_generate_empty_design():
    layout = ResponsiveGenerator().generate([])

    assert layout.decision.kind == LayoutKind.ABSOLUTE
    assert layout.skeleton.children == []
    assert layout.utility_classes == []
    assert layout.style_sets == []
    assert ".container {" in layout.css


def test_convert_to_responsive_layout():
    generator = ResponsiveGenerator()
    css = generator.convert_to_responsive_layout([{"left": 0, "top": 0}, {"left": 0, "top": 150}, {"left": 0, "top": 300}])
    assert "flex-direction: column;" in css


def test_generate_responsive_component_name():
    generator = ResponsiveGenerator(component_name="Landing")
    source = generator.generate_responsive_component([{"left": 5, "top": 5}])
    assert "export default function Landing()" in source


def test_analyze_respects_threshold():
    records = [{"left": 0, "top": 0}, {"left": 40, "top": 0}, {"left": 0, "top": 40}, {"left": 40, "top": 40}]

    _, clusters, decision = ResponsiveGenerator(threshold=10).analyze(records)
    assert clusters.rows == [[0, 1], [2, 3]]
    assert decision == LayoutDecision.grid(columns=2, rows=2)

    _, _, decision = ResponsiveGenerator().analyze(records)
    assert decision == LayoutDecision.flow(MainAxis.HORIZONTAL)


def test_generate_and_save(tmp_path, grid_design):
    layout, paths = ResponsiveGenerator().generate_and_save(grid_design, output_dir=tmp_path, design_id="cards")

    assert paths["css"].read_text(encoding="utf-8") == layout.css
    assert paths["component"].name == "Component.jsx"
    assert (tmp_path / "cards" / "skeleton.json").exists()
