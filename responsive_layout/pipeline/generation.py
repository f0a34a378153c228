"""
End-to-end pipeline from canvas elements to responsive layout artifacts.
"""

import time
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from responsive_layout.analysis.breakpoints import detect_optimal_breakpoints
from responsive_layout.analysis.classifier import classify_layout
from responsive_layout.analysis.clustering import cluster_elements
from responsive_layout.io.element_loader import ArtifactManager, normalize_elements
from responsive_layout.models import (
    Clusters,
    GeneratedLayout,
    InferenceOptions,
    LayoutDecision,
    ResponsiveStyleSet,
    VisualElement,
)
from responsive_layout.pipeline.styles import generate_responsive_styles
from responsive_layout.rendering.css_renderer import generate_layout_css, generate_stylesheet
from responsive_layout.rendering.skeleton import build_skeleton, render_component
from responsive_layout.rendering.utility_classes import generate_all_utility_classes
from responsive_layout.utils.pipeline_logger import get_logger


class ResponsiveGenerator:
    """Infers layouts and generates responsive code for canvas designs."""

    def __init__(
        self,
        threshold: float = 50.0,
        component_name: str = "ResponsiveComponent"
    ):
        """
        Initialize the generator.

        Args:
            threshold: Clustering gap threshold in design-space units.
            component_name: Name of the generated React component.
        """
        self.options = InferenceOptions(threshold=threshold)
        self.component_name = component_name
        self.logger = get_logger()

    def analyze(self, records: Iterable[Any]) -> Tuple[List[VisualElement], Clusters, LayoutDecision]:
        """
        Normalize, cluster and classify a design.

        Args:
            records: Element-like records from the canvas.

        Returns:
            Tuple of (elements, clusters, decision).
        """
        elements = normalize_elements(records)
        clusters = cluster_elements(elements, self.options.threshold)
        return elements, clusters, classify_layout(clusters, elements)

    def convert_to_responsive_layout(self, records: Iterable[Any]) -> str:
        """Container stylesheet for a design."""
        _, _, decision = self.analyze(records)
        return generate_layout_css(decision)

    def generate_responsive_component(self, records: Iterable[Any]) -> str:
        """React component source for a design."""
        elements, _, decision = self.analyze(records)
        return render_component(build_skeleton(decision, elements), self.component_name)

    def generate_style_sets(
        self,
        elements: List[VisualElement],
        decision: LayoutDecision
    ) -> List[ResponsiveStyleSet]:
        return [generate_responsive_styles(element, decision) for element in elements]

    def generate(self, records: Iterable[Any], design_id: str = "design") -> GeneratedLayout:
        """
        Run the full pipeline.

        Args:
            records: Element-like records from the canvas.
            design_id: Identifier used for logs and saved artifacts.

        Returns:
            GeneratedLayout with every artifact.
        """
        start_time = time.time()
        records = list(records) if records is not None else []
        run_id = self.logger.log_run_start(design_id, len(records), self.options.threshold)

        try:
            elements, clusters, decision = self.analyze(records)
            self.logger.log_stage(
                run_id, design_id, "classify",
                {"rows": len(clusters.rows), "cols": len(clusters.cols), "kind": decision.kind.value},
                detail=clusters.model_dump(),
            )

            breakpoints = detect_optimal_breakpoints(elements)
            self.logger.log_stage(run_id, design_id, "breakpoints", {"widths": breakpoints})

            style_sets = self.generate_style_sets(elements, decision)
            self.logger.log_stage(
                run_id, design_id, "styles", {"elements": len(style_sets)},
                detail=[s.model_dump(mode="json", exclude_none=True) for s in style_sets],
            )

            css = generate_stylesheet(decision, style_sets)
            skeleton = build_skeleton(decision, elements)
            component_source = render_component(skeleton, self.component_name)
            utility_classes = generate_all_utility_classes(elements)
            self.logger.log_stage(
                run_id, design_id, "codegen",
                {"css_chars": len(css), "children": len(skeleton.children)},
                detail=css,
            )
        except Exception as e:
            self.logger.log_error(design_id, e)
            raise

        end_time = time.time()
        self.logger.log_run_end(run_id, design_id, decision.kind.value, start_time, end_time)

        return GeneratedLayout(
            design_id=design_id,
            decision=decision,
            clusters=clusters,
            breakpoints=breakpoints,
            css=css,
            skeleton=skeleton,
            component_source=component_source,
            utility_classes=utility_classes,
            style_sets=style_sets,
            generation_metadata={
                "element_count": len(elements),
                "threshold": self.options.threshold,
            },
        )

    def generate_and_save(
        self,
        records: Iterable[Any],
        output_dir: Path,
        design_id: str = "design",
        artifact_manager: Optional[ArtifactManager] = None
    ) -> Tuple[GeneratedLayout, Dict[str, Path]]:
        """
        Generate artifacts and write them to disk.

        Args:
            records: Element-like records from the canvas.
            output_dir: Root output directory.
            design_id: Design identifier (subdirectory name).
            artifact_manager: Optional artifact manager.

        Returns:
            Tuple of (GeneratedLayout, mapping of artifact name to path).
        """
        layout = self.generate(records, design_id=design_id)
        artifact_manager = artifact_manager or ArtifactManager(output_dir)
        return layout, artifact_manager.save_layout(layout)
