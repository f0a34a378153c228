#!/usr/bin/env python3
"""
Command-line interface for the responsive layout inference pipeline.
"""

import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from responsive_layout.analysis.breakpoints import detect_optimal_breakpoints
from responsive_layout.io.element_loader import ArtifactManager, ElementLoader
from responsive_layout.pipeline.generation import ResponsiveGenerator
from responsive_layout.rendering.utility_classes import generate_all_utility_classes
from responsive_layout.utils.pipeline_logger import get_logger

# Load environment variables
load_dotenv()


def _load_design(input_arg):
    """Load elements from a design file, or None after printing the error."""
    design_path = Path(input_arg)
    if not design_path.exists():
        print(f"❌ Error: Design not found: {design_path}")
        return None

    try:
        return ElementLoader().load_file(design_path)
    except ValueError as e:
        print(f"❌ Error: Could not read design {design_path}: {e}")
        return None


def cmd_analyze(args):
    """Classify the layout of a design."""
    elements = _load_design(args.input)
    if elements is None:
        return 1

    generator = ResponsiveGenerator(threshold=args.threshold)
    _, clusters, decision = generator.analyze(elements)

    print(json.dumps({
        "decision": decision.model_dump(mode="json", exclude_none=True),
        "clusters": clusters.model_dump(),
    }, indent=2))
    return 0


def cmd_breakpoints(args):
    """Print the breakpoint widths of a design."""
    elements = _load_design(args.input)
    if elements is None:
        return 1

    print(json.dumps(detect_optimal_breakpoints(elements)))
    return 0


def cmd_classes(args):
    """Print utility classes for every element."""
    elements = _load_design(args.input)
    if elements is None:
        return 1

    classes = generate_all_utility_classes(elements)
    print(json.dumps(
        [{"id": element.id, "classes": token} for element, token in zip(elements, classes)],
        indent=2,
    ))
    return 0


def cmd_generate(args):
    """Generate responsive CSS, skeleton and component from a design."""
    print("🚀 Generating responsive layout...")

    design_path = Path(args.input)
    elements = _load_design(design_path)
    if elements is None:
        return 1

    design_id = args.design_id or design_path.stem
    print(f"📁 Design ID: {design_id}")
    print(f"🧩 Elements: {len(elements)}")

    generator = ResponsiveGenerator(threshold=args.threshold, component_name=args.component_name)
    layout, paths = generator.generate_and_save(
        elements,
        output_dir=Path(args.output),
        design_id=design_id,
        artifact_manager=ArtifactManager(args.output),
    )

    decision = layout.decision
    print(f"✅ Layout: {decision.kind.value}")
    if decision.columns is not None:
        print(f"   ▦ Grid: {decision.columns} columns x {decision.rows} rows")
    if decision.main_axis is not None:
        print(f"   ➜ Main axis: {decision.main_axis.value}")
    print(f"📐 Breakpoints: {', '.join(str(width) for width in layout.breakpoints)}")
    print("💾 Artifacts:")
    for name, path in paths.items():
        print(f"   {name}: {path}")

    return 0


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Responsive layout inference from absolutely positioned designs",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--log-level",
        choices=["NONE", "INFO", "DEBUG", "TRACE"],
        help="Pipeline debug level (default: LAYOUT_DEBUG_LEVEL or NONE)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    analyze_parser = subparsers.add_parser("analyze", help="Classify the layout of a design")
    analyze_parser.add_argument("--input", "-i", required=True, help="Path to design JSON")
    analyze_parser.add_argument("--threshold", type=float, default=50.0, help="Clustering threshold")

    bp_parser = subparsers.add_parser("breakpoints", help="Print breakpoint widths")
    bp_parser.add_argument("--input", "-i", required=True, help="Path to design JSON")

    classes_parser = subparsers.add_parser("classes", help="Print utility classes per element")
    classes_parser.add_argument("--input", "-i", required=True, help="Path to design JSON")

    gen_parser = subparsers.add_parser("generate", help="Generate responsive code")
    gen_parser.add_argument("--input", "-i", required=True, help="Path to design JSON")
    gen_parser.add_argument("--output", "-o", default="outputs", help="Output directory")
    gen_parser.add_argument("--design-id", "-s", help="Design identifier (default: from filename)")
    gen_parser.add_argument("--threshold", type=float, default=50.0, help="Clustering threshold")
    gen_parser.add_argument("--component-name", default="ResponsiveComponent", help="React component name")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.log_level:
        get_logger().configure(level=args.log_level)

    try:
        if args.command == "analyze":
            return cmd_analyze(args)
        elif args.command == "breakpoints":
            return cmd_breakpoints(args)
        elif args.command == "classes":
            return cmd_classes(args)
        elif args.command == "generate":
            return cmd_generate(args)
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user")
        return 130
    except Exception as e:
        print(f"\n❌ Error: {str(e)}")
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
