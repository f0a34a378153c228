"""
Skeleton structure generation and React component rendering.
"""

from typing import Any, Dict, List, Optional, Sequence

from responsive_layout.models import (
    LayoutDecision,
    LayoutKind,
    MainAxis,
    SkeletonNode,
    VisualElement,
)
from responsive_layout.pipeline.styles import format_number

CARD_CLASSES = "bg-white rounded-lg shadow p-4"


def _placeholder(index: int, role: str, class_name: str, style: Optional[Dict[str, str]] = None) -> SkeletonNode:
    return SkeletonNode(
        role=role,
        class_name=f"item item-{index + 1} {class_name}".strip(),
        style=style or {},
        label=f"Component {index + 1}",
    )


def build_grid_skeleton(columns: int, elements: Sequence[VisualElement]) -> SkeletonNode:
    """Grid container with one cell per element."""
    return SkeletonNode(
        role="grid",
        class_name=f"container grid grid-cols-1 md:grid-cols-2 lg:grid-cols-{columns} gap-4",
        children=[_placeholder(i, "cell", CARD_CLASSES) for i in range(len(elements))],
    )


def build_flex_skeleton(main_axis: MainAxis, elements: Sequence[VisualElement]) -> SkeletonNode:
    """Wrapping flex container with one item per element."""
    direction = "flex-row" if main_axis == MainAxis.HORIZONTAL else "flex-col"
    return SkeletonNode(
        role="flow",
        class_name=f"container flex {direction} flex-wrap gap-4",
        children=[
            _placeholder(i, "flow-item", f"flex-1 min-w-[250px] {CARD_CLASSES}")
            for i in range(len(elements))
        ],
    )


def build_absolute_skeleton(elements: Sequence[VisualElement]) -> SkeletonNode:
    """Relative container with children pinned at their design coordinates."""
    return SkeletonNode(
        role="canvas",
        class_name="container relative",
        children=[
            _placeholder(
                i,
                "positioned",
                "absolute",
                style={
                    "left": f"{format_number(element.left)}px",
                    "top": f"{format_number(element.top)}px",
                },
            )
            for i, element in enumerate(elements)
        ],
    )


def build_skeleton(decision: LayoutDecision, elements: Sequence[VisualElement]) -> SkeletonNode:
    """
    Build the structure tree for a layout decision.

    Args:
        decision: Classified layout.
        elements: Normalized elements, one placeholder child each.

    Returns:
        Root SkeletonNode.
    """
    if decision.kind == LayoutKind.GRID:
        return build_grid_skeleton(decision.columns, elements)
    elif decision.kind == LayoutKind.FLOW:
        return build_flex_skeleton(decision.main_axis, elements)
    return build_absolute_skeleton(elements)


def skeleton_to_dict(node: SkeletonNode) -> Dict[str, Any]:
    """Plain nested data for a skeleton, without empty fields."""
    data: Dict[str, Any] = {"role": node.role, "tag": node.tag}
    if node.class_name:
        data["class_name"] = node.class_name
    if node.style:
        data["style"] = dict(node.style)
    if node.label is not None:
        data["label"] = node.label
    data["children"] = [skeleton_to_dict(child) for child in node.children]
    return data


def _jsx_style(style: Dict[str, str]) -> str:
    pairs = ", ".join(f"{prop}: '{value}'" for prop, value in style.items())
    return f" style={{{{ {pairs} }}}}"


def _render_node(node: SkeletonNode, depth: int, key: Optional[int] = None) -> List[str]:
    pad = "  " * depth
    attrs = ""
    if key is not None:
        attrs += f" key={{{key}}}"
    if node.class_name:
        attrs += f' className="{node.class_name}"'
    if node.style:
        attrs += _jsx_style(node.style)

    lines = [f"{pad}<{node.tag}{attrs}>"]
    if node.label is not None:
        lines.append(f"{pad}  {{/* {node.label} */}}")
    for index, child in enumerate(node.children):
        lines.extend(_render_node(child, depth + 1, key=index))
    lines.append(f"{pad}</{node.tag}>")
    return lines


COMPONENT_TEMPLATE = """import {{ useState, useEffect }} from 'react'

export default function {name}() {{
  const [screenSize, setScreenSize] = useState('desktop')

  useEffect(() => {{
    const handleResize = () => {{
      const width = window.innerWidth
      if (width < 640) setScreenSize('mobile')
      else if (width < 1024) setScreenSize('tablet')
      else setScreenSize('desktop')
    }}

    handleResize()
    window.addEventListener('resize', handleResize)
    return () => window.removeEventListener('resize', handleResize)
  }}, [])

  const padding = {{ mobile: 'px-4', tablet: 'px-8', desktop: 'px-16' }}[screenSize]

  return (
    <div className={{padding}}>
{body}
    </div>
  )
}}
"""


def render_component(skeleton: SkeletonNode, name: str = "ResponsiveComponent") -> str:
    """
    Render a skeleton as a React function component.

    Args:
        skeleton: Root node from build_skeleton.
        name: Component name.

    Returns:
        JSX source text.
    """
    body = "\n".join(_render_node(skeleton, depth=3))
    return COMPONENT_TEMPLATE.format(name=name, body=body)
