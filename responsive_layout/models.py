"""
Data models and schemas for layout inference and responsive code generation.
"""

from datetime import datetime
from enum import Enum
from typing import Optional, Dict, Any, List, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class BreakpointName(str, Enum):
    """Viewport tiers, ordered from narrowest to widest."""
    MOBILE = "mobile"
    TABLET = "tablet"
    DESKTOP = "desktop"
    WIDE = "wide"

    @property
    def rank(self) -> int:
        return list(BreakpointName).index(self)

    # Compare by tier rank rather than by the string value.
    def __lt__(self, other):
        if not isinstance(other, BreakpointName):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, BreakpointName):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, BreakpointName):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, BreakpointName):
            return NotImplemented
        return self.rank >= other.rank


class Breakpoint(BaseModel):
    """Reference width and presentation hints for a viewport tier."""
    model_config = ConfigDict(frozen=True)

    name: BreakpointName
    width: int
    scale: float
    columns: int

    @classmethod
    def mobile(cls) -> "Breakpoint":
        return cls(name=BreakpointName.MOBILE, width=375, scale=0.5, columns=1)

    @classmethod
    def tablet(cls) -> "Breakpoint":
        return cls(name=BreakpointName.TABLET, width=768, scale=0.75, columns=2)

    @classmethod
    def desktop(cls) -> "Breakpoint":
        return cls(name=BreakpointName.DESKTOP, width=1024, scale=1.0, columns=3)

    @classmethod
    def wide(cls) -> "Breakpoint":
        return cls(name=BreakpointName.WIDE, width=1440, scale=1.2, columns=4)

    @classmethod
    def for_name(cls, name: BreakpointName) -> "Breakpoint":
        """Get the reference breakpoint for a tier."""
        return {
            BreakpointName.MOBILE: cls.mobile,
            BreakpointName.TABLET: cls.tablet,
            BreakpointName.DESKTOP: cls.desktop,
            BreakpointName.WIDE: cls.wide,
        }[BreakpointName(name)]()


class Position(BaseModel):
    """Top-left corner in design-space pixels."""
    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0


class Size(BaseModel):
    """Element dimensions in design-space pixels."""
    model_config = ConfigDict(frozen=True)

    width: float = 0.0
    height: float = 0.0


class ElementStyle(BaseModel):
    """Free-form presentation hints carried by a canvas element."""
    model_config = ConfigDict(frozen=True)

    font_size: Optional[float] = None
    color: Optional[str] = None
    background_color: Optional[str] = None
    has_fill: bool = False
    padding_hint: Optional[str] = None
    margin_hint: Optional[str] = None


class VisualElement(BaseModel):
    """A single design-canvas object with numeric geometry."""
    model_config = ConfigDict(frozen=True)

    id: str = ""
    position: Position = Field(default_factory=Position)
    size: Size = Field(default_factory=Size)
    style: ElementStyle = Field(default_factory=ElementStyle)
    kind: str = ""

    @property
    def left(self) -> float:
        return self.position.x

    @property
    def top(self) -> float:
        return self.position.y

    @property
    def right(self) -> float:
        """Rightmost x coordinate covered by the element."""
        return self.position.x + self.size.width


class Clusters(BaseModel):
    """Row and column groups of element indices."""
    rows: List[List[int]] = Field(default_factory=list)
    cols: List[List[int]] = Field(default_factory=list)


class LayoutKind(str, Enum):
    """Inferred structural category of an element set."""
    GRID = "grid"
    FLOW = "flow"
    ABSOLUTE = "absolute"


class MainAxis(str, Enum):
    """Dominant direction of a flow layout."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class LayoutDecision(BaseModel):
    """Classification result; payload fields depend on the kind."""
    model_config = ConfigDict(frozen=True)

    kind: LayoutKind
    columns: Optional[int] = None
    rows: Optional[int] = None
    main_axis: Optional[MainAxis] = None

    @model_validator(mode="after")
    def _check_payload(self) -> "LayoutDecision":
        has_grid = self.columns is not None or self.rows is not None
        if self.kind == LayoutKind.GRID:
            if self.columns is None or self.rows is None:
                raise ValueError("grid layout requires both columns and rows")
            if self.columns < 1 or self.rows < 1:
                raise ValueError("grid tracks must be positive")
            if self.main_axis is not None:
                raise ValueError("grid layout does not take a main axis")
        elif self.kind == LayoutKind.FLOW:
            if self.main_axis is None:
                raise ValueError("flow layout requires a main axis")
            if has_grid:
                raise ValueError("flow layout does not take grid tracks")
        elif has_grid or self.main_axis is not None:
            raise ValueError("absolute layout carries no payload")
        return self

    @classmethod
    def grid(cls, columns: int, rows: int) -> "LayoutDecision":
        return cls(kind=LayoutKind.GRID, columns=columns, rows=rows)

    @classmethod
    def flow(cls, main_axis: MainAxis) -> "LayoutDecision":
        return cls(kind=LayoutKind.FLOW, main_axis=main_axis)

    @classmethod
    def absolute(cls) -> "LayoutDecision":
        return cls(kind=LayoutKind.ABSOLUTE)


class BreakpointStyle(BaseModel):
    """Derived style values for one element at one breakpoint."""
    model_config = ConfigDict(frozen=True)

    width: Optional[Union[float, str]] = None
    height: Optional[float] = None
    max_width: Optional[float] = None
    flex: Optional[str] = None
    font_size: Optional[float] = None
    padding: Optional[str] = None
    margin: Optional[str] = None
    color: Optional[str] = None
    background_color: Optional[str] = None

    def to_css_dict(self) -> Dict[str, Union[float, str]]:
        """Export set fields using CSS property names."""
        return {
            key.replace("_", "-"): value
            for key, value in self.model_dump(exclude_none=True).items()
        }


class ResponsiveStyleSet(BaseModel):
    """Mobile, tablet and desktop styles for a single element."""
    element_id: str
    mobile: BreakpointStyle
    tablet: BreakpointStyle
    desktop: BreakpointStyle

    def get_style(self, name: BreakpointName) -> BreakpointStyle:
        """Get style for specific breakpoint."""
        if name == BreakpointName.MOBILE:
            return self.mobile
        elif name == BreakpointName.TABLET:
            return self.tablet
        elif name == BreakpointName.DESKTOP:
            return self.desktop
        else:
            raise ValueError(f"No generated style for breakpoint: {name}")


class SkeletonNode(BaseModel):
    """Language-agnostic node of the generated structure tree."""
    role: str
    tag: str = "div"
    class_name: str = ""
    style: Dict[str, str] = Field(default_factory=dict)
    label: Optional[str] = None
    children: List["SkeletonNode"] = Field(default_factory=list)


class InferenceOptions(BaseModel):
    """Tunable inputs of the inference pipeline."""
    threshold: float = Field(default=50.0, ge=0)


class GeneratedLayout(BaseModel):
    """Complete output of one pipeline run."""
    design_id: str
    decision: LayoutDecision
    clusters: Clusters
    breakpoints: List[Union[int, float]]
    css: str
    skeleton: SkeletonNode
    component_source: str
    utility_classes: List[str] = Field(default_factory=list)
    style_sets: List[ResponsiveStyleSet] = Field(default_factory=list)
    generation_timestamp: datetime = Field(default_factory=datetime.now)
    generation_metadata: Dict[str, Any] = Field(default_factory=dict)
