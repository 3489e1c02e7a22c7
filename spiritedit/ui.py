"""Editor tool state: tool modes, sub tools, brush types and brush color."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass
class LinearPixelColor:
    """Four 16-bit channels that carry simple brush data."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0


@dataclass
class LayeredSplatMapData:
    """Texture indices and strengths for four splat map layers."""

    texture_indices: list[int] = field(default_factory=lambda: [0, 0, 0, 0])
    texture_strengths: list[int] = field(default_factory=lambda: [0, 0, 0, 0])


class BrushType(Enum):
    """How a brush stroke affects the painted data."""

    SET_EXACT = "Set Exact"
    CLEAR_ALL = "Clear All"
    SMOOTH = "Smooth"
    NOISE = "Noise"
    EYE_DROPPER = "Eyedropper"
    RAISE_LOWER = "Raise/Lower"

    def label(self) -> str:
        """Human-readable name shown in the brush selector."""
        return self.value


class ToolMode(Enum):
    """Top-level editing mode."""

    TERRAIN = "Terrain"
    TERRAIN_GEN = "TerrainGen"
    FOLIAGE = "Foliage"
    REGIONS = "Regions"
    TILES = "Tiles"

    def __str__(self) -> str:
        return self.value


class SubTool(Enum):
    """Tool selected within a tool mode."""

    TERRAIN_HEIGHT = "Terrain Height"
    TERRAIN_SPLAT = "Terrain Splat"
    TERRAIN_GENERATION = "Terrain Generation"
    BUILD_TILE_RECTANGLE = "Build: Rectangle"
    BUILD_TILE_LINEAR = "Build: Linear"
    BUILD_TILE_POLYGON = "Build: Polygon"
    MODIFY_TILE_DRAG_SIDES = "Modify: Drag Sides"
    MODIFY_TILE_DRAG_VERTICES = "Modify: Drag Vertices"

    def label(self) -> str:
        """Human-readable name shown in the sub tool selector."""
        return self.value


@dataclass
class EditorToolsState:
    """Current selection of the editor tools panel."""

    tool_mode: ToolMode = ToolMode.TERRAIN
    sub_tool: SubTool | None = None
    brush_type: BrushType = BrushType.SET_EXACT
    brush_radius: int = 0
    brush_hardness: int = 0
    color: LinearPixelColor = field(default_factory=LinearPixelColor)

    def select_tool_mode(self, mode: ToolMode) -> None:
        """Switch tool mode; the sub tool is reset."""
        self.tool_mode = ToolMode(mode)
        self.sub_tool = None

    def select_sub_tool(self, sub_tool: SubTool | None) -> None:
        """Choose the sub tool within the current mode."""
        self.sub_tool = None if sub_tool is None else SubTool(sub_tool)

    def select_brush_type(self, brush_type: BrushType) -> None:
        """Choose the brush type."""
        self.brush_type = BrushType(brush_type)

    def sub_tool_label(self) -> str:
        """Label of the current sub tool, or ``"None"`` when none is chosen."""
        return self.sub_tool.label() if self.sub_tool is not None else "None"