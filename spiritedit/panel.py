"""Layout of the editor tools panel: selectable options, sliders and commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from spiritedit.ui import BrushType, EditorToolsState, SubTool, ToolMode

_TOOL_MODES = (
    ToolMode.TERRAIN,
    ToolMode.TERRAIN_GEN,
    ToolMode.FOLIAGE,
    ToolMode.REGIONS,
    ToolMode.TILES,
)

_TERRAIN_SUBTOOLS = (SubTool.TERRAIN_HEIGHT, SubTool.TERRAIN_SPLAT)

_TERRAIN_GEN_SUBTOOLS = (SubTool.TERRAIN_GENERATION,)

_TILE_SUBTOOLS = (
    SubTool.BUILD_TILE_RECTANGLE,
    SubTool.BUILD_TILE_LINEAR,
    SubTool.BUILD_TILE_POLYGON,
    SubTool.MODIFY_TILE_DRAG_SIDES,
    SubTool.MODIFY_TILE_DRAG_VERTICES,
)

_TILE_BUILD_SUBTOOLS = frozenset(
    {
        SubTool.BUILD_TILE_RECTANGLE,
        SubTool.BUILD_TILE_POLYGON,
        SubTool.BUILD_TILE_LINEAR,
    }
)

_BRUSH_TYPES_HEIGHT = (
    BrushType.SET_EXACT,
    BrushType.SMOOTH,
    BrushType.NOISE,
    BrushType.EYE_DROPPER,
    BrushType.RAISE_LOWER,
)

_BRUSH_TYPES_SPLAT = (
    BrushType.SET_EXACT,
    BrushType.CLEAR_ALL,
    BrushType.EYE_DROPPER,
)

_BRUSH_TYPES_REGION = (BrushType.SET_EXACT, BrushType.EYE_DROPPER)

_BRUSH_TYPES_FOLIAGE = (BrushType.SET_EXACT, BrushType.EYE_DROPPER)


@dataclass(frozen=True)
class SliderSpec:
    """One slider of the panel.

    ``field`` names the state attribute it edits: ``"brush_radius"``,
    ``"brush_hardness"`` or a color channel such as ``"color.r"``.
    """

    field: str
    label: str
    minimum: int
    maximum: int


class EditorCommand(Enum):
    """Commands the panel sends to the editing plugins."""

    SAVE_ALL_TERRAIN_CHUNKS = "save_all_terrain_chunks"
    SAVE_ALL_REGIONS = "save_all_regions"
    SAVE_ALL_ZONES = "save_all_zones"
    SAVE_ALL_FOLIAGE = "save_all_foliage"
    SAVE_ALL_PREFABS = "save_all_prefabs"
    GENERATE_TERRAIN = "generate_terrain"


def tool_modes() -> tuple[ToolMode, ...]:
    """Tool modes in the order the mode selector lists them."""
    return _TOOL_MODES


def subtools_for_mode(mode: ToolMode) -> tuple[SubTool, ...]:
    """Sub tools offered for ``mode``; empty when the mode has none."""
    mode = ToolMode(mode)
    if mode is ToolMode.TERRAIN:
        return _TERRAIN_SUBTOOLS
    if mode is ToolMode.TERRAIN_GEN:
        return _TERRAIN_GEN_SUBTOOLS
    if mode is ToolMode.TILES:
        return _TILE_SUBTOOLS
    return ()


def brush_types_for(mode: ToolMode, sub_tool: SubTool | None) -> tuple[BrushType, ...]:
    """Brush types the panel offers for a mode and sub tool."""
    mode = ToolMode(mode)
    if mode is ToolMode.TERRAIN:
        if sub_tool is SubTool.TERRAIN_HEIGHT:
            return _BRUSH_TYPES_HEIGHT
        if sub_tool is SubTool.TERRAIN_SPLAT:
            return _BRUSH_TYPES_SPLAT
        return ()
    if mode is ToolMode.FOLIAGE:
        return _BRUSH_TYPES_FOLIAGE
    if mode is ToolMode.REGIONS:
        return _BRUSH_TYPES_REGION
    return ()


def shows_tile_build_sliders(sub_tool: SubTool | None) -> bool:
    """Whether the tile build sliders are shown for ``sub_tool``."""
    return sub_tool in _TILE_BUILD_SUBTOOLS


def _brush_sliders() -> list[SliderSpec]:
    return [
        SliderSpec("brush_radius", "Brush Radius", 0, 100),
        SliderSpec("brush_hardness", "Brush Hardness", 0, 100),
    ]


def _splat_channel_sliders(strength_label: str) -> list[SliderSpec]:
    return [
        SliderSpec("color.r", "Texture Index A (R_Channel", 0, 255),
        SliderSpec("color.g", "Texture Index B (G_Channel", 0, 255),
        SliderSpec("color.b", strength_label, 0, 255),
    ]


def _terrain_sliders(state: EditorToolsState) -> list[SliderSpec]:
    if state.sub_tool is SubTool.TERRAIN_SPLAT:
        if state.brush_type is BrushType.EYE_DROPPER:
            return _splat_channel_sliders("Texture B Strength (B_Channel")
        return _brush_sliders() + _splat_channel_sliders(
            "Texture Index B Strength (B_Channel"
        )
    if state.sub_tool is SubTool.TERRAIN_HEIGHT:
        return _brush_sliders() + [
            SliderSpec("color.r", "Height (R_Channel)", 0, 65535),
        ]
    return []


def _terrain_gen_sliders(state: EditorToolsState) -> list[SliderSpec]:
    if state.sub_tool is SubTool.TERRAIN_GENERATION:
        return [SliderSpec("color.r", "Seed  ", 0, 65535)]
    return []


def _tiles_sliders(state: EditorToolsState) -> list[SliderSpec]:
    if not shows_tile_build_sliders(state.sub_tool):
        return []
    return [
        SliderSpec("color.r", "Tile Height Offset", 0, 1024),
        SliderSpec("color.g", "Tile Type", 0, 64),
        SliderSpec("color.b", "Tile Mesh Height", 0, 256),
    ]


def _foliage_sliders(state: EditorToolsState) -> list[SliderSpec]:
    return _brush_sliders() + [
        SliderSpec("color.r", "Foliage Index (R_Channel)", 0, 64),
        SliderSpec("color.g", "Foliage Density (G_Channel)", 0, 256),
    ]


def _regions_sliders(state: EditorToolsState) -> list[SliderSpec]:
    return [SliderSpec("color.r", "Region Index (R_Channel)", 0, 64)]


_SLIDER_BUILDERS = {
    ToolMode.TERRAIN: _terrain_sliders,
    ToolMode.TERRAIN_GEN: _terrain_gen_sliders,
    ToolMode.TILES: _tiles_sliders,
    ToolMode.FOLIAGE: _foliage_sliders,
    ToolMode.REGIONS: _regions_sliders,
}


def sliders_for(state: EditorToolsState) -> list[SliderSpec]:
    """Sliders the panel shows for the current state, top to bottom."""
    return _SLIDER_BUILDERS[state.tool_mode](state)


def save_all_commands() -> tuple[EditorCommand, ...]:
    """Commands sent, in order, when "Save All" is pressed."""
    return (
        EditorCommand.SAVE_ALL_TERRAIN_CHUNKS,
        EditorCommand.SAVE_ALL_REGIONS,
        EditorCommand.SAVE_ALL_ZONES,
        EditorCommand.SAVE_ALL_FOLIAGE,
        EditorCommand.SAVE_ALL_PREFABS,
    )