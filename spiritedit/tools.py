"""Brush and tile tools derived from the editor tool state."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Union

from spiritedit.ui import BrushType, EditorToolsState, SubTool, ToolMode

Entity = Hashable
Coordinates = tuple[float, float]


def _as_u8(value: int) -> int:
    """Truncate an integer channel to its low eight bits."""
    return int(value) & 0xFF


def _as_u16(value: int) -> int:
    """Truncate an integer to its low sixteen bits."""
    return int(value) & 0xFFFF


class TerrainBrushType(Enum):
    """Brush types understood by the terrain editor."""

    SET_EXACT = "set_exact"
    SMOOTH = "smooth"
    NOISE = "noise"
    EYE_DROPPER = "eye_dropper"
    CLEAR_ALL = "clear_all"
    RAISE_LOWER = "raise_lower"


class RegionsBrushType(Enum):
    """Brush types understood by the region editor."""

    SET_EXACT = "set_exact"
    EYE_DROPPER = "eye_dropper"


class FoliageBrushType(Enum):
    """Brush types understood by the foliage editor."""

    SET_EXACT = "set_exact"
    EYE_DROPPER = "eye_dropper"


class BuildTileTool(Enum):
    """Ways of building a new tile."""

    RECTANGLE = "rectangle"
    POLYGON = "polygon"
    LINEAR = "linear"


class ModifyTileTool(Enum):
    """Ways of modifying an existing tile."""

    DRAG_SIDES = "drag_sides"
    DRAG_VERTICES = "drag_vertices"


@dataclass(frozen=True)
class SetHeightMap:
    """Terrain tool painting the height map."""

    height: int


@dataclass(frozen=True)
class SetSplatMap:
    """Terrain tool painting the splat map."""

    r: int
    g: int
    b: int


@dataclass(frozen=True)
class SetRegionMap:
    """Region tool painting a region index."""

    region_index: int


@dataclass(frozen=True)
class SetFoliageDensity:
    """Foliage tool painting a density for a foliage layer."""

    foliage_index: int
    density: int


@dataclass(frozen=True)
class BuildTile:
    """Tile tool that builds new tiles."""

    tool: BuildTileTool


@dataclass(frozen=True)
class ModifyTile:
    """Tile tool that modifies existing tiles."""

    tool: ModifyTileTool


TerrainTool = Union[SetHeightMap, SetSplatMap]
TileTool = Union[BuildTile, ModifyTile]
EditingTool = Union[SetHeightMap, SetSplatMap, SetRegionMap, SetFoliageDensity, BuildTile, ModifyTile]

_TILE_SUBTOOLS: dict[SubTool, TileTool] = {
    SubTool.BUILD_TILE_RECTANGLE: BuildTile(BuildTileTool.RECTANGLE),
    SubTool.BUILD_TILE_POLYGON: BuildTile(BuildTileTool.POLYGON),
    SubTool.BUILD_TILE_LINEAR: BuildTile(BuildTileTool.LINEAR),
    SubTool.MODIFY_TILE_DRAG_SIDES: ModifyTile(ModifyTileTool.DRAG_SIDES),
    SubTool.MODIFY_TILE_DRAG_VERTICES: ModifyTile(ModifyTileTool.DRAG_VERTICES),
}


@dataclass(frozen=True)
class EditingToolData:
    """The active tool together with the brush settings."""

    editing_tool: EditingTool
    brush_type: BrushType
    brush_radius: float
    brush_hardness: float


@dataclass(frozen=True)
class EditTerrainEvent:
    """Request to edit terrain around a point."""

    entity: Entity
    tool: TerrainTool
    brush_type: TerrainBrushType
    brush_hardness: float
    coordinates: Coordinates
    radius: float


@dataclass(frozen=True)
class EditRegionEvent:
    """Request to edit the region map around a point."""

    entity: Entity
    tool: SetRegionMap
    brush_type: RegionsBrushType
    brush_hardness: float
    coordinates: Coordinates
    radius: float


@dataclass(frozen=True)
class EditFoliageEvent:
    """Request to edit the foliage map around a point."""

    entity: Entity
    tool: SetFoliageDensity
    brush_type: FoliageBrushType
    brush_hardness: float
    coordinates: Coordinates
    radius: float


@dataclass(frozen=True)
class EyeDropTerrainHeight:
    """Terrain reported the height under the eyedropper."""

    height: int


@dataclass(frozen=True)
class EyeDropSplatMap:
    """Terrain reported the splat texture indices under the eyedropper."""

    texture_indices: Sequence[int]


@dataclass(frozen=True)
class TileEditSettings:
    """Settings pushed to the tile editor each frame.

    ``new_tile_parent`` is None when the parent should be left unchanged.
    """

    tool_enabled: bool
    build_layer_height: int
    build_tile_type: int
    selected_tool: TileTool | None
    build_mesh_height: float
    new_tile_parent: Entity | None


def editing_tool_from_state(state: EditorToolsState) -> EditingTool | None:
    """The editing tool the state selects, or None if it selects none."""
    mode = state.tool_mode
    color = state.color
    if mode is ToolMode.TERRAIN_GEN:
        return None
    if mode is ToolMode.TERRAIN:
        if state.sub_tool is SubTool.TERRAIN_HEIGHT:
            return SetHeightMap(height=_as_u16(color.r))
        if state.sub_tool is SubTool.TERRAIN_SPLAT:
            return SetSplatMap(r=_as_u8(color.r), g=_as_u8(color.g), b=_as_u8(color.b))
        return None
    if mode is ToolMode.TILES:
        return _TILE_SUBTOOLS.get(state.sub_tool) if state.sub_tool is not None else None
    if mode is ToolMode.REGIONS:
        return SetRegionMap(region_index=_as_u8(color.r))
    if mode is ToolMode.FOLIAGE:
        return SetFoliageDensity(foliage_index=_as_u8(color.r), density=_as_u8(color.g))
    return None


def tool_data_from_state(state: EditorToolsState) -> EditingToolData | None:
    """Tool and brush settings from the state, or None without a tool."""
    tool = editing_tool_from_state(state)
    if tool is None:
        return None
    return EditingToolData(
        editing_tool=tool,
        brush_type=state.brush_type,
        brush_radius=float(state.brush_radius),
        brush_hardness=state.brush_hardness / 100.0,
    )


_TERRAIN_BRUSHES = {
    BrushType.SET_EXACT: TerrainBrushType.SET_EXACT,
    BrushType.SMOOTH: TerrainBrushType.SMOOTH,
    BrushType.NOISE: TerrainBrushType.NOISE,
    BrushType.EYE_DROPPER: TerrainBrushType.EYE_DROPPER,
    BrushType.CLEAR_ALL: TerrainBrushType.CLEAR_ALL,
    BrushType.RAISE_LOWER: TerrainBrushType.RAISE_LOWER,
}

_REGIONS_BRUSHES = {
    BrushType.SET_EXACT: RegionsBrushType.SET_EXACT,
    BrushType.EYE_DROPPER: RegionsBrushType.EYE_DROPPER,
}

_FOLIAGE_BRUSHES = {
    BrushType.SET_EXACT: FoliageBrushType.SET_EXACT,
    BrushType.EYE_DROPPER: FoliageBrushType.EYE_DROPPER,
}


def terrain_brush_type(brush_type: BrushType) -> TerrainBrushType:
    """The terrain brush for an editor brush type; every type has one."""
    return _TERRAIN_BRUSHES[BrushType(brush_type)]


def regions_brush_type(brush_type: BrushType) -> RegionsBrushType | None:
    """The region brush for an editor brush type, or None if unsupported."""
    return _REGIONS_BRUSHES.get(BrushType(brush_type))


def foliage_brush_type(brush_type: BrushType) -> FoliageBrushType | None:
    """The foliage brush for an editor brush type, or None if unsupported."""
    return _FOLIAGE_BRUSHES.get(BrushType(brush_type))


def brush_edit_event(
    tool_data: EditingToolData,
    entity: Entity,
    coordinates: Coordinates,
) -> EditTerrainEvent | EditRegionEvent | EditFoliageEvent | None:
    """The edit event a held brush sends at ``coordinates`` on ``entity``.

    Tile tools send nothing: the tile editor handles its own input. Region
    and foliage tools send nothing for brush types they do not support.
    """
    tool = tool_data.editing_tool
    coords = (float(coordinates[0]), float(coordinates[1]))
    common = dict(
        entity=entity,
        tool=tool,
        brush_hardness=tool_data.brush_hardness,
        coordinates=coords,
        radius=tool_data.brush_radius,
    )
    if isinstance(tool, (SetHeightMap, SetSplatMap)):
        return EditTerrainEvent(brush_type=terrain_brush_type(tool_data.brush_type), **common)
    if isinstance(tool, SetFoliageDensity):
        brush = foliage_brush_type(tool_data.brush_type)
        return None if brush is None else EditFoliageEvent(brush_type=brush, **common)
    if isinstance(tool, SetRegionMap):
        brush = regions_brush_type(tool_data.brush_type)
        return None if brush is None else EditRegionEvent(brush_type=brush, **common)
    return None


def tile_edit_settings(
    state: EditorToolsState,
    cursor_overlaps_gui: bool,
    editor_active: bool,
    placement_parent: Entity | None,
) -> TileEditSettings:
    """Tile editor settings for the current state and editor conditions."""
    tool = editing_tool_from_state(state)
    selected = tool if isinstance(tool, (BuildTile, ModifyTile)) else None
    return TileEditSettings(
        tool_enabled=not (cursor_overlaps_gui or editor_active),
        build_layer_height=int(state.color.r),
        build_tile_type=int(state.color.g),
        selected_tool=selected,
        build_mesh_height=float(state.color.b),
        new_tile_parent=placement_parent,
    )


def apply_terrain_brush_event(
    state: EditorToolsState,
    event: EyeDropTerrainHeight | EyeDropSplatMap,
) -> None:
    """Copy eyedropped terrain values into the state's brush color."""
    if isinstance(event, EyeDropTerrainHeight):
        state.color.r = event.height
    elif isinstance(event, EyeDropSplatMap):
        indices = event.texture_indices
        if len(indices) < 3:
            raise ValueError("splat map eyedrop needs at least three texture indices")
        state.color.r, state.color.g, state.color.b = (int(i) for i in indices[:3])
    else:
        raise TypeError(f"unknown terrain brush event: {event!r}")