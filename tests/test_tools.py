import pytest

from spiritedit.tools import (
    BuildTile,
    BuildTileTool,
    EditFoliageEvent,
    EditRegionEvent,
    EditTerrainEvent,
    EyeDropSplatMap,
    EyeDropTerrainHeight,
    FoliageBrushType,
    ModifyTile,
    ModifyTileTool,
    RegionsBrushType,
    SetFoliageDensity,
    SetHeightMap,
    SetRegionMap,
    SetSplatMap,
    TerrainBrushType,
    apply_terrain_brush_event,
    brush_edit_event,
    editing_tool_from_state,
    foliage_brush_type,
    regions_brush_type,
    terrain_brush_type,
    tile_edit_settings,
    tool_data_from_state,
)
from spiritedit.ui import BrushType, EditorToolsState, LinearPixelColor, SubTool, ToolMode


def make_state(mode, sub_tool=None, brush=BrushType.SET_EXACT, r=0, g=0, b=0, radius=10, hardness=100):
    return EditorToolsState(
        tool_mode=mode,
        sub_tool=sub_tool,
        brush_type=brush,
        brush_radius=radius,
        brush_hardness=hardness,
        color=LinearPixelColor(r=r, g=g, b=b),
    )


def test_terrain_height_tool_uses_red_channel():
    state = make_state(ToolMode.TERRAIN, SubTool.TERRAIN_HEIGHT, r=40000)
    assert editing_tool_from_state(state) == SetHeightMap(height=40000)


def test_terrain_splat_tool_uses_rgb():
    state = make_state(ToolMode.TERRAIN, SubTool.TERRAIN_SPLAT, r=3, g=7, b=200)
    assert editing_tool_from_state(state) == SetSplatMap(r=3, g=7, b=200)


def test_splat_channels_truncate_to_byte():
    state = make_state(ToolMode.TERRAIN, SubTool.TERRAIN_SPLAT, r=256, g=255, b=1)
    assert editing_tool_from_state(state) == SetSplatMap(r=0, g=255, b=1)


def test_terrain_without_sub_tool_has_no_tool():
    assert editing_tool_from_state(make_state(ToolMode.TERRAIN)) is None


@pytest.mark.parametrize("sub_tool", [None, SubTool.TERRAIN_GENERATION])
def test_terrain_gen_has_no_editing_tool(sub_tool):
    assert editing_tool_from_state(make_state(ToolMode.TERRAIN_GEN, sub_tool)) is None


@pytest.mark.parametrize(
    "sub_tool, expected",
    [
        (SubTool.BUILD_TILE_RECTANGLE, BuildTile(BuildTileTool.RECTANGLE)),
        (SubTool.BUILD_TILE_POLYGON, BuildTile(BuildTileTool.POLYGON)),
        (SubTool.BUILD_TILE_LINEAR, BuildTile(BuildTileTool.LINEAR)),
        (SubTool.MODIFY_TILE_DRAG_SIDES, ModifyTile(ModifyTileTool.DRAG_SIDES)),
        (SubTool.MODIFY_TILE_DRAG_VERTICES, ModifyTile(ModifyTileTool.DRAG_VERTICES)),
        (SubTool.TERRAIN_HEIGHT, None),
        (None, None),
    ],
)
def test_tile_tools(sub_tool, expected):
    assert editing_tool_from_state(make_state(ToolMode.TILES, sub_tool)) == expected


def test_regions_and_foliage_tools_ignore_sub_tool():
    regions = make_state(ToolMode.REGIONS, r=5)
    foliage = make_state(ToolMode.FOLIAGE, r=2, g=90)
    assert editing_tool_from_state(regions) == SetRegionMap(region_index=5)
    assert editing_tool_from_state(foliage) == SetFoliageDensity(foliage_index=2, density=90)


def test_tool_data_carries_brush_settings():
    state = make_state(ToolMode.REGIONS, brush=BrushType.EYE_DROPPER, radius=25, hardness=100)
    data = tool_data_from_state(state)
    assert data.editing_tool == SetRegionMap(region_index=0)
    assert data.brush_type is BrushType.EYE_DROPPER
    assert data.brush_radius == 25.0
    assert data.brush_hardness == 1.0


def test_tool_data_hardness_zero():
    data = tool_data_from_state(make_state(ToolMode.FOLIAGE, hardness=0))
    assert data.brush_hardness == 0.0


def test_tool_data_none_without_tool():
    assert tool_data_from_state(make_state(ToolMode.TERRAIN_GEN)) is None


def test_terrain_brush_mapping_is_total():
    mapped = {terrain_brush_type(b) for b in BrushType}
    assert mapped == set(TerrainBrushType)
    assert terrain_brush_type(BrushType.RAISE_LOWER) is TerrainBrushType.RAISE_LOWER


def test_regions_and_foliage_brush_mapping():
    assert regions_brush_type(BrushType.SET_EXACT) is RegionsBrushType.SET_EXACT
    assert regions_brush_type(BrushType.EYE_DROPPER) is RegionsBrushType.EYE_DROPPER
    assert regions_brush_type(BrushType.SMOOTH) is None
    assert foliage_brush_type(BrushType.EYE_DROPPER) is FoliageBrushType.EYE_DROPPER
    assert foliage_brush_type(BrushType.NOISE) is None


def test_terrain_edit_event():
    state = make_state(ToolMode.TERRAIN, SubTool.TERRAIN_HEIGHT, brush=BrushType.SMOOTH, r=12, radius=30)
    data = tool_data_from_state(state)
    event = brush_edit_event(data, "terrain", (1.5, -2.0))
    assert isinstance(event, EditTerrainEvent)
    assert event.entity == "terrain"
    assert event.tool == SetHeightMap(height=12)
    assert event.brush_type is TerrainBrushType.SMOOTH
    assert event.coordinates == (1.5, -2.0)
    assert event.radius == 30.0
    assert event.brush_hardness == data.brush_hardness


def test_region_edit_event_and_unsupported_brush():
    data = tool_data_from_state(make_state(ToolMode.REGIONS, r=4))
    event = brush_edit_event(data, 7, (0.0, 0.0))
    assert isinstance(event, EditRegionEvent)
    assert event.tool == SetRegionMap(region_index=4)
    assert event.brush_type is RegionsBrushType.SET_EXACT

    smooth = tool_data_from_state(make_state(ToolMode.REGIONS, brush=BrushType.SMOOTH))
    assert brush_edit_event(smooth, 7, (0.0, 0.0)) is None


def test_foliage_edit_event_and_unsupported_brush():
    data = tool_data_from_state(make_state(ToolMode.FOLIAGE, brush=BrushType.EYE_DROPPER, r=1, g=2))
    event = brush_edit_event(data, "ground", (3.0, 4.0))
    assert isinstance(event, EditFoliageEvent)
    assert event.brush_type is FoliageBrushType.EYE_DROPPER
    assert event.tool == SetFoliageDensity(foliage_index=1, density=2)

    clear = tool_data_from_state(make_state(ToolMode.FOLIAGE, brush=BrushType.CLEAR_ALL))
    assert brush_edit_event(clear, "ground", (3.0, 4.0)) is None


def test_tile_tools_send_no_brush_event():
    data = tool_data_from_state(make_state(ToolMode.TILES, SubTool.BUILD_TILE_RECTANGLE))
    assert brush_edit_event(data, "ground", (0.0, 0.0)) is None


def test_tile_edit_settings_from_state():
    state = make_state(ToolMode.TILES, SubTool.BUILD_TILE_LINEAR, r=8, g=3, b=40)
    settings = tile_edit_settings(state, False, False, "parent")
    assert settings.tool_enabled is True
    assert settings.build_layer_height == 8
    assert settings.build_tile_type == 3
    assert settings.build_mesh_height == 40.0
    assert settings.selected_tool == BuildTile(BuildTileTool.LINEAR)
    assert settings.new_tile_parent == "parent"


@pytest.mark.parametrize("overlaps, active", [(True, False), (False, True), (True, True)])
def test_tile_tool_disabled_over_gui_or_editor(overlaps, active):
    state = make_state(ToolMode.TILES, SubTool.MODIFY_TILE_DRAG_SIDES)
    assert tile_edit_settings(state, overlaps, active, None).tool_enabled is False


def test_tile_edit_settings_non_tile_mode_selects_nothing():
    state = make_state(ToolMode.REGIONS, r=2)
    settings = tile_edit_settings(state, False, False, None)
    assert settings.selected_tool is None
    assert settings.new_tile_parent is None


def test_eyedrop_height_sets_red():
    state = make_state(ToolMode.TERRAIN, g=9)
    apply_terrain_brush_event(state, EyeDropTerrainHeight(height=1234))
    assert state.color.r == 1234
    assert state.color.g == 9


def test_eyedrop_splat_sets_three_channels():
    state = make_state(ToolMode.TERRAIN)
    apply_terrain_brush_event(state, EyeDropSplatMap(texture_indices=[5, 6, 7, 8]))
    assert (state.color.r, state.color.g, state.color.b) == (5, 6, 7)


def test_eyedrop_splat_too_short():
    with pytest.raises(ValueError):
        apply_terrain_brush_event(make_state(ToolMode.TERRAIN), EyeDropSplatMap(texture_indices=[1]))


def test_unknown_event_rejected():
    with pytest.raises(TypeError):
        apply_terrain_brush_event(make_state(ToolMode.TERRAIN), "not an event")