# spiritedit

This package holds the state and the rules behind the tool panel of a level editor. It has no dependencies outside the standard library and needs Python 3.10 or later.

## Modules

### `spiritedit.ui`: tool state

- `EditorToolsState` holds the current selections and brush settings:
  - the selected `ToolMode`, which is `TERRAIN`, `TERRAIN_GEN`, `FOLIAGE`, `REGIONS` or `TILES`;
  - the selected `SubTool`, or `None`;
  - the selected `BrushType`;
  - `brush_radius`, `brush_hardness` and a `LinearPixelColor` (`r`, `g`, `b`, `a`).
- `select_tool_mode` changes the mode and resets the sub tool to `None`.
- `select_sub_tool` and `select_brush_type` change the selection.
- `sub_tool_label()` returns the sub tool's label, or `"None"` when no sub tool is selected.
- `BrushType.label()` and `SubTool.label()` return the names shown in the selectors. `str(ToolMode)` returns the mode name.
- `LayeredSplatMapData` holds four texture indices and four texture strengths.

### `spiritedit.panel`: panel layout

- `tool_modes()` lists the modes in the order the selector shows them.
- `subtools_for_mode(mode)` returns the sub tools for a mode. It is empty for modes that have none.
- `brush_types_for(mode, sub_tool)` returns the brush types offered for a mode and sub tool.
- `shows_tile_build_sliders(sub_tool)` is true for the three tile build sub tools.
- `sliders_for(state)` returns the `SliderSpec`s shown for a state. Each spec has a `field`, a `label`, a `minimum` and a `maximum`.
- `save_all_commands()` returns the `EditorCommand`s that "Save All" sends, in order.

### `spiritedit.tools`: brush and tile tools

- `editing_tool_from_state(state)` returns the tool the state selects, or `None`. The tool is one of:
  - `SetHeightMap`, `SetSplatMap`;
  - `SetRegionMap`, `SetFoliageDensity`;
  - `BuildTile`, `ModifyTile`.

  The color channels are cut to 8 or 16 bits as each tool needs.
- `tool_data_from_state(state)` returns an `EditingToolData`. In it the radius is a float and the hardness is scaled from 0–100 to 0.0–1.0.
- `terrain_brush_type`, `regions_brush_type` and `foliage_brush_type` map an editor `BrushType` to the brush type of each editor. The region and foliage versions return `None` for brushes they do not support.
- `brush_edit_event(tool_data, entity, coordinates)` builds the event that a held brush sends. The event is an `EditTerrainEvent`, an `EditRegionEvent` or an `EditFoliageEvent`. It is `None` for tile tools and for brushes the tool does not support.
- `tile_edit_settings(state, cursor_overlaps_gui, editor_active, placement_parent)` returns `TileEditSettings`. The tool is disabled while the cursor is over the GUI or the editor is active.
- `apply_terrain_brush_event(state, event)` copies an `EyeDropTerrainHeight` or an `EyeDropSplatMap` result into the state's color:
  - it raises `ValueError` when a splat result has fewer than three indices;
  - it raises `TypeError` for any other event.

### `spiritedit.virtual_link`: virtual links

`VirtualLinkWorld` tracks each entity's custom properties. Any hashable value can serve as an entity.

- `set_custom_props` stores an entity's properties. They take effect when `update()` is called.
- `update()` does two things:
  - it records every `unique_name` it finds;
  - it links an entity to the entity named by its `target_unique_name`. When the entity also has a `source_unique_name`, the entity named there becomes the secondary target.
- `link_for`, `unique_name_of` and `entity_named` look up the results.
- `link_arrows(positions)` returns a `LinkArrow` for each link whose endpoints have positions. Arrows to the target are yellow and arrows to the secondary target are blue.

### `spiritedit.utils`: file and string helpers

- `walk_dir(folder, ext)` lists, in name order, the files below a folder that have the extension `ext`. Give `ext` without the dot.
- `copy_dir_recursive(src, dst)` copies a directory tree. It creates the destination if needed.
- `ensure_ends_with(text, suffix)` appends `suffix` to `text` if `text` does not already end with it.

## Example

```python
from spiritedit.ui import EditorToolsState, ToolMode, SubTool
from spiritedit.tools import tool_data_from_state, brush_edit_event

state = EditorToolsState()
state.select_tool_mode(ToolMode.TERRAIN)
state.select_sub_tool(SubTool.TERRAIN_HEIGHT)
state.color.r = 1200
state.brush_radius = 10
state.brush_hardness = 50

data = tool_data_from_state(state)
print(data.editing_tool, data.brush_radius, data.brush_hardness)
# SetHeightMap(height=1200) 10.0 0.5

event = brush_edit_event(data, entity="terrain", coordinates=(4.0, 2.5))
print(event.brush_type)
# TerrainBrushType.SET_EXACT
```

```python
from spiritedit.virtual_link import VirtualLinkWorld

world = VirtualLinkWorld()
world.set_custom_props("door", {"unique_name": "door"})
world.set_custom_props("lever", {"target_unique_name": "door"})
world.update()
print(world.link_for("lever"))
# VirtualLink(target_entity='door', secondary_target_entity=None)
```

## What it does not do

The package has no window, no drawing, no raycasting and no command-line program. It does not load or save terrain, regions, foliage, tiles or zones. It describes the tools, events, sliders and commands, and it leaves it to the host application to show them and act on them.

## Install and test

```
pip install .
pip install .[test]
pytest
```