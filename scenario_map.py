"""
scenario_map.py - Flatten a scenario's tile tree into global hex space

A scenario map is a tree: the root tile has doors, each door leads to a child
tile, and so on. Every tile is described in its own local frame. Flattening
walks the tree, chaining one TurnAxis per door so that the door cell in the
child's frame lands on the door cell in the parent's frame, and emits:

- one PositionedTile per occupied cell (grid cells, overlay cells, door cells)
- one PositionedOverlay per drawable overlay, doors included
- the bounds of all positioned tiles

Output order is fixed by the tree: a tile's own cells first, then each door
and its subtree in door order. Cells shared by several tiles are kept as
separate entries.

Usage:
    from scenario_data import load_scenario
    from scenario_map import build

    result = build(load_scenario(Path("scenarios/1.json")), player_count=3)
    print(result.bounds, len(result.tiles), len(result.overlays))
"""

from dataclasses import asdict, dataclass, field
from typing import Iterator, Optional, Union

from map_utils import MapBounds, TurnAxis
from overlay_names import door_image_name, overlay_image_name
from scenario_data import MapTileData, Scenario
from tile_grids import grid_for, occupied_cells

ROOT_AXIS = TurnAxis()


@dataclass(frozen=True)
class PositionedTile:
    """A map cell in global hex space, tagged with the tile it came from."""
    ref: str
    col: int
    row: int
    turns: int


@dataclass(frozen=True)
class PositionedOverlay:
    """
    A drawable overlay in global hex space.

    Attributes:
        name: Image name from overlay_names
        col: Column of the first covered cell (render anchor)
        row: Row of the first covered cell
        direction: Orientation carried over from the scenario
        cells: Every covered cell, in the scenario's order
    """
    name: str
    col: int
    row: int
    direction: str
    cells: tuple[tuple[int, int], ...]


@dataclass(frozen=True)
class TilePlacement:
    """Where one whole tile image goes: its first grid cell in global space."""
    ref: str
    turns: int
    anchor_col: int
    anchor_row: int

    @property
    def tile_id(self) -> str:
        return f"{self.ref}-{self.anchor_col}-{self.anchor_row}"


@dataclass(frozen=True)
class PositionedMonster:
    """A monster standee's start cell for the chosen party size."""
    name: str
    level: str
    col: int
    row: int


@dataclass
class MapResult:
    """Everything produced by flattening one scenario map."""
    tiles: list[PositionedTile]
    overlays: list[PositionedOverlay]
    bounds: MapBounds
    placements: list[TilePlacement] = field(default_factory=list)
    starting_locations: list[tuple[int, int]] = field(default_factory=list)
    monsters: list[PositionedMonster] = field(default_factory=list)

    def to_dict(self) -> dict:
        """JSON-ready form of the result."""
        return {
            "bounds": asdict(self.bounds),
            "tiles": [asdict(t) for t in self.tiles],
            "overlays": [
                {
                    "name": o.name,
                    "col": o.col,
                    "row": o.row,
                    "direction": o.direction,
                    "cells": [list(c) for c in o.cells],
                }
                for o in self.overlays
            ],
            "placements": [
                {**asdict(p), "id": p.tile_id} for p in self.placements
            ],
            "starting_locations": [list(c) for c in self.starting_locations],
            "monsters": [asdict(m) for m in self.monsters],
        }


def build(
    scenario: Union[Scenario, MapTileData],
    player_count: Optional[int] = None,
) -> MapResult:
    """
    Flatten a scenario map into global hex space.

    Args:
        scenario: Scenario, or the root MapTileData of one
        player_count: Party size used to pick monster levels; no monsters
            are placed when None

    Returns:
        MapResult with tiles, overlays and bounds, plus per-tile placements,
        starting locations and monster start cells
    """
    root = scenario.map_tile_data if isinstance(scenario, Scenario) else scenario

    tiles = map_tile_data_to_list(root)
    bounds = MapBounds.from_cells((t.col, t.row) for t in tiles)

    return MapResult(
        tiles=tiles,
        overlays=position_overlays(root),
        bounds=bounds,
        placements=collect_tile_placements(root),
        starting_locations=collect_starting_locations(root),
        monsters=position_monsters(root, player_count) if player_count is not None else [],
    )


# === Tile Flattening ===

def map_tile_data_to_list(data: MapTileData, axis: TurnAxis = ROOT_AXIS) -> list[PositionedTile]:
    """
    Every occupied cell of a tile and its subtree, in global space.

    Order: the tile's grid cells (row-major), cells covered by its overlays
    (these may lie outside the grid, e.g. corridor pieces), then for each door
    the door cell followed by the child tile's cells.
    """
    def positioned(coord: tuple[int, int]) -> PositionedTile:
        col, row = axis.place(data.turns, coord)
        return PositionedTile(ref=data.ref, col=col, row=row, turns=data.turns)

    map_tiles = [positioned(cell) for cell in occupied_cells(grid_for(data.ref))]

    for overlay in data.overlays:
        map_tiles.extend(positioned(cell) for cell in overlay.cells)

    door_tiles = []
    for door in data.doors:
        hinge, child_axis = axis.through_door(data.turns, door.room1, door.room2)
        # The door cell belongs to the parent tile
        door_tiles.append(PositionedTile(ref=data.ref, col=hinge[0], row=hinge[1], turns=data.turns))
        door_tiles.extend(map_tile_data_to_list(door.map_tile_data, child_axis))

    return map_tiles + door_tiles


# === Overlay Positioning ===

def position_overlays(data: MapTileData, axis: TurnAxis = ROOT_AXIS) -> list[PositionedOverlay]:
    """
    Drawable overlays of a tile and its subtree, in global space.

    Overlays whose image name is empty, or that cover no cells, are skipped.
    Each door is emitted as a one-cell overlay on its hinge, just before the
    overlays of the tile behind it.
    """
    result = []

    for overlay in data.overlays:
        name = overlay_image_name(overlay.ref.type, overlay.ref.sub_type, overlay.direction)
        if not name:
            continue
        cells = tuple(axis.place(data.turns, cell) for cell in overlay.cells)
        if not cells:
            continue
        result.append(PositionedOverlay(
            name=name,
            col=cells[0][0],
            row=cells[0][1],
            direction=overlay.direction,
            cells=cells,
        ))

    for door in data.doors:
        hinge, child_axis = axis.through_door(data.turns, door.room1, door.room2)
        name = door_image_name(door.sub_type, door.direction)
        if name:
            result.append(PositionedOverlay(
                name=name,
                col=hinge[0],
                row=hinge[1],
                direction=door.direction,
                cells=(hinge,),
            ))
        result.extend(position_overlays(door.map_tile_data, child_axis))

    return result


# === Per-Tile Data ===

def walk_tiles(data: MapTileData, axis: TurnAxis = ROOT_AXIS) -> Iterator[tuple[MapTileData, TurnAxis]]:
    """Yield every tile of the tree with its axis, parents before children."""
    yield data, axis
    for door in data.doors:
        _, child_axis = axis.through_door(data.turns, door.room1, door.room2)
        yield from walk_tiles(door.map_tile_data, child_axis)


def collect_tile_placements(root: MapTileData) -> list[TilePlacement]:
    """One placement per tile, anchored on its first grid cell."""
    placements = []
    for data, axis in walk_tiles(root):
        cells = occupied_cells(grid_for(data.ref))
        anchor = axis.place(data.turns, cells[0]) if cells else (0, 0)
        placements.append(TilePlacement(
            ref=data.ref,
            turns=data.turns,
            anchor_col=anchor[0],
            anchor_row=anchor[1],
        ))
    return placements


def collect_starting_locations(root: MapTileData) -> list[tuple[int, int]]:
    """Global cells of every starting-location overlay."""
    locations = []
    for data, axis in walk_tiles(root):
        for overlay in data.overlays:
            if overlay.ref.type == "starting-location":
                locations.extend(axis.place(data.turns, cell) for cell in overlay.cells)
    return locations


def position_monsters(root: MapTileData, player_count: int) -> list[PositionedMonster]:
    """
    Monster start cells for a party size.

    Monsters absent at this party size are left out. Within each tile, elites
    come first so they get the lowest standee numbers.
    """
    monsters = []
    for data, axis in walk_tiles(root):
        active = [(m, m.level_for(player_count)) for m in data.monsters]
        active = [(m, level) for m, level in active if level != "none"]
        active.sort(key=lambda item: item[1] != "elite")
        for monster, level in active:
            col, row = axis.place(data.turns, (monster.initial_x, monster.initial_y))
            monsters.append(PositionedMonster(name=monster.monster, level=level, col=col, row=row))
    return monsters
