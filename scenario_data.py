"""
scenario_data.py - Scenario map records

Immutable records for a scenario's recursive map description, decoded from
the camelCase JSON scenario files:

    {"id": 1, "title": "Black Barrow", "angle": 0,
     "mapTileData": {"ref": "L1a", "turns": 0, "overlays": [...],
                     "monsters": [...], "doors": [
         {"subType": "stone", "direction": "diagonal-left",
          "room1X": 4, "room1Y": 0, "room2X": 0, "room2Y": 6,
          "mapTileData": {...}}]}}

Each door owns exactly one child tile, so the records form a strict tree.

Usage:
    from scenario_data import load_scenario

    scenario = load_scenario(Path("scenarios/1.json"))
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional


class ScenarioDataError(ValueError):
    """Scenario JSON is missing a field or has a field of the wrong type."""


def _object(data: Any, path: str) -> dict:
    if not isinstance(data, dict):
        raise ScenarioDataError(f"{path}: expected an object, got {type(data).__name__}")
    return data


def _require(data: dict, key: str, path: str) -> Any:
    if key not in data or data[key] is None:
        raise ScenarioDataError(f"{path}: missing field '{key}'")
    return data[key]


def _int(value: Any, path: str) -> int:
    # bool is an int subclass but never a valid coordinate
    if isinstance(value, bool) or not isinstance(value, int):
        raise ScenarioDataError(f"{path}: expected an integer, got {value!r}")
    return value


def _str(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise ScenarioDataError(f"{path}: expected a string, got {value!r}")
    return value


def _list(data: dict, key: str, path: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ScenarioDataError(f"{path}.{key}: expected a list, got {value!r}")
    return value


@dataclass(frozen=True)
class OverlayRef:
    """What an overlay is: its category plus optional variant details."""
    type: str
    sub_type: Optional[str] = None
    id: Optional[str] = None
    amount: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict, path: str = "ref") -> 'OverlayRef':
        _object(data, path)
        sub_type = data.get("subType")
        ref_id = data.get("id")
        amount = data.get("amount")
        return cls(
            type=_str(_require(data, "type", path), f"{path}.type"),
            sub_type=_str(sub_type, f"{path}.subType") if sub_type is not None else None,
            id=str(ref_id) if ref_id is not None else None,
            amount=_int(amount, f"{path}.amount") if amount is not None else None,
        )


@dataclass(frozen=True)
class Overlay:
    """
    A map feature placed on one or more cells of its tile.

    Attributes:
        ref: Category and variant
        direction: Orientation, e.g. "horizontal", "vertical", "diagonal-left"
        cells: Local (col, row) cells covered, in order
    """
    ref: OverlayRef
    direction: str
    cells: tuple[tuple[int, int], ...] = ()

    @classmethod
    def from_dict(cls, data: dict, path: str = "overlay") -> 'Overlay':
        _object(data, path)
        cells = []
        for i, cell in enumerate(_list(data, "cells", path)):
            cell_path = f"{path}.cells[{i}]"
            if not isinstance(cell, list):
                raise ScenarioDataError(f"{cell_path}: expected a list, got {cell!r}")
            # Cells with fewer than two numbers carry no position
            if len(cell) < 2:
                continue
            cells.append((_int(cell[0], cell_path), _int(cell[1], cell_path)))
        return cls(
            ref=OverlayRef.from_dict(_require(data, "ref", path), f"{path}.ref"),
            direction=_str(_require(data, "direction", path), f"{path}.direction"),
            cells=tuple(cells),
        )


@dataclass(frozen=True)
class Monster:
    """A monster standee's start cell and its level at each party size."""
    monster: str
    initial_x: int
    initial_y: int
    two_player: str
    three_player: str
    four_player: str

    def level_for(self, player_count: int) -> str:
        """Level ("normal", "elite" or "none") for a party size; 2 players is the default."""
        if player_count == 3:
            return self.three_player
        if player_count == 4:
            return self.four_player
        return self.two_player

    @classmethod
    def from_dict(cls, data: dict, path: str = "monster") -> 'Monster':
        _object(data, path)
        return cls(
            monster=_str(_require(data, "monster", path), f"{path}.monster"),
            initial_x=_int(_require(data, "initialX", path), f"{path}.initialX"),
            initial_y=_int(_require(data, "initialY", path), f"{path}.initialY"),
            two_player=_str(_require(data, "twoPlayer", path), f"{path}.twoPlayer"),
            three_player=_str(_require(data, "threePlayer", path), f"{path}.threePlayer"),
            four_player=_str(_require(data, "fourPlayer", path), f"{path}.fourPlayer"),
        )


@dataclass(frozen=True)
class Door:
    """
    A connection from a parent tile to the child tile it owns.

    Attributes:
        sub_type: Door style, e.g. "stone", "dark-fog", "corridor-earth-1"
        direction: Door orientation
        room1: Door cell in the parent tile's frame
        room2: Door cell in the child tile's frame
        map_tile_data: The child tile
    """
    sub_type: str
    direction: str
    room1: tuple[int, int]
    room2: tuple[int, int]
    map_tile_data: 'MapTileData'

    @classmethod
    def from_dict(cls, data: dict, path: str = "door") -> 'Door':
        _object(data, path)

        def coord(key: str) -> int:
            return _int(_require(data, key, path), f"{path}.{key}")

        return cls(
            sub_type=_str(_require(data, "subType", path), f"{path}.subType"),
            direction=_str(_require(data, "direction", path), f"{path}.direction"),
            room1=(coord("room1X"), coord("room1Y")),
            room2=(coord("room2X"), coord("room2Y")),
            map_tile_data=MapTileData.from_dict(
                _require(data, "mapTileData", path), f"{path}.mapTileData"
            ),
        )


@dataclass(frozen=True)
class MapTileData:
    """One map tile of the scenario and everything hanging off its doors."""
    ref: str
    turns: int = 0
    doors: tuple[Door, ...] = ()
    overlays: tuple[Overlay, ...] = ()
    monsters: tuple[Monster, ...] = ()

    @classmethod
    def from_dict(cls, data: dict, path: str = "mapTileData") -> 'MapTileData':
        _object(data, path)
        turns = data.get("turns", 0)
        return cls(
            ref=_str(_require(data, "ref", path), f"{path}.ref"),
            turns=_int(turns, f"{path}.turns"),
            doors=tuple(
                Door.from_dict(d, f"{path}.doors[{i}]")
                for i, d in enumerate(_list(data, "doors", path))
            ),
            overlays=tuple(
                Overlay.from_dict(o, f"{path}.overlays[{i}]")
                for i, o in enumerate(_list(data, "overlays", path))
            ),
            monsters=tuple(
                Monster.from_dict(m, f"{path}.monsters[{i}]")
                for i, m in enumerate(_list(data, "monsters", path))
            ),
        )


@dataclass(frozen=True)
class Scenario:
    """A scenario's identity plus the root of its map tile tree."""
    id: int
    title: str
    map_tile_data: MapTileData
    angle: float = 0.0
    additional_monsters: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict) -> 'Scenario':
        _object(data, "scenario")
        angle = data.get("angle", 0.0)
        if isinstance(angle, bool) or not isinstance(angle, (int, float)):
            raise ScenarioDataError(f"scenario.angle: expected a number, got {angle!r}")
        return cls(
            id=_int(_require(data, "id", "scenario"), "scenario.id"),
            title=_str(_require(data, "title", "scenario"), "scenario.title"),
            map_tile_data=MapTileData.from_dict(
                _require(data, "mapTileData", "scenario"), "scenario.mapTileData"
            ),
            angle=float(angle),
            additional_monsters=tuple(
                _str(m, f"scenario.additionalMonsters[{i}]")
                for i, m in enumerate(_list(data, "additionalMonsters", "scenario"))
            ),
        )


def load_scenario(json_path: Path) -> Scenario:
    """Load and decode a scenario JSON file."""
    with open(json_path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ScenarioDataError(f"{json_path}: invalid JSON ({e})") from e
    return Scenario.from_dict(data)
