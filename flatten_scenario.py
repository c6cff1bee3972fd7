#!/usr/bin/env python3
"""
flatten_scenario.py - Flatten a scenario map file to positioned JSON

Reads a scenario JSON file, places every tile, overlay and door in one global
hex coordinate space, and writes the result as JSON.

Usage:
    python flatten_scenario.py scenarios/1.json
    python flatten_scenario.py scenarios/1.json -o output/1_map.json --players 3
    python flatten_scenario.py scenarios/1.json --svg output/1_map.svg
"""

import argparse
import json
import sys
from pathlib import Path

from hexgrid import HexLayout, render_svg_outline
from scenario_data import ScenarioDataError, load_scenario
from scenario_map import build

DEFAULT_OUTPUT_DIR = Path("output")


def flatten_scenario_file(
    scenario_path: Path,
    output_path: Path | None = None,
    player_count: int | None = None,
    svg_path: Path | None = None,
    indent: int | None = 2,
) -> Path:
    """
    Flatten one scenario file and write the positioned map.

    Args:
        scenario_path: Scenario JSON to read
        output_path: Where to write the JSON (default output/<stem>_map.json)
        player_count: Party size for monster placement (None skips monsters)
        svg_path: Optional path for an SVG outline of the map
        indent: JSON indent, None for compact output

    Returns:
        Path of the written JSON file
    """
    scenario = load_scenario(scenario_path)
    print(f"Scenario {scenario.id}: {scenario.title}")

    result = build(scenario, player_count=player_count)
    bounds = result.bounds
    print(f"  Tiles: {len(result.placements)} ({len(result.tiles)} cells)")
    print(f"  Overlays: {len(result.overlays)}")
    print(f"  Bounds: cols {bounds.min_col}..{bounds.max_col}, rows {bounds.min_row}..{bounds.max_row}")
    if player_count is not None:
        print(f"  Monsters ({player_count} players): {len(result.monsters)}")

    if output_path is None:
        output_path = DEFAULT_OUTPUT_DIR / f"{scenario_path.stem}_map.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    data = {"id": scenario.id, "title": scenario.title, **result.to_dict()}
    with open(output_path, "w") as f:
        json.dump(data, f, indent=indent)
    print(f"Saved map to {output_path}")

    if svg_path is not None:
        svg_path.parent.mkdir(parents=True, exist_ok=True)
        render_svg_outline(HexLayout(), result.tiles, result.overlays, str(svg_path))

    return output_path


def main(argv: list[str] | None = None) -> int:
    """Command-line interface for scenario map flattening."""
    parser = argparse.ArgumentParser(description='Flatten a scenario map to global hex coordinates')
    parser.add_argument('scenario', type=Path, help='Path to scenario JSON file')
    parser.add_argument('-o', '--output', type=Path, default=None,
                        help='Output JSON path (default: output/<name>_map.json)')
    parser.add_argument('--players', type=int, choices=[2, 3, 4], default=None,
                        help='Party size for monster placement')
    parser.add_argument('--svg', type=Path, default=None,
                        help='Also write an SVG outline of the map')
    parser.add_argument('--compact', action='store_true',
                        help='Write JSON without indentation')

    args = parser.parse_args(argv)

    try:
        flatten_scenario_file(
            args.scenario,
            output_path=args.output,
            player_count=args.players,
            svg_path=args.svg,
            indent=None if args.compact else 2,
        )
    except (ScenarioDataError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
