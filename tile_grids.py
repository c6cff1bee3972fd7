"""
tile_grids.py - Hex footprints of the scenario map tiles

Each map tile (a1a, b2b, g1a, ...) has a fixed hex footprint. Footprints are
stored as read-only boolean numpy arrays indexed ``grid[row, col]``; ``True``
means a hex cell exists at that local position.

Usage:
    from tile_grids import grid_for, occupied_cells

    grid = grid_for("g1a")
    cells = occupied_cells(grid)   # [(col, row), ...] row-major
"""

import numpy as np


def _grid(*rows: str) -> np.ndarray:
    """Build a read-only footprint from rows of 'X' (cell) and '.' (no cell)."""
    grid = np.array([[c == "X" for c in row] for row in rows], dtype=bool)
    grid.setflags(write=False)
    return grid


def _frozen(grid: np.ndarray) -> np.ndarray:
    copy = np.array(grid, dtype=bool)
    copy.setflags(write=False)
    return copy


# === Tile footprints by family (first letter of the tile ref) ===

CONFIG_A = _grid(
    ".....",
    "XXXX.",
    "XXXXX",
    ".....",
)

CONFIG_B = _grid(
    "XXXX",
    "XXX.",
    "XXXX",
    "XXX.",
)

CONFIG_C = _grid(
    ".XX.",
    "XXX.",
    "XXXX",
    "XXX.",
)

CONFIG_D = _grid(
    ".XXX.",
    "XXXX.",
    "XXXXX",
    "XXXX.",
    ".XXX.",
)

CONFIG_E = _grid(
    ".XXXX",
    "XXXXX",
    ".XXXX",
    "XXXXX",
    ".XXXX",
)

CONFIG_F = _grid(
    "XXX",
    "XX.",
    "XXX",
    "XX.",
    "XXX",
    "XX.",
    "XXX",
    "XX.",
    "XXX",
)

CONFIG_G = _grid(
    "XXXXXXXX",
    "XXXXXXX.",
    "XXXXXXXX",
)

CONFIG_H = _grid(
    ".XXXXXX",
    "XXXXXXX",
    "...XX..",
    "..XXX..",
    "...XX..",
    "..XXX..",
    "...XX..",
)

CONFIG_I = _grid(
    "XXXXXX",
    "XXXXX.",
    "XXXXXX",
    "XXXXX.",
    "XXXXXX",
)

CONFIG_J = _grid(
    "......X.",
    ".....XXX",
    ".....XXX",
    "....XXX.",
    "XXXXXXX.",
    "XXXXXX..",
    "XXXXX...",
)

# Half tiles of the J1b piece, used by scenarios that split it
CONFIG_J1BA = _grid(
    "........",
    "....XX..",
    "....XXX.",
    "....XXX.",
    ".....XXX",
    ".....X..",
    "........",
)

CONFIG_J1BB = _grid(
    "XXXXX...",
    "XXXX....",
    "XXXX....",
    "........",
    "........",
    "........",
    "........",
)

CONFIG_K = _grid(
    "..XXXX..",
    ".XXXXX..",
    ".XXXXXX.",
    "XXX.XXX.",
    "XXX..XXX",
    "XX...XX.",
)

CONFIG_L = _grid(
    "XXXXX",
    "XXXX.",
    "XXXXX",
    "XXXX.",
    "XXXXX",
    "XXXX.",
    "XXXXX",
)

CONFIG_M = _grid(
    ".XXXX.",
    "XXXXX.",
    "XXXXXX",
    "XXXXX.",
    "XXXXXX",
    "XXXXX.",
    ".XXXX.",
)

CONFIG_N = _grid(
    "XXXXXXXX",
    "XXXXXXX.",
    "XXXXXXXX",
    "XXXXXXX.",
    "XXXXXXXX",
    "XXXXXXX.",
    "XXXXXXXX",
)

# The b-side of J1/J2 is the mirror image of the a-side
CONFIG_J_MIRRORED = _frozen(np.flipud(CONFIG_J))

# Fallback footprint for refs we have no grid for
SINGLE_CELL = _grid("X")

FAMILY_GRIDS = {
    "a": CONFIG_A,
    "b": CONFIG_B,
    "c": CONFIG_C,
    "d": CONFIG_D,
    "e": CONFIG_E,
    "f": CONFIG_F,
    "g": CONFIG_G,
    "h": CONFIG_H,
    "i": CONFIG_I,
    "j": CONFIG_J,
    "k": CONFIG_K,
    "l": CONFIG_L,
    "m": CONFIG_M,
    "n": CONFIG_N,
}

# Full-ref overrides, checked before the family letter
REF_GRIDS = {
    "j1b": CONFIG_J_MIRRORED,
    "j2b": CONFIG_J_MIRRORED,
    "j1ba": CONFIG_J1BA,
    "j1bb": CONFIG_J1BB,
}


def grid_for(ref: str) -> np.ndarray:
    """
    Look up the hex footprint for a tile ref.

    Matching is case-insensitive. Unknown or empty refs get a single-cell
    footprint so that every tile still occupies some space on the map.

    Returns:
        Read-only boolean array indexed [row, col]
    """
    r = ref.lower()
    if r in REF_GRIDS:
        return REF_GRIDS[r]
    if not r:
        return SINGLE_CELL
    return FAMILY_GRIDS.get(r[0], SINGLE_CELL)


def occupied_cells(grid: np.ndarray) -> list[tuple[int, int]]:
    """Local (col, row) of every existing cell, row by row then column."""
    return [(int(col), int(row)) for row, col in np.argwhere(grid)]


# === Per-tile image offsets ===

# (left, top) pixel offset of each tile image inside its 75x90 anchor cell.
# Only the renderer needs these; map flattening never reads them.
TILE_IMAGE_OFFSETS = {
    "a1a": (-2, 41), "a1b": (-19, 39),
    "a2a": (-20, 20), "a2b": (-20, 20),
    "a3a": (-20, 20), "a3b": (-20, 20),
    "a4a": (-20, 20), "a4b": (-20, 20),
    "b1a": (-27, -51), "b1b": (-27, -51),
    "b2a": (-27, -51), "b2b": (-27, -51),
    "b3a": (-27, -51), "b3b": (-27, -51),
    "b4a": (-27, -51), "b4b": (-27, -51),
    "c1a": (-61, -45), "c1b": (-61, -45),
    "c2a": (-61, -45), "c2b": (-61, -45),
    "d1a": (-59, -50), "d1b": (-59, -50),
    "d2a": (-59, -50), "d2b": (-59, -50),
    "e1a": (12, -44), "e1b": (12, -44),
    "f1a": (-24, -45), "f1b": (-24, -45),
    "g1a": (-22, -48), "g1b": (-22, -48),
    "g2a": (-22, -48), "g2b": (-22, -48),
    "h1a": (15, -40), "h1b": (15, -40),
    "h2a": (15, -40), "h2b": (15, -40),
    "h3a": (15, -40), "h3b": (15, -40),
    "i1a": (-25, -47), "i1b": (-25, -47),
    "i2a": (-25, -47), "i2b": (-25, -47),
    "j1a": (-25, -51), "j1b": (-24, -49),
    "j1ba": (-24, -49), "j1bb": (-24, -49),
    "j2a": (-25, -52), "j2b": (-24, -49),
    "k1a": (-56, -47), "k1b": (-71, -47),
    "k2a": (-73, -45), "k2b": (-56, -47),
    "l1a": (-25, -47), "l1b": (-25, -47),
    "l2a": (-25, -47), "l2b": (-25, -47),
    "l3a": (-25, -47), "l3b": (-25, -47),
    "m1a": (-20, -45), "m1b": (-22, -46),
    "n1a": (-19, -48), "n1b": (-19, -48),
}


def image_offset_for(ref: str) -> tuple[int, int]:
    """(left, top) pixel offset for a tile image, (0, 0) when unknown."""
    return TILE_IMAGE_OFFSETS.get(ref.lower(), (0, 0))
