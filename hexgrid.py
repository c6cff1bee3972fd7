"""
hexgrid.py - Core hex grid geometry for scenario maps

Pointy-top hexagons in odd-row offset coordinates (col, row): odd rows are
shifted half a cell to the right. Rotation and translation are done in cube
coordinates, where both are exact integer operations.
"""

from dataclasses import dataclass
from typing import Iterable

import numpy as np
import svgwrite
from shapely.geometry import Polygon
from shapely.ops import unary_union


# === Pixel Layout Constants ===
CELL_STEP_X = 76   # horizontal distance between cell origins in a row
CELL_STEP_Y = 67   # vertical distance between rows
CELL_SIZE = 90     # point-to-point hex height

# === SVG Style Constants ===
HEX_FILL_COLOR = "#e8e0cc"
HEX_STROKE_COLOR = "#333333"
HEX_STROKE_WIDTH = 1.0
OVERLAY_FILL_COLOR = "#b03a2e"
OVERLAY_FONT_SIZE = 9
COORD_FONT_SIZE = 8
COORD_FONT_COLOR = "#666666"


# === Cube Coordinates ===

def offset_to_cube(col: int, row: int) -> tuple[int, int, int]:
    """Convert odd-row offset (col, row) to cube (x, y, z) with x + y + z == 0."""
    x = col - (row - (row & 1)) // 2
    z = row
    return (x, -x - z, z)


def cube_to_offset(x: int, y: int, z: int) -> tuple[int, int]:
    """Convert cube (x, y, z) back to odd-row offset (col, row)."""
    col = x + (z - (z & 1)) // 2
    return (col, z)


def rotate_cube(x: int, y: int, z: int, turns: int) -> tuple[int, int, int]:
    """Rotate a cube vector about the cube origin by 60 degrees clockwise per turn."""
    for _ in range(turns % 6):
        x, y, z = -z, -x, -y
    return (x, y, z)


def normalise_and_rotate_point(
    turns: int,
    ref_point: tuple[int, int],
    origin: tuple[int, int],
    tile_coord: tuple[int, int],
) -> tuple[int, int]:
    """
    Map a tile-local hex to global map coordinates.

    The tile is rotated by ``turns`` around ``origin`` and then moved so that
    ``origin`` lands exactly on ``ref_point``. This is how a door hinges a
    child tile onto its parent: the door cell in the parent frame is the
    ref point, the door cell in the child frame is the origin.

    Args:
        turns: Number of 60 degree clockwise steps (any integer)
        ref_point: Global (col, row) that origin maps onto
        origin: Local (col, row) of the rotation centre
        tile_coord: Local (col, row) to place

    Returns:
        Global (col, row)
    """
    ox, oy, oz = offset_to_cube(*origin)
    tx, ty, tz = offset_to_cube(*tile_coord)
    dx, dy, dz = rotate_cube(tx - ox, ty - oy, tz - oz, turns)
    rx, ry, rz = offset_to_cube(*ref_point)
    return cube_to_offset(rx + dx, ry + dy, rz + dz)


# === Adjacency ===

def hex_neighbors(col: int, row: int) -> list[tuple[int, int]]:
    """
    Get the 6 neighboring hex coordinates.

    Returns neighbors clockwise starting at the north-east edge.
    """
    # Offset depends on whether the row is even or odd (odd rows sit right)
    if row & 1:
        return [
            (col + 1, row - 1),  # NE
            (col + 1, row),      # E
            (col + 1, row + 1),  # SE
            (col, row + 1),      # SW
            (col - 1, row),      # W
            (col, row - 1),      # NW
        ]
    else:
        return [
            (col, row - 1),      # NE
            (col + 1, row),      # E
            (col, row + 1),      # SE
            (col - 1, row + 1),  # SW
            (col - 1, row),      # W
            (col - 1, row - 1),  # NW
        ]


def hex_distance(a: tuple[int, int], b: tuple[int, int]) -> int:
    """Number of steps between two hexes."""
    ax, ay, az = offset_to_cube(*a)
    bx, by, bz = offset_to_cube(*b)
    return (abs(ax - bx) + abs(ay - by) + abs(az - bz)) // 2


# === Pixel Geometry ===

@dataclass(frozen=True)
class HexLayout:
    """
    Pixel placement of hex cells for map consumers.

    Attributes:
        step_x: Horizontal distance between cells in the same row
        step_y: Vertical distance between rows
        cell_size: Hex height, point to point
    """
    step_x: float = CELL_STEP_X
    step_y: float = CELL_STEP_Y
    cell_size: float = CELL_SIZE

    @property
    def radius(self) -> float:
        """Distance from hex center to vertex."""
        return self.cell_size / 2

    def hex_to_pixel(self, col: int, row: int) -> tuple[float, float]:
        """Top-left corner of the cell's bounding box (y grows downward)."""
        x = col * self.step_x + (row & 1) * self.step_x / 2
        y = row * self.step_y
        return (x, y)

    def hex_center(self, col: int, row: int) -> tuple[float, float]:
        # Rows interleave, so the vertical center uses the full cell height
        x, y = self.hex_to_pixel(col, row)
        return (x + self.step_x / 2, y + self.cell_size / 2)

    def hex_polygon(self, col: int, row: int) -> Polygon:
        """
        Generate a Shapely Polygon for the hex at (col, row).

        Returns:
            Shapely Polygon with 6 vertices (pointy-top orientation)
        """
        cx, cy = self.hex_center(col, row)
        # 30, 90, 150, ... degrees puts a vertex at the top and bottom
        angles = np.radians(30 + 60 * np.arange(6))
        xs = cx + self.radius * np.cos(angles)
        ys = cy + self.radius * np.sin(angles)
        return Polygon(list(zip(xs.tolist(), ys.tolist())))

    def footprint(self, cells: Iterable[tuple[int, int]]):
        """Union of the hex polygons of all cells (duplicates are harmless)."""
        polygons = [self.hex_polygon(col, row) for col, row in set(cells)]
        return unary_union(polygons)


def render_svg_outline(
    layout: HexLayout,
    tiles: list,
    overlays: list,
    output_path: str,
    show_coords: bool = True,
    margin_px: int = 20,
) -> None:
    """
    Render a flattened map as hex outlines with overlay names.

    Convenience output for checking map geometry by eye.

    Args:
        layout: HexLayout used for pixel placement
        tiles: Positioned tiles (anything with .col and .row)
        overlays: Positioned overlays (.name, .col, .row, .cells)
        output_path: Path to output SVG file
        show_coords: Whether to display (col, row) labels
        margin_px: Margin around the map in pixels
    """
    if not tiles:
        print("No tiles to render")
        return

    cells = sorted({(t.col, t.row) for t in tiles})
    min_x, min_y, max_x, max_y = layout.footprint(cells).bounds

    width_px = (max_x - min_x) + 2 * margin_px
    height_px = (max_y - min_y) + 2 * margin_px

    dwg = svgwrite.Drawing(
        output_path,
        size=(f"{width_px:.0f}px", f"{height_px:.0f}px"),
        viewBox=f"0 0 {width_px:.0f} {height_px:.0f}",
    )
    dwg.add(dwg.rect(insert=(0, 0), size=("100%", "100%"), fill="white"))

    def to_svg(x: float, y: float) -> tuple[float, float]:
        return (x - min_x + margin_px, y - min_y + margin_px)

    # === Layer 1: Map cells ===
    for col, row in cells:
        poly = layout.hex_polygon(col, row)
        svg_points = [to_svg(x, y) for x, y in list(poly.exterior.coords)[:-1]]
        dwg.add(dwg.polygon(
            points=svg_points,
            fill=HEX_FILL_COLOR,
            stroke=HEX_STROKE_COLOR,
            stroke_width=HEX_STROKE_WIDTH,
        ))

    # === Layer 2: Overlay markers and names ===
    for overlay in overlays:
        for col, row in overlay.cells:
            sx, sy = to_svg(*layout.hex_center(col, row))
            dwg.add(dwg.circle(
                center=(sx, sy),
                r=layout.radius / 3,
                fill=OVERLAY_FILL_COLOR,
                fill_opacity=0.5,
            ))
        sx, sy = to_svg(*layout.hex_center(overlay.col, overlay.row))
        dwg.add(dwg.text(
            overlay.name,
            insert=(sx, sy - layout.radius / 2),
            text_anchor="middle",
            font_size=OVERLAY_FONT_SIZE,
            fill="#000000",
            font_family="sans-serif",
        ))

    # === Layer 3: Coordinate labels (optional) ===
    if show_coords:
        for col, row in cells:
            sx, sy = to_svg(*layout.hex_center(col, row))
            dwg.add(dwg.text(
                f"{col},{row}",
                insert=(sx, sy + layout.radius / 2),
                text_anchor="middle",
                dominant_baseline="middle",
                font_size=COORD_FONT_SIZE,
                fill=COORD_FONT_COLOR,
                font_family="monospace",
            ))

    dwg.save()
    print(f"Saved SVG to {output_path} ({width_px:.0f}x{height_px:.0f}px)")
