"""
Utility classes for scenario map flattening.

This module provides the small value types shared by the flattening engine
and its consumers: hex-space bounds and the per-branch turn axis that chains
tile frames together through doors.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

from hexgrid import normalise_and_rotate_point


@dataclass
class MapBounds:
    """Inclusive rectangular bounds in hex (col, row) space.

    Attributes:
        min_col: Leftmost column
        max_col: Rightmost column
        min_row: Top row
        max_row: Bottom row
    """
    min_col: int
    max_col: int
    min_row: int
    max_row: int

    @classmethod
    def zero(cls) -> 'MapBounds':
        """The degenerate bounds reported for a map with no cells."""
        return cls(min_col=0, max_col=0, min_row=0, max_row=0)

    @classmethod
    def from_cells(cls, cells: Iterable[Tuple[int, int]]) -> 'MapBounds':
        """Fold bounds over (col, row) cells; no cells gives the zero bounds."""
        bounds = None
        for col, row in cells:
            if bounds is None:
                bounds = cls(min_col=col, max_col=col, min_row=row, max_row=row)
            else:
                bounds.expand_to(col, row)
        return bounds if bounds is not None else cls.zero()

    @property
    def width(self) -> int:
        """Number of columns spanned."""
        return self.max_col - self.min_col + 1

    @property
    def height(self) -> int:
        """Number of rows spanned."""
        return self.max_row - self.min_row + 1

    @property
    def center(self) -> Tuple[int, int]:
        """Middle cell of the bounds as (col, row), rounded down."""
        return (
            (self.min_col + self.max_col) // 2,
            (self.min_row + self.max_row) // 2
        )

    def expand_to(self, col: int, row: int) -> None:
        """Grow the bounds in place so that (col, row) is inside."""
        self.min_col = min(self.min_col, col)
        self.max_col = max(self.max_col, col)
        self.min_row = min(self.min_row, row)
        self.max_row = max(self.max_row, row)

    def contains(self, col: int, row: int) -> bool:
        """Check if a cell is within bounds."""
        return (self.min_col <= col <= self.max_col and
                self.min_row <= row <= self.max_row)

    def padded(self, cells: int) -> 'MapBounds':
        """Return new bounds grown by a margin of cells on every side."""
        return MapBounds(
            min_col=self.min_col - cells,
            max_col=self.max_col + cells,
            min_row=self.min_row - cells,
            max_row=self.max_row + cells
        )

    def as_tuple(self) -> Tuple[int, int, int, int]:
        """Return bounds as (min_col, max_col, min_row, max_row) tuple."""
        return (self.min_col, self.max_col, self.min_row, self.max_row)


@dataclass(frozen=True)
class TurnAxis:
    """Transform context inherited by one branch of the tile tree.

    The root tile uses the default axis. Every door hands its child a new
    axis whose ref point is the door cell in global space and whose origin
    is the door cell in the child's own frame.

    Attributes:
        ref_point: Global (col, row) the origin is pinned to
        origin: Local (col, row) of the branch's rotation centre
    """
    ref_point: Tuple[int, int] = (0, 0)
    origin: Tuple[int, int] = (0, 0)

    def place(self, turns: int, coord: Tuple[int, int]) -> Tuple[int, int]:
        """Rotate a local cell by turns and move it into global space.

        Args:
            turns: Rotation of the tile the cell belongs to
            coord: Local (col, row)

        Returns:
            Global (col, row)
        """
        return normalise_and_rotate_point(turns, self.ref_point, self.origin, coord)

    def through_door(
        self,
        turns: int,
        room1: Tuple[int, int],
        room2: Tuple[int, int]
    ) -> Tuple[Tuple[int, int], 'TurnAxis']:
        """Follow a door from the current tile into its child tile.

        Args:
            turns: Rotation of the parent tile
            room1: Door cell in the parent tile's frame
            room2: Door cell in the child tile's frame

        Returns:
            Tuple of (global hinge cell, axis for the child tile)
        """
        hinge = self.place(turns, room1)
        return hinge, TurnAxis(ref_point=hinge, origin=room2)
