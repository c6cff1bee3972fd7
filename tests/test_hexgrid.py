"""
Tests for hexgrid module.

Run with: pytest tests/test_hexgrid.py -v
"""

import math
import pytest
from hexgrid import (
    HexLayout,
    cube_to_offset,
    hex_distance,
    hex_neighbors,
    normalise_and_rotate_point,
    offset_to_cube,
    render_svg_outline,
    rotate_cube,
)
from scenario_map import PositionedOverlay, PositionedTile


SAMPLE_POINTS = [(0, 0), (3, 0), (0, 1), (2, 3), (-1, -1), (5, -4), (-3, 7)]


class TestCubeCoordinates:
    """Tests for offset/cube conversion."""

    def test_origin(self):
        """Test that (0, 0) is the cube origin."""
        assert offset_to_cube(0, 0) == (0, 0, 0)

    def test_cube_sums_to_zero(self):
        """Test the cube invariant x + y + z == 0."""
        for col, row in SAMPLE_POINTS:
            assert sum(offset_to_cube(col, row)) == 0

    def test_conversion_is_reversible(self):
        """Test offset -> cube -> offset, including negative rows."""
        for col, row in SAMPLE_POINTS:
            assert cube_to_offset(*offset_to_cube(col, row)) == (col, row)

    def test_odd_row_shift(self):
        """Test that odd rows sit half a cell to the right."""
        # (0, 1) is south-east of (0, 0); (0, 2) is two rows down, one cell left in cube x
        assert offset_to_cube(0, 1) == (0, -1, 1)
        assert offset_to_cube(0, 2) == (-1, -1, 2)


class TestRotateCube:
    """Tests for rotate_cube function."""

    def test_zero_turns(self):
        """Test that zero turns leaves the vector alone."""
        assert rotate_cube(1, -1, 0, 0) == (1, -1, 0)

    def test_one_turn_east_to_south_east(self):
        """Test that one clockwise turn moves east to south-east."""
        assert rotate_cube(1, -1, 0, 1) == (0, -1, 1)

    def test_six_turns_is_identity(self):
        """Test the six-fold symmetry."""
        assert rotate_cube(2, -3, 1, 6) == (2, -3, 1)

    def test_negative_turns(self):
        """Test that -1 turn equals 5 turns."""
        assert rotate_cube(2, -3, 1, -1) == rotate_cube(2, -3, 1, 5)

    def test_three_turns_is_negation(self):
        """Test that half a revolution points the other way."""
        assert rotate_cube(2, -3, 1, 3) == (-2, 3, -1)


class TestNormaliseAndRotatePoint:
    """Tests for the local-to-global transform."""

    @pytest.mark.parametrize("turns", range(-7, 8))
    def test_origin_lands_on_ref_point(self, turns):
        """Test that the origin always maps exactly onto the ref point."""
        for ref_point in [(0, 0), (4, 3), (-2, 5)]:
            for origin in [(0, 0), (1, 2), (3, 1)]:
                assert normalise_and_rotate_point(turns, ref_point, origin, origin) == ref_point

    def test_root_frame_is_identity(self):
        """Test that zero turns with default points changes nothing."""
        for point in SAMPLE_POINTS:
            assert normalise_and_rotate_point(0, (0, 0), (0, 0), point) == point

    def test_translation_keeps_adjacency(self):
        """Test that moving by an odd number of rows keeps neighbours adjacent."""
        # (0, 1) is the south-east neighbour of (0, 0); hinged onto (2, 1) it must
        # be the south-east neighbour of (2, 1)
        assert normalise_and_rotate_point(0, (2, 1), (0, 0), (0, 1)) == (3, 2)
        assert (3, 2) in hex_neighbors(2, 1)

    def test_one_turn_rotates_clockwise(self):
        """Test that east of the origin ends up south-east after one turn."""
        assert normalise_and_rotate_point(1, (0, 0), (0, 0), (1, 0)) == (0, 1)

    def test_period_six(self):
        """Test that turns are taken modulo six."""
        for point in SAMPLE_POINTS:
            assert (normalise_and_rotate_point(7, (1, 1), (2, 0), point)
                    == normalise_and_rotate_point(1, (1, 1), (2, 0), point))

    @pytest.mark.parametrize("turns", range(6))
    def test_rotation_preserves_distance(self, turns):
        """Test that rotation and translation keep hex distances."""
        for a in SAMPLE_POINTS:
            for b in SAMPLE_POINTS:
                ga = normalise_and_rotate_point(turns, (3, 3), (1, 2), a)
                gb = normalise_and_rotate_point(turns, (3, 3), (1, 2), b)
                assert hex_distance(ga, gb) == hex_distance(a, b)


class TestAdjacency:
    """Tests for hex_neighbors and hex_distance."""

    @pytest.mark.parametrize("cell", [(0, 0), (2, 1), (-1, -1), (4, 6)])
    def test_neighbors_are_distance_one(self, cell):
        """Test that all six neighbours are one step away and distinct."""
        neighbors = hex_neighbors(*cell)
        assert len(set(neighbors)) == 6
        assert all(hex_distance(cell, n) == 1 for n in neighbors)

    def test_even_row_neighbors(self):
        """Test the neighbour list of an even-row cell."""
        assert hex_neighbors(1, 0) == [(1, -1), (2, 0), (1, 1), (0, 1), (0, 0), (0, -1)]

    def test_odd_row_neighbors(self):
        """Test the neighbour list of an odd-row cell."""
        assert hex_neighbors(1, 1) == [(2, 0), (2, 1), (2, 2), (1, 2), (0, 1), (1, 0)]

    def test_distance(self):
        """Test a few distances."""
        assert hex_distance((0, 0), (0, 0)) == 0
        assert hex_distance((0, 0), (3, 0)) == 3
        assert hex_distance((0, 0), (0, 2)) == 2
        assert hex_distance((0, 0), (2, 4)) == 4


class TestHexLayout:
    """Tests for the pixel layout."""

    @pytest.fixture
    def layout(self):
        return HexLayout()

    def test_hex_to_pixel(self, layout):
        """Test cell box corners for even and odd rows."""
        assert layout.hex_to_pixel(0, 0) == (0, 0)
        assert layout.hex_to_pixel(2, 0) == (152, 0)
        assert layout.hex_to_pixel(1, 1) == (114, 67)

    def test_hex_center(self, layout):
        """Test cell centers."""
        assert layout.hex_center(0, 0) == (38, 45)

    def test_hex_polygon(self, layout):
        """Test that a hex polygon is a regular hexagon around the center."""
        poly = layout.hex_polygon(0, 0)
        assert len(poly.exterior.coords) == 7  # closed ring
        assert poly.area == pytest.approx(3 * math.sqrt(3) / 2 * 45 ** 2)
        assert poly.centroid.x == pytest.approx(38)
        assert poly.centroid.y == pytest.approx(45)

    def test_pointy_top(self, layout):
        """Test that the hex has a vertex straight above its center."""
        _, min_y, _, max_y = layout.hex_polygon(0, 0).bounds
        assert max_y - min_y == pytest.approx(90)

    def test_footprint_ignores_duplicates(self, layout):
        """Test that repeated cells do not change the footprint."""
        single = layout.footprint([(0, 0)])
        repeated = layout.footprint([(0, 0), (0, 0)])
        assert repeated.area == pytest.approx(single.area)

    def test_footprint_grows_with_cells(self, layout):
        """Test that adding a neighbour grows the footprint."""
        single = layout.footprint([(0, 0)])
        pair = layout.footprint([(0, 0), (1, 0)])
        assert pair.area > single.area
        assert pair.contains(single.centroid)


class TestRenderSvgOutline:
    """Tests for render_svg_outline function."""

    def test_writes_svg(self, tmp_path):
        """Test that an outline with an overlay label is written."""
        tiles = [PositionedTile("b1a", 0, 0, 0), PositionedTile("b1a", 1, 0, 0)]
        overlays = [PositionedOverlay("door-stone", 1, 0, "horizontal", ((1, 0),))]
        output = tmp_path / "map.svg"

        render_svg_outline(HexLayout(), tiles, overlays, str(output))

        content = output.read_text()
        assert "<svg" in content
        assert "door-stone" in content
        assert content.count("<polygon") == 2

    def test_no_tiles_writes_nothing(self, tmp_path):
        """Test that an empty map produces no file."""
        output = tmp_path / "empty.svg"
        render_svg_outline(HexLayout(), [], [], str(output))
        assert not output.exists()
