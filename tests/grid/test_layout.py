"""Tests for grid geometry and index-to-cell mapping."""

import math

import pytest

from contact_sheet.grid import layout
from contact_sheet.type_defs import GridGeometry


class TestGeometry:
    """Square grid sizing from an entry count."""

    @pytest.mark.parametrize("count", range(0, 150))
    def test_side_is_ceiling_square_root(self, count: int) -> None:
        geo = layout.compute_geometry(count, (256, 256))
        assert geo.side == math.ceil(math.sqrt(count))
        assert geo.canvas_width == geo.side * geo.cell_width
        assert geo.canvas_height == geo.side * geo.cell_height

    @pytest.mark.parametrize(
        ("count", "side"),
        [(0, 0), (1, 1), (2, 2), (4, 2), (5, 3), (9, 3), (10, 4)],
    )
    def test_known_sides(self, count: int, side: int) -> None:
        assert layout.grid_side(count) == side

    def test_large_perfect_square_is_exact(self) -> None:
        """Integer square roots avoid float error on big counts."""
        n = (10**8 + 7) ** 2
        assert layout.grid_side(n) == 10**8 + 7
        assert layout.grid_side(n + 1) == 10**8 + 8

    def test_rectangular_cells(self) -> None:
        geo = layout.compute_geometry(5, (100, 40))
        assert geo == GridGeometry(
            side=3, cell_width=100, cell_height=40,
            canvas_width=300, canvas_height=120,
        )
        assert geo.cell_count == 9  # noqa: PLR2004
        assert geo.canvas_size == (300, 120)
        assert geo.cell_size == (100, 40)

    def test_empty_catalog_is_degenerate(self) -> None:
        geo = layout.compute_geometry(0, (256, 256))
        assert geo.is_empty
        assert geo.canvas_size == (0, 0)

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            layout.compute_geometry(-1, (256, 256))

    @pytest.mark.parametrize("cell", [(0, 10), (10, 0), (-5, 5)])
    def test_non_positive_cell_rejected(self, cell: tuple[int, int]) -> None:
        with pytest.raises(ValueError, match="cell size"):
            layout.compute_geometry(4, cell)


class TestCellPosition:
    """Catalog index to (row, col) mapping."""

    @pytest.mark.parametrize("side", range(1, 9))
    def test_round_is_half_away_from_zero(self, side: int) -> None:
        for index in range(side * side):
            assert layout.cell_position(index, side) == (
                math.floor(index / side + 0.5),
                index % side,
            )

    def test_round_examples(self) -> None:
        # side 3: 2/3 rounds up to row 1, 8/3 rounds up past the grid
        assert layout.cell_position(2, 3) == (1, 2)
        assert layout.cell_position(4, 3) == (1, 1)
        assert layout.cell_position(8, 3) == (3, 2)

    def test_round_ties_go_up(self) -> None:
        assert layout.cell_position(1, 2) == (1, 1)   # 0.5 -> 1
        assert layout.cell_position(2, 4) == (1, 2)   # 0.5 -> 1
        assert layout.cell_position(3, 2) == (2, 1)   # 1.5 -> 2
        assert layout.cell_position(10, 4) == (3, 2)  # 2.5 -> 3

    def test_round_exact_for_large_indices(self) -> None:
        side = 2 * 10**9
        index = 3 * 10**9  # exactly 1.5
        assert layout.cell_position(index, side) == (2, 10**9)

    def test_half_even_matches_builtin_round(self) -> None:
        assert layout.cell_position(1, 2, "half_even") == (0, 1)
        assert layout.cell_position(3, 2, "half_even") == (2, 1)
        assert layout.cell_position(10, 4, "half_even") == (2, 2)
        for index in range(36):
            row, _ = layout.cell_position(index, 6, "half_even")
            assert row == round(index / 6)

    @pytest.mark.parametrize("rounding", ["round", "half_even", "floor"])
    @pytest.mark.parametrize("side", range(1, 13))
    def test_cells_are_unique(self, side: int, rounding: str) -> None:
        cells = [
            layout.cell_position(i, side, rounding)  # type: ignore[arg-type]
            for i in range(side * side)
        ]
        assert len(set(cells)) == len(cells)

    @pytest.mark.parametrize("side", range(1, 13))
    def test_floor_stays_inside_grid(self, side: int) -> None:
        for index in range(side * side):
            row, col = layout.cell_position(index, side, "floor")
            assert 0 <= row < side
            assert 0 <= col < side
            assert row * side + col == index

    def test_zero_side_rejected(self) -> None:
        with pytest.raises(ValueError, match="side"):
            layout.cell_position(0, 0)

    def test_negative_index_rejected(self) -> None:
        with pytest.raises(ValueError, match="index"):
            layout.cell_position(-1, 3)

    def test_unknown_rounding_rejected(self) -> None:
        with pytest.raises(ValueError, match="rounding"):
            layout.cell_position(1, 3, "ceil")  # type: ignore[arg-type]

    def test_iter_cells(self) -> None:
        assert list(layout.iter_cells(4, 2, "floor")) == [
            (0, 0, 0), (1, 0, 1), (2, 1, 0), (3, 1, 1),
        ]
