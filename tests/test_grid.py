import pytest

from fill_a_pix.grid import BOUNDARY, EMPTY, SHADED, UNSHADED, UNSOLVED, Cell, PictureGrid


class TestCell:
    def test_defaults_to_unsolved_without_hint(self):
        cell = Cell()
        assert cell.state == UNSOLVED
        assert cell.hint == EMPTY
        assert not cell.has_hint
        assert not cell.is_solved

    def test_rejects_unknown_state(self):
        with pytest.raises(ValueError):
            Cell("maybe", 3)

    def test_rejects_negative_hint(self):
        with pytest.raises(ValueError):
            Cell(UNSOLVED, -1)

    def test_cycle_keeps_hint(self):
        cell = Cell(UNSOLVED, 4)
        seen = []
        for _ in range(3):
            cell = cell.cycled()
            seen.append(cell.state)
            assert cell.hint == 4
        assert seen == [SHADED, UNSHADED, UNSOLVED]


class TestPictureGrid:
    def test_new_grid_is_unsolved_and_dense(self):
        grid = PictureGrid(3, 2)
        assert len(grid.cells) == 6
        assert all(c == Cell(UNSOLVED, EMPTY) for c in grid.cells)

    def test_rejects_wrong_cell_count(self):
        with pytest.raises(ValueError):
            PictureGrid(2, 2, [Cell()] * 3)

    def test_rejects_negative_size(self):
        with pytest.raises(ValueError):
            PictureGrid(-1, 2)

    def test_empty_grid(self):
        grid = PictureGrid(0, 0)
        assert grid.cells == []
        assert grid.get(0, 0) == BOUNDARY

    def test_from_hints_normalizes_missing_hints(self):
        grid = PictureGrid.from_hints(2, 1, [None, 12])
        assert grid.get(0, 0) == Cell(UNSOLVED, EMPTY)
        assert grid.get(1, 0) == Cell(UNSOLVED, EMPTY)

    def test_row_major_indexing(self):
        grid = PictureGrid.from_hints(3, 2, [0, 1, 2, 3, 4, 5])
        assert grid.get(2, 0).hint == 2
        assert grid.get(0, 1).hint == 3
        assert grid.get(2, 1).hint == 5

    def test_out_of_range_reads_as_boundary(self):
        grid = PictureGrid.from_hints(2, 2, [1, 2, 3, 4])
        for x, y in [(-1, 0), (0, -1), (2, 0), (0, 2), (5, 5)]:
            assert grid.get(x, y) == Cell(UNSHADED, EMPTY)

    def test_out_of_range_write_is_ignored(self):
        grid = PictureGrid(2, 2)
        before = grid.copy()
        grid.set(2, 0, Cell(SHADED, 1))
        grid.set(-1, -1, Cell(SHADED, 1))
        assert grid == before

    def test_set_unsolved_keeps_hint(self):
        grid = PictureGrid.from_hints(1, 1, [7])
        assert grid.set_unsolved(0, 0, SHADED)
        assert grid.get(0, 0) == Cell(SHADED, 7)

    def test_set_unsolved_leaves_solved_cells(self):
        grid = PictureGrid.from_hints(1, 1, [7])
        grid.set(0, 0, Cell(UNSHADED, 7))
        assert not grid.set_unsolved(0, 0, SHADED)
        assert grid.get(0, 0) == Cell(UNSHADED, 7)

    def test_set_unsolved_out_of_range(self):
        grid = PictureGrid(1, 1)
        assert not grid.set_unsolved(3, 3, SHADED)


class TestNeighborhood:
    def test_corner_counts_boundary_as_unshaded(self):
        grid = PictureGrid(3, 3)
        assert grid.neighborhood_counts(0, 0) == (0, 5, 4)

    def test_corner_of_single_cell(self):
        grid = PictureGrid(1, 1)
        assert grid.neighborhood_counts(0, 0) == (0, 8, 1)
        grid.set(0, 0, Cell(SHADED, EMPTY))
        assert grid.neighborhood_counts(0, 0) == (1, 8, 0)
        assert grid.is_complete(0, 0)

    def test_boundary_never_shaded_or_unsolved(self):
        grid = PictureGrid(1, 1)
        grid.set(0, 0, Cell(SHADED, EMPTY))
        shaded, unshaded, unsolved = grid.neighborhood_counts(1, 1)
        assert (shaded, unshaded, unsolved) == (1, 8, 0)

    def test_interior_counts(self):
        grid = PictureGrid(3, 3)
        grid.set(0, 0, Cell(SHADED, EMPTY))
        grid.set(2, 2, Cell(UNSHADED, EMPTY))
        assert grid.neighborhood_counts(1, 1) == (1, 1, 7)
        assert not grid.is_complete(1, 1)

    def test_fill_only_touches_unsolved(self):
        grid = PictureGrid.from_hints(3, 3, [1, 2, 3, 4, 5, 6, 7, 8, 9])
        grid.set(1, 1, Cell(UNSHADED, 5))
        assert grid.fill_shaded(1, 1) == 8
        assert grid.get(1, 1) == Cell(UNSHADED, 5)
        assert grid.get(0, 0) == Cell(SHADED, 1)
        assert grid.fill_unshaded(1, 1) == 0

    def test_fill_at_edge_ignores_outside(self):
        grid = PictureGrid(2, 2)
        assert grid.fill_unshaded(0, 0) == 4
        assert grid.count(UNSHADED) == 4


def test_to_text():
    grid = PictureGrid.from_hints(3, 1, [None, 4, None])
    grid.set(0, 0, Cell(SHADED, EMPTY))
    grid.set(2, 0, Cell(UNSHADED, EMPTY))
    assert grid.to_text() == "#4."
