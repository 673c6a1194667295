import itertools

import pytest

from ligclash.core.domain.exceptions import (
    ConfigurationError,
    EmptyInputError,
    GridIndexOutOfRange,
)
from ligclash.core.domain.models.bounding_box import compute_bounding_box
from ligclash.core.domain.models.voxel_grid import build_grid, grid_dimensions, query_cell
from ligclash.core.utils.geometry import distance, squared_distance


@pytest.fixture
def ligand(make_atom):
    return [
        make_atom("C", 0.0, 0.0, 0.0),
        make_atom("C", 1.52, 0.31, -0.47),
        make_atom("O", 2.03, 1.64, 0.12),
        make_atom("N", -1.18, 0.77, 0.95),
    ]


class TestGeometry:
    def test_distance_is_symmetric(self, ligand):
        for a, b in itertools.product(ligand, repeat=2):
            assert distance(a, b) == distance(b, a)

    def test_distance_to_self_is_zero(self, ligand):
        for atom in ligand:
            assert distance(atom, atom) == 0.0

    def test_squared_distance_of_coordinates(self):
        assert squared_distance((0.0, 0.0, 0.0), (1.0, 2.0, 2.0)) == pytest.approx(9.0)
        assert distance((0.0, 0.0, 0.0), (1.0, 2.0, 2.0)) == pytest.approx(3.0)


class TestBoundingBox:
    def test_min_not_above_max_and_atoms_inside(self, ligand):
        box = compute_bounding_box(ligand)
        assert box.min_x <= box.max_x
        assert box.min_y <= box.max_y
        assert box.min_z <= box.max_z
        for atom in ligand:
            x, y, z = atom.coordinates
            assert box.min_x <= x <= box.max_x
            assert box.min_y <= y <= box.max_y
            assert box.min_z <= z <= box.max_z

    def test_extremes(self, ligand):
        box = compute_bounding_box(ligand)
        assert (box.min_x, box.max_x) == (-1.18, 2.03)
        assert (box.min_y, box.max_y) == (0.0, 1.64)
        assert (box.min_z, box.max_z) == (-0.47, 0.95)

    def test_single_atom_box_is_degenerate(self, make_atom):
        box = compute_bounding_box([make_atom("O", 1.0, 2.0, 3.0)])
        assert box.origin == (1.0, 2.0, 3.0)
        assert (box.max_x, box.max_y, box.max_z) == (1.0, 2.0, 3.0)

    def test_empty_ligand(self):
        with pytest.raises(EmptyInputError):
            compute_bounding_box([])

    def test_contains_is_strict(self, make_atom):
        box = compute_bounding_box([make_atom("C"), make_atom("C", 2.0, 2.0, 2.0)])
        assert box.contains((1.0, 1.0, 1.0))
        assert not box.contains((0.0, 1.0, 1.0))
        assert not box.contains((2.0, 1.0, 1.0))
        assert box.contains((2.0, 1.0, 1.0), margin=0.5)
        assert not box.contains((2.5, 1.0, 1.0), margin=0.5)


class TestVoxelGrid:
    @pytest.mark.parametrize("step", [0.1, 0.3, 0.5, 1.0, 1.7, 5.0])
    def test_ligand_positions_are_occupied(self, ligand, step):
        box = compute_bounding_box(ligand)
        grid = build_grid(ligand, box, step)
        for atom in ligand:
            assert query_cell(grid, atom.coordinates)

    def test_dimensions_include_slack(self, make_atom):
        ligand = [make_atom("C"), make_atom("C", 2.0, 2.0, 2.0)]
        box = compute_bounding_box(ligand)
        assert grid_dimensions(box, 1.0) == (4, 4, 4)
        grid = build_grid(ligand, box, 1.0)
        assert grid.cell_count == 64
        assert grid.occupied_count == 2

    def test_linear_index_layout(self, make_atom):
        ligand = [make_atom("C"), make_atom("C", 2.0, 2.0, 2.0)]
        box = compute_bounding_box(ligand)
        grid = build_grid(ligand, box, 1.0)
        assert grid.cell_of((1.5, 0.5, 2.5)) == (1, 0, 2)
        assert grid.cell_index((1.5, 0.5, 2.5)) == (2 * 4 + 0) * 4 + 1

    def test_unoccupied_cell(self, make_atom):
        ligand = [make_atom("C"), make_atom("C", 2.0, 2.0, 2.0)]
        box = compute_bounding_box(ligand)
        grid = build_grid(ligand, box, 1.0)
        assert not query_cell(grid, (1.5, 0.5, 0.5))

    def test_position_outside_grid(self, make_atom):
        ligand = [make_atom("C"), make_atom("C", 2.0, 2.0, 2.0)]
        box = compute_bounding_box(ligand)
        grid = build_grid(ligand, box, 1.0)
        with pytest.raises(GridIndexOutOfRange):
            query_cell(grid, (-5.0, 0.0, 0.0))
        with pytest.raises(GridIndexOutOfRange):
            query_cell(grid, (0.0, 0.0, 4.0))

    @pytest.mark.parametrize("step", [0.0, -1.0])
    def test_non_positive_step(self, ligand, step):
        box = compute_bounding_box(ligand)
        with pytest.raises(ConfigurationError):
            build_grid(ligand, box, step)

    def test_cell_ceiling(self, ligand):
        box = compute_bounding_box(ligand)
        with pytest.raises(ConfigurationError):
            build_grid(ligand, box, 0.001, max_cells=1_000_000)

    def test_grid_is_read_only(self, ligand):
        box = compute_bounding_box(ligand)
        grid = build_grid(ligand, box, 1.0)
        with pytest.raises(ValueError):
            grid.occupancy[0] = True

    @pytest.mark.parametrize("step", [1e-310, 5e-324])
    def test_step_too_small_to_count_cells(self, ligand, step):
        box = compute_bounding_box(ligand)
        with pytest.raises(ConfigurationError):
            build_grid(ligand, box, step)
