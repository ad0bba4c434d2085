import numpy as np
import minipercolation as mini

def read_sections(path):
    with open(str(path)) as f:
        lines = f.read().splitlines()
    return lines[:4], lines[4:]

def test_hexahedra():
    points, cells = mini.hexahedra([(0,0,0), (2,3,4)])
    assert points.shape == (16, 3)
    assert cells.shape == (2, 9)
    np.testing.assert_array_equal(points[8], [2,3,4])
    np.testing.assert_array_equal(points[14], [3,4,5])
    np.testing.assert_array_equal(points[:8].min(axis=0), [0,0,0])
    np.testing.assert_array_equal(points[:8].max(axis=0), [1,1,1])
    assert cells[1].tolist() == [8] + list(range(8, 16))

def test_unit_cube_corners_are_distinct():
    points, _ = mini.hexahedra([(5,5,5)])
    assert len({tuple(p) for p in points.tolist()}) == 8

def test_component_file(tmp_path):
    component = mini.Component([(0,0,0), (1,0,0)])
    path = tmp_path / 'component.vtk'
    mini.save_component(component, path)
    header, body = read_sections(path)
    assert header == ['# vtk DataFile Version 3.0', 'Largest connected component',
                      'ASCII', 'DATASET UNSTRUCTURED_GRID']
    assert body[0] == 'POINTS 16 float'
    assert body[1:3] == ['0 0 0', '1 0 0']
    assert body[9] == '1 0 0'
    assert body[17] == 'CELLS 2 18'
    assert body[18] == '8 0 1 2 3 4 5 6 7'
    assert body[19] == '8 8 9 10 11 12 13 14 15'
    assert body[20:] == ['CELL_TYPES 2', '12', '12']

def test_lattice_file(tmp_path):
    lattice = mini.Lattice(2, [True, False, False, False, False, False, False, True])
    occupied = tmp_path / 'occupied.vtk'
    empty = tmp_path / 'empty.vtk'
    mini.save_lattice(lattice, occupied, occupied=True)
    mini.save_lattice(lattice, empty, occupied=False)

    header, body = read_sections(occupied)
    assert header[1] == '3D percolation lattice'
    assert body[0] == 'POINTS 16 float'
    # the second cube sits at (1,1,1)
    assert body[9] == '1 1 1'
    assert body[15] == '2 2 2'

    _, body = read_sections(empty)
    assert body[0] == 'POINTS 48 float'
    assert 'CELLS 6 54' in body
    assert body.count('12') == 6

def test_empty_component_file(tmp_path):
    path = tmp_path / 'nothing.vtk'
    returned = mini.save_component(mini.Component(), path)
    assert returned == str(path)
    _, body = read_sections(path)
    assert body == ['POINTS 0 float', 'CELLS 0 0', 'CELL_TYPES 0']
