import logging
import os

import numpy as np

__all__ = ['hexahedra', 'write_vtk', 'save_lattice', 'save_component']

logger = logging.getLogger(__name__)

'''
io turns lattice cells into unit cubes and writes them out as legacy VTK
unstructured grids, which paraview and friends open directly
'''

VTK_HEXAHEDRON = 12

# corner offsets of a unit cube, in VTK hexahedron vertex order
CORNERS = np.array([
    (0, 0, 0),
    (1, 0, 0),
    (1, 1, 0),
    (0, 1, 0),
    (0, 0, 1),
    (1, 0, 1),
    (1, 1, 1),
    (0, 1, 1),
], dtype=np.float32)


def hexahedra(coords):
    '''
    returns the points and cells of one unit cube per coordinate.

    cubes do not share vertices: cube k owns points 8k to 8k+7. each row of
    cells starts with the vertex count (8) followed by the point indexes
    '''
    coords = np.asarray(coords, dtype=np.float32).reshape(-1, 3)
    n = len(coords)
    points = (coords[:, np.newaxis, :] + CORNERS).reshape(-1, 3)
    cells = np.hstack([
        8*np.ones((n, 1), dtype=int),
        np.arange(8*n).reshape(n, 8),
    ])
    return points, cells


def write_vtk(filename, coords, title='minipercolation'):
    points, cells = hexahedra(coords)
    with open(filename, 'w') as f:
        f.write('# vtk DataFile Version 3.0\n')
        f.write('{}\n'.format(title))
        f.write('ASCII\n')
        f.write('DATASET UNSTRUCTURED_GRID\n')

        f.write('POINTS {} float\n'.format(len(points)))
        np.savetxt(f, points, fmt='%g')

        f.write('CELLS {} {}\n'.format(len(cells), cells.size))
        np.savetxt(f, cells, fmt='%d')

        f.write('CELL_TYPES {}\n'.format(len(cells)))
        np.savetxt(f, VTK_HEXAHEDRON*np.ones((len(cells), 1), dtype=int), fmt='%d')

    logger.debug("wrote %d hexahedra to %s", len(cells), filename)
    return os.fspath(filename)


def save_lattice(lattice, filename, occupied=True):
    '''
    every cell of the lattice whose occupancy equals `occupied`
    '''
    return write_vtk(filename, lattice.coords(occupied), title='3D percolation lattice')


def save_component(component, filename):
    return write_vtk(filename, component.points, title='Largest connected component')
