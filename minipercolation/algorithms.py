from collections import deque

import numpy as np

__all__ = ['Component', 'components', 'largest_component', 'DIRECTIONS']

# face neighbours, in the order they are visited
DIRECTIONS = (
    (1, 0, 0),
    (-1, 0, 0),
    (0, 1, 0),
    (0, -1, 0),
    (0, 0, 1),
    (0, 0, -1),
)


class Component(list):
    '''
    A connected cluster of cells sharing one occupancy value, as a list of
    (x,y,z) tuples in the order the breadth-first search reached them.
    '''
    def __init__(self, cells=(), value=True):
        super(Component, self).__init__(cells)
        self.value = value

    @property
    def size(self):
        return len(self)

    @property
    def points(self):
        return np.array(self, dtype=int).reshape(-1, 3)

    def indexes(self, lattice):
        x, y, z = self.points.T
        return lattice.index(x, y, z)

    def __repr__(self):
        return '{}({}, value={})'.format(self.__class__.__name__, self.size, self.value)


def components(lattice, value=True):
    '''
    yields every cluster of cells equal to value, in order of discovery.

    cells are scanned x outer, y middle, z inner, and each unvisited match
    seeds a breadth-first search over its face neighbours. the visited
    buffer is shared by all searches of one call, so every cell is reached
    exactly once and together the clusters partition the matching cells.
    '''
    value = bool(value)
    L = lattice.extent
    occupancy = lattice.occupancy
    visited = np.zeros(lattice.order, dtype=bool)

    for seed in range(lattice.order):
        if occupancy[seed] != value or visited[seed]:
            continue

        component = Component(value=value)
        queue = deque([lattice.coordinate(seed)])
        visited[seed] = True

        while queue:
            cx, cy, cz = queue.popleft()
            component.append((cx, cy, cz))

            for dx, dy, dz in DIRECTIONS:
                nx, ny, nz = cx+dx, cy+dy, cz+dz
                if not (0 <= nx < L and 0 <= ny < L and 0 <= nz < L):
                    continue
                i = (nx*L + ny)*L + nz
                # mark on enqueue, otherwise a cell can be queued twice
                if occupancy[i] == value and not visited[i]:
                    visited[i] = True
                    queue.append((nx, ny, nz))

        yield component


def largest_component(lattice, value=True):
    '''
    the biggest cluster of cells equal to value. on a tie the cluster found
    first in scan order wins; if nothing matches, the result is empty
    '''
    largest = Component(value=bool(value))
    for component in components(lattice, value):
        if component.size > largest.size:
            largest = component
    return largest
