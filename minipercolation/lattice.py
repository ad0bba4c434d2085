import warnings

import numpy as np
from scipy import sparse
from scipy.sparse import csgraph

__all__ = ['Lattice', 'generate']


class Lattice(object):
    '''
    A cubic site lattice of extent L, where every cell is either occupied
    (True) or empty (False).

    The occupancy is kept as a flat, read-only boolean buffer of length L**3.
    Cell (x,y,z) lives at ((x*L + y)*L + z), which is the same order in which
    the cells are scanned: x outer, y middle, z inner.

    Aside from the buffer, a lattice can also be treated as a graph in the
    way a cubic network is: every cell is a vertex and every pair of face
    neighbours is an edge. That view is what `pairs`, `adjacency_matrix` and
    `labels` provide.
    '''

    @classmethod
    def random(cls, extent, probability, rng=None):
        '''
        each cell is independently occupied with the given probability.

        rng may be None (fresh entropy), an integer seed, or a
        numpy.random.Generator; a seeded source reproduces the lattice.
        probabilities outside [0,1] are not rejected, they simply give an
        all-empty or all-occupied lattice
        '''
        extent = cls._check_extent(extent)
        if not 0 <= probability <= 1:
            warnings.warn("occupation probability {} is outside [0,1], "
                          "lattice will be degenerate".format(probability))
        rng = np.random.default_rng(rng)
        occupancy = rng.random(extent**3) < probability
        return cls(extent, occupancy)

    @classmethod
    def from_source(cls, im):
        '''
        wraps any cubic 3D array-like of truthy values
        '''
        im = np.asarray(im)
        if im.ndim != 3 or len(set(im.shape)) != 1:
            raise ValueError("expected a cubic 3D array, got shape {}".format(im.shape))
        return cls(im.shape[0], im.astype(bool).ravel())

    def __init__(self, extent, occupancy):
        self.extent = self._check_extent(extent)
        occupancy = np.array(occupancy, dtype=bool).ravel()
        if occupancy.size != self.order:
            raise ValueError("{} values given for a lattice of {} cells".format(
                occupancy.size, self.order))
        occupancy.flags.writeable = False
        self.occupancy = occupancy

    @staticmethod
    def _check_extent(extent):
        if int(extent) != extent or extent < 1:
            raise ValueError("lattice extent must be a positive integer, got {}".format(extent))
        return int(extent)

    @property
    def order(self):
        return self.extent**3

    @property
    def shape(self):
        return (self.extent,)*3

    @property
    def indexes(self):
        return np.arange(self.order)

    @property
    def porosity(self):
        ''' fraction of occupied cells '''
        return self.occupancy.mean()

    def index(self, x, y, z):
        L = self.extent
        return (x*L + y)*L + z

    def coordinate(self, i):
        L = self.extent
        x, rest = divmod(int(i), L*L)
        y, z = divmod(rest, L)
        return x, y, z

    def in_bounds(self, x, y, z):
        L = self.extent
        return 0 <= x < L and 0 <= y < L and 0 <= z < L

    def __getitem__(self, xyz):
        if not self.in_bounds(*xyz):
            raise IndexError("{} is outside a lattice of extent {}".format(xyz, self.extent))
        return bool(self.occupancy[self.index(*xyz)])

    def __eq__(self, other):
        if not isinstance(other, Lattice):
            return NotImplemented
        return self.extent == other.extent and \
            np.array_equal(self.occupancy, other.occupancy)

    __hash__ = None

    def asarray(self):
        return self.occupancy.reshape(self.shape)

    def count(self, value=True):
        matching = self.occupancy if value else ~self.occupancy
        return int(matching.sum())

    def coords(self, value=True):
        '''
        coordinates of every cell equal to value, in scan order
        '''
        matching = self.occupancy == bool(value)
        return np.vstack(np.unravel_index(self.indexes[matching], self.shape)).T

    @property
    def pairs(self):
        '''
        every pair of face neighbours, listed in both directions
        '''
        I = self.indexes.reshape(self.shape)
        tails, heads = [], []
        for T,H in [
            (I[:,:,:-1], I[:,:,1:]),
            (I[:,:-1], I[:,1:]),
            (I[:-1], I[1:]),
            ]:
            tails.extend(T.flat)
            tails.extend(H.flat)
            heads.extend(H.flat)
            heads.extend(T.flat)
        return np.array([tails, heads], dtype=int).reshape(2, -1).T

    @property
    def adjacency_matrix(self):
        tails, heads = self.pairs.T
        ijk = np.ones_like(tails), (heads, tails)
        return sparse.coo_matrix(ijk, shape=(self.order, self.order), dtype=float)

    def labels(self, value=True):
        '''
        cluster labels of the cells equal to value, -1 for all other cells.

        labels are numbered in order of the lowest flat index they contain.
        this goes through scipy's csgraph rather than the breadth-first
        search in `algorithms`, so the two can vouch for each other
        '''
        matching = self.occupancy == bool(value)
        tails, heads = self.pairs.T
        keep = matching[tails] & matching[heads]
        ijk = np.ones(keep.sum()), (heads[keep], tails[keep])
        adj = sparse.coo_matrix(ijk, shape=(self.order, self.order))
        _, raw = csgraph.connected_components(adj, directed=False)

        labels = -np.ones(self.order, dtype=int)
        _, first, relabelled = np.unique(raw[matching], return_index=True, return_inverse=True)
        # renumber so that labels follow the scan order of their first cell
        rank = np.argsort(np.argsort(first))
        labels[matching] = rank[relabelled.ravel()]
        return labels

    def __repr__(self):
        return '{}({})'.format(self.__class__.__name__, self.extent)

    def __str__(self):
        return '<{self.__class__.__name__} {self.extent}x{self.extent}x{self.extent}\n' \
               '\tOccupied: {occupied}, Empty: {empty}, Porosity: {porosity:.3f}>'.format(
                   self=self, occupied=self.count(True),
                   empty=self.count(False), porosity=self.porosity)


def generate(probability, extent=20, rng=None):
    return Lattice.random(extent, probability, rng)
