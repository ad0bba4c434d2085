import numpy as np
import pytest

import minipercolation as mini

@pytest.fixture
def lattice_with():
    '''
    builds a lattice of extent L whose only occupied cells are those given
    '''
    def build(L, occupied):
        im = np.zeros([L,L,L], dtype=bool)
        for xyz in occupied:
            im[xyz] = True
        return mini.Lattice.from_source(im)
    return build
