#!/usr/bin/env python
import os

import pytest
import numpy as np

import minipercolation as mini

def test_print():
    lattice = mini.Lattice.random(10, 0.3, rng=0)
    print( lattice )
    assert repr(lattice) == 'Lattice(10)'

def test_worked_example(lattice_with):
    lattice = lattice_with(2, [(0,0,0), (1,0,0)])

    occupied = mini.largest_component(lattice, True)
    assert occupied.size == 2
    assert occupied == [(0,0,0), (1,0,0)]

    empty = mini.largest_component(lattice, False)
    assert empty.size == 6
    assert set(empty) == {(0,1,0), (0,0,1), (0,1,1), (1,1,0), (1,0,1), (1,1,1)}

def test_reproducible_run(tmp_path):
    a = mini.Simulation(mini.Config(extent=6, probability=0.4, seed=11, output_dir=tmp_path/'a'))
    b = mini.Simulation(mini.Config(extent=6, probability=0.4, seed=11, output_dir=tmp_path/'b'))
    a.run()
    b.run()
    assert a.lattice == b.lattice
    assert a.largest[True] == b.largest[True]
    assert a.largest[False] == b.largest[False]
    for _, filename, _ in mini.Simulation.artifacts:
        with open(os.path.join(str(tmp_path), 'a', filename)) as fa, \
             open(os.path.join(str(tmp_path), 'b', filename)) as fb:
            assert fa.read() == fb.read()

def test_bfs_agrees_with_csgraph():
    lattice = mini.Lattice.random(12, 0.3116, rng=2014)
    for value in (True, False):
        labels = lattice.labels(value)
        found = list(mini.components(lattice, value))
        sizes = np.bincount(labels[labels >= 0])
        assert [c.size for c in found] == sizes.tolist()
        for label, component in enumerate(found):
            assert (labels[component.indexes(lattice)] == label).all()

def test_reference_parameters():
    lattice = mini.generate(0.15, rng=5)
    assert lattice.shape == (20,20,20)
    largest = mini.largest_component(lattice, True)
    assert 0 < largest.size <= lattice.count(True)
    # far below threshold, so the occupied cells are not one cluster
    assert largest.size < lattice.count(True)

if __name__ == '__main__':
    errors = pytest.main()
