import numpy as np
import minipercolation as mini

# how the largest cluster grows as p sweeps past the site threshold (~0.3116)
rng = np.random.default_rng(2014)
for p in np.linspace(0.1, 0.5, 9):
    lattice = mini.Lattice.random(30, p, rng)
    largest = mini.largest_component(lattice, True)
    share = largest.size / max(lattice.count(True), 1)
    print( '{:.2f} {:>6} {:.3f}'.format(p, largest.size, share) )
