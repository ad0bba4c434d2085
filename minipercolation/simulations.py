import logging
from collections import namedtuple

from .lattice import Lattice
from .algorithms import largest_component
from .config import Config
from . import io

logger = logging.getLogger(__name__)


class Outcome(namedtuple('Outcome', ['name', 'path', 'error'])):
    '''
    what became of one exported artifact. error is None on success
    '''
    __slots__ = ()

    @property
    def ok(self):
        return self.error is None


class Simulation(object):
    '''
    One percolation run: a single lattice, its two largest clusters, and
    four files.

    1) Generate the lattice from the configured extent and probability
    2) Extract the largest occupied and the largest empty component
    3) Export all four artifacts, each on its own, so that one failed write
       does not stop the others
    '''
    class ExportFailure(Exception):
        msg = "could not write {description} to {path}: {cause}"
        def __init__(self, description, path, cause):
            self.description = description
            self.path = path
            self.cause = cause
        def __str__(self):
            return self.msg.format(**vars(self))

    artifacts = [
        # name, filename, description
        ('occupied', 'occupied_cells.vtk', 'occupied cells'),
        ('empty', 'empty_cells.vtk', 'empty cells'),
        ('largest_occupied', 'largest_occupied_component.vtk', 'largest occupied component'),
        ('largest_empty', 'largest_empty_component.vtk', 'largest empty component'),
    ]

    def __init__(self, config=None, rng=None):
        self.config = config if config is not None else Config()
        self.rng = rng if rng is not None else self.config.seed
        self.lattice = None
        self.largest = {}

    def generate(self):
        self.lattice = Lattice.random(self.config.extent, self.config.probability, self.rng)
        logger.info("generated %s", self.lattice)
        return self.lattice

    def extract(self):
        for value in (True, False):
            self.largest[value] = largest_component(self.lattice, value)
        logger.info("largest occupied component: %d cells, largest empty component: %d cells",
                    self.largest[True].size, self.largest[False].size)
        return self.largest[True], self.largest[False]

    def writers(self):
        return {
            'occupied': lambda path: io.save_lattice(self.lattice, path, occupied=True),
            'empty': lambda path: io.save_lattice(self.lattice, path, occupied=False),
            'largest_occupied': lambda path: io.save_component(self.largest[True], path),
            'largest_empty': lambda path: io.save_component(self.largest[False], path),
        }

    def export(self):
        '''
        attempts every artifact and returns one Outcome per artifact.
        nothing is raised on a failed write; it is logged and recorded
        '''
        outdir = self.config.output_dir
        try:
            outdir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning("could not create output directory %s: %s", outdir, e)

        writers = self.writers()
        outcomes = []
        for name, filename, description in self.artifacts:
            path = outdir / filename
            try:
                writers[name](path)
            except OSError as e:
                failure = self.ExportFailure(description, path, e)
                logger.error("%s", failure)
                outcomes.append(Outcome(name, path, failure))
            else:
                logger.info("wrote %s to %s", description, path)
                outcomes.append(Outcome(name, path, None))
        return outcomes

    def run(self):
        self.generate()
        self.extract()
        outcomes = self.export()
        self.report(outcomes)
        return outcomes

    @staticmethod
    def report(outcomes):
        failed = [o for o in outcomes if not o.ok]
        logger.info("%d of %d artifacts written", len(outcomes) - len(failed), len(outcomes))
        for outcome in failed:
            logger.warning("%s: %s", outcome.name, outcome.error)
        return not failed
