__title__ = 'minipercolation'
__version__ = '0.1.0'
__author__ = 'PMEAL'
__license__ = 'MIT'
__copyright__ = 'Copyright 2014 PMEAL'

from .lattice import *
from .algorithms import *
from .io import *
from .config import Config
from .simulations import Simulation, Outcome
from . import algorithms
from . import io
