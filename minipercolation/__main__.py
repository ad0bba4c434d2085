"""
Command line entry point: one percolation run, four VTK files.

    python -m minipercolation --extent 20 --probability 0.15 --seed 7 -o out
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import Config
from .simulations import Simulation

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="minipercolation",
        description="3D site percolation: generate a lattice and export its largest clusters"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="JSON file with run parameters"
    )
    parser.add_argument(
        "--extent", "-L",
        type=int,
        help="Lattice extent (cells per axis)"
    )
    parser.add_argument(
        "--probability", "-p",
        type=float,
        help="Occupation probability"
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        help="Seed for the random source"
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Output directory"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging"
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    config = Config.load(args.config) if args.config else Config()
    config = config.updated(
        extent=args.extent,
        probability=args.probability,
        seed=args.seed,
        output_dir=args.output,
    )
    logger.debug("run parameters: %s", config.to_dict())

    outcomes = Simulation(config).run()
    return 0 if all(o.ok for o in outcomes) else 1


if __name__ == "__main__":
    sys.exit(main())
