"""
Command-line front end: load a matrix, run Mardia's test, print the report.

    pymardia --path samples.h5 --name x --irange 0 1000 --details
    python -m pymardia --path samples.csv --simulate --seed 7
"""

import argparse
import logging
import sys

from pymardia import __version__
from pymardia.core.datasource import DataSource, HDF5_SUFFIXES
from pymardia.core.exceptions import PyMardiaError
from pymardia.normality.config import MardiaConfig
from pymardia.normality.solvers import run

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pymardia',
        description='Perform a multinormality test (Mardia skewness and kurtosis)',
    )
    parser.add_argument(
        '--path', required=True,
        help='Path to the data file (HDF5, CSV/TSV or NPY)',
    )
    parser.add_argument(
        '--name', default=None,
        help='Name of the dataset to test (required for HDF5 files)',
    )
    parser.add_argument(
        '--simulate', action='store_true',
        help='Test a synthetic normal draw with the same mean and covariance',
    )
    parser.add_argument(
        '--details', action='store_true',
        help='Print mean and covariance',
    )
    parser.add_argument(
        '--irange', nargs=2, type=int, metavar=('I0', 'I1'), default=None,
        help='Row range [I0, I1)',
    )
    parser.add_argument(
        '--jrange', nargs=2, type=int, metavar=('J0', 'J1'), default=None,
        help='Column range [J0, J1)',
    )
    parser.add_argument(
        '--seed', type=int, default=None,
        help='Random seed for --simulate',
    )
    parser.add_argument(
        '--method', choices=('gram', 'pairwise'), default='gram',
        help='Evaluation of the pairwise statistics (default: gram)',
    )
    parser.add_argument(
        '-v', '--verbose', action='count', default=0,
        help='Increase logging verbosity (-v info, -vv debug)',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
    )


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.path.lower().endswith(HDF5_SUFFIXES) and args.name is None:
        parser.error('--name is required for HDF5 files')

    try:
        config = MardiaConfig(
            simulate=args.simulate,
            details=args.details,
            row_range=tuple(args.irange) if args.irange else None,
            col_range=tuple(args.jrange) if args.jrange else None,
            seed=args.seed,
            method=args.method,
        )
        logger.debug("Configuration: %s", config.to_dict())

        source = DataSource.from_file(args.path, dataset=args.name)
        X = source.matrix()
        m, n = X.shape

        print(f"Data path:    {args.path}")
        if args.name is not None:
            print(f"Dataset name: {args.name}")
        print(f"Dimensions:   {m} by {n}")
        if config.row_range is not None:
            print(f"Row range:    {config.row_range[0]} to {config.row_range[1]}")
        if config.col_range is not None:
            print(f"Column range: {config.col_range[0]} to {config.col_range[1]}")

        solution = run(config, source)
    except PyMardiaError as e:
        logger.debug("Test aborted", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"Eff. dims.:   {solution.n_observations} by {solution.n_variables}")
    if solution.simulated:
        print("Simulated:    yes")
    print(solution.summary(details=config.details))
    return 0


if __name__ == '__main__':
    sys.exit(main())
