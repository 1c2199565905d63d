"""Command line interface for generating random dataframes.

This module provides a command line interface to
:class:`numframe.sampling.RandomFrameGenerator`.

The generated dataframe is printed to the console in a tabular format
using the :mod:`numframe.utils.tabulate` module, optionally followed
by the descriptive statistics of one of its columns.
"""

import argparse
import logging

from numframe.sampling import RandomFrameGenerator
from numframe.utils import tabulate

logger = logging.getLogger(__name__)

PRESETS = {
    "uniform": (RandomFrameGenerator.uniform, (0.0, 1.0)),
    "gaussian": (RandomFrameGenerator.gaussian, (0.0, 1.0)),
    "exponential": (RandomFrameGenerator.exponential, (1.0,)),
}
"""Distribution name -> (generator factory, default parameters)."""


def main(argv: list[str] | None = None) -> None:
    """Parse the command line arguments and print the generated dataframe."""
    parser = argparse.ArgumentParser(description="Generate a dataframe of random values.")
    parser.add_argument(
        "-d",
        "--distribution",
        choices=sorted(PRESETS),
        default="uniform",
        help="The distribution values are drawn from.",
    )
    parser.add_argument(
        "-p",
        "--param",
        action="append",
        type=float,
        help="A parameter of the distribution, in order. Can be provided multiple times. "
        "uniform takes lower and upper bound, gaussian mean and standard deviation, "
        "exponential the mean.",
    )
    parser.add_argument("-s", "--seed", type=int, default=0, help="The random seed.")
    parser.add_argument("-r", "--rows", type=int, default=10, help="How many rows to generate.")
    parser.add_argument(
        "-c",
        "--column",
        action="append",
        help="Name of a column to generate. Can be provided multiple times.",
    )
    parser.add_argument("--describe", metavar="COLUMN", help="Describe the values of a column.")
    parser.add_argument("--max-rows", type=int, default=20, help="How many rows to print.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    factory, defaults = PRESETS[args.distribution]
    params = tuple(args.param) if args.param else defaults
    if len(params) != len(defaults):
        parser.error(
            f"{args.distribution} expects {len(defaults)} parameters, got {len(params)}"
        )
    if args.max_rows < 0:
        parser.error(f"--max-rows can't be negative: {args.max_rows}")
    columns = args.column or ["x"]

    try:
        generator = factory(*params)
        df = generator.generate(args.seed, args.rows, columns)
        description = df.statistics().describe(args.describe) if args.describe else None
    except ValueError as e:
        parser.error(str(e))

    logger.info("Generated %d rows from %s", df.row_count, generator.distribution)
    print(tabulate.tabulate(df, max_rows=args.max_rows))
    if description is not None:
        print()
        print(f"Column {args.describe}:")
        print(description)


if __name__ == "__main__":
    main()
