"""
csvstats command line.

    csvstats -f data.csv             Print six statistics of every value in data.csv
    csvstats --filename data.csv     Same
    csvstats                         Print help

Exit codes: 0 on success or help, 1 on any argument, file or parse failure.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from csvstats.config import get as get_config
from csvstats.errors import ArgumentParseError, StatsError
from csvstats.loader import read_data
from csvstats.report import print_report
from csvstats.stats import compute_statistics

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting the process."""

    def error(self, message):
        raise ArgumentParseError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=get_config('cli.prog'),
        description=get_config('cli.description'),
        add_help=False,
    )
    parser.add_argument('-f', '--filename', metavar='FILENAME', default=None,
                        help=get_config('cli.filename_help'))
    return parser


def print_help(out: Optional[TextIO] = None) -> None:
    build_parser().print_help(file=out if out is not None else sys.stdout)


def parse_arguments(argv: Optional[List[str]] = None) -> Optional[str]:
    """
    Parse the command line. Non-option arguments are ignored.

    Returns:
        The filename, or None when -f/--filename was not given.

    Raises:
        ArgumentParseError: unknown option or missing value.
    """
    parser = build_parser()
    args, extras = parser.parse_known_args(argv)
    unknown = [arg for arg in extras if arg.startswith("-") and arg != "-"]
    if unknown:
        parser.error(f"unrecognized arguments: {' '.join(unknown)}")
    return args.filename


def run(
    argv: Optional[List[str]] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """
    Run csvstats against argv and return the process exit code.

    All output goes to stdout/stderr (default: the process streams).
    """
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    try:
        filename = parse_arguments(argv)
    except ArgumentParseError as e:
        print(e.describe(), file=stderr)
        print_help(stdout)
        return e.exit_code

    if filename is None:
        print_help(stdout)
        return 0

    if get_config('cli.echo_filename'):
        print(filename, file=stdout)

    try:
        data = read_data(filename)
        result = compute_statistics(data)
    except StatsError as e:
        logger.debug("aborting on %s", type(e).__name__)
        print(e.describe(), file=stderr)
        return e.exit_code

    print_report(result, stdout)
    return 0


def main() -> int:
    logging.basicConfig(
        level=logging.WARNING,
        format=f"[{get_config('cli.prog')}] %(levelname)s: %(message)s",
    )
    return run()


if __name__ == "__main__":
    sys.exit(main())
