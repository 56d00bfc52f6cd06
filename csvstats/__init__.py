"""
csvstats — Descriptive Statistics for a CSV of Numbers
======================================================

Reads every field of a comma-delimited file as a float and reports:

    Geometric mean, Arithmetic mean, Max, Min, Sum, Variance

Usage:
    csvstats -f data.csv

    import csvstats
    data = csvstats.read_data('data.csv')
    result = csvstats.compute_statistics(data)
    csvstats.print_report(result)
"""

__version__ = '0.1.0'

from csvstats.errors import (
    StatsError,
    ArgumentParseError,
    FileAccessError,
    NumericParseError,
    EmptyDatasetError,
)
from csvstats.loader import read_data, parse_records, parse_number
from csvstats.stats import StatsResult, compute_statistics
from csvstats.report import format_report, print_report
from csvstats.cli import run, main

__all__ = [
    'StatsError',
    'ArgumentParseError',
    'FileAccessError',
    'NumericParseError',
    'EmptyDatasetError',
    'read_data',
    'parse_records',
    'parse_number',
    'StatsResult',
    'compute_statistics',
    'format_report',
    'print_report',
    'run',
    'main',
]
