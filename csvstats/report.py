"""Render a StatsResult as `<Label>: <value>` lines."""

import math
import sys
from typing import List, Optional, TextIO

from csvstats.config import get as get_config
from csvstats.stats import StatsResult


def format_value(value: float) -> str:
    """Fixed-point, six fractional digits. NaN/Infinity spelled out."""
    if math.isnan(value):
        return get_config('report.nan')
    if math.isinf(value):
        inf = get_config('report.inf')
        return inf if value > 0 else f"-{inf}"
    return get_config('report.value_format').format(value)


def format_report(result: StatsResult) -> List[str]:
    values = result.to_dict()
    return [
        f"{get_config(f'labels.{key}')}: {format_value(values[key])}"
        for key in get_config('report.order')
    ]


def print_report(result: StatsResult, out: Optional[TextIO] = None) -> None:
    out = out if out is not None else sys.stdout
    for line in format_report(result):
        print(line, file=out)
