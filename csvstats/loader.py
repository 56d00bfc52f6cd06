"""
Data loader: comma-delimited text → flat float64 array.

Every field of every record, in file order, left-to-right, top-to-bottom.
Row/column structure is dropped.

Usage:
    from csvstats.loader import read_data
    data = read_data('values.csv')   # → np.ndarray, dtype float64
"""

import csv
import logging
import re
from pathlib import Path
from typing import Iterable, List, Union

import numpy as np

from csvstats.config import get as get_config
from csvstats.errors import EmptyDatasetError, FileAccessError, NumericParseError

logger = logging.getLogger(__name__)

# Optional sign, then NaN, Infinity, or a plain decimal with optional
# exponent and f/d type suffix. No underscores, no hex, no lowercase words.
_NUMBER = re.compile(
    r"[+-]?(?:NaN|Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?[fFdD]?)",
    re.ASCII,
)


def parse_number(text: str) -> float:
    """
    Parse one field as a float. Surrounding whitespace is ignored.

    Raises:
        ValueError: text is not a decimal number, NaN or Infinity.
    """
    stripped = text.strip()
    if not _NUMBER.fullmatch(stripped):
        raise ValueError(f"not a number: {text!r}")
    return float(stripped.rstrip("fFdD"))


def parse_records(records: Iterable[List[str]]) -> np.ndarray:
    """
    Parse already-split records into one flat array.

    Blank records contribute nothing. An empty field is not a number.

    Raises:
        NumericParseError: first field parse_number() rejects.
    """
    values = []
    for record_no, record in enumerate(records, start=1):
        for field_no, text in enumerate(record, start=1):
            try:
                values.append(parse_number(text))
            except ValueError:
                raise NumericParseError(text, record_no, field_no) from None
    return np.asarray(values, dtype=np.float64)


def read_data(path: Union[str, Path]) -> np.ndarray:
    """
    Read every field of a comma-delimited file as a float.

    Args:
        path: File to read.

    Returns:
        1D float64 array, never empty.

    Raises:
        FileAccessError: path cannot be opened, read or decoded.
        NumericParseError: a field is not a number.
        EmptyDatasetError: the file holds no fields.
    """
    path = Path(path)
    logger.debug("reading %s", path)

    try:
        with open(path, newline='', encoding=get_config('input.encoding')) as f:
            reader = csv.reader(
                f,
                delimiter=get_config('input.delimiter'),
                quotechar=get_config('input.quotechar'),
            )
            records = list(reader)
    except OSError as e:
        raise FileAccessError(str(e)) from e
    except (UnicodeDecodeError, csv.Error) as e:
        raise FileAccessError(f"{path}: {e}") from e

    data = parse_records(records)
    logger.debug("read %d records, %d values from %s", len(records), data.size, path)

    if data.size == 0:
        raise EmptyDatasetError(f"{path} contains no fields")
    return data
