import logging
import re

import numpy as np

from src.dary_heap.dary_heap import MAX_CAPACITY, check_key
from src.dary_heap.errors import CapacityExceeded, DatasetError

logger = logging.getLogger(__name__)

MAX_DATASETS = 10

_LEADING_INT = re.compile(r"[+-]?\d+")


def parse_token(token: str) -> int:
    """
    Convert a token to an integer, reading only its leading digits.

    An optional sign followed by digits is read and anything after it is
    ignored; a token that does not start with a number becomes 0.

    Parameters
    ----------
    token : str
        A whitespace-free token.

    Returns
    -------
    int
        The parsed value.
    """
    match = _LEADING_INT.match(token)
    if match is None:
        return 0
    return int(match.group())


def parse_line(line: str) -> np.ndarray:
    """
    Parse one dataset line into an int64 array.

    Parameters
    ----------
    line : str
        Integers separated by whitespace.

    Returns
    -------
    np.ndarray
        The values in line order; empty for a blank line.

    Raises
    ------
    CapacityExceeded
        If the line holds more than ``MAX_CAPACITY`` values.
    KeyOutOfRange
        If a value does not fit in a signed 64-bit integer.
    """
    tokens = line.split()
    if len(tokens) > MAX_CAPACITY:
        raise CapacityExceeded(
            f"Got {len(tokens)} values, the maximum capacity is {MAX_CAPACITY}"
        )
    return np.array(
        [check_key(parse_token(t)) for t in tokens], dtype=np.int64
    )


def load_datasets(
    path: str,
    max_datasets: int = MAX_DATASETS
) -> list[np.ndarray]:
    """
    Read candidate heap arrays from a text file, one per line.

    Only the first ``max_datasets`` lines are read.

    Parameters
    ----------
    path : str
        Path to the dataset file.
    max_datasets : int
        The maximum number of lines to load, by default ``MAX_DATASETS``.

    Returns
    -------
    list[np.ndarray]
        One int64 array per line.

    Raises
    ------
    DatasetError
        If the file cannot be opened, read or decoded as UTF-8.
    CapacityExceeded
        If a line holds more than ``MAX_CAPACITY`` values.
    KeyOutOfRange
        If a value does not fit in a signed 64-bit integer.
    """
    datasets = []
    try:
        with open(path, "r", encoding="utf-8") as f:
            for lineno, line in enumerate(f, start=1):
                if len(datasets) == max_datasets:
                    logger.info(
                        "Stopped reading %s after %d datasets",
                        path, max_datasets
                    )
                    break
                values = parse_line(line)
                logger.debug(
                    "Line %d of %s: %d values", lineno, path, len(values)
                )
                datasets.append(values)
    except OSError as e:
        raise DatasetError(f"Error opening file {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise DatasetError(f"File {path} is not valid UTF-8: {e}") from e
    return datasets
