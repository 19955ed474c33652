"""
Delimited text data source.

Each non-blank line of the file is one observation: a delimiter-separated
list of real numbers. Empty tokens between consecutive delimiters are skipped.
"""

from pathlib import Path
from typing import Iterator, List, Tuple, Union
import torch
from torch import Tensor

from ..base.errors import DimensionMismatch, ParseError


def _parse_line(line: str, delimiter: str, path: str, line_number: int) -> List[float]:
    values = []
    for token in line.split(delimiter):
        token = token.strip()
        if not token:
            continue
        try:
            values.append(float(token))
        except ValueError:
            raise ParseError(path, line_number, token) from None
    return values


def _numbered_rows(path: Union[str, Path], delimiter: str) -> Iterator[Tuple[int, List[float]]]:
    """Yield (line number, values) for every non-blank line."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Data file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        for line_number, line in enumerate(f, start=1):
            values = _parse_line(line, delimiter, str(path), line_number)
            if values:
                yield line_number, values


def read_rows(path: Union[str, Path], delimiter: str = ',') -> List[List[float]]:
    """Read every non-blank line of a delimited file as a list of floats.

    Raises:
        FileNotFoundError: If the path does not exist
        ParseError: If a token is not a real number
    """
    return [values for _, values in _numbered_rows(path, delimiter)]


def read_csv(path: Union[str, Path], delimiter: str = ',',
             dtype: torch.dtype = torch.float64) -> Tensor:
    """Load observations from a delimited text file.

    Args:
        path: File to read
        delimiter: Token separator
        dtype: Floating point type of the result

    Returns:
        (n, d) tensor, one row per non-blank line

    Raises:
        FileNotFoundError: If the path does not exist
        ParseError: If a token is not a real number
        DimensionMismatch: If lines have different numbers of values
        ValueError: If the file holds no observations
    """
    rows = read_rows(path, delimiter)
    if not rows:
        raise ValueError(f"No observations in {path}")

    dimension = len(rows[0])
    for row in rows:
        if len(row) != dimension:
            raise DimensionMismatch(dimension, len(row), what=f"row of {path}")

    return torch.tensor(rows, dtype=dtype)


def read_labels(path: Union[str, Path], delimiter: str = ',') -> Tensor:
    """Load ground-truth labels from the first column of a delimited file.

    Returns:
        (n,) long tensor

    Raises:
        ParseError: If a label is not a whole number
    """
    labels = []
    for line_number, values in _numbered_rows(path, delimiter):
        if not values[0].is_integer():
            raise ParseError(str(path), line_number, repr(values[0]))
        labels.append(int(values[0]))
    if not labels:
        raise ValueError(f"No labels in {path}")
    return torch.tensor(labels, dtype=torch.long)
