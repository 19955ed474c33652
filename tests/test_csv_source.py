"""
Loading observations and labels from delimited text files.
"""

from __future__ import annotations

import pytest
import torch

from kclusters.base.errors import DimensionMismatch, ParseError
from kclusters.io import read_csv, read_labels


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_read_csv_basic(tmp_path):
    path = _write(tmp_path, "data.csv", "0,0\n0,1\n10,10\n10,11\n")
    X = read_csv(path)
    assert X.dtype == torch.float64
    assert X.tolist() == [[0.0, 0.0], [0.0, 1.0], [10.0, 10.0], [10.0, 11.0]]


def test_read_csv_skips_blank_lines_and_empty_tokens(tmp_path):
    path = _write(tmp_path, "data.csv", "1.5,,2\n\n 3 , 4e0 \n,5,6,\n")
    X = read_csv(str(path))
    assert X.tolist() == [[1.5, 2.0], [3.0, 4.0], [5.0, 6.0]]


def test_read_csv_other_delimiter(tmp_path):
    path = _write(tmp_path, "data.tsv", "1\t2\n3\t4\n")
    assert read_csv(path, delimiter='\t').tolist() == [[1.0, 2.0], [3.0, 4.0]]


def test_parse_error_reports_location(tmp_path):
    path = _write(tmp_path, "bad.csv", "1,2\n3,abc\n")
    with pytest.raises(ParseError) as exc:
        read_csv(path)
    assert exc.value.line_number == 2
    assert exc.value.token == "abc"
    assert "bad.csv:2" in str(exc.value)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_csv(tmp_path / "missing.csv")


def test_ragged_rows(tmp_path):
    path = _write(tmp_path, "ragged.csv", "1,2\n3\n")
    with pytest.raises(DimensionMismatch):
        read_csv(path)


def test_empty_file(tmp_path):
    path = _write(tmp_path, "empty.csv", "\n\n")
    with pytest.raises(ValueError):
        read_csv(path)


def test_read_labels_uses_first_column(tmp_path):
    path = _write(tmp_path, "truth.csv", "0\n1,9\n\n1\n0\n")
    labels = read_labels(path)
    assert labels.dtype == torch.long
    assert labels.tolist() == [0, 1, 1, 0]


def test_read_labels_rejects_fractional_labels(tmp_path):
    path = _write(tmp_path, "truth.csv", "0\n1.0\n0.9,1.7\n")
    with pytest.raises(ParseError) as exc:
        read_labels(path)
    assert exc.value.line_number == 3
    assert exc.value.token == "0.9"
