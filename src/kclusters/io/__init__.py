"""Data sources for observations and ground-truth labels."""

from .csv_source import read_csv, read_labels, read_rows

__all__ = [
    'read_csv',
    'read_labels',
    'read_rows'
]
