"""Drivers for repeated clustering runs."""

from .repeated import run_repeated, RepeatedRunResult, RunRecord

__all__ = [
    'run_repeated',
    'RepeatedRunResult',
    'RunRecord'
]
