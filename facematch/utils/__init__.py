"""Utility functions for dataset loading"""
from .dataset import (
    ParseError,
    DatasetLoadError,
    parse_dataset,
    load_dataset,
    load_dataset_ratios
)

__all__ = [
    'ParseError',
    'DatasetLoadError',
    'parse_dataset',
    'load_dataset',
    'load_dataset_ratios'
]
