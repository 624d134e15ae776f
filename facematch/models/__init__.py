"""Data models and type definitions"""
from .types import (
    ScoreEntry,
    MatchResult,
    MatchRequest,
    RatioRequest,
    RatioResponse,
    DatasetSummary,
    ErrorResponse
)

__all__ = [
    'ScoreEntry',
    'MatchResult',
    'MatchRequest',
    'RatioRequest',
    'RatioResponse',
    'DatasetSummary',
    'ErrorResponse'
]
