"""Data models and type definitions"""
from typing import List, Optional
from typing_extensions import NotRequired, TypedDict

class ScoreEntry(TypedDict):
    label: str
    score: float

class MatchResult(TypedDict):
    label: str
    score: float
    scores: NotRequired[List[ScoreEntry]]
    top: NotRequired[List[ScoreEntry]]

class MatchRequest(TypedDict):
    measurements: List[float]
    diagnostics: NotRequired[bool]
    top: NotRequired[int]

class RatioRequest(TypedDict):
    measurements: List[float]

class RatioResponse(TypedDict):
    ratios: List[Optional[float]]

class DatasetSummary(TypedDict):
    count: int
    labels: List[str]

class ErrorResponse(TypedDict):
    error: str
    traceback: Optional[str]
