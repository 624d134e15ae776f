"""Face matching API routes.

This module provides the API endpoints for face matching functionality,
handling measurement submission, ratio computation, and dataset lookup.
"""

import logging
import math
import traceback
from functools import lru_cache
from fastapi import APIRouter, Depends, HTTPException, status
from typing import Dict
import numpy as np
from ..config import ConfigError, get_settings
from ..core.exceptions import InvalidInputError, NotFoundError
from ..core.matching import match_measurements, rank_matches
from ..core.ratios import compute_ratios
from ..utils.dataset import ParseError, load_dataset_ratios
from ..models.types import (
    MatchRequest,
    MatchResult,
    RatioRequest,
    RatioResponse,
    DatasetSummary,
    ErrorResponse
)

# Configure logging
logger = logging.getLogger(__name__)

router = APIRouter()

@lru_cache(maxsize=1)
def get_dataset() -> Dict[str, np.ndarray]:
    """Load the configured dataset once and share it read-only.

    Raises:
        HTTPException: If the dataset cannot be loaded.
    """
    try:
        return load_dataset_ratios(get_settings().dataset_path)
    except (ParseError, ConfigError) as e:
        error_details: ErrorResponse = {
            'error': f"Failed to load dataset: {str(e)}",
            'traceback': None
        }
        logger.error(f"Dataset error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=error_details
        )
    except Exception as e:
        raise _internal_error(e)

def _internal_error(e: Exception) -> HTTPException:
    error_details: ErrorResponse = {
        'error': str(e),
        'traceback': traceback.format_exc()
    }
    logger.error("Error details:", extra=error_details)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=error_details
    )

def _finite_or_none(value: float):
    return value if math.isfinite(value) else None

def _jsonable_result(result: MatchResult) -> Dict:
    # JSON has no inf/nan
    jsonable: Dict = {'label': result['label'], 'score': _finite_or_none(result['score'])}
    for key in ('scores', 'top'):
        if key in result:
            jsonable[key] = [
                {'label': entry['label'], 'score': _finite_or_none(entry['score'])}
                for entry in result[key]
            ]
    return jsonable

@router.post("/match")
async def match_face(
    request_data: MatchRequest,
    dataset: Dict[str, np.ndarray] = Depends(get_dataset)
) -> Dict:
    """Match measured face against the dataset.

    Args:
        request_data: Dictionary containing the query.
            - measurements: The six facial distances
            - diagnostics: Include the score of every face (optional)
            - top: Include the N best faces ranked by score (optional)

    Returns:
        Dictionary containing match results:
            - label: Label of the best matching face
            - score: Its score (lower is better), null when not finite
            - scores: Every face and score, in dataset order (diagnostics only)
            - top: The best N faces (only when requested)

    Raises:
        HTTPException: If the measurements are invalid or the dataset is empty
    """
    try:
        top = request_data.get('top')
        if top is not None and top < 0:
            raise InvalidInputError("top must not be negative")

        logger.info(f"Matching face against {len(dataset)} faces...")
        result: MatchResult = match_measurements(
            dataset,
            request_data['measurements'],
            diagnostics=request_data.get('diagnostics', False)
        )

        if top:
            query = compute_ratios(request_data['measurements'])
            result['top'] = rank_matches(dataset, query)[:top]

        logger.info(f"Best match: {result['label']} (score {result['score']})")
        return _jsonable_result(result)

    except InvalidInputError as e:
        logger.warning(f"Validation error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except NotFoundError as e:
        logger.warning(f"Match error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except Exception as e:
        raise _internal_error(e)

@router.post("/ratios", response_model=RatioResponse)
async def face_ratios(request_data: RatioRequest) -> Dict:
    """Compute the ratio vector of a measured face.

    Non-finite ratios (from zero measurements) are returned as null.
    """
    try:
        ratios = compute_ratios(request_data['measurements'])
    except InvalidInputError as e:
        logger.warning(f"Validation error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    return {'ratios': [_finite_or_none(float(r)) for r in ratios]}

@router.get("/faces", response_model=DatasetSummary)
async def list_faces(dataset: Dict[str, np.ndarray] = Depends(get_dataset)) -> Dict:
    """List the labels of every face in the dataset."""
    return {'count': len(dataset), 'labels': list(dataset)}
