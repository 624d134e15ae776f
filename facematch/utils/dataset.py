"""Face dataset loading.

This module parses the plain-text face dataset. Each face is introduced by a
``FACE <label>`` header and followed by one line of six whitespace-separated
measurements. Blank lines and lines starting with ``#`` are ignored::

    # name    head  ears  eyes-top  eyes  nose  chin-mouth
    FACE alice.jpg
    23.1 14.8 10.2 6.3 5.1 4.0
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

import numpy as np

from ..core.exceptions import FaceMatchError
from ..core.ratios import MEASUREMENT_SIZE, convert_dataset

logger = logging.getLogger(__name__)

FACE_HEADER = "FACE"

class ParseError(FaceMatchError):
    """Exception raised when the dataset source is malformed."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)

class DatasetLoadError(ParseError):
    """Exception raised when the dataset file cannot be read."""
    pass

def _parse_number(field: str) -> float:
    # float() also takes digit separators such as "1_000"
    if "_" in field:
        raise ValueError(f"could not convert string to float: {field!r}")
    return float(field)

def parse_dataset(lines: Iterable[str]) -> Dict[str, List[float]]:
    """Parse dataset lines into raw measurement vectors.

    Args:
        lines: Text lines of the dataset, with or without line endings.

    Returns:
        Mapping of face label to its six measurements, in file order.

    Raises:
        ParseError: If data appears before a header, a header has no label,
            a data line does not hold exactly six fields, or a field is not
            a number.
    """
    entries: Dict[str, List[float]] = {}
    current_face = None
    pending = None

    for line_number, line in enumerate(lines, start=1):
        stripped = line.strip()

        # Skip comments and blank lines
        if not stripped or line.startswith("#"):
            continue

        fields = stripped.split()
        if fields[0] == FACE_HEADER:
            if len(fields) < 2:
                raise ParseError("face header is missing a label", line_number)
            if pending is not None:
                logger.warning(f"Face {pending!r} has no measurements, skipping")
            current_face = fields[1]
            pending = current_face
            continue

        if current_face is None:
            raise ParseError(
                "you must specify the face label before the data", line_number
            )

        if len(fields) != MEASUREMENT_SIZE:
            raise ParseError(
                f"expected {MEASUREMENT_SIZE} measurements, got {len(fields)}",
                line_number
            )

        try:
            data = [_parse_number(field) for field in fields]
        except ValueError as e:
            raise ParseError(f"number format incorrect: {str(e)}", line_number)

        if current_face in entries:
            logger.warning(f"Face {current_face!r} defined more than once, keeping the last entry")
        entries[current_face] = data
        pending = None

    if pending is not None:
        logger.warning(f"Face {pending!r} has no measurements, skipping")

    return entries

def load_dataset(path: Union[str, Path]) -> Dict[str, List[float]]:
    """Read and parse a dataset file.

    Args:
        path: Path of the dataset text file.

    Returns:
        Mapping of face label to its six measurements, in file order.

    Raises:
        DatasetLoadError: If the file cannot be read.
        ParseError: If the file content is malformed.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            entries = parse_dataset(f)
    except OSError as e:
        raise DatasetLoadError(f"I/O error reading {path}: {e.strerror or str(e)}") from e
    except UnicodeDecodeError as e:
        raise ParseError(f"{path} is not valid UTF-8 text: {str(e)}") from e

    logger.info(f"Loaded {len(entries)} faces from {path}")
    return entries

def load_dataset_ratios(path: Union[str, Path]) -> Dict[str, np.ndarray]:
    """Read a dataset file and return the ratio vector of every face."""
    return convert_dataset(load_dataset(path))
