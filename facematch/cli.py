"""Command line face matching.

Loads the face dataset, asks for the six measurements of a face and prints
the best matching face.
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional, TextIO

from .config import ConfigError, get_settings
from .core.exceptions import FaceMatchError
from .core.matching import find_best_match, rank_matches
from .core.ratios import MEASUREMENT_NAMES, compute_ratios
from .models.types import MatchResult, ScoreEntry
from .utils.dataset import load_dataset_ratios

logger = logging.getLogger(__name__)

def prompt_float(
    prompt: str,
    read: Optional[Callable[[str], str]] = None,
    err: Optional[TextIO] = None,
) -> float:
    """Prompt until a valid number is entered.

    Raises:
        EOFError: If the input ends before a number is read.
    """
    read = read or input
    err = err or sys.stderr
    while True:
        text = read(prompt)
        try:
            return float(text.strip())
        except ValueError:
            print("Error: you must enter a valid number.", file=err)

def input_measurements(
    read: Optional[Callable[[str], str]] = None,
    err: Optional[TextIO] = None,
) -> List[float]:
    """Ask for every facial measurement, in vector order."""
    read = read or input
    measurements = []
    for name in MEASUREMENT_NAMES:
        measurements.append(prompt_float(f"Enter the {name}: ", read, err))
    return measurements

def format_result(result: MatchResult, top: Optional[List[ScoreEntry]] = None) -> str:
    """Render a match result as text."""
    lines = [f"{entry['label']}: {entry['score']}" for entry in result.get('scores', [])]
    if top:
        lines.append("Closest faces:")
        lines.extend(
            f"  {rank}. {entry['label']}: {entry['score']}"
            for rank, entry in enumerate(top, start=1)
        )
    lines.append(f"Best match: {result['label']}")
    return "\n".join(lines)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="facematch",
        description="Find the face in a dataset whose proportions best match a measured face.",
    )
    parser.add_argument(
        "--dataset",
        help="dataset file (default: $FACEMATCH_DATASET or data/faces.txt)",
    )
    parser.add_argument(
        "-d", "--diagnostics",
        action="store_true",
        help="print the score of every face before the best match",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=0,
        metavar="N",
        help="also print the N closest faces",
    )
    parser.add_argument(
        "-m", "--measurements",
        type=float,
        nargs=len(MEASUREMENT_NAMES),
        metavar="M",
        help="measurements of the face instead of prompting for them",
    )
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except ConfigError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        return 1
    logging.basicConfig(level=settings.log_level, stream=sys.stderr)

    if args.top < 0:
        print("Error: --top must not be negative.", file=sys.stderr)
        return 1

    try:
        dataset = load_dataset_ratios(args.dataset or settings.dataset_path)

        if args.measurements is not None:
            measurements = args.measurements
        else:
            measurements = input_measurements()

        query = compute_ratios(measurements)
        logger.debug(f"Matching face against {len(dataset)} faces")
        result = find_best_match(dataset, query, diagnostics=args.diagnostics)
        top = rank_matches(dataset, query)[:args.top] if args.top else None
    except FaceMatchError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        return 1
    except EOFError:
        print("Error: input ended before all measurements were entered.", file=sys.stderr)
        return 1

    print(format_result(result, top))
    return 0

if __name__ == "__main__":
    sys.exit(main())
