# Purpose: Finds conversions.json on disk and loads it once at startup.

import json
import logging
import math
from pathlib import Path
from typing import Iterable, Optional

from pydantic import ValidationError

from . import config
from .errors import DatasetNotFoundError, DatasetParseError, DatasetReadError
from .schemas import ConversionData

# Set up a logger for this module
logger = logging.getLogger(__name__)


def _reject_constant(token: str):
    # NaN and Infinity are not JSON and cannot be served back out.
    raise ValueError(f"non-standard JSON constant {token}")


def _finite_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {token}")
    return value


def resolve_data_path(candidates: Optional[Iterable[Path]] = None) -> Path:
    """
    Returns the first candidate path that exists.

    Relative candidates are resolved against the current working directory,
    so the same list works inside the container (file next to the binary)
    and in a source checkout (file under ../public/data).
    """
    if candidates is None:
        candidates = config.DATA_PATH_CANDIDATES
    candidates = [Path(path) for path in candidates]

    for path in candidates:
        if path.exists():
            return path

    raise DatasetNotFoundError(candidates)


def load_conversion_data(candidates: Optional[Iterable[Path]] = None) -> ConversionData:
    """
    Reads and parses the dataset.

    Raises:
        DatasetNotFoundError: no candidate path exists.
        DatasetReadError: the file exists but cannot be read as UTF-8 text.
        DatasetParseError: the contents are not a JSON object, or a
            recognized top-level field has the wrong JSON type.
    """
    path = resolve_data_path(candidates)
    logger.info(f"Reading conversion data from {path}")

    try:
        with open(path, "r", encoding="utf-8") as data_file:
            raw = data_file.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DatasetReadError(f"Cannot read {path}: {e}") from e

    try:
        document = json.loads(
            raw, parse_constant=_reject_constant, parse_float=_finite_float
        )
    except ValueError as e:
        raise DatasetParseError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(document, dict):
        raise DatasetParseError(
            f"{path} must contain a JSON object, got {type(document).__name__}"
        )

    try:
        data = ConversionData.model_validate(document)
    except ValidationError as e:
        raise DatasetParseError(f"{path} has an unexpected shape: {e}") from e

    logger.info(
        f"Loaded conversion data: {data.program_count} programs, "
        f"{data.conversion_count} conversions"
    )
    return data
