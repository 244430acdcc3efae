"""Record validation at the catalog load boundary.

Raw JSON records are parsed into frozen ``Exercise`` models here and nowhere
else. A bad record is logged and skipped; only an unreadable source or a
load that yields no valid records is fatal.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Sequence, Tuple, Union

from pydantic import ValidationError

from exercise_catalog.errors import DataLoadError, RecordValidationError
from exercise_catalog.models.catalog_io import RejectedRecord
from exercise_catalog.models.exercise import Exercise

logger = logging.getLogger(__name__)

Source = Union[str, Path, bytes, bytearray]


@dataclass
class LoadResult:
    exercises: Tuple[Exercise, ...]
    rejected: List[RejectedRecord] = field(default_factory=list)


def _describe(source: Source) -> str:
    if isinstance(source, (bytes, bytearray)):
        return f"<{len(source)} bytes>"
    return str(source)


def read_source(source: Source) -> List[Any]:
    """Decode the catalog payload into a list of raw records.

    Accepts a file path or the raw bytes. The payload is either a bare JSON
    array or an object with an ``exercises`` array.
    """
    label = _describe(source)
    try:
        if isinstance(source, (bytes, bytearray)):
            text = bytes(source).decode("utf-8")
        else:
            text = Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Cannot read exercise catalog %s: %s", label, exc)
        raise DataLoadError(label, f"unreadable source ({exc})") from exc

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.error("Exercise catalog %s is not valid JSON: %s", label, exc)
        raise DataLoadError(label, f"invalid JSON format ({exc.msg} at line {exc.lineno})") from exc

    if isinstance(payload, dict) and "exercises" in payload:
        payload = payload["exercises"]
    if not isinstance(payload, list):
        logger.error("Exercise catalog %s has no exercise array", label)
        raise DataLoadError(label, "exercise data must be an array or an object with an 'exercises' array")
    return payload


def _record_id(raw: Any) -> str | None:
    if isinstance(raw, dict) and isinstance(raw.get("id"), str):
        return raw["id"]
    return None


def _error_messages(exc: ValidationError) -> List[str]:
    out: List[str] = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ())) or "record"
        out.append(f"{loc}: {err.get('msg', 'invalid')}")
    return out


def validate_record(index: int, raw: Any) -> Exercise:
    try:
        return Exercise.model_validate(raw)
    except ValidationError as exc:
        raise RecordValidationError(index, _record_id(raw), _error_messages(exc)) from exc


def validate_records(raw_records: Sequence[Any], source: str = "<records>") -> LoadResult:
    exercises: List[Exercise] = []
    rejected: List[RejectedRecord] = []
    for index, raw in enumerate(raw_records):
        try:
            exercises.append(validate_record(index, raw))
        except RecordValidationError as err:
            logger.warning("Skipping invalid exercise at index %d (%s): %s",
                           err.index, err.record_id or "<no id>", "; ".join(err.errors))
            rejected.append(RejectedRecord(index=err.index, id=err.record_id, errors=err.errors))

    if not exercises:
        logger.error("No valid exercises in %s (%d rejected)", source, len(rejected))
        raise DataLoadError(source, "no valid exercises found")

    logger.info("Validated %d exercises from %s (%d rejected)", len(exercises), source, len(rejected))
    return LoadResult(exercises=tuple(exercises), rejected=rejected)


def load_exercises(source: Source) -> LoadResult:
    return validate_records(read_source(source), source=_describe(source))
