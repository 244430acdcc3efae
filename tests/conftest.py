from __future__ import annotations

import copy
import json
from typing import Any, Callable, Dict, List

import pytest

from exercise_catalog.config import BUNDLED_CATALOG_PATH, get_settings
from exercise_catalog.service import ExerciseCatalogService

SIT_UP_ID = "874ce7a1-6d8c-4f3b-9a42-1b7e5c0d2f10"
CRUNCH_ID = "2b6f4c8e-1a3d-4e5f-8b7c-9d0e1f2a3b4c"
HANGING_LEG_RAISE_ID = "5c1d9e7a-3f2b-4a6c-9e8d-7b6a5c4d3e2f"
CABLE_CRUNCH_ID = "9a8b7c6d-5e4f-4a3b-8c2d-1e0f9a8b7c6d"
PUSH_UP_ID = "0f1e2d3c-4b5a-4968-a7b6-c5d4e3f2a1b0"
BODYWEIGHT_SQUAT_ID = "6e7f8a9b-0c1d-4e2f-9a3b-4c5d6e7f8a9b"
BARBELL_SQUAT_ID = "7f8a9b0c-1d2e-4f3a-8b4c-5d6e7f8a9b0c"
PULL_UP_ID = "9b0c1d2e-3f4a-4b5c-8d6e-7f8a9b0c1d2e"
PLANK_ID = "a0b1c2d3-e4f5-4a6b-9c7d-8e9f0a1b2c3d"


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def raw_records() -> List[Dict[str, Any]]:
    payload = json.loads(BUNDLED_CATALOG_PATH.read_text(encoding="utf-8"))
    return copy.deepcopy(payload["exercises"])


@pytest.fixture
def catalog(raw_records: List[Dict[str, Any]]) -> ExerciseCatalogService:
    return ExerciseCatalogService.from_records(raw_records)


@pytest.fixture
def make_record() -> Callable[..., Dict[str, Any]]:
    def _make(**overrides: Any) -> Dict[str, Any]:
        record: Dict[str, Any] = {
            "id": "c3d4e5f6-a7b8-4c9d-8e0f-1a2b3c4d5e6f",
            "name": "test exercise",
            "equipment": "kettlebell",
            "category": "shoulders",
            "appleCategory": "traditionalStrengthTraining",
            "bodyPart": "shoulders",
            "primaryMuscles": ["delts"],
            "secondaryMuscles": [],
            "instructions": ["Do the movement."],
            "images": [],
        }
        record.update(overrides)
        return record

    return _make
