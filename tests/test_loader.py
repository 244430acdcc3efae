from __future__ import annotations

import json
import logging

import pytest

from exercise_catalog.errors import DataLoadError
from exercise_catalog.services.loader import load_exercises, read_source, validate_records


def test_reads_bare_array_and_wrapped_object(make_record) -> None:
    rec = make_record()
    assert read_source(json.dumps([rec]).encode()) == [rec]
    assert read_source(json.dumps({"exercises": [rec], "version": 2}).encode()) == [rec]


def test_reads_from_path(tmp_path, make_record) -> None:
    path = tmp_path / "exercises.json"
    path.write_text(json.dumps([make_record()]), encoding="utf-8")
    result = load_exercises(path)
    assert len(result.exercises) == 1
    assert result.exercises[0].primary_muscles == ("delts",)
    assert result.rejected == []


def test_missing_file_is_fatal(tmp_path) -> None:
    with pytest.raises(DataLoadError, match="unreadable"):
        load_exercises(tmp_path / "nope.json")


def test_invalid_json_is_fatal() -> None:
    with pytest.raises(DataLoadError, match="invalid JSON"):
        read_source(b"[{not json")


@pytest.mark.parametrize("payload", [{"items": []}, "exercises", 42])
def test_wrong_top_level_shape_is_fatal(payload) -> None:
    with pytest.raises(DataLoadError):
        read_source(json.dumps(payload).encode())


def test_bad_records_are_skipped_and_logged(make_record, caplog) -> None:
    good = make_record()
    bad_uuid = make_record(id="not-a-uuid")
    no_primary = make_record(id="d4e5f6a7-b8c9-4d0e-9f1a-2b3c4d5e6f7a", primaryMuscles=[])
    blank_name = make_record(id="e5f6a7b8-c9d0-4e1f-8a2b-3c4d5e6f7a8b", name="   ")
    no_steps = make_record(id="f6a7b8c9-d0e1-4f2a-9b3c-4d5e6f7a8b9c", instructions=[])
    missing_field = make_record(id="a7b8c9d0-e1f2-4a3b-8c4d-5e6f7a8b9c0d")
    del missing_field["bodyPart"]

    with caplog.at_level(logging.WARNING, logger="exercise_catalog.services.loader"):
        result = validate_records([good, bad_uuid, no_primary, blank_name, no_steps, missing_field, "junk"])

    assert [ex.id for ex in result.exercises] == [good["id"]]
    assert [r.index for r in result.rejected] == [1, 2, 3, 4, 5, 6]
    assert result.rejected[0].id == "not-a-uuid"
    assert result.rejected[4].id == missing_field["id"]
    assert result.rejected[-1].id is None
    assert any("bodyPart" in e for e in result.rejected[4].errors), result.rejected[4].errors
    assert "index 1" in caplog.text


def test_all_invalid_is_fatal(make_record) -> None:
    with pytest.raises(DataLoadError, match="no valid exercises"):
        validate_records([make_record(id="bad"), make_record(name="")])


def test_empty_array_is_fatal() -> None:
    with pytest.raises(DataLoadError):
        load_exercises(b"[]")


def test_optional_fields_default_and_extras_ignored(make_record) -> None:
    rec = make_record(popularity=9)
    del rec["secondaryMuscles"]
    del rec["images"]
    ex = validate_records([rec]).exercises[0]
    assert ex.secondary_muscles == ()
    assert ex.images == ()
    assert ex.tags == ()
    assert "popularity" not in ex.to_dict()


def test_wrong_types_are_rejected_not_coerced(make_record) -> None:
    good = make_record()
    numeric_name = make_record(id="b8c9d0e1-f2a3-4b4c-9d5e-6f7a8b9c0d1e", name=123)
    muscles_as_string = make_record(id="c9d0e1f2-a3b4-4c5d-8e6f-7a8b9c0d1e2f", primaryMuscles="abs")
    result = validate_records([good, numeric_name, muscles_as_string])
    assert len(result.exercises) == 1
    assert len(result.rejected) == 2


def test_blank_secondary_muscles_are_dropped_not_fatal(make_record) -> None:
    rec = make_record(secondaryMuscles=["", "obliques", "   "])
    result = validate_records([rec])
    assert result.rejected == []
    assert result.exercises[0].secondary_muscles == ("obliques",)
