from __future__ import annotations

import pytest


def test_lists_are_sorted_and_unique(catalog) -> None:
    assert catalog.get_categories() == ["abs", "back", "chest", "upper arms", "upper legs"]
    assert catalog.get_equipment_types() == ["barbell", "body weight", "cable", "dumbbells"]
    assert catalog.get_body_parts() == ["back", "chest", "upper arms", "upper legs", "waist"]
    assert catalog.get_apple_categories() == [
        "coreTraining",
        "functionalStrengthTraining",
        "traditionalStrengthTraining",
    ]


def test_muscle_groups_union_primary_and_secondary(catalog) -> None:
    muscles = catalog.get_muscle_groups()
    assert muscles == sorted(set(muscles))
    assert "abs" in muscles and "hip flexors" in muscles and "rhomboids" in muscles
    assert len(muscles) == 16


def test_stats(catalog) -> None:
    stats = catalog.get_stats()
    assert stats.total_exercises == 12
    assert stats.categories == 5
    assert stats.equipment_types == 4
    assert stats.muscle_groups == 16
    assert stats.body_parts == 5
    assert stats.apple_categories == 3
    assert stats.average_instruction_steps == pytest.approx(37 / 12)
    assert stats.average_image_count == pytest.approx(17 / 12)
    assert "rhomboids" in stats.secondary_muscles and "rhomboids" not in stats.primary_muscles
    assert stats.to_dict()["totalExercises"] == 12


def test_stats_muscle_lists_ignore_case_like_the_index(make_record) -> None:
    from exercise_catalog.service import ExerciseCatalogService

    service = ExerciseCatalogService.from_records([
        make_record(id="d4e5f6a7-b8c9-4d0e-9f1a-2b3c4d5e6f7a", primaryMuscles=["Abs"], secondaryMuscles=["Obliques"]),
        make_record(id="e5f6a7b8-c9d0-4e1f-8a2b-3c4d5e6f7a8b", primaryMuscles=["abs"], secondaryMuscles=["obliques "]),
    ])
    stats = service.get_stats()
    assert stats.primary_muscles == ["Abs"]
    assert stats.secondary_muscles == ["Obliques"]
    assert stats.muscle_groups == len(service.get_muscle_groups()) == 2
