from __future__ import annotations

import re
from typing import Annotated, Any, Dict, Tuple

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def is_valid_uuid(value: object) -> bool:
    return isinstance(value, str) and bool(UUID_PATTERN.match(value))


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must be a non-empty string")
    return value


def _require_uuid(value: str) -> str:
    if not is_valid_uuid(value):
        raise ValueError("must be a valid UUID")
    return value


def _drop_blank(values: Tuple[str, ...]) -> Tuple[str, ...]:
    return tuple(v for v in values if v.strip())


NonEmptyStr = Annotated[str, AfterValidator(_require_text)]
ExerciseId = Annotated[str, AfterValidator(_require_uuid)]


class Exercise(BaseModel):
    id: ExerciseId = Field(..., description="Catalog UUID, e.g. 874ce7a1-6d8c-4f3b-9a42-1b7e5c0d2f10")
    name: NonEmptyStr
    equipment: NonEmptyStr
    category: NonEmptyStr
    apple_category: NonEmptyStr
    body_part: NonEmptyStr
    primary_muscles: Tuple[NonEmptyStr, ...] = Field(..., min_length=1)
    secondary_muscles: Annotated[Tuple[str, ...], AfterValidator(_drop_blank)] = ()
    instructions: Tuple[NonEmptyStr, ...] = Field(..., min_length=1)
    images: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        json_schema_extra={
            "examples": [
                {
                    "id": "874ce7a1-6d8c-4f3b-9a42-1b7e5c0d2f10",
                    "name": "3/4 sit-up",
                    "equipment": "body weight",
                    "category": "abs",
                    "appleCategory": "functionalStrengthTraining",
                    "bodyPart": "waist",
                    "primaryMuscles": ["abs"],
                    "secondaryMuscles": ["hip flexors", "lower back"],
                    "instructions": [
                        "Lie flat on your back with your knees bent.",
                        "Curl your upper body up until you are three quarters of the way up.",
                    ],
                    "images": ["3-4-sit-up-0.jpg", "3-4-sit-up-1.jpg"],
                }
            ]
        },
    )

    @property
    def muscles(self) -> Tuple[str, ...]:
        return self.primary_muscles + self.secondary_muscles

    def to_dict(self) -> Dict[str, Any]:
        """Wire shape: camelCase keys, lists for sequences."""
        return self.model_dump(mode="json", by_alias=True)
