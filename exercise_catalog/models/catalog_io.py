from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from exercise_catalog.config import get_settings
from .exercise import Exercise


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def _as_term_list(v: Any) -> Any:
    # a bare string is one term, not a sequence of characters
    if v is None:
        return []
    if isinstance(v, str):
        return [v]
    return v


class SearchFilter(_CamelModel):
    model_config = ConfigDict(extra="forbid")

    equipment: Optional[str] = None
    category: Optional[str] = None
    body_part: Optional[str] = None
    apple_category: Optional[str] = None
    primary_muscles: List[str] = Field(default_factory=list)
    secondary_muscles: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    query: Optional[str] = None
    limit: int = Field(default_factory=lambda: get_settings().DEFAULT_SEARCH_LIMIT)
    offset: int = 0

    @field_validator("equipment", "category", "body_part", "apple_category", "query", mode="before")
    @classmethod
    def _blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("primary_muscles", "secondary_muscles", "tags", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return _as_term_list(v)

    @field_validator("primary_muscles", "secondary_muscles", "tags")
    @classmethod
    def _drop_blank_terms(cls, v: List[str]) -> List[str]:
        return [term for term in v if term.strip()]

    @field_validator("limit", mode="before")
    @classmethod
    def _default_limit(cls, v: Any) -> Any:
        return get_settings().DEFAULT_SEARCH_LIMIT if v is None else v

    @field_validator("limit")
    @classmethod
    def _clamp_limit(cls, v: int) -> int:
        return _clamp(v, 1, get_settings().MAX_SEARCH_LIMIT)

    @field_validator("offset", mode="before")
    @classmethod
    def _default_offset(cls, v: Any) -> Any:
        return 0 if v is None else v

    @field_validator("offset")
    @classmethod
    def _clamp_offset(cls, v: int) -> int:
        return max(0, v)


class AlternativesRequest(_CamelModel):
    model_config = ConfigDict(extra="forbid")

    exercise_id: str
    target_muscles: List[str] = Field(default_factory=list)
    equipment: Optional[str] = None
    limit: int = Field(default_factory=lambda: get_settings().DEFAULT_ALTERNATIVES_LIMIT)

    @field_validator("target_muscles", mode="before")
    @classmethod
    def _wrap_terms(cls, v: Any) -> Any:
        return _as_term_list(v)

    @field_validator("target_muscles")
    @classmethod
    def _drop_blank_terms(cls, v: List[str]) -> List[str]:
        return [term for term in v if term.strip()]

    @field_validator("equipment", mode="before")
    @classmethod
    def _blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("limit", mode="before")
    @classmethod
    def _default_limit(cls, v: Any) -> Any:
        return get_settings().DEFAULT_ALTERNATIVES_LIMIT if v is None else v

    @field_validator("limit")
    @classmethod
    def _clamp_limit(cls, v: int) -> int:
        return _clamp(v, 1, get_settings().MAX_ALTERNATIVES_LIMIT)


class IdsRequest(_CamelModel):
    ids: List[Any]

    @field_validator("ids", mode="before")
    @classmethod
    def _reject_bare_string(cls, v: Any) -> Any:
        if isinstance(v, (str, bytes)):
            raise ValueError("ids must be a list of ids, not a single string")
        return v


class SearchResult(_CamelModel):
    exercises: List[Exercise]
    total: int
    limit: int
    offset: int
    has_more: bool


class ValidationResult(_CamelModel):
    valid: List[str] = Field(default_factory=list)
    invalid: List[str] = Field(default_factory=list)


class CatalogStats(_CamelModel):
    total_exercises: int
    categories: int
    equipment_types: int
    muscle_groups: int
    body_parts: int
    apple_categories: int
    primary_muscles: List[str] = Field(default_factory=list)
    secondary_muscles: List[str] = Field(default_factory=list)
    average_instruction_steps: float
    average_image_count: float


class RejectedRecord(_CamelModel):
    index: int
    id: Optional[str] = None
    errors: List[str] = Field(default_factory=list)


class IntegritySummary(_CamelModel):
    duplicates: int
    rejected: int


class IntegrityReport(_CamelModel):
    is_valid: bool
    total_checked: int
    duplicate_ids: List[str] = Field(default_factory=list)
    rejected: List[RejectedRecord] = Field(default_factory=list)
    summary: IntegritySummary
