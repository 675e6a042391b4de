from __future__ import annotations

import math
from typing import Any, Iterable, List, Literal, Mapping, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator

from workout_sequencer.config import get_settings


ItemKind = Literal["exercise", "echo", "other"]


def normalize_group_id(value: Any) -> Optional[str]:
    """Collapse the loose group representation (number, string, blank) to a trimmed id or None."""
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    text = str(value).strip()
    return text or None


def _coerce_count(value: Any, minimum: int, default: int) -> int:
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return default
    if not isinstance(value, (int, float)):
        return default
    if isinstance(value, float) and not math.isfinite(value):
        return default
    number = int(value)
    if number < minimum:
        return default
    return number


def as_index(value: Any) -> Optional[int]:
    """Plan position for `value`, or None when it is not an int (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


class PlanItem(BaseModel):
    model_config = {"populate_by_name": True, "validate_assignment": True}

    index: int = Field(0, ge=0, description="Position of the item in its plan")
    name: Optional[str] = None
    kind: ItemKind = Field("exercise", validation_alias=AliasChoices("kind", "type"))
    total_sets: int = Field(
        default_factory=lambda: get_settings().DEFAULT_TOTAL_SETS,
        validation_alias=AliasChoices("total_sets", "totalSets", "sets"),
    )
    rest_seconds: int = Field(
        default_factory=lambda: get_settings().DEFAULT_REST_SECONDS,
        validation_alias=AliasChoices("rest_seconds", "restSeconds", "restSec"),
    )
    group_id: Optional[str] = Field(
        None, validation_alias=AliasChoices("group_id", "groupId", "groupNumber")
    )

    @field_validator("index", mode="before")
    @classmethod
    def _coerce_index(cls, v: Any) -> int:
        # overwritten by Plan with the list position
        return _coerce_count(v, minimum=0, default=0)

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        return str(v).strip() or None

    @field_validator("kind", mode="before")
    @classmethod
    def _coerce_kind(cls, v: Any) -> str:
        if v is None:
            return "exercise"
        text = str(v).strip().lower()
        if not text:
            return "exercise"
        return text if text in ("exercise", "echo") else "other"

    @field_validator("total_sets", mode="before")
    @classmethod
    def _coerce_total_sets(cls, v: Any) -> int:
        return _coerce_count(v, minimum=1, default=get_settings().DEFAULT_TOTAL_SETS)

    @field_validator("rest_seconds", mode="before")
    @classmethod
    def _coerce_rest_seconds(cls, v: Any) -> int:
        return _coerce_count(v, minimum=0, default=get_settings().DEFAULT_REST_SECONDS)

    @field_validator("group_id", mode="before")
    @classmethod
    def _normalize_group_id(cls, v: Any) -> Optional[str]:
        return normalize_group_id(v)

    @property
    def label(self) -> str:
        return self.name or self.kind

    @property
    def is_grouped(self) -> bool:
        return self.group_id is not None


class Plan(BaseModel):
    name: Optional[str] = None
    items: List[PlanItem] = Field(default_factory=list)

    @model_validator(mode="after")
    def _assign_positions(self) -> "Plan":
        # index always mirrors list position
        for i, item in enumerate(self.items):
            if item.index != i:
                item.index = i
        return self

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any] | PlanItem], name: Optional[str] = None) -> "Plan":
        items = [r if isinstance(r, PlanItem) else PlanItem.model_validate(dict(r)) for r in records]
        return cls(name=name, items=items)

    def __len__(self) -> int:
        return len(self.items)

    def get(self, index: Any) -> Optional[PlanItem]:
        position = as_index(index)
        if position is not None and 0 <= position < len(self.items):
            return self.items[position]
        return None
