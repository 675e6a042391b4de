from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


TraceKind = Literal["set", "rest", "group-start", "group-complete", "complete"]


class TraceStep(BaseModel):
    kind: TraceKind
    step: Optional[int] = Field(None, description="Running set counter, only on 'set' steps")
    index: Optional[int] = None
    name: Optional[str] = None
    item_kind: Optional[str] = None
    set_number: Optional[int] = None
    total_sets: Optional[int] = None
    rest_seconds: Optional[int] = None
    group_id: Optional[str] = None
    members: List[int] = Field(default_factory=list)
