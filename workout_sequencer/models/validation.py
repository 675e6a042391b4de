from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field


class InterleavedItem(BaseModel):
    index: int
    name: str
    group_id: str = Field("none", description="Occupying item's own group, or 'none'")


class GroupIssue(BaseModel):
    severity: Literal["warning"] = "warning"
    group_id: str
    message: str
    span: str
    first_index: int = Field(..., ge=0)
    last_index: int = Field(..., ge=0)
    member_count: int = Field(..., ge=1)
    span_length: int = Field(..., ge=1)
    non_member_indices: List[InterleavedItem] = Field(default_factory=list)


class GroupValidationReport(BaseModel):
    is_valid: bool
    issues: List[GroupIssue] = Field(default_factory=list)
    message: str = ""
