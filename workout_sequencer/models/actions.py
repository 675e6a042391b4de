from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class MemberProgress(BaseModel):
    index: int
    name: Optional[str] = None
    total_sets: int = Field(..., ge=1)
    completed_sets: int = Field(..., ge=0)
    remaining_sets: int = Field(..., ge=0)


class ItemProgress(MemberProgress):
    group_id: Optional[str] = None


class Complete(BaseModel):
    action: Literal["complete"] = "complete"


class ExerciseStart(BaseModel):
    action: Literal["exercise-start"] = "exercise-start"
    index: int
    set_number: int = Field(..., ge=1)
    group_size: int = 1


class GroupSupersetStart(BaseModel):
    action: Literal["group-superset-start"] = "group-superset-start"
    group_id: str
    members: List[MemberProgress]
    start_index: int


class NextExerciseInGroup(BaseModel):
    action: Literal["next-exercise-in-group"] = "next-exercise-in-group"
    index: int
    set_number: int = Field(..., ge=1)
    rest_seconds: Optional[int] = None


class RestThenContinue(BaseModel):
    action: Literal["rest-then-continue"] = "rest-then-continue"
    resume_index: int
    rest_seconds: int = Field(..., ge=0)
    last_completed_index: Optional[int] = None


class GroupComplete(BaseModel):
    action: Literal["group-complete"] = "group-complete"
    group_id: Optional[str] = None


NextAction = Union[Complete, ExerciseStart, GroupSupersetStart]
GroupAction = Union[NextExerciseInGroup, RestThenContinue, GroupComplete]
RoundResult = Union[RestThenContinue, GroupComplete]

EngineAction = Annotated[
    Union[Complete, ExerciseStart, GroupSupersetStart, NextExerciseInGroup, RestThenContinue, GroupComplete],
    Field(discriminator="action"),
]
