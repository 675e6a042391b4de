from .plan import Plan, PlanItem, ItemKind, normalize_group_id, as_index
from .actions import (
    MemberProgress,
    ItemProgress,
    Complete,
    ExerciseStart,
    GroupSupersetStart,
    NextExerciseInGroup,
    RestThenContinue,
    GroupComplete,
    NextAction,
    GroupAction,
    RoundResult,
    EngineAction,
)
from .validation import InterleavedItem, GroupIssue, GroupValidationReport
from .trace import TraceStep, TraceKind

__all__ = [
    "Plan",
    "PlanItem",
    "ItemKind",
    "normalize_group_id",
    "as_index",
    "MemberProgress",
    "ItemProgress",
    "Complete",
    "ExerciseStart",
    "GroupSupersetStart",
    "NextExerciseInGroup",
    "RestThenContinue",
    "GroupComplete",
    "NextAction",
    "GroupAction",
    "RoundResult",
    "EngineAction",
    "InterleavedItem",
    "GroupIssue",
    "GroupValidationReport",
    "TraceStep",
    "TraceKind",
]
