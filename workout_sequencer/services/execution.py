from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from workout_sequencer.config import get_settings
from workout_sequencer.models.actions import (
    Complete,
    ExerciseStart,
    GroupAction,
    GroupComplete,
    GroupSupersetStart,
    ItemProgress,
    MemberProgress,
    NextAction,
    NextExerciseInGroup,
    RestThenContinue,
    RoundResult,
)
from workout_sequencer.models.plan import Plan, as_index, normalize_group_id
from .groups import GroupIndex

logger = logging.getLogger(__name__)


class ExecutionState:
    """Completed-set counts for one run of a plan, keyed by item index."""

    def __init__(self, size: int = 0) -> None:
        self._completed: Dict[int, int] = {}
        self.reset(size)

    @classmethod
    def for_plan(cls, plan: Plan) -> "ExecutionState":
        return cls(len(plan))

    def reset(self, size: Optional[int] = None) -> None:
        if size is None:
            size = len(self._completed)
        self._completed = {i: 0 for i in range(size)}

    def completed(self, index: int) -> int:
        return self._completed.get(index, 0)

    def record_set(self, index: int, total_sets: int) -> bool:
        """Count one set for `index`, never past `total_sets`. Returns False when already full."""
        current = self._completed.get(index, 0)
        if current >= total_sets:
            return False
        self._completed[index] = current + 1
        return True

    def as_dict(self) -> Dict[int, int]:
        return dict(self._completed)


class ExecutionEngine:
    """Decides the next step of a workout plan.

    The engine always rescans the plan for the first incomplete item, and a
    grouped item pulls in every member of its group in plan order, even when
    ungrouped or foreign items sit between them. Waiting (rest, performing a
    set) is the caller's job; the engine only reports what comes next.
    """

    def __init__(self, plan: Plan, state: Optional[ExecutionState] = None) -> None:
        self.plan = plan
        self.state = state if state is not None else ExecutionState.for_plan(plan)
        self.groups = GroupIndex(plan)

    # ----- queries -----

    def is_grouped(self, index: int) -> bool:
        return self.groups.is_grouped(index)

    def get_group_exercises(self, group_id: Any) -> List[int]:
        return self.groups.members(group_id)

    def get_total_sets(self, index: int) -> int:
        item = self.plan.get(index)
        return item.total_sets if item is not None else 0

    def get_completed_sets(self, index: int) -> int:
        return self.state.completed(index)

    def get_remaining_sets(self, index: int) -> int:
        return max(0, self.get_total_sets(index) - self.get_completed_sets(index))

    def find_next_incomplete(self) -> Optional[int]:
        for i in range(len(self.plan)):
            if self.get_completed_sets(i) < self.get_total_sets(i):
                return i
        return None

    def _member_progress(self, index: int) -> MemberProgress:
        item = self.plan.items[index]
        return MemberProgress(
            index=index,
            name=item.name,
            total_sets=item.total_sets,
            completed_sets=self.get_completed_sets(index),
            remaining_sets=self.get_remaining_sets(index),
        )

    def get_state(self) -> List[ItemProgress]:
        return [
            ItemProgress(group_id=item.group_id, **self._member_progress(i).model_dump())
            for i, item in enumerate(self.plan.items)
        ]

    # ----- mutations -----

    def complete_set(self, index: int) -> None:
        item = self.plan.get(index)
        if item is None:
            logger.debug("complete_set ignored for unknown index %s", index)
            return
        if self.state.record_set(index, item.total_sets):
            logger.debug(
                "Set %s/%s done for %s (index %s)",
                self.get_completed_sets(index),
                item.total_sets,
                item.label,
                index,
            )

    def reset(self) -> None:
        self.state.reset(len(self.plan))

    # ----- progression -----

    def get_next_action(self) -> NextAction:
        nxt = self.find_next_incomplete()
        if nxt is None:
            logger.debug("All items complete")
            return Complete()

        group_id = self.groups.group_of(nxt)
        if group_id is None:
            return ExerciseStart(index=nxt, set_number=self.get_completed_sets(nxt) + 1, group_size=1)

        members = [self._member_progress(i) for i in self.get_group_exercises(group_id)]
        logger.debug("Group %s starts at index %s with members %s", group_id, nxt, [m.index for m in members])
        return GroupSupersetStart(group_id=group_id, members=members, start_index=nxt)

    def get_next_group_action(self, group_id: Any, last_completed_index: Any = None) -> GroupAction:
        """Step within a round of `group_id`.
        `last_completed_index` is an in-round cursor over the member list, which is
        recomputed from the plan on every call. Returns the next member after the cursor
        that still has sets, or the end-of-round result once no such member is left.
        Without a cursor (None or not an int) the round starts again at the first
        member with sets left.
        """
        cursor = as_index(last_completed_index)
        members = self.get_group_exercises(group_id)
        if not any(self.get_remaining_sets(i) > 0 for i in members):
            return GroupComplete(group_id=normalize_group_id(group_id))

        for idx in members:
            if cursor is not None and idx <= cursor:
                continue
            if self.get_remaining_sets(idx) > 0:
                return NextExerciseInGroup(index=idx, set_number=self.get_completed_sets(idx) + 1, rest_seconds=None)

        # only reachable with a cursor: the round is over
        return self.complete_group_round(cursor, group_id)

    def complete_group_round(self, last_completed_index: Any, group_id: Any) -> RoundResult:
        """End of a round. Rest comes from the item at `last_completed_index`;
        a missing, non-int or unknown index rests for the configured default.
        """
        last = as_index(last_completed_index)
        members = self.get_group_exercises(group_id)
        gid = normalize_group_id(group_id)

        if not any(self.get_remaining_sets(i) > 0 for i in members):
            logger.debug("Group %s complete", gid)
            return GroupComplete(group_id=gid)

        last_item = self.plan.get(last)
        rest = last_item.rest_seconds if last_item is not None else get_settings().DEFAULT_REST_SECONDS
        logger.debug("Group %s round done after index %s; rest %ss", gid, last, rest)
        return RestThenContinue(
            resume_index=members[0],
            rest_seconds=rest,
            last_completed_index=last,
        )
