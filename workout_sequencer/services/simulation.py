from __future__ import annotations

import logging
from typing import List, Optional

from workout_sequencer.models.actions import (
    Complete,
    ExerciseStart,
    GroupComplete,
    NextExerciseInGroup,
    RestThenContinue,
)
from workout_sequencer.models.plan import Plan
from workout_sequencer.models.trace import TraceStep
from .execution import ExecutionEngine

logger = logging.getLogger(__name__)


def _set_step(engine: ExecutionEngine, index: int, counter: int, group_id: Optional[str] = None) -> TraceStep:
    item = engine.plan.items[index]
    return TraceStep(
        kind="set",
        step=counter,
        index=index,
        name=item.label,
        item_kind=item.kind,
        set_number=engine.get_completed_sets(index),
        total_sets=item.total_sets,
        group_id=group_id,
    )


def simulate_plan(plan: Plan, engine: Optional[ExecutionEngine] = None) -> List[TraceStep]:
    """Run a plan to completion, performing every set immediately.
    Ungrouped items go set by set with their own rest in between; groups go
    round by round, resting after each unfinished round.
    """
    engine = engine if engine is not None else ExecutionEngine(plan)
    steps: List[TraceStep] = []
    counter = 0

    while True:
        action = engine.get_next_action()
        if isinstance(action, Complete):
            steps.append(TraceStep(kind="complete"))
            break

        if isinstance(action, ExerciseStart):
            idx = action.index
            while engine.get_remaining_sets(idx) > 0:
                engine.complete_set(idx)
                counter += 1
                steps.append(_set_step(engine, idx, counter))
                if engine.get_remaining_sets(idx) > 0:
                    steps.append(TraceStep(kind="rest", index=idx, rest_seconds=engine.plan.items[idx].rest_seconds))
            continue

        gid = action.group_id
        steps.append(TraceStep(kind="group-start", group_id=gid, members=[m.index for m in action.members]))
        last: Optional[int] = None
        while True:
            step = engine.get_next_group_action(gid, last)
            if isinstance(step, NextExerciseInGroup):
                engine.complete_set(step.index)
                counter += 1
                steps.append(_set_step(engine, step.index, counter, group_id=gid))
                last = step.index
            elif isinstance(step, RestThenContinue):
                steps.append(
                    TraceStep(kind="rest", index=step.last_completed_index, rest_seconds=step.rest_seconds, group_id=gid)
                )
                last = None
            elif isinstance(step, GroupComplete):
                steps.append(TraceStep(kind="group-complete", group_id=gid))
                break

    logger.info("Simulated %d sets across %d items", counter, len(plan))
    return steps


def render_trace(steps: List[TraceStep]) -> str:
    lines: List[str] = []
    for s in steps:
        if s.kind == "set":
            lines.append(f"{s.step}. {s.name} - set {s.set_number}/{s.total_sets} (type={s.item_kind})")
        elif s.kind == "rest" and s.group_id is not None:
            lines.append(f"  → Group {s.group_id} round complete; rest {s.rest_seconds}s before next round")
        elif s.kind == "rest":
            lines.append(f"  → rest {s.rest_seconds}s before next set")
        elif s.kind == "group-start":
            lines.append(f"-- Start Group {s.group_id} (members indices: {', '.join(str(i) for i in s.members)})")
        elif s.kind == "group-complete":
            lines.append(f"-- Group {s.group_id} complete")
        elif s.kind == "complete":
            lines.append("-- Workout complete")
    return "\n".join(lines)
