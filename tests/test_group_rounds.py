from __future__ import annotations

from workout_sequencer.models import (
    GroupComplete,
    GroupSupersetStart,
    NextExerciseInGroup,
    Plan,
    RestThenContinue,
)
from workout_sequencer.services.execution import ExecutionEngine


def interleaved_plan() -> Plan:
    return Plan.from_records([
        {"name": "A1", "kind": "exercise", "totalSets": 2, "restSeconds": 10, "groupId": "1"},
        {"name": "X", "kind": "exercise", "totalSets": 1, "restSeconds": 5},
        {"name": "A2", "kind": "exercise", "totalSets": 2, "restSeconds": 20, "groupId": "1"},
    ])


def test_interleaved_superset_scenario() -> None:
    engine = ExecutionEngine(interleaved_plan())

    start = engine.get_next_action()
    assert isinstance(start, GroupSupersetStart)
    assert start.group_id == "1"
    assert [m.index for m in start.members] == [0, 2]

    engine.complete_set(0)
    engine.complete_set(2)
    first = engine.complete_group_round(2, "1")
    assert isinstance(first, RestThenContinue)
    assert first.rest_seconds == 20
    assert first.resume_index == 0
    assert first.last_completed_index == 2

    engine.complete_set(0)
    engine.complete_set(2)
    assert isinstance(engine.complete_group_round(2, "1"), GroupComplete)

    # the interleaved ungrouped item is next, untouched by the group
    nxt = engine.get_next_action()
    assert nxt.action == "exercise-start" and nxt.index == 1  # type: ignore[union-attr]


def test_rest_comes_from_last_completed_member_only() -> None:
    engine = ExecutionEngine(interleaved_plan())
    engine.complete_set(2)
    engine.complete_set(0)
    result = engine.complete_group_round(0, "1")
    assert isinstance(result, RestThenContinue)
    assert result.rest_seconds == 10, "Rest must follow the member that finished the round"


def test_rest_zero_is_kept() -> None:
    engine = ExecutionEngine(Plan.from_records([
        {"name": "A1", "totalSets": 2, "restSeconds": 0, "groupId": "1"},
        {"name": "A2", "totalSets": 2, "restSeconds": 0, "groupId": "1"},
    ]))
    engine.complete_set(0)
    engine.complete_set(1)
    result = engine.complete_group_round(1, "1")
    assert isinstance(result, RestThenContinue) and result.rest_seconds == 0


def test_rest_falls_back_to_default() -> None:
    engine = ExecutionEngine(Plan.from_records([
        {"name": "A1", "totalSets": 2, "restSeconds": "soon", "groupId": "1"},
        {"name": "A2", "totalSets": 2, "groupId": "1"},
    ]))
    engine.complete_set(0)
    engine.complete_set(1)
    by_item = engine.complete_group_round(0, "1")
    assert isinstance(by_item, RestThenContinue) and by_item.rest_seconds == 60
    unknown = engine.complete_group_round(42, "1")
    assert isinstance(unknown, RestThenContinue) and unknown.rest_seconds == 60


def test_unknown_group_round_is_complete() -> None:
    engine = ExecutionEngine(interleaved_plan())
    assert engine.get_group_exercises("nope") == []
    assert isinstance(engine.complete_group_round(0, "nope"), GroupComplete)
    assert isinstance(engine.complete_group_round(0, "  "), GroupComplete)
    assert isinstance(engine.get_next_group_action("nope"), GroupComplete)


def test_next_group_action_walks_round_in_plan_order() -> None:
    engine = ExecutionEngine(Plan.from_records([
        {"name": "A1", "totalSets": 1, "restSeconds": 10, "groupId": "1"},
        {"name": "X"},
        {"name": "A2", "totalSets": 2, "restSeconds": 20, "groupId": "1"},
        {"name": "A3", "totalSets": 2, "restSeconds": 30, "groupId": "1"},
    ]))

    step = engine.get_next_group_action("1")
    assert isinstance(step, NextExerciseInGroup)
    assert (step.index, step.set_number, step.rest_seconds) == (0, 1, None)
    engine.complete_set(0)

    step = engine.get_next_group_action("1", 0)
    assert isinstance(step, NextExerciseInGroup) and step.index == 2, "Interleaved item 1 is not a member"
    engine.complete_set(2)

    step = engine.get_next_group_action("1", 2)
    assert isinstance(step, NextExerciseInGroup) and step.index == 3
    engine.complete_set(3)

    end = engine.get_next_group_action("1", 3)
    assert isinstance(end, RestThenContinue)
    assert end.rest_seconds == 30 and end.resume_index == 0

    # second round skips the finished first member
    step = engine.get_next_group_action("1")
    assert isinstance(step, NextExerciseInGroup) and step.index == 2 and step.set_number == 2
    engine.complete_set(2)
    step = engine.get_next_group_action("1", 2)
    assert isinstance(step, NextExerciseInGroup) and step.index == 3
    engine.complete_set(3)

    done = engine.get_next_group_action("1", 3)
    assert isinstance(done, GroupComplete) and done.group_id == "1"


def test_two_groups_run_one_after_another() -> None:
    plan = Plan.from_records([
        {"name": "A1", "totalSets": 1, "groupId": "1"},
        {"name": "B1", "totalSets": 1, "groupId": "2"},
        {"name": "A2", "totalSets": 1, "groupId": "1"},
        {"name": "B2", "totalSets": 1, "groupId": "2"},
    ])
    engine = ExecutionEngine(plan)

    first = engine.get_next_action()
    assert isinstance(first, GroupSupersetStart) and first.group_id == "1"
    engine.complete_set(0)
    engine.complete_set(2)
    assert isinstance(engine.complete_group_round(2, "1"), GroupComplete)

    second = engine.get_next_action()
    assert isinstance(second, GroupSupersetStart) and second.group_id == "2"
    assert [m.index for m in second.members] == [1, 3]
    assert second.start_index == 1


def test_round_end_without_usable_last_index_rests_default() -> None:
    engine = ExecutionEngine(interleaved_plan())
    engine.complete_set(0)
    engine.complete_set(2)
    for marker in (None, "x", "2", True, 2.0):
        result = engine.complete_group_round(marker, "1")
        assert isinstance(result, RestThenContinue), f"marker {marker!r}"
        assert result.rest_seconds == 60
        assert result.last_completed_index is None
        assert result.resume_index == 0


def test_cursor_dropped_mid_round_restarts_at_first_member_with_sets() -> None:
    engine = ExecutionEngine(interleaved_plan())
    step = engine.get_next_group_action("1")
    assert isinstance(step, NextExerciseInGroup) and step.index == 0
    engine.complete_set(0)

    again = engine.get_next_group_action("1", None)
    assert isinstance(again, NextExerciseInGroup) and again.index == 0 and again.set_number == 2

    odd = engine.get_next_group_action("1", "0")
    assert isinstance(odd, NextExerciseInGroup) and odd.index == 0
