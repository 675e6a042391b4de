from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Union

from workout_sequencer.models.plan import Plan, PlanItem
from workout_sequencer.models.validation import GroupIssue, GroupValidationReport, InterleavedItem
from .groups import GroupIndex

logger = logging.getLogger(__name__)

VALID_MESSAGE = "Group configuration is valid"
REORDER_TIP = "Tip: Reorder the exercises so every item of a group forms one contiguous run."


def _as_plan(plan: Union[Plan, Iterable[Union[Mapping[str, Any], PlanItem]], None]) -> Plan:
    if plan is None:
        return Plan()
    if isinstance(plan, Plan):
        return plan
    return Plan.from_records(plan)


def validate_group_configuration(
    plan: Union[Plan, Iterable[Union[Mapping[str, Any], PlanItem]], None],
) -> GroupValidationReport:
    """Flag groups whose members are not contiguous in plan order.

    A group spanning first..last is interleaved when fewer than
    `last - first + 1` of those positions belong to it. The result is advisory;
    execution does not depend on it.
    """
    snapshot = _as_plan(plan)
    issues: List[GroupIssue] = []

    for group_id, indices in GroupIndex(snapshot).groups().items():
        first, last = indices[0], indices[-1]
        span_length = last - first + 1
        if len(indices) >= span_length:
            continue

        members = set(indices)
        foreign: List[InterleavedItem] = []
        for i in range(first, last + 1):
            if i in members:
                continue
            item = snapshot.items[i]
            foreign.append(InterleavedItem(index=i, name=item.label, group_id=item.group_id or "none"))

        issue = GroupIssue(
            group_id=group_id,
            message=f"Group {group_id} is interleaved with other items. Items must be contiguous.",
            span=f"{first}-{last}",
            first_index=first,
            last_index=last,
            member_count=len(indices),
            span_length=span_length,
            non_member_indices=foreign,
        )
        logger.warning(
            "Group %s is interleaved: %s members across indices %s (foreign: %s)",
            group_id,
            issue.member_count,
            issue.span,
            [f.index for f in foreign],
        )
        issues.append(issue)

    return GroupValidationReport(
        is_valid=not issues,
        issues=issues,
        message=VALID_MESSAGE if not issues else f"Found {len(issues)} group configuration issue(s)",
    )


def format_group_validation_message(report: GroupValidationReport) -> str:
    if report.is_valid:
        return f"✓ {VALID_MESSAGE}"

    lines: List[str] = ["⚠️ Warning: Improper group configuration detected:", ""]
    for issue in report.issues:
        lines.append(f"Group {issue.group_id}:")
        lines.append(f"  {issue.message}")
        lines.append(f"  Timeline indices {issue.span}")
        lines.append(f"  Items in group: {issue.member_count}, Space occupied: {issue.span_length}")
        lines.append("  Interleaved items:")
        for item in issue.non_member_indices:
            lines.append(f"    - Timeline index {item.index}: {item.name} (group: {item.group_id})")
        lines.append("")
        lines.append(REORDER_TIP)
        lines.append("")
    return "\n".join(lines)
