from __future__ import annotations

from typing import Any, Dict, List, Optional

from workout_sequencer.models.plan import Plan, normalize_group_id


class GroupIndex:
    """Group membership derived from a plan.

    Nothing is cached: every query walks the current items, so a group id
    reassigned mid-run is picked up on the next call.
    """

    def __init__(self, plan: Plan) -> None:
        self._plan = plan

    def group_of(self, index: int) -> Optional[str]:
        item = self._plan.get(index)
        return item.group_id if item is not None else None

    def is_grouped(self, index: int) -> bool:
        return self.group_of(index) is not None

    def members(self, group_id: Any) -> List[int]:
        """Indices in plan order whose group id equals `group_id` (exact, case-sensitive)."""
        gid = normalize_group_id(group_id)
        if gid is None:
            return []
        return [i for i, item in enumerate(self._plan.items) if item.group_id == gid]

    def groups(self) -> Dict[str, List[int]]:
        """All groups keyed by id, in order of first occurrence."""
        out: Dict[str, List[int]] = {}
        for i, item in enumerate(self._plan.items):
            if item.group_id is None:
                continue
            out.setdefault(item.group_id, []).append(i)
        return out
