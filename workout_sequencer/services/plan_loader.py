from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Union

from workout_sequencer.models.plan import Plan

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parents[1] / "data"
SAMPLE_PLAN_PATH = DATA_DIR / "sample_plan.json"


class PlanLoadError(ValueError):
    pass


def plan_from_records(records: Iterable[Mapping[str, Any]], name: Optional[str] = None) -> Plan:
    return Plan.from_records(records, name=name)


def plan_from_json(raw: Any) -> Plan:
    """Accept either a bare list of item records or an object with `items` (and optional `name`)."""
    if isinstance(raw, list):
        name, records = None, raw
    elif isinstance(raw, dict) and isinstance(raw.get("items"), list):
        name, records = raw.get("name"), raw["items"]
    else:
        raise PlanLoadError("Plan JSON must be a list of items or an object with an 'items' list.")

    bad = [i for i, r in enumerate(records) if not isinstance(r, dict)]
    if bad:
        raise PlanLoadError(f"Plan items must be objects; offending positions: {bad}")
    return plan_from_records(records, name=name if isinstance(name, str) else None)


def load_plan(path: Union[str, Path]) -> Plan:
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    plan = plan_from_json(raw)
    logger.info("Loaded plan %r with %d items from %s", plan.name, len(plan), path)
    return plan
