from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from workout_sequencer.logging_config import configure_logging
from workout_sequencer.services.group_validation import format_group_validation_message, validate_group_configuration
from workout_sequencer.services.plan_loader import SAMPLE_PLAN_PATH, load_plan
from workout_sequencer.services.simulation import render_trace, simulate_plan


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Print the execution trace of a workout plan.")
    parser.add_argument("plan", nargs="?", type=Path, default=SAMPLE_PLAN_PATH, help="Plan JSON file")
    parser.add_argument("--validate", action="store_true", help="Print the group configuration report first")
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    plan = load_plan(args.plan)

    if args.validate:
        print(format_group_validation_message(validate_group_configuration(plan)))
        print()

    print(render_trace(simulate_plan(plan)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
