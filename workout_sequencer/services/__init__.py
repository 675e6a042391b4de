from .groups import GroupIndex
from .execution import ExecutionEngine, ExecutionState
from .group_validation import validate_group_configuration, format_group_validation_message
from .plan_loader import load_plan, plan_from_json, plan_from_records, PlanLoadError, SAMPLE_PLAN_PATH
from .simulation import simulate_plan, render_trace

__all__ = [
    "GroupIndex",
    "ExecutionEngine",
    "ExecutionState",
    "validate_group_configuration",
    "format_group_validation_message",
    "load_plan",
    "plan_from_json",
    "plan_from_records",
    "PlanLoadError",
    "SAMPLE_PLAN_PATH",
    "simulate_plan",
    "render_trace",
]
