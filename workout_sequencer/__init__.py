from .models import Plan, PlanItem
from .services import (
    ExecutionEngine,
    ExecutionState,
    validate_group_configuration,
    format_group_validation_message,
    load_plan,
    simulate_plan,
)

__all__ = [
    "Plan",
    "PlanItem",
    "ExecutionEngine",
    "ExecutionState",
    "validate_group_configuration",
    "format_group_validation_message",
    "load_plan",
    "simulate_plan",
]
