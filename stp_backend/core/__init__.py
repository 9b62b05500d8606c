"""STP projection engine."""

from stp_backend.core.future_value import PaymentTiming, future_value
from stp_backend.core.stp import (
    PeriodRecord,
    ProjectionResult,
    ScenarioInput,
    iter_periods,
    project,
)

__all__ = [
    "PaymentTiming",
    "future_value",
    "PeriodRecord",
    "ProjectionResult",
    "ScenarioInput",
    "iter_periods",
    "project",
]
