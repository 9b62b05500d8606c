from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, List, Optional

from pydantic import BaseModel, ConfigDict

from stp_backend.config import settings
from stp_backend.core.future_value import PaymentTiming, future_value
from stp_backend.errors import InvalidInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioInput:
    """
    One STP scenario:
      - lump_sum: opening balance of the debt instrument
      - periodic_transfer: amount moved from debt to equity each period (already annualized)
      - debt_rate / equity_rate: fractional annual returns, e.g. 0.07 for 7%
      - periods: number of annual periods to simulate
    """

    lump_sum: float
    periodic_transfer: float
    debt_rate: float
    equity_rate: float
    periods: int


class PeriodRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int
    opening_debt_balance: float
    transfer_out: float
    debt_growth: float
    closing_debt_balance: float
    opening_equity_value: float
    transfer_in: float
    equity_growth: float
    closing_equity_value: float
    total_value: float

    def is_finite(self) -> bool:
        return all(
            math.isfinite(value)
            for value in (
                self.opening_debt_balance,
                self.debt_growth,
                self.closing_debt_balance,
                self.opening_equity_value,
                self.equity_growth,
                self.closing_equity_value,
                self.total_value,
            )
        )


class ProjectionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    records: List[PeriodRecord]
    total_transferred: float
    final_total_value: float
    final_debt_balance: float
    total_growth: float
    # 1-based index of the first record holding NaN or an infinity
    first_anomalous_period: Optional[int] = None


def _require_number(field: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(field, "must be a number")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidInputError(field, "must be finite")
    return value


def _require_periods(value: object, max_periods: int) -> int:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError("periods", "must be an integer")
    if not math.isfinite(value) or not float(value).is_integer():
        raise InvalidInputError("periods", "must be an integer")
    periods = int(value)
    if periods < 1:
        raise InvalidInputError("periods", "must be at least 1")
    if periods > max_periods:
        raise InvalidInputError("periods", f"must not exceed {max_periods}")
    return periods


def validate_scenario(scenario: ScenarioInput, max_periods: Optional[int] = None) -> ScenarioInput:
    """Return a normalised copy of `scenario` or raise InvalidInputError."""
    limit = settings.max_periods if max_periods is None else max_periods

    lump_sum = _require_number("lump_sum", scenario.lump_sum)
    if lump_sum < 0:
        raise InvalidInputError("lump_sum", "must not be negative")
    transfer = _require_number("periodic_transfer", scenario.periodic_transfer)
    if transfer < 0:
        raise InvalidInputError("periodic_transfer", "must not be negative")

    return ScenarioInput(
        lump_sum=lump_sum,
        periodic_transfer=transfer,
        debt_rate=_require_number("debt_rate", scenario.debt_rate),
        equity_rate=_require_number("equity_rate", scenario.equity_rate),
        periods=_require_periods(scenario.periods, limit),
    )


def equity_timing(index: int) -> PaymentTiming:
    """First transfer is credited at period end, later ones at period start."""
    return PaymentTiming.END if index == 1 else PaymentTiming.BEGIN


def iter_periods(scenario: ScenarioInput) -> Iterator[PeriodRecord]:
    """
    Yield one PeriodRecord per period for an already validated scenario.

    Order of operations (per period):
      1) Withdraw the transfer from the debt balance, compound the rest for one period.
      2) Add the transfer to the equity value, compound it for one period.
      3) Record opening balances, growth and closing balances.
    """
    debt_balance = scenario.lump_sum
    equity_value = 0.0
    transfer = scenario.periodic_transfer

    for index in range(1, scenario.periods + 1):
        debt_after_transfer = debt_balance - transfer
        new_debt_balance = future_value(
            scenario.debt_rate, 1, 0, -debt_after_transfer, PaymentTiming.END
        )
        debt_growth = debt_after_transfer * scenario.debt_rate

        equity_after_transfer = equity_value + transfer
        new_equity_value = future_value(
            scenario.equity_rate, 1, 0, -equity_after_transfer, equity_timing(index)
        )
        equity_growth = equity_after_transfer * scenario.equity_rate

        yield PeriodRecord(
            index=index,
            opening_debt_balance=debt_balance,
            transfer_out=transfer,
            debt_growth=debt_growth,
            closing_debt_balance=new_debt_balance,
            opening_equity_value=equity_value,
            transfer_in=transfer,
            equity_growth=equity_growth,
            closing_equity_value=new_equity_value,
            total_value=new_debt_balance + new_equity_value,
        )

        debt_balance = new_debt_balance
        equity_value = new_equity_value


def project(scenario: ScenarioInput, max_periods: Optional[int] = None) -> ProjectionResult:
    """Validate `scenario`, run every period and aggregate the headline figures."""
    scenario = validate_scenario(scenario, max_periods)

    records = list(iter_periods(scenario))
    last = records[-1]

    first_anomaly = next((record.index for record in records if not record.is_finite()), None)
    if first_anomaly is not None:
        logger.warning(
            "Projection produced non-finite values",
            extra={"period": first_anomaly, "periods": scenario.periods},
        )

    result = ProjectionResult(
        records=records,
        total_transferred=sum(record.transfer_in for record in records),
        final_total_value=last.total_value,
        final_debt_balance=last.closing_debt_balance,
        total_growth=last.total_value - scenario.lump_sum,
        first_anomalous_period=first_anomaly,
    )
    logger.debug(
        "Projection completed",
        extra={"periods": scenario.periods, "final_total_value": result.final_total_value},
    )
    return result


__all__ = [
    "ScenarioInput",
    "PeriodRecord",
    "ProjectionResult",
    "validate_scenario",
    "equity_timing",
    "iter_periods",
    "project",
]
