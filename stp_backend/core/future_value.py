"""Spreadsheet-compatible future value."""

from __future__ import annotations

import math
from enum import IntEnum


class PaymentTiming(IntEnum):
    """When each periodic payment lands inside its compounding period."""

    END = 0
    BEGIN = 1


def _growth_factor(rate: float, num_periods: float) -> float:
    base = 1.0 + rate
    # float ** float returns a complex number here, FV is undefined
    if base < 0 and not float(num_periods).is_integer():
        return math.nan
    try:
        return base**num_periods
    except OverflowError:
        if base > 0 or num_periods % 2 == 0:
            return math.inf
        return -math.inf


def future_value(
    rate: float,
    num_periods: float,
    payment: float,
    present_value: float,
    timing: int = PaymentTiming.END,
) -> float:
    """
    Value of `present_value` plus `num_periods` equal payments compounded at `rate`.

    Follows the spreadsheet FV sign convention: money paid out (negative
    present value / payment) accumulates to a positive future value.

      rate == 0 -> present_value + payment * num_periods   (no sign flip)
      END       -> -(pv * g + pmt * (g - 1) / rate)
      BEGIN     -> -(pv * g + pmt * (1 + rate) * (g - 1) / rate)

    where g = (1 + rate) ** num_periods. Degenerate arithmetic is returned
    as NaN or an infinity rather than raised.
    """
    if isinstance(timing, bool):
        raise ValueError(f"{timing!r} is not a valid PaymentTiming")
    timing = PaymentTiming(timing)

    if rate == 0:
        return present_value + payment * num_periods

    growth = _growth_factor(rate, num_periods)
    if timing is PaymentTiming.BEGIN:
        raw = present_value * growth + payment * (1 + rate) * (growth - 1) / rate
    else:
        raw = present_value * growth + payment * (growth - 1) / rate
    return -raw


__all__ = ["PaymentTiming", "future_value"]
