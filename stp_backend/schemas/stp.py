"""Data contracts for the STP calculator endpoint."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from stp_backend.core.stp import PeriodRecord, ProjectionResult, ScenarioInput


class StpRequest(BaseModel):
    """Calculator form fields, in the units the user types them."""

    model_config = ConfigDict(extra="forbid")

    lumpsumAmount: float = Field(..., ge=0, allow_inf_nan=False, description="Amount parked in the debt fund.")
    stpAmount: float = Field(..., ge=0, allow_inf_nan=False, description="Amount transferred to equity every month.")
    debtReturn: float = Field(
        ...,
        allow_inf_nan=False,
        description="Expected annual debt fund return in percent (e.g. 7 for 7%).",
    )
    equityReturn: float = Field(
        ...,
        allow_inf_nan=False,
        description="Expected annual equity fund return in percent.",
    )
    stpDuration: int = Field(..., ge=1, description="Number of years the plan runs.")

    def to_scenario(self, months_per_period: int = 12) -> ScenarioInput:
        """Annualize the monthly transfer and turn percentages into fractions."""
        return ScenarioInput(
            lump_sum=self.lumpsumAmount,
            periodic_transfer=self.stpAmount * months_per_period,
            debt_rate=self.debtReturn / 100,
            equity_rate=self.equityReturn / 100,
            periods=self.stpDuration,
        )


class _ResponseModel(BaseModel):
    # NaN and infinities leave as null so browsers can parse the body
    model_config = ConfigDict(ser_json_inf_nan="null")


class StpRow(_ResponseModel):
    """Single row of the year-by-year table."""

    year: int
    openingDebtBalance: float
    transferOut: float
    debtReturn: float
    debtGrowth: float
    closingDebtBalance: float
    openingEquityValue: float
    transferIn: float
    equityReturn: float
    equityGrowth: float
    closingEquityValue: float
    totalValue: float


class StpSummary(_ResponseModel):
    """Headline figures shown above the table."""

    totalTransferred: float
    finalValue: float
    remainingDebt: float
    totalGrowth: float


class StpChart(_ResponseModel):
    """Three line series indexed by year label."""

    labels: List[str]
    debtBalance: List[float]
    equityValue: List[float]
    totalValue: List[float]


class StpResponse(_ResponseModel):
    rows: List[StpRow]
    summary: StpSummary
    chart: StpChart
    firstAnomalousPeriod: Optional[int] = None


def _row(record: PeriodRecord, debt_pct: float, equity_pct: float) -> StpRow:
    return StpRow(
        year=record.index,
        openingDebtBalance=record.opening_debt_balance,
        transferOut=record.transfer_out,
        debtReturn=debt_pct,
        debtGrowth=record.debt_growth,
        closingDebtBalance=record.closing_debt_balance,
        openingEquityValue=record.opening_equity_value,
        transferIn=record.transfer_in,
        equityReturn=equity_pct,
        equityGrowth=record.equity_growth,
        closingEquityValue=record.closing_equity_value,
        totalValue=record.total_value,
    )


def build_response(request: StpRequest, result: ProjectionResult) -> StpResponse:
    """Shape an engine result into the table, summary and chart the frontend draws."""
    records = result.records
    return StpResponse(
        rows=[_row(record, request.debtReturn, request.equityReturn) for record in records],
        summary=StpSummary(
            totalTransferred=result.total_transferred,
            finalValue=result.final_total_value,
            remainingDebt=result.final_debt_balance,
            totalGrowth=result.total_growth,
        ),
        chart=StpChart(
            labels=[f"Year {record.index}" for record in records],
            debtBalance=[record.closing_debt_balance for record in records],
            equityValue=[record.closing_equity_value for record in records],
            totalValue=[record.total_value for record in records],
        ),
        firstAnomalousPeriod=result.first_anomalous_period,
    )
