"""Pydantic request/response models for the calculator endpoints."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.calculators.ccs_data import ActivityLevel, CareType
from src.calculators.child_care_subsidy import CalculationInput, CalculationResult


class _CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CcsCalculationRequest(_CamelModel):
    """Request body for the child care subsidy endpoint.

    Lower bounds on income, rate, hours and children are left to the
    calculator so its messages reach the client as a 400. Amounts are
    Decimal, which rejects NaN and Infinity.
    """

    annual_family_income: Decimal
    child_care_type: int = Field(ge=1, le=5)
    hourly_rate: Decimal = Field(le=1000)
    hours_per_week: int
    number_of_children: int = Field(le=20)
    activity_level: int = Field(ge=1, le=3)
    is_working_or_studying: bool

    def to_input(self) -> CalculationInput:
        """Map wire codes to the calculator's input record."""
        return CalculationInput(
            annual_family_income=self.annual_family_income,
            care_type=CareType(self.child_care_type),
            hourly_rate=self.hourly_rate,
            hours_per_week=self.hours_per_week,
            number_of_children=self.number_of_children,
            activity_level=ActivityLevel(self.activity_level),
            is_working_or_studying=self.is_working_or_studying,
        )


class CcsCalculationResponse(_CamelModel):
    """Response from the child care subsidy endpoint. Money as plain numbers."""

    subsidy_percentage: int
    subsidy_per_hour: float
    subsidy_per_week: float
    subsidy_per_fortnight: float
    subsidy_per_year: float
    out_of_pocket_per_hour: float
    out_of_pocket_per_week: float
    out_of_pocket_per_fortnight: float
    out_of_pocket_per_year: float
    total_cost_per_week: float
    subsidised_hours_per_fortnight: int
    hourly_cap: float
    is_above_income_threshold: bool
    eligibility_message: str

    @classmethod
    def from_result(cls, result: CalculationResult) -> "CcsCalculationResponse":
        return cls(**result.to_dict())
