"""Child Care Subsidy calculator — income taper, hourly cap, cost breakdown."""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from src.calculators.ccs_data import (
    ACTIVITY_LEVELS,
    CARE_TYPES,
    DEFAULT_ACTIVITY_LEVEL,
    THRESHOLDS,
    WEEKS_PER_FORTNIGHT,
    WEEKS_PER_YEAR,
    ActivityLevel,
    CareType,
)
from src.calculators.money import Money, round_money

logger = logging.getLogger(__name__)

MAX_HOURS_PER_WEEK = 168

NOT_ACTIVE_MESSAGE = (
    "You must meet work, training, study or other activity requirements "
    "to be eligible for CCS."
)
INCOME_EXCEEDED_MESSAGE = (
    f"Family income exceeds the threshold of ${THRESHOLDS.upper:,.0f}. "
    "No subsidy is available."
)
ELIGIBLE_MESSAGE = "You are eligible for Child Care Subsidy."


class InvalidInputError(ValueError):
    """Raised when a calculation input fails validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class CalculationInput:
    """Household circumstances for a single child and care arrangement."""

    annual_family_income: Decimal
    care_type: CareType
    hourly_rate: Decimal
    hours_per_week: int
    number_of_children: int
    activity_level: ActivityLevel | int
    is_working_or_studying: bool


@dataclass(frozen=True)
class CalculationResult:
    """Subsidy and out-of-pocket breakdown. Zeroed when ineligible."""

    eligibility_message: str
    subsidy_percentage: int = 0
    hourly_cap: Decimal = Decimal("0")
    subsidised_hours_per_fortnight: int = 0
    is_above_income_threshold: bool = False
    is_eligible: bool = False
    subsidy_per_hour: Money = field(default_factory=Money)
    subsidy_per_week: Money = field(default_factory=Money)
    subsidy_per_fortnight: Money = field(default_factory=Money)
    subsidy_per_year: Money = field(default_factory=Money)
    out_of_pocket_per_hour: Money = field(default_factory=Money)
    out_of_pocket_per_week: Money = field(default_factory=Money)
    out_of_pocket_per_fortnight: Money = field(default_factory=Money)
    out_of_pocket_per_year: Money = field(default_factory=Money)
    total_cost_per_week: Money = field(default_factory=Money)

    def to_dict(self) -> dict[str, Any]:
        """Flatten to plain numbers, currency implicit."""
        return {
            "subsidy_percentage": self.subsidy_percentage,
            "subsidy_per_hour": float(self.subsidy_per_hour.amount),
            "subsidy_per_week": float(self.subsidy_per_week.amount),
            "subsidy_per_fortnight": float(self.subsidy_per_fortnight.amount),
            "subsidy_per_year": float(self.subsidy_per_year.amount),
            "out_of_pocket_per_hour": float(self.out_of_pocket_per_hour.amount),
            "out_of_pocket_per_week": float(self.out_of_pocket_per_week.amount),
            "out_of_pocket_per_fortnight": float(self.out_of_pocket_per_fortnight.amount),
            "out_of_pocket_per_year": float(self.out_of_pocket_per_year.amount),
            "total_cost_per_week": float(self.total_cost_per_week.amount),
            "subsidised_hours_per_fortnight": self.subsidised_hours_per_fortnight,
            "hourly_cap": float(self.hourly_cap),
            "is_above_income_threshold": self.is_above_income_threshold,
            "eligibility_message": self.eligibility_message,
        }


def validate_input(data: CalculationInput) -> None:
    """Raise InvalidInputError on the first failing field."""
    if not data.annual_family_income.is_finite():
        raise InvalidInputError("Annual family income must be a finite number")

    if data.annual_family_income < 0:
        raise InvalidInputError("Annual family income cannot be negative")

    if not data.hourly_rate.is_finite():
        raise InvalidInputError("Hourly rate must be a finite number")

    if data.hourly_rate <= 0:
        raise InvalidInputError("Hourly rate must be greater than zero")

    if not 1 <= data.hours_per_week <= MAX_HOURS_PER_WEEK:
        raise InvalidInputError(f"Hours per week must be between 1 and {MAX_HOURS_PER_WEEK}")

    if data.number_of_children < 1:
        raise InvalidInputError("Number of children must be at least 1")


def check_eligibility(data: CalculationInput) -> str | None:
    """Return the ineligibility message, or None when eligible."""
    if not data.is_working_or_studying:
        return NOT_ACTIVE_MESSAGE

    if data.annual_family_income > THRESHOLDS.upper:
        return INCOME_EXCEEDED_MESSAGE

    return None


def calculate_subsidy_percentage(annual_income: Decimal) -> int:
    """Apply the income taper.

    Full rate up to the lower threshold, then 1% less for every complete
    $5,000 above it, reaching 0% at the upper threshold.
    """
    if annual_income <= THRESHOLDS.lower:
        return THRESHOLDS.max_percentage

    if annual_income <= THRESHOLDS.upper:
        reduction = (annual_income - THRESHOLDS.lower) // THRESHOLDS.taper_step
        return max(THRESHOLDS.max_percentage - int(reduction), THRESHOLDS.min_percentage)

    return THRESHOLDS.min_percentage


def get_hourly_cap(care_type: CareType) -> Decimal:
    return CARE_TYPES[care_type].hourly_cap


def get_subsidised_hours(activity_level: ActivityLevel | int) -> int:
    """Subsidised hours per fortnight; unknown levels get the lowest band."""
    info = ACTIVITY_LEVELS.get(activity_level)  # type: ignore[call-overload]
    if info is None:
        logger.debug(
            "Unrecognised activity level %r, using %s", activity_level, DEFAULT_ACTIVITY_LEVEL.name
        )
        info = ACTIVITY_LEVELS[DEFAULT_ACTIVITY_LEVEL]
    return info.subsidised_hours


def calculate_child_care_subsidy(data: CalculationInput) -> CalculationResult:
    """Estimate Child Care Subsidy for one child in one care arrangement.

    The per-hour subsidy is rounded to cents once and then multiplied up to
    weekly, fortnightly and annual (52-week) figures. Out-of-pocket amounts
    are based on the actual hourly rate charged, not the capped rate.

    Args:
        data: Household circumstances.

    Returns:
        CalculationResult. Ineligible households get a zeroed result with
        the reason in eligibility_message.

    Raises:
        InvalidInputError: If any field fails validation.
    """
    validate_input(data)

    ineligible_reason = check_eligibility(data)
    if ineligible_reason is not None:
        logger.debug("Ineligible: %s", ineligible_reason)
        return CalculationResult(eligibility_message=ineligible_reason)

    percentage = calculate_subsidy_percentage(data.annual_family_income)
    hourly_cap = get_hourly_cap(data.care_type)
    subsidised_hours = get_subsidised_hours(data.activity_level)

    effective_rate = min(data.hourly_rate, hourly_cap)
    subsidy_per_hour = Money(round_money(effective_rate * percentage / 100))
    out_of_pocket_per_hour = Money(data.hourly_rate - subsidy_per_hour.amount)

    hours = data.hours_per_week
    total_cost_per_week = Money(data.hourly_rate * hours)
    subsidy_per_week = subsidy_per_hour * hours
    out_of_pocket_per_week = total_cost_per_week - subsidy_per_week

    logger.debug(
        "CCS %s%% cap=%s effective_rate=%s subsidy/hr=%s",
        percentage, hourly_cap, effective_rate, subsidy_per_hour.amount,
    )

    return CalculationResult(
        eligibility_message=ELIGIBLE_MESSAGE,
        is_eligible=True,
        subsidy_percentage=percentage,
        hourly_cap=hourly_cap,
        subsidised_hours_per_fortnight=subsidised_hours,
        is_above_income_threshold=data.annual_family_income > THRESHOLDS.upper,
        subsidy_per_hour=subsidy_per_hour,
        subsidy_per_week=subsidy_per_week,
        subsidy_per_fortnight=subsidy_per_week * WEEKS_PER_FORTNIGHT,
        subsidy_per_year=subsidy_per_week * WEEKS_PER_YEAR,
        out_of_pocket_per_hour=out_of_pocket_per_hour,
        out_of_pocket_per_week=out_of_pocket_per_week,
        out_of_pocket_per_fortnight=out_of_pocket_per_week * WEEKS_PER_FORTNIGHT,
        out_of_pocket_per_year=out_of_pocket_per_week * WEEKS_PER_YEAR,
        total_cost_per_week=total_cost_per_week,
    )
