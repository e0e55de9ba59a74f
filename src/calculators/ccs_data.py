"""Child Care Subsidy constants — hourly caps, activity hours, income taper.

Hardcoded Python constants (not DB-driven). One rate table only: the
2024-25 financial year, as published from July 2024.
"""

from decimal import Decimal
from enum import IntEnum
from typing import Any, NamedTuple


class CareType(IntEnum):
    """Approved child care service types (wire codes 1-5)."""

    LONG_DAY_CARE = 1
    FAMILY_DAY_CARE = 2
    OUTSIDE_SCHOOL_HOURS_CARE = 3
    IN_HOME_CARE = 4
    OCCASIONAL_CARE = 5


class ActivityLevel(IntEnum):
    """Combined parental activity per fortnight (wire codes 1-3)."""

    LOW = 1  # 8-16 hours per fortnight
    MEDIUM = 2  # 16-48 hours per fortnight
    HIGH = 3  # 48+ hours per fortnight


class IncomeThresholds(NamedTuple):
    """Income taper parameters."""

    lower: Decimal  # inclusive, full rate at or below
    upper: Decimal  # inclusive, no subsidy above
    taper_step: Decimal  # income per 1% reduction
    max_percentage: int
    min_percentage: int


class CareTypeInfo(NamedTuple):
    """Display name and hourly rate cap for a care type."""

    name: str
    hourly_cap: Decimal


class ActivityLevelInfo(NamedTuple):
    """Display name and subsidised hours cap for an activity level."""

    name: str
    subsidised_hours: int


FINANCIAL_YEAR = "2024-25"
CURRENCY = "AUD"

THRESHOLDS = IncomeThresholds(
    lower=Decimal("80000"),
    upper=Decimal("530000"),
    taper_step=Decimal("5000"),
    max_percentage=90,
    min_percentage=0,
)

CARE_TYPES: dict[CareType, CareTypeInfo] = {
    CareType.LONG_DAY_CARE: CareTypeInfo("Long Day Care", Decimal("13.73")),
    CareType.FAMILY_DAY_CARE: CareTypeInfo("Family Day Care", Decimal("12.74")),
    CareType.OUTSIDE_SCHOOL_HOURS_CARE: CareTypeInfo("Outside School Hours Care", Decimal("12.75")),
    CareType.IN_HOME_CARE: CareTypeInfo("In Home Care", Decimal("36.24")),
    CareType.OCCASIONAL_CARE: CareTypeInfo("Occasional Care", Decimal("13.73")),
}

ACTIVITY_LEVELS: dict[ActivityLevel, ActivityLevelInfo] = {
    ActivityLevel.LOW: ActivityLevelInfo("8-16 hours per fortnight", 36),
    ActivityLevel.MEDIUM: ActivityLevelInfo("16-48 hours per fortnight", 72),
    ActivityLevel.HIGH: ActivityLevelInfo("48+ hours per fortnight", 100),
}

# Unrecognised activity levels fall back to the lowest band
DEFAULT_ACTIVITY_LEVEL = ActivityLevel.LOW

WEEKS_PER_FORTNIGHT = 2
WEEKS_PER_YEAR = 52

# camelCase keys used by the reference endpoint
_CARE_TYPE_KEYS: dict[CareType, str] = {
    CareType.LONG_DAY_CARE: "longDayCare",
    CareType.FAMILY_DAY_CARE: "familyDayCare",
    CareType.OUTSIDE_SCHOOL_HOURS_CARE: "outsideSchoolHoursCare",
    CareType.IN_HOME_CARE: "inHomeCare",
    CareType.OCCASIONAL_CARE: "occasionalCare",
}


def get_ccs_info() -> dict[str, Any]:
    """Return the static rate table for display.

    Returns:
        Dict with financialYear, incomeThresholds, hourlyCaps,
        activityLevels and childCareTypes.
    """
    return {
        "financialYear": FINANCIAL_YEAR,
        "incomeThresholds": {
            "lowerThreshold": int(THRESHOLDS.lower),
            "upperThreshold": int(THRESHOLDS.upper),
            "maxSubsidyPercentage": THRESHOLDS.max_percentage,
            "description": (
                f"Subsidy tapers down by 1% for every ${THRESHOLDS.taper_step:,.0f} "
                f"over ${THRESHOLDS.lower:,.0f}"
            ),
        },
        "hourlyCaps": {
            _CARE_TYPE_KEYS[care_type]: float(info.hourly_cap)
            for care_type, info in CARE_TYPES.items()
        },
        "activityLevels": [
            {"level": int(level), "name": info.name, "subsidisedHours": info.subsidised_hours}
            for level, info in ACTIVITY_LEVELS.items()
        ],
        "childCareTypes": [
            {"id": int(care_type), "name": info.name}
            for care_type, info in CARE_TYPES.items()
        ],
    }
