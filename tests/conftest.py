"""Shared test fixtures."""

from collections.abc import Callable
from decimal import Decimal
from pathlib import Path
from typing import Any

import pytest
import yaml

from src.calculators.ccs_data import ActivityLevel, CareType
from src.calculators.child_care_subsidy import CalculationInput

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _make_input(
    annual_family_income: Decimal | str = "80000",
    care_type: CareType = CareType.LONG_DAY_CARE,
    hourly_rate: Decimal | str = "10",
    hours_per_week: int = 40,
    number_of_children: int = 1,
    activity_level: ActivityLevel | int = ActivityLevel.HIGH,
    is_working_or_studying: bool = True,
) -> CalculationInput:
    return CalculationInput(
        annual_family_income=Decimal(annual_family_income),
        care_type=care_type,
        hourly_rate=Decimal(hourly_rate),
        hours_per_week=hours_per_week,
        number_of_children=number_of_children,
        activity_level=activity_level,
        is_working_or_studying=is_working_or_studying,
    )


@pytest.fixture
def make_input() -> Callable[..., CalculationInput]:
    """Factory for a valid, eligible input; override any field by keyword."""
    return _make_input


def _load_scenarios() -> list[dict[str, Any]]:
    data = yaml.safe_load((FIXTURES_DIR / "ccs_scenarios.yaml").read_text())
    return data["scenarios"]


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Parametrize any test taking `ccs_scenario` over the YAML scenarios."""
    if "ccs_scenario" in metafunc.fixturenames:
        scenarios = _load_scenarios()
        metafunc.parametrize("ccs_scenario", scenarios, ids=[s["name"] for s in scenarios])


@pytest.fixture
def calculation_payload() -> dict[str, Any]:
    """A valid camelCase request body for the calculate endpoint."""
    return {
        "annualFamilyIncome": 100000,
        "childCareType": 1,
        "hourlyRate": 12,
        "hoursPerWeek": 40,
        "numberOfChildren": 1,
        "activityLevel": 3,
        "isWorkingOrStudying": True,
    }
