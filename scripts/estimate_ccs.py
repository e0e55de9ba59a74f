"""CLI script for a one-off Child Care Subsidy estimate.

Usage:
    # $100k family, long day care at $12/hr for 40 hours a week
    python scripts/estimate_ccs.py --income 100000 --rate 12 --hours 40

    # Family day care, medium activity, not currently working or studying
    python scripts/estimate_ccs.py --income 60000 --rate 15 --hours 20 \
        --care-type 2 --activity-level 2 --not-working

    # Verbose logging
    python scripts/estimate_ccs.py --income 60000 --rate 12 --hours 30 -v
"""

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.calculators.ccs_data import CARE_TYPES, ActivityLevel, CareType
from src.calculators.child_care_subsidy import (
    CalculationInput,
    CalculationResult,
    InvalidInputError,
    calculate_child_care_subsidy,
)

logger = logging.getLogger(__name__)


def _amount(value: str) -> Decimal:
    try:
        amount = Decimal(value.replace(",", ""))
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if not amount.is_finite():
        raise argparse.ArgumentTypeError(f"not a finite number: {value!r}")
    return amount


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Estimate Australian Child Care Subsidy")
    parser.add_argument("--income", type=_amount, required=True, help="Annual family income (AUD)")
    parser.add_argument("--rate", type=_amount, required=True, help="Hourly rate charged (AUD)")
    parser.add_argument("--hours", type=int, required=True, help="Hours of care per week")
    parser.add_argument(
        "--care-type",
        type=int,
        choices=[int(c) for c in CareType],
        default=int(CareType.LONG_DAY_CARE),
        help="1=Long Day, 2=Family Day, 3=OSHC, 4=In Home, 5=Occasional (default: 1)",
    )
    parser.add_argument(
        "--activity-level",
        type=int,
        choices=[int(a) for a in ActivityLevel],
        default=int(ActivityLevel.HIGH),
        help="1=8-16h, 2=16-48h, 3=48h+ per fortnight (default: 3)",
    )
    parser.add_argument("--children", type=int, default=1, help="Number of children (default: 1)")
    parser.add_argument(
        "--not-working",
        action="store_true",
        help="Household does not meet the activity test",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return parser.parse_args(argv)


def format_result(care_type: CareType, result: CalculationResult) -> str:
    """Render a result as a plain-text table."""
    lines = [result.eligibility_message]
    if not result.is_eligible:
        return "\n".join(lines)

    lines.extend([
        f"Care type:            {CARE_TYPES[care_type].name}",
        f"Subsidy percentage:   {result.subsidy_percentage}%",
        f"Hourly cap:           ${result.hourly_cap:,.2f}",
        f"Subsidised hours:     {result.subsidised_hours_per_fortnight} per fortnight",
        f"Total cost per week:  {result.total_cost_per_week}",
        "",
        f"{'':<12}{'Subsidy':>18}{'Out of pocket':>18}",
    ])
    for label, subsidy, gap in (
        ("Hour", result.subsidy_per_hour, result.out_of_pocket_per_hour),
        ("Week", result.subsidy_per_week, result.out_of_pocket_per_week),
        ("Fortnight", result.subsidy_per_fortnight, result.out_of_pocket_per_fortnight),
        ("Year", result.subsidy_per_year, result.out_of_pocket_per_year),
    ):
        lines.append(f"{label:<12}{str(subsidy):>18}{str(gap):>18}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    care_type = CareType(args.care_type)
    data = CalculationInput(
        annual_family_income=args.income,
        care_type=care_type,
        hourly_rate=args.rate,
        hours_per_week=args.hours,
        number_of_children=args.children,
        activity_level=ActivityLevel(args.activity_level),
        is_working_or_studying=not args.not_working,
    )

    try:
        result = calculate_child_care_subsidy(data)
    except InvalidInputError as exc:
        logger.error("%s", exc.message)
        return 2

    print(format_result(care_type, result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
