"""Money value type — Decimal amount rounded to cents, with a currency tag."""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Context, Decimal, getcontext

from src.calculators.ccs_data import CURRENCY

CENTS = Decimal("0.01")


def round_money(amount: Decimal) -> Decimal:
    """Round to 2 dp, halves away from zero (12.355 -> 12.36, -0.005 -> -0.01).

    Precision grows with the amount so very large values still quantize.
    """
    prec = max(getcontext().prec, amount.adjusted() + 3)
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP, context=Context(prec=prec))


@dataclass(frozen=True)
class Money:
    """An amount of money in a single currency.

    The amount is rounded to cents on construction. Arithmetic between two
    Money values requires the same currency; mixing currencies is a
    programming error and raises ValueError.
    """

    amount: Decimal = Decimal("0")
    currency: str = field(default=CURRENCY)

    def __post_init__(self) -> None:
        # frozen dataclass: bypass __setattr__ to store the rounded amount
        object.__setattr__(self, "amount", round_money(Decimal(self.amount)))

    def _check_currency(self, other: "Money", verb: str) -> None:
        if self.currency != other.currency:
            raise ValueError(f"Cannot {verb} money with different currencies")

    def __add__(self, other: "Money") -> "Money":
        self._check_currency(other, "add")
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: "Money") -> "Money":
        self._check_currency(other, "subtract")
        return Money(self.amount - other.amount, self.currency)

    def __mul__(self, multiplier: Decimal | int) -> "Money":
        return Money(self.amount * multiplier, self.currency)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"${self.amount:,.2f} {self.currency}"
