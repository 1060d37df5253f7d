"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from catalog.domain.exceptions import ValidationError

# Matches the NUMERIC(12, 2) price column.
MAX_INTEGER_DIGITS = 10
SCALE = 2

_LIMIT = Decimal(10) ** MAX_INTEGER_DIGITS
_QUANTUM = Decimal(1).scaleb(-SCALE)


@dataclass(frozen=True)
class Money:
    """Monetary amount.

    Sign is not checked. The amount is limited to what the price column
    holds exactly (10 integer digits, 2 decimal places), so a price read
    back from the database compares equal to the one that was written.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if abs(self.amount) >= _LIMIT:
            raise ValidationError(
                f"Money amount must have at most {MAX_INTEGER_DIGITS} integer digits, "
                f"got {self.amount}"
            )
        if self.amount != self.amount.quantize(_QUANTUM):
            raise ValidationError(
                f"Money amount must have at most {SCALE} decimal places, got {self.amount}"
            )

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
