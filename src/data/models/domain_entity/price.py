from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Price:
    """Monetary amount with an ISO 4217 currency code."""

    value: Optional[Decimal]
    currency: Optional[str]

    def is_valid(self) -> bool:
        return (
            self.value is not None
            and self.value >= 0
            and self.currency is not None
            and len(self.currency) == 3
        )
