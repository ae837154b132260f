from dataclasses import dataclass
from decimal import Decimal


@dataclass
class IndicatorState:
    """Bookkeeping shared by bar-driven indicators: name, sample count and the last two
    emitted values."""

    name: str
    samples: int = 0
    current: Decimal = Decimal("0.0")
    previous: Decimal = Decimal("0.0")

    def record(self, value: Decimal) -> Decimal:
        self.samples += 1
        self.previous = self.current
        self.current = value
        return value

    def reset(self) -> None:
        self.samples = 0
        self.current = Decimal("0.0")
        self.previous = Decimal("0.0")
