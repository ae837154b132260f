from collections import deque
from decimal import Decimal


# Standard Deviation (population) over a sliding window.
class StdDev:
    value: Decimal = Decimal("0.0")

    _prices: deque[Decimal]
    _sum: Decimal = Decimal("0.0")
    _sum2: Decimal = Decimal("0.0")
    _t: int = 0
    _t1: int

    def __init__(self, period: int) -> None:
        if period < 1:
            raise ValueError(f"Invalid period ({period})")

        self._prices = deque(maxlen=period)
        self._t1 = period

    @property
    def warm_up_period(self) -> int:
        return self._t1

    @property
    def is_ready(self) -> bool:
        return self._t >= self._t1

    def update(self, price: Decimal) -> Decimal:
        self._t = min(self._t + 1, self._t1)

        if len(self._prices) == self._t1:
            old_price = self._prices[0]
            self._sum -= old_price
            self._sum2 -= old_price**2

        self._prices.append(price)
        self._sum += price
        self._sum2 += price**2

        scale = Decimal("1.0") / len(self._prices)
        # Rounding can push the variance slightly below zero.
        variance = max(self._sum2 * scale - (self._sum * scale) ** 2, Decimal("0.0"))
        self.value = variance.sqrt()

        return self.value

    def reset(self) -> None:
        self.value = Decimal("0.0")
        self._prices.clear()
        self._sum = Decimal("0.0")
        self._sum2 = Decimal("0.0")
        self._t = 0
