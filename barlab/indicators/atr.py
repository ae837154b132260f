from decimal import Decimal


# Average True Range
class Atr:
    value: Decimal = Decimal("0.0")

    _per: Decimal
    _t: int = 0
    _t1: int
    _t2: int
    _sum: Decimal = Decimal("0.0")
    _prev_close: Decimal = Decimal("0.0")

    def __init__(self, period: int) -> None:
        if period < 1:
            raise ValueError(f"Invalid period ({period})")

        self._per = Decimal("1.0") / period
        self._t1 = period
        self._t2 = period + 1

    @property
    def warm_up_period(self) -> int:
        return self._t1

    @property
    def is_ready(self) -> bool:
        return self._t >= self._t1

    def update(self, high: Decimal, low: Decimal, close: Decimal) -> Decimal:
        self._t = min(self._t + 1, self._t2)

        if self._t <= self._t1:
            # No previous close for the very first bar.
            if self._t == 1:
                self._sum += high - low
            else:
                self._sum += _calc_truerange(high, low, self._prev_close)
            if self._t == self._t1:
                self.value = self._sum / self._t1
        else:
            self.value = (
                _calc_truerange(high, low, self._prev_close) - self.value
            ) * self._per + self.value

        self._prev_close = close
        return self.value

    def reset(self) -> None:
        self.value = Decimal("0.0")
        self._sum = Decimal("0.0")
        self._prev_close = Decimal("0.0")
        self._t = 0


def _calc_truerange(high: Decimal, low: Decimal, prev_close: Decimal) -> Decimal:
    return max(high - low, abs(high - prev_close), abs(low - prev_close))
