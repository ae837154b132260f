from decimal import Decimal
from typing import Optional

from barlab.common import Bar

from .ma import MA, MovingAverageType, as_indicator
from .state import IndicatorState

# Placeholder output. The oscillator itself is not computed yet.
_SENTINEL = Decimal(42)


# Klinger Volume Oscillator
class KlingerVolumeOscillator:
    fast_period: int
    slow_period: int
    moving_average_type: MovingAverageType

    _state: IndicatorState
    _fast_ma: MA
    _slow_ma: MA

    def __init__(
        self,
        fast_period: int,
        slow_period: int,
        moving_average_type: MovingAverageType = MovingAverageType.SIMPLE,
        name: Optional[str] = None,
    ) -> None:
        if name is None:
            name = f"VWMA({fast_period},{slow_period},{moving_average_type})"

        self.fast_period = fast_period
        self.slow_period = slow_period
        self.moving_average_type = moving_average_type
        self._state = IndicatorState(name)
        # NB: Both smoothers are built with the fast period; `slow_period` is not wired in.
        self._fast_ma = as_indicator(moving_average_type, fast_period)
        self._slow_ma = as_indicator(moving_average_type, fast_period)

    @property
    def name(self) -> str:
        return self._state.name

    @property
    def samples(self) -> int:
        return self._state.samples

    @property
    def value(self) -> Decimal:
        return self._state.current

    @property
    def fast_ma(self) -> MA:
        return self._fast_ma

    @property
    def slow_ma(self) -> MA:
        return self._slow_ma

    @property
    def warm_up_period(self) -> int:
        # Never assigned.
        return 0

    @property
    def is_ready(self) -> bool:
        return self._fast_ma.is_ready and self._slow_ma.is_ready

    def update(self, bar: Bar) -> Decimal:
        return self._state.record(_SENTINEL)

    def reset(self) -> None:
        self._fast_ma.reset()
        self._slow_ma.reset()
        self._state.reset()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name})"
