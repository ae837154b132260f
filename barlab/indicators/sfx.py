import logging
from decimal import Decimal
from typing import Optional

from barlab.common import Bar

from .atr import Atr
from .ma import MA, MovingAverageType, as_indicator
from .state import IndicatorState
from .stddev import StdDev

_log = logging.getLogger(__name__)


# SFX: Average True Range, Standard Deviation and a moving average of the Standard Deviation.
class SFX:
    atr: Atr
    std_dev: StdDev
    ma_std_dev: MA

    _state: IndicatorState
    _warm_up_period: int

    def __init__(
        self,
        atr_period: int,
        std_dev_period: int,
        std_dev_smoothing_period: int,
        moving_average_type: MovingAverageType = MovingAverageType.SIMPLE,
        name: Optional[str] = None,
    ) -> None:
        if name is None:
            name = (
                f"SFX({atr_period},{std_dev_period},{std_dev_smoothing_period},"
                f"{moving_average_type})"
            )

        self._state = IndicatorState(name)
        self._warm_up_period = max(atr_period, std_dev_period, std_dev_smoothing_period)
        self.atr = Atr(atr_period)
        self.std_dev = StdDev(std_dev_period)
        self.ma_std_dev = as_indicator(moving_average_type, std_dev_smoothing_period)

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
    def warm_up_period(self) -> int:
        return self._warm_up_period

    @property
    def is_ready(self) -> bool:
        return self.atr.is_ready and self.std_dev.is_ready and self.ma_std_dev.is_ready

    def update(self, bar: Bar) -> Decimal:
        _log.debug(f"{self.name} input: {bar}")
        # TODO: Feed `bar` into `atr` and `std_dev` and the deviation into `ma_std_dev`. Until
        # then the input value is passed through unmodified.
        return self._state.record(bar.value)

    def reset(self) -> None:
        self.atr.reset()
        self.std_dev.reset()
        self.ma_std_dev.reset()
        self._state.reset()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name})"
