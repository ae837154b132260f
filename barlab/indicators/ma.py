from enum import Enum

from .dema import Dema
from .ema import Ema
from .sma import Sma
from .smma import Smma
from .wma import Wma

MA = Dema | Ema | Sma | Smma | Wma


class MovingAverageType(Enum):
    SIMPLE = "Simple"
    EXPONENTIAL = "Exponential"
    WILDERS = "Wilders"
    LWMA = "LWMA"
    DOUBLE_EXPONENTIAL = "DoubleExponential"

    def __str__(self) -> str:
        return self.value


def as_indicator(type_: MovingAverageType, period: int) -> MA:
    if type_ is MovingAverageType.SIMPLE:
        return Sma(period)
    elif type_ is MovingAverageType.EXPONENTIAL:
        return Ema(period)
    elif type_ is MovingAverageType.WILDERS:
        return Smma(period)
    elif type_ is MovingAverageType.LWMA:
        return Wma(period)
    elif type_ is MovingAverageType.DOUBLE_EXPONENTIAL:
        return Dema(period)
    else:
        raise NotImplementedError(f"{type_=}")
