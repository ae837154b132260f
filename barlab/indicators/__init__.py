# Streaming indicators operating on `Decimal` values. Moving averages and true range are taken
# from (and verified against) the following sources:
# - https://github.com/TulipCharts/tulipindicators
# - https://school.stockcharts.com
# - https://tradingview.com

from .atr import Atr
from .dema import Dema
from .ema import Ema
from .kvo import KlingerVolumeOscillator
from .ma import MA, MovingAverageType, as_indicator
from .sfx import SFX
from .sma import Sma
from .smma import Smma
from .state import IndicatorState
from .stddev import StdDev
from .wma import Wma

__all__ = [
    "as_indicator",
    "Atr",
    "Dema",
    "Ema",
    "IndicatorState",
    "KlingerVolumeOscillator",
    "MA",
    "MovingAverageType",
    "SFX",
    "Sma",
    "Smma",
    "StdDev",
    "Wma",
]
