from decimal import Decimal
from typing import NamedTuple

from barlab.primitives import Timestamp, Timestamp_


# Namedtuple rather than a dataclass so that a bar can be decomposed into its values
# (`*bar`) when feeding indicators.
class Bar(NamedTuple):
    time: Timestamp = 0  # Interval start time.
    open: Decimal = Decimal("0.0")
    high: Decimal = Decimal("0.0")
    low: Decimal = Decimal("0.0")
    close: Decimal = Decimal("0.0")
    volume: Decimal = Decimal("0.0")  # Within interval.

    @property
    def value(self) -> Decimal:
        return self.close

    @property
    def midpoint(self) -> Decimal:
        return (self.open + self.close) / 2

    @property
    def mean_hlc(self) -> Decimal:
        return (self.high + self.low + self.close) / 3

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(time={Timestamp_.to_datetime_utc(self.time)}, "
            f"open={self.open}, high={self.high}, low={self.low}, close={self.close}, "
            f"volume={self.volume})"
        )
