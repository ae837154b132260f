import logging
from decimal import Decimal
from typing import Iterable, Protocol

import pandas as pd

from barlab.common import Bar
from barlab.primitives import Timestamp_

_log = logging.getLogger(__name__)


class BarIndicator(Protocol):
    @property
    def name(self) -> str:
        ...

    @property
    def samples(self) -> int:
        ...

    @property
    def is_ready(self) -> bool:
        ...

    def update(self, bar: Bar) -> Decimal:
        ...

    def reset(self) -> None:
        ...


def feed(indicator: BarIndicator, bars: Iterable[Bar]) -> list[Decimal]:
    return [indicator.update(bar) for bar in bars]


def history(indicator: BarIndicator, bars: Iterable[Bar]) -> pd.DataFrame:
    """Drives `indicator` with `bars` in the given order and returns a frame indexed by bar time
    with columns `value`, `is_ready` and `samples`."""
    index = []
    rows = []
    for bar in bars:
        value = indicator.update(bar)
        index.append(Timestamp_.to_datetime_utc(bar.time))
        rows.append(
            {
                "value": float(value),
                "is_ready": indicator.is_ready,
                "samples": indicator.samples,
            }
        )
    _log.info(f"fed {len(rows)} bars into {indicator.name}")
    return pd.DataFrame(
        rows,
        index=pd.DatetimeIndex(index, name="time"),
        columns=["value", "is_ready", "samples"],
    )
