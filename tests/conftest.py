from decimal import Decimal

import pytest

from barlab import Bar, Timestamp_


@pytest.fixture
def bars() -> list[Bar]:
    start = Timestamp_.parse("2021-01-01")
    hour = 3_600_000
    return [
        Bar(
            time=start + i * hour,
            open=Decimal(o),
            high=Decimal(h),
            low=Decimal(l),
            close=Decimal(c),
            volume=Decimal(v),
        )
        for i, (o, h, l, c, v) in enumerate(
            [
                ("9", "10", "8", "9", "100"),
                ("9", "11", "9", "10", "120"),
                ("10", "13", "10", "12", "90"),
                ("12", "12", "11", "11", "150"),
                ("11", "15", "12", "14", "80"),
            ]
        )
    ]
