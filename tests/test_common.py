from decimal import Decimal

from barlab import Bar, Timestamp_


def test_bar_value_is_close() -> None:
    bar = Bar(
        time=Timestamp_.parse("2021-01-01"),
        open=Decimal("1.0"),
        high=Decimal("3.0"),
        low=Decimal("0.5"),
        close=Decimal("2.0"),
        volume=Decimal("10.0"),
    )
    assert bar.value == Decimal("2.0")
    assert bar.midpoint == Decimal("1.5")
    assert bar.mean_hlc == Decimal("5.5") / 3


def test_bar_repr() -> None:
    bar = Bar(time=Timestamp_.parse("2021-01-01"), close=Decimal("2.0"))
    assert repr(bar) == (
        "Bar(time=2021-01-01 00:00:00+00:00, open=0.0, high=0.0, low=0.0, close=2.0, "
        "volume=0.0)"
    )


def test_timestamp_parse_naive_as_utc() -> None:
    expected_output = Timestamp_.parse("2021-01-01T12:00:00+00:00")
    assert Timestamp_.parse("2021-01-01T12:00:00") == expected_output
