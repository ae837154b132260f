import logging
from decimal import Decimal

import pytest
from pytest_mock import MockerFixture

from barlab import Bar
from barlab.indicators import SFX, Atr, Ema, MovingAverageType, Sma, StdDev


def test_update_returns_input_value(bars: list[Bar]) -> None:
    sfx = SFX(14, 10, 5)
    for i, bar in enumerate(bars):
        assert sfx.update(bar) == bar.value
        assert sfx.value == bar.close
        assert sfx.samples == i + 1


def test_update_does_not_feed_sub_indicators(bars: list[Bar]) -> None:
    sfx = SFX(1, 1, 1)
    for bar in bars:
        sfx.update(bar)
    assert not sfx.atr.is_ready
    assert not sfx.std_dev.is_ready
    assert not sfx.ma_std_dev.is_ready
    assert not sfx.is_ready


def test_is_ready_when_all_sub_indicators_ready() -> None:
    sfx = SFX(1, 1, 1)

    sfx.atr.update(Decimal("10"), Decimal("8"), Decimal("9"))
    assert not sfx.is_ready
    sfx.std_dev.update(Decimal("9"))
    assert not sfx.is_ready
    sfx.ma_std_dev.update(Decimal("0"))
    assert sfx.is_ready


@pytest.mark.parametrize(
    "periods,expected_output",
    [
        ((14, 10, 5), 14),
        ((5, 20, 10), 20),
        ((2, 3, 30), 30),
    ],
)
def test_warm_up_period(periods: tuple[int, int, int], expected_output: int) -> None:
    assert SFX(*periods).warm_up_period == expected_output


def test_sub_indicators() -> None:
    sfx = SFX(14, 10, 5, MovingAverageType.EXPONENTIAL)
    assert isinstance(sfx.atr, Atr)
    assert sfx.atr.warm_up_period == 14
    assert isinstance(sfx.std_dev, StdDev)
    assert sfx.std_dev.warm_up_period == 10
    assert isinstance(sfx.ma_std_dev, Ema)
    assert sfx.ma_std_dev.warm_up_period == 5

    assert isinstance(SFX(14, 10, 5).ma_std_dev, Sma)


def test_reset(bars: list[Bar]) -> None:
    sfx = SFX(1, 1, 1)
    for bar in bars:
        sfx.update(bar)
    sfx.atr.update(Decimal("10"), Decimal("8"), Decimal("9"))
    sfx.std_dev.update(Decimal("9"))
    sfx.ma_std_dev.update(Decimal("0"))
    assert sfx.is_ready

    sfx.reset()

    assert not sfx.is_ready
    assert not sfx.atr.is_ready
    assert not sfx.std_dev.is_ready
    assert not sfx.ma_std_dev.is_ready
    assert sfx.samples == 0
    assert sfx.value == 0


@pytest.mark.parametrize(
    "args,expected_output",
    [
        ((14, 10, 5), "SFX(14,10,5,Simple)"),
        ((14, 10, 5, MovingAverageType.LWMA), "SFX(14,10,5,LWMA)"),
    ],
)
def test_default_name(args: tuple, expected_output: str) -> None:
    assert SFX(*args).name == expected_output


def test_custom_name() -> None:
    assert SFX(14, 10, 5, name="foo").name == "foo"


def test_update_logs_input(bars: list[Bar], caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="barlab.indicators.sfx")
    sfx = SFX(14, 10, 5)
    sfx.update(bars[0])
    assert "SFX(14,10,5,Simple) input: Bar(" in caplog.text


@pytest.mark.parametrize("periods", [(0, 10, 5), (14, 0, 5), (14, 10, 0)])
def test_invalid_period_raised_by_sub_indicator(periods: tuple[int, int, int]) -> None:
    with pytest.raises(ValueError):
        SFX(*periods)


def test_reset_cascades_to_sub_indicators(mocker: MockerFixture) -> None:
    sfx = SFX(14, 10, 5)
    spies = [mocker.spy(i, "reset") for i in [sfx.atr, sfx.std_dev, sfx.ma_std_dev]]

    sfx.reset()

    for spy in spies:
        spy.assert_called_once_with()
