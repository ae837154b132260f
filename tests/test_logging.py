import logging
import sys
from io import StringIO

import pytest
from colorlog import ColoredFormatter
from pytest_mock import MockerFixture

from barlab import json
from barlab.logging import JsonFormatter, configure, create_handlers


def test_create_handlers_default() -> None:
    handlers = create_handlers()
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)
    assert handlers[0].stream is sys.stdout


def test_create_handlers_color() -> None:
    handlers = create_handlers(log_format="color")
    assert isinstance(handlers[0].formatter, ColoredFormatter)


def test_create_handlers_does_not_mutate_outputs() -> None:
    log_outputs = ["stdout"]
    create_handlers(log_outputs=log_outputs)
    assert log_outputs == ["stdout"]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"log_format": "foo"},
        {"log_outputs": ["stdout", "foo"]},
    ],
)
def test_create_handlers_not_implemented(kwargs: dict) -> None:
    with pytest.raises(NotImplementedError):
        create_handlers(**kwargs)


def test_json_formatter() -> None:
    record = logging.LogRecord(
        name="barlab.indicators.sfx",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
    )

    output = json.load(StringIO(JsonFormatter().format(record)))

    assert output["severity"] == "INFO"
    assert output["message"] == "barlab.indicators.sfx: hello world"
    assert output["time"].endswith("Z")


def test_configure(mocker: MockerFixture) -> None:
    basic_config = mocker.patch("logging.basicConfig")

    configure({"log_level": "debug", "log_format": "json"})

    basic_config.assert_called_once()
    kwargs = basic_config.call_args.kwargs
    assert kwargs["level"] == logging.DEBUG
    assert kwargs["force"]
    assert len(kwargs["handlers"]) == 1
    assert isinstance(kwargs["handlers"][0].formatter, JsonFormatter)


def test_configure_defaults(mocker: MockerFixture) -> None:
    basic_config = mocker.patch("logging.basicConfig")

    configure({})

    kwargs = basic_config.call_args.kwargs
    assert kwargs["level"] == logging.INFO
    assert kwargs["handlers"][0].formatter is None
