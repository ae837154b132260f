import logging
import sys
from datetime import datetime, timezone
from logging.handlers import TimedRotatingFileHandler
from typing import Any, Optional

from colorlog import ColoredFormatter

from barlab import json
from barlab.path import home_path


def create_handlers(
    log_format: str = "default",
    log_outputs: list[str] = ["stdout"],
    # The following are used when `log_outputs` includes 'file'.
    log_directory: str = "logs",
    log_backup_count: int = 0,
) -> list[logging.Handler]:
    # We make a copy in order not to mutate the input.
    log_outputs = log_outputs[:]

    handlers: list[logging.Handler] = []

    if "stdout" in log_outputs:
        handlers.append(logging.StreamHandler(stream=sys.stdout))
        log_outputs.remove("stdout")
    if "file" in log_outputs:
        handlers.append(
            TimedRotatingFileHandler(
                home_path(log_directory) / "log",
                when="midnight",
                utc=True,
                backupCount=log_backup_count,
            )
        )
        log_outputs.remove("file")
    if len(log_outputs) > 0:
        raise NotImplementedError(f"{log_outputs=}")

    formatter: Optional[logging.Formatter] = None
    if log_format == "default":
        pass
    elif log_format == "color":
        formatter = ColoredFormatter(
            fmt="%(log_color)s%(levelname)s:%(name)s:%(reset)s%(message)s",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "red",
            },
        )
    elif log_format == "json":
        formatter = JsonFormatter()
    else:
        raise NotImplementedError(f"{log_format=}")

    if formatter:
        for handler in handlers:
            handler.setFormatter(formatter)

    return handlers


def configure(cfg: dict[str, Any]) -> None:
    log_level = cfg.get("log_level", "info")
    log_format = cfg.get("log_format", "default")
    log_outputs = cfg.get("log_outputs", ["stdout"])
    log_directory = cfg.get("log_directory", "logs")
    log_backup_count = int(cfg.get("log_backup_count", 0))
    logging.basicConfig(
        handlers=create_handlers(log_format, log_outputs, log_directory, log_backup_count),
        level=logging.getLevelName(log_level.upper()),
        force=True,
    )
    logging.getLogger(__name__).info(
        f"log level: {log_level}; format: {log_format}; outputs: {log_outputs}"
    )


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(
            {
                "severity": record.levelname,
                "time": datetime.fromtimestamp(record.created, tz=timezone.utc)
                .replace(tzinfo=None)
                .isoformat()
                + "Z",
                "message": f"{record.name}: {super().format(record)}",
            }
        )
