from datetime import datetime, timezone
from types import ModuleType

# UTC timestamp in milliseconds.
Timestamp = int


class Timestamp_(ModuleType):
    @staticmethod
    def from_datetime_utc(dt: datetime) -> Timestamp:
        assert dt.tzinfo == timezone.utc
        return int(round(dt.timestamp() * 1000.0))

    @staticmethod
    def to_datetime_utc(ms: Timestamp) -> datetime:
        return datetime.fromtimestamp(ms / 1000.0, tz=timezone.utc)

    @staticmethod
    def parse(timestamp: str) -> Timestamp:
        # Naive is handled as UTC.
        dt = datetime.fromisoformat(timestamp)
        if dt.tzinfo:
            dt = dt.astimezone(timezone.utc)
        else:
            dt = dt.replace(tzinfo=timezone.utc)
        return Timestamp_.from_datetime_utc(dt)
