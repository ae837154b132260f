from barlab.common import Bar
from barlab.primitives import Timestamp, Timestamp_

__all__ = [
    "Bar",
    "Timestamp",
    "Timestamp_",
]
