from decimal import Decimal
from typing import IO, Any

import yaml


def _decimal_constructor(loader, node):
    value = loader.construct_scalar(node)
    return Decimal(value)


# Support loading Decimals from a yaml config file.
# The value must be prefixed with the `!decimal` tag.
yaml.add_constructor("!decimal", _decimal_constructor, Loader=yaml.SafeLoader)


def load(stream: IO | str) -> Any:
    return yaml.load(stream=stream, Loader=yaml.SafeLoader)


__all__ = [
    "load",
]
