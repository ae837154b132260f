from decimal import Decimal
from types import NoneType, UnionType
from typing import Any, Union, get_args, get_origin

from barlab.inspect import isenum, isnamedtuple


def deserialize(value: Any, type_: Any) -> Any:
    """Converts a raw config value (as read from JSON, YAML or environment variables) into
    `type_`."""
    if type_ is Any:
        return value
    if type_ is NoneType:
        if value is None:
            return None
        raise TypeError(f"Invalid value {value} for NoneType")

    origin = get_origin(type_)
    if origin:
        # Either Union[T, Y], T | Y or Optional[T].
        # Optional[T] is equivalent to Union[T, NoneType].
        if origin is Union or origin is UnionType:
            for arg in get_args(type_):
                try:
                    return deserialize(value, arg)
                except (TypeError, ValueError, KeyError, ArithmeticError):
                    pass
            raise TypeError(f"Unable to deserialize value {value} of type {type_}")
        if origin is list:  # typing.list[T]
            (st,) = get_args(type_)
            return [deserialize(sv, st) for sv in value]
        if origin is dict:  # typing.dict[T, Y]
            skt, svt = get_args(type_)
            return {deserialize(sk, skt): deserialize(sv, svt) for sk, sv in value.items()}

    if isenum(type_):
        if isinstance(value, type_):
            return value
        # Either the rendered value (`DoubleExponential`) or the name (`double_exponential`).
        try:
            return type_(value)
        except ValueError:
            pass
        try:
            return type_[str(value).upper()]
        except KeyError:
            raise ValueError(f"Invalid value {value} for {type_.__name__}") from None
    if isnamedtuple(type_):
        return type_(
            *(
                deserialize(sub_value, sub_type)
                for sub_value, sub_type in zip(value, type_.__annotations__.values())
            )
        )
    if type_ is int:
        if isinstance(value, bool):
            raise TypeError(f"Invalid value {value} for int")
        if isinstance(value, str):
            return int(value)
        if isinstance(value, int):
            return value
        raise TypeError(f"Invalid value {value} for int")
    if type_ is Decimal:
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    if type_ is bool:
        if isinstance(value, str):
            return value.lower() in ["true", "1", "yes"]
        return bool(value)
    if type_ is str:
        if not isinstance(value, str):
            raise TypeError(f"Invalid value {value} for str")
        return value

    return value
