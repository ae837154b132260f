import inspect
from enum import Enum
from types import ModuleType
from typing import Any, Callable, get_type_hints


def isnamedtuple(obj: Any) -> bool:
    if not isinstance(obj, type):
        obj = type(obj)

    # Note that '_fields' is present only if the tuple has at least 1 field.
    return inspect.isclass(obj) and issubclass(obj, tuple) and bool(getattr(obj, "_fields", False))


def isenum(obj: Any) -> bool:
    return inspect.isclass(obj) and issubclass(obj, Enum)


def get_input_type_hints(obj: Any) -> dict[str, Any]:
    return {n: t for n, t in get_type_hints(obj).items() if n != "return"}


def get_module_type(
    module: ModuleType, name: str, predicate: Callable[[type[Any]], bool] = lambda _: True
) -> type[Any]:
    name_lower = name.lower()
    found_members = inspect.getmembers(
        module,
        lambda obj: inspect.isclass(obj) and obj.__name__.lower() == name_lower and predicate(obj),
    )
    if len(found_members) == 0:
        raise ValueError(f'Type named "{name}" not found in module "{module.__name__}"')
    if len(found_members) > 1:
        raise ValueError(f'Found more than one type named "{name}" in module "{module.__name__}"')
    return found_members[0][1]
