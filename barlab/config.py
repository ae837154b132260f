import logging
import os
from types import ModuleType
from typing import Any, Callable, Mapping, Optional

from mergedeep import merge

from barlab import indicators, serialization
from barlab.inspect import get_input_type_hints, get_module_type
from barlab.path import load_json_file, load_yaml_file

_log = logging.getLogger(__name__)


def from_env(
    env: Mapping[str, str] = os.environ, prefix: str = "BARLAB", separator: str = "__"
) -> dict[str, Any]:
    result: dict[str, Any] = {}
    entries = (
        (k.split(separator)[1:], v) for k, v in env.items() if k.startswith(prefix + separator)
    )
    for keys, value in entries:
        typed_keys = [int(k) if str.isdigit(k) else k.lower() for k in keys]
        target: Any = result
        for i in range(len(typed_keys)):
            k1 = typed_keys[i]
            k2 = typed_keys[i + 1] if i < len(typed_keys) - 1 else None
            if k2 is None:
                target[k1] = value
            else:
                if isinstance(k2, int):
                    target[k1] = _ensure_list(_get(target, k1), k2 + 1)
                else:
                    target[k1] = _ensure_dict(_get(target, k1))
                target = target[k1]
    return result


def from_json_file(file: str) -> dict[str, Any]:
    return load_json_file(file)


def from_yaml_file(file: str) -> dict[str, Any]:
    return load_yaml_file(file)


def from_file(file: str) -> dict[str, Any]:
    file_lower = file.lower()
    if file_lower.endswith("json"):
        return from_json_file(file)
    elif file_lower.endswith("yaml") or file_lower.endswith("yml"):
        return from_yaml_file(file)
    else:
        raise ValueError("Invalid config file. Expected JSON or YAML format")


def load(path: Optional[str] = None, env: Mapping[str, str] = os.environ) -> dict[str, Any]:
    # Environment overrides file values.
    return merge(
        {},
        from_file(path) if path else {},
        from_env(env),
    )


def init_module_instance(
    module: ModuleType,
    config: dict[str, Any],
    predicate: Callable[[type[Any]], bool] = lambda _: True,
) -> Any:
    type_name = config.get("type")
    if not type_name:
        raise ValueError('Unable to init module instance. Property "type" missing in config')
    type_ = get_module_type(module, type_name, predicate)
    return type_(**kwargs_for(type_.__init__, config))


def init_indicator(config: dict[str, Any]) -> Any:
    indicator = init_module_instance(indicators, config, _isindicator)
    _log.debug(f"initialized indicator {indicator!r} from config")
    return indicator


def init_indicators(config: dict[str, Any]) -> list[Any]:
    return [init_indicator(c) for c in config.get("indicators", [])]


def _isindicator(type_: type[Any]) -> bool:
    return callable(getattr(type_, "update", None)) and callable(getattr(type_, "reset", None))


def kwargs_for(signature: Any, config: dict[str, Any]) -> dict[str, Any]:
    parsed_config = {}
    for k, t in get_input_type_hints(signature).items():
        if (config_val := config.get(k, "__missing__")) != "__missing__":
            parsed_config[k] = serialization.deserialize(config_val, t)
    return parsed_config


def _ensure_list(existing: Optional[list[Any]], length: int) -> list[Any]:
    if existing is None:
        return [None] * length
    if len(existing) < length:
        return existing + [None] * (length - len(existing))
    return existing


def _ensure_dict(existing: Optional[dict[str, Any]]) -> dict[str, Any]:
    if existing is None:
        return {}
    return existing


def _get(collection: Any, key: Any) -> Optional[Any]:
    if isinstance(collection, list):
        return collection[key]
    else:
        return collection.get(key)
