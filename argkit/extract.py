"""
Typed extraction of option values.

Values are always parsed as strings; converting them is done here, by
looking up a converter for the type the caller asks for.
"""

import logging

from typing import Any, Callable, TypeVar, cast as _cast

from . import const

_logger = logging.getLogger(__name__)

T = TypeVar("T")

Converter = Callable[[str], Any]

TRUE_VALUES = ("true", "True", "y", "yes", "Y", "Yes", "1")
FALSE_VALUES = ("false", "False", "n", "no", "N", "No", "0")


def parseBool(value: str) -> bool:
    if value in TRUE_VALUES:
        return True
    elif value in FALSE_VALUES:
        return False
    raise ValueError(f"Expected a boolean but got '{value}'")


def parseInt(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Expected an integer but got '{value}'") from None


def parseFloat(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"Expected a number but got '{value}'") from None


_converters: dict[type, Converter] = {
    str: str,
    int: parseInt,
    float: parseFloat,
    bool: parseBool,
}


def register(typ: type[T], converter: Callable[[str], T]):
    """Registers a converter for values requested as `typ`."""
    _logger.info(f"Registering converter for '{typ.__name__}'")
    _converters[typ] = converter


def converterFor(typ: type) -> Converter:
    if typ not in _converters:
        raise TypeError(f"No converter registered for '{typ.__name__}'")
    return _converters[typ]


def cast(value: str, typ: type[T]) -> T:
    """Converts `value` to `typ` using the registered converter."""
    return _cast(T, converterFor(typ)(value))


def castList(value: str, typ: type[T]) -> list[T]:
    """Splits `value` on commas and converts each item to `typ`."""
    convert = converterFor(typ)
    if value == "":
        return []
    return [convert(v.strip()) for v in value.split(const.LIST_DELIMITER)]
