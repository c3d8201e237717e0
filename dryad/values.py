"""Runtime values shared by the native function modules, and the error they raise."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any


class NativeError(Exception):
    """Error raised by a native function, carrying a numeric error code."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(f"E{code}: {message}")
        self.code = code
        self.message = message


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _format_number(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def display(value: Any) -> str:
    """Render a runtime value the way the language prints it."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if _is_number(value):
        return _format_number(value)
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return "[" + ", ".join(display(item) for item in value) + "]"
    if isinstance(value, tuple):
        return "(" + ", ".join(display(item) for item in value) + ")"
    if isinstance(value, dict):
        fields = ", ".join(f"{key}: {display(item)}" for key, item in value.items())
        return "{" + fields + "}"
    if isinstance(value, BaseException):
        return str(value)
    if isinstance(value, type):
        return f"<class {value.__name__}>"
    if callable(value):
        return f"<function {getattr(value, '__name__', 'anonymous')}>"
    return f"<instance {type(value).__name__}>"


def type_name(value: Any) -> str:
    """Return the language's name for the type of a runtime value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if _is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, tuple):
        return "tuple"
    if isinstance(value, BaseException):
        return "exception"
    if isinstance(value, type):
        return "class"
    if callable(value):
        if getattr(value, "__name__", "") == "<lambda>":
            return "lambda"
        return "function"
    if isinstance(value, dict):
        return "object"
    return "instance"