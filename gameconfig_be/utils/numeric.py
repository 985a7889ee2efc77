import math
import re

# Leading decimal literal, parseFloat-style: "5abc" -> 5, ".5" -> 0.5, "1e3x" -> 1000
_FLOAT_PREFIX = re.compile(r'[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)')


class CoercionError(ValueError):
    """Raised when a client supplied scalar cannot be turned into a finite number."""

    def __init__(self, raw_input, reason="not-a-number"):
        super().__init__(f"{raw_input!r} is {reason}")
        self.raw_input = raw_input
        self.reason = reason


def coerce_number(value) -> float:
    """
    Convert a client supplied scalar into a finite float.

    Numbers are taken as-is. Strings are parsed leniently: leading whitespace
    is skipped and the longest leading decimal literal is used, so trailing
    garbage is ignored. Anything else (None, bool, containers) is rejected.

    Raises:
        CoercionError: if no finite number can be produced.
    """
    if isinstance(value, bool):
        raise CoercionError(value)

    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            raise CoercionError(value)
    elif isinstance(value, str):
        match = _FLOAT_PREFIX.match(value.lstrip())
        if not match:
            raise CoercionError(value)
        number = float(match.group(0))
    else:
        raise CoercionError(value)

    if not math.isfinite(number):
        raise CoercionError(value)
    return number
