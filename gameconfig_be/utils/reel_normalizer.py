"""
Reel strip normalization.

Turns the wire encoding of reel strips, a list of single-key objects such as
``[{"reelOne": {"L1": "5", "L2": 3}}]``, into ``ReelEntry`` values whose
weights are guaranteed to be finite, non-negative floats.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List

from gameconfig_be.exceptions import ValidationException
from gameconfig_be.utils.numeric import CoercionError, coerce_number


@dataclass(frozen=True)
class ReelEntry:
    key: str
    weights: Dict[str, float] = field(default_factory=dict)

    def to_wire(self) -> Dict[str, Dict[str, float]]:
        return {self.key: dict(self.weights)}


def normalize_reel_entry(raw_reel: Any) -> ReelEntry:
    """
    Validate one reel object and coerce every symbol weight.

    The reel object must carry exactly one key, the reel name, whose value is
    the symbol table. Fails on the first symbol that is not a finite,
    non-negative number, naming both the reel and the symbol.
    """
    if not isinstance(raw_reel, Mapping) or len(raw_reel) == 0:
        raise ValidationException('reel', 'missing-or-invalid-symbol-table')
    if len(raw_reel) > 1:
        raise ValidationException(
            'reel', 'multiple-reel-keys',
            status_message=f"Reel object must have exactly one key, got {sorted(map(str, raw_reel))}"
        )

    (reel_key, symbol_table), = raw_reel.items()
    if not isinstance(symbol_table, Mapping):
        raise ValidationException('reel', 'missing-or-invalid-symbol-table')

    weights = {}
    for symbol, raw_weight in symbol_table.items():
        try:
            weight = coerce_number(raw_weight)
        except CoercionError:
            weight = None
        if weight is None or weight < 0:
            raise ValidationException(
                f"{reel_key}.{symbol}", 'invalid-weight',
                status_message=f"Invalid value for symbol {symbol} in {reel_key}, must be a valid number"
            )
        weights[symbol] = weight

    return ReelEntry(key=reel_key, weights=weights)


def normalize_reel_strips(raw_strips: Any) -> List[ReelEntry]:
    """Normalize the whole ordered reel list; the first bad reel aborts."""
    if not isinstance(raw_strips, (list, tuple)) or not raw_strips:
        raise ValidationException('reelStrips', 'missing-or-empty')
    return [normalize_reel_entry(raw_reel) for raw_reel in raw_strips]
