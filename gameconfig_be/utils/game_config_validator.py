"""
Top-level validation of a game configuration payload.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, List

from gameconfig_be.exceptions import ValidationException
from gameconfig_be.utils.numeric import CoercionError, coerce_number
from gameconfig_be.utils.reel_normalizer import ReelEntry, normalize_reel_strips

REQUIRED_FIELDS = ('gameName', 'gameRtp')
GAME_NAME_MAX_LENGTH = 100


@dataclass(frozen=True)
class GameConfigDraft:
    """Fully validated game config, not yet persisted (no id)."""
    game_name: str
    game_rtp: float
    reel_strips: List[ReelEntry]

    def to_fields(self) -> Dict[str, Any]:
        return {
            'game_name': self.game_name,
            'game_rtp': self.game_rtp,
            'reel_strips': [entry.to_wire() for entry in self.reel_strips],
        }


def validate_game_config(raw: Mapping) -> GameConfigDraft:
    """
    Validate raw ``{gameName, gameRtp, reelStrips}`` input.

    Presence is checked with a truthiness test, so an RTP of ``0`` is reported
    as missing. ``raw`` is never mutated.

    Raises:
        ValidationException: on the first defect found.
    """
    if not isinstance(raw, Mapping):
        raise ValidationException('body', 'invalid-payload')

    for name in REQUIRED_FIELDS:
        if not raw.get(name):
            raise ValidationException(name, 'required')
    if raw.get('reelStrips') is None:
        raise ValidationException('reelStrips', 'required')

    game_name = raw['gameName']
    if not isinstance(game_name, str):
        raise ValidationException('gameName', 'invalid-string')
    if len(game_name) > GAME_NAME_MAX_LENGTH:
        raise ValidationException(
            'gameName', 'too-long',
            status_message=f"Game name must be at most {GAME_NAME_MAX_LENGTH} characters"
        )

    try:
        game_rtp = coerce_number(raw['gameRtp'])
    except CoercionError:
        raise ValidationException(
            'gameRtp', 'invalid-number',
            status_message="Invalid gameRtp value, it must be a valid number"
        )

    reel_strips = normalize_reel_strips(raw['reelStrips'])

    return GameConfigDraft(game_name=game_name, game_rtp=game_rtp, reel_strips=reel_strips)
