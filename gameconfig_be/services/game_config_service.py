"""
Create and update of game configurations.

Validation always runs to completion before the single write a call makes, so
a rejected payload never touches stored state. There is no version check on
update: two concurrent updates of one record are last-write-wins.
"""

import logging

from gameconfig_be.exceptions import NotFoundException, ValidationException
from gameconfig_be.utils.game_config_validator import validate_game_config

logger = logging.getLogger(__name__)


class GameConfigService:

    def __init__(self, store):
        self.store = store

    def create_game_config(self, raw_fields):
        '''
        Validates ``raw_fields`` and persists a new game config.

        Returns:
            The stored entity, including its assigned id.

        Raises:
            ValidationException: input rejected, nothing written.
            PersistenceException: the store failed, surfaced without retry.
        '''
        draft = self._validate(raw_fields)
        entity = self.store.create(draft.to_fields())
        logger.info(f"Created game config {entity.id} for '{draft.game_name}' with {len(draft.reel_strips)} reels")
        return entity

    def update_game_config(self, config_id, raw_fields):
        '''
        Overwrites name, RTP and reel strips of an existing game config.

        Partial updates are not supported: every field is re-validated and
        rewritten.

        Raises:
            NotFoundException: no record with ``config_id``, nothing written.
            ValidationException: input rejected, nothing written.
            PersistenceException: the store failed, surfaced without retry.
        '''
        entity = self.store.find_by_id(config_id)
        if entity is None:
            logger.warning(f"Update of unknown game config {config_id} rejected")
            raise NotFoundException(config_id)

        draft = self._validate(raw_fields, config_id=config_id)
        for name, value in draft.to_fields().items():
            setattr(entity, name, value)

        entity = self.store.save(entity)
        logger.info(f"Updated game config {entity.id} ('{draft.game_name}')")
        return entity

    def get_game_config(self, config_id):
        entity = self.store.find_by_id(config_id)
        if entity is None:
            raise NotFoundException(config_id)
        return entity

    def find_game_configs_by_name(self, game_name):
        if not game_name:
            raise ValidationException('gameName', 'required', status_message="Please Provide Game Name.")
        configs = self.store.find_by_name(game_name)
        if not configs:
            raise NotFoundException(status_message=f"No records found for Game Name: {game_name}")
        return configs

    def _validate(self, raw_fields, config_id=None):
        try:
            return validate_game_config(raw_fields)
        except ValidationException as e:
            target = f"game config {config_id}" if config_id else "new game config"
            logger.warning(f"Rejected {target}: {e.field} ({e.reason})")
            raise
