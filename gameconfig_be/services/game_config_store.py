"""
Persistence collaborator for game configurations.

``GameConfigStore`` describes what the service needs from storage;
``SQLAlchemyGameConfigStore`` provides it on top of the Flask-SQLAlchemy
session. Every call commits at most once and never retries.
"""

import logging
from typing import Any, Dict, List, Optional, Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from gameconfig_be.exceptions import PersistenceException
from gameconfig_be.models import db, GameConfig

logger = logging.getLogger(__name__)


class GameConfigStore(Protocol):
    def find_by_id(self, config_id: str) -> Optional[GameConfig]:
        ...

    def find_by_name(self, game_name: str) -> List[GameConfig]:
        ...

    def create(self, fields: Dict[str, Any]) -> GameConfig:
        """Insert a new record; id and timestamps are assigned here."""
        ...

    def save(self, entity: GameConfig) -> GameConfig:
        """Overwrite the stored fields of an existing record."""
        ...


class SQLAlchemyGameConfigStore:

    def __init__(self, session=None):
        self.session = session if session is not None else db.session

    def find_by_id(self, config_id):
        try:
            return self.session.get(GameConfig, config_id)
        except SQLAlchemyError as e:
            logger.error(f"Lookup of game config {config_id} failed: {str(e)}")
            raise PersistenceException(e) from e

    def find_by_name(self, game_name):
        try:
            stmt = select(GameConfig).filter_by(game_name=game_name).order_by(GameConfig.created_at)
            return list(self.session.scalars(stmt))
        except SQLAlchemyError as e:
            logger.error(f"Lookup of game configs named '{game_name}' failed: {str(e)}")
            raise PersistenceException(e) from e

    def create(self, fields):
        entity = GameConfig(**fields)
        return self._commit(entity)

    def save(self, entity):
        return self._commit(entity)

    def _commit(self, entity):
        try:
            self.session.add(entity)
            self.session.commit()
            self.session.refresh(entity)
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Failed to persist game config: {str(e)}", exc_info=True)
            raise PersistenceException(e) from e
        return entity
