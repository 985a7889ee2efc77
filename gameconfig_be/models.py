from flask_sqlalchemy import SQLAlchemy
from datetime import datetime, timezone
from sqlalchemy import JSON
import uuid

from gameconfig_be.utils.game_config_validator import GAME_NAME_MAX_LENGTH

db = SQLAlchemy()

def _new_config_id():
    return str(uuid.uuid4())

class GameConfig(db.Model):
    __tablename__ = 'game_config'
    id = db.Column(db.String(36), primary_key=True, default=_new_config_id)
    game_name = db.Column(db.String(GAME_NAME_MAX_LENGTH), nullable=False, index=True)
    game_rtp = db.Column(db.Float, nullable=False)
    # Stored in wire form: [{"reelOne": {"L1": 5.0, ...}}, ...]
    reel_strips = db.Column(JSON, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc),
                           onupdate=lambda: datetime.now(timezone.utc), nullable=False)

    def __repr__(self):
        return f"<GameConfig {self.id} ({self.game_name}, RTP: {self.game_rtp})>"
