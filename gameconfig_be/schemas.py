from marshmallow import Schema, fields, pre_load, EXCLUDE
from marshmallow_sqlalchemy import SQLAlchemyAutoSchema, auto_field

from .models import db, GameConfig # Relative import

# --- Game Config Schemas ---
class GameConfigSchema(SQLAlchemyAutoSchema):
    # Response shape; keys follow the client's camelCase wire format
    class Meta:
        model = GameConfig
        load_instance = True
        sqla_session = db.session

    id = auto_field(dump_only=True)
    game_name = auto_field(data_key='gameName')
    game_rtp = auto_field(data_key='gameRtp')
    reel_strips = fields.Raw(data_key='reelStrips', metadata={"description": "List of single-key reel objects"})
    created_at = auto_field(data_key='createdAt', dump_only=True)
    updated_at = auto_field(data_key='updatedAt', dump_only=True)


class GameConfigRequestSchema(Schema):
    """
    Request body for create/update. Values are passed through untouched;
    all numeric and structural checks happen in the validator so that the
    caller gets a single field/reason error.
    """
    class Meta:
        unknown = EXCLUDE

    gameName = fields.Raw(allow_none=True)
    gameRtp = fields.Raw(allow_none=True)
    reelStrips = fields.Raw(allow_none=True)
    objectId = fields.Str(allow_none=True, load_default=None)

    @pre_load
    def apply_legacy_aliases(self, data, **kwargs):
        # Older clients send the reel list as "reelName"
        if isinstance(data, dict) and 'reelStrips' not in data and 'reelName' in data:
            data = dict(data)
            data['reelStrips'] = data.pop('reelName')
        return data
