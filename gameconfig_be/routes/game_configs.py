from flask import Blueprint, request, jsonify
from marshmallow import ValidationError

from ..schemas import GameConfigSchema, GameConfigRequestSchema
from ..services.game_config_service import GameConfigService
from ..services.game_config_store import SQLAlchemyGameConfigStore
from ..exceptions import ValidationException

game_configs_bp = Blueprint('game_configs', __name__, url_prefix='/api/game-configs')

def _service():
    return GameConfigService(SQLAlchemyGameConfigStore())

def _load_request_body():
    data = request.get_json(silent=True)
    if data is None:
        raise ValidationException('body', 'invalid-json', status_message='Invalid JSON payload.')
    try:
        return GameConfigRequestSchema().load(data)
    except ValidationError as e:
        if isinstance(e.messages, dict) and 'objectId' in e.messages:
            raise ValidationException('objectId', 'invalid-string') from e
        raise ValidationException('body', 'invalid-payload', status_message='Request body must be a JSON object.') from e

@game_configs_bp.route('', methods=['POST'])
@game_configs_bp.route('/', methods=['POST'])
def create_game_config():
    raw_fields = _load_request_body()
    game_config = _service().create_game_config(raw_fields)
    return jsonify({'status': True, 'game_config': GameConfigSchema().dump(game_config)}), 201

@game_configs_bp.route('', methods=['PUT'])
@game_configs_bp.route('/<config_id>', methods=['PUT'])
def update_game_config(config_id=None):
    raw_fields = _load_request_body()
    # Legacy clients put the target id in the body as objectId
    config_id = config_id or raw_fields.get('objectId')
    if not config_id:
        raise ValidationException('objectId', 'required')
    game_config = _service().update_game_config(config_id, raw_fields)
    return jsonify({'status': True, 'game_config': GameConfigSchema().dump(game_config)}), 200

@game_configs_bp.route('/<config_id>', methods=['GET'])
def get_game_config(config_id):
    game_config = _service().get_game_config(config_id)
    return jsonify({'status': True, 'game_config': GameConfigSchema().dump(game_config)}), 200

@game_configs_bp.route('', methods=['GET'])
@game_configs_bp.route('/', methods=['GET'])
def find_game_configs():
    game_name = request.args.get('gameName', '').strip()
    game_configs = _service().find_game_configs_by_name(game_name)
    return jsonify({'status': True, 'game_configs': GameConfigSchema(many=True).dump(game_configs)}), 200
