#!/usr/bin/env python3
"""
Game Config Admin CLI Tool

A command-line interface for game configuration administration:
- Create a game config from a JSON file
- Update an existing game config from a JSON file
- Show a game config by id
- Find game configs by game name

Usage:
    python -m gameconfig_be.admin_cli --help
    python -m gameconfig_be.admin_cli config create --file fortune_tiger.json
    python -m gameconfig_be.admin_cli config update --id <id> --file fortune_tiger.json
    python -m gameconfig_be.admin_cli config find --name "Fortune Tiger"
"""

import json
import sys
import click

from gameconfig_be.app import create_app
from gameconfig_be.models import db
from gameconfig_be.exceptions import AppException, ValidationException
from gameconfig_be.schemas import GameConfigSchema
from gameconfig_be.services.game_config_service import GameConfigService
from gameconfig_be.services.game_config_store import SQLAlchemyGameConfigStore

def _load_payload(file):
    try:
        return json.load(file)
    except json.JSONDecodeError as e:
        raise ValidationException('file', 'invalid-json', status_message=f"Invalid JSON in {file.name}: {e}")

def _echo_config(game_config):
    click.echo(json.dumps(GameConfigSchema().dump(game_config), indent=2))

def _fail(e):
    click.echo(f"❌ Error: {e.status_message} ({e.error_code}) {e.details or ''}", err=True)
    sys.exit(1)

@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.pass_context
def cli(ctx, verbose):
    """Game Config Admin CLI - Administrative tools for slot game configurations."""
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose

    app = ctx.obj.get('app') or create_app()
    app_context = app.app_context()
    app_context.push()
    ctx.call_on_close(app_context.pop)
    ctx.obj['service'] = GameConfigService(SQLAlchemyGameConfigStore())

@cli.command('init-db')
def init_db():
    """Create missing tables (development only; use migrations elsewhere)."""
    db.create_all()
    click.echo("✅ Tables created")

@cli.group()
def config():
    """Game configuration commands."""
    pass

@config.command('create')
@click.option('--file', 'file', type=click.File('r'), required=True, help='JSON file with gameName, gameRtp and reelStrips')
@click.pass_context
def create_config(ctx, file):
    """Create a new game config."""
    try:
        game_config = ctx.obj['service'].create_game_config(_load_payload(file))
    except AppException as e:
        _fail(e)
    click.echo(f"✅ Created game config {game_config.id}")
    if ctx.obj['verbose']:
        _echo_config(game_config)

@config.command('update')
@click.option('--id', 'config_id', required=True, help='Game config id')
@click.option('--file', 'file', type=click.File('r'), required=True, help='JSON file with gameName, gameRtp and reelStrips')
@click.pass_context
def update_config(ctx, config_id, file):
    """Overwrite an existing game config."""
    try:
        game_config = ctx.obj['service'].update_game_config(config_id, _load_payload(file))
    except AppException as e:
        _fail(e)
    click.echo(f"✅ Updated game config {game_config.id}")
    if ctx.obj['verbose']:
        _echo_config(game_config)

@config.command('show')
@click.option('--id', 'config_id', required=True, help='Game config id')
@click.pass_context
def show_config(ctx, config_id):
    """Print a game config as JSON."""
    try:
        game_config = ctx.obj['service'].get_game_config(config_id)
    except AppException as e:
        _fail(e)
    _echo_config(game_config)

@config.command('find')
@click.option('--name', 'game_name', required=True, help='Game name')
@click.pass_context
def find_configs(ctx, game_name):
    """List every game config stored under a game name."""
    try:
        game_configs = ctx.obj['service'].find_game_configs_by_name(game_name)
    except AppException as e:
        _fail(e)
    click.echo(json.dumps(GameConfigSchema(many=True).dump(game_configs), indent=2))

if __name__ == '__main__':
    cli()
