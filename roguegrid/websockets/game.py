"""Socket.IO game handlers.

Events:
    - new_game: Start a game bound to this connection; payload { seed? }
    - key_input: Submit one key press; payload { key }

Emits:
    - game_state: Full snapshot after new_game
    - game_update: Turn result plus snapshot after every key_input
    - game_over: { outcome } once a turn ends the game
    - error: { message, field, code } for invalid payloads or missing game
"""

from flask import request
from flask_socketio import emit

from roguegrid import socketio
from roguegrid.logging_utils import log
from roguegrid.routes.game_api import drop_game, get_game, start_game

from .validation import KEY_INPUT, NEW_GAME, validate


def _game_id() -> str:
    return f"ws:{request.sid}"


@socketio.on('new_game')
def handle_new_game(data=None):
    ok, result = validate(data or {}, NEW_GAME)
    if not ok:
        emit('error', {'message': f"Invalid new_game: {result['error']}", 'field': result['field'], 'code': result['code']})
        return
    game = start_game(_game_id(), seed=result.get('seed'))
    emit('game_state', game.snapshot())


@socketio.on('key_input')
def handle_key_input(data):
    ok, result = validate(data or {}, KEY_INPUT)
    if not ok:
        emit('error', {'message': f"Invalid key_input: {result['error']}", 'field': result['field'], 'code': result['code']})
        return
    game = get_game(_game_id())
    if game is None:
        emit('error', {'message': 'No active game; send new_game first', 'field': '__root__', 'code': 'no_game'})
        return
    with game.lock:
        turn = game.handle_key(result['key'])
    payload = turn.to_dict()
    payload['state'] = game.snapshot()
    emit('game_update', payload)
    if turn.acted and turn.terminal:
        emit('game_over', {'outcome': turn.outcome.value})
        log.info(event="ws_game_over", sid=request.sid, outcome=turn.outcome.value)


@socketio.on('disconnect')
def handle_disconnect(*_args):
    drop_game(_game_id())
