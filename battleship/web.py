"""
Battleship - Web Application

JSON API around a single game model. Flask may serve requests from several
threads, so every model call goes through one lock.
"""

import logging
import threading

from flask import Flask, jsonify, request

from .errors import GameStateError, InvalidMoveError
from .game import BattleshipModel

logger = logging.getLogger(__name__)


def game_state(model):
    """Serialise what the player is allowed to see."""
    over = model.is_game_over()
    return {
        'cells': [[state.name.lower() for state in row] for row in model.get_cell_grid()],
        'guess_count': model.get_guess_count(),
        'max_guesses': model.get_max_guesses(),
        'game_over': over,
        'won': over and model.are_all_ships_sunk(),
        'sunk': [kind.label for kind in model.get_sunk_ships()],
    }


def create_app(model=None):
    app = Flask(__name__)
    game = model if model is not None else BattleshipModel()
    lock = threading.Lock()
    app.config['GAME'] = game

    @app.errorhandler(InvalidMoveError)
    def invalid_move(e):
        return jsonify({'error': str(e)}), 400

    @app.errorhandler(GameStateError)
    def invalid_state(e):
        return jsonify({'error': str(e)}), 409

    @app.route('/health')
    def health():
        return jsonify({'status': 'ok'})

    @app.route('/api/game', methods=['POST'])
    def start_game():
        with lock:
            game.start()
            return jsonify(game_state(game))

    @app.route('/api/game', methods=['GET'])
    def get_game():
        with lock:
            return jsonify(game_state(game))

    @app.route('/api/guess', methods=['POST'])
    def guess():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        r, c = data.get('row'), data.get('col')
        # JSON true/false decode to bool, which is an int subclass
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in (r, c)):
            return jsonify({'error': "Body must be JSON like {\"row\": 0, \"col\": 5}"}), 400

        with lock:
            hit = game.guess(r, c)
            return jsonify({'hit': hit, **game_state(game)})

    @app.route('/api/ships')
    def ships():
        with lock:
            layout = game.get_ship_grid()
        return jsonify({'ships': [[kind.label if kind else None for kind in row] for row in layout]})

    return app


def run(model, host, port, debug=False):
    app = create_app(model)
    model.start()
    logger.info("Serving Battleship API on http://%s:%d", host, port)
    app.run(host=host, port=port, debug=debug)
