from flask import Blueprint, jsonify

from trivia.api import get_json_body
from trivia.models import Team
from trivia.services.answers import answers_for_game
from trivia.services.scoring import leaderboard
from trivia.services.session import get_current_game, join_game, reset_game


games = Blueprint('games', __name__)


@games.route('/current-game', methods=['GET'])
def current_game():
    game = get_current_game()
    return jsonify(game.to_dict() if game else None)


@games.route('/join', methods=['POST'])
def join():
    data = get_json_body()
    team = join_game(data.get('name'), data.get('code'))
    return jsonify({'teamId': team.id, 'gameId': team.game_id})


@games.route('/teams', methods=['GET'])
def list_teams():
    game = get_current_game()
    if not game:
        return jsonify([])
    teams = Team.query.filter_by(game_id=game.id).order_by(Team.id).all()
    return jsonify([t.to_dict() for t in teams])


@games.route('/reset', methods=['POST'])
def reset():
    data = get_json_body()
    game = reset_game(data.get('passcode'))
    return jsonify({'ok': True, 'gameId': game.id, 'passcode': game.passcode})


@games.route('/all-answers', methods=['GET'])
def all_answers():
    game = get_current_game()
    if not game:
        return jsonify({'teams': [], 'answers': []})
    teams = Team.query.filter_by(game_id=game.id).order_by(Team.id).all()
    return jsonify({
        'teams': [{'id': t.id, 'name': t.name} for t in teams],
        'answers': answers_for_game(game),
    })


@games.route('/leaderboard', methods=['GET'])
def get_leaderboard():
    return jsonify(leaderboard(get_current_game()))
