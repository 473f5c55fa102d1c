from flask import Blueprint, jsonify

from trivia.api import get_json_body, get_quiz_config
from trivia.services.answers import (
    answers_for_question,
    award_from_payload,
    award_points,
    parse_question_number,
    request_from_legacy_payload,
    submission_from_payload,
    submit,
    submit_team_answer,
)
from trivia.services.session import get_current_game


answers = Blueprint('answers', __name__)


@answers.route('/answer', methods=['POST'])
def submit_answer():
    """Combined endpoint kept for older clients: team answer or host award."""
    data = get_json_body()
    req = request_from_legacy_payload(data)
    submit(data.get('teamId'), data.get('question'), req, get_quiz_config())
    return jsonify({'ok': True})


@answers.route('/answers/submit', methods=['POST'])
def submit_team():
    data = get_json_body()
    submit_team_answer(data.get('teamId'), data.get('question'), submission_from_payload(data), get_quiz_config())
    return jsonify({'ok': True})


@answers.route('/answers/award', methods=['POST'])
def award():
    data = get_json_body()
    award_points(data.get('teamId'), data.get('question'), award_from_payload(data))
    return jsonify({'ok': True})


@answers.route('/answers/<question>', methods=['GET'])
def list_answers(question):
    number = parse_question_number(question)
    return jsonify(answers_for_question(get_current_game(), number))
