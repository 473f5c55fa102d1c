from flask import Blueprint, jsonify

from trivia.api import get_json_body, get_quiz_config
from trivia.services.answers import parse_question_number
from trivia.services.questions import question_details, set_question_category


questions = Blueprint('questions', __name__)


@questions.route('/question-config/<number>', methods=['GET'])
def question_config(number):
    number = parse_question_number(number)
    return jsonify(question_details(number, get_quiz_config()))


@questions.route('/config', methods=['GET'])
def public_config():
    return jsonify({'maxQuestions': get_quiz_config().max_questions})


@questions.route('/categories', methods=['GET'])
def categories():
    return jsonify({'categories': get_quiz_config().categories})


@questions.route('/question-category', methods=['POST'])
def save_question_category():
    data = get_json_body()
    number = parse_question_number(data.get('questionNumber'))
    set_question_category(number, data.get('category'), data.get('icon'))
    return jsonify({'ok': True})
