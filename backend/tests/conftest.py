import os
import sys
import pytest

# Ensure the backend root (containing the `trivia` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from trivia import create_app, db
from trivia.quiz_config import QuizConfig


QUESTIONS = {
    '1': {'label': 'Capitals', 'round': 1, 'allowUserPoints': True, 'defaultPoints': 1,
          'allowChangePoints': True, 'allowedPoints': [1, 2, 3], 'bonusAnswer': False,
          'category': 'Geography', 'icon': 'G'},
    '2': {'label': 'Rivers', 'round': 1, 'allowUserPoints': True, 'defaultPoints': 1,
          'allowChangePoints': True, 'allowedPoints': [1, 2, 3], 'bonusAnswer': True},
    '3': {'label': 'Rivers', 'round': 1, 'allowUserPoints': True, 'defaultPoints': 1,
          'allowChangePoints': True, 'allowedPoints': [1, 2, 3], 'bonusAnswer': False},
    '4': {'label': 'Halftime', 'round': 2, 'allowUserPoints': False, 'defaultPoints': 0,
          'allowChangePoints': False, 'allowedPoints': [], 'bonusAnswer': True},
}

CATEGORIES = {'categories': [{'label': 'Geography', 'icon': 'G'}, {'label': 'History', 'icon': 'H'}]}


class TestConfig:
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    DEFAULT_PASSCODE = '0000'
    CORS_ORIGINS = '*'
    INIT_DB_ON_STARTUP = True
    LOG_LEVEL = 'INFO'


@pytest.fixture()
def quiz_config():
    return QuizConfig(questions=QUESTIONS, categories=CATEGORIES)


@pytest.fixture()
def flask_app(quiz_config):
    application = create_app(TestConfig, quiz_config=quiz_config)
    with application.app_context():
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def cli_runner(flask_app):
    return flask_app.test_cli_runner()


@pytest.fixture()
def team_id(client):
    res = client.post('/join', json={'name': 'Foo', 'code': '0000'})
    return res.get_json()['teamId']
