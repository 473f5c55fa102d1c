import os

from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()

MIGRATIONS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'migrations')


def _cors_origins(value):
    if not value or value == '*':
        return '*'
    return [o.strip() for o in value.split(',') if o.strip()]


def create_app(config_class=Config, quiz_config=None):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(flask_app)
    migrate.init_app(flask_app, db, directory=MIGRATIONS_DIR)
    CORS(flask_app, origins=_cors_origins(flask_app.config.get('CORS_ORIGINS')))

    # Question definitions are loaded once here and handed to the views
    from trivia.quiz_config import QuizConfig
    if quiz_config is None:
        quiz_config = QuizConfig.from_app_config(flask_app.config, logger=flask_app.logger)
    flask_app.extensions['quiz_config'] = quiz_config

    from trivia.errors import TriviaError

    @flask_app.errorhandler(TriviaError)
    def handle_trivia_error(exc):
        return jsonify(exc.to_dict()), exc.status_code

    from trivia.main import main
    flask_app.register_blueprint(main)

    from trivia.api.games import games
    flask_app.register_blueprint(games)

    from trivia.api.answers import answers
    flask_app.register_blueprint(answers)

    from trivia.api.questions import questions
    flask_app.register_blueprint(questions)

    if flask_app.config.get('INIT_DB_ON_STARTUP', True):
        # Failures here are fatal: the app is not built without a usable store
        from trivia.schema import init_schema
        from trivia.services.session import ensure_current_game
        with flask_app.app_context():
            init_schema()
            ensure_current_game(flask_app.config.get('DEFAULT_PASSCODE', '0000'))

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        from trivia.services.session import ensure_current_game
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            game = ensure_current_game(flask_app.config.get('DEFAULT_PASSCODE', '0000'))
            click.echo(f'Database has been reset! Current game {game.id} passcode {game.passcode}')

    @click.command('reset-game')
    @click.option('--passcode', default=None, help='4-digit passcode for the new game (random if omitted).')
    def reset_game_command(passcode):
        """Clears the current game's teams and answers and starts a new game."""
        from trivia.errors import ValidationError
        from trivia.models import generate_passcode
        from trivia.services.session import reset_game
        with flask_app.app_context():
            try:
                game = reset_game(passcode or generate_passcode())
            except ValidationError as exc:
                raise click.BadParameter(exc.message, param_hint='--passcode')
            click.echo(f'New game {game.id} passcode {game.passcode}')

    flask_app.cli.add_command(db_reset_command)
    flask_app.cli.add_command(reset_game_command)

    return flask_app
