from typing import Optional

from flask import current_app

from trivia import db
from trivia.errors import AuthError, ValidationError
from trivia.models import Answer, Game, QuestionCategory, Team


PASSCODE_LENGTH = 4


def get_current_game() -> Optional[Game]:
    """Return the most recently created game, or None if there is none."""
    return Game.query.order_by(Game.created_at.desc(), Game.id.desc()).first()


def ensure_current_game(default_passcode: str) -> Game:
    game = get_current_game()
    if game:
        return game
    game = Game(passcode=default_passcode)
    db.session.add(game)
    db.session.commit()
    current_app.logger.info(f"[init] created game={game.id} with default passcode")
    return game


def join_game(name, code) -> Team:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError('Team name is required')
    game = get_current_game()
    if not game or not isinstance(code, str) or code != game.passcode:
        current_app.logger.info(f"[join-denied] game={game.id if game else None}")
        raise AuthError('Invalid passcode')

    team = Team(game_id=game.id, name=name.strip(), game_code=code)
    db.session.add(team)
    db.session.commit()
    current_app.logger.info(f"[join] game={game.id} team={team.id} name={team.name!r}")
    return team


def get_team_in_current_game(team_id) -> Optional[Team]:
    game = get_current_game()
    if not game:
        return None
    if isinstance(team_id, bool):
        return None
    try:
        number = int(team_id)
    except (TypeError, ValueError):
        return None
    if isinstance(team_id, float) and team_id != number:
        return None
    return Team.query.filter_by(id=number, game_id=game.id).first()


def reset_game(passcode) -> Game:
    """Wipe the current game's teams, answers and category overrides, then start a new game.

    The whole sequence runs in one transaction. The old game row is kept;
    the new one becomes current because it is the latest.
    """
    if not isinstance(passcode, str) or len(passcode) != PASSCODE_LENGTH:
        raise ValidationError('Passcode must be 4 digits')

    try:
        old_game = get_current_game()
        if old_game:
            team_ids = db.select(Team.id).where(Team.game_id == old_game.id)
            Answer.query.filter(Answer.team_id.in_(team_ids)).delete(synchronize_session=False)
            Team.query.filter_by(game_id=old_game.id).delete(synchronize_session=False)
        QuestionCategory.query.delete(synchronize_session=False)
        new_game = Game(passcode=passcode)
        db.session.add(new_game)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    current_app.logger.info(f"[reset] old_game={old_game.id if old_game else None} new_game={new_game.id}")
    return new_game
