"""Answer submission: one row per (team, question), written by two actors.

Teams own ``answer``, ``bonus_answer`` and ``chosen_points``; the host owns
``awarded_points``. The two are separate request types with separate
operations, so neither write can clobber the other's fields.
"""

import math
from dataclasses import dataclass
from typing import Optional, Union

from flask import current_app

from trivia import db
from trivia.errors import ConflictError, ValidationError
from trivia.models import Answer, Team
from trivia.quiz_config import QuizConfig
from trivia.services.session import get_team_in_current_game


TEAM_FIELDS = ('answer', 'bonusAnswer', 'chosenPoints', 'points')


@dataclass
class TeamSubmission:
    answer: Optional[str] = None
    bonus_answer: Optional[str] = None
    chosen_points: Optional[float] = None
    # Set when the request named any team field, even with a blank value
    fields_present: bool = False

    @property
    def is_empty(self) -> bool:
        if self.fields_present:
            return False
        return self.answer is None and self.bonus_answer is None and self.chosen_points is None


@dataclass
class HostAward:
    awarded_points: float


def parse_question_number(value) -> int:
    if isinstance(value, bool):
        raise ValidationError('Invalid question number')
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError('Invalid question number')
    if isinstance(value, float) and value != number:
        raise ValidationError('Invalid question number')
    if number < 1:
        raise ValidationError('Invalid question number')
    return number


def parse_points(value, field) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError(f'{field} must be a number')
    try:
        points = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f'{field} must be a number')
    if math.isnan(points) or math.isinf(points):
        raise ValidationError(f'{field} must be a number')
    return points


def _parse_text(value, field) -> Optional[str]:
    # Empty strings are stored as null
    if value is None or value == '':
        return None
    if not isinstance(value, str):
        raise ValidationError(f'{field} must be a string')
    return value


def submission_from_payload(data) -> TeamSubmission:
    chosen = data.get('chosenPoints')
    if chosen is None:
        # Older clients send the wager as "points"
        chosen = data.get('points')
    return TeamSubmission(
        answer=_parse_text(data.get('answer'), 'answer'),
        bonus_answer=_parse_text(data.get('bonusAnswer'), 'bonusAnswer'),
        chosen_points=parse_points(chosen, 'chosenPoints'),
        fields_present=any(field in data for field in TEAM_FIELDS),
    )


def award_from_payload(data) -> HostAward:
    points = parse_points(data.get('awardedPoints'), 'awardedPoints')
    if points is None:
        raise ValidationError('awardedPoints is required')
    if not (points * 2).is_integer():
        raise ValidationError('awardedPoints must be a multiple of 0.5')
    return HostAward(awarded_points=points)


def request_from_legacy_payload(data) -> Union[TeamSubmission, HostAward]:
    """Interpret the combined ``POST /answer`` payload.

    A payload carrying only ``awardedPoints`` is a host award; anything else
    is a team submission. Mixing the two is rejected.
    """
    if data.get('awardedPoints') is None:
        return submission_from_payload(data)
    if any(data.get(field) is not None for field in TEAM_FIELDS):
        raise ValidationError('Send team answer fields and awardedPoints in separate requests')
    return award_from_payload(data)


def _require_team(team_id) -> Team:
    team = get_team_in_current_game(team_id)
    if not team:
        raise ValidationError('Unknown team for the current game')
    return team


def _find_answer(team_id: int, question: int) -> Optional[Answer]:
    return Answer.query.filter_by(team_id=team_id, question_number=question).first()


def _check_chosen_points(team: Team, question: int, chosen: float, quiz_config: QuizConfig) -> None:
    allowed = quiz_config.allowed_points(question)
    if not allowed:
        return
    if chosen not in allowed:
        raise ValidationError(f'{chosen:g} points is not allowed for question {question}')
    round_number = quiz_config.round_of(question)
    if round_number is None:
        return
    # Each point value can be wagered once per round
    others = [q for q in quiz_config.questions_in_round(round_number) if q != question]
    if not others:
        return
    clash = Answer.query.filter(
        Answer.team_id == team.id,
        Answer.question_number.in_(others),
        Answer.chosen_points == chosen,
    ).first()
    if clash:
        raise ValidationError(
            f'{chosen:g} points already used in round {round_number:g} (question {clash.question_number})'
        )


def _commit():
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise


def submit_team_answer(team_id, question, submission: TeamSubmission, quiz_config: QuizConfig) -> Answer:
    team = _require_team(team_id)
    question = parse_question_number(question)
    existing = _find_answer(team.id, question)

    if existing and submission.is_empty:
        raise ConflictError('Answer already submitted')
    # A submission without a wager stores 0, meaning "no wager"; only
    # explicit wagers are held to allowedPoints and the per-round rule
    if submission.chosen_points is not None:
        _check_chosen_points(team, question, submission.chosen_points, quiz_config)

    if existing:
        # Full overwrite of the team-owned fields; awarded_points is untouched
        existing.answer = submission.answer
        existing.bonus_answer = submission.bonus_answer
        existing.chosen_points = submission.chosen_points or 0
        row = existing
    else:
        row = Answer(
            team_id=team.id,
            question_number=question,
            answer=submission.answer,
            bonus_answer=submission.bonus_answer,
            chosen_points=submission.chosen_points or 0,
            awarded_points=0,
        )
        db.session.add(row)
    _commit()
    current_app.logger.info(
        f"[answer] team={team.id} question={question} chosen={row.chosen_points} {'update' if existing else 'new'}"
    )
    return row


def award_points(team_id, question, award: HostAward) -> Answer:
    team = _require_team(team_id)
    question = parse_question_number(question)
    row = _find_answer(team.id, question)
    if row:
        row.awarded_points = award.awarded_points
    else:
        # Host scored a team that never answered
        row = Answer(
            team_id=team.id,
            question_number=question,
            chosen_points=0,
            awarded_points=award.awarded_points,
        )
        db.session.add(row)
    _commit()
    current_app.logger.info(f"[award] team={team.id} question={question} points={award.awarded_points}")
    return row


def submit(team_id, question, request, quiz_config: QuizConfig) -> Answer:
    if isinstance(request, HostAward):
        return award_points(team_id, question, request)
    return submit_team_answer(team_id, question, request, quiz_config)


def answers_for_question(game, question: int):
    if not game:
        return []
    rows = (
        db.session.query(Answer, Team.name)
        .join(Team, Team.id == Answer.team_id)
        .filter(Answer.question_number == question, Team.game_id == game.id)
        .order_by(Answer.id)
        .all()
    )
    result = []
    for answer, name in rows:
        item = answer.to_dict()
        item['name'] = name
        result.append(item)
    return result


def answers_for_game(game):
    if not game:
        return []
    rows = (
        db.session.query(Answer, Team.name)
        .join(Team, Team.id == Answer.team_id)
        .filter(Team.game_id == game.id)
        .order_by(Answer.team_id, Answer.question_number)
        .all()
    )
    return [
        {
            'team_id': answer.team_id,
            'team_name': name,
            'question_number': answer.question_number,
            'answer': answer.answer,
            'bonus_answer': answer.bonus_answer,
            'chosen_points': answer.chosen_points,
            'awarded_points': answer.awarded_points,
        }
        for answer, name in rows
    ]
