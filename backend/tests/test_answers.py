import pytest

from trivia.errors import ConflictError, ValidationError
from trivia.models import Answer
from trivia.services.answers import (
    HostAward,
    TeamSubmission,
    award_points,
    request_from_legacy_payload,
    submit_team_answer,
)
from trivia.services.session import join_game


@pytest.fixture()
def team(flask_app):
    return join_game('Foo', '0000')


def test_second_submission_updates_same_row(team, quiz_config):
    submit_team_answer(team.id, 1, TeamSubmission(answer='Paris', chosen_points=2), quiz_config)
    submit_team_answer(team.id, 1, TeamSubmission(answer='Lyon', chosen_points=2), quiz_config)
    rows = Answer.query.filter_by(team_id=team.id, question_number=1).all()
    assert len(rows) == 1
    assert rows[0].answer == 'Lyon'


def test_team_submission_is_full_overwrite(team, quiz_config):
    submit_team_answer(team.id, 2, TeamSubmission(answer='Nile', bonus_answer='Egypt', chosen_points=3), quiz_config)
    row = submit_team_answer(team.id, 2, TeamSubmission(bonus_answer='Sudan'), quiz_config)
    assert row.answer is None
    assert row.bonus_answer == 'Sudan'
    assert row.chosen_points == 0


def test_team_submission_keeps_awarded_points(team, quiz_config):
    submit_team_answer(team.id, 1, TeamSubmission(answer='Paris', chosen_points=2), quiz_config)
    award_points(team.id, 1, HostAward(awarded_points=1.5))
    row = submit_team_answer(team.id, 1, TeamSubmission(answer='Paris!', chosen_points=2), quiz_config)
    assert row.awarded_points == 1.5


def test_empty_resubmission_conflicts(team, quiz_config):
    submit_team_answer(team.id, 1, TeamSubmission(answer='Paris', chosen_points=1), quiz_config)
    with pytest.raises(ConflictError):
        submit_team_answer(team.id, 1, TeamSubmission(), quiz_config)


def test_empty_first_submission_inserts_blank_row(team, quiz_config):
    row = submit_team_answer(team.id, 4, TeamSubmission(), quiz_config)
    assert row.answer is None
    assert row.bonus_answer is None
    assert row.chosen_points == 0
    assert row.awarded_points == 0


def test_award_without_answer_inserts_row(team):
    row = award_points(team.id, 3, HostAward(awarded_points=-1))
    assert row.answer is None
    assert row.chosen_points == 0
    assert row.awarded_points == -1


def test_chosen_points_must_be_allowed(team, quiz_config):
    with pytest.raises(ValidationError):
        submit_team_answer(team.id, 1, TeamSubmission(answer='Paris', chosen_points=5), quiz_config)
    assert Answer.query.count() == 0


def test_chosen_points_unrestricted_without_allowed_list(team, quiz_config):
    row = submit_team_answer(team.id, 4, TeamSubmission(answer='Anything', chosen_points=7), quiz_config)
    assert row.chosen_points == 7
    # Unconfigured questions fall back to the permissive defaults
    row = submit_team_answer(team.id, 99, TeamSubmission(answer='Anything', chosen_points=7), quiz_config)
    assert row.chosen_points == 7


def test_point_value_used_once_per_round(team, quiz_config):
    submit_team_answer(team.id, 1, TeamSubmission(answer='Paris', chosen_points=3), quiz_config)
    with pytest.raises(ValidationError) as excinfo:
        submit_team_answer(team.id, 2, TeamSubmission(answer='Nile', chosen_points=3), quiz_config)
    assert 'round 1' in excinfo.value.message
    submit_team_answer(team.id, 2, TeamSubmission(answer='Nile', chosen_points=2), quiz_config)


def test_round_limit_is_per_team(flask_app, quiz_config):
    foo = join_game('Foo', '0000')
    bar = join_game('Bar', '0000')
    submit_team_answer(foo.id, 1, TeamSubmission(answer='Paris', chosen_points=3), quiz_config)
    row = submit_team_answer(bar.id, 2, TeamSubmission(answer='Nile', chosen_points=3), quiz_config)
    assert row.chosen_points == 3


def test_legacy_payload_dispatch():
    assert isinstance(request_from_legacy_payload({'awardedPoints': 1}), HostAward)
    submission = request_from_legacy_payload({'answer': 'Paris', 'points': 2})
    assert isinstance(submission, TeamSubmission)
    assert submission.chosen_points == 2
    # chosenPoints wins over the legacy alias
    assert request_from_legacy_payload({'chosenPoints': 1, 'points': 3}).chosen_points == 1
    with pytest.raises(ValidationError):
        request_from_legacy_payload({'bonusAnswer': 'x', 'awardedPoints': 1})


def test_points_must_be_numbers():
    with pytest.raises(ValidationError):
        request_from_legacy_payload({'chosenPoints': 'lots'})
    with pytest.raises(ValidationError):
        request_from_legacy_payload({'awardedPoints': True})


def test_blank_fields_count_as_present():
    submission = request_from_legacy_payload({'bonusAnswer': ''})
    assert submission.bonus_answer is None
    assert not submission.is_empty
    assert request_from_legacy_payload({}).is_empty


def test_overwrite_without_wager_stores_zero(team, quiz_config):
    submit_team_answer(team.id, 1, TeamSubmission(answer='Paris', chosen_points=2), quiz_config)
    # No wager is exempt from allowedPoints even though 0 is not listed
    row = submit_team_answer(team.id, 1, TeamSubmission(answer='Lyon'), quiz_config)
    assert row.chosen_points == 0
    with pytest.raises(ValidationError):
        submit_team_answer(team.id, 1, TeamSubmission(answer='Lyon', chosen_points=0), quiz_config)
