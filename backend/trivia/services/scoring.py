from collections import defaultdict
from typing import Dict, Iterable, List

from trivia.models import Answer, Team


def _field(row, name):
    if isinstance(row, dict):
        return row.get(name)
    return getattr(row, name, None)


def compute_totals(answers: Iterable) -> Dict[int, float]:
    """Sum awarded points per team.

    Accepts Answer rows or dicts with ``team_id`` and ``awarded_points``;
    missing points count as zero.
    """
    totals: Dict[int, float] = defaultdict(float)
    for row in answers:
        team_id = _field(row, 'team_id')
        if team_id is None:
            continue
        totals[team_id] += _field(row, 'awarded_points') or 0
    return dict(totals)


def rank_teams(teams: Iterable, totals: Dict[int, float]) -> List[dict]:
    """Order teams by total (desc) then name, with competition ranking.

    Tied totals share a rank and the next total takes its 1-based position,
    so [10, 10, 8] ranks as [1, 1, 3].
    """
    entries = []
    for team in teams:
        team_id = _field(team, 'id')
        entries.append({
            'id': team_id,
            'name': _field(team, 'name') or '',
            'total': totals.get(team_id, 0),
        })
    entries.sort(key=lambda e: (-e['total'], e['name']))

    previous_total = None
    rank = 0
    for position, entry in enumerate(entries, start=1):
        if entry['total'] != previous_total:
            rank = position
            previous_total = entry['total']
        entry['rank'] = rank
    return entries


def leaderboard(game) -> List[dict]:
    if not game:
        return []
    teams = Team.query.filter_by(game_id=game.id).all()
    answers = Answer.query.join(Team, Team.id == Answer.team_id).filter(Team.game_id == game.id).all()
    return rank_teams(teams, compute_totals(answers))
