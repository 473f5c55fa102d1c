from trivia.services.scoring import compute_totals, rank_teams


def test_totals_sum_awarded_points():
    answers = [
        {'team_id': 1, 'awarded_points': 2},
        {'team_id': 1, 'awarded_points': 0.5},
        {'team_id': 2, 'awarded_points': None},
        {'team_id': 2},
        {'team_id': 3, 'awarded_points': -1},
    ]
    assert compute_totals(answers) == {1: 2.5, 2: 0, 3: -1}


def test_totals_empty():
    assert compute_totals([]) == {}


def test_rank_ties_share_rank_and_leave_gap():
    teams = [{'id': 3, 'name': 'C'}, {'id': 2, 'name': 'B'}, {'id': 1, 'name': 'A'}]
    ranked = rank_teams(teams, {1: 10, 2: 10, 3: 8})
    assert [(e['name'], e['rank']) for e in ranked] == [('A', 1), ('B', 1), ('C', 3)]


def test_rank_teams_without_answers_score_zero():
    teams = [{'id': 1, 'name': 'Quiet'}, {'id': 2, 'name': 'Loud'}]
    ranked = rank_teams(teams, {2: 1})
    assert ranked == [
        {'id': 2, 'name': 'Loud', 'total': 1, 'rank': 1},
        {'id': 1, 'name': 'Quiet', 'total': 0, 'rank': 2},
    ]


def test_rank_all_tied():
    teams = [{'id': i, 'name': n} for i, n in enumerate(['d', 'b', 'c', 'a'], start=1)]
    ranked = rank_teams(teams, {})
    assert [e['name'] for e in ranked] == ['a', 'b', 'c', 'd']
    assert {e['rank'] for e in ranked} == {1}


def test_rank_gap_after_middle_tie():
    teams = [{'id': 1, 'name': 'A'}, {'id': 2, 'name': 'B'}, {'id': 3, 'name': 'C'}, {'id': 4, 'name': 'D'}]
    ranked = rank_teams(teams, {1: 9, 2: 5, 3: 5, 4: 1})
    assert [e['rank'] for e in ranked] == [1, 2, 2, 4]
