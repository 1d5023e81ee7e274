import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import spatialvote.evaluate
from spatialvote.ballot import BallotError

VOTES = {
    'unanimous': ([(0, 1)] * 3, 2),
    'cycle': ([(0, 1, 2)] * 2 + [(1, 2, 0)] * 2 + [(2, 0, 1)], 3),
    'center_squeeze': (
        [(0, 2, 1)] * 4 + [(1, 2, 0)] * 3 + [(2, 1, 0)] * 2, 3
    ),
    'tennessee': (
        [(0, 1, 2, 3)] * 42 + [(1, 2, 3, 0)] * 26
        + [(2, 3, 1, 0)] * 15 + [(3, 2, 1, 0)] * 17,
        4
    ),
    'pairwise_tie': ([(0, 1), (1, 0)], 2),
    'tie_behind_winner': ([(0, 1, 2), (0, 2, 1)], 3),
}

CONDORCET_WINNERS = {
    'unanimous': 0,
    'cycle': None,
    'center_squeeze': 2,
    'tennessee': 1,
    'pairwise_tie': None,
    'tie_behind_winner': 0,
}

MATRICES = {
    'unanimous': ((0, 3), (0, 0)),
    'cycle': ((0, 3, 2), (2, 0, 4), (3, 1, 0)),
    'pairwise_tie': ((0, 1), (1, 0)),
}


@pytest.mark.parametrize('vote_set_name', list(VOTES.keys()))
def test_condorcet_winner(vote_set_name):
    ballots, n_candidates = VOTES[vote_set_name]
    result = spatialvote.evaluate.tabulate_condorcet(ballots, n_candidates)
    expected = CONDORCET_WINNERS[vote_set_name]
    assert result.winner_id == expected
    assert result.exists == (expected is not None)
    if expected is None:
        assert result.winner is None
    else:
        assert result.winner == f'Candidate {expected + 1}'


@pytest.mark.parametrize('vote_set_name', list(MATRICES.keys()))
def test_matrix(vote_set_name):
    ballots, n_candidates = VOTES[vote_set_name]
    result = spatialvote.evaluate.tabulate_condorcet(ballots, n_candidates)
    assert result.matrix == MATRICES[vote_set_name]


@pytest.mark.parametrize('vote_set_name', list(VOTES.keys()))
def test_exclusivity(vote_set_name):
    ballots, n_candidates = VOTES[vote_set_name]
    matrix = spatialvote.evaluate.tabulate_condorcet(
        ballots, n_candidates
    ).matrix
    dominant = [
        cand for cand in range(n_candidates)
        if all(
            matrix[cand][other] > matrix[other][cand]
            for other in range(n_candidates) if other != cand
        )
    ]
    assert len(dominant) <= 1


@pytest.mark.parametrize('vote_set_name', list(VOTES.keys()))
def test_matrix_pair_totals(vote_set_name):
    ballots, n_candidates = VOTES[vote_set_name]
    matrix = spatialvote.evaluate.tabulate_condorcet(
        ballots, n_candidates
    ).matrix
    for cand in range(n_candidates):
        assert matrix[cand][cand] == 0
        for other in range(cand + 1, n_candidates):
            assert matrix[cand][other] + matrix[other][cand] == len(ballots)


def test_no_ballots():
    result = spatialvote.evaluate.tabulate_condorcet([], 3)
    assert result is not None
    assert not result.exists
    assert result.matrix == ((0, 0, 0),) * 3


def test_no_ballots_single_candidate():
    assert not spatialvote.evaluate.tabulate_condorcet([], 1).exists


def test_single_candidate():
    result = spatialvote.evaluate.tabulate_condorcet([(0,)], 1)
    assert result.exists
    assert result.winner_id == 0


def test_no_candidates():
    result = spatialvote.evaluate.tabulate_condorcet([(), ()], 0)
    assert not result.exists
    assert result.matrix == ()


def test_invalid():
    with pytest.raises(BallotError):
        spatialvote.evaluate.CondorcetWinner().evaluate([(0, 1), (1,)], 2)
