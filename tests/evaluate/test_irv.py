import sys
import os
import logging

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import spatialvote.evaluate
from spatialvote.evaluate import IRVRound
from spatialvote.ballot import BallotError

DEFAULT_IRV = spatialvote.evaluate.InstantRunoff()


def test_unanimous_first_round():
    result = DEFAULT_IRV.evaluate([(0, 1)] * 3, 2)
    assert result.winner_id == 0
    assert result.winner == 'Candidate 1'
    assert result.vote_count == 3
    assert result.rounds == (IRVRound(votes=(3, 0), remaining=(0, 1)),)


def test_condorcet_cycle():
    ballots = [(0, 1, 2)] * 2 + [(1, 2, 0)] * 2 + [(2, 0, 1)]
    result = DEFAULT_IRV.evaluate(ballots, 3)
    assert result.winner_id == 0
    assert result.vote_count == 3
    assert result.rounds == (
        IRVRound(votes=(2, 2, 1), remaining=(0, 1, 2), eliminated=2),
        IRVRound(votes=(3, 2, 0), remaining=(0, 1)),
    )


def test_transfer_overturns_plurality():
    ballots = [(0, 2, 1)] * 4 + [(1, 2, 0)] * 3 + [(2, 1, 0)] * 2
    result = DEFAULT_IRV.evaluate(ballots, 3)
    assert result.winner_id == 1
    assert result.vote_count == 5
    assert [rnd.eliminated for rnd in result.rounds] == [2, None]
    assert result.rounds[1].votes == (4, 5, 0)


def test_exact_half_is_not_majority():
    ballots = [(0, 1), (1, 0)]
    result = DEFAULT_IRV.evaluate(ballots, 2)
    # neither has more than one vote; the first of the tied is eliminated
    assert result.winner_id == 1
    assert result.vote_count is None
    assert result.rounds == (
        IRVRound(votes=(1, 1), remaining=(0, 1), eliminated=0),
    )


def test_last_remaining_wins_without_majority():
    ballots = [(0, 1, 2), (1, 0, 2), (2, 1, 0), (2, 0, 1)]
    result = DEFAULT_IRV.evaluate(ballots, 3)
    assert result.winner_id == 2
    assert result.vote_count is None
    assert result.rounds == (
        IRVRound(votes=(1, 1, 2), remaining=(0, 1, 2), eliminated=0),
        IRVRound(votes=(0, 2, 2), remaining=(1, 2), eliminated=1),
    )


def test_single_candidate():
    result = DEFAULT_IRV.evaluate([(0,), (0,)], 1)
    assert result.winner_id == 0
    assert result.rounds == ()
    assert result.vote_count is None


def test_no_ballots():
    assert spatialvote.evaluate.tabulate_irv([], 4) is None


def test_no_candidates():
    assert spatialvote.evaluate.tabulate_irv([()], 0) is None


def test_eliminated_candidates_get_no_votes():
    ballots = [(3, 2, 1, 0)] * 3 + [(0, 1, 2, 3)] * 2 + [(1, 0, 2, 3)] * 2 \
        + [(2, 0, 1, 3)] * 1
    result = DEFAULT_IRV.evaluate(ballots, 4)
    for rnd in result.rounds:
        for cand, n_votes in enumerate(rnd.votes):
            if cand not in rnd.remaining:
                assert n_votes == 0
        assert sum(rnd.votes) == len(ballots)


def test_round_bound():
    ballots = [
        (0, 1, 2, 3, 4), (1, 2, 3, 4, 0), (2, 3, 4, 0, 1),
        (3, 4, 0, 1, 2), (4, 0, 1, 2, 3), (4, 3, 2, 1, 0),
    ]
    result = DEFAULT_IRV.evaluate(ballots, 5)
    assert len(result.rounds) <= 5
    assert 0 <= result.winner_id < 5


def test_logs_rounds(caplog):
    with caplog.at_level(logging.INFO, logger='spatialvote.evaluate.sequential'):
        DEFAULT_IRV.evaluate([(0, 1, 2), (1, 0, 2), (2, 1, 0)], 3)
    assert 'eliminating candidate' in caplog.text


def test_invalid():
    with pytest.raises(BallotError):
        DEFAULT_IRV.evaluate([(0, 1, 1)], 3)
