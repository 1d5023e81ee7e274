import sys
import os
import random

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import spatialvote.ballot
from spatialvote.ballot import BallotError, derive_preferences
from spatialvote.space import Candidate, Voter, CandidateError, \
    candidates_from_positions, voters_from_positions

CANDIDATES = candidates_from_positions([(0, 0), (10, 0), (0, 10)])


def test_rank_by_distance():
    voters = voters_from_positions([(1, 0), (9, 1), (1, 8), (6, 4), (7, 8)])
    ballots = derive_preferences(CANDIDATES, voters)
    assert ballots == [
        (0, 1, 2),
        (1, 0, 2),
        (2, 0, 1),
        (1, 0, 2),
        (2, 1, 0),
    ]


def test_tie_behind_nearest():
    # equally far from candidates 0 and 2
    ballots = derive_preferences(CANDIDATES, [Voter(6, 5)])
    assert ballots == [(1, 0, 2)]


def test_coincident_voter():
    ballots = derive_preferences(CANDIDATES, [Voter(10, 0)])
    assert ballots[0][0] == 1


def test_equal_distance_lower_id_first():
    cands = [Candidate(1, 5, 0), Candidate(0, -5, 0), Candidate(2, 0, 50)]
    assert derive_preferences(cands, [Voter(0, 0)]) == [(0, 1, 2)]


def test_coincident_candidates():
    cands = candidates_from_positions([(3, 3), (3, 3)])
    assert derive_preferences(cands, [Voter(0, 0), Voter(3, 3)]) == [
        (0, 1), (0, 1)
    ]


def test_independent_of_storage_order():
    voters = voters_from_positions([(1, 0), (9, 1), (1, 8), (6, 5)])
    reordered = list(reversed(CANDIDATES))
    assert derive_preferences(reordered, voters) == \
        derive_preferences(CANDIDATES, voters)


def test_no_voters():
    assert derive_preferences(CANDIDATES, []) == []


def test_no_candidates():
    assert derive_preferences([], [Voter(0, 0), Voter(1, 1)]) == [(), ()]


def test_invalid_candidate_ids():
    cands = [Candidate(0, 0, 0), Candidate(2, 1, 1)]
    with pytest.raises(CandidateError):
        derive_preferences(cands, [Voter(0, 0)])


@pytest.mark.parametrize('seed', range(5))
def test_permutation(seed):
    rng = random.Random(seed)
    n_cands = rng.randint(1, 8)
    cands = candidates_from_positions(
        (rng.uniform(-100, 100), rng.uniform(-100, 100))
        for i in range(n_cands)
    )
    voters = voters_from_positions(
        (rng.gauss(0, 50), rng.gauss(0, 50)) for i in range(50)
    )
    ballots = derive_preferences(cands, voters)
    assert len(ballots) == len(voters)
    for ballot in ballots:
        assert sorted(ballot) == list(range(n_cands))
    spatialvote.ballot.check_ballots(ballots, n_cands)


def test_check_ballots():
    spatialvote.ballot.check_ballots([(1, 0, 2), (2, 1, 0)], 3)
    spatialvote.ballot.check_ballots([], 0)
    with pytest.raises(BallotError):
        spatialvote.ballot.check_ballots([(1, 0, 2), (2, 1)], 3)


def test_ballot_error_message():
    with pytest.raises(BallotError, match='must rank each of 2 candidates'):
        spatialvote.ballot.check_ballot((0, 0), 2)
