import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import spatialvote.generate
import spatialvote.system
from spatialvote.ballot import derive_preferences
from spatialvote.space import ElectionSetup

SEEDS = list(range(12))


def random_setup(seed):
    n_candidates = 1 + seed % 6
    candidates = spatialvote.generate.random_candidates(
        n_candidates, random_state=seed
    )
    voters = spatialvote.generate.generate_voters(
        10 + 17 * seed,
        spatialvote.generate.DISTRIBUTIONS[seed % 3],
        candidates=candidates,
    )
    return ElectionSetup(candidates, voters)


@pytest.mark.parametrize('seed', SEEDS)
def test_deterministic(seed):
    setup = random_setup(seed)
    assert spatialvote.system.run_election(setup) == \
        spatialvote.system.run_election(setup)


@pytest.mark.parametrize('seed', SEEDS)
def test_tallies(seed):
    setup = random_setup(seed)
    n_cands, n_voters = setup.n_candidates, setup.n_voters
    ballots = derive_preferences(setup.candidates, setup.voters)
    results = spatialvote.system.evaluate_all(ballots, n_cands)
    plurality = results['plurality']
    assert sum(plurality.votes) == n_voters
    assert plurality.votes[plurality.winner_id] == max(plurality.votes)
    borda = results['borda']
    assert all(0 <= score <= n_voters * (n_cands - 1)
               for score in borda.scores)
    assert sum(borda.scores) == n_voters * n_cands * (n_cands - 1) // 2
    irv = results['irv']
    assert len(irv.rounds) <= n_cands
    assert 0 <= irv.winner_id < n_cands
    for rnd in irv.rounds:
        assert sum(rnd.votes) == n_voters


@pytest.mark.parametrize('seed', SEEDS)
def test_condorcet_winner_wins_majority_pairs(seed):
    setup = random_setup(seed)
    result = spatialvote.system.run_election(setup, ['condorcet'])['condorcet']
    if result.exists:
        for other in range(setup.n_candidates):
            if other != result.winner_id:
                assert result.matrix[result.winner_id][other] \
                    > setup.n_voters / 2


@pytest.mark.parametrize('seed', SEEDS)
def test_majority_winner_agrees(seed):
    setup = random_setup(seed)
    results = spatialvote.system.run_election(setup)
    plurality = results['plurality']
    if plurality.vote_count > setup.n_voters / 2:
        assert results['irv'].winner_id == plurality.winner_id
        assert results['condorcet'].winner_id == plurality.winner_id


def test_symmetric_setup_tie():
    setup = ElectionSetup.from_positions(
        [(0, 0), (10, 0)], [(2, 0), (8, 0), (3, 1), (7, 1)]
    )
    results = spatialvote.system.run_election(setup)
    assert results['plurality'].votes == (2, 2)
    assert results['plurality'].winner_id == 0
    assert results['borda'].winner_id == 0
    assert results['irv'].winner_id == 1
    assert not results['condorcet'].exists
