'''Derivation and validation of ranked ballots.

A ballot is a tuple of candidate identifiers ordered from the most preferred
candidate to the least preferred one. Every voter ranks all candidates
by their Euclidean distance from the voter, closest first, so each ballot
is a permutation of ``range(n_candidates)``.

Ballots are plain tuples so they can be produced by other means (e.g. read
from a survey) and fed to the evaluators directly; use
:func:`check_ballots` to make sure they are complete rankings.
'''

import logging
from typing import Any, List, Sequence, Tuple

from spatialvote.space import Candidate, Voter, InvalidInputError, \
    check_candidate_ids, distance

Ballot = Tuple[int, ...]

logger = logging.getLogger(__name__)


class BallotError(InvalidInputError):
    '''A ballot is not a complete ranking of the candidates.

    :param ballot: The ballot found to be invalid.
    :param n_candidates: Number of candidates the ballot should rank.
    '''
    def __init__(self, ballot: Any, n_candidates: int):
        self.ballot = ballot
        self.n_candidates = n_candidates
        super().__init__(
            f'invalid ballot: {ballot!r}, must rank each of'
            f' {n_candidates} candidates exactly once'
        )


def derive_preferences(candidates: Sequence[Candidate],
                       voters: Sequence[Voter],
                       ) -> List[Ballot]:
    '''Produce one ranked ballot per voter from the issue space positions.

    Candidates are ranked by ascending distance from the voter. Candidates
    at exactly the same distance are ranked by ascending identifier.

    :param candidates: Candidates with identifiers 0 to n - 1.
    :param voters: Voters; may be empty.
    :returns: A list of ballots, one per voter, in the order of the voters.
    :raises spatialvote.space.CandidateError: If candidate identifiers are
        not exactly 0 to n - 1.
    '''
    check_candidate_ids(candidates)
    ballots = []
    for voter in voters:
        if not isinstance(voter, Voter):
            raise InvalidInputError(f'invalid voter: {voter!r}')
        ranked = sorted(
            candidates,
            key=lambda cand: (
                distance(voter.x, voter.y, cand.x, cand.y), cand.id
            )
        )
        ballots.append(tuple(cand.id for cand in ranked))
    logger.debug('derived %d ballots over %d candidates',
                 len(ballots), len(candidates))
    return ballots


def check_n_candidates(n_candidates: Any) -> int:
    if isinstance(n_candidates, bool) or not isinstance(n_candidates, int):
        raise BallotError(None, n_candidates)
    if n_candidates < 0:
        raise BallotError(None, n_candidates)
    return n_candidates


def check_ballot(ballot: Sequence[int], n_candidates: int) -> None:
    '''Check that the ballot ranks each candidate exactly once.

    :raises BallotError: If the ballot is not a permutation of
        ``range(n_candidates)``.
    '''
    if isinstance(ballot, (str, bytes)) or not hasattr(ballot, '__len__'):
        raise BallotError(ballot, n_candidates)
    for cand in ballot:
        if isinstance(cand, bool) or not isinstance(cand, int):
            raise BallotError(ballot, n_candidates)
    if sorted(ballot) != list(range(n_candidates)):
        raise BallotError(ballot, n_candidates)


def check_ballots(ballots: Sequence[Sequence[int]], n_candidates: int) -> None:
    '''Check a whole list of ballots, see :func:`check_ballot`.'''
    check_n_candidates(n_candidates)
    for ballot in ballots:
        check_ballot(ballot, n_candidates)
