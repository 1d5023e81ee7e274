'''Evaluators that operate sequentially on ranked ballots.

This hosts the instant-runoff voting evaluator (:class:`InstantRunoff`),
the single-winner variant of the transferable vote, which proceeds in rounds
of tallying and eliminating until a candidate gains a majority.
'''

from __future__ import annotations

import dataclasses
import logging
from typing import List, Optional, Sequence, Tuple

import spatialvote.convert
from spatialvote.ballot import Ballot, check_ballots
from spatialvote.evaluate.core import Evaluator, ElectionResult, \
    first_best, first_worst
from spatialvote.persist import simple_serialization

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class IRVRound:
    '''A snapshot of a single instant-runoff round.

    :param votes: Votes of all candidates in the round, indexed by candidate
        (eliminated candidates have zero).
    :param remaining: Candidates still in the running when the round was
        tallied, in ascending order.
    :param eliminated: The candidate eliminated at the end of the round, or
        None if the round produced a majority winner.
    '''
    votes: Tuple[int, ...]
    remaining: Tuple[int, ...]
    eliminated: Optional[int] = None


@dataclasses.dataclass(frozen=True)
class IRVResult(ElectionResult):
    '''Result of an instant-runoff election.

    :param rounds: Snapshots of all rounds that were tallied.
    :param vote_count: Votes of the winner in the deciding round if it won
        by majority, None if it won by being the last one remaining.
    '''
    rounds: Tuple[IRVRound, ...]
    vote_count: Optional[int] = None


@simple_serialization
class InstantRunoff(Evaluator):
    '''Instant-runoff voting (IRV) evaluator.

    In every round, each ballot counts for its highest ranked candidate that
    has not been eliminated yet. If the leading candidate has more than half
    of all ballots, they win; otherwise, the candidate with the fewest votes
    is eliminated and the ballots are tallied again. When only one
    candidate remains, they win even without a majority.

    Ties are resolved by the candidate identifiers: the lowest identifier
    leads among candidates with equal votes, and the lowest identifier is
    eliminated among candidates with equally few votes.
    '''
    FIRST_PREFERENCE = spatialvote.convert.RankedToFirstPreference()

    def evaluate(self,
                 ballots: Sequence[Ballot],
                 n_candidates: int,
                 ) -> Optional[IRVResult]:
        '''Select a candidate by instant-runoff voting.'''
        check_ballots(ballots, n_candidates)
        if not ballots or not n_candidates:
            return None
        majority = len(ballots) / 2
        remaining = list(range(n_candidates))
        rounds: List[IRVRound] = []
        while len(remaining) > 1:
            votes = self.FIRST_PREFERENCE.convert(
                ballots, n_candidates, remaining=remaining
            )
            logger.info('round %d vote totals: %s', len(rounds) + 1, votes)
            leader = first_best(votes, remaining)
            if votes[leader] > majority:
                logger.info('candidate %d elected by majority', leader)
                rounds.append(IRVRound(tuple(votes), tuple(remaining)))
                return IRVResult(
                    winner_id=leader,
                    rounds=tuple(rounds),
                    vote_count=votes[leader],
                )
            eliminated = first_worst(votes, remaining)
            logger.info('eliminating candidate %d', eliminated)
            rounds.append(IRVRound(tuple(votes), tuple(remaining), eliminated))
            remaining.remove(eliminated)
        logger.info('candidate %d elected as the last remaining', remaining[0])
        return IRVResult(winner_id=remaining[0], rounds=tuple(rounds))


def tabulate_irv(ballots: Sequence[Ballot],
                 n_candidates: int,
                 ) -> Optional[IRVResult]:
    '''Tabulate the ballots by instant-runoff; see :class:`InstantRunoff`.'''
    return InstantRunoff().evaluate(ballots, n_candidates)
