'''Positional (Borda count) evaluator.'''

from __future__ import annotations

import dataclasses
from typing import Optional, Sequence, Tuple

import spatialvote.convert
from spatialvote.ballot import Ballot, check_ballots
from spatialvote.component import rankscore
from spatialvote.evaluate.core import Evaluator, ElectionResult, first_best
from spatialvote.persist import simple_serialization


@dataclasses.dataclass(frozen=True)
class BordaResult(ElectionResult):
    '''Result of a Borda count election.

    :param score: Total score of the winner.
    :param scores: Total scores of all candidates.
    '''
    score: int
    scores: Tuple[int, ...]


@simple_serialization
class BordaCount(Evaluator):
    '''Borda count evaluator.

    Scores every rank on every ballot and elects the candidate with the
    highest total. With the default rank scorer, the candidate ranked first
    gets one point less than there are candidates and the last one gets
    nothing. Ties go to the candidate with the lowest identifier.

    :param rank_scorer: Determines the score of each rank; see
        :mod:`spatialvote.component.rankscore`.
    '''
    def __init__(self,
                 rank_scorer: rankscore.RankScorer = rankscore.Borda(),
                 ):
        self.rank_scorer = rank_scorer
        self._converter = spatialvote.convert.RankedToPositionalVotes(
            rank_scorer
        )

    def evaluate(self,
                 ballots: Sequence[Ballot],
                 n_candidates: int,
                 ) -> Optional[BordaResult]:
        '''Select the candidate with the highest total positional score.'''
        check_ballots(ballots, n_candidates)
        if not ballots or not n_candidates:
            return None
        scores = self._converter.convert(ballots, n_candidates)
        winner = first_best(scores)
        return BordaResult(
            winner_id=winner,
            score=scores[winner],
            scores=tuple(scores),
        )


def tabulate_borda(ballots: Sequence[Ballot],
                   n_candidates: int,
                   ) -> Optional[BordaResult]:
    '''Tabulate the ballots by Borda count; see :class:`BordaCount`.'''
    return BordaCount().evaluate(ballots, n_candidates)
