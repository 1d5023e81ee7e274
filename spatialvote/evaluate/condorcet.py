'''Condorcet winner evaluator.

Examines pairwise orderings between candidates (how many voters prefer one
candidate to another). A Condorcet winner beats every other candidate in
a head-to-head comparison; such a candidate need not exist (e.g. when the
pairwise preferences form a cycle), but if it does, it is unique.
'''

from __future__ import annotations

import dataclasses
from typing import Any, Dict, Sequence, Tuple

import spatialvote.convert
from spatialvote.ballot import Ballot, check_ballots
from spatialvote.evaluate.core import Evaluator, ElectionResult
from spatialvote.persist import simple_serialization


def beats(matrix: Sequence[Sequence[int]], cand: int, other: int) -> bool:
    '''Whether more voters prefer cand to other than the reverse.'''
    return matrix[cand][other] > matrix[other][cand]


@dataclasses.dataclass(frozen=True)
class CondorcetResult(ElectionResult):
    '''Result of a Condorcet winner search.

    :param matrix: Pairwise preference counts; ``matrix[i][j]`` is the number
        of voters preferring candidate *i* to candidate *j*.
    '''
    matrix: Tuple[Tuple[int, ...], ...] = ()

    @property
    def exists(self) -> bool:
        '''Whether there is a Condorcet winner.'''
        return self.winner_id is not None

    def to_dict(self) -> Dict[str, Any]:
        out_dict = super().to_dict()
        out_dict['exists'] = self.exists
        return out_dict


@simple_serialization
class CondorcetWinner(Evaluator):
    '''Condorcet winner selector.

    Selects the candidate that strictly beats all other candidates pairwise.
    A pairwise tie disqualifies the candidate. Unlike the other evaluators,
    this one always returns a result; with no winner (or no ballots), its
    ``exists`` flag is false.
    '''
    CONDORCET_VOTES = spatialvote.convert.RankedToCondorcetVotes()

    def evaluate(self,
                 ballots: Sequence[Ballot],
                 n_candidates: int,
                 ) -> CondorcetResult:
        '''Find the Condorcet winner.'''
        check_ballots(ballots, n_candidates)
        matrix = self.CONDORCET_VOTES.convert(ballots, n_candidates)
        frozen_matrix = tuple(tuple(row) for row in matrix)
        if not ballots:
            return CondorcetResult(winner_id=None, matrix=frozen_matrix)
        for cand in range(n_candidates):
            if all(
                beats(matrix, cand, other)
                for other in range(n_candidates) if other != cand
            ):
                return CondorcetResult(winner_id=cand, matrix=frozen_matrix)
        return CondorcetResult(winner_id=None, matrix=frozen_matrix)


def tabulate_condorcet(ballots: Sequence[Ballot],
                       n_candidates: int,
                       ) -> CondorcetResult:
    '''Search the ballots for a Condorcet winner; see :class:`CondorcetWinner`.
    '''
    return CondorcetWinner().evaluate(ballots, n_candidates)
