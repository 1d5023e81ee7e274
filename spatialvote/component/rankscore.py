'''Objects to assign scores to ranks in positional voting systems like Borda.

A rank scorer returns a list of numerical scores to be assigned to ranks given
by voters. This is the essence of the Borda count system.
'''

import abc
from typing import List
from numbers import Number

from spatialvote.persist import simple_serialization


class RankScorer(metaclass=abc.ABCMeta):
    '''An abstract base class for rank scorers.

    Rank scorers must provide a `scores()` method that returns a list of scores
    for the given number of candidates, best rank first.
    '''
    @abc.abstractmethod
    def scores(self, n_candidates: int) -> List[Number]:
        raise NotImplementedError


@simple_serialization
class Borda(RankScorer):
    '''Borda rank scorer.

    Assigns the `base` score to the candidate ranked last, and one point more
    for each higher rank.

    :param base: The score to assign to the candidate ranked last. The
        default of zero gives the first rank the number of candidates minus
        one; the truly original Borda uses 1.
    '''
    def __init__(self, base: int = 0):
        self.base = base

    def scores(self, n_candidates: int) -> List[int]:
        '''Return the scores for all ranks.

        This gives (number of candidates + base - 1 - rank) for ranks running
        from 0 (best rank) to n_candidates - 1.
        '''
        top_score = n_candidates + self.base - 1
        return [top_score - rank for rank in range(n_candidates)]
