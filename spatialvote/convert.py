'''Converters from ranked ballots to aggregated vote formats.

These objects have a `convert()` method that aggregates a list of ballots
(complete rankings of candidates 0 to n - 1, see :mod:`spatialvote.ballot`)
into a form an evaluator can decide on: first preference tallies,
positional scores or a pairwise preference matrix. The tallies are lists
indexed by candidate identifier.

The converters assume the ballots have already been checked by
:func:`spatialvote.ballot.check_ballots`.
'''

from typing import Collection, List, Optional, Sequence

from spatialvote.ballot import Ballot
from spatialvote.component import rankscore
from spatialvote.persist import simple_serialization


@simple_serialization
class RankedToFirstPreference:
    '''Aggregate ballots to simple votes, taking each voter's first choice.

    When a collection of remaining candidates is given, each ballot counts
    for its highest ranked candidate that is still remaining, which is how
    instant-runoff rounds are tallied. Ballots ranking none of the remaining
    candidates are not counted.
    '''
    def convert(self,
                ballots: Sequence[Ballot],
                n_candidates: int,
                remaining: Optional[Collection[int]] = None,
                ) -> List[int]:
        '''Count first (remaining) preferences for each candidate.'''
        votes = [0] * n_candidates
        if remaining is not None:
            remaining = frozenset(remaining)
        for ballot in ballots:
            for cand in ballot:
                if remaining is None or cand in remaining:
                    votes[cand] += 1
                    break
        return votes


@simple_serialization
class RankedToPositionalVotes:
    '''Aggregate ballots to positional scores.

    Useful for Borda count systems. Assigns a score to each rank and then
    sums the scores per candidate.

    :param rank_scorer: A rank scorer that determines which score to assign to
        which rank through its `scores()` method.
        You can use any object that honors the interface of
        :class:`rankscore.RankScorer`.
    '''
    def __init__(self,
                 rank_scorer: rankscore.RankScorer = rankscore.Borda(),
                 ):
        self.rank_scorer = rank_scorer

    def convert(self,
                ballots: Sequence[Ballot],
                n_candidates: int,
                ) -> List[int]:
        '''Convert ballots to total scores by their positions.'''
        rank_scores = self.rank_scorer.scores(n_candidates)
        scores = [0] * n_candidates
        for ballot in ballots:
            for rank, cand in enumerate(ballot):
                scores[cand] += rank_scores[rank]
        return scores


@simple_serialization
class RankedToCondorcetVotes:
    '''Aggregate ballots to a matrix of pairwise preferences.

    Basic component for Condorcet methods. For each ballot that ranks a pair
    of candidates in a given order, adds one to the count of the first
    candidate over the second, for every pair of ranks (not only the
    adjacent ones). The resulting ``matrix[i][j]`` is the number of voters
    preferring candidate *i* to candidate *j*.
    '''
    def convert(self,
                ballots: Sequence[Ballot],
                n_candidates: int,
                ) -> List[List[int]]:
        '''Convert ballots to counts of pairwise wins.'''
        matrix = [[0] * n_candidates for _ in range(n_candidates)]
        for ballot in ballots:
            for i, upper_cand in enumerate(ballot):
                upper_row = matrix[upper_cand]
                for lower_cand in ballot[i+1:]:
                    upper_row[lower_cand] += 1
        return matrix
