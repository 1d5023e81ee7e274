'''General evaluator machinery and the plurality evaluator.'''

from __future__ import annotations

import abc
import dataclasses
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

import spatialvote.convert
from spatialvote.ballot import Ballot, check_ballots
from spatialvote.persist import simple_serialization, serialize_value
from spatialvote.space import candidate_label


def first_best(values: Sequence[int],
               among: Optional[Iterable[int]] = None,
               ) -> int:
    '''Return the first candidate with the highest value.

    :param values: Values (votes, scores) indexed by candidate.
    :param among: Candidates to consider, in the order of precedence
        for ties. All candidates in ascending order by default.
    '''
    if among is None:
        among = range(len(values))
    return max(among, key=values.__getitem__)


def first_worst(values: Sequence[int],
                among: Optional[Iterable[int]] = None,
                ) -> int:
    '''Return the first candidate with the lowest value.'''
    if among is None:
        among = range(len(values))
    return min(among, key=values.__getitem__)


@dataclasses.dataclass(frozen=True)
class ElectionResult:
    '''Common base of the results of all evaluators.

    :param winner_id: Identifier of the winning candidate, or None if there
        is no winner.
    '''
    winner_id: Optional[int]

    @property
    def winner(self) -> Optional[str]:
        '''Display label of the winner.'''
        if self.winner_id is None:
            return None
        return candidate_label(self.winner_id)

    def to_dict(self) -> Dict[str, Any]:
        out_dict = {
            field.name: serialize_value(getattr(self, field.name))
            for field in dataclasses.fields(self)
        }
        out_dict['winner'] = self.winner
        return out_dict


@dataclasses.dataclass(frozen=True)
class PluralityResult(ElectionResult):
    '''Result of a plurality election.

    :param vote_count: Number of first preferences of the winner.
    :param votes: First preferences of all candidates.
    '''
    vote_count: int
    votes: Tuple[int, ...]


class Evaluator(metaclass=abc.ABCMeta):
    '''Decide an election from ranked ballots.

    A root abstract base class for all evaluators. Evaluators are stateless;
    the same instance can evaluate any number of ballot sets.
    '''
    @abc.abstractmethod
    def evaluate(self,
                 ballots: Sequence[Ballot],
                 n_candidates: int,
                 ) -> Optional[ElectionResult]:
        '''Evaluate the ballots.

        :param ballots: Complete rankings of candidates 0 to n - 1.
        :param n_candidates: Number of candidates.
        :returns: The result, or None when there are no ballots to decide on.
        :raises spatialvote.ballot.BallotError: If the ballots are not
            complete rankings of the candidates.
        '''
        raise NotImplementedError


@simple_serialization
class Plurality(Evaluator):
    '''Plurality (first-past-the-post) evaluator.

    Each ballot counts as a single vote for its top ranked candidate; the
    candidate with the most votes wins. Ties go to the candidate with the
    lowest identifier.
    '''
    FIRST_PREFERENCE = spatialvote.convert.RankedToFirstPreference()

    def evaluate(self,
                 ballots: Sequence[Ballot],
                 n_candidates: int,
                 ) -> Optional[PluralityResult]:
        '''Select the candidate with the most first preferences.'''
        check_ballots(ballots, n_candidates)
        if not ballots or not n_candidates:
            return None
        votes = self.FIRST_PREFERENCE.convert(ballots, n_candidates)
        winner = first_best(votes)
        return PluralityResult(
            winner_id=winner,
            vote_count=votes[winner],
            votes=tuple(votes),
        )


def tabulate_plurality(ballots: Sequence[Ballot],
                       n_candidates: int,
                       ) -> Optional[PluralityResult]:
    '''Tabulate the ballots by plurality; see :class:`Plurality`.'''
    return Plurality().evaluate(ballots, n_candidates)
