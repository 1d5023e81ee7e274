'''Candidates, voters and their positions in the 2D issue space.

Every computation in Spatialvote starts from an :class:`ElectionSetup`,
an immutable bundle of candidates and voters. Candidates carry an explicit
integer identifier that all ballots, tallies and labels refer to, so the
order in which the candidates are stored does not influence the results.
The identifiers of the candidates in a single setup must be exactly
``0, 1, ..., n - 1``.

Positions are plain real coordinates with no constraints on their range;
non-numeric and non-finite coordinates are rejected with
:class:`PositionError`.
'''

from __future__ import annotations

import math
import dataclasses
from typing import Any, Iterable, Optional, Sequence, Tuple
from numbers import Real


class InvalidInputError(Exception):
    '''Input given to the election engine is malformed.'''
    pass


class PositionError(InvalidInputError):
    '''A coordinate is not a finite real number.

    :param value: The offending coordinate value.
    :param owner: Description of the object the coordinate belongs to.
    '''
    def __init__(self, value: Any, owner: Optional[str] = None):
        self.value = value
        self.owner = owner
        message = f'invalid coordinate: {value!r}'
        if owner is not None:
            message += f' of {owner}'
        super().__init__(message + ', must be a finite real number')


class CandidateError(InvalidInputError):
    '''Candidate identifiers are invalid in the given context.

    :param candidate: The candidate identifier found to be invalid.
    :param expected: Description of what was expected.
    '''
    def __init__(self, candidate: Any, expected: Any = None):
        self.candidate = candidate
        self.expected = expected
        message = f'invalid candidate: {candidate!r}'
        if expected:
            message += f', must be {expected}'
        super().__init__(message)


def candidate_label(cand_id: int) -> str:
    '''Return the display label of a candidate (numbered from one).'''
    return f'Candidate {cand_id + 1}'


def check_coordinate(value: Any, owner: Optional[str] = None) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise PositionError(value, owner)
    if not math.isfinite(value):
        raise PositionError(value, owner)
    return value


@dataclasses.dataclass(frozen=True)
class Candidate:
    '''A candidate standing at a point of the issue space.

    :param id: Zero-based candidate identifier.
    :param x: Horizontal coordinate.
    :param y: Vertical coordinate.
    '''
    id: int
    x: float
    y: float

    def __post_init__(self):
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise CandidateError(self.id, 'an integer identifier')
        if self.id < 0:
            raise CandidateError(self.id, 'a non-negative identifier')
        owner = candidate_label(self.id)
        check_coordinate(self.x, owner)
        check_coordinate(self.y, owner)

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def label(self) -> str:
        return candidate_label(self.id)

    def moved(self, x: float, y: float) -> Candidate:
        '''Return a copy of the candidate placed at a different position.'''
        return dataclasses.replace(self, x=x, y=y)


@dataclasses.dataclass(frozen=True)
class Voter:
    '''A voter located at a point of the issue space.'''
    x: float
    y: float

    def __post_init__(self):
        check_coordinate(self.x, 'voter')
        check_coordinate(self.y, 'voter')

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    '''Euclidean distance of two points.'''
    return math.hypot(x2 - x1, y2 - y1)


def check_candidate_ids(candidates: Sequence[Candidate]) -> None:
    '''Check that the candidate identifiers are exactly 0 to n - 1.

    :raises CandidateError: If an identifier is duplicate or out of range.
    '''
    n_cands = len(candidates)
    seen = set()
    for cand in candidates:
        if not isinstance(cand, Candidate):
            raise CandidateError(cand, 'a Candidate instance')
        if cand.id in seen:
            raise CandidateError(cand.id, 'unique within the election')
        if cand.id >= n_cands:
            raise CandidateError(cand.id, f'lower than {n_cands}')
        seen.add(cand.id)


def nearest_candidate(candidates: Iterable[Candidate],
                      x: float,
                      y: float,
                      ) -> Optional[Candidate]:
    '''Return the candidate closest to the given point.

    Exact distance ties go to the candidate with the lower identifier.

    :returns: The nearest candidate, or None if there are no candidates.
    '''
    return min(
        candidates,
        key=lambda cand: (distance(x, y, cand.x, cand.y), cand.id),
        default=None,
    )


def candidates_from_positions(positions: Iterable[Tuple[float, float]]
                              ) -> Tuple[Candidate, ...]:
    '''Create candidates numbered in the order of the given positions.'''
    return tuple(
        Candidate(i, x, y) for i, (x, y) in enumerate(positions)
    )


def voters_from_positions(positions: Iterable[Tuple[float, float]]
                          ) -> Tuple[Voter, ...]:
    return tuple(Voter(x, y) for x, y in positions)


@dataclasses.dataclass(frozen=True)
class ElectionSetup:
    '''An immutable snapshot of candidate and voter positions.

    The caller owns the setup and replaces it as a whole whenever the
    positions change (e.g. when a candidate is dragged elsewhere), using the
    ``with_*`` methods that return a modified copy. Ballots and results are
    always derived from a single complete snapshot.

    :param candidates: Candidates, with identifiers 0 to n - 1 in any order.
    :param voters: Voters.
    :raises CandidateError: If the candidate identifiers are invalid.
    '''
    candidates: Tuple[Candidate, ...] = ()
    voters: Tuple[Voter, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'candidates', tuple(self.candidates))
        object.__setattr__(self, 'voters', tuple(self.voters))
        check_candidate_ids(self.candidates)
        for voter in self.voters:
            if not isinstance(voter, Voter):
                raise InvalidInputError(f'invalid voter: {voter!r}')

    @classmethod
    def from_positions(cls,
                       candidates: Iterable[Tuple[float, float]],
                       voters: Iterable[Tuple[float, float]] = (),
                       ) -> ElectionSetup:
        '''Create a setup from plain coordinate pairs.

        Candidates are numbered in the order in which they are given.
        '''
        return cls(
            candidates_from_positions(candidates),
            voters_from_positions(voters),
        )

    @property
    def n_candidates(self) -> int:
        return len(self.candidates)

    @property
    def n_voters(self) -> int:
        return len(self.voters)

    def candidate(self, cand_id: int) -> Candidate:
        for cand in self.candidates:
            if cand.id == cand_id:
                return cand
        raise CandidateError(cand_id, 'a candidate of this election')

    def with_candidate_moved(self,
                             cand_id: int,
                             x: float,
                             y: float,
                             ) -> ElectionSetup:
        '''Return a copy of the setup with one candidate repositioned.'''
        moving = self.candidate(cand_id)
        return dataclasses.replace(self, candidates=tuple(
            cand.moved(x, y) if cand is moving else cand
            for cand in self.candidates
        ))

    def with_voters(self, voters: Iterable[Voter]) -> ElectionSetup:
        return dataclasses.replace(self, voters=tuple(voters))

    def without_voters(self) -> ElectionSetup:
        return dataclasses.replace(self, voters=())
