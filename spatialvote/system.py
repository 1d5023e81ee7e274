'''Named voting systems and their side-by-side evaluation.

Use :func:`run_election` to derive the ballots of an
:class:`spatialvote.space.ElectionSetup` once and evaluate them under all
(or selected) systems from :data:`SYSTEMS`.
'''

import logging
from typing import Dict, Iterable, Optional, Sequence, Union

import spatialvote.evaluate
from spatialvote.ballot import Ballot, derive_preferences
from spatialvote.evaluate import ElectionResult
from spatialvote.persist import simple_serialization
from spatialvote.space import ElectionSetup

logger = logging.getLogger(__name__)


@simple_serialization
class VotingSystem:
    """A named voting system. Wraps an election evaluator.

    :param name: Human-readable name of the system.
    :param evaluator: Evaluator representing the system.
    """
    def __init__(self,
                 name: str,
                 evaluator: spatialvote.evaluate.Evaluator,
                 ):
        self.name = name
        self.evaluator = evaluator

    def evaluate(self, *args, **kwargs):
        """Return the evaluator's results of the system for the ballots given."""
        return self.evaluator.evaluate(*args, **kwargs)


SYSTEMS = {
    'plurality': VotingSystem(
        'Plurality', spatialvote.evaluate.Plurality()
    ),
    'irv': VotingSystem(
        'Instant-Runoff', spatialvote.evaluate.InstantRunoff()
    ),
    'borda': VotingSystem(
        'Borda Count', spatialvote.evaluate.BordaCount()
    ),
    'condorcet': VotingSystem(
        'Condorcet', spatialvote.evaluate.CondorcetWinner()
    ),
}


def get_systems(selected_keys: Optional[Iterable[str]] = None,
                ) -> Dict[str, VotingSystem]:
    """Select voting systems by their keys in :data:`SYSTEMS`.

    :param selected_keys: Keys of the systems to select; all systems if None.
    :raises ValueError: If a key is unknown.
    """
    if selected_keys is None:
        return SYSTEMS.copy()
    try:
        return {key: SYSTEMS[key] for key in selected_keys}
    except KeyError as e:
        raise ValueError(f'unknown voting system {str(e)}, available: '
                         + ', '.join(SYSTEMS.keys())) from e


def evaluate_all(ballots: Sequence[Ballot],
                 n_candidates: int,
                 systems: Union[Iterable[str], Dict[str, VotingSystem],
                                None] = None,
                 ) -> Dict[str, Optional[ElectionResult]]:
    """Evaluate a single ballot snapshot under multiple systems.

    :param ballots: Complete rankings of candidates 0 to n - 1.
    :param n_candidates: Number of candidates.
    :param systems: Systems to use; either a mapping of keys to systems,
        or keys of :data:`SYSTEMS`. All systems are used by default.
    :returns: Results keyed by system key, in the order of the systems.
    """
    if not hasattr(systems, 'items'):
        systems = get_systems(systems)
    results = {}
    for key, system in systems.items():
        logger.info('evaluating %d ballots by %s', len(ballots), system.name)
        results[key] = system.evaluate(ballots, n_candidates)
    return results


def run_election(setup: ElectionSetup,
                 systems: Union[Iterable[str], Dict[str, VotingSystem],
                                None] = None,
                 ) -> Dict[str, Optional[ElectionResult]]:
    """Derive the ballots of the setup and evaluate them.

    See :func:`evaluate_all` for the parameters and return value.
    """
    ballots = derive_preferences(setup.candidates, setup.voters)
    return evaluate_all(ballots, setup.n_candidates, systems=systems)
