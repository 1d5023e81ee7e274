"""A commandline tool to simulate spatial elections.

Places candidates in a 2D issue space, generates voters around them and
compares the results of plurality, instant-runoff, Borda count and
Condorcet evaluation of the ballots the voters cast by proximity.
"""

import argparse
import json
import logging
import sys
import warnings
from typing import Dict, List, Optional, Tuple

import spatialvote.generate
import spatialvote.persist
import spatialvote.system
from spatialvote.evaluate import ElectionResult, PluralityResult, \
    IRVResult, BordaResult, CondorcetResult
from spatialvote.space import ElectionSetup, candidate_label, \
    candidates_from_positions

NO_VOTERS_MESSAGE = 'Initialize voters to see results'
NO_CANDIDATES_MESSAGE = 'Place candidates to see results'


def position(value: str) -> Tuple[float, float]:
    """Parse a position given as ``X,Y``."""
    try:
        x, y = value.split(',')
        return float(x), float(y)
    except ValueError as e:
        raise argparse.ArgumentTypeError(
            f'invalid position: {value!r}, expected X,Y'
        ) from e


argparser = argparse.ArgumentParser(
    prog='spatialvote',
    description=__doc__,
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
argparser.add_argument(
    '-c', '--n-candidates',
    type=int,
    default=3,
    help='number of randomly placed candidates (ignored with -p)',
)
argparser.add_argument(
    '-p', '--candidate',
    type=position,
    action='append',
    dest='candidate_positions',
    help='position of a candidate as X,Y; repeat for more candidates',
)
argparser.add_argument(
    '-n', '--n-voters',
    type=int,
    default=100,
    help='number of voters to generate',
)
argparser.add_argument(
    '-d', '--distribution',
    choices=spatialvote.generate.DISTRIBUTIONS,
    default='uniform',
    help='spatial distribution of the voters',
)
argparser.add_argument(
    '--width',
    type=float,
    default=spatialvote.generate.DEFAULT_BBOX[2],
    help='width of the issue space',
)
argparser.add_argument(
    '--height',
    type=float,
    default=spatialvote.generate.DEFAULT_BBOX[3],
    help='height of the issue space',
)
argparser.add_argument(
    '-r', '--random-state',
    type=int,
    help='seed for candidate and voter placement',
)
argparser.add_argument(
    '-s', '--system',
    nargs='*',
    help=(
        'voting systems to use, out of '
        + ', '.join(spatialvote.system.SYSTEMS.keys())
        + '; all by default'
    ),
)
argparser.add_argument(
    '-j', '--json',
    action='store_true',
    dest='as_json',
    help='output the setup and results as JSON',
)
argparser.add_argument(
    '-v', '--verbose',
    action='store_true',
    help='show all evaluator log messages',
)
argparser.add_argument(
    '-q', '--quiet',
    action='store_true',
    help='do not show any evaluator log messages',
)


def main(n_candidates: int = 3,
         candidate_positions: Optional[List[Tuple[float, float]]] = None,
         n_voters: int = 100,
         distribution: str = 'uniform',
         width: float = spatialvote.generate.DEFAULT_BBOX[2],
         height: float = spatialvote.generate.DEFAULT_BBOX[3],
         random_state: Optional[int] = None,
         system: Optional[List[str]] = None,
         as_json: bool = False,
         verbose: bool = False,
         quiet: bool = False,
         ) -> None:
    logging.basicConfig(
        level=(
            logging.DEBUG if verbose
            else (logging.WARNING if quiet else logging.INFO)
        ),
        format='%(levelname)-10s %(message)s'
    )
    systems = spatialvote.system.get_systems(system)
    if not systems:
        warnings.warn('no voting systems selected, terminating')
        return
    setup = create_setup(
        n_candidates=n_candidates,
        candidate_positions=candidate_positions,
        n_voters=n_voters,
        distribution=distribution,
        bbox=(0, 0, width, height),
        random_state=random_state,
    )
    if not setup.candidates:
        warnings.warn('no candidates placed, the systems have nobody to elect')
    elif not setup.voters:
        warnings.warn('no voters generated, the systems have nothing to decide')
    results = spatialvote.system.run_election(setup, systems)
    if as_json:
        show_json(setup, results)
    else:
        show_results(setup, systems, results)


def create_setup(n_candidates: int,
                 candidate_positions: Optional[List[Tuple[float, float]]],
                 n_voters: int,
                 distribution: str,
                 bbox: spatialvote.generate.BBox,
                 random_state: Optional[int] = None,
                 ) -> ElectionSetup:
    """Place the candidates and generate the voters."""
    if candidate_positions:
        candidates = candidates_from_positions(candidate_positions)
        voter_seed = random_state
    else:
        candidates = spatialvote.generate.random_candidates(
            n_candidates, bbox=bbox, random_state=random_state
        )
        voter_seed = None
    voters = spatialvote.generate.generate_voters(
        n_voters,
        distribution,
        bbox=bbox,
        candidates=candidates,
        random_state=voter_seed,
    )
    return ElectionSetup(candidates, voters)


def describe_result(result: Optional[ElectionResult]) -> List[str]:
    """Describe an election result in a few lines of text."""
    if result is None:
        return [NO_VOTERS_MESSAGE]
    elif isinstance(result, PluralityResult):
        return [
            f'Winner: {result.winner} ({result.vote_count} votes)',
            ' | '.join(
                f'{candidate_label(i)}: {n_votes} votes'
                for i, n_votes in enumerate(result.votes)
            ),
        ]
    elif isinstance(result, IRVResult):
        return [
            f'Winner: {result.winner}',
            f'Rounds: {len(result.rounds)}',
        ]
    elif isinstance(result, BordaResult):
        return [
            f'Winner: {result.winner} ({result.score} points)',
            ' | '.join(
                f'{candidate_label(i)}: {score} points'
                for i, score in enumerate(result.scores)
            ),
        ]
    elif isinstance(result, CondorcetResult):
        if result.exists:
            return [f'Condorcet Winner: {result.winner}']
        else:
            return [
                'No Condorcet winner exists',
                '(No candidate beats all others in head-to-head matchups)',
            ]
    else:
        raise ValueError(f'unknown result type: {type(result).__name__}')


def show_results(setup: ElectionSetup,
                 systems: Dict[str, spatialvote.system.VotingSystem],
                 results: Dict[str, Optional[ElectionResult]],
                 ) -> None:
    print(f'{setup.n_candidates} candidates, {setup.n_voters} voters')
    for cand in setup.candidates:
        print(' ' * 4 + f'{cand.label} at ({cand.x:.1f}, {cand.y:.1f})')
    if setup.n_candidates == 0:
        placeholder = NO_CANDIDATES_MESSAGE
    elif setup.n_voters == 0:
        placeholder = NO_VOTERS_MESSAGE
    else:
        placeholder = None
    for key, result in results.items():
        print()
        print(systems[key].name)
        if placeholder is not None:
            print(' ' * 4 + placeholder)
            continue
        for line in describe_result(result):
            print(' ' * 4 + line)


def show_json(setup: ElectionSetup,
              results: Dict[str, Optional[ElectionResult]],
              ) -> None:
    out = {
        'candidates': spatialvote.persist.to_dict(setup.candidates),
        'n_voters': setup.n_voters,
        'results': spatialvote.persist.to_dict(results),
    }
    sys.stdout.write(json.dumps(out, indent=2) + '\n')


if __name__ == '__main__':
    args = argparser.parse_args()
    main(**vars(args))
