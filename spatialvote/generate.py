"""Generate voter and candidate positions for election simulations.

Samplers produce random points of the 2D issue space. The election engine
itself never samples anything; it only consumes the positions produced here
(or supplied by any other means).

Three voter distributions are available by name through
:func:`create_sampler`:

-   ``uniform``: uniformly over the bounding box.
-   ``normal``: Gaussian around the center of the bounding box, with the
    standard deviation of a quarter of the box size in each dimension,
    clamped to the box.
-   ``clustered``: each voter picks a random candidate and is placed
    by a Gaussian around its position, clamped to the box.
"""

import abc
import random
from numbers import Number
from typing import Dict, Iterable, Optional, Sequence, Tuple, Union

from spatialvote.space import Candidate, Voter

BBox = Tuple[float, float, float, float]

DEFAULT_BBOX: BBox = (0, 0, 800, 600)
CLUSTER_SIGMA = 80
CANDIDATE_MARGIN = 20
DISTRIBUTIONS = ('uniform', 'normal', 'clustered')


class Sampler(metaclass=abc.ABCMeta):
    """A generic sampler interface producing 2D points."""
    @abc.abstractmethod
    def sample(self, n: int) -> Iterable[Tuple[float, float]]:
        raise NotImplementedError


class DistributionSampler(Sampler):
    """Sample points from the issue space by specifying a distribution.

    The distributions are taken from Python's *random* module by referencing
    the names of the generating functions. Any superfluous keyword arguments
    are passed to the generating function; a numeric argument applies to both
    dimensions, a pair of numbers specifies it per dimension. If no keyword
    arguments are given, the standard deviation or range defaults to the unit
    interval for the gauss and uniform distributions.

    :param distribution: The name of the distribution to use. Must refer to a
        name of a function in Python stdlib random module that produces random
        floats.
    """
    DEFAULT_PARAMS: Dict[str, Dict[str, Number]] = {
        'gauss': {'mu': 0, 'sigma': 1},
        'uniform': {'a': 0, 'b': 1},
    }

    def __init__(self, distribution: str = 'gauss', **kwargs):
        try:
            self.distro_fx = getattr(random, distribution)
        except AttributeError as e:
            raise ValueError(f'unknown distribution: {distribution}') from e
        if not kwargs and distribution in self.DEFAULT_PARAMS:
            kwargs = self.DEFAULT_PARAMS[distribution].copy()
        for argname, argval in kwargs.items():
            if hasattr(argval, '__len__'):
                if len(argval) != 2:
                    raise ValueError(
                        f'sampling {argname} parameter has'
                        f' {len(argval)} dimensions, expected 2'
                    )
            else:
                kwargs[argname] = (argval, argval)
        self.gener_args = tuple(
            {argname: argval[i] for argname, argval in kwargs.items()}
            for i in range(2)
        )

    def sample(self, n: int) -> Iterable[Tuple[float, float]]:
        """Sample n points from the distribution."""
        x_args, y_args = self.gener_args
        for i in range(n):
            yield (self.distro_fx(**x_args), self.distro_fx(**y_args))


class ClampedSampler(Sampler):
    """A sampler clamping the points of another sampler into a box.

    Points falling outside the bounding box are moved to its nearest edge.

    :param inner: A sampler (e.g. :class:`DistributionSampler`) to wrap.
    :param bbox: The bounding box as ``(minx, miny, maxx, maxy)``.
    """
    def __init__(self, inner: Sampler, bbox: BBox = DEFAULT_BBOX):
        self.inner = inner
        self.bbox = check_bbox(bbox)

    def sample(self, n: int) -> Iterable[Tuple[float, float]]:
        minx, miny, maxx, maxy = self.bbox
        for x, y in self.inner.sample(n):
            yield (max(minx, min(maxx, x)), max(miny, min(maxy, y)))


class ClusteredSampler(Sampler):
    """Sample points clustered around candidate positions.

    For each point, a candidate is chosen at random and the point is drawn
    from a Gaussian centered on the candidate.

    :param candidates: The candidates to cluster around.
    :param sigma: Standard deviation of the clusters.
    """
    def __init__(self,
                 candidates: Sequence[Candidate],
                 sigma: float = CLUSTER_SIGMA,
                 ):
        if not candidates:
            raise ValueError('clustered sampling requires candidates')
        self.candidates = tuple(candidates)
        self.sigma = sigma

    def sample(self, n: int) -> Iterable[Tuple[float, float]]:
        for i in range(n):
            center = random.choice(self.candidates)
            yield (
                random.gauss(center.x, self.sigma),
                random.gauss(center.y, self.sigma),
            )


def check_bbox(bbox: Sequence[float]) -> BBox:
    if len(bbox) != 4:
        raise ValueError('bounding box must have four coordinates'
                         f' (minx, miny, maxx, maxy), got {len(bbox)}')
    minx, miny, maxx, maxy = bbox
    if minx > maxx or miny > maxy:
        raise ValueError(f'invalid bounding box: {tuple(bbox)}')
    return tuple(bbox)


def create_sampler(distribution: str,
                   bbox: BBox = DEFAULT_BBOX,
                   candidates: Sequence[Candidate] = (),
                   ) -> Sampler:
    """Create a voter sampler for a named distribution.

    :param distribution: One of ``uniform``, ``normal`` and ``clustered``.
    :param bbox: The bounding box of the issue space.
    :param candidates: Candidates for the ``clustered`` distribution.
    :raises ValueError: If the distribution is unknown.
    """
    minx, miny, maxx, maxy = check_bbox(bbox)
    width, height = maxx - minx, maxy - miny
    if distribution == 'uniform':
        return DistributionSampler(
            'uniform', a=(minx, miny), b=(maxx, maxy)
        )
    elif distribution == 'normal':
        return ClampedSampler(DistributionSampler(
            'gauss',
            mu=(minx + width / 2, miny + height / 2),
            sigma=(width / 4, height / 4),
        ), bbox)
    elif distribution == 'clustered':
        return ClampedSampler(ClusteredSampler(candidates), bbox)
    else:
        raise ValueError(f'invalid voter distribution: {distribution},'
                         f' supported: {", ".join(DISTRIBUTIONS)}')


def generate_voters(n: int,
                    sampler: Union[str, Sampler] = 'uniform',
                    bbox: BBox = DEFAULT_BBOX,
                    candidates: Sequence[Candidate] = (),
                    random_state: Optional[int] = None,
                    ) -> Tuple[Voter, ...]:
    """Generate n voters.

    :param n: Number of voters.
    :param sampler: A sampler object or a distribution name for
        :func:`create_sampler` (which also receives the bbox and candidates).
    :param random_state: Seed for the sampler.
    """
    if random_state is not None:
        random.seed(random_state)
    if not hasattr(sampler, 'sample'):
        sampler = create_sampler(sampler, bbox=bbox, candidates=candidates)
    return tuple(Voter(x, y) for x, y in sampler.sample(n))


def random_candidates(n: int,
                      bbox: BBox = DEFAULT_BBOX,
                      margin: float = CANDIDATE_MARGIN,
                      random_state: Optional[int] = None,
                      ) -> Tuple[Candidate, ...]:
    """Place n candidates uniformly at random inside the bounding box.

    :param n: Number of candidates; they get identifiers 0 to n - 1.
    :param margin: Minimum distance of the candidates from the box edges.
    :param random_state: Seed for the sampler.
    """
    minx, miny, maxx, maxy = check_bbox(bbox)
    if 2 * margin > min(maxx - minx, maxy - miny):
        raise ValueError(f'margin {margin} too large for bounding box {bbox}')
    if random_state is not None:
        random.seed(random_state)
    sampler = DistributionSampler(
        'uniform',
        a=(minx + margin, miny + margin),
        b=(maxx - margin, maxy - margin),
    )
    return tuple(
        Candidate(i, x, y) for i, (x, y) in enumerate(sampler.sample(n))
    )
