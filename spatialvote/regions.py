"""Nearest-candidate regions of the issue space.

Assigns each cell of a rectangular lattice over the issue space to the
candidate closest to the cell center, giving a Voronoi diagram of the
candidates. Every voter inside a region ranks its candidate first, so the
regions show where the plurality votes of each candidate come from.

The diagram is a 2D list of candidate identifiers (None where there are no
candidates), rows running from the lower edge of the bounding box upwards.
Drawing it is left to the caller.
"""

import collections
from typing import Dict, List, Optional, Sequence, Tuple

from spatialvote.generate import BBox, DEFAULT_BBOX, check_bbox
from spatialvote.space import Candidate, nearest_candidate

DEFAULT_SHAPE = (150, 200)


def cell_centers(bbox: BBox = DEFAULT_BBOX,
                 shape: Tuple[int, int] = DEFAULT_SHAPE,
                 ) -> Tuple[List[float], List[float]]:
    """Return the y and x coordinates of the lattice cell centers.

    :param bbox: The bounding box as ``(minx, miny, maxx, maxy)``.
    :param shape: Number of rows and columns of the lattice.
    """
    minx, miny, maxx, maxy = check_bbox(bbox)
    n_rows, n_cols = shape
    if n_rows <= 0 or n_cols <= 0:
        raise ValueError(f'invalid lattice shape: {shape}')
    y_size_elem = (maxy - miny) / n_rows
    x_size_elem = (maxx - minx) / n_cols
    return (
        [miny + (i + .5) * y_size_elem for i in range(n_rows)],
        [minx + (i + .5) * x_size_elem for i in range(n_cols)],
    )


def voronoi(candidates: Sequence[Candidate],
            bbox: BBox = DEFAULT_BBOX,
            shape: Tuple[int, int] = DEFAULT_SHAPE,
            ) -> List[List[Optional[int]]]:
    """Produce a nearest-candidate diagram for the given candidates.

    :param candidates: Candidates positioned in the issue space.
    :param bbox: The bounding box to cover.
    :param shape: Number of rows and columns of the lattice. Enlarging this
        gives more detail but increases computing time.
    """
    ys, xs = cell_centers(bbox, shape)
    diagram = []
    for y in ys:
        row = []
        for x in xs:
            nearest = nearest_candidate(candidates, x, y)
            row.append(None if nearest is None else nearest.id)
        diagram.append(row)
    return diagram


def region_shares(diagram: List[List[Optional[int]]]) -> Dict[int, float]:
    """Calculate the fraction of the diagram cells owned by each candidate.

    Candidates owning no cells are omitted.
    """
    counts = collections.Counter(
        cand_id for row in diagram for cand_id in row if cand_id is not None
    )
    n_cells = sum(len(row) for row in diagram)
    return {
        cand_id: count / n_cells
        for cand_id, count in sorted(counts.items())
    }
