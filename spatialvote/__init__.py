"""Spatialvote - elections in a two-dimensional issue space.

Voters and candidates are points in a plane and every voter ranks the
candidates by their distance, closest first. Spatialvote derives these
ranked ballots and evaluates them under several election systems so their
outcomes can be compared side by side.

-   The ``space`` module defines the candidates, voters and the immutable
    :class:`space.ElectionSetup` that bundles them.
-   The ``ballot`` module derives the ranked ballots from the positions.
-   The ``evaluate`` subpackage contains the evaluators for plurality,
    instant-runoff, Borda count and Condorcet elections, built on the ballot
    converters from the ``convert`` module.
-   The ``system`` module names the systems and runs them all on a setup.
-   The ``generate`` and ``regions`` modules place random voters and
    candidates and map the nearest-candidate regions of the plane.
"""
