'''Evaluate elections from ranked ballots.

Four independent evaluators are provided, each taking the full list of
ballots and the number of candidates:

-   :class:`core.Plurality` - the candidate with the most first preferences.
-   :class:`sequential.InstantRunoff` - repeated elimination of the weakest
    candidate until someone holds a majority.
-   :class:`positional.BordaCount` - the highest total of rank scores.
-   :class:`condorcet.CondorcetWinner` - the candidate beating every other
    head to head, if there is one.

The evaluators share no state and can run in any order on the same ballots.
All of them resolve ties in favour of the lowest candidate identifier.
Each comes with a ``tabulate_*`` shortcut function.

The plurality, instant-runoff and Borda evaluators return None when there
are no ballots. The Condorcet evaluator always returns a result whose
``exists`` flag tells whether a winner was found.
'''

from spatialvote.evaluate.core import Evaluator, ElectionResult, \
    Plurality, PluralityResult, tabulate_plurality    # noqa: F401
from spatialvote.evaluate.sequential import InstantRunoff, IRVResult, \
    IRVRound, tabulate_irv    # noqa: F401
from spatialvote.evaluate.positional import BordaCount, BordaResult, \
    tabulate_borda    # noqa: F401
from spatialvote.evaluate.condorcet import CondorcetWinner, \
    CondorcetResult, tabulate_condorcet    # noqa: F401
