"""Votetally - an in-memory election tally.

Votetally keeps the state of a single, simple election for as long as the
process runs: which candidates stand, how many votes each of them got and
which voters have already cast their ballot.

-   Candidate names and voter identifiers are checked by the validators in
    the ``candidate`` and ``vote`` modules, which also define the errors
    raised when a candidate or a vote is invalid.
-   The ``evaluate`` module orders a tally into results and selects its
    winners.
-   The :class:`ElectionLedger` from the :mod:`ledger` module owns the state
    and combines all of the above. It is what presentation layers (such as
    the text menu in ``__main__``) talk to.
"""
