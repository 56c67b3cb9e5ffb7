'''Evaluation of election tallies: result ordering and winner selection.

The functions and evaluators here work on any tally, i.e. a dictionary
mapping candidates to the number of votes they received, so they can be used
independently of the :class:`votetally.ledger.ElectionLedger`.
'''

from typing import Dict, List

import votetally.util
from votetally.candidate import CandidateName


class EvaluationError(Exception):
    '''The tally cannot be evaluated in its current state.'''
    pass


class NoCandidates(EvaluationError):
    '''There are no candidates in the tally.'''
    def __init__(self):
        super().__init__('no candidates available')


class NoVotesCast(EvaluationError):
    '''No votes have been cast for any candidate, so there is no winner yet.'''
    def __init__(self):
        super().__init__('no votes cast yet')


def sorted_results(tally: Dict[CandidateName, int]) -> Dict[CandidateName, int]:
    '''Order the tally for presentation of results.

    :param tally: Mapping of candidates to their vote counts.
    :returns: A new dictionary with the same contents, ordered by descending
        vote count; candidates with equal counts are ordered by name.
    '''
    return votetally.util.descending_dict(tally)


class MaximumSelector:
    '''Select all candidates that received the most votes.

    Ties are not broken: if several candidates share the maximum, all of them
    are selected. A maximum of zero means nobody has voted yet, which is
    reported as an error rather than as a tie of all candidates.
    '''
    def evaluate(self,
                 tally: Dict[CandidateName, int],
                 ) -> List[CandidateName]:
        '''Select the winners of the tally.

        :param tally: Mapping of candidates to their vote counts.
        :returns: Winning candidates, ordered by name.
        :raises NoCandidates: If the tally is empty.
        :raises NoVotesCast: If no candidate has any votes.
        '''
        if not tally:
            raise NoCandidates()
        max_votes = max(tally.values())
        if max_votes == 0:
            raise NoVotesCast()
        return list(sorted(
            cand for cand, n_votes in tally.items() if n_votes == max_votes
        ))
