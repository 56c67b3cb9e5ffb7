'''Candidate name validation and candidate errors.

Candidates in Votetally are identified by their names: plain strings, unique
within an election and compared case-sensitively. A name is valid if it is
not blank; :class:`CandidateNameValidator` checks that. The errors defined
here are raised by the ledger when a name clashes with an existing candidate
(:class:`DuplicateCandidate`) or refers to a candidate that does not stand
(:class:`UnknownCandidate`).
'''

from typing import Any

import votetally.util


CandidateName = str


class CandidateError(Exception):
    '''A candidate is invalid in the given context.

    :param candidate: Candidate that was found to be invalid.
    :param message: Description of the problem. If not given, a generic
        one is used.
    '''
    def __init__(self, candidate: Any, message: str = None):
        self.candidate = candidate
        if message is None:
            message = f'invalid candidate: {candidate}'
        super().__init__(message)


class DuplicateCandidate(CandidateError):
    '''A candidate of this name already stands in the election.'''
    def __init__(self, candidate: CandidateName):
        super().__init__(candidate, f'candidate already exists: {candidate}')


class UnknownCandidate(CandidateError):
    '''No candidate of this name stands in the election.'''
    def __init__(self, candidate: CandidateName):
        super().__init__(candidate, f'candidate not found: {candidate}')


class CandidateNameValidator:
    '''Validate that a candidate name is usable.

    :param field: Name of the input field reported in errors.
    '''
    def __init__(self, field: str = 'candidate name'):
        self.field = field

    def validate(self, name: CandidateName) -> None:
        '''Check whether a candidate name is valid.

        :param name: Candidate name to be checked.
        :raises votetally.util.EmptyInput: If the name is blank.
        '''
        votetally.util.check_not_blank(name, self.field)
