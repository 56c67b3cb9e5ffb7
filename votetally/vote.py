'''Voter identification and vote errors.

Every vote in Votetally is a simple vote: one voter, identified by an
arbitrary non-blank string, votes for a single candidate. The ledger allows
each voter identifier to vote once per election period; a repeated attempt
raises :class:`AlreadyVoted`.
'''

import abc

import votetally.util


VoterID = str


class VoteError(Exception, metaclass=abc.ABCMeta):
    '''A vote is invalid given the election rules.'''
    pass


class AlreadyVoted(VoteError):
    '''The voter has already cast a vote in this election period.

    :param voter_id: Identifier of the voter who tried to vote again.
    '''
    def __init__(self, voter_id: VoterID):
        self.voter_id = voter_id
        super().__init__(f'voter ID has already voted: {voter_id}')


class VoterIDValidator:
    '''Validate that a voter identifier is usable.'''
    field = 'voter ID'

    def validate(self, voter_id: VoterID) -> None:
        '''Check whether a voter identifier is valid.

        :param voter_id: Voter identifier to be checked.
        :raises votetally.util.EmptyInput: If the identifier is blank.
        '''
        votetally.util.check_not_blank(voter_id, self.field)
