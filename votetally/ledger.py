'''The election ledger, keeper of the election state.

The ledger owns two structures: the tally, mapping candidate names to their
vote counts, and the registry of voters who have already voted. All
modifications of the election state go through its methods, which validate
the input first and leave the state unchanged whenever they raise.
'''

import logging
import threading
from typing import Dict, Iterable, List, Set, Tuple

import votetally.util
from votetally.candidate import (
    CandidateName, CandidateNameValidator, DuplicateCandidate, UnknownCandidate
)
from votetally.evaluate import MaximumSelector, sorted_results
from votetally.vote import AlreadyVoted, VoterID, VoterIDValidator


logger = logging.getLogger(__name__)


class ElectionLedger:
    '''An in-memory record of a single election.

    The election is open for voting as soon as there is a candidate; each
    voter may vote once until the election is reset. Resetting zeroes all
    the vote counts and forgets who voted but keeps the candidates.

    All operations hold a single lock, so a ledger can be shared between
    threads; in particular, two concurrent votes by the same voter cannot
    both be counted.

    :param candidates: Names of candidates to stand in the election from the
        start, each with no votes.
    :raises votetally.util.EmptyInput: If a candidate name is blank.
    :raises DuplicateCandidate: If a candidate name is given twice.
    '''
    def __init__(self, candidates: Iterable[CandidateName] = ()):
        self._tally: Dict[CandidateName, int] = {}
        self._voters: Set[VoterID] = set()
        self._lock = threading.RLock()
        self.name_validator = CandidateNameValidator()
        self.voter_validator = VoterIDValidator()
        self.winner_selector = MaximumSelector()
        for name in candidates:
            self.add_candidate(name)

    def add_candidate(self, name: CandidateName) -> None:
        '''Let a new candidate stand in the election, with no votes.

        :param name: Name of the candidate.
        :raises votetally.util.EmptyInput: If the name is blank.
        :raises DuplicateCandidate: If the candidate already stands.
        '''
        self.name_validator.validate(name)
        with self._lock:
            if name in self._tally:
                logger.debug('rejecting duplicate candidate %r', name)
                raise DuplicateCandidate(name)
            self._tally[name] = 0
        logger.info('added candidate %r', name)

    def remove_candidate(self, name: CandidateName) -> int:
        '''Withdraw a candidate from the election.

        The votes the candidate received are discarded, but the voters who
        cast them stay registered and cannot vote again until a reset.

        :param name: Name of the candidate.
        :returns: Number of votes the candidate had.
        :raises UnknownCandidate: If no such candidate stands.
        '''
        with self._lock:
            if name not in self._tally:
                logger.debug('cannot remove unknown candidate %r', name)
                raise UnknownCandidate(name)
            n_votes = self._tally.pop(name)
        logger.info('removed candidate %r', name)
        if n_votes:
            logger.warning('%d votes for %r discarded with the candidate',
                           n_votes, name)
        return n_votes

    def cast_vote(self, voter_id: VoterID, candidate: CandidateName) -> int:
        '''Record a vote of a voter for a candidate.

        :param voter_id: Identifier of the voter.
        :param candidate: Name of the candidate voted for.
        :returns: Vote count of the candidate after the vote.
        :raises votetally.util.EmptyInput: If the voter ID or the candidate
            name is blank.
        :raises AlreadyVoted: If the voter has already voted.
        :raises UnknownCandidate: If no such candidate stands.
        '''
        self.voter_validator.validate(voter_id)
        self.name_validator.validate(candidate)
        with self._lock:
            if voter_id in self._voters:
                logger.debug('voter %r has already voted', voter_id)
                raise AlreadyVoted(voter_id)
            if candidate not in self._tally:
                logger.debug('voter %r voting for unknown candidate %r',
                             voter_id, candidate)
                raise UnknownCandidate(candidate)
            self._tally[candidate] += 1
            self._voters.add(voter_id)
            n_votes = self._tally[candidate]
        logger.info('vote cast for %r', candidate)
        return n_votes

    def list_candidates(self) -> List[Tuple[CandidateName, int]]:
        '''Return the candidates with their vote counts, ordered by name.'''
        with self._lock:
            return votetally.util.sorted_by_key(self._tally)

    def results(self) -> Dict[CandidateName, int]:
        '''Return the vote counts ordered by descending count.

        Candidates with equal counts are ordered by name.
        '''
        with self._lock:
            return sorted_results(self._tally)

    def winners(self) -> List[CandidateName]:
        '''Return all candidates with the highest vote count, ordered by name.

        :raises votetally.evaluate.NoCandidates: If no candidates stand.
        :raises votetally.evaluate.NoVotesCast: If nobody has voted yet.
        '''
        with self._lock:
            return self.winner_selector.evaluate(self._tally)

    def reset(self) -> None:
        '''Zero all vote counts and forget who voted, keeping the candidates.'''
        with self._lock:
            for name in self._tally:
                self._tally[name] = 0
            self._voters.clear()
        logger.info('election reset')

    def total_votes_cast(self) -> int:
        '''Return the number of voters who voted in this election period.

        Votes for candidates removed since are included.
        '''
        with self._lock:
            return len(self._voters)

    def has_voted(self, voter_id: VoterID) -> bool:
        with self._lock:
            return voter_id in self._voters

    @property
    def tally(self) -> Dict[CandidateName, int]:
        '''A copy of the tally, in the order the candidates were added.'''
        with self._lock:
            return self._tally.copy()

    @property
    def candidates(self) -> List[CandidateName]:
        with self._lock:
            return list(sorted(self._tally))

    def __contains__(self, name: CandidateName) -> bool:
        with self._lock:
            return name in self._tally

    def __len__(self) -> int:
        with self._lock:
            return len(self._tally)

    def __repr__(self) -> str:
        return (
            f'<ElectionLedger({len(self)} candidates,'
            f' {self.total_votes_cast()} votes)>'
        )
