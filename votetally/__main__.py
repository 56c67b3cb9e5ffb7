"""An interactive text menu for running a simple election.

Keeps the election in memory for the duration of the session: add and
remove candidates, cast votes, show the results and winners and reset
the election.
"""

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional, TextIO

import votetally.util
from votetally.candidate import CandidateError
from votetally.evaluate import NoCandidates, NoVotesCast
from votetally.ledger import ElectionLedger
from votetally.vote import VoteError

argparser = argparse.ArgumentParser(
    description=__doc__,
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
argparser.add_argument(
    '-c', '--candidate',
    action='append',
    help='register this candidate before the menu starts (repeatable)',
)
argparser.add_argument(
    '-v', '--verbose',
    action='store_true',
    help='show all ledger log messages',
)
argparser.add_argument(
    '-q', '--quiet',
    action='store_true',
    help='show only ledger warnings',
)

EXIT = 0
MENU_ITEMS = {
    1: 'Add candidate',
    2: 'List candidates',
    3: 'Cast vote',
    4: 'Show results',
    5: 'Show winner(s)',
    6: 'Reset election',
    7: 'Remove candidate',
    EXIT: 'Exit',
}


class TextMenu:
    '''A text menu driving an election ledger from a line-based input.

    :param ledger: Ledger holding the election state.
    :param infile: Stream to read the operator's input from.
    :param outfile: Stream to write prompts and messages to.
    '''
    def __init__(self,
                 ledger: ElectionLedger,
                 infile: TextIO = sys.stdin,
                 outfile: TextIO = sys.stdout,
                 ):
        self.ledger = ledger
        self.infile = infile
        self.outfile = outfile
        self.actions: Dict[int, Callable[[], None]] = {
            1: self.add_candidate,
            2: self.list_candidates,
            3: self.cast_vote,
            4: self.show_results,
            5: self.show_winners,
            6: self.reset_election,
            7: self.remove_candidate,
        }

    def run(self) -> None:
        '''Show the menu and perform the chosen actions until exit.

        The session also ends when the input is exhausted.
        '''
        try:
            while True:
                self.show_menu()
                choice = self.read_int('Enter choice: ')
                if choice == EXIT:
                    self.say('Exiting. Goodbye!')
                    break
                elif choice in self.actions:
                    self.actions[choice]()
                else:
                    self.say('Invalid choice. Try again.')
                self.say()
        except EOFError:
            self.say()
            self.say('End of input, exiting.')

    def show_menu(self) -> None:
        self.say('=' * 30)
        self.say('VOTING SYSTEM'.center(30))
        self.say('=' * 30)
        for code, label in MENU_ITEMS.items():
            self.say(f'{code}. {label}')

    def add_candidate(self) -> None:
        name = self.read_nonblank('Enter candidate name: ')
        try:
            self.ledger.add_candidate(name)
        except CandidateError as err:
            self.say(f'Cannot add candidate: {err}')
        else:
            self.say(f'Added candidate: {name}')

    def list_candidates(self) -> None:
        candidates = self.ledger.list_candidates()
        if not candidates:
            self.say('No candidates added yet.')
            return
        self.say('Candidates:')
        for i, (name, n_votes) in enumerate(candidates, start=1):
            self.say(f'{i}) {name} (votes: {n_votes})')

    def cast_vote(self) -> None:
        if not len(self.ledger):
            self.say('No candidates available. Add candidates first.')
            return
        voter_id = self.read_nonblank('Enter your voter ID: ')
        if self.ledger.has_voted(voter_id):
            self.say('This voter ID has already voted!')
            return
        self.list_candidates()
        candidate = self.read_nonblank('Enter candidate name to vote for: ')
        try:
            self.ledger.cast_vote(voter_id, candidate)
        except (VoteError, CandidateError) as err:
            self.say(f'Vote rejected: {err}')
        else:
            self.say(f'Vote cast successfully for {candidate}!')

    def show_results(self) -> None:
        results = self.ledger.results()
        if not results:
            self.say('No candidates to show.')
            return
        self.say('Results:')
        for name, n_votes in results.items():
            self.say(f'{name} : {n_votes}')
        self.say(f'Total votes: {self.ledger.total_votes_cast()}')

    def show_winners(self) -> None:
        try:
            winners = self.ledger.winners()
        except NoCandidates:
            self.say('No candidates available.')
        except NoVotesCast:
            self.say('No votes cast yet.')
        else:
            n_votes = self.ledger.tally[winners[0]]
            self.say('Winner(s):')
            for name in winners:
                self.say(f' - {name} ({n_votes} votes)')

    def reset_election(self) -> None:
        self.ledger.reset()
        self.say('Election reset.')

    def remove_candidate(self) -> None:
        if not len(self.ledger):
            self.say('No candidates to remove.')
            return
        self.list_candidates()
        name = self.read_nonblank('Enter candidate name to remove: ')
        try:
            self.ledger.remove_candidate(name)
        except CandidateError as err:
            self.say(f'Cannot remove candidate: {err}')
        else:
            self.say(f'Removed candidate: {name}')

    def read_line(self, prompt: str) -> str:
        '''Prompt for and read a single line, stripped of whitespace.

        :raises EOFError: If the input is exhausted.
        '''
        self.outfile.write(prompt)
        self.outfile.flush()
        line = self.infile.readline()
        if not line:
            raise EOFError
        return line.strip()

    def read_int(self, prompt: str) -> int:
        while True:
            try:
                return int(self.read_line(prompt))
            except ValueError:
                self.say('Enter a valid number.')

    def read_nonblank(self, prompt: str) -> str:
        while True:
            value = self.read_line(prompt)
            if not votetally.util.is_blank(value):
                return value
            self.say('Input cannot be empty.')

    def say(self, message: str = '') -> None:
        print(message, file=self.outfile)


def main(candidate: Optional[List[str]] = None,
         verbose: bool = False,
         quiet: bool = False,
         infile: TextIO = sys.stdin,
         outfile: TextIO = sys.stdout,
         ) -> None:
    logging.basicConfig(
        level=(
            logging.DEBUG if verbose
            else (logging.WARNING if quiet else logging.INFO)
        ),
        format='%(levelname)-10s %(message)s'
    )
    ledger = ElectionLedger(candidate or ())
    TextMenu(ledger, infile=infile, outfile=outfile).run()


if __name__ == '__main__':
    args = argparser.parse_args()
    try:
        main(**vars(args))
    except (CandidateError, votetally.util.EmptyInput) as err:
        argparser.error(str(err))
