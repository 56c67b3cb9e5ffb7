
import sys
import os
import logging
import threading

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import votetally.ledger
import votetally.util
from votetally.candidate import DuplicateCandidate, UnknownCandidate
from votetally.evaluate import NoCandidates, NoVotesCast
from votetally.vote import AlreadyVoted


def make_ledger(votes):
    '''Create a ledger with the given candidates and vote counts.'''
    ledger = votetally.ledger.ElectionLedger(votes.keys())
    voter_i = 0
    for cand, n_votes in votes.items():
        for i in range(n_votes):
            ledger.cast_vote(f'voter{voter_i}', cand)
            voter_i += 1
    return ledger


def test_add_starts_at_zero():
    ledger = votetally.ledger.ElectionLedger()
    ledger.add_candidate('Alice')
    ledger.add_candidate('Bob')
    assert ledger.list_candidates() == [('Alice', 0), ('Bob', 0)]
    assert len(ledger) == 2
    assert 'Alice' in ledger


@pytest.mark.parametrize('names', [
    ['Alice', 'Alice'],
    ['Alice', 'Bob', 'Alice'],
    ['Zed', 'Bob', 'Zed', 'Bob'],
])
def test_add_duplicate(names):
    ledger = votetally.ledger.ElectionLedger()
    seen = set()
    for name in names:
        if name in seen:
            with pytest.raises(DuplicateCandidate):
                ledger.add_candidate(name)
        else:
            ledger.add_candidate(name)
            seen.add(name)
    assert sorted(ledger.candidates) == sorted(seen)
    assert all(n_votes == 0 for n_votes in ledger.tally.values())


def test_add_duplicate_keeps_votes():
    ledger = make_ledger({'Alice': 2})
    with pytest.raises(DuplicateCandidate) as excinfo:
        ledger.add_candidate('Alice')
    assert excinfo.value.candidate == 'Alice'
    assert ledger.tally == {'Alice': 2}


def test_names_case_sensitive():
    ledger = votetally.ledger.ElectionLedger(['alice', 'Alice'])
    assert ledger.candidates == ['Alice', 'alice']


@pytest.mark.parametrize('name', ['', '   ', '\t\n'])
def test_add_blank(name):
    ledger = votetally.ledger.ElectionLedger()
    with pytest.raises(votetally.util.EmptyInput):
        ledger.add_candidate(name)
    assert len(ledger) == 0


def test_init_duplicate():
    with pytest.raises(DuplicateCandidate):
        votetally.ledger.ElectionLedger(['Alice', 'Bob', 'Alice'])


def test_remove():
    ledger = make_ledger({'Alice': 2, 'Bob': 1})
    assert ledger.remove_candidate('Alice') == 2
    assert ledger.list_candidates() == [('Bob', 1)]
    assert 'Alice' not in ledger


def test_remove_unknown():
    ledger = make_ledger({'Alice': 1})
    with pytest.raises(UnknownCandidate) as excinfo:
        ledger.remove_candidate('Bob')
    assert excinfo.value.candidate == 'Bob'
    assert ledger.tally == {'Alice': 1}


def test_remove_keeps_voters_registered():
    ledger = votetally.ledger.ElectionLedger(['Alice', 'Bob'])
    ledger.cast_vote('v1', 'Alice')
    ledger.remove_candidate('Alice')
    assert ledger.has_voted('v1')
    with pytest.raises(AlreadyVoted):
        ledger.cast_vote('v1', 'Bob')
    assert ledger.tally == {'Bob': 0}
    assert ledger.total_votes_cast() == 1


def test_remove_with_votes_warns(caplog):
    ledger = make_ledger({'Alice': 3})
    with caplog.at_level(logging.WARNING, logger='votetally.ledger'):
        ledger.remove_candidate('Alice')
    assert any(
        rec.levelno == logging.WARNING and 'Alice' in rec.getMessage()
        for rec in caplog.records
    )


def test_vote():
    ledger = votetally.ledger.ElectionLedger(['Alice', 'Bob'])
    assert ledger.cast_vote('v1', 'Alice') == 1
    assert ledger.cast_vote('v2', 'Alice') == 2
    assert ledger.tally == {'Alice': 2, 'Bob': 0}
    assert ledger.has_voted('v1')
    assert not ledger.has_voted('v3')


@pytest.mark.parametrize('second_choice', ['Alice', 'Bob', 'Nobody'])
def test_vote_twice(second_choice):
    ledger = votetally.ledger.ElectionLedger(['Alice', 'Bob'])
    ledger.cast_vote('v1', 'Alice')
    with pytest.raises(AlreadyVoted) as excinfo:
        ledger.cast_vote('v1', second_choice)
    assert excinfo.value.voter_id == 'v1'
    assert ledger.tally == {'Alice': 1, 'Bob': 0}
    assert ledger.total_votes_cast() == 1


def test_vote_unknown_candidate():
    ledger = votetally.ledger.ElectionLedger(['Alice'])
    with pytest.raises(UnknownCandidate):
        ledger.cast_vote('v1', 'Bob')
    assert not ledger.has_voted('v1')
    assert ledger.tally == {'Alice': 0}
    assert ledger.total_votes_cast() == 0
    # the failed attempt does not use up the vote
    ledger.cast_vote('v1', 'Alice')
    assert ledger.tally == {'Alice': 1}


@pytest.mark.parametrize(('voter_id', 'candidate'), [
    ('', 'Alice'),
    (' ', 'Alice'),
    ('v1', ''),
    ('v1', '  '),
])
def test_vote_blank(voter_id, candidate):
    ledger = votetally.ledger.ElectionLedger(['Alice'])
    with pytest.raises(votetally.util.EmptyInput):
        ledger.cast_vote(voter_id, candidate)
    assert ledger.tally == {'Alice': 0}
    assert ledger.total_votes_cast() == 0


def test_list_sorted_by_name():
    ledger = make_ledger({'Carol': 1, 'Alice': 0, 'Bob': 4})
    assert ledger.list_candidates() == [('Alice', 0), ('Bob', 4), ('Carol', 1)]


def test_list_empty():
    assert votetally.ledger.ElectionLedger().list_candidates() == []


def test_results_descending():
    ledger = make_ledger({'Carol': 1, 'Alice': 0, 'Bob': 4})
    results = ledger.results()
    assert list(results.items()) == [('Bob', 4), ('Carol', 1), ('Alice', 0)]


def test_results_ties_by_name():
    ledger = make_ledger({'Dave': 2, 'Carol': 1, 'Bob': 2, 'Alice': 1})
    assert list(ledger.results()) == ['Bob', 'Dave', 'Alice', 'Carol']


def test_results_copy():
    ledger = make_ledger({'Alice': 1})
    results = ledger.results()
    results['Alice'] = 100
    assert ledger.results() == {'Alice': 1}


@pytest.mark.parametrize(('votes', 'winners'), [
    ({'Alice': 3, 'Bob': 3, 'Carol': 1}, ['Alice', 'Bob']),
    ({'Alice': 0, 'Bob': 1}, ['Bob']),
    ({'Carol': 2, 'Bob': 2, 'Alice': 2}, ['Alice', 'Bob', 'Carol']),
])
def test_winners(votes, winners):
    assert make_ledger(votes).winners() == winners


def test_winners_no_candidates():
    with pytest.raises(NoCandidates):
        votetally.ledger.ElectionLedger().winners()


def test_winners_no_votes():
    with pytest.raises(NoVotesCast):
        make_ledger({'Alice': 0, 'Bob': 0}).winners()


def test_reset():
    ledger = make_ledger({'Alice': 3, 'Bob': 1})
    ledger.reset()
    assert ledger.list_candidates() == [('Alice', 0), ('Bob', 0)]
    assert ledger.total_votes_cast() == 0
    assert not ledger.has_voted('voter0')
    # voters can vote again after the reset
    assert ledger.cast_vote('voter0', 'Bob') == 1


def test_reset_empty():
    ledger = votetally.ledger.ElectionLedger()
    ledger.reset()
    assert ledger.list_candidates() == []


@pytest.mark.parametrize('votes', [
    {},
    {'Alice': 0},
    {'Alice': 5, 'Bob': 2, 'Carol': 0},
    {'A': 1, 'B': 1, 'C': 1, 'D': 7},
])
def test_total_equals_sum(votes):
    ledger = make_ledger(votes)
    assert ledger.total_votes_cast() == sum(ledger.tally.values())
    assert ledger.total_votes_cast() == sum(votes.values())


def test_tally_copy():
    ledger = make_ledger({'Alice': 1})
    tally = ledger.tally
    tally['Bob'] = 5
    assert 'Bob' not in ledger


def test_concurrent_same_voter():
    ledger = votetally.ledger.ElectionLedger(['Alice', 'Bob'])
    outcomes = []

    def vote(cand):
        try:
            ledger.cast_vote('v1', cand)
        except AlreadyVoted:
            outcomes.append(False)
        else:
            outcomes.append(True)

    threads = [
        threading.Thread(target=vote, args=('Alice' if i % 2 else 'Bob', ))
        for i in range(20)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert outcomes.count(True) == 1
    assert sum(ledger.tally.values()) == 1
    assert ledger.total_votes_cast() == 1


def test_scenario():
    ledger = votetally.ledger.ElectionLedger()
    ledger.add_candidate('Alice')
    ledger.add_candidate('Bob')
    ledger.cast_vote('v1', 'Alice')
    with pytest.raises(AlreadyVoted):
        ledger.cast_vote('v1', 'Bob')
    ledger.cast_vote('v2', 'Bob')
    assert list(ledger.results().items()) == [('Alice', 1), ('Bob', 1)]
    assert ledger.winners() == ['Alice', 'Bob']
    assert ledger.total_votes_cast() == 2
