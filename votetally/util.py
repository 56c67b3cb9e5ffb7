'''Various utility functions for other modules of Votetally.

There should normally be no need to use these functions directly.
'''

import operator
from typing import Any, Dict, List, Tuple
from numbers import Number


class EmptyInput(ValueError):
    '''A required text input was empty or contained only whitespace.

    :param field: Name of the input field that was blank (e.g. candidate
        name, voter ID).
    '''
    def __init__(self, field: str):
        self.field = field
        super().__init__(f'{field} cannot be empty')


def is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def check_not_blank(value: Any, field: str) -> None:
    '''Raise :class:`EmptyInput` if the value is not a non-blank string.

    :param value: Value to be checked.
    :param field: Name of the input field, for the error message.
    :raises EmptyInput: If the value is blank.
    '''
    if is_blank(value):
        raise EmptyInput(field)


def sorted_votes(votes: Dict[Any, Number],
                 descending: bool = True,
                 ) -> List[Tuple[Any, Number]]:
    '''Return votes items sorted by value, ties broken by key ascending.'''
    by_key = sorted(votes.items(), key=operator.itemgetter(0))
    # sorted() is stable so the key order survives among equal values
    return list(sorted(
        by_key,
        key=operator.itemgetter(1),
        reverse=descending
    ))


def descending_dict(d: Dict[Any, Number]) -> Dict[Any, Number]:
    return dict(sorted_votes(d, descending=True))


def sorted_by_key(d: Dict[Any, Number]) -> List[Tuple[Any, Number]]:
    return list(sorted(d.items(), key=operator.itemgetter(0)))
