# -*- coding: utf-8 -*-
""" Some generic laguage level utilities for internal use. """

from typing import Callable, Iterable, Optional, TypeVar, Union

T = TypeVar("T")

Lazy = Union[T, Callable[[], T]]


def lazy(maybe_callable: Union[T, Callable[[], T]]) -> T:
    """ Calls a value if callable else returns it.

    >>> lazy(42)
    42

    >>> lazy(lambda: 42)
    42
    """
    if callable(maybe_callable):
        return maybe_callable()
    return maybe_callable


def find_one(
    iterable: Iterable[T], predicate: Callable[[T], bool]
) -> Optional[T]:
    """ Extract first item matching a predicate function in an iterable.
    Returns ``None`` if no entry is found.

    >>> find_one([1, 2, 3, 4], lambda x: x == 2)
    2

    >>> find_one([1, 2, 3, 4], lambda x: x == 5) is None
    True
    """
    for entry in iterable:
        if predicate(entry):
            return entry
    return None
