"""Small string helpers used across the package."""

__docformat__ = 'google'

__all__ = [
    'chain_operations',
    'match_case',
    'upcase_first'
]

from functools import reduce
from typing import Callable, Iterable

from inflector.patterns import FIRST_WORD_CHARACTER_PATTERN

def chain_operations(value: str, operations: Iterable[Callable[[str], str]]) -> str:
    """
    Pass a value through a sequence of single-argument functions.

    Example:
        >>> chain_operations(' Admin ', [str.strip, str.lower])
        'admin'
    """
    return reduce(lambda result, operation: operation(result), operations, value)

def match_case(replacement: str, original: str) -> str:
    """
    Give the first letter of a replacement the case of the original's first letter.

    Args:
        replacement: Text to be inserted
        original: Text being replaced

    Returns:
        Replacement with its first letter upper- or lowercased

    Example:
        >>> match_case('los', 'El')
        'Los'
        >>> match_case('People', 'person')
        'people'
    """
    if not replacement or not original:
        return replacement
    elif original[0].isupper():
        return replacement[0].upper() + replacement[1:]
    else:
        return replacement[0].lower() + replacement[1:]

def upcase_first(string: str) -> str:
    """
    Uppercase the first character of a string if it is a word character.

    Example:
        >>> upcase_first('employee salary')
        'Employee salary'
        >>> upcase_first('¿qué?')
        '¿qué?'
    """
    return FIRST_WORD_CHARACTER_PATTERN.sub(lambda match: match.group().upper(), string, count=1)
