"""English ordinal suffixes."""

__docformat__ = 'google'

__all__ = [
    'ordinal',
    'ordinalize'
]

from typing import Union

Number = Union[int, float, str]

def ordinal(number: Number) -> str:
    """
    Return the suffix that turns a number into an ordinal.

    The sign and any fractional part are ignored, and 11 through 13 always
    take 'th'.

    Example:
        >>> ordinal(1), ordinal(2), ordinal(3), ordinal(4)
        ('st', 'nd', 'rd', 'th')
        >>> ordinal(1012)
        'th'
        >>> ordinal(-1021)
        'st'
        >>> ordinal('12.5')
        'th'
    """
    try:
        value = abs(int(number))
    except ValueError:
        # decimal strings such as '1.5'
        value = abs(int(float(number)))
    if value % 100 in (11, 12, 13):
        return 'th'
    return {1: 'st', 2: 'nd', 3: 'rd'}.get(value % 10, 'th')

def ordinalize(number: Number) -> str:
    """
    Turn a number into an ordinal string.

    Example:
        >>> ordinalize(22)
        '22nd'
        >>> ordinalize('-11')
        '-11th'
    """
    return f'{number}{ordinal(number)}'
