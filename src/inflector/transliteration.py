"""Replacement of non-ASCII characters and URL parameter formatting.

`Transliterator` is the collaborator `parameterize` calls to approximate
non-ASCII characters. Approximations can be stored per locale; characters
with no approximation are replaced.
"""

__docformat__ = 'google'

__all__ = [
    'Transliterator',
    'parameterize'
]

import logging
import re
import unicodedata
from functools import cached_property
from typing import Callable, Dict, Mapping, Optional

from inflector.lookups import ApproximationData
from inflector.patterns import UNSAFE_PARAMETER_CHARACTERS_PATTERN

logger = logging.getLogger(__name__)

class Transliterator:
    """
    ASCII approximations of Unicode text, optionally per locale.

    Lookup order for each character:
        1. Approximations stored for the requested locale
        2. Built-in Latin approximations (e.g. 'æ' -> 'ae', 'ß' -> 'ss')
        3. NFKD decomposition with combining marks dropped (e.g. 'é' -> 'e')

    Args:
        approximations: Built-in approximations; loaded from package data if None

    Example:
        >>> transliterator = Transliterator()
        >>> transliterator.transliterate('Ærøskøbing')
        'AEroskobing'
        >>> transliterator.store_rules('de', {'ü': 'ue'})
        >>> transliterator.transliterate('Fünf', locale='de')
        'Fuenf'
        >>> transliterator.transliterate('日本')
        '??'
    """
    def __init__(self, approximations: Optional[Mapping[str, str]] = None):
        if approximations is not None:
            self.__dict__['approximations'] = dict(approximations)
        self._locale_rules: Dict[str, Dict[str, str]] = {}

    @cached_property
    def approximations(self) -> Dict[str, str]:
        return ApproximationData().character_to_approximation

    def store_rules(self, locale: str, rules: Mapping[str, str]):
        """
        Add or overwrite approximations used only for one locale.
        """
        logger.debug('Storing %d transliteration rules for locale %r', len(rules), locale)
        self._locale_rules.setdefault(str(locale), {}).update(rules)

    def rules(self, locale: Optional[str] = None) -> Dict[str, str]:
        return {**self.approximations, **self._locale_rules.get(str(locale), {})}

    def transliterate(self, string: str, replacement: str = '?', locale: Optional[str] = None) -> str:
        rules = self.rules(locale)
        characters = []

        for character in unicodedata.normalize('NFC', str(string)):
            if character in rules:
                characters.append(rules[character])
            elif character.isascii():
                characters.append(character)
            else:
                characters.append(self._decompose(character) or replacement)

        return ''.join(characters)

    @staticmethod
    def _decompose(character: str) -> str:
        decomposed = unicodedata.normalize('NFKD', character)
        stripped = ''.join(c for c in decomposed if not unicodedata.combining(c))
        return stripped if stripped.isascii() else ''

def parameterize(
    string: str,
    separator: str = '-',
    preserve_case: bool = False,
    transliterate: Optional[Callable[[str], str]] = None
) -> str:
    """
    Format a string for use in a URL path segment.

    Args:
        string: Any text
        separator: Text placed between words
        preserve_case: Keep the original letter case
        transliterate: Function approximating non-ASCII text; defaults to
            a `Transliterator` with the built-in approximations

    Example:
        >>> parameterize('Donald E. Knuth')
        'donald-e-knuth'
        >>> parameterize('Squeeze   separators', separator='_')
        'squeeze_separators'
        >>> parameterize('Malmö', preserve_case=True)
        'Malmo'
    """
    if transliterate is None:
        transliterate = Transliterator().transliterate

    parameterized = UNSAFE_PARAMETER_CHARACTERS_PATTERN.sub(separator, transliterate(string))

    if separator:
        escaped = f'(?:{re.escape(separator)})'
        parameterized = re.sub(f'{escaped}{{2,}}', separator, parameterized)
        parameterized = re.sub(f'^{escaped}|{escaped}$', '', parameterized)

    return parameterized if preserve_case else parameterized.lower()
