"""Acronym registry used by the case conversion transforms."""

__docformat__ = 'google'

__all__ = [
    'AcronymResolver'
]

import re
from functools import cached_property
from typing import Dict, Optional

from inflector.patterns import (
    NEVER_MATCHES,
    ACRONYM_CAMELIZE_TEMPLATE,
    ACRONYM_UNDERSCORE_TEMPLATE
)

class AcronymResolver:
    """
    Canonical acronym forms keyed by their lowercase form.

    The derived patterns try longer acronyms first, so that 'RESTful' wins
    over 'REST' at the same position. They are rebuilt lazily after every
    change to the acronym set.

    Example:
        >>> acronyms = AcronymResolver()
        >>> acronyms.add('API')
        >>> acronyms.add('RESTful')
        >>> acronyms.lookup('restful')
        'RESTful'
        >>> acronyms.pattern.pattern
        'RESTful|API'
    """
    _derived = ('pattern', 'camelize_pattern', 'underscore_pattern')

    def __init__(self, acronyms: Optional[Dict[str, str]] = None):
        self._acronyms: Dict[str, str] = dict(acronyms or {})

    def __contains__(self, word: str) -> bool:
        return word.lower() in self._acronyms

    def __len__(self) -> int:
        return len(self._acronyms)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._acronyms)

    def add(self, word: str):
        self._acronyms[word.lower()] = word
        self._invalidate()

    def clear(self):
        self._acronyms.clear()
        self._invalidate()

    def copy(self) -> 'AcronymResolver':
        return AcronymResolver(self._acronyms)

    def lookup(self, word: str) -> Optional[str]:
        """
        Return the canonical form of a registered acronym, or None.
        """
        return self._acronyms.get(word.lower())

    def _invalidate(self):
        for name in self._derived:
            self.__dict__.pop(name, None)

    @cached_property
    def pattern(self) -> re.Pattern:
        if not self._acronyms:
            return re.compile(NEVER_MATCHES)
        canonical = sorted(self._acronyms.values(), key=len, reverse=True)
        return re.compile('|'.join(map(re.escape, canonical)))

    @cached_property
    def camelize_pattern(self) -> re.Pattern:
        return re.compile(ACRONYM_CAMELIZE_TEMPLATE.format(acronyms=f'(?:{self.pattern.pattern})'))

    @cached_property
    def underscore_pattern(self) -> re.Pattern:
        return re.compile(ACRONYM_UNDERSCORE_TEMPLATE.format(acronyms=self.pattern.pattern))
