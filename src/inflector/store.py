"""Per-locale collections of inflection rules.

A `RuleStore` holds the plural, singular, irregular, uncountable, human and
acronym rules for one locale. Rules added later take precedence over rules
added earlier, and every list can be cleared independently.
"""

__docformat__ = 'google'

__all__ = [
    'Scope',
    'RuleStore',
    'StoreSnapshot'
]

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Hashable, Iterable, List, Union

from inflector.acronyms import AcronymResolver
from inflector.rules import Irregular, Rule, Uncountable

logger = logging.getLogger(__name__)

Word = Union[str, re.Pattern]

class Scope(Enum):
    """
    Rule lists that `RuleStore.clear` can empty.
    """
    PLURALS = 'plurals'
    SINGULARS = 'singulars'
    IRREGULARS = 'irregulars'
    UNCOUNTABLES = 'uncountables'
    HUMANS = 'humans'
    ACRONYMS = 'acronyms'
    ALL = 'all'

@dataclass(frozen=True)
class StoreSnapshot:
    """ A copy of every rule list in a store, taken by `RuleStore.snapshot`.
    """
    plurals: List[Rule]
    singulars: List[Rule]
    irregulars: List[Irregular]
    uncountables: Dict[Hashable, Uncountable]
    humans: List[Rule]
    acronyms: AcronymResolver

class RuleStore:
    """
    Mutable, ordered inflection rules for a single locale.

    Lists are kept in precedence order: index 0 holds the most recently added
    rule, which is the first one tried.

    Args:
        locale: Identifier of the locale the rules belong to

    Example:
        >>> store = RuleStore('es')
        >>> store.add_plural(re.compile('$'), 's')
        >>> store.add_plural(re.compile('z$', re.I), 'ces')
        >>> [rule.replacement.template for rule in store.plurals]
        ['ces', 's']
    """
    def __init__(self, locale: str = 'en'):
        self.locale = locale
        self._plurals: List[Rule] = []
        self._singulars: List[Rule] = []
        self._irregulars: List[Irregular] = []
        self._uncountables: Dict[Hashable, Uncountable] = {}
        self._humans: List[Rule] = []
        self._acronyms = AcronymResolver()

    def __repr__(self) -> str:
        return f'RuleStore(locale={self.locale!r})'

    ## Read access
    @property
    def plurals(self) -> List[Rule]:
        return list(self._plurals)

    @property
    def singulars(self) -> List[Rule]:
        return list(self._singulars)

    @property
    def irregulars(self) -> List[Irregular]:
        return list(self._irregulars)

    @property
    def uncountables(self) -> List[Word]:
        return [entry.word for entry in self._uncountables.values()]

    @property
    def humans(self) -> List[Rule]:
        return list(self._humans)

    @property
    def acronyms(self) -> Dict[str, str]:
        return self._acronyms.as_dict()

    @property
    def acronym_resolver(self) -> AcronymResolver:
        return self._acronyms

    def is_uncountable(self, word: str) -> bool:
        """
        Check whether the trailing word of the input is uncountable.

        Example:
            >>> store = RuleStore()
            >>> store.add_uncountable('ors')
            >>> store.is_uncountable('ors'), store.is_uncountable('sponsors')
            (True, False)
        """
        return any(entry.matches(word) for entry in self._uncountables.values())

    ## Mutation
    def add_plural(self, pattern: Word, replacement: str):
        """
        Add a pluralization rule that takes precedence over all earlier ones.

        A literal string pattern, and the replacement, stop being uncountable.
        """
        self._make_countable(pattern, replacement)
        self._plurals.insert(0, Rule.build(pattern, replacement))

    def add_singular(self, pattern: Word, replacement: str):
        """
        Add a singularization rule that takes precedence over all earlier ones.

        Example:
            >>> store = RuleStore()
            >>> store.add_uncountable('series')
            >>> store.add_singular('series', 'serie')
            >>> store.uncountables
            []
        """
        self._make_countable(pattern, replacement)
        self._singulars.insert(0, Rule.build(pattern, replacement))

    def add_irregular(self, singular: str, plural: str):
        """
        Add an irregular pair, checked before any pattern rule in both directions.

        An earlier pair sharing either form is replaced.
        """
        self._make_countable(singular, plural)
        self._irregulars = [
            entry for entry in self._irregulars
            if not (entry.involves(singular) or entry.involves(plural))
        ]
        self._irregulars.insert(0, Irregular(singular, plural))

    def add_uncountable(self, *words: Union[Word, Iterable[Word]]):
        """
        Mark one or more words (or compiled patterns) as uncountable.

        Example:
            >>> store = RuleStore()
            >>> store.add_uncountable('fish', ['sheep', 'fish'])
            >>> store.uncountables
            ['fish', 'sheep']
        """
        for word in words:
            if isinstance(word, (str, re.Pattern)):
                entry = Uncountable(word)
                self._uncountables.setdefault(entry.key, entry)
            else:
                self.add_uncountable(*word)

    def remove_uncountable(self, word: Word):
        self._uncountables.pop(Uncountable(word).key, None)

    def add_human(self, pattern: Word, replacement: str):
        """
        Add a humanize rule. Literal strings must match the whole word.
        """
        self._humans.insert(0, Rule.build(pattern, replacement, full_match=True))

    def add_acronym(self, word: str):
        self._acronyms.add(word)

    def clear(self, scope: Union[Scope, str] = Scope.ALL):
        """
        Empty one rule list, or all of them.

        Args:
            scope: A `Scope` member or its name

        Raises:
            ValueError: If the scope is not a known scope name
        """
        scope = Scope(scope)
        logger.debug('Clearing %s rules for locale %r', scope.value, self.locale)

        if scope in (Scope.ALL, Scope.PLURALS):
            self._plurals = []
        if scope in (Scope.ALL, Scope.SINGULARS):
            self._singulars = []
        if scope in (Scope.ALL, Scope.IRREGULARS):
            self._irregulars = []
        if scope in (Scope.ALL, Scope.UNCOUNTABLES):
            self._uncountables = {}
        if scope in (Scope.ALL, Scope.HUMANS):
            self._humans = []
        if scope in (Scope.ALL, Scope.ACRONYMS):
            self._acronyms.clear()

    def snapshot(self) -> StoreSnapshot:
        return StoreSnapshot(
            plurals = list(self._plurals),
            singulars = list(self._singulars),
            irregulars = list(self._irregulars),
            uncountables = dict(self._uncountables),
            humans = list(self._humans),
            acronyms = self._acronyms.copy()
        )

    def restore(self, snapshot: StoreSnapshot):
        self._plurals = list(snapshot.plurals)
        self._singulars = list(snapshot.singulars)
        self._irregulars = list(snapshot.irregulars)
        self._uncountables = dict(snapshot.uncountables)
        self._humans = list(snapshot.humans)
        self._acronyms = snapshot.acronyms.copy()

    def _make_countable(self, *words: Word):
        for word in words:
            if isinstance(word, str):
                self.remove_uncountable(word)
