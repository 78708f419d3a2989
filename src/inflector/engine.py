"""The inflection engine: an explicit instance owning its locale rule stores.

Example:
    >>> inflector = Inflector()
    >>> inflector.pluralize('person')
    'people'
    >>> with inflector.configure() as inflect:
    ...     inflect.add_acronym('API')
    >>> inflector.camelize('api_controller')
    'APIController'
    >>> inflector.humanize('api_controller')
    'API controller'
"""

__docformat__ = 'google'

__all__ = [
    'Inflector',
    'InflectionsBuilder'
]

import logging
import re
from contextlib import contextmanager
from typing import Any, Iterable, Iterator, Optional, Union

from inflector import cases, numbers, plurals, resolve
from inflector.defaults import apply_defaults
from inflector.registry import DEFAULT_LOCALE, LocaleRegistry
from inflector.store import RuleStore, Scope
from inflector.transliteration import Transliterator, parameterize

logger = logging.getLogger(__name__)

Word = Union[str, re.Pattern]

class InflectionsBuilder:
    """
    Configuration handle for a single locale's store.

    Returned by `Inflector.configure`; only valid inside the `with` block.
    Read access (`plurals`, `uncountables`, ...) reflects changes made so far.
    """
    def __init__(self, store: RuleStore):
        self._store = store

    @property
    def locale(self) -> str:
        return self._store.locale

    @property
    def plurals(self):
        return self._store.plurals

    @property
    def singulars(self):
        return self._store.singulars

    @property
    def irregulars(self):
        return self._store.irregulars

    @property
    def uncountables(self):
        return self._store.uncountables

    @property
    def humans(self):
        return self._store.humans

    @property
    def acronyms(self):
        return self._store.acronyms

    def add_plural(self, pattern: Word, replacement: str):
        self._store.add_plural(pattern, replacement)

    def add_singular(self, pattern: Word, replacement: str):
        self._store.add_singular(pattern, replacement)

    def add_irregular(self, singular: str, plural: str):
        self._store.add_irregular(singular, plural)

    def add_uncountable(self, *words: Union[Word, Iterable[Word]]):
        self._store.add_uncountable(*words)

    def remove_uncountable(self, word: Word):
        self._store.remove_uncountable(word)

    def add_human(self, pattern: Word, replacement: str):
        self._store.add_human(pattern, replacement)

    def add_acronym(self, word: str):
        self._store.add_acronym(word)

    def clear(self, scope: Union[Scope, str] = Scope.ALL):
        self._store.clear(scope)

class Inflector:
    """
    Inflection engine with independent rule stores per locale.

    Args:
        default_locale: Locale used when a call does not name one
        defaults: Whether to populate the default locale with the built-in
            English rules
        transliterator: Collaborator used by `parameterize` and `transliterate`
    """
    def __init__(
        self,
        default_locale: str = DEFAULT_LOCALE,
        defaults: bool = True,
        transliterator: Optional[Transliterator] = None
    ):
        self.registry = LocaleRegistry(default_locale, apply_defaults if defaults else None)
        self.transliterator = transliterator or Transliterator()

    @property
    def default_locale(self) -> str:
        return self.registry.default_locale

    ## Configuration
    def inflections(self, locale: Optional[str] = None) -> RuleStore:
        """
        Return the rule store of a locale for direct access.
        """
        return self.registry.get(locale)

    @contextmanager
    def configure(self, locale: Optional[str] = None) -> Iterator[InflectionsBuilder]:
        """
        Change the rules of one locale inside a `with` block.

        Changes are made under the locale's lock. If the block raises, the
        store is restored to its state on entry and the exception propagates.

        Example:
            >>> inflector = Inflector()
            >>> with inflector.configure('es') as inflect:
            ...     inflect.add_plural(re.compile('$'), 's')
            ...     inflect.add_plural(re.compile('z$', re.I), 'ces')
            >>> inflector.pluralize('luz', 'es'), inflector.pluralize('luz')
            ('luces', 'luzs')
        """
        store = self.registry.get(locale)
        with self.registry.lock(locale):
            snapshot = store.snapshot()
            try:
                yield InflectionsBuilder(store)
            except BaseException:
                logger.debug('Rolling back inflection changes for locale %r', store.locale)
                store.restore(snapshot)
                raise

    def reset(self, locale: Optional[str] = None) -> RuleStore:
        """
        Clear a locale's rules, restoring the built-in rules for the default locale.
        """
        return self.registry.reset(locale)

    ## Plurals
    def pluralize(self, word: str, locale: Optional[str] = None) -> str:
        return plurals.pluralize(word, self.inflections(locale))

    def singularize(self, word: str, locale: Optional[str] = None) -> str:
        return plurals.singularize(word, self.inflections(locale))

    ## Cases
    def camelize(self, term: str, uppercase_first_letter: bool = True, locale: Optional[str] = None) -> str:
        return cases.camelize(term, uppercase_first_letter, self.inflections(locale).acronym_resolver)

    def underscore(self, camel_cased_word: str, locale: Optional[str] = None) -> str:
        return cases.underscore(camel_cased_word, self.inflections(locale).acronym_resolver)

    def humanize(
        self,
        word: str,
        capitalize: bool = True,
        keep_id_suffix: bool = False,
        locale: Optional[str] = None
    ) -> str:
        return cases.humanize(word, capitalize, keep_id_suffix, self.inflections(locale))

    def titleize(self, word: str, keep_id_suffix: bool = False, locale: Optional[str] = None) -> str:
        return cases.titleize(word, keep_id_suffix, self.inflections(locale))

    def tableize(self, class_name: str, locale: Optional[str] = None) -> str:
        return cases.tableize(class_name, self.inflections(locale))

    def classify(self, table_name: str, locale: Optional[str] = None) -> str:
        return cases.classify(table_name, self.inflections(locale))

    def foreign_key(
        self,
        class_name: str,
        separate_class_name_and_id_with_underscore: bool = True,
        locale: Optional[str] = None
    ) -> str:
        return cases.foreign_key(
            class_name,
            separate_class_name_and_id_with_underscore,
            self.inflections(locale).acronym_resolver
            )

    def dasherize(self, underscored_word: str) -> str:
        return cases.dasherize(underscored_word)

    def upcase_first(self, string: str) -> str:
        return cases.upcase_first(string)

    def demodulize(self, path: str) -> str:
        return cases.demodulize(path)

    def deconstantize(self, path: str) -> str:
        return cases.deconstantize(path)

    ## Numbers
    def ordinal(self, number: numbers.Number) -> str:
        return numbers.ordinal(number)

    def ordinalize(self, number: numbers.Number) -> str:
        return numbers.ordinalize(number)

    ## Transliteration
    def transliterate(self, string: str, replacement: str = '?', locale: Optional[str] = None) -> str:
        return self.transliterator.transliterate(string, replacement, locale)

    def parameterize(
        self,
        string: str,
        separator: str = '-',
        preserve_case: bool = False,
        locale: Optional[str] = None
    ) -> str:
        return parameterize(
            string,
            separator,
            preserve_case,
            lambda text: self.transliterator.transliterate(text, locale=locale)
            )

    ## Constants
    def constantize(self, name: str) -> Any:
        return resolve.constantize(name)

    def safe_constantize(self, name: str) -> Optional[Any]:
        return resolve.safe_constantize(name)
