__docformat__ = 'google'

__all__ = [
    'default_inflector',
    'inflections',
    'configure',
    'pluralize',
    'singularize',
    'camelize',
    'underscore',
    'humanize',
    'titleize',
    'tableize',
    'classify',
    'dasherize',
    'upcase_first',
    'demodulize',
    'deconstantize',
    'foreign_key',
    'ordinal',
    'ordinalize',
    'transliterate',
    'parameterize',
    'constantize',
    'safe_constantize'
]

from functools import cache
from typing import Any, ContextManager, Optional

from inflector.engine import InflectionsBuilder, Inflector
from inflector.numbers import Number
from inflector.store import RuleStore

@cache
def default_inflector() -> Inflector:
    """
    The shared engine, created with the built-in English rules on first use.
    """
    return Inflector()

def inflections(locale: Optional[str] = None) -> RuleStore:
    return default_inflector().inflections(locale)

def configure(locale: Optional[str] = None) -> ContextManager[InflectionsBuilder]:
    """
    Change the shared rules of a locale inside a `with` block.

    Example:
        >>> with configure() as inflect:
        ...     inflect.add_uncountable('luggage')
        >>> pluralize('luggage')
        'luggage'
    """
    return default_inflector().configure(locale)

def pluralize(word: str, locale: Optional[str] = None) -> str:
    """
    Example:
        >>> pluralize('octopus')
        'octopi'
        >>> pluralize('CamelOctopus')
        'CamelOctopi'
    """
    return default_inflector().pluralize(word, locale)

def singularize(word: str, locale: Optional[str] = None) -> str:
    """
    Example:
        >>> singularize('word')
        'word'
        >>> singularize('CamelOctopi')
        'CamelOctopus'
    """
    return default_inflector().singularize(word, locale)

def camelize(term: str, uppercase_first_letter: bool = True, locale: Optional[str] = None) -> str:
    return default_inflector().camelize(term, uppercase_first_letter, locale)

def underscore(camel_cased_word: str, locale: Optional[str] = None) -> str:
    return default_inflector().underscore(camel_cased_word, locale)

def humanize(
    word: str,
    capitalize: bool = True,
    keep_id_suffix: bool = False,
    locale: Optional[str] = None
) -> str:
    return default_inflector().humanize(word, capitalize, keep_id_suffix, locale)

def titleize(word: str, keep_id_suffix: bool = False, locale: Optional[str] = None) -> str:
    return default_inflector().titleize(word, keep_id_suffix, locale)

def tableize(class_name: str, locale: Optional[str] = None) -> str:
    """
    Example:
        >>> tableize('fancyCategory')
        'fancy_categories'
    """
    return default_inflector().tableize(class_name, locale)

def classify(table_name: str, locale: Optional[str] = None) -> str:
    """
    Example:
        >>> classify('ham_and_eggs')
        'HamAndEgg'
    """
    return default_inflector().classify(table_name, locale)

def dasherize(underscored_word: str) -> str:
    return default_inflector().dasherize(underscored_word)

def upcase_first(string: str) -> str:
    """
    Example:
        >>> upcase_first('what a Lovely Day')
        'What a Lovely Day'
    """
    return default_inflector().upcase_first(string)

def demodulize(path: str) -> str:
    return default_inflector().demodulize(path)

def deconstantize(path: str) -> str:
    return default_inflector().deconstantize(path)

def foreign_key(
    class_name: str,
    separate_class_name_and_id_with_underscore: bool = True,
    locale: Optional[str] = None
) -> str:
    return default_inflector().foreign_key(class_name, separate_class_name_and_id_with_underscore, locale)

def ordinal(number: Number) -> str:
    return default_inflector().ordinal(number)

def ordinalize(number: Number) -> str:
    return default_inflector().ordinalize(number)

def transliterate(string: str, replacement: str = '?', locale: Optional[str] = None) -> str:
    return default_inflector().transliterate(string, replacement, locale)

def parameterize(
    string: str,
    separator: str = '-',
    preserve_case: bool = False,
    locale: Optional[str] = None
) -> str:
    """
    Example:
        >>> parameterize('Donald E. Knuth')
        'donald-e-knuth'
    """
    return default_inflector().parameterize(string, separator, preserve_case, locale)

def constantize(name: str) -> Any:
    return default_inflector().constantize(name)

def safe_constantize(name: str) -> Optional[Any]:
    return default_inflector().safe_constantize(name)
