"""Case conversion transforms: camel case, underscores, human-readable text.

All functions are total over strings: they never raise, and input without any
matching boundary passes through with only the requested change applied.

Transforms that recognize acronyms take an `AcronymResolver`; transforms that
also need human or plural rules take a whole `RuleStore`. Omitting either
behaves as if no rules were registered.
"""

__docformat__ = 'google'

__all__ = [
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
    'foreign_key'
]

from typing import Optional

from inflector.acronyms import AcronymResolver
from inflector.helpers import chain_operations, upcase_first
from inflector.plurals import pluralize, singularize
from inflector.store import RuleStore
from inflector.patterns import (
    NAMESPACE_SEPARATOR,
    PATH_SEPARATOR,
    LOWER_ALNUM_PATTERN,
    LEADING_LOWER_ALNUM_PATTERN,
    CAMELIZE_SEGMENT_PATTERN,
    UNDERSCORE_CANDIDATE_PATTERN,
    WORD_BOUNDARY_PATTERN,
    ALNUM_RUN_PATTERN,
    ID_SUFFIX,
    HUMANIZED_ID_SUFFIX,
    TITLE_WORD_START_PATTERN,
    TABLE_PREFIX_PATTERN
)

def _resolver(acronyms: Optional[AcronymResolver]) -> AcronymResolver:
    return AcronymResolver() if acronyms is None else acronyms

def _store(store: Optional[RuleStore]) -> RuleStore:
    return RuleStore() if store is None else store

def camelize(term: str, uppercase_first_letter: bool = True, acronyms: Optional[AcronymResolver] = None) -> str:
    """
    Convert an underscored term to CamelCase.

    Path separators ('/') become namespace separators ('::'). Segments that
    are registered acronyms take their canonical form.

    Args:
        term: Underscored term, e.g. 'active_model/errors'
        uppercase_first_letter: False to produce lowerCamelCase
        acronyms: Registered acronyms

    Returns:
        Camel-cased term

    Example:
        >>> camelize('active_model/errors')
        'ActiveModel::Errors'
        >>> camelize('special_guest', False)
        'specialGuest'
        >>> camelize('Camel_Case')
        'CamelCase'
    """
    acronyms = _resolver(acronyms)
    string = str(term)

    if not uppercase_first_letter:
        string = acronyms.camelize_pattern.sub(lambda match: match.group().lower(), string, count=1)
    elif LOWER_ALNUM_PATTERN.match(string):
        return acronyms.lookup(string) or string.capitalize()
    else:
        string = LEADING_LOWER_ALNUM_PATTERN.sub(
            lambda match: acronyms.lookup(match.group()) or match.group().capitalize(),
            string,
            count=1
            )

    def capitalize_segment(match) -> str:
        segment = match.group(2)
        substituted = acronyms.lookup(segment) or segment.capitalize()
        return NAMESPACE_SEPARATOR + substituted if match.group(1) else substituted

    return CAMELIZE_SEGMENT_PATTERN.sub(capitalize_segment, string)

def underscore(camel_cased_word: str, acronyms: Optional[AcronymResolver] = None) -> str:
    """
    Convert a CamelCase word to lowercase words joined by underscores.

    Namespace separators ('::') become path separators ('/') and dashes become
    underscores. Adjacent acronyms are split longest first.

    Args:
        camel_cased_word: Camel-cased word, e.g. 'ActiveModel::Errors'
        acronyms: Registered acronyms

    Returns:
        Underscored word

    Example:
        >>> underscore('ActiveModel::Errors')
        'active_model/errors'
        >>> underscore('HTMLTidyGenerator')
        'html_tidy_generator'
        >>> underscore('street-address')
        'street_address'
    """
    acronyms = _resolver(acronyms)
    word = str(camel_cased_word)

    if UNDERSCORE_CANDIDATE_PATTERN.search(word) is None:
        return word

    def split_acronym(match) -> str:
        return ('_' if match.group(1) else '') + match.group(2).lower()

    word = word.replace(NAMESPACE_SEPARATOR, PATH_SEPARATOR)
    word = acronyms.underscore_pattern.sub(split_acronym, word)
    word = WORD_BOUNDARY_PATTERN.sub('_', word)
    return word.replace('-', '_').lower()

def humanize(
    word: str,
    capitalize: bool = True,
    keep_id_suffix: bool = False,
    store: Optional[RuleStore] = None
) -> str:
    """
    Turn an underscored word into human-readable text.

    Operations performed:
        1. Apply the first matching human rule
        2. Replace underscores with spaces and strip leading whitespace
        3. Drop a trailing '_id' unless `keep_id_suffix`
        4. Lowercase every token that is not a registered acronym
        5. Capitalize the first word unless `capitalize` is False

    Args:
        word: Underscored word
        capitalize: Whether to capitalize the first word
        keep_id_suffix: Whether to keep a trailing 'id'
        store: Human rules and acronyms

    Example:
        >>> humanize('employee_salary')
        'Employee salary'
        >>> humanize('author_id')
        'Author'
        >>> humanize('author_id', capitalize=False, keep_id_suffix=True)
        'author id'
        >>> humanize('_external_id')
        'External'
    """
    store = _store(store)
    acronyms = store.acronym_resolver
    result = str(word)

    for rule in store.humans:
        humanized = rule.apply(result)
        if humanized is not None:
            result = humanized
            break

    result = result.replace('_', ' ').lstrip()

    if not keep_id_suffix and str(word).endswith(ID_SUFFIX) and result.endswith(HUMANIZED_ID_SUFFIX):
        result = result[:-len(HUMANIZED_ID_SUFFIX)]

    result = ALNUM_RUN_PATTERN.sub(
        lambda match: acronyms.lookup(match.group()) or match.group().lower(),
        result
        )

    if capitalize:
        result = upcase_first(result)
    return result

def titleize(word: str, keep_id_suffix: bool = False, store: Optional[RuleStore] = None) -> str:
    """
    Capitalize every word of a humanized string.

    Args:
        word: Any string
        keep_id_suffix: Whether to keep a trailing 'Id'
        store: Human rules and acronyms

    Example:
        >>> titleize('ActiveRecord')
        'Active Record'
        >>> titleize("david's code")
        "David's Code"
        >>> titleize('new name(s)')
        'New Name(s)'
        >>> titleize('EmployeeId', keep_id_suffix=True)
        'Employee Id'
    """
    store = _store(store)
    humanized = humanize(
        underscore(word, store.acronym_resolver),
        keep_id_suffix=keep_id_suffix,
        store=store
        )
    return TITLE_WORD_START_PATTERN.sub(lambda match: match.group().upper(), humanized)

def tableize(class_name: str, store: Optional[RuleStore] = None) -> str:
    """
    Derive a table name from a class name.

    Example:
        >>> from inflector.registry import LocaleRegistry
        >>> tableize('RawScaledScorer', LocaleRegistry().get())
        'raw_scaled_scorers'
    """
    store = _store(store)
    operations = [
        lambda name: underscore(name, store.acronym_resolver)
        , lambda name: pluralize(name, store)
    ]
    return chain_operations(class_name, operations)

def classify(table_name: str, store: Optional[RuleStore] = None) -> str:
    """
    Derive a class name from a table name, ignoring any schema prefix.

    Example:
        >>> from inflector.registry import LocaleRegistry
        >>> classify('schema.egg_and_hams', LocaleRegistry().get())
        'EggAndHam'
    """
    store = _store(store)
    operations = [
        lambda name: TABLE_PREFIX_PATTERN.sub('', name, count=1)
        , lambda name: singularize(name, store)
        , lambda name: camelize(name, acronyms=store.acronym_resolver)
    ]
    return chain_operations(str(table_name), operations)

def dasherize(underscored_word: str) -> str:
    """
    Replace underscores with dashes.

    Example:
        >>> dasherize('puni_puni')
        'puni-puni'
    """
    return underscored_word.replace('_', '-')

def demodulize(path: str) -> str:
    """
    Remove the namespace part of a constant path.

    Example:
        >>> demodulize('ActiveSupport::Inflector::Inflections')
        'Inflections'
        >>> demodulize('Inflections')
        'Inflections'
        >>> demodulize('::Inflections')
        'Inflections'
        >>> demodulize('')
        ''
    """
    path = str(path)
    index = path.rfind(NAMESPACE_SEPARATOR)
    if index == -1:
        return path
    return path[index + len(NAMESPACE_SEPARATOR):]

def deconstantize(path: str) -> str:
    """
    Remove the rightmost segment of a constant path.

    A leading separator is preserved.

    Example:
        >>> deconstantize('Net::HTTP::Get')
        'Net::HTTP'
        >>> deconstantize('::Net::HTTP')
        '::Net'
        >>> deconstantize('String')
        ''
        >>> deconstantize('::String')
        ''
    """
    path = str(path)
    index = path.rfind(NAMESPACE_SEPARATOR)
    return path[:max(index, 0)]

def foreign_key(
    class_name: str,
    separate_class_name_and_id_with_underscore: bool = True,
    acronyms: Optional[AcronymResolver] = None
) -> str:
    """
    Derive a foreign key column name from a class name.

    Example:
        >>> foreign_key('Message')
        'message_id'
        >>> foreign_key('Message', False)
        'messageid'
        >>> foreign_key('Admin::Post')
        'post_id'
    """
    suffix = '_id' if separate_class_name_and_id_with_underscore else 'id'
    return underscore(demodulize(class_name), acronyms) + suffix
