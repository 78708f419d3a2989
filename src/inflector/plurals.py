"""Pluralization and singularization over a rule store.

Both directions apply the same precedence:
    1. Uncountable words are returned unchanged.
    2. Irregular pairs are matched at the end of the word, most recent first.
    3. Pattern rules are tried most recent first; the first match is applied once.
"""

__docformat__ = 'google'

__all__ = [
    'pluralize',
    'singularize'
]

from typing import Callable, List, Optional

from inflector.rules import Irregular, Rule
from inflector.store import RuleStore

def _apply_inflections(
    word: str,
    store: RuleStore,
    irregular: Callable[[Irregular, str], Optional[str]],
    rules: List[Rule]
) -> str:
    if not word or store.is_uncountable(word):
        return word

    for entry in store.irregulars:
        inflected = irregular(entry, word)
        if inflected is not None:
            return inflected

    for rule in rules:
        inflected = rule.apply(word)
        if inflected is not None:
            return inflected

    return word

def pluralize(word: str, store: RuleStore) -> str:
    """
    Return the plural form of a word.

    Args:
        word: A singular (or already plural) word
        store: Rules for the locale of the word

    Returns:
        The plural form, or the word unchanged if no rule applies

    Example:
        >>> from inflector.registry import LocaleRegistry
        >>> english = LocaleRegistry().get()
        >>> pluralize('post', english)
        'posts'
        >>> pluralize('Octopus', english)
        'Octopi'
        >>> pluralize('salesperson', english)
        'salespeople'
        >>> pluralize('sheep', english)
        'sheep'
    """
    return _apply_inflections(word, store, Irregular.pluralize, store.plurals)

def singularize(word: str, store: RuleStore) -> str:
    """
    Return the singular form of a word.

    Args:
        word: A plural (or already singular) word
        store: Rules for the locale of the word

    Returns:
        The singular form, or the word unchanged if no rule applies

    Example:
        >>> from inflector.registry import LocaleRegistry
        >>> english = LocaleRegistry().get()
        >>> singularize('posts', english)
        'post'
        >>> singularize('People', english)
        'Person'
        >>> singularize('analyses', english)
        'analysis'
    """
    return _apply_inflections(word, store, Irregular.singularize, store.singulars)
