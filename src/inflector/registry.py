"""Mapping from locale identifiers to rule stores."""

__docformat__ = 'google'

__all__ = [
    'DEFAULT_LOCALE',
    'LocaleRegistry'
]

import logging
import threading
from typing import Callable, Dict, List, Optional

from inflector.defaults import apply_defaults
from inflector.store import RuleStore

logger = logging.getLogger(__name__)

DEFAULT_LOCALE: str = 'en'
"""Locale used when none is given, populated with the built-in English rules."""

class LocaleRegistry:
    """
    Independent rule stores keyed by locale.

    The default locale's store is populated when the registry is created.
    Other locales get an empty store on first access. Stores are never
    removed; `reset` empties a store in place.

    Args:
        default_locale: Locale used when none is given
        defaults: Function that populates the default locale's store, or None
            to start with every store empty

    Example:
        >>> registry = LocaleRegistry()
        >>> registry.get().locale
        'en'
        >>> registry.get('es').plurals
        []
    """
    def __init__(
        self,
        default_locale: str = DEFAULT_LOCALE,
        defaults: Optional[Callable[[RuleStore], RuleStore]] = apply_defaults
    ):
        self.default_locale = default_locale
        self._defaults = defaults
        self._stores: Dict[str, RuleStore] = {}
        self._locks: Dict[str, threading.RLock] = {}
        self._registry_lock = threading.Lock()
        self.reset(default_locale)

    def __contains__(self, locale: str) -> bool:
        return str(locale) in self._stores

    @property
    def locales(self) -> List[str]:
        return list(self._stores)

    def _key(self, locale: Optional[str]) -> str:
        return self.default_locale if locale is None else str(locale)

    def get(self, locale: Optional[str] = None) -> RuleStore:
        """
        Return the store for a locale, creating an empty one if needed.
        """
        key = self._key(locale)
        with self._registry_lock:
            if key not in self._stores:
                logger.debug('Creating rule store for locale %r', key)
                self._stores[key] = RuleStore(key)
                self._locks[key] = threading.RLock()
            return self._stores[key]

    def lock(self, locale: Optional[str] = None) -> threading.RLock:
        """
        Return the lock that serializes configuration of a locale's store.
        """
        self.get(locale)
        return self._locks[self._key(locale)]

    def reset(self, locale: Optional[str] = None) -> RuleStore:
        """
        Clear a store, then repopulate it if it belongs to the default locale.
        """
        key = self._key(locale)
        store = self.get(key)
        with self.lock(key):
            store.clear()
            if key == self.default_locale and self._defaults is not None:
                self._defaults(store)
        return store
