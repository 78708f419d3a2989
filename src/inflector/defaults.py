"""Built-in English inflections.

The packaged rule table is read once per process and applied to the default
locale's store by `inflector.registry.LocaleRegistry`.
"""

__docformat__ = 'google'

__all__ = [
    'default_rules',
    'apply_defaults'
]

import logging
from functools import cache

from inflector.lookups import RuleData
from inflector.store import RuleStore

logger = logging.getLogger(__name__)

@cache
def default_rules() -> RuleData:
    return RuleData.default()

def apply_defaults(store: RuleStore) -> RuleStore:
    """
    Add the built-in English rules to a store.

    Args:
        store: Store to populate, usually empty

    Returns:
        The same store
    """
    default_rules().apply(store)
    logger.debug('Applied default inflections to locale %r', store.locale)
    return store
