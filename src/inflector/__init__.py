"""
.. include:: ../../README.md

See individual module documentation for detailed information.
"""
from . import cases
from . import functions
from . import numbers
from . import patterns
from . import plurals
from . import registry
from . import resolve
from . import store
from . import transliteration

from .engine import Inflector, InflectionsBuilder
from .resolve import ConstantNotFoundError
from .store import RuleStore, Scope

__all__ = [
    'cases',
    'functions',
    'numbers',
    'patterns',
    'plurals',
    'registry',
    'resolve',
    'store',
    'transliteration',
    'Inflector',
    'InflectionsBuilder',
    'ConstantNotFoundError',
    'RuleStore',
    'Scope'
]
