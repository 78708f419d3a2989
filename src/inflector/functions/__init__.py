"""
Module-level inflection functions backed by a shared, process-wide `Inflector`.

This module provides the plural, case and URL transforms as plain functions,
plus `inflections` and `configure` for changing the shared rules.
"""

from .functions import __all__
from .functions import *

__all__ = __all__
