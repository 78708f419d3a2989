"""Resolution of constant paths ('collections.OrderedDict') to Python objects."""

__docformat__ = 'google'

__all__ = [
    'ConstantNotFoundError',
    'constantize',
    'safe_constantize'
]

import builtins
import logging
from importlib import import_module
from typing import Any, List, Optional

from inflector.patterns import NAMESPACE_SEPARATOR

logger = logging.getLogger(__name__)

class ConstantNotFoundError(NameError):
    """Raised when a constant path does not name an existing object."""

def _segments(name: str) -> List[str]:
    path = str(name).replace(NAMESPACE_SEPARATOR, '.').strip('.')
    return [segment for segment in path.split('.') if segment]

def _import_prefix(segments: List[str]):
    """Import the longest module prefix of a dotted path.

    Returns the module and the number of segments it consumed.
    """
    for length in range(len(segments), 0, -1):
        module_name = '.'.join(segments[:length])
        try:
            return import_module(module_name), length
        except ModuleNotFoundError as error:
            # a missing dependency inside an existing module is a real error
            missing = error.name or ''
            if not (module_name == missing or module_name.startswith(missing + '.')):
                raise
    return builtins, 0

def constantize(name: str) -> Any:
    """
    Find the object named by a dotted or '::'-separated constant path.

    Args:
        name: Path such as 'collections.OrderedDict' or 'os::path::join'

    Returns:
        The named module, class, function or attribute

    Raises:
        ConstantNotFoundError: If no object has that name

    Example:
        >>> constantize('collections.OrderedDict').__name__
        'OrderedDict'
        >>> constantize('int')
        <class 'int'>
    """
    segments = _segments(name)
    if not segments:
        raise ConstantNotFoundError(f'{name!r} is not a constant path', name=str(name))

    value, consumed = _import_prefix(segments)
    for segment in segments[consumed:]:
        try:
            value = getattr(value, segment)
        except AttributeError:
            raise ConstantNotFoundError(f'uninitialized constant {name}', name=segment) from None
    return value

def safe_constantize(name: str) -> Optional[Any]:
    """
    Like `constantize`, but return None when the name cannot be resolved.

    Example:
        >>> safe_constantize('collections.NoSuchThing') is None
        True
    """
    try:
        return constantize(name)
    except ConstantNotFoundError:
        logger.debug('Could not resolve constant %r', name)
        return None
