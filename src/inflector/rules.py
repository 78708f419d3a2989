"""Typed values for inflection rules.

Rules are stored as data rather than as bare regex objects so that rule tables
can be loaded from and written back to YAML (see `inflector.lookups.RuleData`).
"""

__docformat__ = 'google'

__all__ = [
    'Replacement',
    'Rule',
    'Irregular',
    'Uncountable'
]

import re
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Dict, Optional, Tuple, Union

from inflector.helpers import match_case
from inflector.patterns import TEMPLATE_SLOT_PATTERN

@dataclass(frozen=True)
class Replacement:
    """
    A replacement template with indexed capture slots.

    Slots are written `\\1` (single digit) or `\\g<12>`; `\\0` is the whole match.
    A slot naming a group that does not exist, or that did not take part in
    the match, expands to an empty string.

    Example:
        >>> match = re.search('(?:([^f])fe|([lr])f)$', 'half')
        >>> Replacement('\\\\1\\\\2ves').expand(match)
        'lves'
    """
    template: str

    @cached_property
    def parts(self) -> Tuple[Union[str, int], ...]:
        parts = []
        position = 0
        for slot in TEMPLATE_SLOT_PATTERN.finditer(self.template):
            if slot.start() > position:
                parts.append(self.template[position:slot.start()])
            parts.append(int(slot.group(1) or slot.group(2)))
            position = slot.end()
        if position < len(self.template):
            parts.append(self.template[position:])
        return tuple(parts)

    def expand(self, match: re.Match) -> str:
        expanded = []
        for part in self.parts:
            if isinstance(part, str):
                expanded.append(part)
            elif part <= match.re.groups:
                expanded.append(match.group(part) or '')
        return ''.join(expanded)

@dataclass(frozen=True)
class Rule:
    """
    An ordered pair of matcher and replacement.

    Args:
        matcher: Compiled pattern searched for in the word
        replacement: Template substituted for the first match
        literal: The literal text the matcher was built from, if any
    """
    matcher: re.Pattern
    replacement: Replacement
    literal: Optional[str] = None

    @classmethod
    def build(cls, pattern: Union[str, re.Pattern], replacement: str, full_match: bool = False) -> 'Rule':
        """
        Build a rule from a compiled pattern or a literal string.

        Literal strings are matched case-insensitively. With `full_match` they
        must match the whole word, otherwise they may match anywhere in it.

        Example:
            >>> Rule.build(re.compile('(quiz)$', re.I), '\\\\1zes').apply('Quiz')
            'Quizzes'
            >>> Rule.build('col_rpted_bugs', 'Reported bugs', full_match=True).apply('COL_RPTED_BUGS')
            'Reported bugs'
        """
        if isinstance(pattern, re.Pattern):
            return cls(pattern, Replacement(replacement))

        source = re.escape(pattern)
        if full_match:
            source = f'\\A{source}\\Z'
        return cls(re.compile(source, re.I), Replacement(replacement), literal=pattern)

    def apply(self, word: str) -> Optional[str]:
        """
        Substitute the first match in a word.

        Returns:
            The substituted word, or None if the rule does not match
        """
        match = self.matcher.search(word)
        if match is None:
            return None
        return word[:match.start()] + self.replacement.expand(match) + word[match.end():]

    def to_dict(self) -> Dict[str, Any]:
        if self.literal is not None:
            return {'literal': self.literal, 'replacement': self.replacement.template}

        entry = {'pattern': self.matcher.pattern, 'replacement': self.replacement.template}
        if not self.matcher.flags & re.I:
            entry['case_sensitive'] = True
        return entry

    @classmethod
    def from_dict(cls, entry: Dict[str, Any], full_match: bool = False) -> 'Rule':
        replacement = entry.get('replacement', '')
        if 'literal' in entry:
            return cls.build(entry['literal'], replacement, full_match)
        elif 'pattern' in entry:
            flags = 0 if entry.get('case_sensitive') else re.I
            return cls.build(re.compile(entry['pattern'], flags), replacement)
        else:
            raise ValueError(f'Rule entry has neither a pattern nor a literal: {entry}')

@dataclass(frozen=True)
class Irregular:
    """
    A singular/plural pair that does not follow the pattern rules.

    Either form is matched case-insensitively at the end of a word, so compound
    words inflect too. The replaced tail keeps the case of the matched tail's
    first letter.

    Example:
        >>> person = Irregular('person', 'people')
        >>> person.pluralize('Salesperson')
        'Salespeople'
        >>> person.singularize('People')
        'Person'
        >>> person.pluralize('people')
        'people'
        >>> person.pluralize('personnel') is None
        True
    """
    singular: str
    plural: str

    @cached_property
    def _tail_patterns(self) -> Tuple[re.Pattern, ...]:
        # plural form first so that 'sexes' is not read as 'sex' + 'es'
        return tuple(
            re.compile(f'{re.escape(form)}\\Z', re.I)
            for form in (self.plural, self.singular)
        )

    def _replace_tail(self, word: str, target: str) -> Optional[str]:
        for pattern in self._tail_patterns:
            match = pattern.search(word)
            if match:
                return word[:match.start()] + match_case(target, match.group())
        return None

    def pluralize(self, word: str) -> Optional[str]:
        return self._replace_tail(word, self.plural)

    def singularize(self, word: str) -> Optional[str]:
        return self._replace_tail(word, self.singular)

    def involves(self, word: str) -> bool:
        return word.lower() in (self.singular.lower(), self.plural.lower())

@dataclass(frozen=True)
class Uncountable:
    """
    A word with identical singular and plural forms.

    Literal words match only as the exact trailing word of the input.
    Compiled patterns are searched as given.

    Example:
        >>> Uncountable('ors').matches('sponsors')
        False
        >>> Uncountable('jeans').matches('funky jeans')
        True
    """
    word: Union[str, re.Pattern]

    @cached_property
    def matcher(self) -> re.Pattern:
        if isinstance(self.word, re.Pattern):
            return self.word
        return re.compile(f'\\b{re.escape(self.word)}\\Z', re.I)

    @property
    def key(self) -> Union[str, Tuple[str, int]]:
        # patterns never collide with literal words of the same text
        if isinstance(self.word, re.Pattern):
            return (self.word.pattern, self.word.flags)
        return self.word

    def to_entry(self) -> Union[str, Dict[str, Any]]:
        if not isinstance(self.word, re.Pattern):
            return self.word

        entry = {'pattern': self.word.pattern}
        if not self.word.flags & re.I:
            entry['case_sensitive'] = True
        return entry

    @classmethod
    def from_entry(cls, entry: Union[str, Dict[str, Any]]) -> 'Uncountable':
        """
        Build an uncountable from a word or a {pattern: ...} table entry.

        Patterns are case-insensitive unless the entry sets `case_sensitive`.
        """
        if not isinstance(entry, dict):
            return cls(entry)
        flags = 0 if entry.get('case_sensitive') else re.I
        return cls(re.compile(entry['pattern'], flags))

    def matches(self, word: str) -> bool:
        return self.matcher.search(word) is not None
