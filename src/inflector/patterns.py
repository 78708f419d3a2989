"""Regex patterns and building blocks shared by the inflection transforms.

Patterns that depend on the registered acronyms are not defined here; they are
derived per rule store by `inflector.acronyms.AcronymResolver`.
"""

__docformat__ = 'google'

import re

## Namespaces
NAMESPACE_SEPARATOR: str = '::'
"""Separator between namespace segments in camelized output (e.g. 'Admin::Product')."""

PATH_SEPARATOR: str = '/'
"""Separator between namespace segments in underscored output (e.g. 'admin/product')."""

## Acronyms
NEVER_MATCHES: str = '(?=a)b'
"""Uncompiled regex that cannot match anything.

Stands in for the acronym alternation while no acronyms are registered."""

ACRONYM_CAMELIZE_TEMPLATE: str = '^(?:{acronyms}(?=\\b|[A-Z_])|\\w)'
"""Template for the leading token lowercased by `camelize(..., uppercase_first_letter=False)`.

A registered acronym is only recognized at the start of the string when it is
followed by a word boundary, an uppercase letter or an underscore."""

ACRONYM_UNDERSCORE_TEMPLATE: str = '(?:(?<=([A-Za-z\\d]))|\\b)({acronyms})(?=\\b|[^a-z])'
"""Template for acronyms split out by `underscore`.

Capture groups:
    1. the character preceding the acronym, if any
    2. the acronym itself"""

## Camelize
LOWER_ALNUM_PATTERN: re.Pattern = re.compile('\\A[a-z\\d]*\\Z')
"""Matches a single lowercase segment with no separators (e.g. 'product')."""

LEADING_LOWER_ALNUM_PATTERN: re.Pattern = re.compile('^[a-z\\d]*')
"""Matches the lowercase run at the start of a term, possibly empty."""

CAMELIZE_SEGMENT_PATTERN: re.Pattern = re.compile('(?:_|(/))([a-z\\d]*)', re.I)
"""Matches a separator and the segment that follows it.

Capture groups:
    1. the path separator, when the separator is '/'
    2. the segment"""

## Underscore
UNDERSCORE_CANDIDATE_PATTERN: re.Pattern = re.compile('[A-Z-]|::')
"""Matches anything `underscore` would change. Strings without a match are returned as-is."""

WORD_BOUNDARY_PATTERN: re.Pattern = re.compile(
    '(?<=[A-Z])(?=[A-Z][a-z])|(?<=[a-z\\d])(?=[A-Z])'
    )
"""Zero-width positions where an underscore is inserted.

Matches between an uppercase run and a capitalized word ('HTMLTidy') and
between a lowercase letter or digit and an uppercase letter ('areaCode')."""

## Humanize
ALNUM_RUN_PATTERN: re.Pattern = re.compile('[a-z\\d]+', re.I)
"""Matches each alphanumeric token of a humanized string."""

FIRST_WORD_CHARACTER_PATTERN: re.Pattern = re.compile('\\A\\w')
"""Matches the first character of a string when it is a word character."""

ID_SUFFIX: str = '_id'
"""Suffix marking a foreign key column, dropped by `humanize` unless kept."""

HUMANIZED_ID_SUFFIX: str = ' id'

## Titleize
TITLE_WORD_START_PATTERN: re.Pattern = re.compile("\\b(?<!\\w['’`()])[a-z]")
"""Matches a lowercase letter starting a word.

Letters that follow an apostrophe, backtick or parenthesis attached to a word
("david's", 'name(s)') are not word starts."""

## Classify
TABLE_PREFIX_PATTERN: re.Pattern = re.compile('.*\\.')
"""Matches a schema or table prefix (e.g. 'schema.')."""

## Replacement templates
TEMPLATE_SLOT_PATTERN: re.Pattern = re.compile('\\\\(?:(\\d)|g<(\\d+)>)')
"""Matches a capture slot in a replacement template.

Capture groups:
    1. single digit slot ('\\1')
    2. named-form slot ('\\g<12>')"""

## Parameterize
UNSAFE_PARAMETER_CHARACTERS_PATTERN: re.Pattern = re.compile('[^a-z0-9\\-_]+', re.I)
"""Matches runs of characters that are not allowed in a URL parameter."""
