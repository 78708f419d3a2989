"""Loading, applying and saving inflection rule tables.

Rule tables are YAML documents with one list per rule kind:

```yaml
plurals:
  - {pattern: '(quiz)$', replacement: '\\1zes'}
singulars:
  - {literal: 'series', replacement: 'serie'}
irregulars:
  - {singular: person, plural: people}
uncountables: [equipment, money, {pattern: '^Fish$', case_sensitive: true}]
humans: []
acronyms: [API]
```

Rules are listed oldest first, in the order they are added to a store.
Tabular data (irregular pairs, transliteration approximations) is shipped as
CSV and read with pandas.
"""

__docformat__ = 'google'

__all__ = [
    'RuleData',
    'IrregularData',
    'ApproximationData'
]

import logging
from dataclasses import dataclass, field
from functools import cached_property
from keyword import iskeyword
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import pandas as pd
import yaml

from inflector.rules import Rule, Uncountable
from inflector.sources import ApproximationDataSource, IrregularDataSource, RuleDataSource
from inflector.store import RuleStore

logger = logging.getLogger(__name__)

class IrregularData(IrregularDataSource):
    def __init__(self, file_path = None):
        file_path = file_path or self.csv_path()
        with open(file_path, 'r', encoding='utf-8') as f:
            data = pd.read_csv(f, dtype=str, keep_default_na=False)
            for column in data.columns:
                if not iskeyword(column):
                    setattr(self, column, data[column])

    @cached_property
    def pairs(self) -> List[Tuple[str, str]]:
        return list(zip(self.singular, self.plural))

class ApproximationData(ApproximationDataSource):
    def __init__(self, file_path = None):
        file_path = file_path or self.csv_path()
        with open(file_path, 'r', encoding='utf-8') as f:
            data = pd.read_csv(f, dtype=str, keep_default_na=False)
            for column in data.columns:
                if not iskeyword(column):
                    setattr(self, column, data[column])

    @cached_property
    def character_to_approximation(self) -> Dict[str, str]:
        return dict(zip(self.character, self.approximation))

@dataclass
class RuleData(RuleDataSource):
    """
    A portable rule table for one locale.

    Args:
        plurals: Plural rule entries, oldest first
        singulars: Singular rule entries, oldest first
        irregulars: (singular, plural) pairs, oldest first
        uncountables: Uncountable words, or {pattern: ..., case_sensitive: ...} entries
        humans: Human rule entries, oldest first
        acronyms: Canonical acronym forms
    """
    plurals: List[Dict[str, Any]] = field(default_factory=list)
    singulars: List[Dict[str, Any]] = field(default_factory=list)
    irregulars: List[Tuple[str, str]] = field(default_factory=list)
    uncountables: List[Union[str, Dict[str, Any]]] = field(default_factory=list)
    humans: List[Dict[str, Any]] = field(default_factory=list)
    acronyms: List[str] = field(default_factory=list)

    @classmethod
    def default(cls) -> 'RuleData':
        """
        Built-in English rules: packaged YAML rules plus the irregulars table.
        """
        rule_data = cls.load_from_yaml(cls.yaml_path())
        rule_data.irregulars.extend(IrregularData().pairs)
        return rule_data

    @classmethod
    def load_from_yaml(cls, file_path = None) -> 'RuleData':
        file_path = file_path or cls.yaml_path()
        logger.debug('Loading inflection rules from %s', file_path)

        with Path(file_path).open('r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        return cls(
            plurals = list(data.get('plurals') or []),
            singulars = list(data.get('singulars') or []),
            irregulars = [
                (entry['singular'], entry['plural'])
                for entry in data.get('irregulars') or []
            ],
            uncountables = list(data.get('uncountables') or []),
            humans = list(data.get('humans') or []),
            acronyms = list(data.get('acronyms') or [])
        )

    @classmethod
    def from_store(cls, store: RuleStore) -> 'RuleData':
        """
        Capture the rules of a store in the order they would be re-added.
        """
        uncountables = [Uncountable(word).to_entry() for word in store.uncountables]
        return cls(
            plurals = [rule.to_dict() for rule in reversed(store.plurals)],
            singulars = [rule.to_dict() for rule in reversed(store.singulars)],
            irregulars = [(entry.singular, entry.plural) for entry in reversed(store.irregulars)],
            uncountables = uncountables,
            humans = [rule.to_dict() for rule in reversed(store.humans)],
            acronyms = list(store.acronyms.values())
        )

    def save_to_yaml(self, file_path):
        serializable_data = {
            'plurals': self.plurals,
            'singulars': self.singulars,
            'irregulars': [
                {'singular': singular, 'plural': plural}
                for singular, plural in self.irregulars
            ],
            'uncountables': self.uncountables,
            'humans': self.humans,
            'acronyms': self.acronyms
        }

        with Path(file_path).open('w', encoding='utf-8') as f:
            yaml.dump(serializable_data, f, sort_keys=False, allow_unicode=True)

    def apply(self, store: RuleStore):
        """
        Add every rule in this table to a store, in table order.

        Raises:
            ValueError: If a rule entry has neither a pattern nor a literal
        """
        for entry in self.plurals:
            rule = Rule.from_dict(entry)
            store.add_plural(self._matcher(rule), rule.replacement.template)
        for entry in self.singulars:
            rule = Rule.from_dict(entry)
            store.add_singular(self._matcher(rule), rule.replacement.template)
        for singular, plural in self.irregulars:
            store.add_irregular(singular, plural)
        store.add_uncountable([Uncountable.from_entry(entry).word for entry in self.uncountables])
        for entry in self.humans:
            rule = Rule.from_dict(entry, full_match=True)
            store.add_human(self._matcher(rule), rule.replacement.template)
        for acronym in self.acronyms:
            store.add_acronym(acronym)

    @staticmethod
    def _matcher(rule: Rule):
        return rule.literal if rule.literal is not None else rule.matcher
