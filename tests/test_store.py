import re
import unittest
from inflector.defaults import apply_defaults
from inflector.registry import LocaleRegistry
from inflector.store import RuleStore, Scope

def populated_store(locale='en'):
    store = RuleStore(locale)
    store.add_plural(re.compile('$'), 's')
    store.add_singular(re.compile('s$'), '')
    store.add_irregular('person', 'people')
    store.add_uncountable('fish')
    store.add_human(re.compile('_cnt$', re.I), '_count')
    store.add_acronym('API')
    return store

class TestRuleOrder(unittest.TestCase):
    def test_most_recent_rule_first(self):
        store = RuleStore()
        store.add_plural(re.compile('$'), 's')
        store.add_plural(re.compile('z$', re.I), 'ces')
        self.assertEqual([rule.replacement.template for rule in store.plurals], ['ces', 's'])

    def test_duplicate_rules_are_allowed(self):
        store = RuleStore()
        store.add_plural(re.compile('$'), 's')
        store.add_plural(re.compile('$'), 's')
        self.assertEqual(len(store.plurals), 2)

    def test_read_access_returns_copies(self):
        store = populated_store()
        store.plurals.clear()
        store.acronyms.clear()
        self.assertEqual(len(store.plurals), 1)
        self.assertEqual(store.acronyms, {'api': 'API'})

class TestIrregulars(unittest.TestCase):
    def test_later_pair_replaces_earlier(self):
        store = RuleStore()
        store.add_irregular('octopus', 'octopi')
        store.add_irregular('octopus', 'octopodes')
        self.assertEqual(
            [(entry.singular, entry.plural) for entry in store.irregulars],
            [('octopus', 'octopodes')]
        )

    def test_irregular_makes_words_countable(self):
        store = RuleStore()
        store.add_uncountable('cow', 'kine')
        store.add_irregular('cow', 'kine')
        self.assertEqual(store.uncountables, [])

class TestUncountables(unittest.TestCase):
    def test_ordered_set_semantics(self):
        store = RuleStore()
        store.add_uncountable('fish', ['sheep', 'fish'], ('rice',))
        store.add_uncountable('sheep')
        self.assertEqual(store.uncountables, ['fish', 'sheep', 'rice'])

    def test_pattern_uncountable(self):
        store = RuleStore()
        pattern = re.compile('pokemon$', re.I)
        store.add_uncountable(pattern)
        self.assertTrue(store.is_uncountable('Shiny Pokemon'))
        self.assertEqual(store.uncountables, [pattern])

    def test_trailing_word_only(self):
        store = RuleStore()
        store.add_uncountable('ors')
        self.assertTrue(store.is_uncountable('ors'))
        self.assertFalse(store.is_uncountable('sponsors'))

    def test_remove_uncountable(self):
        store = RuleStore()
        store.add_uncountable('fish', 'sheep')
        store.remove_uncountable('fish')
        store.remove_uncountable('not_there')
        self.assertEqual(store.uncountables, ['sheep'])

    def test_pattern_and_literal_of_same_text(self):
        store = RuleStore()
        pattern = re.compile('Abc')
        store.add_uncountable('Abc', pattern)
        self.assertEqual(len(store.uncountables), 2)
        self.assertTrue(store.is_uncountable('xAbcx'))
        store.remove_uncountable(pattern)
        self.assertEqual(store.uncountables, ['Abc'])
        self.assertFalse(store.is_uncountable('xAbcx'))

    def test_literal_rule_makes_word_countable(self):
        store = RuleStore()
        store.add_uncountable('series')
        store.add_singular('series', 'serie')
        self.assertFalse(store.is_uncountable('series'))

    def test_pattern_rule_keeps_uncountables(self):
        store = RuleStore()
        store.add_uncountable('series')
        store.add_singular(re.compile('series$'), 'serie')
        self.assertTrue(store.is_uncountable('series'))

class TestClear(unittest.TestCase):
    def test_clear_all(self):
        store = populated_store()
        store.clear()
        self.assertEqual(store.plurals, [])
        self.assertEqual(store.singulars, [])
        self.assertEqual(store.irregulars, [])
        self.assertEqual(store.uncountables, [])
        self.assertEqual(store.humans, [])
        self.assertEqual(store.acronyms, {})

    def test_clear_single_scope(self):
        scopes = {
            'plurals': lambda store: store.plurals,
            'singulars': lambda store: store.singulars,
            'irregulars': lambda store: store.irregulars,
            'uncountables': lambda store: store.uncountables,
            'humans': lambda store: store.humans,
            'acronyms': lambda store: store.acronyms
        }
        for cleared in scopes:
            with self.subTest(scope=cleared):
                store = populated_store()
                store.clear(cleared)
                for scope, read in scopes.items():
                    if scope == cleared:
                        self.assertFalse(read(store))
                    else:
                        self.assertTrue(read(store))

    def test_clear_accepts_scope_member(self):
        store = populated_store()
        store.clear(Scope.ACRONYMS)
        self.assertEqual(store.acronyms, {})
        self.assertEqual(len(store.plurals), 1)

    def test_clear_empty_store(self):
        store = RuleStore()
        store.clear()
        store.clear('humans')
        self.assertEqual(store.humans, [])

    def test_unknown_scope(self):
        with self.assertRaises(ValueError):
            RuleStore().clear('verbs')

    def test_clear_does_not_affect_other_stores(self):
        english = populated_store('en')
        spanish = populated_store('es')
        spanish.clear()
        self.assertEqual(len(english.plurals), 1)
        self.assertEqual(english.acronyms, {'api': 'API'})

class TestSnapshot(unittest.TestCase):
    def test_restore(self):
        store = populated_store()
        snapshot = store.snapshot()
        store.add_plural(re.compile('z$'), 'ces')
        store.add_uncountable('agua')
        store.add_acronym('HTML')
        store.clear('humans')
        store.restore(snapshot)
        self.assertEqual(len(store.plurals), 1)
        self.assertEqual(store.uncountables, ['fish'])
        self.assertEqual(store.acronyms, {'api': 'API'})
        self.assertEqual(len(store.humans), 1)

    def test_snapshot_is_independent(self):
        store = populated_store()
        snapshot = store.snapshot()
        store.add_acronym('HTML')
        self.assertEqual(snapshot.acronyms.as_dict(), {'api': 'API'})

class TestLocaleRegistry(unittest.TestCase):
    def test_default_locale_is_populated(self):
        registry = LocaleRegistry()
        self.assertIn('en', registry)
        self.assertTrue(registry.get().plurals)
        self.assertIn('sheep', registry.get('en').uncountables)

    def test_other_locales_start_empty(self):
        registry = LocaleRegistry()
        self.assertNotIn('es', registry)
        store = registry.get('es')
        self.assertEqual(store.locale, 'es')
        self.assertEqual(store.plurals, [])
        self.assertIs(registry.get('es'), store)
        self.assertEqual(registry.locales, ['en', 'es'])

    def test_without_defaults(self):
        registry = LocaleRegistry(defaults=None)
        self.assertEqual(registry.get().plurals, [])

    def test_custom_default_locale(self):
        registry = LocaleRegistry('en-GB')
        self.assertEqual(registry.get().locale, 'en-GB')
        self.assertTrue(registry.get().plurals)

    def test_reset(self):
        registry = LocaleRegistry()
        registry.get().clear()
        registry.get('es').add_plural(re.compile('$'), 's')
        registry.reset()
        registry.reset('es')
        self.assertEqual(len(registry.get().plurals), len(apply_defaults(RuleStore()).plurals))
        self.assertEqual(registry.get('es').plurals, [])

    def test_stores_do_not_share_rules(self):
        registry = LocaleRegistry()
        registry.get('es').add_acronym('ONU')
        self.assertEqual(registry.get().acronyms, {})

    def test_lock_is_reentrant(self):
        registry = LocaleRegistry()
        with registry.lock('es'):
            with registry.lock('es'):
                registry.get('es').add_uncountable('agua')
        self.assertEqual(registry.get('es').uncountables, ['agua'])

if __name__ == '__main__':
    unittest.main()
