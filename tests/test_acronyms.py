import unittest
from inflector.acronyms import AcronymResolver

class TestAcronymResolver(unittest.TestCase):
    def test_lookup(self):
        acronyms = AcronymResolver()
        acronyms.add('PhD')
        self.assertEqual(acronyms.lookup('phd'), 'PhD')
        self.assertEqual(acronyms.lookup('PHD'), 'PhD')
        self.assertIsNone(acronyms.lookup('md'))
        self.assertIn('PHD', acronyms)

    def test_add_overwrites_canonical_form(self):
        acronyms = AcronymResolver()
        acronyms.add('Api')
        acronyms.add('API')
        self.assertEqual(acronyms.as_dict(), {'api': 'API'})

    def test_longest_first(self):
        acronyms = AcronymResolver()
        for acronym in ['API', 'REST', 'RESTful']:
            acronyms.add(acronym)
        self.assertEqual(acronyms.pattern.pattern, 'RESTful|REST|API')

    def test_empty_pattern_never_matches(self):
        acronyms = AcronymResolver()
        self.assertEqual(len(acronyms), 0)
        self.assertIsNone(acronyms.pattern.search('API'))
        self.assertIsNone(acronyms.underscore_pattern.search('APIController'))

    def test_patterns_follow_changes(self):
        acronyms = AcronymResolver()
        self.assertIsNone(acronyms.pattern.search('HTML'))
        acronyms.add('HTML')
        self.assertIsNotNone(acronyms.pattern.search('HTML'))
        self.assertEqual(acronyms.camelize_pattern.match('HTMLParser').group(), 'HTML')
        acronyms.clear()
        self.assertIsNone(acronyms.pattern.search('HTML'))
        self.assertEqual(acronyms.camelize_pattern.match('HTMLParser').group(), 'H')

    def test_copy_is_independent(self):
        acronyms = AcronymResolver()
        acronyms.add('API')
        copied = acronyms.copy()
        copied.add('HTML')
        self.assertEqual(acronyms.as_dict(), {'api': 'API'})
        self.assertEqual(len(copied), 2)

if __name__ == '__main__':
    unittest.main()
