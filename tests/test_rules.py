import re
import unittest
from inflector.rules import Irregular, Replacement, Rule, Uncountable

class TestReplacement(unittest.TestCase):
    def test_expand_numbered_slots(self):
        match = re.search('(quiz)$', 'quiz')
        self.assertEqual(Replacement('\\1zes').expand(match), 'quizzes')

    def test_expand_named_form_slot(self):
        match = re.search('(ox)$', 'ox')
        self.assertEqual(Replacement('\\g<1>en').expand(match), 'oxen')

    def test_whole_match_slot(self):
        match = re.search('ab', 'xaby')
        self.assertEqual(Replacement('[\\0]').expand(match), '[ab]')

    def test_unmatched_group_expands_to_empty(self):
        match = re.search('(?:([^f])fe|([lr])f)$', 'wife')
        self.assertEqual(Replacement('\\1\\2ves').expand(match), 'ives')

    def test_missing_group_expands_to_empty(self):
        match = re.search('^prefx_', 'prefx_request', re.I)
        self.assertEqual(Replacement('\\1').expand(match), '')

    def test_plain_template(self):
        self.assertEqual(Replacement('ces').parts, ('ces',))

class TestRule(unittest.TestCase):
    def test_apply_replaces_first_match_only(self):
        rule = Rule.build(re.compile('s$', re.I), '')
        self.assertEqual(rule.apply('posts'), 'post')

    def test_apply_without_match(self):
        rule = Rule.build(re.compile('(quiz)$', re.I), '\\1zes')
        self.assertIsNone(rule.apply('post'))

    def test_literal_matches_anywhere_case_insensitively(self):
        rule = Rule.build('series', 'serie')
        self.assertEqual(rule.apply('Series'), 'serie')
        self.assertEqual(rule.apply('tv_series'), 'tv_serie')

    def test_literal_full_match(self):
        rule = Rule.build('col_rpted_bugs', 'Reported bugs', full_match=True)
        self.assertEqual(rule.apply('COL_rpted_bugs'), 'Reported bugs')
        self.assertIsNone(rule.apply('old_col_rpted_bugs'))

    def test_literal_is_escaped(self):
        rule = Rule.build('a.b', 'c')
        self.assertIsNone(rule.apply('axb'))

    def test_to_dict(self):
        self.assertEqual(
            Rule.build(re.compile('(ox)$', re.I), '\\1en').to_dict(),
            {'pattern': '(ox)$', 'replacement': '\\1en'}
        )
        self.assertEqual(
            Rule.build(re.compile('$'), 's').to_dict(),
            {'pattern': '$', 'replacement': 's', 'case_sensitive': True}
        )
        self.assertEqual(
            Rule.build('series', 'serie').to_dict(),
            {'literal': 'series', 'replacement': 'serie'}
        )

    def test_from_dict(self):
        rule = Rule.from_dict({'pattern': '(quiz)$', 'replacement': '\\1zes'})
        self.assertEqual(rule.apply('QUIZ'), 'QUIZzes')

        rule = Rule.from_dict({'pattern': 'z$', 'replacement': 'ces', 'case_sensitive': True})
        self.assertIsNone(rule.apply('LUZ'))

        rule = Rule.from_dict({'literal': 'col_cnt', 'replacement': 'Count'}, full_match=True)
        self.assertEqual(rule.literal, 'col_cnt')
        self.assertIsNone(rule.apply('my_col_cnt'))

    def test_from_dict_without_pattern_or_literal(self):
        with self.assertRaises(ValueError):
            Rule.from_dict({'replacement': 's'})

class TestIrregular(unittest.TestCase):
    def setUp(self):
        self.person = Irregular('person', 'people')

    def test_tail_match(self):
        self.assertEqual(self.person.pluralize('salesperson'), 'salespeople')
        self.assertEqual(self.person.singularize('salespeople'), 'salesperson')

    def test_case_of_first_letter_is_kept(self):
        self.assertEqual(self.person.pluralize('Person'), 'People')
        self.assertEqual(self.person.singularize('People'), 'Person')
        self.assertEqual(Irregular('el', 'los').pluralize('El'), 'Los')

    def test_already_inflected(self):
        self.assertEqual(self.person.pluralize('people'), 'people')
        self.assertEqual(self.person.singularize('person'), 'person')

    def test_plural_form_is_tried_first(self):
        sex = Irregular('sex', 'sexes')
        self.assertEqual(sex.pluralize('sexes'), 'sexes')
        self.assertEqual(sex.singularize('sexes'), 'sex')

    def test_no_match(self):
        self.assertIsNone(self.person.pluralize('personnel'))
        self.assertIsNone(self.person.singularize('post'))

    def test_involves(self):
        self.assertTrue(self.person.involves('PEOPLE'))
        self.assertFalse(self.person.involves('salesperson'))

class TestUncountable(unittest.TestCase):
    def test_literal_matches_trailing_word(self):
        ors = Uncountable('ors')
        self.assertTrue(ors.matches('ors'))
        self.assertTrue(ors.matches('two ors'))
        self.assertFalse(ors.matches('sponsors'))

    def test_literal_is_case_insensitive(self):
        self.assertTrue(Uncountable('money').matches('My Money'))

    def test_pattern(self):
        uncountable = Uncountable(re.compile('pokemon$', re.I))
        self.assertTrue(uncountable.matches('Pikachu Pokemon'))
        self.assertTrue(uncountable.matches('pokemon'))
        self.assertEqual(uncountable.key, ('pokemon$', uncountable.word.flags))

    def test_pattern_and_literal_keys_differ(self):
        self.assertNotEqual(Uncountable('Abc').key, Uncountable(re.compile('Abc')).key)

    def test_table_entries(self):
        self.assertEqual(Uncountable('money').to_entry(), 'money')
        self.assertEqual(Uncountable(re.compile('crisis$', re.I)).to_entry(), {'pattern': 'crisis$'})
        self.assertEqual(
            Uncountable(re.compile('^Fish$')).to_entry(),
            {'pattern': '^Fish$', 'case_sensitive': True}
        )

    def test_from_table_entry(self):
        fish = Uncountable.from_entry({'pattern': '^Fish$', 'case_sensitive': True})
        self.assertTrue(fish.matches('Fish'))
        self.assertFalse(fish.matches('fish'))
        self.assertTrue(Uncountable.from_entry({'pattern': 'crisis$'}).matches('CRISIS'))
        self.assertEqual(Uncountable.from_entry('money').word, 'money')

if __name__ == '__main__':
    unittest.main()
