import unittest
from simplepas.lang.pascal.symbol_table import SymbolTable
from simplepas.interpreter.values import Value


class SymbolTableTestCase(unittest.TestCase):
    def setUp(self):
        self.symbol_table = SymbolTable()

    def test_predefined_constants(self):
        self.assertEqual(Value.boolean(True), self.symbol_table['true'].value)
        self.assertEqual(
            Value.boolean(False), self.symbol_table['FALSE'].value)
        self.assertEqual(2, len(self.symbol_table))

    def test_lookup_is_case_insensitive(self):
        entry = self.symbol_table.enter('Count')
        self.assertEqual('count', entry.name)
        self.assertIs(entry, self.symbol_table.lookup('COUNT'))
        self.assertIn('count', self.symbol_table)

    def test_lookup_missing(self):
        self.assertIsNone(self.symbol_table.lookup('x'))
        self.assertNotIn('x', self.symbol_table)

    def test_fresh_entry_has_no_value(self):
        entry = self.symbol_table.enter('x')
        self.assertFalse(entry.is_assigned)
        entry.value = Value.integer(3)
        self.assertTrue(entry.is_assigned)

    def test_enter_replaces(self):
        first = self.symbol_table.enter('x')
        second = self.symbol_table.enter('x')
        self.assertIsNot(first, second)
        self.assertIs(second, self.symbol_table.lookup('x'))

    def test_iteration_is_sorted(self):
        self.symbol_table.enter('b')
        self.symbol_table.enter('a')
        self.assertSequenceEqual(
            ['a', 'b', 'false', 'true'],
            [entry.name for entry in self.symbol_table])


if __name__ == '__main__':
    unittest.main()
