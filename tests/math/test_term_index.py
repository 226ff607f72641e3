from booleanomial.math.term_index import term_index, term_variables, variable_count, check_term_count, MAX_TERM_COUNT
from booleanomial.utilities.exceptions import InvalidTermCountException, OutOfRangeException
import unittest


class TermIndexTestCase(unittest.TestCase):
    def test_index_of_subset(self):
        self.assertEqual(term_index([]), 0)
        self.assertEqual(term_index([0]), 1)
        self.assertEqual(term_index([0, 2]), 5)
        self.assertEqual(term_index([2, 1, 0]), 7)


    def test_subset_of_index(self):
        self.assertEqual(term_variables(0), [])
        self.assertEqual(term_variables(6), [1, 2])
        self.assertEqual(term_variables(255), list(range(8)))


    def test_bijection(self):
        for idx in range(MAX_TERM_COUNT):
            self.assertEqual(term_index(term_variables(idx)), idx)


    def test_negative(self):
        self.assertRaises(OutOfRangeException, lambda: term_index([-1]))
        self.assertRaises(OutOfRangeException, lambda: term_variables(-1))


    def test_variable_count(self):
        for v in range(9):
            self.assertEqual(variable_count(1 << v), v)


    def test_invalid_term_count(self):
        for n in [0, -4, 3, 6, 12, 512, 1024, 2.0, '8', None]:
            self.assertRaises(InvalidTermCountException, lambda: check_term_count(n))


    def test_invalid_term_count_is_value_error(self):
        self.assertRaises(ValueError, lambda: variable_count(5))
