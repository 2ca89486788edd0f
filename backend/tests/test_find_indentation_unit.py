import math
import sys
import unittest
from unittest.mock import patch

from yamlindent.utils.indentation import find_indentation_unit

find_indentation_unit_module = sys.modules["yamlindent.utils.indentation.find_indentation_unit"]


class TestFindIndentationUnit(unittest.TestCase):

    def test_empty_levels(self):
        self.assertIsNone(find_indentation_unit([]))

    def test_all_levels_at_column_zero(self):
        self.assertIsNone(find_indentation_unit([0, 0, 0]))

    def test_single_transition(self):
        self.assertEqual(find_indentation_unit([0, 3]), 3)

    def test_multiple_levels(self):
        """Every transition is a multiple of the unit."""
        self.assertEqual(find_indentation_unit([0, 4, 8, 4, 0, 4]), 4)

    def test_dedent_by_several_levels(self):
        self.assertEqual(find_indentation_unit([0, 2, 4, 6, 0, 2]), 2)

    def test_first_line_already_indented(self):
        """The implicit starting level is 0."""
        self.assertEqual(find_indentation_unit([6, 6]), 6)

    def test_mixed_widths_collapse_to_one(self):
        self.assertEqual(find_indentation_unit([0, 2, 0, 3]), 1)

    def test_absolute_levels_are_included(self):
        # Transitions are all 4, but the level itself is 6
        self.assertEqual(find_indentation_unit([6, 10]), 2)

    def test_stops_once_unit_is_one(self):
        levels = [0, 2, 0, 3, 0, 5, 0, 7]
        with patch.object(find_indentation_unit_module, "gcd", wraps=math.gcd) as mock_gcd:
            self.assertEqual(find_indentation_unit(levels), 1)
        self.assertEqual(mock_gcd.call_count, 2)


if __name__ == '__main__':
    unittest.main()
