import unittest

from xpath_search.query.pairs import NameValuesPair, starter_list
from xpath_search.utils.errors import ValidationError


class TestNameValuesPair(unittest.TestCase):

    def test_values_keep_order(self):
        pair = NameValuesPair("status", "draft", "review", "published")
        self.assertEqual(pair.name, "status")
        self.assertEqual(pair.values, ("draft", "review", "published"))

    def test_list_argument_is_flattened(self):
        pair = NameValuesPair("status", ["draft", "review"])
        self.assertEqual(pair.values, ("draft", "review"))

    def test_values_may_be_empty(self):
        pair = NameValuesPair("status")
        self.assertEqual(pair.values, ())

    def test_none_value_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            NameValuesPair("status", "draft", None)
        self.assertIn("status", str(ctx.exception))

    def test_immutable(self):
        pair = NameValuesPair("status", "draft")
        with self.assertRaises(AttributeError):
            pair.name = "other"
        with self.assertRaises(AttributeError):
            pair.values = ("x",)

    def test_structural_equality(self):
        self.assertEqual(NameValuesPair("a", "1", "2"), NameValuesPair("a", ["1", "2"]))
        self.assertNotEqual(NameValuesPair("a", "1", "2"), NameValuesPair("a", "2", "1"))
        self.assertEqual(len({NameValuesPair("a", "1"), NameValuesPair("a", "1")}), 1)

    def test_starter_list(self):
        pairs = starter_list("status", "draft")
        self.assertEqual(pairs, [NameValuesPair("status", "draft")])

        pairs.append(NameValuesPair("owner", "jdoe"))
        self.assertEqual(len(pairs), 2)


if __name__ == '__main__':
    unittest.main()
