import unittest

from xpath_search.providers.base import QueryType, SortOrder
from xpath_search.providers.memory_provider import InMemorySearchService, ListResultCursor, SimpleManagedObject

from .utils import TEST_USER, make_objects


class TestListResultCursor(unittest.TestCase):

    def test_positions_are_one_based(self):
        objects = make_objects(2)
        cursor = ListResultCursor(objects)
        self.assertIsNone(cursor.get_result(0))
        self.assertIs(cursor.get_result(1).managed_object, objects[0])
        self.assertIs(cursor.get_result(2).managed_object, objects[1])
        self.assertIsNone(cursor.get_result(3))


class TestInMemorySearchService(unittest.TestCase):

    def test_registered_results_take_precedence(self):
        defaults = make_objects(2, prefix="default")
        registered = make_objects(1, prefix="registered")
        service = InMemorySearchService(defaults, {"/a": registered})

        cursor = service.construct_search(TEST_USER, QueryType.XPATH, "/a").get_results()
        self.assertEqual(cursor.get_result(1).managed_object.id, "registered-1")
        self.assertIsNone(cursor.get_result(2))

        cursor = service.construct_search(TEST_USER, QueryType.XPATH, "/b").get_results()
        self.assertEqual(cursor.get_result(2).managed_object.id, "default-2")

    def test_records_submissions(self):
        service = InMemorySearchService()
        service.construct_search(TEST_USER, QueryType.XPATH, "/a", [SortOrder("id")])
        self.assertEqual(len(service.submitted), 1)
        self.assertEqual(service.submitted[0].query, "/a")
        self.assertEqual(service.submitted[0].sort_order, [SortOrder("id")])

    def test_sort_keys_in_priority_order(self):
        objects = [
            SimpleManagedObject("1", kind="b", title="x"),
            SimpleManagedObject("2", kind="a", title="y"),
            SimpleManagedObject("3", kind="a", title="z"),
        ]
        service = InMemorySearchService(objects)
        sort_order = [SortOrder("kind"), SortOrder("title", ascending=False)]

        cursor = service.construct_search(TEST_USER, QueryType.XPATH, "/a", sort_order).get_results()

        self.assertEqual([cursor.get_result(i).managed_object.id for i in (1, 2, 3)], ["3", "2", "1"])
        self.assertEqual([mo.id for mo in service.default_objects], ["1", "2", "3"])


if __name__ == '__main__':
    unittest.main()
