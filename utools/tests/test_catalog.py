import unittest

from utools import catalog


class TestCatalog(unittest.TestCase):
    def setUp(self):
        self.tools = [
            {"id": "a", "name": "A", "description": "", "category": "Text", "icon": "", "href": "/tools/a"},
            {"id": "b", "name": "B", "description": "", "category": "Biology", "icon": "", "href": "/tools/b"},
            {"id": "c", "name": "C", "description": "", "category": "Text", "icon": "", "href": "/tools/c"},
        ]

    def test_categories_first_seen_order(self):
        self.assertEqual(catalog.get_categories(self.tools), ["Text", "Biology"])

    def test_tools_by_category(self):
        grouped = catalog.tools_by_category(self.tools)
        self.assertEqual([t["id"] for t in grouped["Text"]], ["a", "c"])
        self.assertEqual([t["id"] for t in grouped["Biology"]], ["b"])

    def test_default_catalog(self):
        self.assertEqual(catalog.get_categories(), ["Biology"])
        tool = catalog.get_tool("reverse-complement")
        self.assertEqual(tool["href"], "/tools/reverse-complement")

    def test_unknown_tool(self):
        with self.assertRaises(ValueError):
            catalog.get_tool("not-a-tool")

    def test_to_dataframe(self):
        df = catalog.to_dataframe(self.tools)
        self.assertEqual(list(df.columns), catalog.FIELDS)
        self.assertEqual(len(df), 3)


if __name__ == "__main__":
    unittest.main()
