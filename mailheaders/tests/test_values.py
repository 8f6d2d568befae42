import unittest

from mailheaders.values import (EMPTY, Empty, HeaderValue, Text, TextList,
                                shape_result)


class TestHeaderValues(unittest.TestCase):
    def test_shapes(self):
        self.assertIs(shape_result([]), EMPTY)
        self.assertIsInstance(shape_result(['x']), Text)
        self.assertIsInstance(shape_result(['x', 'y']), TextList)

    def test_all_are_header_values(self):
        for value in (EMPTY, Text('x'), TextList(['x', 'y'])):
            self.assertIsInstance(value, HeaderValue)

    def test_as_list(self):
        self.assertEqual(EMPTY.as_list(), [])
        self.assertEqual(Text('x').as_list(), ['x'])
        self.assertEqual(TextList(['x', 'y']).as_list(), ['x', 'y'])

    def test_empty(self):
        self.assertTrue(EMPTY.is_empty())
        self.assertFalse(Text('x').is_empty())
        self.assertFalse(EMPTY)
        self.assertEqual(Empty(), EMPTY)
        self.assertNotEqual(EMPTY, [])

    def test_repr(self):
        self.assertEqual(repr(Text('x')), "Text('x')")
        self.assertEqual(repr(TextList(['x'])), "TextList(['x'])")


if __name__ == '__main__':
    unittest.main()
