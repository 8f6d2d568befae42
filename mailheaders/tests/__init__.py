import unittest

from mailheaders import parse_comma_separated
from mailheaders.values import Empty, Text, TextList


class MailHeadersUnittest(unittest.TestCase):
    def assertParsesTo(self, data, expected, **kwargs):
        """Parse data and check both the shape and the entries."""
        result = parse_comma_separated(data, **kwargs)
        msg = 'Failed to parse %r: got %r' % (data, result)
        if not expected:
            self.assertIsInstance(result, Empty, msg)
        elif len(expected) == 1:
            self.assertIsInstance(result, Text, msg)
            self.assertEqual(result, expected[0], msg)
        else:
            self.assertIsInstance(result, TextList, msg)
            self.assertEqual(list(result), expected, msg)
        return result
