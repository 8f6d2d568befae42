from mailheaders.defaults import APPVER
from mailheaders.mailutils.lists import ListParser, parse_comma_separated
from mailheaders.stream import MessageStream
from mailheaders.values import EMPTY, Empty, HeaderValue, Text, TextList


__version__ = APPVER
__all__ = ['parse_comma_separated', 'ListParser', 'MessageStream',
           'HeaderValue', 'Empty', 'EMPTY', 'Text', 'TextList',
           "defaults", "mailutils", "stream", "values"]
