# vim: set fileencoding=utf-8 :
#
"""
Result shapes produced by the list parser.

A header value is either empty, a single piece of text, or a list of
text entries. The text types subclass the builtins, so they compare
and behave like plain strings and lists:

>>> Text('one item') == 'one item'
True
>>> TextList(['simple', 'list']).as_list()
['simple', 'list']
>>> EMPTY.as_list(), bool(EMPTY)
([], False)
"""


class HeaderValue(object):
    """Common behaviour of all parsed header values."""

    def is_empty(self):
        return False

    def as_list(self):
        raise NotImplementedError()


class Empty(HeaderValue):
    def __bool__(self):
        return False

    def __eq__(self, other):
        return isinstance(other, Empty)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(Empty)

    def __repr__(self):
        return 'Empty()'

    def is_empty(self):
        return True

    def as_list(self):
        return []


class Text(HeaderValue, str):
    def __repr__(self):
        return 'Text(%s)' % str.__repr__(self)

    def as_list(self):
        return [str(self)]


class TextList(HeaderValue, list):
    def __repr__(self):
        return 'TextList(%s)' % list.__repr__(self)

    def as_list(self):
        return list(self)


EMPTY = Empty()


def shape_result(entries):
    """Shape a list of completed entries into a header value.

    >>> shape_result([])
    Empty()
    >>> shape_result(['one item'])
    Text('one item')
    >>> shape_result(['simple', 'list'])
    TextList(['simple', 'list'])
    """
    if not entries:
        return EMPTY
    elif len(entries) == 1:
        return Text(entries[0])
    else:
        return TextList(entries)


if __name__ == "__main__":
    import doctest
    import sys
    results = doctest.testmod(optionflags=doctest.ELLIPSIS,
                              extraglobs={})
    print('%s' % (results, ))
    if results.failed:
        sys.exit(1)
