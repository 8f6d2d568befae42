# vim: set fileencoding=utf-8 :
#
"""
A forward-only cursor over the raw bytes of a message header.

The cursor can remember a single earlier position, which lets a parser
attempt a speculative sub-parse and back out of it if it fails:

>>> ms = MessageStream(b'=?x?= tail')
>>> ms.next()
b'='
>>> ms.checkpoint()
>>> ms.next(), ms.next(), ms.offset()
(b'?', b'x', 3)
>>> ms.restore()
>>> ms.offset(), ms.peek_char(b'?')
(1, True)
"""

SPACE_CHARS = (b' ', b'\t')


class MessageStream(object):
    def __init__(self, data):
        if isinstance(data, str):
            data = data.encode('utf-8')
        elif isinstance(data, (bytearray, memoryview)):
            data = bytes(data)
        elif not isinstance(data, bytes):
            raise TypeError('Cannot stream %s' % type(data).__name__)
        self.data = data
        self.pos = 0
        self.restore_pos = 0

    def __len__(self):
        return len(self.data)

    def __repr__(self):
        return '<MessageStream at %d of %d>' % (self.pos, len(self.data))

    def next(self):
        """Consume and return the next byte, or None at the end."""
        if self.pos < len(self.data):
            self.pos += 1
            return self.data[self.pos - 1:self.pos]
        return None

    def peek(self):
        if self.pos < len(self.data):
            return self.data[self.pos:self.pos + 1]
        return None

    def peek_char(self, expected):
        return self.data[self.pos:self.pos + 1] == expected

    def try_next_is_space(self):
        """Check whether the next line continues this one (folding)."""
        return self.data[self.pos:self.pos + 1] in SPACE_CHARS

    def checkpoint(self):
        self.restore_pos = self.pos

    def restore(self):
        self.pos = self.restore_pos

    def offset(self):
        return self.pos

    def is_eof(self):
        return self.pos >= len(self.data)

    def remaining(self):
        return self.data[self.pos:]


if __name__ == "__main__":
    import doctest
    import sys
    results = doctest.testmod(optionflags=doctest.ELLIPSIS,
                              extraglobs={})
    print('%s' % (results, ))
    if results.failed:
        sys.exit(1)
