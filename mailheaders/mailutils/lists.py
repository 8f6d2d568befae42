# vim: set fileencoding=utf-8 :
#
import codecs
import logging

from mailheaders.defaults import get_default
from mailheaders.mailutils.header import (decode_charset, decode_rfc2047,
                                          lookup_charset)
from mailheaders.stream import MessageStream, SPACE_CHARS
from mailheaders.values import shape_result


logger = logging.getLogger(__name__)


class ListParser(object):
    """
    This class splits a comma separated header value (Keywords:, address
    lists and the like) into its entries, while undoing the damage done
    by line folding and MIME header encoding.

    The general strategy of this parser is to:
       1. scan the raw bytes once, collecting runs of non-white bytes
          ("words") and decoded encoded words as fragments,
       2. join the fragments of an entry when a comma or the end of the
          header value is reached.

    Words are separated by exactly one space, no matter how much white
    space (or folding) there was between them. As RFC 2047 requires,
    white space between two adjacent encoded words is dropped. An encoded
    word which fails to decode is kept as plain text.

    Examples:

    >>> parse_comma_separated(b' one item  \\n')
    Text('one item')
    >>> parse_comma_separated(b'multi \\r\\n list, \\r\\n with, cr lf  \\r\\n')
    TextList(['multi list', 'with', 'cr lf'])
    >>> parse_comma_separated(b'=?ISO-8859-1?Q?a?= =?ISO-8859-1?Q?b?=\\n'
    ...                       b' , listed\\n')
    TextList(['ab', 'listed'])
    >>> parse_comma_separated(b'plain =?utf-8?Q?R=C3=A9n?= =?bad?= text\\n')
    Text('plain Rén =?bad?= text')
    >>> parse_comma_separated(b' , \\r\\n')
    Empty()
    """

    def __init__(self, stream,
                 charset=None, errors=None, fallback_charset=None):
        self.stream = stream
        self.charset = get_default('charset', charset)
        self.errors = get_default('decode_errors', errors)
        self.fallback_charset = fallback_charset

        # Bad settings are caller bugs, refuse them before touching data
        codecs.lookup_error(self.errors)
        lookup_charset(get_default('fallback_charset', fallback_charset))

        self.token_start = None
        self.token_end = None
        self.is_token_start = True
        self.tokens = []
        self.entries = []

    def add_token(self, add_space):
        if self.token_start is None:
            return
        if self.tokens:
            self.tokens.append(' ')

        word = self.stream.data[self.token_start:self.token_end]
        if b'\r' in word:
            word = word.replace(b'\r', b'')
        self.tokens.append(decode_charset(
            word, self.charset,
            fallback_charset=self.fallback_charset, errors=self.errors))

        # Keep a plain word from running into a following encoded word
        if add_space:
            self.tokens.append(' ')

        self.token_start = None
        self.is_token_start = True

    def add_tokens_to_list(self):
        if not self.tokens:
            return
        if len(self.tokens) == 1:
            self.entries.append(self.tokens.pop())
        else:
            self.entries.append(''.join(self.tokens))
            self.tokens = []

    def add_encoded_word(self):
        """Try to decode an encoded word, returning True on success.

        The stream must be positioned just past the '=' of a '=?'. On
        failure the stream is rewound so the bytes can be read as text.
        """
        stream = self.stream
        stream.checkpoint()
        decoded = decode_rfc2047(stream,
                                 fallback_charset=self.fallback_charset)
        if decoded is None:
            stream.restore()
            logger.debug('Invalid encoded word at offset %d, kept as text',
                         stream.offset() - 1)
            return False

        # Encoded words which decode to nothing leave no trace at all.
        if decoded:
            self.add_token(True)
            self.tokens.append(decoded)
        return True

    def parse(self):
        stream = self.stream
        while True:
            ch = stream.next()
            if ch is None:
                break

            elif ch == b'\n':
                if not stream.try_next_is_space():
                    break
                self.is_token_start = True
                continue

            elif ch in SPACE_CHARS:
                self.is_token_start = True
                continue

            elif ch == b'\r':
                continue

            elif ch == b',':
                self.add_token(False)
                self.add_tokens_to_list()
                continue

            elif (ch == b'=' and self.is_token_start
                    and stream.peek_char(b'?')):
                if self.add_encoded_word():
                    continue

            offset = stream.offset()
            if self.is_token_start:
                self.add_token(False)
                self.is_token_start = False
                self.token_start = offset - 1
            self.token_end = offset

        self.add_token(False)
        self.add_tokens_to_list()
        return shape_result(self.entries)


def parse_comma_separated(data,
                          charset=None, errors=None, fallback_charset=None):
    """
    Parse one raw header value into Empty, Text or TextList.

    The data may be bytes, a str (which is encoded as UTF-8) or a
    MessageStream. Parsing stops at the first line break which is not
    followed by white space; a MessageStream is left positioned just
    after it.

    Byte data never makes this fail, but an unknown `errors` handler or
    `fallback_charset` raises LookupError. A `charset` which is not a
    text encoding is replaced by the fallback charset.

    >>> parse_comma_separated('simple, list\\nNext: header\\n')
    TextList(['simple', 'list'])
    """
    if not isinstance(data, MessageStream):
        data = MessageStream(data)
    return ListParser(data,
                      charset=charset,
                      errors=errors,
                      fallback_charset=fallback_charset).parse()


if __name__ == "__main__":
    import doctest
    import sys
    results = doctest.testmod(optionflags=doctest.ELLIPSIS,
                              extraglobs={})
    print('%s' % (results, ))
    if results.failed:
        sys.exit(1)
