# vim: set fileencoding=utf-8 :
""" Decoding of RFC 2047 encoded words, one word at a time.

The stdlib email.header.decode_header() works on whole header strings
and gives up on the entire header if one word is bad. The list parser
needs to try a single word in place and back out if it is not valid,
so here the decoder reads straight from a MessageStream.

>>> decode_encoded_word('=?iso-8859-1?q?this is some text?=')
'this is some text'
>>> decode_encoded_word('=?utf-8?Q?Ren=C3=A9?=')
'René'
>>> decode_encoded_word('=?ISO-8859-1?B?SWYgeW91IGNhbiByZWFkIHRoaXMgeW8=?=')
'If you can read this yo'
"""
import binascii
import codecs
import email.base64mime
import email.quoprimime
import logging
import re

from mailheaders.defaults import get_default
from mailheaders.mailutils import HeaderParseError, UnknownCharsetError
from mailheaders.stream import MessageStream, SPACE_CHARS


logger = logging.getLogger(__name__)

LINE_BREAKS = (b'\r', b'\n')

# Match encoded-word strings in the form =?charset?q?Hello_World?=
ecre = re.compile(r'''
  =\?                   # literal =?
  (?P<charset>[^?]*?)   # non-greedy up to the next ? is the charset
  \?                    # literal ?
  (?P<encoding>[qb])    # either a "q" or a "b", case insensitive
  \?                    # literal ?
  (?P<encoded>.*?)      # non-greedy up to the next ?= is the encoded string
  \?=                   # literal ?=
  ''', re.VERBOSE | re.IGNORECASE)


def lookup_charset(charset):
    """Return the canonical codec name for a MIME charset.

    >>> lookup_charset('ISO-8859-1')
    'iso8859-1'
    >>> lookup_charset('x-no-such-charset')
    Traceback (most recent call last):
      ...
    mailheaders.mailutils.UnknownCharsetError: Unknown charset: x-no-such-charset
    """
    try:
        info = codecs.lookup(charset)
    except (LookupError, ValueError):
        raise UnknownCharsetError(charset)
    # base64, rot13, zlib and friends are codecs, but not charsets
    if not getattr(info, '_is_text_encoding', True):
        raise UnknownCharsetError(charset)
    return info.name


def decode_charset(data, charset, fallback_charset=None, errors=None):
    """Decode bytes, falling back to a default charset if it is unknown.

    The fallback is also used if the charset's codec cannot cope with the
    error handler (idna refuses 'replace'). A fallback charset which is
    itself unknown raises UnknownCharsetError.

    >>> decode_charset(b'l\\xf6gmannsstofa', 'iso-8859-1')
    'lögmannsstofa'
    >>> decode_charset(b'caf\\xc3\\xa9', 'unknown-8bit')
    'café'
    >>> decode_charset(b'abc', 'base64')
    'abc'
    """
    errors = get_default('decode_errors', errors)
    fallback = lookup_charset(get_default('fallback_charset',
                                          fallback_charset))
    try:
        codec = lookup_charset(charset)
    except UnknownCharsetError as e:
        logger.debug('%s, using %s instead', e, fallback)
        return data.decode(fallback, errors)
    try:
        return data.decode(codec, errors)
    except UnicodeError as e:
        if codec == fallback:
            raise
        logger.debug('Decoding with %s failed (%s), using %s instead',
                     codec, e, fallback)
        return data.decode(fallback, errors)


def decode_payload(charset, encoding, payload, fallback_charset=None):
    """Decode the payload of one encoded word to a unicode string.

    All arguments are bytes, as they appeared between the ? markers.
    """
    charset = charset.decode('ascii', 'replace')
    # RFC 2231 allows a language suffix: =?charset*lang?...
    if '*' in charset:
        charset = charset.split('*', 1)[0]
    if not charset:
        raise HeaderParseError('Missing charset')

    encoding = encoding.lower()
    if encoding == b'q':
        # header_decode works on str; latin-1 maps bytes 1:1 both ways
        data = email.quoprimime.header_decode(payload.decode('latin-1'))
        data = data.encode('latin-1')
    elif encoding == b'b':
        payload = b''.join(payload.split())
        # Postel's law: add missing padding
        paderr = len(payload) % 4
        if paderr:
            payload += b'==='[:4 - paderr]
        try:
            data = email.base64mime.decode(payload)
        except binascii.Error:
            raise HeaderParseError('Base64 decoding error')
    else:
        raise HeaderParseError('Unexpected encoding: %r' % encoding)

    try:
        return decode_charset(data, charset,
                              fallback_charset=fallback_charset)
    except UnicodeError as e:
        raise HeaderParseError('Charset decoding error: %s' % e)


def _read_field(stream, what, allow_space=False):
    start = stream.offset()
    while True:
        ch = stream.next()
        if ch is None or ch in LINE_BREAKS:
            raise HeaderParseError('Unterminated %s' % what)
        elif ch == b'?':
            return stream.data[start:stream.offset() - 1]
        elif ch in SPACE_CHARS and not allow_space:
            raise HeaderParseError('Whitespace in %s' % what)


def _decode_word(stream, fallback_charset=None):
    if stream.next() != b'?':
        raise HeaderParseError('Expected =?')
    charset = _read_field(stream, 'charset')
    encoding = _read_field(stream, 'encoding')
    payload = _read_field(stream, 'payload', allow_space=True)
    if stream.next() != b'=':
        raise HeaderParseError('Expected ?=')
    return decode_payload(charset, encoding, payload,
                          fallback_charset=fallback_charset)


def decode_rfc2047(stream, fallback_charset=None):
    """
    Decode the encoded word at the current position of the stream.

    The stream must be positioned just after the leading '='. On success
    the decoded text is returned and the stream is left just after the
    closing '?='. On failure None is returned and the stream position is
    undefined; callers should checkpoint() before and restore() after.

    >>> ms = MessageStream(b'=?ISO-8859-1?Q?a?= =?ISO-8859-1?Q?b?=')
    >>> ms.next()
    b'='
    >>> decode_rfc2047(ms), ms.peek()
    ('a', b' ')
    >>> ms = MessageStream(b'=?bogus?= word')
    >>> ms.next()
    b'='
    >>> decode_rfc2047(ms) is None
    True
    """
    try:
        return _decode_word(stream, fallback_charset=fallback_charset)
    except HeaderParseError:
        return None


def decode_encoded_word(text, fallback_charset=None):
    """Decode a string consisting of exactly one encoded word.

    Raises HeaderParseError if the string is not a valid encoded word.
    """
    if isinstance(text, (bytes, bytearray)):
        text, raw_codec = bytes(text).decode('latin-1'), 'latin-1'
    else:
        raw_codec = 'utf-8'
    m = ecre.fullmatch(text.strip())
    if not m:
        raise HeaderParseError('Not an encoded word: %r' % text)
    return decode_payload(*[m.group(g).encode(raw_codec)
                            for g in ('charset', 'encoding', 'encoded')],
                          fallback_charset=fallback_charset)


if __name__ == "__main__":
    import doctest
    import sys
    results = doctest.testmod(optionflags=doctest.ELLIPSIS,
                              extraglobs={})
    print('%s' % (results, ))
    if results.failed:
        sys.exit(1)
