# vim: set fileencoding=utf-8 :
#
import email
import email.message

from mailheaders.mailutils.lists import parse_comma_separated
from mailheaders.values import EMPTY, shape_result


def _raw_header_bytes(value):
    # Headers parsed from bytes smuggle undecodable bytes through as
    # surrogates; undo that so the list parser sees the original data.
    if isinstance(value, bytes):
        return value
    if not isinstance(value, str):
        value = str(value)
    return value.encode('utf-8', 'surrogateescape')


def _raw_header_values(msg, name):
    # msg[name] would wrap 8-bit data in a Header object, we want it raw.
    if name is None:
        return []
    name = name.lower()
    return [v for k, v in msg.raw_items() if k.lower() == name]


def _message_charset(msg, charset):
    if charset:
        return charset
    if msg is not None:
        return msg.get_content_charset() or None
    return None


def safe_parse_list(msg=None, name=None, hdr=None, charset=None, **kwargs):
    """
    This method parses a comma separated header into its entries,
    decoding MIME encoded words and undoing line folding on the way.

    If used with a message object, the header and the MIME charset
    will be inferred from the message headers.

    >>> msg = email.message_from_bytes(
    ...     b'Content-Type: text/plain; charset=iso-8859-1\\n'
    ...     b'Keywords: l\\xf6gmenn,\\n'
    ...     b'  =?utf-8?Q?R=C3=A9n?= =?utf-8?Q?ar?=\\n'
    ...     b'\\nBody\\n')
    >>> safe_parse_list(msg, 'keywords')
    TextList(['lögmenn', 'Rénar'])
    >>> safe_parse_list(msg, 'x-missing')
    Empty()

    Raw header data works too, in which case UTF-8 is assumed:

    >>> safe_parse_list(hdr=b'G\\xc3\\xadsli,\\r\\n \\xc3\\x93la')
    TextList(['Gísli', 'Óla'])
    """
    if hdr is None:
        if msg is None or name is None:
            return EMPTY
        values = _raw_header_values(msg, name)
        value = values[0] if values else None
    else:
        value = hdr
    if value is None:
        return EMPTY
    return parse_comma_separated(_raw_header_bytes(value),
                                 charset=_message_charset(msg, charset),
                                 **kwargs)


def safe_parse_list_all(msg, name, charset=None, **kwargs):
    """
    Parse and merge every occurrence of a repeated list header.

    >>> msg = email.message.Message()
    >>> msg['Keywords'] = 'one, two'
    >>> msg['Keywords'] = 'three'
    >>> safe_parse_list_all(msg, 'keywords')
    TextList(['one', 'two', 'three'])
    """
    charset = _message_charset(msg, charset)
    entries = []
    for value in _raw_header_values(msg, name):
        entries.extend(safe_parse_list(hdr=value, charset=charset,
                                       **kwargs).as_list())
    return shape_result(entries)


if __name__ == '__main__':
    import doctest
    import sys
    results = doctest.testmod(optionflags=doctest.ELLIPSIS,
                              extraglobs={})
    print('%s' % (results, ))
    if results.failed:
        sys.exit(1)
