APPVER = "0.1.0"
ABOUT = """\
mailheaders          a tokenizer for comma separated e-mail header values,
                     with line folding and RFC 2047 encoded-word support.
"""
#############################################################################
from gettext import gettext as _


CONFIG_RULES = {
    'charset':          (_('Charset of raw header bytes'), str,    'utf-8'),
    'decode_errors':    (_('Codec error handler for bad bytes'), str,
                         'replace'),
    'fallback_charset': (_('Charset used when an encoded word names an '
                           'unknown charset'), str,                 'utf-8'),
}


def get_default(name, override=None):
    """Return the configured default for `name`, unless overridden.

    >>> get_default('charset')
    'utf-8'
    >>> get_default('charset', 'iso-8859-1')
    'iso-8859-1'
    """
    if override is not None:
        return override
    return CONFIG_RULES[name][2]
