# vim: set fileencoding=utf-8 :
#
from email.errors import HeaderParseError


class UnknownCharsetError(LookupError):
    def __init__(self, charset):
        LookupError.__init__(self, 'Unknown charset: %s' % charset)
        self.charset = charset


__all__ = ['HeaderParseError', 'UnknownCharsetError']
