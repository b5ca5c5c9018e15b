# -*- coding: utf-8; -*-

import io
import re


def force_unicode(x):
    """
    >>> print(force_unicode(b'bytes=0-499'))
    bytes=0-499
    """
    if isinstance(x, bytes):
        return x.decode('iso-8859-1')
    return str(x)


def force_bytes(x):
    """
    >>> force_bytes(u'bytes */1234')
    b'bytes */1234'
    """
    if isinstance(x, bytes):
        return x
    return x.encode('iso-8859-1', 'replace')


def is_ascii(s):
    """
    >>> is_ascii(u'my_custom_unit')
    True
    >>> is_ascii(u'октеты')
    False
    """
    try:
        s.encode('ascii')
    except UnicodeError:
        return False
    return True


def printable(s):
    # Control characters and lone surrogates can't go into an XML document
    # (see XML 1.0 section 2.2), nor should they reach a terminal.
    return re.sub(
        pattern=(u'[\u0000-\u0008\u000B\u000C\u000E-\u001F'
                 u'\u007F-\u009F\uD800-\uDFFF\uFFFE\uFFFF]'),
        repl=u'\N{REPLACEMENT CHARACTER}',
        string=s
    )


def ellipsize(s, max_length=60):
    """
    >>> print(ellipsize(u'Range: bytes=0-99,200-299', 40))
    Range: bytes=0-99,200-299
    >>> print(ellipsize(u'Range: bytes=0-99,200-299', 20))
    Range: bytes=0-99...
    """
    if len(s) <= max_length:
        return s
    return s[:max_length - 3] + u'...'


class MockStdio(object):

    """A stand-in for ``sys.stdout`` or ``sys.stderr`` in tests."""

    def __init__(self):
        self.buffer = io.BytesIO()

    def write(self, s):
        self.buffer.write(s.encode('utf-8'))

    def flush(self):
        pass
