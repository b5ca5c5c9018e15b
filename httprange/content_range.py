# -*- coding: utf-8; -*-

from httprange.byte_range import ByteRange, check_pos, parse_pos
from httprange.error import INVALID_CONTENT_RANGE, RangeError, unsatisfiable
from httprange.header import HeaderValue
from httprange.headers import CONTENT_RANGE


def _error():
    return unsatisfiable(INVALID_CONTENT_RANGE)


class ByteContentRange(HeaderValue):

    """The value of a ``Content-Range`` header in bytes (RFC 7233 § 4.2).

    ::

        Content-Range     = "bytes" SP
                            ( byte-range-resp / unsatisfied-range )
        byte-range-resp   = byte-range "/" ( complete-length / "*" )
        unsatisfied-range = "*/" complete-length

    Either the :attr:`range` or the :attr:`size` (complete length)
    may be unknown, but not both.  The :attr:`range`, when known,
    always has both its first and last positions.

    >>> print(ByteContentRange().with_range(0, 499).with_size(1234))
    bytes 0-499/1234
    >>> print(ByteContentRange().with_size(1234))
    bytes */1234
    """

    name = CONTENT_RANGE
    prefix = u'bytes'

    def __init__(self, range=None, size=None):
        # pylint: disable=redefined-builtin
        self.range = range
        self.size = size

    def with_range(self, start, end):
        self.range = ByteRange(start, end)
        return self

    def with_size(self, size):
        self.size = check_pos(size)
        return self

    @classmethod
    def recognizes(cls, s):
        return s.startswith(cls.prefix)

    @classmethod
    def parse(cls, s):
        """Parse a ``Content-Range`` value.

        :raises:
            :exc:`~httprange.error.RangeError` with status 416.
        """
        if not cls.recognizes(s):
            raise _error()
        (range_s, slash, size_s) = s[len(cls.prefix):].lstrip().partition(u'/')
        if not slash:
            raise _error()

        if range_s == u'*':
            range_ = None
        else:
            try:
                range_ = ByteRange.parse(range_s)
            except RangeError as exc:
                raise _error() from exc
            if range_.start is None or range_.end is None:
                raise _error()

        if not size_s:
            raise _error()
        size = None if size_s == u'*' else parse_pos(size_s, _error)

        content_range = cls(range_, size)
        if not content_range.is_valid:
            raise _error()
        return content_range

    @property
    def is_valid(self):
        if self.range is None:
            return self.size is not None
        if self.range.start is None or self.range.end is None:
            return False
        return self.size is None or self.range.end < self.size

    @property
    def is_unsatisfied(self):
        """Whether this is an ``unsatisfied-range`` as sent with 416."""
        return self.range is None and self.size is not None

    @property
    def value(self):
        if not self.is_valid:
            raise ValueError('not a valid Content-Range: %s' % self)
        return super(ByteContentRange, self).value

    def __eq__(self, other):
        if isinstance(other, ByteContentRange):
            return (self.range, self.size) == (other.range, other.size)
        return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __str__(self):
        return u'%s %s/%s' % (self.prefix,
                              u'*' if self.range is None else self.range,
                              u'*' if self.size is None else self.size)
