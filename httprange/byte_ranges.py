# -*- coding: utf-8; -*-

from httprange.byte_range import ByteRange
from httprange.error import UnknownUnitError, bad_request, unsatisfiable
from httprange.header import HeaderValue
from httprange.headers import RANGE


class ByteRanges(HeaderValue):

    """The value of a ``Range`` header in the bytes unit (RFC 7233 § 3.1).

    ::

        Range = "bytes=" byte-range *( "," OWS byte-range )

    A value read with :meth:`from_headers` always has at least one range.
    A value built with :meth:`push` keeps the ranges in the order given:

    >>> ranges = ByteRanges()
    >>> ranges.push(1, 5)
    >>> ranges.push(None, 5)
    >>> print(ranges)
    bytes=1-5,-5
    """

    name = RANGE
    prefix = u'bytes='

    def __init__(self, ranges=None):
        self.ranges = list(ranges or [])

    @classmethod
    def recognizes(cls, s):
        return s.startswith(cls.prefix)

    @classmethod
    def parse(cls, s):
        """Parse a ``Range`` value.

        :raises:
            :exc:`~httprange.error.UnknownUnitError`
            if `s` does not start with ``bytes=``;
            :exc:`~httprange.error.RangeError` with status 400
            if there are no ranges after it;
            :exc:`~httprange.error.RangeError` with status 416
            if any of the ranges is malformed.
        """
        if not cls.recognizes(s):
            raise UnknownUnitError()
        rest = s[len(cls.prefix):].lstrip()
        if not rest.strip():
            raise bad_request()
        return cls(ByteRange.parse(piece) for piece in rest.split(u','))

    def push(self, start, end):
        self.ranges.append(ByteRange(start, end))

    def first(self):
        return self.ranges[0] if self.ranges else None

    def match_size(self, size):
        """Check that every range fits into a representation of `size` bytes.

        :raises:
            :exc:`~httprange.error.RangeError` with status 416 if not.
        """
        for r in self.ranges:
            if not r.match_size(size):
                raise unsatisfiable()

    def __iter__(self):
        return iter(self.ranges)

    def __len__(self):
        return len(self.ranges)

    def __getitem__(self, i):
        return self.ranges[i]

    def __eq__(self, other):
        if isinstance(other, ByteRanges):
            return self.ranges == other.ranges
        return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __str__(self):
        return self.prefix + u','.join(str(r) for r in self.ranges)
