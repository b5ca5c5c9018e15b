# -*- coding: utf-8; -*-

"""A single ``byte-range`` (RFC 7233 Section 2.1 and Appendix D).

::

    byte-range      = first-byte-pos "-" [ last-byte-pos ]
                    / "-" suffix-length

Either bound may be missing, but not both.  A missing start means
"the last `end` bytes" (a suffix range); a missing end means
"from `start` to the end of the representation".
"""

from collections import namedtuple
import re

from httprange.error import unsatisfiable


MAX_POS = 2 ** 64 - 1

DIGITS = re.compile(u'[0-9]+')


def check_pos(x):
    if x is None:
        return None
    if isinstance(x, bool) or not isinstance(x, int):
        raise TypeError('byte position must be an integer, not %r' % (x,))
    if not 0 <= x <= MAX_POS:
        raise ValueError('byte position out of range: %d' % x)
    return x


def parse_pos(s, error=unsatisfiable):
    """Parse an optional unsigned 64-bit position.

    >>> parse_pos(u'500')
    500
    >>> parse_pos(u'') is None
    True
    """
    if not s:
        return None
    if not DIGITS.fullmatch(s) or int(s) > MAX_POS:
        raise error()
    return int(s)


class ByteRange(namedtuple('ByteRange', ('start', 'end'))):

    """
    >>> ByteRange(0, 499)
    ByteRange(start=0, end=499)
    >>> print(ByteRange(None, 500))
    -500
    >>> print(ByteRange.parse(u' 9500- '))
    9500-
    """

    __slots__ = ()

    def __new__(cls, start=None, end=None):
        start, end = check_pos(start), check_pos(end)
        if start is None and end is None:
            raise ValueError('a byte range needs a start or an end')
        if start is not None and end is not None and end < start:
            raise ValueError('byte range ends (%d) before it starts (%d)' %
                             (end, start))
        return super(ByteRange, cls).__new__(cls, start, end)

    @classmethod
    def parse(cls, s):
        """Parse a ``byte-range`` such as ``0-499``, ``500-`` or ``-500``.

        Note that a range whose last position equals its first (``5-5``)
        is rejected, even though RFC 7233 allows it.

        :raises:
            :exc:`~httprange.error.RangeError` with status 416.
        """
        (first, _, last) = s.strip().partition(u'-')
        start = parse_pos(first)
        end = parse_pos(last)
        if start is None and end is None:
            raise unsatisfiable()
        if start is not None and end is not None and end <= start:
            raise unsatisfiable()
        return cls(start, end)

    @property
    def is_suffix(self):
        return self.start is None

    @property
    def is_open(self):
        return self.end is None

    def match_size(self, size):
        """Whether every present bound lies within `size` bytes.

        >>> ByteRange(0, 4).match_size(5)
        True
        >>> ByteRange(0, 4).match_size(4)
        False
        """
        return all(pos < size for pos in self if pos is not None)

    def resolve(self, size):
        """The ``(first, last)`` positions this range selects out of `size`.

        Suffix and open-ended ranges are resolved against `size`,
        and the last position is clipped to the end of the representation
        (RFC 7233 Section 2.1).  Returns `None` if nothing is selected.

        >>> ByteRange(None, 500).resolve(10000)
        (9500, 9999)
        >>> ByteRange(9500, None).resolve(10000)
        (9500, 9999)
        >>> ByteRange(0, 20000).resolve(10000)
        (0, 9999)
        """
        if self.start is None:
            if self.end == 0 or size == 0:
                return None
            return (max(size - self.end, 0), size - 1)
        if self.start >= size:
            return None
        last = size - 1 if self.end is None else min(self.end, size - 1)
        return (self.start, last)

    def __str__(self):
        return u'%s-%s' % (u'' if self.start is None else self.start,
                           u'' if self.end is None else self.end)
