# -*- coding: utf-8; -*-

from httprange.header import HeaderValue
from httprange.headers import ACCEPT_RANGES, headers_of
from httprange.structure import Unit, bytes_unit
from httprange.util.text import force_unicode


class AcceptRanges(HeaderValue):

    """The value of an ``Accept-Ranges`` header (RFC 7233 § 2.3).

    Says which range unit the server accepts in ``Range`` requests,
    or that it accepts none (the default):

    >>> print(AcceptRanges())
    none
    >>> print(AcceptRanges.with_bytes())
    bytes
    >>> AcceptRanges.parse(u'my_custom_unit').unit
    Unit('my_custom_unit')

    Parsing never fails on a non-empty value.  A token that is not ASCII
    is kept as it is, but can't be rendered back with :attr:`value`.
    """

    name = ACCEPT_RANGES
    NONE = u'none'

    def __init__(self, unit=None):
        self.unit = None if unit is None else Unit(unit)

    @classmethod
    def with_bytes(cls):
        return cls(bytes_unit)

    @classmethod
    def with_other(cls, token):
        return cls(Unit(token))

    @classmethod
    def parse(cls, s):
        token = s.strip()
        if token == cls.NONE:
            return cls()
        return cls(Unit(token))

    @classmethod
    def from_headers(cls, obj):
        values = headers_of(obj).get(cls.name)
        if values is None or not force_unicode(values[-1]).strip():
            return None
        return super(AcceptRanges, cls).from_headers(obj)

    @property
    def bytes(self):
        return self.unit is not None and self.unit.is_bytes

    @property
    def other(self):
        """The extension unit's token, or `None`."""
        if self.unit is None or self.unit.is_bytes:
            return None
        return str(self.unit)

    def __eq__(self, other):
        if isinstance(other, AcceptRanges):
            return self.unit == other.unit
        return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __str__(self):
        return self.NONE if self.unit is None else str(self.unit)
