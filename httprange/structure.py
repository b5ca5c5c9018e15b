# -*- coding: utf-8; -*-

"""Classes for representing various elements of the protocol."""

from collections import namedtuple

from httprange.util.text import force_bytes, force_unicode


class ProtocolString(str):

    """Base class for various constant strings used in HTTP."""

    __slots__ = ()

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, str.__repr__(self))


class CaseInsensitive(ProtocolString):

    __slots__ = ()

    def __eq__(self, other):
        if isinstance(other, str):
            return self.lower() == other.lower()
        return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.lower())


class FieldName(CaseInsensitive):

    """A header field name, such as ``Content-Range``."""

    __slots__ = ()


class HeaderEntry(namedtuple('HeaderEntry', ('name', 'value'))):

    """A single header field: a name and a raw (byte string) value.

    A message can have more than one entry with the same :attr:`name`.
    """

    __slots__ = ()

    def __new__(cls, name, value):
        return super(HeaderEntry, cls).__new__(cls,
                                               FieldName(force_unicode(name)),
                                               force_bytes(value))

    def __repr__(self):
        return '<HeaderEntry %s>' % self.name


class HTTPVersion(ProtocolString):

    __slots__ = ()


class Method(ProtocolString):

    __slots__ = ()


class StatusCode(int):

    __slots__ = ()

    def __repr__(self):
        return 'StatusCode(%d)' % self

    def __str__(self):
        return '%d' % self


class Unit(ProtocolString):

    """A range unit (RFC 7233 Section 2).

    Range units are compared case-sensitively.
    ``bytes`` is the only unit that RFC 7233 defines;
    any other token is an extension unit and is kept verbatim:

    >>> Unit()
    Unit('bytes')
    >>> Unit(u'bytes').is_bytes
    True
    >>> Unit(u'Bytes').is_bytes
    False
    >>> print(Unit(u'my_custom_unit'))
    my_custom_unit

    Any non-empty token is accepted, but only an ASCII one
    can be put on the wire (see :attr:`~httprange.header.HeaderValue.value`).
    """

    __slots__ = ()

    BYTES = u'bytes'

    def __new__(cls, token=BYTES):
        token = force_unicode(token)
        if not token:
            raise ValueError('range unit must be a non-empty token')
        return super(Unit, cls).__new__(cls, token)

    @property
    def is_bytes(self):
        return self == Unit.BYTES

    @property
    def is_other(self):
        return not self.is_bytes


bytes_unit = Unit(Unit.BYTES)
