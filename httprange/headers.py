# -*- coding: utf-8; -*-

"""A container for the header fields of one message.

Names are case-insensitive (:class:`~httprange.structure.FieldName`)
and values are kept as byte strings, in the order they were added,
just as they appear in an HTTP/1.x message.
"""

from httprange.known import h
from httprange.structure import FieldName, HeaderEntry


ACCEPT_RANGES = h.accept_ranges
CONTENT_RANGE = h.content_range
RANGE = h.range


class Headers(object):

    """A case-insensitive multimap of field name to raw values.

    >>> headers = Headers([(u'range', b'bytes=0-99')])
    >>> headers[u'Range']
    b'bytes=0-99'
    >>> headers.insert(u'RANGE', u'bytes=100-199')
    >>> headers.get(u'Range')
    [b'bytes=100-199']
    """

    __slots__ = ('entries',)

    def __init__(self, entries=None):
        self.entries = [HeaderEntry(name, value)
                        for (name, value) in entries or []]

    def __repr__(self):
        return 'Headers(%r)' % [tuple(entry) for entry in self.entries]

    def __eq__(self, other):
        if isinstance(other, Headers):
            return self.entries == other.entries
        return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    @property
    def names(self):
        seen = []
        for entry in self.entries:
            if entry.name not in seen:
                seen.append(entry.name)
        return seen

    def __iter__(self):
        return iter(self.names)

    def __len__(self):
        return len(self.entries)

    def __contains__(self, name):
        return any(entry.name == name for entry in self.entries)

    def __getitem__(self, name):
        values = self.get(name)
        if values is None:
            raise KeyError(name)
        return values[-1]

    def get(self, name):
        """All values for `name`, in order, or `None` if there are none."""
        values = [entry.value for entry in self.entries if entry.name == name]
        return values or None

    def append(self, name, value):
        self.entries.append(HeaderEntry(name, value))

    def insert(self, name, value):
        """Set `name` to `value`, replacing any previous values."""
        self.remove(name)
        self.append(name, value)

    def remove(self, name):
        name = FieldName(name)
        self.entries = [entry for entry in self.entries if entry.name != name]


def headers_of(obj):
    """Return the :class:`Headers` of `obj`, which is a message or headers."""
    if isinstance(obj, Headers):
        return obj
    return obj.headers
