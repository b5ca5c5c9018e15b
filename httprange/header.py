# -*- coding: utf-8; -*-

"""Common behavior of the typed header values.

Each header value class knows its field :attr:`~HeaderValue.name`,
how to parse one raw value (:meth:`~HeaderValue.parse`)
and how to render itself (``str()``).  On top of that,
:class:`HeaderValue` moves values in and out of a message:

- :meth:`~HeaderValue.from_headers` reads the **last** value
  with the right name, so that duplicate entries don't need merging;
- :meth:`~HeaderValue.apply` replaces whatever values were there before.
"""

from httprange.headers import headers_of
from httprange.util.text import force_unicode, is_ascii


class HeaderValue(object):

    name = None

    @classmethod
    def parse(cls, s):
        raise NotImplementedError

    @classmethod
    def recognizes(cls, s):
        """Whether `s` is in a unit that :meth:`parse` understands."""
        return True

    @classmethod
    def from_headers(cls, obj):
        """Read the value of this header from `obj`.

        :param obj:
            A :class:`~httprange.headers.Headers`
            or a message that has them.
        :return:
            An instance of this class,
            or `None` if the header is absent or in a foreign unit.
        :raises:
            :exc:`~httprange.error.RangeError` if the header is malformed.
        """
        values = headers_of(obj).get(cls.name)
        if values is None:
            return None
        s = force_unicode(values[-1])
        if not cls.recognizes(s):
            return None
        return cls.parse(s)

    def apply(self, obj):
        """Put this value into `obj`, replacing any previous values."""
        headers_of(obj).insert(self.name, self.value)

    @property
    def value(self):
        """The rendered value as an ASCII byte string.

        :raises: :exc:`ValueError` if the value has non-ASCII characters,
            as an extension unit read from the wire may.
        """
        s = str(self)
        if not is_ascii(s):
            raise ValueError('%s is not ASCII: %r' % (self.name, s))
        return s.encode('ascii')

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__, self)
