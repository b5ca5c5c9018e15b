# -*- coding: utf-8; -*-

import logging

from httprange import message
from httprange.blackboard import derived_property
from httprange.byte_ranges import ByteRanges
from httprange.known import h, m
from httprange.structure import Method, Unit
from httprange.util.text import force_unicode


log = logging.getLogger(__name__)


class Request(message.Message):

    def __init__(self, scheme, method, target, version, header_entries,
                 body=b'', remark=None):
        # pylint: disable=redefined-outer-name
        """
        :param scheme:
            The scheme of the request URI (usually ``u'http'``
            or ``u'https'``), or `None` if unknown.

        :param method:
            The request method, as a string.

        :param target:
            The request target, as a string.

        :param version:
            The protocol version, such as ``u'HTTP/1.1'``,
            or `None` if unknown.

        :param header_entries:
            A list of ``(name, value)`` pairs (may be empty).
            `value` may be a byte string or a Unicode string;
            Unicode is encoded into ISO-8859-1.

        :param body:
            The payload body as a byte string, or `None` if unknown.

        :param remark:
            If not `None`, this string will be shown in the reports
            above the request line.
        """
        super(Request, self).__init__(version, header_entries, body, remark)
        self.scheme = force_unicode(scheme) if scheme is not None else None
        self.method = Method(force_unicode(method))
        self.target = force_unicode(target)

    def __repr__(self):
        return '<Request %s>' % self.method

    @derived_property
    def range_unit(self):
        """The unit of the ``Range`` header, or `None` if there is none."""
        values = self.headers.get(h.range)
        if values is None:
            return None
        (token, equals, _) = force_unicode(values[-1]).partition(u'=')
        if not equals:
            return None
        try:
            return Unit(token.strip())
        except ValueError:
            return None

    @derived_property
    def ranges(self):
        """The ``Range`` header as :class:`~httprange.ByteRanges`.

        `None` if the header is absent, in some other unit, or malformed
        (in which case a notice is reported).
        """
        return self._derive(ByteRanges, 1001)


def check_request(req):
    """Apply all checks to the request `req`."""
    if h.range not in req.headers:
        return

    log.debug('checking Range in %r', req)
    if req.ranges is None and req.range_unit is not None and \
            not req.range_unit.is_bytes:
        req.complain(1002, unit=req.range_unit)

    if req.method != m.GET:
        req.complain(1003)
