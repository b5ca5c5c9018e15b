# -*- coding: utf-8; -*-

import logging

from httprange import known, message
from httprange.accept_ranges import AcceptRanges
from httprange.blackboard import derived_property
from httprange.content_range import ByteContentRange
from httprange.known import h, st
from httprange.structure import StatusCode
from httprange.util.text import force_unicode


log = logging.getLogger(__name__)


class Response(message.Message):

    def __init__(self, version, status, reason, header_entries,
                 body=b'', remark=None):
        """
        :param version:
            The protocol version, such as ``u'HTTP/1.1'``,
            or `None` if unknown.

        :param status:
            The status code, as an integer.

        :param reason:
            The reason phrase (such as "Partial Content"),
            or `None` if unknown (as in HTTP/2).

        :param header_entries:
            A list of ``(name, value)`` pairs (may be empty).

        :param body:
            The payload body as a byte string, or `None` if unknown.

        :param remark:
            If not `None`, this string will be shown in the reports
            above the status line.
        """
        super(Response, self).__init__(version, header_entries, body, remark)
        self.status = StatusCode(status)
        self.reason = force_unicode(reason) if reason is not None else None
        self.request = None

    def __repr__(self):
        return '<Response %d>' % self.status

    @derived_property
    def content_range(self):
        """The ``Content-Range`` header as :class:`~httprange.ByteContentRange`.

        `None` if the header is absent, in some other unit, or malformed
        (in which case a notice is reported).
        """
        return self._derive(ByteContentRange, 1004)

    @derived_property
    def accept_ranges(self):
        return AcceptRanges.from_headers(self)


def check_responses(resps):
    for resp in resps:
        check_response(resp)


def check_response(resp):
    """Apply all checks to the response `resp`."""
    req = resp.request
    status = resp.status
    headers = resp.headers
    content_range = resp.content_range
    accept_ranges = resp.accept_ranges

    if h.content_range in headers and \
            status not in [st.partial_content, st.range_not_satisfiable]:
        resp.complain(1006)

    if accept_ranges is not None and accept_ranges.unit is not None and \
            accept_ranges.unit not in known.range_unit:
        resp.complain(1005, unit=accept_ranges.unit)

    if status == st.partial_content:
        _check_partial_content(resp, req, content_range, accept_ranges)
    elif status == st.range_not_satisfiable:
        _check_range_not_satisfiable(resp, req, content_range)


def _check_partial_content(resp, req, content_range, accept_ranges):
    if h.content_range not in resp.headers and not _is_multipart(resp):
        resp.complain(1007)

    if accept_ranges is not None and accept_ranges.unit is None:
        resp.complain(1014)

    if req is None:
        return
    if h.range not in req.headers:
        resp.complain(1008)
        return

    ranges = req.ranges
    if ranges is None or content_range is None or \
            content_range.range is None or content_range.size is None:
        return
    log.debug('matching %s against %s', content_range, ranges)

    if not satisfiable(ranges, content_range.size):
        resp.complain(1013, content_range=content_range)

    if not covered(content_range.range, ranges, content_range.size):
        resp.complain(1012, content_range=content_range)


def _check_range_not_satisfiable(resp, req, content_range):
    if content_range is not None and content_range.range is not None:
        expected = ByteContentRange(size=content_range.size) \
            if content_range.size is not None else u'bytes */<length>'
        resp.complain(1011, expected=expected)

    if req is None:
        return
    if h.range not in req.headers:
        resp.complain(1009)
        return

    ranges = req.ranges
    if ranges is None:
        return
    if h.content_range not in resp.headers:
        resp.complain(1010)
    elif content_range is not None and content_range.size is not None and \
            satisfiable(ranges, content_range.size):
        resp.complain(1015, content_range=content_range)


def satisfiable(ranges, size):
    """Whether any of the requested `ranges` overlaps `size` bytes.

    RFC 7233 Section 4.4: a range set is unsatisfiable only
    if none of its ranges can be resolved against the complete length.
    A suffix longer than the representation, or an end past it,
    still counts, because it is clipped.
    """
    return any(r.resolve(size) is not None for r in ranges)


def covered(byte_range, ranges, size):
    """Whether `byte_range` lies within one of the requested `ranges`.

    Each of the `ranges` is first resolved against
    the complete length `size`.
    """
    for requested in ranges:
        resolved = requested.resolve(size)
        if resolved is None:
            continue
        (first, last) = resolved
        if first <= byte_range.start and byte_range.end <= last:
            return True
    return False


def _is_multipart(resp):
    values = resp.headers.get(h.content_type) or [b'']
    return values[-1].lower().startswith(b'multipart/byteranges')
