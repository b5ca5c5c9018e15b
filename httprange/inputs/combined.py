# -*- coding: utf-8; -*-

"""The ``combined`` input format.

A combined file holds one exchange: an optional free-form preamble,
then the request heading and the response headings, each introduced
by a marker line::

    Anything here is ignored.
    ======== BEGIN INBOUND STREAM ========
    GET /video.mp4 HTTP/1.1
    Host: example.com
    Range: bytes=0-99

    ======== BEGIN OUTBOUND STREAM ========
    HTTP/1.1 206 Partial Content
    Content-Range: bytes 0-99/1000

Only headings are read: request line or status line, then header fields.
Several response headings (such as a ``100 Continue`` before the final
response) are separated by empty lines.  Lines may end in CRLF or LF.
If the file name ends with ``.https``, the request scheme is ``https``.
"""

import io
import logging
import re

from httprange.exchange import Exchange
from httprange.inputs.common import InputError
from httprange.request import Request
from httprange.response import Response


log = logging.getLogger(__name__)

INBOUND_MARKER = b'======== BEGIN INBOUND STREAM ========'
OUTBOUND_MARKER = b'======== BEGIN OUTBOUND STREAM ========'

HTTP_VERSION = re.compile(u'^HTTP/[0-9](\\.[0-9])?$')
STATUS_CODE = re.compile(u'^[0-9]{3}$')


def combined_input(paths):
    for path in paths:
        (exch, _) = parse_combined(path)
        yield exch


def parse_combined(path):
    """Read the combined file at `path`.

    :return: a tuple of the :class:`~httprange.Exchange`
        and the preamble (a Unicode string).
    """
    scheme = u'https' if path.endswith('.https') else u'http'
    with io.open(path, 'rb') as f:
        data = f.read()

    lines = data.splitlines()
    try:
        inbound_at = lines.index(INBOUND_MARKER)
    except ValueError:
        raise InputError('%s: bad combined file: no inbound marker' % path)
    try:
        outbound_at = lines.index(OUTBOUND_MARKER, inbound_at)
    except ValueError:
        raise InputError('%s: bad combined file: no outbound marker' % path)

    try:
        preamble = b'\n'.join(lines[:inbound_at]).decode('utf-8')
    except UnicodeError as exc:
        raise InputError('%s: invalid UTF-8 in preamble' % path) from exc

    log.debug('%s: reading exchange', path)
    req = None
    inbound = _headings(lines[inbound_at + 1:outbound_at])
    if len(inbound) > 1:
        raise InputError('%s: more than one request' % path)
    for heading in inbound:
        req = parse_request_heading(heading, scheme, path)
    resps = [parse_response_heading(heading, path)
             for heading in _headings(lines[outbound_at + 1:])]
    return (Exchange(req, resps), preamble)


def parse_request_heading(lines, scheme, path):
    pieces = lines[0].decode('iso-8859-1').split(u' ')
    if len(pieces) != 3 or not HTTP_VERSION.match(pieces[2]):
        raise InputError('%s: bad request line: %r' % (path, lines[0]))
    (method, target, version) = pieces
    return Request(scheme, method, target, version,
                   parse_header_fields(lines[1:], path), body=None,
                   remark=u'from %s' % path)


def parse_response_heading(lines, path):
    pieces = lines[0].decode('iso-8859-1').split(u' ', 2)
    if len(pieces) < 2 or not HTTP_VERSION.match(pieces[0]) or \
            not STATUS_CODE.match(pieces[1]):
        raise InputError('%s: bad status line: %r' % (path, lines[0]))
    reason = pieces[2] if len(pieces) == 3 else None
    return Response(pieces[0], int(pieces[1]), reason,
                    parse_header_fields(lines[1:], path), body=None,
                    remark=u'from %s' % path)


def parse_header_fields(lines, path):
    """Parse HTTP/1.x header field lines into ``(name, value)`` pairs.

    Obsolete line folding is unfolded into a single space.
    """
    entries = []
    for line in lines:
        if line[:1] in [b' ', b'\t'] and entries:
            (name, value) = entries.pop()
            entries.append((name, value + b' ' + line.strip(b' \t')))
            continue
        (name, colon, value) = line.partition(b':')
        if not colon or not name.strip():
            raise InputError('%s: bad header field: %r' % (path, line))
        entries.append((name.decode('iso-8859-1'), value.strip(b' \t')))
    return entries


def _headings(lines):
    headings = [[]]
    for line in lines:
        if line:
            headings[-1].append(line)
        elif headings[-1]:
            headings.append([])
    return [heading for heading in headings if heading]
