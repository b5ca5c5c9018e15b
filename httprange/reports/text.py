# -*- coding: utf-8; -*-

"""The plain-text report: one line per notice, grouped by message."""

from functools import singledispatch

from httprange import notice
from httprange.reports.common import (expand_piece, find_reason_phrase,
                                      resolve_reference)
from httprange.util.text import ellipsize, printable


MARKER = u'------------ '


def text_report(exchanges, buf):
    """Generate a plain-text report with check results.

    :param exchanges:
        An iterable of :class:`~httprange.Exchange` objects.
        They must be already processed by :func:`~httprange.check_exchange`.

    :param buf:
        The file (or file-like object) to which the report will be written.
        It must be opened in binary mode (not text).

    Exchanges and responses without notices are left out entirely.
    """
    for exch in exchanges:
        lines = _exchange_lines(exch)
        if lines:
            buf.write(u''.join(lines).encode('utf-8'))


def _exchange_lines(exch):
    lines = []
    if exch.request is not None:
        lines.extend(_complaint_lines(exch.request))
    for resp in exch.responses:
        resp_lines = _complaint_lines(resp)
        if resp_lines:
            lines.append(_marker(u'response: %d %s' % (
                resp.status, find_reason_phrase(resp))))
            lines.extend(resp_lines)
    lines.extend(_complaint_lines(exch))
    if lines:
        if exch.request is not None:
            heading = u'request: %s %s' % (exch.request.method,
                                            exch.request.target)
        else:
            heading = u'unknown request'
        lines.insert(0, _marker(heading))
    return lines


def _marker(heading):
    return ellipsize(MARKER + printable(heading), 79) + u'\n'


def _complaint_lines(obj):
    return [u'%s %d %s\n' % (c.severity.letter, c.id,
                             _plain(_to_text(c.notice.title, c.context)))
            for c in obj.complaints]


def _plain(s):
    # Typographic characters from notices.xml, for terminals that lack them.
    return s.strip().replace(u'’', u"'").replace(u'§', u'section')


@singledispatch
def _to_text(piece, ctx):
    return _to_text(expand_piece(piece), ctx)

@_to_text.register(str)
def _str_to_text(s, _):
    return printable(s)

@_to_text.register(list)
def _list_to_text(pieces, ctx):
    return u''.join(_to_text(piece, ctx) for piece in pieces)

@_to_text.register(notice.Var)
def _var_to_text(var, ctx):
    return _to_text(resolve_reference(ctx, var.reference), ctx)
