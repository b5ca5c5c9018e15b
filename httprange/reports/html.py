# -*- coding: utf-8; -*-

"""The HTML report.

Every message is shown as its heading and header fields, followed by
a short summary of the range values parsed out of them, and then by
the notices reported on it, with their full explanations.
"""

from functools import singledispatch
import pkgutil

import dominate
import dominate.tags as H
from dominate.util import text as text_node

from httprange import known, notice
from httprange.__metadata__ import version
from httprange.citation import Citation
from httprange.reports.common import (expand_error, expand_piece,
                                      find_reason_phrase, resolve_reference)
from httprange.request import Request
from httprange.util.text import printable


css_code = pkgutil.get_data('httprange.reports', 'html.css').decode('utf-8')


def html_report(exchanges, buf):
    """Generate an HTML report with check results.

    :param exchanges:
        An iterable of :class:`~httprange.Exchange` objects.
        They must be already processed by :func:`~httprange.check_exchange`.

    :param buf:
        The file (or file-like object) to which the report will be written.
        It must be opened in binary mode (not text).

    """
    title = u'HTTPRange report'
    document = dominate.document(title=title)
    with document:
        H.attr(lang=u'en')
    with document.head:
        H.meta(charset=u'utf-8')
        H.meta(name=u'generator', content=u'HTTPRange %s' % version)
        H.style(type=u'text/css').add_raw_string(css_code)
        H.base(_target=u'blank')
    with document.body:
        H.attr(_class=u'report')
        H.h1(title)
        for exch in exchanges:
            _render_exchange(exch)
    buf.write(document.render().encode('utf-8'))


def _render_exchange(exch):
    with H.div(_class=u'exchange'):
        for msg in exch.children:
            _render_message(msg)
        _render_complaints(exch)
    H.hr()


def _render_message(msg):
    with H.section(_class=u'message'):
        if msg.remark:
            H.p(printable(msg.remark), _class=u'message-remark')
        # Dominate puts each ``span`` on its own line,
        # which makes for the spaces between them.
        with H.h2(), H.code():
            if isinstance(msg, Request):
                with H.span(__pretty=False):
                    _render_known(msg.method)
                H.span(printable(msg.target))
                if msg.version:
                    H.span(printable(msg.version))
            else:
                if msg.version:
                    H.span(printable(msg.version))
                with H.span(__pretty=False):
                    _render_known(msg.status)
                    text_node(u' ' + printable(find_reason_phrase(msg)))
        for entry in msg.header_entries:
            with H.pre(_class=u'header-entry'), H.code():
                _render_known(entry.name)
                text_node(u': ' + printable(entry.value.decode('iso-8859-1')))
        _render_summary(_summarize(msg))
        _render_complaints(msg)


def _summarize(msg):
    if isinstance(msg, Request):
        if msg.ranges is None:
            return []
        return [(u'Requested', [describe_range(r) for r in msg.ranges])]

    summary = []
    if msg.content_range is not None:
        summary.append((u'Enclosed',
                        [describe_content_range(msg.content_range)]))
    if msg.accept_ranges is not None:
        unit = msg.accept_ranges.unit
        summary.append((u'Accepts',
                        [u'no range requests' if unit is None
                         else u'ranges in %s' % unit]))
    return summary


def describe_range(byte_range):
    """Put a :class:`~httprange.ByteRange` into words.

    Such as "bytes 0 to 499" or "the last 500 bytes".
    """
    if byte_range.is_suffix:
        return u'the last %d bytes' % byte_range.end
    if byte_range.is_open:
        return u'bytes %d to the end' % byte_range.start
    return u'bytes %d to %d' % byte_range


def describe_content_range(content_range):
    total = (u'of unknown length' if content_range.size is None
             else u'of %d' % content_range.size)
    if content_range.range is None:
        return u'no bytes, %s' % total
    return u'%s %s' % (describe_range(content_range.range), total)


def _render_summary(summary):
    if summary:
        with H.dl(_class=u'range-summary'):
            for (term, descriptions) in summary:
                H.dt(term)
                for description in descriptions:
                    H.dd(description)


def _render_complaints(obj):
    complaints = obj.complaints
    if complaints:
        with H.div(_class=u'complaints'):
            for complaint in complaints:
                _render_notice(complaint.notice, complaint.context)


def _render_notice(the_notice, ctx):
    severity = the_notice.severity
    with H.div(_class=u'notice %s' % severity.name):
        with H.h3():
            H.abbr(severity.letter, _class=u'severity', title=severity.name)
            H.span(str(the_notice.id), _class=u'ident')
            with H.span(__pretty=False):
                _piece_to_html(the_notice.title, ctx)
        for piece in the_notice.explanation:
            _piece_to_html(piece, ctx)


def _render_known(obj):
    """Render one of the :data:`httprange.known.classes` as a link."""
    text = printable(str(obj))
    cite = known.citation(obj)
    if cite is None:
        text_node(text)
        return
    link = H.a(text, href=cite.url)
    title = known.title(obj, with_citation=True)
    if title:
        link[u'title'] = title


@singledispatch
def _piece_to_html(piece, ctx):
    _piece_to_html(expand_piece(piece), ctx)

@_piece_to_html.register(str)
def _str_to_html(s, _):
    text_node(printable(s))

@_piece_to_html.register(list)
def _list_to_html(pieces, ctx):
    for piece in pieces:
        _piece_to_html(piece, ctx)

@_piece_to_html.register(notice.Explain)
def _explain_to_html(elem, ctx):
    with H.p(__pretty=False):
        _piece_to_html(elem.content, ctx)

@_piece_to_html.register(notice.Var)
def _var_to_html(var, ctx):
    with H.span(__pretty=False, _class=u'var'):
        _piece_to_html(resolve_reference(ctx, var.reference), ctx)

@_piece_to_html.register(notice.ErrorDetails)
def _error_to_html(_, ctx):
    for para in expand_error(ctx['error']):
        with H.p(__pretty=False, _class=u'error-details'):
            _piece_to_html(para, ctx)

@_piece_to_html.register(notice.CiteRFC)
def _cite_rfc_to_html(elem, ctx):
    with H.p(__pretty=False, _class=u'citation'):
        _piece_to_html(elem.info, ctx)
        quote = elem.content
        if quote:
            text_node(u': ')
            with H.q():
                _piece_to_html(quote, ctx)

@_piece_to_html.register(Citation)
def _citation_to_html(cite, _):
    with H.cite():
        H.a(cite.title, href=cite.url)

for _cls in known.classes:
    _piece_to_html.register(_cls, lambda obj, _: _render_known(obj))
