# -*- coding: utf-8; -*-

"""Helpers shared by the text and HTML reports."""

from functools import singledispatch

from httprange import known, notice
from httprange.error import RangeError


def resolve_reference(ctx, path):
    """Look up a ``<var>`` reference such as ``[u'msg', u'method']``."""
    value = ctx[path[0]]
    for attr in path[1:]:
        value = getattr(value, attr)
    return value


@singledispatch
def expand_piece(piece):
    """Reduce a piece of notice content to something simpler.

    Markup elements become lists of their content;
    anything else (such as a parsed header value) becomes its string form.
    """
    return str(piece)

@expand_piece.register(notice.Markup)
def _expand_markup(elem):
    return elem.content


@singledispatch
def expand_error(error):
    """Explain the ``error`` of a complaint as a list of paragraphs."""
    return [[str(error)]]

@expand_error.register(RangeError)
def _expand_range_error(error):
    return [[error.message, u'.'],
            [u'A server would respond with ', error.status, u' ',
             known.title(error.status) or u'', u'.']]


def find_reason_phrase(response):
    return response.reason or known.title(response.status) or u'(unknown)'
