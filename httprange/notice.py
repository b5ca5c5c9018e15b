# -*- coding: utf-8; -*-

"""The notices that the range checks can report.

Notices are kept in ``notices.xml`` next to this module.
Their titles and explanations are mixed content (text interleaved
with header names, status codes and placeholders for context values),
which XML expresses directly.  lxml instantiates a custom class
for every element, and the reports walk these classes to produce
plain text or HTML.

:data:`all_notices` maps every notice ID (:class:`int`) to its
:class:`Notice` element.
"""

import enum
import pkgutil

import lxml.etree

from httprange import citation, known


lookup = lxml.etree.ElementNamespaceClassLookup()
ns = lookup.get_namespace(None)


class Severity(enum.IntEnum):

    """How serious a notice is.

    >>> Severity.debug < Severity.comment < Severity.error
    True
    >>> print(Severity.comment.letter)
    C

    The underlying values of this enumeration are **not** part of the API.
    """

    debug = 0
    comment = 1
    error = 2

    @property
    def letter(self):
        return self.name[0].upper()


@ns('error')
@ns('comment')
@ns('debug')
class Notice(lxml.etree.ElementBase):

    @property
    def id(self):
        return int(self.get('id'))

    @property
    def severity(self):
        return Severity[self.tag]

    @property
    def title(self):
        return self.find('title').content

    @property
    def explanation(self):
        """Paragraphs, error details and citations, in document order."""
        return [child for child in self
                if isinstance(child, (Explain, ErrorDetails, CiteRFC))]


class Markup(lxml.etree.ElementBase):

    """An element with mixed content."""

    @property
    def content(self):
        pieces = [self.text]
        for child in self:
            pieces.extend([child, child.tail])
        pieces = [p for p in pieces if p is not None and p != u'']
        if pieces and isinstance(pieces[0], str):
            pieces[0] = pieces[0].lstrip()
        if pieces and isinstance(pieces[-1], str):
            pieces[-1] = pieces[-1].rstrip()
        return pieces


@ns('title')
class Title(Markup):
    pass


@ns('explain')
class Explain(Markup):
    pass


@ns('var')
class Var(lxml.etree.ElementBase):

    """Stands for a value from the complaint's context.

    ``<var ref="content_range.size"/>`` is the ``size`` attribute
    of the context's ``content_range``.
    """

    @property
    def reference(self):
        return self.get('ref').split('.')


@ns('exception')
class ErrorDetails(lxml.etree.ElementBase):

    """Stands for the :exc:`~httprange.RangeError` in the context."""


@ns('rfc')
class CiteRFC(Markup):

    """A pointer into an RFC, possibly quoting it."""

    @property
    def info(self):
        return citation.RFC(self.get('num'), self.get('sect'),
                            self.get('appendix'))


known_map = {name: cls for (cls, (_, name)) in known.classes.items()}


class KnownItem(Markup):

    """A header, method, status code or unit, as ``<h>Range</h>``."""

    @property
    def content(self):
        return known_map[self.tag](self.text.strip())


for _tag in known_map:
    ns[_tag] = KnownItem


def _load_notices():
    parser = lxml.etree.XMLParser(remove_comments=True)
    parser.set_element_class_lookup(lookup)
    root = lxml.etree.fromstring(pkgutil.get_data('httprange', 'notices.xml'),
                                 parser)
    notices = {}
    for elem in root:
        if not isinstance(elem, Notice):
            continue
        if elem.id in notices:
            raise ValueError('duplicate notice ID %d' % elem.id)
        if elem.find('title') is None:
            raise ValueError('notice %d has no title' % elem.id)
        notices[elem.id] = elem
    return notices

all_notices = _load_notices()
