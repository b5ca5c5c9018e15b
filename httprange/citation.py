# -*- coding: utf-8; -*-

"""References to the documents that define the things we check."""


class Citation(object):

    """A reference to a relevant document."""

    __slots__ = ('title', 'url')

    def __init__(self, title, url):
        self.title = title
        self.url = url

    def __str__(self):
        return self.title or self.url

    def __repr__(self):
        return 'Citation(%r, %r)' % (self.title, self.url)

    def __eq__(self, other):
        return isinstance(other, Citation) and \
            (self.title, self.url) == (other.title, other.url)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.title, self.url))


class RFC(Citation):

    """A reference to an RFC document, optionally to a particular section.

    >>> print(RFC(7233, section=u'4.2'))
    RFC 7233 § 4.2
    >>> print(RFC(7233, section=u'4.2').url)
    https://tools.ietf.org/html/rfc7233#section-4.2
    """

    __slots__ = ('num', 'section', 'appendix')

    def __init__(self, num, section=None, appendix=None):
        assert not (section and appendix)
        self.num = num = int(num)
        self.section = section = str(section) if section else None
        self.appendix = appendix = str(appendix) if appendix else None
        title = u'RFC %d' % num
        url = u'https://tools.ietf.org/html/rfc%d' % num
        if section:
            title += u' § %s' % section
            url += u'#section-%s' % section
        elif appendix:
            title += u' appendix %s' % appendix
            url += u'#appendix-%s' % appendix
        super(RFC, self).__init__(title, url)
