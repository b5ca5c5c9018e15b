# -*- coding: utf-8; -*-

"""Objects that the checks report their findings on.

A :class:`Blackboard` holds the notices reported on one request,
response or exchange.  The parsed range values of a message are also
kept on it, computed on first use (see :class:`derived_property`).
"""

from collections import namedtuple

from httprange.notice import all_notices


class Complaint(namedtuple('Complaint', ('notice', 'context'))):

    """One notice, reported with the values it talks about.

    The `context` maps the names used in the notice's ``<var>``
    references (such as ``msg`` or ``content_range``) to objects.
    """

    __slots__ = ()

    id = property(lambda self: self.notice.id)
    severity = property(lambda self: self.notice.severity)


class Blackboard(object):

    self_name = u'self'

    def __init__(self):
        self._reported = []
        self._silenced = set()
        self.memoized = {}

    @property
    def children(self):
        """The blackboards nested under this one (an exchange's messages)."""
        return []

    def walk(self):
        """Yield this blackboard, then all of its children, depth first."""
        yield self
        for child in self.children:
            for obj in child.walk():
                yield obj

    def complain(self, notice_id, **context):
        """Report the notice `notice_id` on this blackboard.

        Keyword arguments become the notice's context, along with
        this blackboard itself under :attr:`self_name`.
        Reporting the same notice with the same context twice
        has no effect.
        """
        context[self.self_name] = self
        complaint = Complaint(all_notices[notice_id], context)
        if complaint not in self._reported:
            self._reported.append(complaint)

    def silence(self, notice_ids):
        """Hide the given notices on this blackboard and all of its children.

        Silencing works both before and after the checks have run.
        """
        notice_ids = frozenset(notice_ids)
        for obj in self.walk():
            obj._silenced |= notice_ids      # pylint: disable=protected-access

    @property
    def complaints(self):
        """The :class:`~httprange.Complaint` objects that are not silenced."""
        return [c for c in self._reported if c.id not in self._silenced]

    notices = complaints


class derived_property(object):        # pylint: disable=invalid-name

    """A value derived from a blackboard's raw data and then remembered.

    A :class:`~httprange.Request` starts out with nothing but
    header entries.  Its ``ranges`` are parsed out of them on first access,
    and any notices about a malformed header are reported at that moment,
    exactly once.  Assigning to the property replaces the derived value.
    """

    def __init__(self, getter):
        self.getter = getter
        self.__name__ = getter.__name__
        self.__doc__ = getter.__doc__

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        if self.__name__ not in obj.memoized:
            obj.memoized[self.__name__] = self.getter(obj)
        return obj.memoized[self.__name__]

    def __set__(self, obj, value):
        obj.memoized[self.__name__] = value
