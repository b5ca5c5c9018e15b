# -*- coding: utf-8; -*-

from httprange.blackboard import Blackboard
from httprange.error import RangeError
from httprange.headers import Headers
from httprange.structure import HTTPVersion
from httprange.util.text import force_bytes, force_unicode


class Message(Blackboard):

    """An HTTP message (request or response)."""

    self_name = u'msg'

    def __init__(self, version, header_entries, body=b'', remark=None):
        super(Message, self).__init__()
        self.version = (HTTPVersion(force_unicode(version))
                        if version is not None else None)
        self.headers = Headers(header_entries)
        self.body = force_bytes(body) if body is not None else None
        self.remark = remark

    @property
    def header_entries(self):
        return self.headers.entries

    def _derive(self, cls, notice_id):
        # Malformed values are reported here, once,
        # and then treated as absent by everything else.
        try:
            return cls.from_headers(self)
        except RangeError as exc:
            self.complain(notice_id, error=exc)
            return None
