# -*- coding: utf-8; -*-

from httprange.known import st


INVALID_RANGE = u'Invalid Range header for byte ranges'
INVALID_CONTENT_RANGE = u'Invalid Content-Range value'
NOT_BYTES = u'Range is not in bytes'


class RangeError(Exception):

    """A range header value that can't be accepted.

    Carries the HTTP status code that a server should respond with,
    so that callers can map it directly onto a response:

    >>> err = RangeError(st.range_not_satisfiable, INVALID_CONTENT_RANGE)
    >>> err.status
    StatusCode(416)
    >>> print(err)
    Invalid Content-Range value
    """

    def __init__(self, status, message):
        super(RangeError, self).__init__(message)
        self.status = status
        self.message = message

    def __repr__(self):
        return '%s(%r, %r)' % (self.__class__.__name__,
                               self.status, self.message)

    def __str__(self):
        return self.message


class UnknownUnitError(RangeError):

    """A ``Range`` value that is not in the bytes unit.

    Only raised when parsing a bare string.  Reading from headers
    treats such a value as if the header were absent.
    """

    def __init__(self, message=NOT_BYTES):
        super(UnknownUnitError, self).__init__(st.bad_request, message)


def unsatisfiable(message=INVALID_RANGE):
    return RangeError(st.range_not_satisfiable, message)


def bad_request(message=INVALID_RANGE):
    return RangeError(st.bad_request, message)
