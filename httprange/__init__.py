# -*- coding: utf-8; -*-

"""Parse, validate and render HTTP range headers (RFC 7233).

``Accept-Ranges``, ``Range`` and ``Content-Range`` are represented by
:class:`AcceptRanges`, :class:`ByteRanges` and :class:`ByteContentRange`.
Each of them can be parsed from a string, rendered with ``str()``,
read from a message's headers and applied to them.
"""

from httprange.__metadata__ import version as __version__
from httprange.accept_ranges import AcceptRanges
from httprange.blackboard import Complaint
from httprange.byte_range import ByteRange
from httprange.byte_ranges import ByteRanges
from httprange.content_range import ByteContentRange
from httprange.error import RangeError, UnknownUnitError
from httprange.exchange import Exchange, check_exchange
from httprange.headers import ACCEPT_RANGES, CONTENT_RANGE, RANGE, Headers
from httprange.notice import Severity
from httprange.reports.html import html_report
from httprange.reports.text import text_report
from httprange.request import Request
from httprange.response import Response
from httprange.structure import Unit

__all__ = [
    'ACCEPT_RANGES',
    'AcceptRanges',
    'ByteContentRange',
    'ByteRange',
    'ByteRanges',
    'CONTENT_RANGE',
    'Complaint',
    'Exchange',
    'Headers',
    'RANGE',
    'RangeError',
    'Request',
    'Response',
    'Severity',
    'Unit',
    'UnknownUnitError',
    'check_exchange',
    'html_report',
    'text_report',
]
