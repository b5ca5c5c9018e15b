# -*- coding: utf-8; -*-

from httprange.reports.html import html_report
from httprange.reports.text import text_report


formats = {
    u'text': text_report,
    u'html': html_report,
}
