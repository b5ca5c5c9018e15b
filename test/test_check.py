# -*- coding: utf-8; -*-

from httprange import (ByteContentRange, Exchange, Request, Response,
                       Severity, check_exchange)
from httprange.known import h, m, st


def exchange(req_entries, status, resp_entries, method=m.GET):
    req = Request(u'http', method, u'/video.mp4', u'HTTP/1.1',
                  [(h.host, b'example.com')] + req_entries)
    resp = Response(u'HTTP/1.1', status, None, resp_entries)
    exch = Exchange(req, [resp])
    check_exchange(exch)
    return exch


def ids(obj):
    return sorted(complaint.id for complaint in obj.complaints)


def test_good_partial_content():
    exch = exchange([(h.range, b'bytes=0-99')], st.partial_content,
                    [(h.content_range, b'bytes 0-99/1000'),
                     (h.accept_ranges, b'bytes')])
    assert ids(exch.request) == []
    assert ids(exch.responses[0]) == []


def test_malformed_range():
    exch = exchange([(h.range, b'bytes=5-1')], st.range_not_satisfiable,
                    [(h.content_range, b'bytes */1000')])
    [complaint] = exch.request.complaints
    assert complaint.id == 1001
    assert complaint.severity == Severity.error
    assert complaint.context['error'].status == 416
    assert exch.request.ranges is None
    assert ids(exch.responses[0]) == []


def test_foreign_unit():
    exch = exchange([(h.range, b'pages=1-5')], st.ok, [])
    [complaint] = exch.request.complaints
    assert complaint.id == 1002
    assert complaint.context['unit'] == u'pages'


def test_range_in_post():
    exch = exchange([(h.range, b'bytes=0-5')], st.ok, [], method=m.POST)
    assert ids(exch.request) == [1003]


def test_malformed_content_range():
    exch = exchange([(h.range, b'bytes=0-99')], st.partial_content,
                    [(h.content_range, b'bytes 0-99/50')])
    resp = exch.responses[0]
    assert ids(resp) == [1004]
    assert resp.content_range is None


def test_unknown_accept_ranges_unit():
    exch = exchange([], st.ok, [(h.accept_ranges, b'pages')])
    assert ids(exch.responses[0]) == [1005]
    exch = exchange([], st.ok, [(h.accept_ranges, b'none')])
    assert ids(exch.responses[0]) == []


def test_content_range_in_ok():
    exch = exchange([], st.ok, [(h.content_range, b'bytes 0-99/1000')])
    assert ids(exch.responses[0]) == [1006]


def test_partial_content_without_content_range():
    exch = exchange([(h.range, b'bytes=0-99')], st.partial_content,
                    [(h.content_type, b'video/mp4')])
    assert ids(exch.responses[0]) == [1007]
    exch = exchange([(h.range, b'bytes=0-9,20-29')], st.partial_content,
                    [(h.content_type, b'multipart/byteranges; boundary=x')])
    assert ids(exch.responses[0]) == []


def test_partial_content_without_range():
    exch = exchange([], st.partial_content,
                    [(h.content_range, b'bytes 0-99/1000')])
    assert ids(exch.responses[0]) == [1008]


def test_not_satisfiable_without_range():
    exch = exchange([], st.range_not_satisfiable,
                    [(h.content_range, b'bytes */1000')])
    assert ids(exch.responses[0]) == [1009]


def test_not_satisfiable_without_content_range():
    exch = exchange([(h.range, b'bytes=5000-')], st.range_not_satisfiable, [])
    assert ids(exch.responses[0]) == [1010]


def test_not_satisfiable_with_range():
    exch = exchange([(h.range, b'bytes=5000-')], st.range_not_satisfiable,
                    [(h.content_range, b'bytes 0-99/1000')])
    [complaint] = exch.responses[0].complaints
    assert complaint.id == 1011
    assert complaint.context['expected'] == ByteContentRange(size=1000)

    exch = exchange([(h.range, b'bytes=5000-')], st.range_not_satisfiable,
                    [(h.content_range, b'bytes 0-99/*')])
    [complaint] = exch.responses[0].complaints
    assert complaint.id == 1011
    assert complaint.context['expected'] == u'bytes */<length>'


def test_range_not_requested():
    exch = exchange([(h.range, b'bytes=0-99')], st.partial_content,
                    [(h.content_range, b'bytes 50-149/1000')])
    [complaint] = exch.responses[0].complaints
    assert complaint.id == 1012
    assert str(complaint.context['content_range']) == u'bytes 50-149/1000'


def test_suffix_range_covered():
    exch = exchange([(h.range, b'bytes=-500')], st.partial_content,
                    [(h.content_range, b'bytes 500-999/1000')])
    assert ids(exch.responses[0]) == []


def test_some_ranges_fit():
    exch = exchange([(h.range, b'bytes=0-99,5000-')], st.partial_content,
                    [(h.content_range, b'bytes 0-99/1000')])
    assert ids(exch.responses[0]) == []


def test_clipped_ranges_fit():
    for value in [b'bytes=-2000', b'bytes=0-5000', b'bytes=0-']:
        exch = exchange([(h.range, value)], st.partial_content,
                        [(h.content_range, b'bytes 0-999/1000')])
        assert ids(exch.responses[0]) == []


def test_ranges_do_not_fit():
    exch = exchange([(h.range, b'bytes=5000-,1000-1999')],
                    st.partial_content,
                    [(h.content_range, b'bytes 0-99/1000')])
    assert ids(exch.responses[0]) == [1012, 1013]


def test_partial_content_with_accept_ranges_none():
    exch = exchange([(h.range, b'bytes=0-99')], st.partial_content,
                    [(h.content_range, b'bytes 0-99/1000'),
                     (h.accept_ranges, b'none')])
    assert ids(exch.responses[0]) == [1014]


def test_not_satisfiable_but_ranges_fit():
    exch = exchange([(h.range, b'bytes=0-99')], st.range_not_satisfiable,
                    [(h.content_range, b'bytes */1000')])
    assert ids(exch.responses[0]) == [1015]
    exch = exchange([(h.range, b'bytes=-2000')], st.range_not_satisfiable,
                    [(h.content_range, b'bytes */1000')])
    assert ids(exch.responses[0]) == [1015]


def test_not_satisfiable_and_ranges_do_not_fit():
    exch = exchange([(h.range, b'bytes=1000-,5000-5999')],
                    st.range_not_satisfiable,
                    [(h.content_range, b'bytes */1000')])
    assert ids(exch.responses[0]) == []


def test_response_without_request():
    resp = Response(u'HTTP/1.1', st.partial_content, u'Partial Content',
                    [(h.content_range, b'bytes 0-99/1000')])
    exch = Exchange(None, [resp])
    check_exchange(exch)
    assert ids(resp) == []


def test_silence():
    req = Request(u'http', m.POST, u'/', u'HTTP/1.1',
                  [(h.range, b'bytes=5-1')])
    resp = Response(u'HTTP/1.1', st.ok, u'OK',
                    [(h.content_range, b'bytes 0-99/1000')])
    exch = Exchange(req, [resp])
    exch.silence([1001, 1006])
    check_exchange(exch)
    assert ids(req) == [1003]
    assert ids(resp) == []
    assert req.notices == req.complaints
