# -*- coding: utf-8; -*-

import pytest

from httprange.byte_range import MAX_POS, ByteRange
from httprange.error import RangeError


def no_parse(text):
    with pytest.raises(RangeError) as info:
        ByteRange.parse(text)
    assert info.value.status == 416
    assert info.value.message == u'Invalid Range header for byte ranges'


def test_parse():
    assert ByteRange.parse(u'1-5') == ByteRange(1, 5)
    assert ByteRange.parse(u'1-') == ByteRange(1, None)
    assert ByteRange.parse(u'-5') == ByteRange(None, 5)
    assert ByteRange.parse(u'  0-499 ') == ByteRange(0, 499)
    assert ByteRange.parse(u'%d-' % MAX_POS) == ByteRange(MAX_POS, None)


def test_parse_without_dash():
    # Everything before the first dash is the start.
    assert ByteRange.parse(u'5') == ByteRange(5, None)


def test_no_parse():
    no_parse(u'-')
    no_parse(u'')
    no_parse(u'3-1')
    no_parse(u'abc-5')
    no_parse(u'1-abc')
    no_parse(u'+1-5')
    no_parse(u'1--5')
    no_parse(u'1 - 5')
    no_parse(u'-%d' % (MAX_POS + 1))


def test_equal_bounds_rejected():
    no_parse(u'0-0')
    no_parse(u'5-5')


def test_render():
    assert str(ByteRange(1, 5)) == u'1-5'
    assert str(ByteRange(1, None)) == u'1-'
    assert str(ByteRange(None, 5)) == u'-5'
    assert str(ByteRange.parse(u' 10-20')) == u'10-20'


def test_construct():
    assert ByteRange(3, 3) == (3, 3)
    assert ByteRange(end=7).is_suffix
    assert ByteRange(7).is_open
    with pytest.raises(ValueError):
        ByteRange()
    with pytest.raises(ValueError):
        ByteRange(5, 4)
    with pytest.raises(ValueError):
        ByteRange(-1, 4)
    with pytest.raises(ValueError):
        ByteRange(0, MAX_POS + 1)
    with pytest.raises(TypeError):
        ByteRange(u'1', 4)


def test_match_size():
    assert ByteRange(0, 4).match_size(5)
    assert not ByteRange(0, 4).match_size(4)
    assert not ByteRange(0, 4).match_size(3)
    assert not ByteRange(4, None).match_size(4)
    assert ByteRange(4, None).match_size(5)
    assert not ByteRange(None, 5).match_size(5)
    assert ByteRange(None, 5).match_size(6)
    assert not ByteRange(0, None).match_size(0)


def test_resolve():
    assert ByteRange(0, 499).resolve(10000) == (0, 499)
    assert ByteRange(9500, None).resolve(10000) == (9500, 9999)
    assert ByteRange(None, 500).resolve(10000) == (9500, 9999)
    assert ByteRange(None, 20000).resolve(10000) == (0, 9999)
    assert ByteRange(0, 20000).resolve(10000) == (0, 9999)
    assert ByteRange(10000, None).resolve(10000) is None
    assert ByteRange(None, 0).resolve(10000) is None
    assert ByteRange(None, 5).resolve(0) is None
