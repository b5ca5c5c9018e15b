# -*- coding: utf-8; -*-

"""Tables of the protocol elements that the range checks refer to.

Each table is a CSV file next to this module, with one row per
header field, method, status code or range unit.  Rows are turned into
dicts keyed by the element itself (such as ``StatusCode(416)``)
and are reachable by attribute through short accessors::

    >>> h.content_range
    FieldName('Content-Range')
    >>> st.range_not_satisfiable
    StatusCode(416)
    >>> unit.none_
    Unit('none')
"""

import csv
import io
import keyword
import pkgutil

from httprange import structure
from httprange.citation import RFC


def _convert(value):
    if value.isdigit():
        return int(value)
    return value


class Knowledge(object):

    """All rows of one table, such as ``status_code.csv``."""

    def __init__(self, cls, table):
        self.cls = cls
        self.table = table
        self.info_by_key = {}
        self.keys_by_name = {}

        data = pkgutil.get_data(__name__, '%s.csv' % table).decode('ascii')
        for row in csv.DictReader(io.StringIO(data, newline=u'')):
            key = cls(row.pop('key'))
            info = {field: _convert(value)
                    for (field, value) in row.items() if value}
            if 'rfc' in info:
                info['citation'] = RFC(info.pop('rfc'),
                                       info.pop('rfc_section', None))
            info['key'] = key
            name = self.attribute_name(key, info)
            if key in self.info_by_key or name in self.keys_by_name:
                raise ValueError('%s.csv: duplicate %s' % (table, key))
            self.info_by_key[key] = info
            self.keys_by_name[name] = key

        self.accessor = KnowledgeAccessor(self)

    def __contains__(self, key):
        return key in self.info_by_key

    def __iter__(self):
        return iter(self.info_by_key)

    def get(self, key):
        """The row for `key` as a dict, empty if `key` is not in the table."""
        return self.info_by_key.get(key, {})

    @staticmethod
    def attribute_name(key, info):
        source = key if isinstance(key, str) else info['title']
        name = source.lower()
        for c in u'- /':
            name = name.replace(c, u'_')
        if keyword.iskeyword(name) or keyword.iskeyword(name.title()):
            name += u'_'        # ``none_``, since ``None`` is taken
        return name


class KnowledgeAccessor(object):

    """Attribute access to a table's keys: ``h.range``, ``m.GET``."""

    def __init__(self, knowledge):
        self.knowledge = knowledge

    def __getattr__(self, name):
        try:
            return self.knowledge.keys_by_name[name]
        except KeyError:
            raise AttributeError(name)


header = Knowledge(structure.FieldName, 'header')
h = header.accessor


class MethodKnowledge(Knowledge):

    @staticmethod
    def attribute_name(key, info):
        return str(key)

method = MethodKnowledge(structure.Method, 'method')
m = method.accessor


status_code = Knowledge(structure.StatusCode, 'status_code')
st = status_code.accessor


range_unit = Knowledge(structure.Unit, 'range_unit')
unit = range_unit.accessor


# Every class with a table, mapped to that table
# and to the tag that stands for it in ``notices.xml``.
classes = {
    structure.FieldName: (header, 'h'),
    structure.Method: (method, 'm'),
    structure.StatusCode: (status_code, 'st'),
    structure.Unit: (range_unit, 'unit'),
}


def get(obj):
    for (cls, (knowledge, _)) in classes.items():
        if isinstance(obj, cls):
            return knowledge.get(obj)
    return {}


def citation(obj):
    return get(obj).get('citation')


def title(obj, with_citation=False):
    info = get(obj)
    t = info.get('title')
    cite = info.get('citation')
    if with_citation and cite is not None:
        t = u'%s (%s)' % (t, cite.title) if t else cite.title
    return t
