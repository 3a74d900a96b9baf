import json

import pytest

from searchdsl.clauses import (
    MISSING_FIRST,
    MISSING_LAST,
    SortOrder,
    collapse,
    pit,
    search_after,
    sort_clause,
    source_filter,
)
from searchdsl.query import to_json


def test_new_search_collapse():
    assert to_json(collapse("fake_field")) == '{"field":"fake_field"}'


def test_sort_clause_with_default_order():
    assert to_json(sort_clause("fake_field", SortOrder.DEFAULT)) == '"fake_field"'


def test_sort_clause_with_order():
    assert to_json(sort_clause("fake_field", SortOrder.ASC)) == (
        '{"fake_field":{"order":"asc"}}'
    )


@pytest.mark.parametrize(
    "field, order, missing, expected",
    [
        ("price", SortOrder.ASC, None, '{"price":{"order":"asc"}}'),
        ("date", SortOrder.DESC, MISSING_LAST, '{"date":{"order":"desc","missing":"_last"}}'),
        ("rating", SortOrder.DEFAULT, "0", '{"rating":{"missing":"0"}}'),
        ("category", SortOrder.DEFAULT, MISSING_FIRST, '{"category":{"missing":"_first"}}'),
        ("quantity", SortOrder.DEFAULT, None, '"quantity"'),
    ],
)
def test_sort_clause_with_order_and_missing(field, order, missing, expected):
    clause = sort_clause(field, order, missing=missing)
    assert json.loads(to_json(clause)) == json.loads(expected)


def test_sort_clause_defaults_to_default_order():
    assert sort_clause("_score").to_dict() == "_score"


def test_new_source_filter():
    value = source_filter(includes=["field1", "field2"], excludes=["field3", "field4"])
    assert to_json(value) == (
        '{"includes":["field1","field2"],"excludes":["field3","field4"]}'
    )


def test_source_filter_omits_empty_lists():
    assert source_filter(includes=["field1"]).to_dict() == {"includes": ["field1"]}
    assert source_filter().to_dict() == {}


def test_search_after_values():
    value = search_after("2021-05-20T05:30:04.832Z", 4294967298)
    assert to_json(value) == '["2021-05-20T05:30:04.832Z",4294967298]'


def test_pit():
    assert to_json(pit("test_id", "1m")) == '{"id":"test_id","keep_alive":"1m"}'


def test_pit_omits_empty_keep_alive():
    assert pit("test_id", "").to_dict() == {"id": "test_id"}