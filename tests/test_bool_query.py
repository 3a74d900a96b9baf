import pytest

from searchdsl.query import QueryError, mock_query, to_json
from searchdsl.queries.bool_query import BoolQuery, bool_query

QUERY_PAIRS = (("fake_query1", "fake_value1"), ("fake_query2", "fake_value2"))
FILTER_PAIRS = (("fake_filter1", "fake_value1"), ("fake_filter2", "fake_value2"))


def _mocks(pairs):
    return [mock_query({key: value}) for key, value in pairs]


def test_bool_query_all_clauses():
    expected = (
        '{"bool":{"must":[{"fake_query1":"fake_value1"},{"fake_query2":"fake_value2"}],'
        '"filter":[{"fake_filter1":"fake_value1"},{"fake_filter2":"fake_value2"}],'
        '"should":[{"fake_query1":"fake_value1"},{"fake_query2":"fake_value2"}],'
        '"must_not":[{"fake_query1":"fake_value1"},{"fake_query2":"fake_value2"}]}}'
    )
    query = bool_query(
        must=_mocks(QUERY_PAIRS),
        filter=_mocks(FILTER_PAIRS),
        should=_mocks(QUERY_PAIRS),
        must_not=_mocks(QUERY_PAIRS),
    )
    assert to_json(query) == expected


def test_bool_query_without_clauses_raises():
    with pytest.raises(QueryError, match="at least one boolean clause"):
        bool_query()


def test_minimum_should_match_alone_is_enough():
    assert bool_query(minimum_should_match="2").to_dict() == {
        "bool": {"minimum_should_match": "2"}
    }


def test_minimum_should_match_follows_clauses():
    query = bool_query(should=_mocks([("a", 1), ("b", 2)]), minimum_should_match="1")
    assert query.to_json() == '{"bool":{"should":[{"a":1},{"b":2}],"minimum_should_match":"1"}}'


def test_empty_clause_lists_are_omitted():
    query = bool_query(must=[], filter=_mocks([("x", "y")]))
    assert query.to_dict() == {"bool": {"filter": [{"x": "y"}]}}


def test_non_query_clause_raises():
    with pytest.raises(QueryError, match="must clause 1"):
        bool_query(must=[*_mocks([("a", 1)]), {"a": 1}])


def test_nested_bool_queries():
    outer = bool_query(should=[bool_query(must=_mocks([("a", 1)]))])
    assert isinstance(outer, BoolQuery)
    assert outer.to_dict() == {"bool": {"should": [{"bool": {"must": [{"a": 1}]}}]}}