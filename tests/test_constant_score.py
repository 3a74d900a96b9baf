import pytest

from searchdsl.query import QueryError, mock_query, to_json
from searchdsl.queries.constant_score import constant_score_query


@pytest.mark.parametrize(
    ("filter_body", "boost", "expected"),
    [
        (
            {"term": {"user.id": {"value": "kimchy"}}},
            1.2,
            '{"constant_score":{"filter":{"term":{"user.id":{"value":"kimchy"}}},"boost":1.2}}',
        ),
        (
            {"exists": {"field": "f"}},
            0,
            '{"constant_score":{"filter":{"exists":{"field":"f"}}}}',
        ),
    ],
)
def test_constant_score_json(filter_body, boost, expected):
    assert to_json(constant_score_query(mock_query(filter_body), boost)) == expected


def test_invalid_filter_raises():
    with pytest.raises(QueryError, match="filter query"):
        constant_score_query({"term": "x"}, 1.0)