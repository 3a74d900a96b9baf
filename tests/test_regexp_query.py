import pytest

from searchdsl.query import Rewrite
from searchdsl.queries.regexp_query import RegexpQuery, regexp_query


def test_regexp_query_with_no_options():
    query = regexp_query("fake_field", "fake_value")
    assert query.to_json() == '{"regexp":{"fake_field":{"value":"fake_value"}}}'


def test_regexp_query_with_all_options():
    query = regexp_query(
        "fake_field",
        "fake_value",
        flags="fake_flags",
        case_insensitive=True,
        max_determinized_states=100,
        rewrite=Rewrite.CONSTANT_SCORE,
    )
    assert query.to_json() == (
        '{"regexp":{"fake_field":{"value":"fake_value","flags":"fake_flags",'
        '"case_insensitive":true,"max_determinized_states":100,'
        '"rewrite":"constant_score"}}}'
    )


@pytest.mark.parametrize(
    "options,expected_keys",
    [
        ({"flags": "ALL"}, ["value", "flags"]),
        ({"max_determinized_states": 5}, ["value", "max_determinized_states"]),
        ({"rewrite": "scoring_boolean"}, ["value", "rewrite"]),
        ({"case_insensitive": False}, ["value"]),
    ],
)
def test_regexp_query_only_set_options_written(options, expected_keys):
    body = regexp_query("f", "v", **options).to_dict()["regexp"]["f"]
    assert list(body) == expected_keys


def test_regexp_query_dataclass_fields():
    query = regexp_query("name", "k.*y", flags="ALL")
    assert query == RegexpQuery("name", "k.*y", flags="ALL")