import pytest

from searchdsl.queries.match_phrase_prefix import match_phrase_prefix_query
from searchdsl.query import ZeroTerms


@pytest.mark.parametrize(
    ("options", "expected"),
    [
        ({}, '{"match_phrase_prefix":{"message":{"query":"quick brown f"}}}'),
        (
            {"analyzer": "my_analyzer"},
            '{"match_phrase_prefix":{"message":{"query":"quick brown f",'
            '"analyzer":"my_analyzer"}}}',
        ),
        ({"slop": 2}, '{"match_phrase_prefix":{"message":{"query":"quick brown f","slop":2}}}'),
        (
            {"max_expansions": 50},
            '{"match_phrase_prefix":{"message":{"query":"quick brown f",'
            '"max_expansions":50}}}',
        ),
        (
            {"zero_terms_query": ZeroTerms.ALL},
            '{"match_phrase_prefix":{"message":{"query":"quick brown f",'
            '"zero_terms_query":"all"}}}',
        ),
        (
            {
                "analyzer": "my_analyzer",
                "slop": 2,
                "max_expansions": 50,
                "zero_terms_query": ZeroTerms.ALL,
            },
            '{"match_phrase_prefix":{"message":{"query":"quick brown f",'
            '"analyzer":"my_analyzer","slop":2,"max_expansions":50,'
            '"zero_terms_query":"all"}}}',
        ),
    ],
    ids=["none", "analyzer", "slop", "max_expansions", "zero_terms", "all"],
)
def test_match_phrase_prefix_json(options, expected):
    assert match_phrase_prefix_query("message", "quick brown f", **options).to_json() == expected