# searchdsl

searchdsl builds Elasticsearch search request bodies in Python. Each query,
sort clause and body option is a small immutable object. Call `to_dict()` on
it to get plain Python data. Call `to_json()` on a query, a suggest section or
a whole body to get the JSON text for the search API.

It has no runtime dependencies.

## Installation

```
pip install searchdsl
```

## A search body

`searchdsl.body.define` builds a `SearchBody`:

```python
from searchdsl.body import define
from searchdsl.clauses import SortOrder, collapse, sort_clause, source_filter
from searchdsl.queries.bool_query import bool_query
from searchdsl.queries.exists_query import exists_query
from searchdsl.queries.match_query import match_query
from searchdsl.queries.range_query import range_query
from searchdsl.queries.term_query import term_query

body = define(
    source=source_filter(includes=["title", "body"]),
    size=10,
    query=bool_query(
        must=[match_query("title", "quick brown fox")],
        filter=[
            range_query("published_at", gt="now-24h"),
            term_query("status.keyword", "published"),
            exists_query("author"),
        ],
    ),
    sort=[sort_clause("published_at", SortOrder.DESC), sort_clause("_score")],
    collapse=collapse("author.keyword"),
)

print(body.to_json(indent=2))
```

Sections you do not give are not written. `from_=0` is also left out, because
0 is the default offset. `collapse` also accepts a plain field name, and
`search_after` also accepts a sequence of sort values.

## Queries

Each module in `searchdsl.queries` has one query class and one builder
function:

- compound: `bool_query`, `boosting_query`, `constant_score_query`,
  `dis_max_query`, `nested_query`
- full text: `match_query`, `match_phrase_query`, `match_phrase_prefix_query`,
  `match_bool_prefix_query`
- term level: `term_query`, `terms_query`, `terms_set_query`, `range_query`,
  `exists_query`, `ids_query`, `prefix_query`, `wildcard_query`,
  `regexp_query`, `fuzzy_query`
- `match_all_query`

Optional parameters are keyword arguments. In most builders an option that is
not given, or that is zero or empty, is not written. The exceptions:

- `dis_max_query` writes `tie_breaker` as `null` when it is unset.
- `match_all_query` and `term_query` write `boost` whenever it is given.
- `match_query` writes its boolean and numeric options whenever they are
  given.

```python
from searchdsl.queries.term_query import term_query

term_query("user.id", "kimchy", boost=2).to_json()
# '{"term":{"user.id":{"value":"kimchy","boost":2}}}'
```

Shared option values are enums in `searchdsl.query`:

- `Rewrite`
- `ZeroTerms`
- `Operator`

Other option values live in their own modules:

- `Relation` is in `searchdsl.queries.range_query`.
- `FUZZINESS_AUTO` is in `searchdsl.queries.match_query`.

`searchdsl.query.mock_query(mapping)` makes a query that encodes exactly the
mapping you give it. Use it for bodies that have no builder.

## JSON output

`searchdsl.query.to_json(value, indent=None)` encodes any query, clause or
plain value:

- The output is compact unless `indent` is given.
- `<`, `>` and `&` are written as `\u003c`, `\u003e` and `\u0026`.
- An integral float such as `2.0` is written as `2`.

## Errors

A builder that gets invalid input raises `searchdsl.query.QueryError`, which
is a subclass of `ValueError`. For example:

- `bool_query()` with no clauses
- `range_query()` with no bound
- a clause that is not a query
- a negative `from_` or `size` in `define`

## Sorting, paging and point in time

`searchdsl.clauses` provides:

- `sort_clause(field, order, missing=...)`. Use `SortOrder` for the order,
  and `MISSING_FIRST`, `MISSING_LAST` or a custom value for `missing`.
- `search_after(...)`
- `pit(pit_id, keep_alive)`
- `collapse(field)`
- `source_filter(includes=..., excludes=...)`

Pass them to `define` as `sort=`, `search_after=`, `pit=`, `collapse=` and
`source=`. Use `from_=` and `size=` to page with from and size.

## Suggesters

```python
from searchdsl.suggest import SuggestMode, suggesters, term, term_suggester

suggest = suggesters(
    "tring out Elasticsearch",
    term_suggester(
        term("my-suggestion", "tring out Elasticsearch", "message",
             suggest_mode=SuggestMode.ALWAYS),
    ),
)
```

Named suggestions are written in name order. The global text passed to
`suggesters` is kept on the object but is not written to the JSON. Pass the
result to `define(suggest=...)`.

## What it does not do

searchdsl only builds request bodies. It does not:

- connect to a cluster or send requests
- parse search responses
- provide `query_string` or `simple_query_string` builders (use `mock_query`
  for those)

## Running the tests

```
pip install -e ".[test]"
pytest
```