import json

from searchdsl.queries.ids_query import IdsQuery, ids_query


def test_ids_query_json():
    assert ids_query("1", "4", "100").to_json() == '{"ids":{"values":["1","4","100"]}}'


def test_ids_query_keeps_order():
    query = ids_query("z", "a", "m")
    assert query == IdsQuery(("z", "a", "m"))
    assert query.to_dict() == {"ids": {"values": ["z", "a", "m"]}}


def test_ids_query_round_trip():
    values = ["doc-1", "doc-2"]
    assert json.loads(ids_query(*values).to_json())["ids"]["values"] == values