"""Builders for Elasticsearch search request bodies, queries, sort clauses and suggesters."""

__version__ = "0.1.0"