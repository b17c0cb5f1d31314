"""Elasticsearch adapter for the query builder."""

from es_query_builder.adapters.elasticsearch.query_translator import ESQueryTranslator
from es_query_builder.adapters.elasticsearch.msearch import multi_search_doc

__all__ = ["ESQueryTranslator", "multi_search_doc"]
