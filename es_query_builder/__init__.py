"""
ES Query Builder - Elasticsearch Query DSL from Python query models.

Build a QueryDocument, then serialize it with QueryTranslator or the
Elasticsearch adapter directly.
"""

from es_query_builder.core import (
    BoolClause,
    LeafClause,
    NestedClause,
    QueryBuilderError,
    QueryDocument,
    QueryType,
    TranslatorConfig,
    UnknownQueryTypeError,
)
from es_query_builder.adapters.elasticsearch import ESQueryTranslator, multi_search_doc
from es_query_builder.logging_config import get_logger, setup_logging
from es_query_builder.query import (
    QueryTranslator,
    escape,
    leaf,
    nested,
    wrap_query_items,
)

__all__ = [
    "BoolClause",
    "LeafClause",
    "NestedClause",
    "QueryBuilderError",
    "QueryDocument",
    "QueryType",
    "TranslatorConfig",
    "UnknownQueryTypeError",
    "ESQueryTranslator",
    "multi_search_doc",
    "get_logger",
    "setup_logging",
    "QueryTranslator",
    "escape",
    "leaf",
    "nested",
    "wrap_query_items",
]
