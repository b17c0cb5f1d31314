"""Core interfaces, models and errors for the query builder."""

from es_query_builder.core.errors import (
    QueryBuilderError,
    UnknownQueryTypeError,
)
from es_query_builder.core.interfaces import IQueryTranslator
from es_query_builder.core.models import (
    BoolClause,
    Clause,
    LeafClause,
    NestedClause,
    QueryDocument,
    QueryType,
    TranslatorConfig,
    resolve_query_type,
)

__all__ = [
    "QueryBuilderError",
    "UnknownQueryTypeError",
    "IQueryTranslator",
    "BoolClause",
    "Clause",
    "LeafClause",
    "NestedClause",
    "QueryDocument",
    "QueryType",
    "TranslatorConfig",
    "resolve_query_type",
]
