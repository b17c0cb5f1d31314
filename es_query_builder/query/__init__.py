"""Query construction, escaping and translation coordination."""

from es_query_builder.query.builders import leaf, nested, wrap_query_items
from es_query_builder.query.escaping import escape
from es_query_builder.query.translator import QueryTranslator

__all__ = ["leaf", "nested", "wrap_query_items", "escape", "QueryTranslator"]
