"""
Elasticsearch query translator.

Converts QueryDocument trees to Elasticsearch Query DSL request bodies.
"""

import json
from typing import Any, Dict, List, Optional

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
from es_query_builder.logging_config import get_logger
from es_query_builder.query.escaping import escape

logger = get_logger(__name__)

# (QueryDocument attribute, bool query key), in emission order
_BOOL_SECTIONS = (
    ("and_", "must"),
    ("not_", "must_not"),
    ("or_", "should"),
    ("filter", "filter"),
)


def dumps(body: Any) -> str:
    """
    Compact JSON text, keys in insertion order.

    Raises:
        ValueError: If the body contains NaN or Infinity
    """
    return json.dumps(
        body, separators=(",", ":"), ensure_ascii=False, allow_nan=False
    )


def _copy_value(value: Any) -> Any:
    """Deep-copy a caller value, sorting the keys of every mapping."""
    if isinstance(value, dict):
        return {key: _copy_value(value[key]) for key in sorted(value, key=str)}
    if isinstance(value, (list, tuple)):
        return [_copy_value(item) for item in value]
    return value


class ESQueryTranslator:
    """
    Translates query documents to Elasticsearch DSL.

    Implements the IQueryTranslator interface for Elasticsearch. The
    translator holds only its config and can be shared between threads.
    """

    def __init__(self, config: Optional[TranslatorConfig] = None):
        """
        Initialize Elasticsearch query translator.

        Args:
            config: Translator settings; defaults to TranslatorConfig()
        """
        self.config = config or TranslatorConfig()

    def translate(self, document: QueryDocument) -> Dict[str, Any]:
        """
        Convert a QueryDocument to an Elasticsearch search request body.

        Args:
            document: Top-level query document

        Returns:
            Request body dictionary; paging and sort keys are omitted when empty

        Raises:
            UnknownQueryTypeError: If any clause has an unknown type tag
            TypeError: If a query_string clause has a non-string value
        """
        request: Dict[str, Any] = {"query": self._resolve_body(document)}

        if document.from_:
            request["from"] = document.from_
        if document.size:
            request["size"] = document.size
        if document.sort:
            request["sort"] = [_copy_value(entry) for entry in document.sort]
        if document.search_after:
            request["search_after"] = _copy_value(document.search_after)
        if document.track_total_hits:
            request["track_total_hits"] = True

        return request

    def serialize(self, document: QueryDocument) -> str:
        """Convert a QueryDocument to compact JSON text."""
        return dumps(self.translate(document))

    def _resolve_body(self, document: QueryDocument) -> Dict[str, Any]:
        """Build the value that sits under a "query" key."""
        body: Dict[str, Any] = {}

        bool_query: Dict[str, List[Dict[str, Any]]] = {}
        for attr, key in _BOOL_SECTIONS:
            clauses = getattr(document, attr)
            if clauses:
                bool_query[key] = [self._resolve_clause(c) for c in clauses]
        if bool_query:
            body["bool"] = bool_query

        if document.nested_document is not None:
            nested_doc = document.nested_document
            body["nested"] = self._resolve_nested(nested_doc.nested_path, nested_doc)

        if document.match_all is not None:
            body["match_all"] = _copy_value(document.match_all)

        return body

    def _resolve_clause(self, clause: Clause) -> Dict[str, Any]:
        """Translate one clause according to its variant."""
        if isinstance(clause, NestedClause):
            return {"nested": self._resolve_nested(clause.path, clause.document)}
        if isinstance(clause, BoolClause):
            return self._resolve_body(clause.document)
        return self._resolve_leaf(clause)

    def _resolve_nested(self, path: str, document: QueryDocument) -> Dict[str, Any]:
        """Build the inside of a nested wrapper for a sub-document."""
        logger.debug("Resolving nested scope at path %r", path)
        return {"path": path, "query": self._resolve_body(document)}

    def _resolve_leaf(self, clause: LeafClause) -> Dict[str, Any]:
        """Translate a single-field clause to its type-specific shape."""
        type_name = resolve_query_type(clause.type)

        if clause.type == QueryType.QUERY_STRING:
            return self._resolve_query_string(clause)

        value = _copy_value(clause.value)
        # Wildcards match against lowercased terms by default
        if clause.type == QueryType.WILDCARD and isinstance(value, str):
            value = value.lower()

        return {type_name: {clause.field: value}}

    def _resolve_query_string(self, clause: LeafClause) -> Dict[str, Any]:
        if not isinstance(clause.value, str):
            raise TypeError(
                f"query_string value for field {clause.field!r} must be str, "
                f"got {type(clause.value).__name__}"
            )
        return {
            "query_string": {
                "analyze_wildcard": self.config.analyze_wildcard,
                "fields": [clause.field],
                "query": escape(clause.value),
            }
        }
