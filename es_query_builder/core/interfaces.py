"""
Abstract interfaces for query DSL adapters.

These protocols define the contract that a search engine adapter must
implement to work with the query builder system.
"""

from typing import Any, Dict, Protocol

from es_query_builder.core.models import QueryDocument


class IQueryTranslator(Protocol):
    """
    Translate a QueryDocument into an engine-specific request body.

    Implementations are stateless: translating the same document twice
    must produce identical output, and the input must not be mutated.
    """

    def translate(self, document: QueryDocument) -> Dict[str, Any]:
        """
        Convert a query document into a JSON-compatible dictionary.

        Args:
            document: The query to translate

        Returns:
            Request body with "query" and any non-empty paging/sort keys

        Raises:
            UnknownQueryTypeError: If any clause carries an unknown type tag
        """
        ...

    def serialize(self, document: QueryDocument) -> str:
        """
        Convert a query document into compact JSON text.

        Args:
            document: The query to serialize

        Returns:
            A single JSON value with no trailing newline
        """
        ...
