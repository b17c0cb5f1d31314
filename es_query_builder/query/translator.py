"""
Query translation coordinator.

Delegates translation to engine-specific translators.
"""

from typing import Any, Dict, Iterable, Optional

from es_query_builder.core.errors import UnknownQueryTypeError
from es_query_builder.core.interfaces import IQueryTranslator
from es_query_builder.core.models import QueryDocument, TranslatorConfig
from es_query_builder.logging_config import get_logger

logger = get_logger(__name__)


class QueryTranslator:
    """
    Coordinates query translation from documents to engine request bodies.

    This class wraps an engine-specific query translator and adds logging
    around each call.
    """

    def __init__(self, translator: IQueryTranslator):
        """
        Initialize query translator.

        Args:
            translator: Engine-specific query translator implementation
        """
        self.translator = translator

    @classmethod
    def for_elasticsearch(
        cls, config: Optional[TranslatorConfig] = None
    ) -> "QueryTranslator":
        """
        Create a coordinator backed by the Elasticsearch translator.

        Args:
            config: Translator settings; read from the environment when omitted

        Returns:
            Configured QueryTranslator
        """
        from es_query_builder.adapters.elasticsearch import ESQueryTranslator

        return cls(ESQueryTranslator(config or TranslatorConfig.from_env()))

    def translate(self, document: QueryDocument) -> Dict[str, Any]:
        """
        Translate a document to an engine request body.

        Args:
            document: Query document to translate

        Returns:
            JSON-compatible request body

        Raises:
            UnknownQueryTypeError: If a clause has an unknown type tag
        """
        try:
            body = self.translator.translate(document)
        except UnknownQueryTypeError as e:
            logger.error("Query translation failed: %s", e)
            raise

        logger.debug("Translated query for index %r: %s", document.index, body)
        return body

    def serialize(self, document: QueryDocument) -> str:
        """
        Serialize a document to compact JSON text.

        Raises:
            UnknownQueryTypeError: If a clause has an unknown type tag
        """
        try:
            return self.translator.serialize(document)
        except UnknownQueryTypeError as e:
            logger.error("Query serialization failed: %s", e)
            raise

    def multi_search(self, documents: Iterable[QueryDocument]) -> str:
        """Build a multi-search body using the wrapped translator."""
        from es_query_builder.adapters.elasticsearch.msearch import multi_search_doc

        documents = list(documents)
        logger.debug("Building multi-search body for %d documents", len(documents))
        return multi_search_doc(documents, translator=self.translator)
