"""
Multi-search (``_msearch``) request bodies.
"""

from typing import Iterable, List, Optional

from es_query_builder.adapters.elasticsearch.query_translator import (
    ESQueryTranslator,
    dumps,
)
from es_query_builder.core.interfaces import IQueryTranslator
from es_query_builder.core.models import QueryDocument


def multi_search_doc(
    documents: Iterable[QueryDocument],
    translator: Optional[IQueryTranslator] = None,
) -> str:
    """
    Build an NDJSON multi-search body.

    Each document contributes a header line {"index":"<index>"} followed by
    its serialized body, each terminated by a newline.

    Args:
        documents: Query documents, in request order
        translator: Translator used for bodies; defaults to ESQueryTranslator()

    Returns:
        The newline-delimited request body

    Raises:
        UnknownQueryTypeError: If any document fails to translate
    """
    translator = translator or ESQueryTranslator()

    lines: List[str] = []
    for document in documents:
        lines.append(dumps({"index": document.index}))
        lines.append(translator.serialize(document))

    return "".join(line + "\n" for line in lines)
