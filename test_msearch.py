"""
Tests for multi-search body generation and the translation coordinator.
"""

import logging

import pytest

from es_query_builder import (
    ESQueryTranslator,
    LeafClause,
    QueryDocument,
    QueryTranslator,
    QueryType,
    TranslatorConfig,
    UnknownQueryTypeError,
    multi_search_doc,
)


def _two_documents():
    return [
        QueryDocument(
            index="index1",
            and_=[LeafClause(field="user.id", value="kimchy!", type=QueryType.QUERY_STRING)],
        ),
        QueryDocument(
            index="index2",
            and_=[
                LeafClause(
                    field="some_index_id",
                    value="some-long-key-id-value",
                    type=QueryType.MATCH,
                )
            ],
        ),
    ]


EXPECTED_MSEARCH = (
    '{"index":"index1"}\n'
    '{"query":{"bool":{"must":[{"query_string":{"analyze_wildcard":true,'
    '"fields":["user.id"],"query":"kimchy\\\\!"}}]}}}\n'
    '{"index":"index2"}\n'
    '{"query":{"bool":{"must":[{"match":{"some_index_id":"some-long-key-id-value"}}]}}}\n'
)


def test_multi_search_doc():
    body = multi_search_doc(_two_documents())

    assert body == EXPECTED_MSEARCH
    assert len(body.splitlines()) == 4


def test_multi_search_doc_empty():
    assert multi_search_doc([]) == ""


def test_multi_search_doc_propagates_errors():
    docs = [QueryDocument(index="i", and_=[LeafClause(field="a", value=1, type=42)])]

    with pytest.raises(UnknownQueryTypeError):
        multi_search_doc(docs)


def test_multi_search_header_is_json_escaped():
    doc = QueryDocument(index='we"ird')

    assert multi_search_doc([doc]).splitlines()[0] == '{"index":"we\\"ird"}'


def test_coordinator_delegates_to_translator():
    coordinator = QueryTranslator(ESQueryTranslator())
    doc = _two_documents()[1]

    assert coordinator.serialize(doc) == ESQueryTranslator().serialize(doc)
    assert coordinator.translate(doc) == ESQueryTranslator().translate(doc)
    assert coordinator.multi_search(_two_documents()) == EXPECTED_MSEARCH


def test_coordinator_for_elasticsearch_uses_config():
    coordinator = QueryTranslator.for_elasticsearch(
        TranslatorConfig(analyze_wildcard=False)
    )
    doc = QueryDocument(
        and_=[LeafClause(field="f", value="v", type=QueryType.QUERY_STRING)]
    )

    assert '"analyze_wildcard":false' in coordinator.serialize(doc)


def test_coordinator_logs_and_reraises_unknown_type(caplog):
    coordinator = QueryTranslator(ESQueryTranslator())
    doc = QueryDocument(and_=[LeafClause(field="a", value=1, type=99)])

    with caplog.at_level(logging.ERROR, logger="es_query_builder"):
        with pytest.raises(UnknownQueryTypeError):
            coordinator.serialize(doc)

    assert "Type 99 is not supported" in caplog.text
