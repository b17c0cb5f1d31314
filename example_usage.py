"""
Example usage of the ES query builder.

Builds a few query documents and prints the Elasticsearch request bodies.
Set ES_QUERY_LOG_LEVEL=DEBUG to see translation logging.
"""

import json

from es_query_builder import (
    LeafClause,
    QueryDocument,
    QueryTranslator,
    QueryType,
    TranslatorConfig,
    nested,
    setup_logging,
    wrap_query_items,
)


def main():
    config = TranslatorConfig.from_env()
    setup_logging(config.log_level)
    translator = QueryTranslator.for_elasticsearch(config)

    print("=" * 60)
    print("Simple search with sorting and paging")
    print("=" * 60)
    articles = QueryDocument(
        index="articles",
        and_=[
            LeafClause(field="title", value="Search", type=QueryType.MATCH),
            LeafClause(field="content", value="Elasticsearch", type=QueryType.MATCH),
        ],
        filter=[
            LeafClause(field="status", value="published", type=QueryType.TERM),
            LeafClause(
                field="publish_date", value={"gte": "2015-01-01"}, type=QueryType.RANGE
            ),
        ],
        sort=[{"publish_date": "desc"}],
        size=20,
        track_total_hits=True,
    )
    print(json.dumps(translator.translate(articles), indent=2))

    print("\n" + "=" * 60)
    print("Nested comments and a grouped OR clause")
    print("=" * 60)
    posts = QueryDocument(
        index="posts",
        and_=[
            LeafClause(field="body", value="Rock*", type=QueryType.WILDCARD),
            wrap_query_items(
                "or",
                LeafClause(field="lang", value="en", type=QueryType.TERM),
                LeafClause(field="lang", value="fr", type=QueryType.TERM),
            ),
            nested(
                "comments",
                LeafClause(field="comments.author", value="kimchy!", type=QueryType.QUERY_STRING),
            ),
        ],
    )
    print(translator.serialize(posts))

    print("\n" + "=" * 60)
    print("Multi-search body")
    print("=" * 60)
    print(translator.multi_search([articles, posts]), end="")


if __name__ == "__main__":
    main()
