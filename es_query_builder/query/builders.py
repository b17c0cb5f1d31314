"""
Construction helpers for query clauses.
"""

from typing import Any, Dict, List, Union

from es_query_builder.core.models import (
    BoolClause,
    Clause,
    LeafClause,
    NestedClause,
    QueryDocument,
    QueryType,
)

# Grouping keyword -> QueryDocument field name
_GROUP_FIELDS = {
    "and": "and_",
    "not": "not_",
    "or": "or_",
    "filter": "filter",
}


def _group(item_type: str, items: List[Clause], **extra: Any) -> QueryDocument:
    field_name = _GROUP_FIELDS.get(item_type.strip().lower(), "and_")
    kwargs: Dict[str, Any] = {field_name: list(items)}
    kwargs.update(extra)
    return QueryDocument(**kwargs)


def leaf(
    field: str, value: Any, type: Union[QueryType, int] = QueryType.MATCH
) -> LeafClause:
    """Shorthand for a single-field clause."""
    return LeafClause(field=field, value=value, type=type)


def wrap_query_items(item_type: str, *items: Clause) -> BoolClause:
    """
    Group clauses into an inline boolean sub-query.

    Args:
        item_type: "and", "or", "not" or "filter" (case-insensitive);
                   anything else is treated as "and"
        *items: Clauses to place in the group

    Returns:
        A BoolClause that serializes to {"bool": {...}}
    """
    return BoolClause(document=_group(item_type, list(items)))


def nested(path: str, *items: Clause, item_type: str = "and") -> NestedClause:
    """
    Build a nested-path clause from a list of clauses.

    Args:
        path: Dot-path of the nested object field (e.g. "comments")
        *items: Clauses evaluated inside the nested scope
        item_type: Grouping applied to the clauses, as in wrap_query_items

    Returns:
        A NestedClause that serializes to {"nested": {"path": ..., "query": ...}}
    """
    return NestedClause(
        path=path, document=_group(item_type, list(items), nested_path=path)
    )
