"""
Shared data models for the query builder system.

A query is described by a ``QueryDocument`` holding lists of clauses. Each
clause is exactly one of ``LeafClause``, ``NestedClause`` or ``BoolClause``.
"""

import os
from enum import IntEnum
from typing import Any, Dict, List, Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from es_query_builder.core.errors import UnknownQueryTypeError


class QueryType(IntEnum):
    """Supported query DSL clause types, indexed by ordinal."""

    MATCH = 0
    TERM = 1
    TERMS = 2
    WILDCARD = 3
    RANGE = 4
    EXISTS = 5
    QUERY_STRING = 6
    NESTED = 7


# Wire names, in ordinal order
_QUERY_TYPE_NAMES = (
    "match",
    "term",
    "terms",
    "wildcard",
    "range",
    "exists",
    "query_string",
    "nested",
)


def resolve_query_type(tag: Union[QueryType, int]) -> str:
    """
    Convert a type tag to its query DSL name.

    Args:
        tag: A QueryType member or a raw ordinal

    Returns:
        The clause name used in the JSON body (e.g. "query_string")

    Raises:
        UnknownQueryTypeError: If the ordinal is outside the enumeration
    """
    if isinstance(tag, bool) or not isinstance(tag, int):
        raise UnknownQueryTypeError(tag)
    if tag < 0 or tag >= len(_QUERY_TYPE_NAMES):
        raise UnknownQueryTypeError(int(tag))
    return _QUERY_TYPE_NAMES[tag]


class _Clause(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class LeafClause(_Clause):
    """A single-field condition such as match, term or range."""

    field: str
    value: Any = None
    # Raw ints are kept as-is so a bad tag surfaces at serialization time
    type: Union[QueryType, int] = QueryType.MATCH

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type_name(cls, v: Any) -> Any:
        """Accept tag names like "term" as well as members and ordinals."""
        if isinstance(v, str):
            key = v.strip().upper()
            if key in QueryType.__members__:
                return QueryType[key]
            raise ValueError(f"Unknown query type name: {v!r}")
        return v

    @field_validator("type")
    @classmethod
    def _reject_nested(cls, v: Union[QueryType, int]) -> Union[QueryType, int]:
        if v == QueryType.NESTED:
            raise ValueError(
                "Leaf clauses cannot use the nested type; "
                "use NestedClause or BoolClause instead"
            )
        return v


class NestedClause(_Clause):
    """A query against a nested object field, addressed by a dot-path."""

    path: str
    document: "QueryDocument"


class BoolClause(_Clause):
    """A parenthesised boolean group emitted inline as a clause."""

    document: "QueryDocument"


Clause = Union[LeafClause, NestedClause, BoolClause]


class QueryDocument(BaseModel):
    """
    One search request, or one nested scope of a request.

    Clause lists map onto the bool query as and -> must, not -> must_not,
    or -> should and filter -> filter. ``nested_path`` is only read when the
    document is reached through another document's ``nested_document``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    index: str = ""
    from_: int = Field(default=0, ge=0, alias="from")
    size: int = Field(default=0, ge=0)
    sort: List[Dict[str, str]] = Field(default_factory=list)
    search_after: List[Any] = Field(default_factory=list)
    and_: List[Clause] = Field(default_factory=list, alias="and")
    not_: List[Clause] = Field(default_factory=list, alias="not")
    or_: List[Clause] = Field(default_factory=list, alias="or")
    filter: List[Clause] = Field(default_factory=list)
    nested_path: str = ""
    nested_document: Optional["QueryDocument"] = None
    match_all: Optional[Dict[str, Any]] = None
    track_total_hits: bool = False


NestedClause.model_rebuild()
BoolClause.model_rebuild()
QueryDocument.model_rebuild()


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


class TranslatorConfig(BaseModel):
    """Configuration for the query translator."""

    model_config = ConfigDict(frozen=True)

    analyze_wildcard: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_env(
        cls,
        analyze_wildcard: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> "TranslatorConfig":
        """
        Build a config, falling back to environment variables.

        Reads ES_QUERY_ANALYZE_WILDCARD and ES_QUERY_LOG_LEVEL (a .env file
        is loaded first). Explicit arguments take precedence.
        """
        load_dotenv()

        if analyze_wildcard is None:
            raw = os.getenv("ES_QUERY_ANALYZE_WILDCARD")
            flag = (raw or "").strip().lower()
            if not flag:
                analyze_wildcard = True
            elif flag in _TRUE_VALUES:
                analyze_wildcard = True
            elif flag in _FALSE_VALUES:
                analyze_wildcard = False
            else:
                raise ValueError(
                    f"ES_QUERY_ANALYZE_WILDCARD must be a boolean flag, got {raw!r}"
                )
        log_level = log_level or os.getenv("ES_QUERY_LOG_LEVEL") or "WARNING"

        return cls(analyze_wildcard=analyze_wildcard, log_level=log_level.upper())
