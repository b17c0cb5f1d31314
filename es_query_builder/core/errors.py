"""
Exceptions raised by the query builder.
"""

from typing import Any


class QueryBuilderError(Exception):
    """Base class for all query builder errors."""


class UnknownQueryTypeError(QueryBuilderError, ValueError):
    """
    Raised when a clause's type tag cannot be resolved to a query name.

    Attributes:
        type_value: The offending tag, usually an out-of-range ordinal
    """

    def __init__(self, type_value: Any):
        self.type_value = type_value
        super().__init__(f"Type {type_value} is not supported")
