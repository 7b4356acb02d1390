"""Query use cases."""

from .create_query import CreateQueryRequest, CreateQueryUseCase, QueryInfo
from .list_queries import ListQueriesUseCase, QueryListItem
from .respond_to_query import RespondToQueryRequest, RespondToQueryUseCase

__all__ = [
    "CreateQueryRequest",
    "CreateQueryUseCase",
    "ListQueriesUseCase",
    "QueryInfo",
    "QueryListItem",
    "RespondToQueryRequest",
    "RespondToQueryUseCase",
]
