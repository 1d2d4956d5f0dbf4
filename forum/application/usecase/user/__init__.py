"""User use cases."""

from .common import UserSummary
from .search_users import SearchUsersRequest, SearchUsersResponse, SearchUsersUseCase

__all__ = [
    "SearchUsersRequest",
    "SearchUsersResponse",
    "SearchUsersUseCase",
    "UserSummary",
]
