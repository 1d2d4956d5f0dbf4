"""Discussion use cases."""

from .add_reply import AddReplyRequest, AddReplyUseCase
from .common import DiscussionDetail, DiscussionSummary, ReplyItem
from .create_discussion import CreateDiscussionRequest, CreateDiscussionUseCase
from .delete_discussion import (
    DeleteDiscussionRequest,
    DeleteDiscussionResponse,
    DeleteDiscussionUseCase,
)
from .edit_discussion import EditDiscussionRequest, EditDiscussionUseCase
from .get_discussion import GetDiscussionRequest, GetDiscussionUseCase
from .get_question_discussions import (
    CountQuestionDiscussionsRequest,
    CountQuestionDiscussionsResponse,
    CountQuestionDiscussionsUseCase,
    GetQuestionDiscussionsRequest,
    GetQuestionDiscussionsResponse,
    GetQuestionDiscussionsUseCase,
)
from .increment_view import (
    IncrementViewRequest,
    IncrementViewResponse,
    IncrementViewUseCase,
)
from .list_discussions import (
    ListDiscussionsRequest,
    ListDiscussionsResponse,
    ListDiscussionsUseCase,
)
from .react import ReactRequest, ReactUseCase

__all__ = [
    "AddReplyRequest",
    "AddReplyUseCase",
    "CountQuestionDiscussionsRequest",
    "CountQuestionDiscussionsResponse",
    "CountQuestionDiscussionsUseCase",
    "CreateDiscussionRequest",
    "CreateDiscussionUseCase",
    "DeleteDiscussionRequest",
    "DeleteDiscussionResponse",
    "DeleteDiscussionUseCase",
    "DiscussionDetail",
    "DiscussionSummary",
    "EditDiscussionRequest",
    "EditDiscussionUseCase",
    "GetDiscussionRequest",
    "GetDiscussionUseCase",
    "GetQuestionDiscussionsRequest",
    "GetQuestionDiscussionsResponse",
    "GetQuestionDiscussionsUseCase",
    "IncrementViewRequest",
    "IncrementViewResponse",
    "IncrementViewUseCase",
    "ListDiscussionsRequest",
    "ListDiscussionsResponse",
    "ListDiscussionsUseCase",
    "ReactRequest",
    "ReactUseCase",
    "ReplyItem",
]
