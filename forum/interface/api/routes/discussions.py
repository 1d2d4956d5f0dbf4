"""Discussion routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel, Field

from forum.application.usecase.discussion import (
    AddReplyRequest,
    AddReplyUseCase,
    CountQuestionDiscussionsRequest,
    CountQuestionDiscussionsResponse,
    CountQuestionDiscussionsUseCase,
    CreateDiscussionRequest,
    CreateDiscussionUseCase,
    DeleteDiscussionRequest,
    DeleteDiscussionResponse,
    DeleteDiscussionUseCase,
    DiscussionDetail,
    EditDiscussionRequest,
    EditDiscussionUseCase,
    GetDiscussionRequest,
    GetDiscussionUseCase,
    GetQuestionDiscussionsRequest,
    GetQuestionDiscussionsUseCase,
    IncrementViewRequest,
    IncrementViewResponse,
    IncrementViewUseCase,
    ListDiscussionsRequest,
    ListDiscussionsResponse,
    ListDiscussionsUseCase,
    ReactRequest,
    ReactUseCase,
)
from forum.application.usecase.user import (
    SearchUsersRequest,
    SearchUsersResponse,
    SearchUsersUseCase,
)
from forum.domain.error import (
    ConcurrentModificationError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
)
from forum.domain.repository import DiscussionSortOrder
from forum.domain.service import JWTService
from forum.domain.value import Approach, Category, ReactionKind

router = APIRouter(prefix="/discussions", tags=["discussions"], route_class=DishkaRoute)


def _require_user_id(jwt_service: JWTService, auth_token: str | None, action: str) -> str:
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id


def _to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error onto the HTTP status it stands for."""
    if isinstance(error, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, NotAuthorizedError):
        code = status.HTTP_403_FORBIDDEN
    elif isinstance(error, ConcurrentModificationError):
        code = status.HTTP_409_CONFLICT
    else:
        code = status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=code, detail=str(error))


# ============================================================================
# Reads
# ============================================================================


def _parse_sort(value: str | None) -> DiscussionSortOrder:
    """Read the `filter` parameter; blank or unknown values mean trending."""
    try:
        return DiscussionSortOrder((value or "").strip().lower())
    except ValueError:
        return DiscussionSortOrder.TRENDING


@router.get("", response_model=ListDiscussionsResponse)
async def list_discussions(
    list_discussions_use_case: FromDishka[ListDiscussionsUseCase],
    sort: str = Query(default=DiscussionSortOrder.TRENDING.value, alias="filter"),
    category: str | None = None,
    search: str | None = None,
) -> ListDiscussionsResponse:
    """List general-forum discussions.

    Args:
        list_discussions_use_case: List discussions use case from DI
        sort: Sort order, passed as `filter` (trending, newest, oldest, most-liked);
            anything else falls back to trending
        category: Only this category (optional; blank means all)
        search: Case-insensitive text in title, content or category (optional)

    Returns:
        At most 50 discussions

    Raises:
        HTTPException: 400 for an unknown category
    """
    try:
        request = ListDiscussionsRequest(
            sort=_parse_sort(sort),
            category=(category or "").strip() or None,
            search=search,
        )
    except ValueError as e:
        logfire.warn("List discussions validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    try:
        return await list_discussions_use_case.execute(request)
    except Exception as e:
        logfire.error("Unexpected error listing discussions", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list discussions",
        )


async def _question_discussions(
    use_case: GetQuestionDiscussionsUseCase, question_id: int, solutions: bool
) -> list[DiscussionDetail]:
    try:
        result = await use_case.execute(
            GetQuestionDiscussionsRequest(question_id=question_id, solutions=solutions)
        )
    except Exception as e:
        logfire.error(
            "Unexpected error fetching question discussions",
            question_id=question_id,
            solutions=solutions,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch question discussions",
        )
    return result.discussions


@router.get("/question/{question_id}", response_model=list[DiscussionDetail])
async def get_question_discussions(
    question_id: int,
    use_case: FromDishka[GetQuestionDiscussionsUseCase],
) -> list[DiscussionDetail]:
    """Get a question's discussions (Solutions excluded), newest first."""
    return await _question_discussions(use_case, question_id, solutions=False)


@router.get("/question/{question_id}/solutions", response_model=list[DiscussionDetail])
async def get_question_solutions(
    question_id: int,
    use_case: FromDishka[GetQuestionDiscussionsUseCase],
) -> list[DiscussionDetail]:
    """Get a question's Solutions, newest first."""
    return await _question_discussions(use_case, question_id, solutions=True)


@router.get(
    "/question/{question_id}/count", response_model=CountQuestionDiscussionsResponse
)
async def count_question_discussions(
    question_id: int,
    use_case: FromDishka[CountQuestionDiscussionsUseCase],
) -> CountQuestionDiscussionsResponse:
    """Count a question's discussions (Solutions excluded)."""
    try:
        return await use_case.execute(
            CountQuestionDiscussionsRequest(question_id=question_id)
        )
    except Exception as e:
        logfire.error(
            "Unexpected error counting question discussions",
            question_id=question_id,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to count discussions",
        )


@router.get("/users/search", response_model=SearchUsersResponse)
async def search_users(
    search_users_use_case: FromDishka[SearchUsersUseCase],
    query: str = "",
) -> SearchUsersResponse:
    """Search users by username for @mention autocomplete.

    Args:
        search_users_use_case: Search users use case from DI
        query: Username substring

    Returns:
        At most 5 users
    """
    try:
        return await search_users_use_case.execute(SearchUsersRequest(query=query))
    except Exception as e:
        logfire.error("Unexpected error searching users", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to search users",
        )


@router.get("/{discussion_id}", response_model=DiscussionDetail)
async def get_discussion(
    discussion_id: UUID,
    get_discussion_use_case: FromDishka[GetDiscussionUseCase],
) -> DiscussionDetail:
    """Get a discussion with its whole reply tree.

    Raises:
        HTTPException: 404 if the discussion does not exist
    """
    try:
        return await get_discussion_use_case.execute(
            GetDiscussionRequest(discussion_id=str(discussion_id))
        )
    except NotFoundError as e:
        logfire.warn("Discussion not found", discussion_id=str(discussion_id))
        raise _to_http_exception(e)
    except Exception as e:
        logfire.error(
            "Unexpected error fetching discussion",
            discussion_id=str(discussion_id),
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch discussion",
        )


# ============================================================================
# Writes
# ============================================================================


class CreateDiscussionAPIRequest(BaseModel):
    """API request for creating a discussion."""

    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1, max_length=10000)
    category: Category = Category.GENERAL
    tags: list[str] = Field(min_length=1, max_length=5)
    approach: Approach | None = None
    question_id: int | None = None


@router.post("", response_model=DiscussionDetail, status_code=status.HTTP_201_CREATED)
async def create_discussion(
    request: CreateDiscussionAPIRequest,
    create_discussion_use_case: FromDishka[CreateDiscussionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DiscussionDetail:
    """Create a discussion.

    Requires authentication.

    Args:
        request: Discussion creation data
        create_discussion_use_case: Create discussion use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created discussion

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    user_id = _require_user_id(jwt_service, auth_token, "create discussions")

    try:
        return await create_discussion_use_case.execute(
            CreateDiscussionRequest(
                author_id=user_id,
                title=request.title,
                content=request.content,
                category=request.category,
                tags=request.tags,
                approach=request.approach,
                question_id=request.question_id,
            )
        )
    except DomainError as e:
        logfire.warn("Discussion creation domain error", error=str(e))
        raise _to_http_exception(e)
    except ValueError as e:
        logfire.warn("Discussion creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error creating discussion", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create discussion",
        )


class AddReplyAPIRequest(BaseModel):
    """API request for adding a reply."""

    content: str = Field(min_length=1, max_length=10000)
    parent_path: list[UUID] = Field(default_factory=list)


@router.post("/{discussion_id}/reply", response_model=DiscussionDetail)
async def add_reply(
    discussion_id: UUID,
    request: AddReplyAPIRequest,
    add_reply_use_case: FromDishka[AddReplyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DiscussionDetail:
    """Reply to a discussion or, with ``parent_path``, to a nested reply.

    Requires authentication.

    Raises:
        HTTPException: If not authenticated or the discussion/parent is missing
    """
    user_id = _require_user_id(jwt_service, auth_token, "reply")

    try:
        return await add_reply_use_case.execute(
            AddReplyRequest(
                discussion_id=str(discussion_id),
                author_id=user_id,
                content=request.content,
                parent_path=[str(rid) for rid in request.parent_path],
            )
        )
    except DomainError as e:
        logfire.warn(
            "Add reply failed", discussion_id=str(discussion_id), error=str(e)
        )
        raise _to_http_exception(e)
    except ValueError as e:
        logfire.warn("Add reply validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error adding reply", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to add reply",
        )


async def _react(
    discussion_id: UUID,
    path: list[UUID],
    kind: ReactionKind,
    react_use_case: ReactUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
) -> DiscussionDetail:
    user_id = _require_user_id(jwt_service, auth_token, kind.value)

    try:
        return await react_use_case.execute(
            ReactRequest(
                discussion_id=str(discussion_id),
                user_id=user_id,
                kind=kind,
                path=[str(rid) for rid in path],
            )
        )
    except DomainError as e:
        logfire.warn(
            "Reaction failed",
            discussion_id=str(discussion_id),
            kind=kind.value,
            error=str(e),
        )
        raise _to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error toggling reaction", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to {kind.value}",
        )


@router.post("/{discussion_id}/like", response_model=DiscussionDetail)
async def like(
    discussion_id: UUID,
    react_use_case: FromDishka[ReactUseCase],
    jwt_service: FromDishka[JWTService],
    path: list[UUID] = Query(default=[]),
    auth_token: str | None = Cookie(default=None),
) -> DiscussionDetail:
    """Toggle a like on the discussion or, with ``path``, on a reply.

    Requires authentication. Liking again removes the like; liking a
    disliked node replaces the dislike.
    """
    return await _react(
        discussion_id, path, ReactionKind.LIKE, react_use_case, jwt_service, auth_token
    )


@router.post("/{discussion_id}/dislike", response_model=DiscussionDetail)
async def dislike(
    discussion_id: UUID,
    react_use_case: FromDishka[ReactUseCase],
    jwt_service: FromDishka[JWTService],
    path: list[UUID] = Query(default=[]),
    auth_token: str | None = Cookie(default=None),
) -> DiscussionDetail:
    """Toggle a dislike on the discussion or, with ``path``, on a reply."""
    return await _react(
        discussion_id,
        path,
        ReactionKind.DISLIKE,
        react_use_case,
        jwt_service,
        auth_token,
    )


class EditDiscussionAPIRequest(BaseModel):
    """API request for editing a discussion."""

    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1, max_length=10000)
    approach: Approach | None = None


@router.patch("/{discussion_id}", response_model=DiscussionDetail)
async def edit_discussion(
    discussion_id: UUID,
    request: EditDiscussionAPIRequest,
    edit_discussion_use_case: FromDishka[EditDiscussionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DiscussionDetail:
    """Edit a discussion's title, content and approach.

    Only the author can edit.

    Raises:
        HTTPException: If not authenticated, not authorized, or validation fails
    """
    user_id = _require_user_id(jwt_service, auth_token, "edit discussions")

    try:
        return await edit_discussion_use_case.execute(
            EditDiscussionRequest(
                discussion_id=str(discussion_id),
                user_id=user_id,
                title=request.title,
                content=request.content,
                approach=request.approach,
            )
        )
    except DomainError as e:
        logfire.warn(
            "Discussion edit failed", discussion_id=str(discussion_id), error=str(e)
        )
        raise _to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error editing discussion", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to edit discussion",
        )


@router.delete("/{discussion_id}", response_model=DeleteDiscussionResponse)
async def delete_discussion(
    discussion_id: UUID,
    delete_discussion_use_case: FromDishka[DeleteDiscussionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteDiscussionResponse:
    """Delete a discussion and all of its replies.

    Only the author can delete.
    """
    user_id = _require_user_id(jwt_service, auth_token, "delete discussions")

    try:
        return await delete_discussion_use_case.execute(
            DeleteDiscussionRequest(discussion_id=str(discussion_id), user_id=user_id)
        )
    except DomainError as e:
        logfire.warn(
            "Discussion delete failed", discussion_id=str(discussion_id), error=str(e)
        )
        raise _to_http_exception(e)
    except Exception as e:
        logfire.error("Unexpected error deleting discussion", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete discussion",
        )


@router.post("/view/{discussion_id}", response_model=IncrementViewResponse)
async def increment_view(
    discussion_id: UUID,
    increment_view_use_case: FromDishka[IncrementViewUseCase],
) -> IncrementViewResponse:
    """Count a view of a discussion. No authentication needed."""
    try:
        return await increment_view_use_case.execute(
            IncrementViewRequest(discussion_id=str(discussion_id))
        )
    except NotFoundError as e:
        logfire.warn("View on missing discussion", discussion_id=str(discussion_id))
        raise _to_http_exception(e)
    except Exception as e:
        logfire.error(
            "Unexpected error counting view",
            discussion_id=str(discussion_id),
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to count view",
        )
