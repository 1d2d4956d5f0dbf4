"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.discussion import (
    AddReplyUseCase,
    CountQuestionDiscussionsUseCase,
    CreateDiscussionUseCase,
    DeleteDiscussionUseCase,
    EditDiscussionUseCase,
    GetDiscussionUseCase,
    GetQuestionDiscussionsUseCase,
    IncrementViewUseCase,
    ListDiscussionsUseCase,
    ReactUseCase,
)
from forum.application.usecase.user import SearchUsersUseCase
from forum.config import DiscussionSettings
from forum.domain.service import DiscussionService, UserService
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Read use cases
    @provide
    def get_list_discussions_use_case(
        self, discussion_service: DiscussionService, user_service: UserService
    ) -> ListDiscussionsUseCase:
        """Provide list discussions use case."""
        return ListDiscussionsUseCase(
            discussion_service=discussion_service, user_service=user_service
        )

    @provide
    def get_get_discussion_use_case(
        self, discussion_service: DiscussionService, user_service: UserService
    ) -> GetDiscussionUseCase:
        """Provide get discussion use case."""
        return GetDiscussionUseCase(
            discussion_service=discussion_service, user_service=user_service
        )

    @provide
    def get_question_discussions_use_case(
        self, discussion_service: DiscussionService, user_service: UserService
    ) -> GetQuestionDiscussionsUseCase:
        """Provide question discussions use case."""
        return GetQuestionDiscussionsUseCase(
            discussion_service=discussion_service, user_service=user_service
        )

    @provide
    def get_count_question_discussions_use_case(
        self, discussion_service: DiscussionService
    ) -> CountQuestionDiscussionsUseCase:
        """Provide count question discussions use case."""
        return CountQuestionDiscussionsUseCase(discussion_service=discussion_service)

    @provide
    def get_search_users_use_case(
        self, user_service: UserService, settings: DiscussionSettings
    ) -> SearchUsersUseCase:
        """Provide search users use case."""
        return SearchUsersUseCase(user_service=user_service, settings=settings)

    # Write use cases
    @provide
    def get_create_discussion_use_case(
        self, discussion_service: DiscussionService, user_service: UserService
    ) -> CreateDiscussionUseCase:
        """Provide create discussion use case."""
        return CreateDiscussionUseCase(
            discussion_service=discussion_service, user_service=user_service
        )

    @provide
    def get_add_reply_use_case(
        self, discussion_service: DiscussionService, user_service: UserService
    ) -> AddReplyUseCase:
        """Provide add reply use case."""
        return AddReplyUseCase(
            discussion_service=discussion_service, user_service=user_service
        )

    @provide
    def get_react_use_case(
        self, discussion_service: DiscussionService, user_service: UserService
    ) -> ReactUseCase:
        """Provide reaction use case."""
        return ReactUseCase(
            discussion_service=discussion_service, user_service=user_service
        )

    @provide
    def get_edit_discussion_use_case(
        self, discussion_service: DiscussionService, user_service: UserService
    ) -> EditDiscussionUseCase:
        """Provide edit discussion use case."""
        return EditDiscussionUseCase(
            discussion_service=discussion_service, user_service=user_service
        )

    @provide
    def get_delete_discussion_use_case(
        self, discussion_service: DiscussionService
    ) -> DeleteDiscussionUseCase:
        """Provide delete discussion use case."""
        return DeleteDiscussionUseCase(discussion_service=discussion_service)

    @provide
    def get_increment_view_use_case(
        self, discussion_service: DiscussionService
    ) -> IncrementViewUseCase:
        """Provide increment view use case."""
        return IncrementViewUseCase(discussion_service=discussion_service)
