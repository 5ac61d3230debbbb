"""Application layer DI providers."""

from dishka import Scope, provide

from quill.application.usecase.auth import GetCurrentIdentityUseCase
from quill.application.usecase.comment import (
    CreateCommentUseCase,
    DestroyCommentUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
)
from quill.application.usecase.post import (
    CreatePostUseCase,
    DestroyPostUseCase,
    GetPostUseCase,
    ListDraftsUseCase,
    ListPostsUseCase,
    ListPublishedPostsUseCase,
    PublishPostUseCase,
    PublishScheduledPostUseCase,
    UpdatePostUseCase,
)
from quill.domain.service import (
    CommentService,
    JWTService,
    PostService,
    PublishService,
    UserService,
)
from quill.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_current_identity_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentIdentityUseCase:
        """Provide get current identity use case."""
        return GetCurrentIdentityUseCase(
            jwt_service=jwt_service, user_service=user_service
        )

    # Post use cases
    @provide
    def get_create_post_use_case(
        self, post_service: PostService, publish_service: PublishService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service, publish_service=publish_service
        )

    @provide
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide
    def get_list_published_posts_use_case(
        self, post_service: PostService
    ) -> ListPublishedPostsUseCase:
        """Provide list published posts use case."""
        return ListPublishedPostsUseCase(post_service=post_service)

    @provide
    def get_list_drafts_use_case(self, post_service: PostService) -> ListDraftsUseCase:
        """Provide list drafts use case."""
        return ListDraftsUseCase(post_service=post_service)

    @provide
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    @provide
    def get_destroy_post_use_case(
        self, post_service: PostService
    ) -> DestroyPostUseCase:
        """Provide destroy post use case."""
        return DestroyPostUseCase(post_service=post_service)

    @provide
    def get_publish_post_use_case(
        self, post_service: PostService, publish_service: PublishService
    ) -> PublishPostUseCase:
        """Provide publish post use case."""
        return PublishPostUseCase(
            post_service=post_service, publish_service=publish_service
        )

    @provide
    def get_publish_scheduled_post_use_case(
        self, publish_service: PublishService
    ) -> PublishScheduledPostUseCase:
        """Provide publish scheduled post use case."""
        return PublishScheduledPostUseCase(publish_service=publish_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService, post_service: PostService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, post_service=post_service
        )

    @provide
    def get_get_comments_use_case(
        self, comment_service: CommentService, post_service: PostService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, post_service=post_service
        )

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide
    def get_destroy_comment_use_case(
        self, comment_service: CommentService
    ) -> DestroyCommentUseCase:
        """Provide destroy comment use case."""
        return DestroyCommentUseCase(comment_service=comment_service)
