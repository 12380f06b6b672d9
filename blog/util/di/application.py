"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RefreshTokenUseCase,
    RegisterUseCase,
    RevokeTokenUseCase,
)
from blog.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentTreeUseCase,
    GetCommentUseCase,
    GetRepliesUseCase,
    UpdateCommentUseCase,
)
from blog.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from blog.domain.service import (
    AuthService,
    CommentService,
    CommentTreeService,
    PostService,
    TokenService,
    UserService,
)
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_register_use_case(self, auth_service: AuthService) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(auth_service=auth_service)

    @provide
    def get_login_use_case(self, auth_service: AuthService) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service)

    @provide
    def get_refresh_token_use_case(
        self, auth_service: AuthService
    ) -> RefreshTokenUseCase:
        """Provide refresh token use case."""
        return RefreshTokenUseCase(auth_service=auth_service)

    @provide
    def get_revoke_token_use_case(self, auth_service: AuthService) -> RevokeTokenUseCase:
        """Provide revoke token use case."""
        return RevokeTokenUseCase(auth_service=auth_service)

    @provide
    def get_current_user_use_case(
        self, token_service: TokenService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            token_service=token_service, user_service=user_service
        )

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, token_service: TokenService, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            token_service=token_service, comment_service=comment_service
        )

    @provide
    def get_comment_tree_use_case(
        self, comment_tree_service: CommentTreeService
    ) -> GetCommentTreeUseCase:
        """Provide get comment tree use case."""
        return GetCommentTreeUseCase(comment_tree_service=comment_tree_service)

    @provide
    def get_update_comment_use_case(
        self, token_service: TokenService, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            token_service=token_service, comment_service=comment_service
        )

    @provide
    def get_delete_comment_use_case(
        self, token_service: TokenService, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            token_service=token_service, comment_service=comment_service
        )

    @provide
    def get_comment_use_case(
        self, comment_service: CommentService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(comment_service=comment_service)

    @provide
    def get_replies_use_case(
        self, comment_service: CommentService
    ) -> GetRepliesUseCase:
        """Provide get replies use case."""
        return GetRepliesUseCase(comment_service=comment_service)

    # Post use cases
    @provide
    def get_create_post_use_case(
        self, token_service: TokenService, post_service: PostService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(token_service=token_service, post_service=post_service)

    @provide
    def get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide
    def get_update_post_use_case(
        self, token_service: TokenService, post_service: PostService
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(token_service=token_service, post_service=post_service)

    @provide
    def get_delete_post_use_case(
        self, token_service: TokenService, post_service: PostService
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(token_service=token_service, post_service=post_service)
