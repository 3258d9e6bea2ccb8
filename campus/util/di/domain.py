"""Domain layer DI providers."""

from dishka import Scope, provide

from campus.config import AuthSettings
from campus.domain.repository import PostRepository, UnitOfWork, VoteRepository
from campus.domain.service import JWTService, PostService, VoteLedger
from campus.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances sharing one session.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_vote_ledger(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        unit_of_work: UnitOfWork,
    ) -> VoteLedger:
        """Provide vote ledger domain service."""
        return VoteLedger(
            vote_repository=vote_repository,
            post_service=post_service,
            unit_of_work=unit_of_work,
        )
