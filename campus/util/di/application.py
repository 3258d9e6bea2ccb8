"""Application layer DI providers."""

from dishka import Scope, provide

from campus.application.usecase.vote import (
    CastVoteUseCase,
    GetUserVoteUseCase,
    GetVoteStatesUseCase,
    GetVoteStateUseCase,
)
from campus.domain.service import VoteLedger
from campus.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider."""

    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_ledger: VoteLedger) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_ledger=vote_ledger)

    @provide(scope=Scope.REQUEST)
    def get_vote_state_use_case(self, vote_ledger: VoteLedger) -> GetVoteStateUseCase:
        """Provide get vote state use case."""
        return GetVoteStateUseCase(vote_ledger=vote_ledger)

    @provide(scope=Scope.REQUEST)
    def get_user_vote_use_case(self, vote_ledger: VoteLedger) -> GetUserVoteUseCase:
        """Provide get user vote use case."""
        return GetUserVoteUseCase(vote_ledger=vote_ledger)

    @provide(scope=Scope.REQUEST)
    def get_vote_states_use_case(
        self, vote_ledger: VoteLedger
    ) -> GetVoteStatesUseCase:
        """Provide batch vote state use case."""
        return GetVoteStatesUseCase(vote_ledger=vote_ledger)
