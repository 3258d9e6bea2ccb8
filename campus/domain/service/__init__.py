"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .post_service import PostService
from .vote_ledger import VoteLedger

__all__ = [
    "JWTService",
    "PostService",
    "Service",
    "VoteLedger",
]
