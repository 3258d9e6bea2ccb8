"""Domain layer errors.

Four kinds reach callers: unauthenticated, not found, invalid argument and
storage failure. Each carries a stable ``code`` so the interface layer can
tell them apart without string matching.
"""


class DomainError(Exception):
    """Base domain error."""

    code = "DOMAIN_ERROR"


class UnauthenticatedError(DomainError):
    """Raised when an operation needs a caller identity and none is available."""

    code = "UNAUTHENTICATED"

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    code = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidArgumentError(DomainError):
    """Raised for malformed identifiers or values outside an allowed set."""

    code = "INVALID_ARGUMENT"


class StorageFailureError(DomainError):
    """Raised when the persistence layer rejects a read or write.

    The original exception is chained as ``__cause__``.
    """

    code = "STORAGE_FAILURE"


class VoteConflictError(StorageFailureError):
    """Raised when a concurrent write on the same (post, voter) won the race."""

    code = "VOTE_CONFLICT"

    def __init__(self, post_id: str, user_id: str):
        self.post_id = post_id
        self.user_id = user_id
        super().__init__(
            f"Concurrent vote by user {user_id} on post {post_id}, please retry"
        )
