"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidArgumentError(DomainError):
    """Raised when a required argument is missing or malformed."""

    pass


class ConflictError(DomainError):
    """Raised when a uniqueness rule would be violated."""

    pass


class UnauthorizedError(DomainError):
    """Raised when credentials or tokens cannot be accepted."""

    pass


class InactiveAccountError(DomainError):
    """Raised when a correctly authenticated account is deactivated."""

    def __init__(self, message: str = "User account is inactive."):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to edit content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to edit {resource} {resource_id}"
        )


class DepthExceededError(DomainError):
    """Raised when a reply would nest deeper than the allowed maximum."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(
            f"Cannot reply to comments deeper than {max_depth} levels."
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str, message: str | None = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(message or f"{resource} not found: {identifier}")
