"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised before any state is mutated.
    """

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class EmptyContentError(ValidationError):
    """Raised when opinion content is empty or whitespace only."""

    def __init__(self) -> None:
        super().__init__("Opinion content must not be empty")


class InputTooLongError(ValidationError):
    """Raised when opinion content exceeds the configured maximum length."""

    def __init__(self, length: int, max_length: int):
        self.length = length
        self.max_length = max_length
        super().__init__(
            f"Opinion content is {length} characters, maximum is {max_length}"
        )


class ParentNotFoundError(ValidationError):
    """Raised when replying to an opinion that doesn't exist."""

    def __init__(self, parent_id: int):
        self.parent_id = parent_id
        super().__init__(f"Parent opinion not found: {parent_id}")


class MaxDepthExceededError(ValidationError):
    """Raised when a reply would nest deeper than allowed."""

    def __init__(self, parent_id: int, max_depth: int):
        self.parent_id = parent_id
        self.max_depth = max_depth
        super().__init__(
            f"Cannot reply to opinion {parent_id}: replies are limited to depth {max_depth}"
        )


class InvalidSnapshotError(ValidationError):
    """Raised when a snapshot is internally inconsistent."""

    def __init__(self, message: str):
        super().__init__(f"Invalid snapshot: {message}")


class InappropriateContentError(BusinessRuleViolationError):
    """Raised when the moderation pipeline rejects content."""

    def __init__(self) -> None:
        super().__init__("Opinion was rejected by content moderation")


class InsufficientPointsError(BusinessRuleViolationError):
    """Raised when a user can't afford an action."""

    def __init__(self, user_id: str, required: int, remaining: int):
        self.user_id = user_id
        self.required = required
        self.remaining = remaining
        super().__init__(
            f"User {user_id} has {remaining} points, {required} required"
        )


class OpinionNotFoundError(NotFoundError):
    """Raised when an opinion id doesn't exist."""

    def __init__(self, opinion_id: int):
        self.opinion_id = opinion_id
        super().__init__("Opinion", str(opinion_id))
