"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConcurrentModificationError(DomainError):
    """Raised when an aggregate keeps changing underneath a write."""

    def __init__(self, resource: str, identifier: str, attempts: int):
        self.resource = resource
        self.identifier = identifier
        super().__init__(
            f"{resource} {identifier} was modified concurrently "
            f"({attempts} attempts)"
        )
