"""Domain layer errors."""

from pydantic import ValidationError as PydanticValidationError


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Field-addressable and recoverable: callers can redisplay the offending
    input together with the message.
    """

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")

    @classmethod
    def from_pydantic(cls, error: PydanticValidationError) -> "ValidationError":
        """Convert the first error reported by pydantic."""
        details = error.errors()
        if not details:
            return cls("base", str(error))

        first = details[0]
        loc = first.get("loc") or ("base",)
        field = ".".join(str(part) for part in loc)
        message = first.get("msg", "is invalid").removeprefix("Value error, ")
        return cls(field, message)


class NotAuthorizedError(DomainError):
    """Raised when an identity is not permitted to perform an action."""

    def __init__(self, action: str, resource_id: str | None = None):
        self.action = action
        self.resource_id = resource_id
        target = f" on {resource_id}" if resource_id else ""
        super().__init__(f"Not authorized to {action}{target}")


class AuthenticationRequiredError(NotAuthorizedError):
    """Raised when an anonymous identity attempts an authenticated action."""

    def __init__(self, action: str):
        super().__init__(action)
        self.args = (f"Authentication required to {action}",)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
