"""Domain exceptions raised by the service layer."""


class PromptHubError(Exception):
    """Base exception for PromptHub."""

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class NotFoundError(PromptHubError):
    """Resource not found (or not visible to the caller)."""

    def __init__(self, resource: str = "Resource", resource_id: str | None = None):
        self.resource = resource
        self.resource_id = resource_id
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(message)
