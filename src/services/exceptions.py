"""Shared exceptions for service layer operations."""


class NotFoundError(Exception):
    """Raised when an operation references a record id that does not exist."""

    def __init__(self, entity_name: str, entity_id: str) -> None:
        self.entity_name = entity_name
        self.entity_id = entity_id
        super().__init__(f"{entity_name} not found")


class ConfigurationError(Exception):
    """
    Raised when a required external-service setting is missing.

    Surfaced to clients as 503: the server is healthy but the feature is unavailable.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


class UpstreamError(Exception):
    """
    Raised when an external service call fails or returns unusable output.

    `detail` carries the provider's own error message, when there is one.
    """

    def __init__(self, message: str, detail: str | None = None) -> None:
        self.message = message
        self.detail = detail
        super().__init__(message if detail is None else f"{message}: {detail}")
