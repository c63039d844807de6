"""
Presenter Error Hierarchy

Defines the exceptions raised across the webpage-to-presentation workflow.
Every failure is fatal for the current run: errors propagate to the CLI,
which maps each kind to an exit code.

Error Hierarchy:
    PresenterError (base)
    ├── ConfigurationError (missing credential or provider key)
    ├── ExtractionError (scrape payload has no usable content)
    ├── PlanningError (model output is not a JSON slide array)
    ├── ProtocolError (service response lacks an expected field)
    └── RemoteCallError (HTTP-level failure from any collaborator)
"""

from typing import Any, Optional


class PresenterError(Exception):
    """Base exception for all presenter errors."""
    pass


class ConfigurationError(PresenterError):
    """Raised when a required credential or provider key is missing.

    Raised before any network call is made, so a misconfigured run
    never leaves a partial presentation behind.

    Example:
        >>> raise ConfigurationError(
        >>>     "Firecrawl API key not configured. "
        >>>     "Set FIRECRAWL_API_KEY environment variable."
        >>> )
    """
    pass


class ExtractionError(PresenterError):
    """Raised when the scrape provider returned no usable content format.

    Neither markdown nor HTML was present in the response, or the
    response did not have the expected envelope.
    """
    pass


class PlanningError(PresenterError):
    """Raised when the model output cannot be parsed as a slide plan.

    Attributes:
        response_text: The raw model response, kept for diagnosis
    """

    def __init__(self, message: str, response_text: Optional[str] = None):
        super().__init__(message)
        self.response_text = response_text


class ProtocolError(PresenterError):
    """Raised when a presentation service response lacks an expected field.

    Common scenarios:
    - No initial slide id after presentation creation
    - No variant id after variant submission
    - No access token after authentication
    """
    pass


class RemoteCallError(PresenterError):
    """Raised when an HTTP call to a collaborator fails.

    The message is a generic "Failed to <operation>"; the status code and
    body of the failed response are kept for diagnosis.

    Attributes:
        operation: Short description of the failed operation
        status_code: HTTP status code, when a response was received
        response_body: Response body, when a response was received
    """

    def __init__(
        self,
        operation: str,
        status_code: Optional[int] = None,
        response_body: Any = None
    ):
        super().__init__(f"Failed to {operation}")
        self.operation = operation
        self.status_code = status_code
        self.response_body = response_body
