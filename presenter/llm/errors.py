"""
LLM Provider Error Classes

Exception hierarchy for generative model provider failures. All classes
derive from the presenter error hierarchy so the CLI can handle them with
the same top-level ``except PresenterError``.

Error Hierarchy:
    LLMError (base)
    ├── ProviderError (provider call failed)
    │   ├── RateLimitError
    │   ├── AuthenticationError
    │   ├── InvalidRequestError
    │   ├── TimeoutError
    │   └── NetworkError
    └── ProviderNotAvailableError (SDK missing or provider unusable)

ConfigurationError is re-exported from presenter.errors.
"""

from presenter.errors import PresenterError, ConfigurationError


class LLMError(PresenterError):
    """Base exception for all model provider errors."""
    pass


class ProviderError(LLMError):
    """Raised when a provider call fails.

    Example:
        >>> raise ProviderError(f"Gemini API call failed: {e}")
    """
    pass


class ProviderNotAvailableError(LLMError):
    """Raised when a provider cannot be used at all.

    Common scenarios:
    - SDK package not installed
    - Provider failed its requirements check
    """
    pass


class RateLimitError(ProviderError):
    """Raised when the provider rejects the call for rate or quota reasons."""
    pass


class AuthenticationError(ProviderError):
    """Raised when the provider rejects the API key."""
    pass


class InvalidRequestError(ProviderError):
    """Raised when the provider rejects the request parameters."""
    pass


class TimeoutError(ProviderError):
    """Raised when the provider call exceeds the configured timeout."""
    pass


class NetworkError(ProviderError):
    """Raised when the provider cannot be reached."""
    pass


def classify_provider_error(provider_name: str, error: Exception) -> ProviderError:
    """Map an SDK exception onto the provider error classes.

    SDK exception types differ per vendor, so classification is done on the
    message text, the same way for every provider.

    Args:
        provider_name: Human readable provider name used in the message
        error: The exception raised by the SDK

    Returns:
        ProviderError subclass instance (not raised)
    """
    error_msg = str(error)
    lowered = error_msg.lower()

    if "rate" in lowered or "429" in lowered or "quota" in lowered:
        return RateLimitError(f"{provider_name} rate limit exceeded: {error_msg}")
    if "auth" in lowered or "api_key" in lowered or "api key" in lowered or "401" in lowered or "403" in lowered:
        return AuthenticationError(f"{provider_name} authentication failed: {error_msg}")
    if "invalid" in lowered or "400" in lowered:
        return InvalidRequestError(f"Invalid {provider_name} request: {error_msg}")
    if "timeout" in lowered or "timed out" in lowered or "deadline" in lowered:
        return TimeoutError(f"{provider_name} request timed out: {error_msg}")
    if "network" in lowered or "connection" in lowered:
        return NetworkError(f"Network error connecting to {provider_name}: {error_msg}")
    return ProviderError(f"{provider_name} API call failed: {error_msg}")


__all__ = [
    "LLMError",
    "ConfigurationError",
    "ProviderError",
    "ProviderNotAvailableError",
    "RateLimitError",
    "AuthenticationError",
    "InvalidRequestError",
    "TimeoutError",
    "NetworkError",
    "classify_provider_error",
]
