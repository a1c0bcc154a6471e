"""Custom exceptions used throughout the tagcloud package."""

from typing import Any, Optional


class TagCloudError(Exception):
    """Base exception for all tag cloud errors.

    All tagcloud-specific exceptions inherit from this class, so callers can
    catch every layout, configuration and rendering failure with a single
    except clause.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """

        super().__init__(message)
        self.details = details or {}


class InvalidArgumentError(TagCloudError, ValueError):
    """Raised when a caller passes a value outside its allowed range.

    Examples:
    - Rectangle width or height <= 0
    - Spiral angle or radius step <= 0

    Always raised before any state is mutated.
    """

    def __init__(
        self,
        argument: str,
        value: Any,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        if message is None:
            message = f"Invalid value for '{argument}': {value!r}"
        details = details or {}
        details.setdefault("argument", argument)
        details.setdefault("value", value)
        super().__init__(message=message, details=details)
        self.argument = argument
        self.value = value


class ConfigurationError(TagCloudError):
    """Raised when there's an error in configuration.

    This includes:
    - Unparseable YAML
    - Missing required configuration
    - Configuration validation failures
    """

    def __init__(
        self,
        config_key: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """Initialize configuration error.

        Args:
            config_key: The configuration key that caused the error
            message: Description of what's wrong. If omitted, config_key is
                treated as the message and the key defaults to "configuration".
            details: Additional context
        """
        if message is None:
            message = config_key or "Invalid configuration"
            config_key = "configuration"
        if config_key is None:
            config_key = "configuration"

        full_message = f"Configuration error for '{config_key}': {message}"
        super().__init__(message=full_message, details=details)
        self.config_key = config_key


class LayoutError(TagCloudError):
    """Raised when the layouter cannot place a rectangle.

    This signals a broken internal invariant or a pathological configuration
    (e.g. a tiny spiral step with a tight candidate cap), not bad caller input.
    """

    def __init__(
        self,
        message: str,
        candidates: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        if candidates is not None:
            details = details or {}
            details["candidates"] = candidates

        super().__init__(message=message, details=details)
        self.candidates = candidates


class RenderError(TagCloudError):
    """Raised when a rendered cloud image cannot be written."""

    def __init__(
        self,
        path: str,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        if message is None:
            message = f"Failed to save image to '{path}'"
        details = details or {}
        details["path"] = path
        super().__init__(message=message, details=details)
        self.path = path
