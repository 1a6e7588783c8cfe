"""
Custom exceptions for pywhoami.

Providers raise ``UnavailableError`` (or its ``ExecutionError`` specialisation) when an
operating system primitive cannot be reached, and the codec raises ``InvalidDataError``
when native bytes are not valid text. ``pywhoami.fallible`` lets all of these through;
``pywhoami.api`` catches them and walks its fallback chains instead.
"""

from datetime import datetime
from typing import Optional, Dict, Any, Union


class WhoamiError(Exception):
    """
    Base exception for pywhoami errors.

    Attributes:
        message: The error message
        step: Optional name of the query or stage where the error occurred
        timestamp: When the error occurred
        context: Additional context information
    """

    def __init__(
        self,
        message: str,
        step: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the exception.

        Args:
            message: The error message
            step: The query or stage where the error occurred
            context: Additional context information (e.g., file paths, commands)
        """
        super().__init__(message)
        self.message = message
        self.step = step
        self.context = context or {}

        self.timestamp = datetime.now()

    def __str__(self) -> str:
        """Return a formatted error message."""
        base_msg = f"[{self.step}] {self.message}" if self.step else self.message
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{base_msg} (Context: {context_str})"
        return base_msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "step": self.step,
            "timestamp": self.timestamp.isoformat(),
            "context": self.context,
        }


class UnavailableError(WhoamiError):
    """
    Raised when the underlying operating system primitive could not be reached.

    Examples:
        - No passwd record for the effective user
        - A failing syscall or Windows API call
        - A required file such as /etc/os-release is missing
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        **kwargs,
    ):
        """
        Initialize unavailable error.

        Args:
            message: The error message
            source: The file, call, or environment variable that was queried
            **kwargs: Additional context passed to parent
        """
        context = kwargs.get("context", {})
        if source:
            context["source"] = source
        kwargs["context"] = context
        super().__init__(message, **kwargs)
        self.source = source


class ExecutionError(UnavailableError):
    """
    Raised when a helper program could not be spawned or exited unsuccessfully.

    Examples:
        - `hostnamectl` is not installed
        - `sw_vers` exits with a non-zero status
    """

    def __init__(
        self,
        message: str,
        command: Optional[str] = None,
        exit_code: Optional[int] = None,
        stderr: Optional[str] = None,
        **kwargs,
    ):
        """
        Initialize execution error.

        Args:
            message: The error message
            command: The command that failed
            exit_code: Exit code from the failed command
            stderr: Standard error from the command
            **kwargs: Additional context passed to parent
        """
        context = kwargs.get("context", {})
        if exit_code is not None:
            context["exit_code"] = exit_code
        if stderr:
            context["stderr"] = stderr
        kwargs["context"] = context
        super().__init__(message, source=command, **kwargs)
        self.command = command
        self.exit_code = exit_code


class InvalidDataError(WhoamiError):
    """
    Raised when a native string returned by the operating system is not valid text
    under the platform's strict decoding rule.

    The original native value is kept on ``data`` so callers can still use it.
    """

    def __init__(
        self,
        message: str,
        data: Union[bytes, str, None] = None,
        **kwargs,
    ):
        """
        Initialize invalid data error.

        Args:
            message: The error message
            data: The native value that failed to decode
            **kwargs: Additional context passed to parent
        """
        context = kwargs.get("context", {})
        if data is not None:
            context["data"] = repr(data)
        kwargs["context"] = context
        super().__init__(message, **kwargs)
        self.data = data


class UnknownArchError(WhoamiError):
    """
    Raised when the bit width of an architecture outside the catalog is requested.
    """

    def __init__(self, message: str, arch: Optional[str] = None, **kwargs):
        context = kwargs.get("context", {})
        if arch:
            context["arch"] = arch
        kwargs["context"] = context
        super().__init__(message, **kwargs)
        self.arch = arch


class ConfigurationError(WhoamiError):
    """
    Raised when there are configuration-related errors.

    Examples:
        - A log directory that cannot be created or written
        - An unsupported output format
    """

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        invalid_key: Optional[str] = None,
        **kwargs,
    ):
        """
        Initialize configuration error.

        Args:
            message: The error message
            config_file: Path to the offending file, if any
            invalid_key: The configuration key that caused the error
            **kwargs: Additional context passed to parent
        """
        context = kwargs.get("context", {})
        if config_file:
            context["config_file"] = config_file
        if invalid_key:
            context["invalid_key"] = invalid_key
        kwargs["context"] = context
        super().__init__(message, **kwargs)


class TemplateError(WhoamiError):
    """
    Raised when the text report template fails to render.
    """

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        **kwargs,
    ):
        context = kwargs.get("context", {})
        if template_name:
            context["template_name"] = template_name
        kwargs["context"] = context
        super().__init__(message, **kwargs)
