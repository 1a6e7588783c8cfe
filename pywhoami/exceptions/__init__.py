from pywhoami.exceptions.exceptions import (
    WhoamiError,
    UnavailableError,
    ExecutionError,
    InvalidDataError,
    UnknownArchError,
    ConfigurationError,
    TemplateError,
)

__all__ = [
    "WhoamiError",
    "UnavailableError",
    "ExecutionError",
    "InvalidDataError",
    "UnknownArchError",
    "ConfigurationError",
    "TemplateError",
]
