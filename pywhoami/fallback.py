"""
fallback.py

An explicit, ordered fallback chain.

Each source is a zero-argument callable evaluated lazily, in order. A source whose
value is empty is *absent*; a source that raises ``WhoamiError`` has *errored*. Either
way the chain moves on, and the first non-empty value wins. When every source is
exhausted the chain returns its default.

Example:
    >>> chain = FallbackChain("realname", default="unknown")
    >>> chain.then("realname", lambda: b"").then("username", lambda: b"alice").resolve()
    b'alice'
"""

from typing import Callable, Generic, List, Tuple, TypeVar

from pywhoami.exceptions.exceptions import WhoamiError
from pywhoami.logging.logger import get_package_logger

T = TypeVar("T")


class FallbackChain(Generic[T]):
    """
    Ordered sources with a fixed default.

    Args:
        query: Name of the query being answered, used in log messages.
        default: Value returned when no source yields a non-empty value.
    """

    def __init__(self, query: str, default: T):
        self.query = query
        self.default = default
        self._sources: List[Tuple[str, Callable[[], T]]] = []

    def then(self, name: str, source: Callable[[], T]) -> "FallbackChain[T]":
        """Append a source and return the chain for chaining."""
        self._sources.append((name, source))
        return self

    @property
    def sources(self) -> List[str]:
        return [name for name, _ in self._sources]

    def resolve(self) -> T:
        """Evaluate sources in order and return the first non-empty value."""
        logger = get_package_logger(__name__)
        for name, source in self._sources:
            try:
                value = source()
            except WhoamiError as exc:
                logger.log_debug(f"{self.query}: source '{name}' errored: {exc}")
                continue
            if value:
                return value
            logger.log_debug(f"{self.query}: source '{name}' is absent")
        logger.log_debug(f"{self.query}: using default {self.default!r}")
        return self.default

    def __repr__(self) -> str:
        return f"FallbackChain(query={self.query!r}, sources={self.sources}, default={self.default!r})"
