"""Abstract base class for pattern matchers.

Lets the association pipeline run against any glob engine, or a stub in tests.
"""

from abc import ABC, abstractmethod


class PatternMatcher(ABC):
    """Abstract interface for path pattern matching."""

    @abstractmethod
    def matches(self, path: str, pattern: str) -> bool:
        """Test a path against a pattern.

        Args:
            path: Relative POSIX path from the file collection
            pattern: Pattern in the matcher's syntax

        Returns:
            True if the path matches the pattern

        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the matcher identifier."""
        pass
